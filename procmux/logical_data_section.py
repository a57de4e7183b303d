"""The data section of a process: a fixed set of addressed variable slots."""

from __future__ import annotations

import sys
from typing import Iterator, Optional

_UINT16_MAX = 0xFFFF


class LogicalDataSection:
    """Fixed number of two-byte variable slots, addressed by five-digit hex.

    Slot ``i`` lives at address ``i * 2``. A slot is either free or holds a
    variable name and its 16-bit value.
    """

    def __init__(self, number_of_variables: int) -> None:
        if number_of_variables < 0:
            raise ValueError("number_of_variables must not be negative")
        self.maximum_variables = number_of_variables
        self._slots: dict[str, Optional[list]] = {
            f"{index * 2:05X}": None for index in range(number_of_variables)
        }

    def _find(self, identifier: str) -> Optional[tuple[str, list]]:
        for address, slot in self._slots.items():
            if slot is not None and slot[0] == identifier:
                return address, slot
        return None

    def _lines(self) -> Iterator[str]:
        for address, slot in self._slots.items():
            if slot is None:
                yield f"{address} | free\n"
            else:
                yield f"{address} | {slot[0]} -> {slot[1]}\n"

    def get_data(self, identifier: str) -> Optional[int]:
        """Value of the named variable, or None if it is not declared."""
        found = self._find(identifier)
        return None if found is None else found[1][1]

    def get_variable_address(self, identifier: str) -> Optional[str]:
        """Address of the named variable, or None if it is not declared."""
        found = self._find(identifier)
        return None if found is None else found[0]

    def insert_variable(self, identifier: str) -> bool:
        """Place a new variable, valued 0, in the first free slot.

        Returns False if every slot is taken.
        """
        for address, slot in self._slots.items():
            if slot is None:
                self._slots[address] = [identifier, 0]
                return True
        return False

    def is_full(self) -> bool:
        """Whether every slot holds a variable."""
        return all(slot is not None for slot in self._slots.values())

    def format(self) -> str:
        """Text listing of every slot, one line each, in address order."""
        return "".join(self._lines())

    def print(self) -> None:
        """Write the slot listing to standard output."""
        out = sys.stdout
        for line in self._lines():
            out.write(line)
        out.flush()

    def set_value(self, identifier: str, value: int) -> bool:
        """Assign a value to the named variable.

        Returns False if no such variable is declared.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("value must be an integer")
        if not 0 <= value <= _UINT16_MAX:
            raise ValueError(f"value must be between 0 and {_UINT16_MAX}, got {value}")
        found = self._find(identifier)
        if found is None:
            return False
        found[1][1] = value
        return True