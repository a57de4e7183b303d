"""Instruction objects that make up the text section of a process."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Optional, Union

from procmux.data import InstructionType, ParameterCombination

_UINT16_MAX = 0xFFFF
_UINT8_MAX = 0xFF


class InstructionError(RuntimeError):
    """Raised when an instruction is asked for a part it was not built with."""


def _check_range(value: int, limit: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= limit:
        raise ValueError(f"{what} must be between 0 and {limit}, got {value}")
    return value


class Instruction:
    """Base class of all instructions."""

    instruction_type: ClassVar[InstructionType] = InstructionType.UNSET

    def clone(self) -> "Instruction":
        """Return an independent copy of the instruction."""
        return copy.deepcopy(self)


@dataclass(init=False)
class DeclareInstruction(Instruction):
    """Adds a variable to the data section of a process."""

    instruction_type: ClassVar[InstructionType] = InstructionType.DECLARE

    name: str
    data: int
    _initialized: bool = field(repr=False)

    def __init__(self, name: str, data: Optional[int] = None) -> None:
        self.name = name
        if data is None:
            self.data = 0
            self._initialized = False
        else:
            self.data = _check_range(data, _UINT16_MAX, "data")
            self._initialized = True

    @property
    def initialized(self) -> bool:
        """Whether the variable is declared with an initial value."""
        return self._initialized


@dataclass(init=False)
class ForInstruction(Instruction):
    """Repeats a block of instructions a fixed number of times."""

    instruction_type: ClassVar[InstructionType] = InstructionType.FOR

    instructions: list
    repetitions: int

    def __init__(self, instructions: Iterable[Instruction], repetitions: int) -> None:
        self.instructions = list(instructions)
        self.repetitions = _check_range(repetitions, _UINT16_MAX, "repetitions")

    def clone(self) -> "ForInstruction":
        """Return a copy whose body is made of clones of this body."""
        return ForInstruction([inner.clone() for inner in self.instructions], self.repetitions)


@dataclass(init=False)
class PrintInstruction(Instruction):
    """Prints a message, optionally followed by a variable's value."""

    instruction_type: ClassVar[InstructionType] = InstructionType.PRINT

    message: str
    _variable_name: Optional[str] = field(repr=False)

    def __init__(self, message: str, variable_name: Optional[str] = None) -> None:
        self.message = message
        self._variable_name = variable_name

    def contains_variable(self) -> bool:
        """Whether the instruction prints a variable's value."""
        return self._variable_name is not None

    @property
    def variable_name(self) -> str:
        """Name of the variable to print."""
        if self._variable_name is None:
            raise InstructionError("A variable was not included in making this instruction.")
        return self._variable_name


@dataclass
class ReadInstruction(Instruction):
    """Reads a memory location into a variable."""

    instruction_type: ClassVar[InstructionType] = InstructionType.READ

    address: str
    destination: str


@dataclass(init=False)
class SleepInstruction(Instruction):
    """Puts the executing core to sleep for a number of ticks."""

    instruction_type: ClassVar[InstructionType] = InstructionType.SLEEP

    duration: int

    def __init__(self, duration: int) -> None:
        self.duration = _check_range(duration, _UINT8_MAX, "duration")


@dataclass(init=False)
class WriteInstruction(Instruction):
    """Writes a value to a memory location."""

    instruction_type: ClassVar[InstructionType] = InstructionType.WRITE

    address: str
    data: int

    def __init__(self, address: str, data: int) -> None:
        self.address = address
        self.data = _check_range(data, _UINT16_MAX, "data")


Operand = Union[str, int]


@dataclass(init=False)
class SubtractInstruction(Instruction):
    """Subtracts two variables, two literals, or a literal from a variable."""

    instruction_type: ClassVar[InstructionType] = InstructionType.SUBTRACT

    destination: str
    combination: ParameterCombination
    _first: Operand = field(repr=False)
    _second: Operand = field(repr=False)

    def __init__(self, destination: str, first: Operand, second: Operand) -> None:
        self.destination = destination
        if isinstance(first, str) and isinstance(second, str):
            self.combination = ParameterCombination.VARIABLE
            self._first, self._second = first, second
        elif isinstance(first, str):
            self.combination = ParameterCombination.MIXED
            self._first = first
            self._second = _check_range(second, _UINT16_MAX, "second")
        elif isinstance(second, str):
            raise TypeError("a literal first operand cannot be paired with a variable")
        else:
            self.combination = ParameterCombination.LITERAL
            self._first = _check_range(first, _UINT16_MAX, "first")
            self._second = _check_range(second, _UINT16_MAX, "second")

    @property
    def first_literal(self) -> int:
        if self.combination is not ParameterCombination.LITERAL:
            raise InstructionError("First Literal not used to create instruction.")
        return self._first

    @property
    def second_literal(self) -> int:
        if self.combination is ParameterCombination.VARIABLE:
            raise InstructionError("Second Literal not used to create instruction.")
        return self._second

    @property
    def first_variable(self) -> str:
        if self.combination is ParameterCombination.LITERAL:
            raise InstructionError("First Variable not used to create instruction.")
        return self._first

    @property
    def second_variable(self) -> str:
        if self.combination is not ParameterCombination.VARIABLE:
            raise InstructionError("Second Variable not used to create instruction.")
        return self._second