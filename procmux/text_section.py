"""The text section of a process: the instructions it executes in order."""

from __future__ import annotations

from typing import Iterable, Iterator

from procmux.instructions import Instruction


class TextSection:
    """Ordered list of a process's instructions."""

    def __init__(self, instructions: Iterable[Instruction] = ()) -> None:
        self._instructions: list[Instruction] = list(instructions)

    def add_instruction(self, instruction: Instruction) -> None:
        """Append an instruction."""
        self._instructions.append(instruction)

    def get_instruction(self, index: int) -> Instruction:
        """Instruction at ``index``; negative indices are out of range."""
        if not 0 <= index < len(self._instructions):
            raise IndexError(f"instruction index {index} out of range")
        return self._instructions[index]

    @property
    def instructions(self) -> tuple[Instruction, ...]:
        """All instructions, in execution order."""
        return tuple(self._instructions)

    def __len__(self) -> int:
        return len(self._instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._instructions)