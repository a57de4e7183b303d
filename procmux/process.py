"""A simulated system process: its text, data and stack sections."""

from __future__ import annotations

from typing import Iterable

from procmux.instructions import Instruction
from procmux.logical_data_section import LogicalDataSection
from procmux.stack import Stack
from procmux.text_section import TextSection

DATA_SECTION_VARIABLES = 32


class Process:
    """A process built from a sequence of instructions.

    The logical data section holds up to 32 variables.
    """

    def __init__(self, process_id: int, instructions: Iterable[Instruction] = ()) -> None:
        self.process_id = process_id
        self.text_section = TextSection(instructions)
        self.stack = Stack()
        self.logical_data_section = LogicalDataSection(DATA_SECTION_VARIABLES)

    def __repr__(self) -> str:
        return (
            f"Process(process_id={self.process_id!r}, "
            f"instructions={len(self.text_section)})"
        )