"""Process control block: bookkeeping the scheduler keeps for a process."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from procmux.instructions import Instruction
from procmux.process import Process


class ProcessState(Enum):
    """Every state a process may be in."""

    NEW = "new"
    READY = "ready"
    RUNNING = "running"
    WAITING = "waiting"
    TERMINATED = "terminated"


class PCB:
    """Control block owning a :class:`Process` and its scheduling data.

    The name defaults to the process id written in decimal.
    """

    def __init__(
        self,
        process_id: int,
        instructions: Iterable[Instruction],
        priority: int = 0,
        memory_required: int = 0,
    ) -> None:
        self.process_id = process_id
        self.priority = priority
        self.memory_required = memory_required
        self.name = str(process_id)
        self.state = ProcessState.NEW
        self.process = Process(process_id, instructions)
        self._program_counter = 0
        self._log = "Log:\n"

    @property
    def program_counter(self) -> int:
        """Index of the next instruction to execute."""
        return self._program_counter

    @property
    def log(self) -> str:
        """The accumulated log of the process."""
        return self._log

    def append_log(self, entry: str) -> None:
        """Append a line to the log."""
        self._log += entry + "\n"

    def increment_program_counter(self) -> None:
        """Advance the program counter by one instruction."""
        self._program_counter += 1

    def __repr__(self) -> str:
        return (
            f"PCB(process_id={self.process_id!r}, name={self.name!r}, "
            f"state={self.state.name})"
        )