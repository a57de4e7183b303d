"""System-wide configuration defaults and shared enumerations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


@dataclass
class Configuration:
    """Default parameters of the scheduler and the memory manager.

    Memory sizes are powers of two, stored as their exponents.
    """

    batch_process_frequency: int = 1
    core_count: int = 1
    delay_per_instruction_execution: int = 0
    maximum_instructions: int = 1
    minimum_instructions: int = 1
    quantum_cycle: int = 1
    scheduler_algorithm: str = "FCFS"

    maximum_memory_per_process: int = 6
    maximum_overall_memory: int = 6
    memory_per_frame: int = 6
    minimum_memory_per_process: int = 6


class InstructionType(IntEnum):
    """Every kind of instruction the system can generate or execute."""

    UNSET = 0
    ADD = 1
    DECLARE = 2
    FOR = 3
    PRINT = 4
    READ = 5
    SLEEP = 6
    SUBTRACT = 7
    WRITE = 8


class ParameterCombination(Enum):
    """How the two operands of an arithmetic instruction were given.

    VARIABLE: two variable names.
    LITERAL: two literal values.
    MIXED: a variable name and a literal value.
    """

    VARIABLE = "variable"
    LITERAL = "literal"
    MIXED = "mixed"