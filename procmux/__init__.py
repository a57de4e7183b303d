"""Emulated process multiplexer parts: instructions, process sections, control blocks, paged memory with a backing store, an MMU and command tokenizers."""

__version__ = "0.1.0"

__all__ = [
    "data",
    "instructions",
    "lru_map",
    "logical_data_section",
    "stack",
    "text_section",
    "physical_memory",
    "mmu",
    "process",
    "pcb",
    "tokens",
]