"""A last-in-first-out stack of call frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


class StackEmptyError(IndexError):
    """Raised when an operation needs a frame but the stack is empty."""


@dataclass
class StackFrame:
    """One function call on the stack."""

    function_name: str = ""
    parameters: list = field(default_factory=list)
    local_variables: list = field(default_factory=list)
    return_address: int = 0


class Stack:
    """Call stack of :class:`StackFrame` objects."""

    def __init__(self) -> None:
        self._frames: list[StackFrame] = []

    def add_local_variable(self, variable: int) -> None:
        """Add a local variable to the current frame."""
        self.frame.local_variables.append(variable)

    def is_empty(self) -> bool:
        """Whether the stack holds no frames."""
        return not self._frames

    @property
    def frame(self) -> StackFrame:
        """The frame on top of the stack."""
        if not self._frames:
            raise StackEmptyError("Stack is empty")
        return self._frames[-1]

    def pop_frame(self) -> StackFrame:
        """Remove and return the frame on top of the stack."""
        if not self._frames:
            raise StackEmptyError("Trying to pop an empty stack")
        return self._frames.pop()

    def push_frame(
        self, function_name: str, parameters: Iterable[int], return_address: int
    ) -> None:
        """Push a new frame for a call to ``function_name``."""
        self._frames.append(
            StackFrame(
                function_name=function_name,
                parameters=list(parameters),
                return_address=return_address,
            )
        )

    def __len__(self) -> int:
        return len(self._frames)