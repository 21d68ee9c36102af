"""Error types for the While toolchain."""

from __future__ import annotations

from typing import Optional, Sequence


class WhileError(Exception):
    """Base class for all errors raised by hwhile."""

    code: Optional[str] = None

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def format(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class CyclicMacroError(WhileError):
    """The macro-call graph reachable from a program contains a cycle.

    This is a problem in the user's source files, reported before any
    desugaring is attempted.
    """

    code = "macro-cycle"

    def __init__(self, cycle: Sequence[str], *, path: Optional[str] = None) -> None:
        self.cycle = tuple(cycle)
        chain = " -> ".join(self.cycle)
        super().__init__(f"recursive macro calls are not allowed: {chain}", path=path)


class MacroNotFoundError(WhileError):
    """A macro target was not loaded before desugaring (internal error)."""

    code = "macro-missing"

    def __init__(self, target: str, *, path: Optional[str] = None) -> None:
        self.target = target
        super().__init__(f"macro '{target}' not found while desugaring", path=path)


class EncodingError(WhileError):
    """A syntax node has no program-as-data encoding."""
    pass


class ScopeError(WhileError):
    """A program's read or write variable belongs to another file."""
    pass


class EvaluationError(WhileError):
    """Error during reference evaluation of a core program."""
    pass
