# hwhile/program_registry.py
"""
Simple in-memory registry for parsed While programs.

The desugarer looks macro targets up by program name; a registry is
the table a front end fills as it parses files, and it can be passed
straight to ``compile_program`` as the loader.

Design:

- A registry wraps a dict[str, SuProgram] and is a read-only Mapping.
- CRUD-ish helpers:
    * register(program)   (keyed by program.name)
    * get(name) / has(name) / names()
    * unregister(name) / clear()
- No module-level instance: each compilation session owns its registry.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Optional

from .sugar import SuProgram


class ProgramRegistry(Mapping):
    """Mapping from program name to parsed program."""

    def __init__(self, programs: Iterable[SuProgram] = ()):
        self._programs: Dict[str, SuProgram] = {}
        for program in programs:
            self.register(program)

    # ------------------------------------------------------------------
    # Core registry operations
    # ------------------------------------------------------------------

    def register(self, program: SuProgram) -> None:
        """Register (or overwrite) a program under its own name."""
        if not isinstance(program, SuProgram):
            raise TypeError(f"expected SuProgram, got {type(program).__name__}")
        self._programs[program.name] = program

    def has(self, name: str) -> bool:
        return name in self._programs

    def unregister(self, name: str) -> Optional[SuProgram]:
        return self._programs.pop(name, None)

    def clear(self) -> None:
        """Remove all registered programs."""
        self._programs.clear()

    def names(self) -> list[str]:
        """All registered program names, sorted for stability."""
        return sorted(self._programs)

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------

    def __getitem__(self, name: str) -> SuProgram:
        return self._programs[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._programs)

    def __len__(self) -> int:
        return len(self._programs)

    def __repr__(self):
        return f"ProgramRegistry({self.names()!r})"
