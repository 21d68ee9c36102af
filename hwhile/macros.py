# hwhile/macros.py
"""
The macro-call graph.

Programs are nodes; a program has an edge to every file it calls as a
macro. Macros are expanded by inlining, so the graph reachable from the
program being compiled must be acyclic: a self call, or mutual calls
through any number of files, would make expansion run forever.

Both walks here use an explicit worklist rather than Python recursion,
and both only ever add to their visited records, so they terminate on
any finite set of programs.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Callable, Iterable, Optional, Union

from hwhile.errors import MacroNotFoundError
from hwhile.sugar import SuProgram, macro_names_program

logger = logging.getLogger(__name__)

Loader = Union[Callable[[str], Optional[SuProgram]], Mapping]


def _load(loader: Loader, name: str, caller: str) -> SuProgram:
    if isinstance(loader, Mapping):
        program = loader.get(name)
    else:
        try:
            program = loader(name)
        except KeyError:
            program = None
    if program is None:
        raise MacroNotFoundError(name, path=caller)
    return program


def load_macro_closure(root: SuProgram, loader: Loader) -> dict[str, SuProgram]:
    """
    Load every program transitively reachable from *root* by macro calls.

    Args:
        root: The program being compiled.
        loader: Mapping or callable from program name to SuProgram.

    Returns:
        Dict from program name to program, including *root* itself.
        Each program is loaded exactly once.

    Raises:
        MacroNotFoundError: if the loader has no program for a target.
    """
    loaded: dict[str, SuProgram] = {root.name: root}
    frontier = [root]
    while frontier:
        current = frontier.pop()
        for target in sorted(macro_names_program(current)):
            if target in loaded:
                continue
            logger.debug("loading macro %s (called from %s)", target, current.name)
            program = _load(loader, target, current.name)
            loaded[target] = program
            frontier.append(program)
    return loaded


def find_cycle(
    programs: Mapping,
    roots: Optional[Iterable[str]] = None,
    trace: Optional[list] = None,
) -> Optional[list[str]]:
    """
    Depth-first search of the macro-call graph for a cycle.

    Args:
        programs: Mapping from program name to SuProgram (the whole graph).
        roots: Programs to start from; defaults to every program.
        trace: If given, one ``{"program", "calls"}`` record is appended
            per visited program, in visiting order.

    Returns:
        The cycle as a list of program names whose first and last
        entries are equal (``["a", "b", "a"]``), or None.

    Raises:
        MacroNotFoundError: if an edge points at a program not in *programs*.
    """
    # program -> its outgoing edges; only ever grows
    visited: dict[str, tuple[str, ...]] = {}
    finished: set[str] = set()

    def visit(name: str, caller: Optional[str]) -> tuple[str, ...]:
        program = programs.get(name)
        if program is None:
            raise MacroNotFoundError(name, path=caller)
        calls = tuple(sorted(macro_names_program(program)))
        visited[name] = calls
        if trace is not None:
            trace.append({"program": name, "calls": list(calls)})
        return calls

    frontier = sorted(programs.keys() if roots is None else roots)
    for root in frontier:
        if root in visited:
            continue
        path = [root]
        stack = [iter(visit(root, None))]
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
                finished.add(path.pop())
                continue
            if child in visited:
                if child not in finished:
                    cycle = path[path.index(child):] + [child]
                    logger.debug("macro cycle: %s", " -> ".join(cycle))
                    return cycle
                continue
            stack.append(iter(visit(child, path[-1])))
            path.append(child)
    return None


def check_acyclic(
    programs: Mapping,
    roots: Optional[Iterable[str]] = None,
    trace: Optional[list] = None,
) -> bool:
    """True iff no cycle is reachable from *roots* (default: all programs)."""
    return find_cycle(programs, roots, trace) is None
