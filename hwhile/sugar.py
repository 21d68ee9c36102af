# hwhile/sugar.py
"""
Sugared command syntax: what the parser produces.

On top of the pure commands this adds sequential composition,
conditionals, switches and macro calls. A macro call

    X := <file> E

runs the program stored in *file* with E as its input and binds its
output to X. The desugarer (hwhile.desugar) removes all of it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple, Union

from hwhile.syntax import Expression, Name


@dataclass(frozen=True)
class SuCompos:
    first: "SuCommand"
    second: "SuCommand"


@dataclass(frozen=True)
class SuAssign:
    name: Name
    expr: Expression


@dataclass(frozen=True)
class SuWhile:
    guard: Expression
    body: "SuCommand"


@dataclass(frozen=True)
class SuIfElse:
    guard: Expression
    then_branch: "SuCommand"
    else_branch: "SuCommand"


@dataclass(frozen=True)
class SuMacro:
    name: Name
    file: str
    expr: Expression


@dataclass(frozen=True)
class SuSwitch:
    scrutinee: Expression
    cases: Tuple[Tuple[Expression, "SuCommand"], ...]
    default: "SuCommand"


SuCommand = Union[SuCompos, SuAssign, SuWhile, SuIfElse, SuMacro, SuSwitch]


@dataclass(frozen=True)
class SuProgram:
    """A parsed program: ``name read X { body } write E``.

    *name* identifies the program's file; it is the key macro calls use.
    """
    name: str
    read: Name
    body: SuCommand
    write: Expression


def sequence(*commands: SuCommand) -> SuCommand:
    """Right-nested composition of one or more commands."""
    if not commands:
        raise ValueError("sequence needs at least one command")
    result = commands[-1]
    for command in reversed(commands[:-1]):
        result = SuCompos(command, result)
    return result


def macro_names(command: SuCommand) -> FrozenSet[str]:
    """Files called as macros directly inside *command*."""
    if isinstance(command, SuCompos):
        return macro_names(command.first) | macro_names(command.second)
    if isinstance(command, SuAssign):
        return frozenset()
    if isinstance(command, SuWhile):
        return macro_names(command.body)
    if isinstance(command, SuIfElse):
        return macro_names(command.then_branch) | macro_names(command.else_branch)
    if isinstance(command, SuMacro):
        return frozenset([command.file])
    if isinstance(command, SuSwitch):
        out = macro_names(command.default)
        for _, arm in command.cases:
            out = out | macro_names(arm)
        return out
    raise TypeError(f"unknown sugared command {command!r}")


def macro_names_program(program: SuProgram) -> FrozenSet[str]:
    return macro_names(program.body)
