# hwhile/syntax.py
"""
Core (pure) syntax of While programs.

    program    ::= name read X block write Y
    block      ::= [command, ...]
    command    ::= X := expr | while expr block | if expr block else block
    expr       ::= X | literal | cons expr expr | hd expr | tl expr
                 | expr = expr

Names are (file, text) pairs. Two variables with the same text in
different files are different variables, which is what lets macros be
inlined without renaming.

``IfElse`` exists so decoded and pretty-printed programs have somewhere
to live; the desugarer never emits it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple, Union

from hwhile.core.tree import Tree, show_tree
from hwhile.errors import ScopeError


@dataclass(frozen=True, order=True)
class Name:
    file: str
    text: str

    def __str__(self):
        return self.text


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Var:
    name: Name


@dataclass(frozen=True)
class Lit:
    value: Tree


@dataclass(frozen=True)
class Cons:
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Hd:
    arg: "Expression"


@dataclass(frozen=True)
class Tl:
    arg: "Expression"


@dataclass(frozen=True)
class IsEq:
    left: "Expression"
    right: "Expression"


Expression = Union[Var, Lit, Cons, Hd, Tl, IsEq]


# ---------------------------------------------------------------------------
# Commands and programs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Assign:
    name: Name
    expr: Expression


@dataclass(frozen=True)
class While:
    guard: Expression
    body: "Block"


@dataclass(frozen=True)
class IfElse:
    guard: Expression
    then_block: "Block"
    else_block: "Block"


Command = Union[Assign, While, IfElse]
Block = Tuple[Command, ...]


@dataclass(frozen=True)
class Program:
    name: str
    read: Name
    block: Block
    write: Name


# ---------------------------------------------------------------------------
# Name enumeration
# ---------------------------------------------------------------------------

def names_expression(expr: Expression) -> FrozenSet[Name]:
    if isinstance(expr, Var):
        return frozenset([expr.name])
    if isinstance(expr, Lit):
        return frozenset()
    if isinstance(expr, (Hd, Tl)):
        return names_expression(expr.arg)
    if isinstance(expr, (Cons, IsEq)):
        return names_expression(expr.left) | names_expression(expr.right)
    raise TypeError(f"unknown expression {expr!r}")


def names_command(command: Command) -> FrozenSet[Name]:
    if isinstance(command, Assign):
        return frozenset([command.name]) | names_expression(command.expr)
    if isinstance(command, While):
        return names_expression(command.guard) | names_block(command.body)
    if isinstance(command, IfElse):
        return (
            names_expression(command.guard)
            | names_block(command.then_block)
            | names_block(command.else_block)
        )
    raise TypeError(f"unknown command {command!r}")


def names_block(block: Block) -> FrozenSet[Name]:
    out: FrozenSet[Name] = frozenset()
    for command in block:
        out = out | names_command(command)
    return out


def names_program(program: Program) -> FrozenSet[Name]:
    return frozenset([program.read, program.write]) | names_block(program.block)


def validate_program(program: Program) -> Program:
    """
    Check that the program's read and write variables belong to its file.

    This is narrower than requiring every variable to belong to the
    program: block variables of inlined macros keep their own file, and
    the program reaches them only through its own bindings.

    Raises:
        ScopeError: if the read or write variable is foreign.
    """
    for role, name in (("read", program.read), ("write", program.write)):
        if name.file != program.name:
            raise ScopeError(
                f"{role} variable '{name.text}' belongs to '{name.file}'",
                path=program.name,
            )
    return program


# ---------------------------------------------------------------------------
# Printable forms
# ---------------------------------------------------------------------------

INDENT = "    "


def tabs(depth: int) -> str:
    if depth < 0:
        raise ValueError(f"negative indentation depth: {depth}")
    return INDENT * depth


def show_expression(expr: Expression) -> str:
    if isinstance(expr, Var):
        return str(expr.name)
    if isinstance(expr, Lit):
        return show_tree(expr.value)
    if isinstance(expr, Cons):
        return f"(cons {show_expression(expr.left)} {show_expression(expr.right)})"
    if isinstance(expr, Hd):
        return f"hd {show_expression(expr.arg)}"
    if isinstance(expr, Tl):
        return f"tl {show_expression(expr.arg)}"
    if isinstance(expr, IsEq):
        return f"({show_expression(expr.left)} = {show_expression(expr.right)})"
    raise TypeError(f"unknown expression {expr!r}")


def format_block(lines: list[str], depth: int) -> str:
    """Wrap already-rendered command lines in braces at *depth*."""
    if not lines:
        return "{}"
    return "{\n" + ";\n".join(lines) + "\n" + tabs(depth) + "}"


def format_while(guard: str, body: str) -> str:
    return f"while {guard} {body}"


def format_if(guard: str, then_block: str, else_block: str) -> str:
    return f"if {guard} {then_block} else {else_block}"


def format_program(read: str, block: str, write: str) -> str:
    return f"read {read} {block} write {write}"


def show_block(block: Block, depth: int = 0) -> str:
    return format_block([show_command(c, depth + 1) for c in block], depth)


def show_command(command: Command, depth: int = 0) -> str:
    prefix = tabs(depth)
    if isinstance(command, Assign):
        return prefix + f"{command.name} := {show_expression(command.expr)}"
    if isinstance(command, While):
        return prefix + format_while(
            show_expression(command.guard), show_block(command.body, depth)
        )
    if isinstance(command, IfElse):
        return prefix + format_if(
            show_expression(command.guard),
            show_block(command.then_block, depth),
            show_block(command.else_block, depth),
        )
    raise TypeError(f"unknown command {command!r}")


def show_program(program: Program) -> str:
    return f"{program.name} " + format_program(
        str(program.read), show_block(program.block), str(program.write)
    )
