# hwhile/encoding.py
"""
Program-as-data: quoting core syntax into tree values.

Every syntax node becomes a tagged list whose head is an atom numeral:

    X := E                 ->  [@asgn, x, E']
    while E B              ->  [@while, E', B']
    if E B1 else B2        ->  [@if, E', B1', B2']
    X                      ->  [@var, x]
    literal t              ->  [@quote, t]
    hd E / tl E            ->  [@hd, E'] / [@tl, E']
    cons E F               ->  [@cons, E', F']
    read X B write Y       ->  [x, B', y]

Blocks are lists of encoded commands. Variables are numerals taken
from a name table; by default the program's names are numbered from 0
in their structural order, so quoting is deterministic.

Equality tests have no atom in the vocabulary and cannot be quoted.
"""

from __future__ import annotations

from typing import Mapping, Optional

from hwhile.core.atoms import Atom
from hwhile.core.numbers import int_to_tree
from hwhile.core.tree import Tree
from hwhile.errors import EncodingError
from hwhile.listutils import list_to_tree
from hwhile.syntax import (
    Assign,
    Block,
    Command,
    Cons,
    Expression,
    Hd,
    IfElse,
    IsEq,
    Lit,
    Name,
    Program,
    Tl,
    Var,
    While,
    names_program,
)

NameTable = Mapping[Name, int]


def name_table(program: Program) -> dict[Name, int]:
    """Number every name of *program* from 0 in structural order."""
    return {name: i for i, name in enumerate(sorted(names_program(program)))}


def _tagged(atom: Atom, *fields: Tree) -> Tree:
    return list_to_tree([atom.to_tree(), *fields])


def _encode_name(name: Name, names: NameTable) -> Tree:
    try:
        return int_to_tree(names[name])
    except KeyError:
        raise EncodingError(f"variable '{name.text}' has no number", path=name.file) from None


def encode_expression(expr: Expression, names: NameTable) -> Tree:
    if isinstance(expr, Var):
        return _tagged(Atom.VAR, _encode_name(expr.name, names))
    if isinstance(expr, Lit):
        return _tagged(Atom.QUOTE, expr.value)
    if isinstance(expr, Hd):
        return _tagged(Atom.HD, encode_expression(expr.arg, names))
    if isinstance(expr, Tl):
        return _tagged(Atom.TL, encode_expression(expr.arg, names))
    if isinstance(expr, Cons):
        return _tagged(
            Atom.CONS,
            encode_expression(expr.left, names),
            encode_expression(expr.right, names),
        )
    if isinstance(expr, IsEq):
        raise EncodingError("equality tests cannot be encoded as data")
    raise TypeError(f"unknown expression {expr!r}")


def encode_command(command: Command, names: NameTable) -> Tree:
    if isinstance(command, Assign):
        return _tagged(
            Atom.ASGN,
            _encode_name(command.name, names),
            encode_expression(command.expr, names),
        )
    if isinstance(command, While):
        return _tagged(
            Atom.WHILE,
            encode_expression(command.guard, names),
            encode_block(command.body, names),
        )
    if isinstance(command, IfElse):
        return _tagged(
            Atom.IF,
            encode_expression(command.guard, names),
            encode_block(command.then_block, names),
            encode_block(command.else_block, names),
        )
    raise TypeError(f"unknown command {command!r}")


def encode_block(block: Block, names: NameTable) -> Tree:
    return list_to_tree([encode_command(c, names) for c in block])


def encode_program(program: Program, names: Optional[NameTable] = None) -> Tree:
    """
    Quote a core program as a tree: ``[read, block, write]``.

    Args:
        program: Program to quote.
        names: Variable numbering; defaults to ``name_table(program)``.

    Raises:
        EncodingError: if the program contains an equality test or a
            variable missing from *names*.
    """
    if names is None:
        names = name_table(program)
    return list_to_tree([
        _encode_name(program.read, names),
        encode_block(program.block, names),
        _encode_name(program.write, names),
    ])
