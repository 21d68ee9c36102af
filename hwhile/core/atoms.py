# hwhile/core/atoms.py
"""
The atom vocabulary of the program-as-data encoding.

Fourteen tags, each mapped to one of the first fourteen primes in a
fixed order. The integer values are part of the wire format: a program
quoted by one implementation must decode in another.

The ``do*`` atoms are never emitted by quoting; they label the control
stack entries of a self-interpreter and are listed so that decoders can
render them.
"""

from __future__ import annotations

from enum import Enum

from .numbers import int_to_tree, tree_to_int
from .tree import Tree


class Atom(Enum):
    ASGN = 2
    DO_ASGN = 3
    WHILE = 5
    DO_WHILE = 7
    IF = 11
    DO_IF = 13
    VAR = 17
    QUOTE = 19
    HD = 23
    DO_HD = 29
    TL = 31
    DO_TL = 37
    CONS = 41
    DO_CONS = 43

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    def to_tree(self) -> Tree:
        return int_to_tree(self.value)

    def __str__(self):
        return self.symbol


_SYMBOLS = {
    Atom.ASGN: "@asgn",
    Atom.DO_ASGN: "@doAsgn",
    Atom.WHILE: "@while",
    Atom.DO_WHILE: "@doWhile",
    Atom.IF: "@if",
    Atom.DO_IF: "@doIf",
    Atom.VAR: "@var",
    Atom.QUOTE: "@quote",
    Atom.HD: "@hd",
    Atom.DO_HD: "@doHd",
    Atom.TL: "@tl",
    Atom.DO_TL: "@doTl",
    Atom.CONS: "@cons",
    Atom.DO_CONS: "@doCons",
}

_BY_VALUE = {a.value: a for a in Atom}


def atom_to_int(atom: Atom) -> int:
    return atom.value


def int_to_atom(n: int | None) -> Atom | None:
    """Atom for an integer code, or None when the integer is a plain number."""
    if n is None:
        return None
    return _BY_VALUE.get(n)


def tree_to_atom(t: Tree) -> Atom | None:
    return int_to_atom(tree_to_int(t))
