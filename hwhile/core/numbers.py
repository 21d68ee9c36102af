# hwhile/core/numbers.py
"""
Natural number encoding for While trees.

    0      -> nil
    n + 1  -> <nil.n>

A tree is a numeral iff it is a right-nested chain of pairs whose left
children are all nil, ending in nil.
"""

from __future__ import annotations

from .tree import Tree, NIL


def int_to_tree(n: int) -> Tree:
    """Build numeral n as a chain of n pairs with nil left children."""
    if n < 0:
        raise ValueError("int_to_tree only supports n>=0")
    t = NIL
    for _ in range(n):
        t = Tree(NIL, t)
    return t


def tree_to_int(t: Tree) -> int | None:
    """
    Interpret a tree as a numeral.

    Returns:
        int  if the tree is a well-formed numeral
        None otherwise
    """
    if not isinstance(t, Tree):
        return None
    n = 0
    cur = t
    while cur.is_pair():
        if not cur.structure[0].is_nil():
            return None
        n += 1
        cur = cur.structure[1]
    return n
