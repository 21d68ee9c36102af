# hwhile/listutils.py
"""
Minimal list/sequence utilities for While trees.

Design:
-------
* Lists are pure trees:
      []             -> nil
      [h, *rest]     -> <h.rest>

* Every finite tree reads as a list: follow right children until nil,
  collecting the left children. The elements are kept as trees; they
  are not further decoded as numerals.

* Syntax nodes are encoded as fixed-arity tagged lists
  ``[tag, field1, field2, ...]`` on top of these helpers.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from hwhile.core.numbers import int_to_tree
from hwhile.core.tree import NIL, Tree


# ---------------------------------------------------------------------------
# Python list <-> tree list bridges
# ---------------------------------------------------------------------------

def list_to_tree(seq: Iterable[Tree]) -> Tree:
    """
    Build a tree list from a sequence of trees.

    Example:
        list_to_tree([a, b, c])  ->  <a.<b.<c.nil>>>
    """
    items = list(seq)
    m = NIL
    for item in reversed(items):
        if not isinstance(item, Tree):
            raise TypeError(f"list_to_tree: cannot embed {item!r} directly")
        m = Tree(item, m)
    return m


def tree_to_list(t: Tree) -> Optional[list[Tree]]:
    """
    Decode a tree list back into a Python list of trees.

    Returns None only for non-tree input; every tree is a list.
    """
    if not isinstance(t, Tree):
        return None
    out: list[Tree] = []
    cur = t
    while cur.is_pair():
        h, cur = cur.structure
        out.append(h)
    return out


def list_from_py(seq: list[Any]) -> Tree:
    """
    Like list_to_tree, but Python ints are embedded as numerals.

    Example:
        list_from_py([1, 2])  ->  <1.<2.nil>>  (with 1, 2 as numerals)
    """
    items = []
    for item in seq:
        if isinstance(item, bool):
            raise TypeError(f"list_from_py: cannot embed {item!r} directly")
        if isinstance(item, int):
            item = int_to_tree(item)
        items.append(item)
    return list_to_tree(items)

