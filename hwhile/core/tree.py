"""
WHILE TREE CORE
===============
One datatype. Pure structure.
nil      = Tree()
pair     = Tree(left, right)
Everything else (numbers, lists, programs) is an encoding into trees.

Trees are immutable. Equality, ordering and hashing are structural and
walk the tree with an explicit stack, so numerals and long lists do not
hit the recursion limit.
"""

from __future__ import annotations

from typing import Optional


class Tree:
    """A binary tree value: the empty leaf or a pair of trees."""

    __slots__ = ("structure", "_hash", "_size")

    def __init__(self, *structure: "Tree"):
        if len(structure) not in (0, 2):
            raise ValueError("a tree is nil or a pair of two trees")
        for s in structure:
            if not isinstance(s, Tree):
                raise TypeError(f"tree children must be trees, got {type(s).__name__}")
        self.structure = tuple(structure)
        if structure:
            left, right = structure
            self._hash = hash((left._hash, right._hash))
            self._size = 1 + left._size + right._size
        else:
            self._hash = hash(())
            self._size = 0

    def __setattr__(self, key, value):
        if hasattr(self, "_size"):
            raise AttributeError("trees are immutable")
        object.__setattr__(self, key, value)

    # ---------- primitive queries ----------

    def is_nil(self) -> bool:
        return not self.structure

    def is_pair(self) -> bool:
        return bool(self.structure)

    @property
    def left(self) -> Optional["Tree"]:
        return self.structure[0] if self.structure else None

    @property
    def right(self) -> Optional["Tree"]:
        return self.structure[1] if self.structure else None

    def head(self) -> "Tree":
        """`hd` semantics: the left child, or nil for nil."""
        return self.structure[0] if self.structure else NIL

    def tail(self) -> "Tree":
        """`tl` semantics: the right child, or nil for nil."""
        return self.structure[1] if self.structure else NIL

    def size(self) -> int:
        """Number of pair nodes."""
        return self._size

    # ---------- structural identity ----------

    def compare(self, other: "Tree") -> int:
        """Three-way structural comparison: nil < pair, then left, then right."""
        stack = [(self, other)]
        while stack:
            a, b = stack.pop()
            if a is b:
                continue
            if a.is_nil() or b.is_nil():
                if a.is_nil() and b.is_nil():
                    continue
                return -1 if a.is_nil() else 1
            # right pushed first so the left children are compared first
            stack.append((a.structure[1], b.structure[1]))
            stack.append((a.structure[0], b.structure[0]))
        return 0

    def __eq__(self, other):
        if not isinstance(other, Tree):
            return NotImplemented
        if self is other:
            return True
        if self._hash != other._hash or self._size != other._size:
            return False
        return self.compare(other) == 0

    def __lt__(self, other: "Tree") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "Tree") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "Tree") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "Tree") -> bool:
        return self.compare(other) >= 0

    def __hash__(self):
        return self._hash

    def __repr__(self):
        return "Tree(" + show_tree(self) + ")"

    def __str__(self):
        return show_tree(self)


def show_tree(t: Tree) -> str:
    """Dotted rendering: ``nil`` for the leaf, ``<l.r>`` for a pair."""
    out: list[str] = []
    # work items are trees to render or literal text fragments
    stack: list = [t]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
        elif item.is_nil():
            out.append("nil")
        else:
            stack.extend([">", item.structure[1], ".", item.structure[0]])
            out.append("<")
    return "".join(out)


# ---------- constructor and primitives ----------


def cons(left: Tree, right: Tree) -> Tree:
    """Pair constructor."""
    return Tree(left, right)


NIL = Tree()  # nil, false, 0, []
TRUE = Tree(NIL, NIL)  # canonical true, 1
