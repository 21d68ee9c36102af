# hwhile/pretty.py
"""
Human-facing renderings of tree values.

Generic renderers (total, never fail):

    show_int_tree(t)                 raw mode: ``3`` or ``<<nil.nil>.nil>``
    show_int_list_tree(t)            a list of raw-mode elements
    show_nested_int_list(t)          ``[1, [2, 3], 0]``
    show_nested_atom_int_list(t)     ``[@while, [@var, 0], []]``

Strict decoders for quoted programs (see hwhile.encoding). They return
None as soon as any part of the tree does not fit the grammar; there is
no partial output:

    decode_program_text / decode_block_text /
    decode_command_text / decode_expression_text

Usage:

    from hwhile.core.numbers import int_to_tree
    from hwhile.pretty import show_nested_int_list

    print(show_nested_int_list(int_to_tree(3)))   # 3
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from hwhile.core.atoms import Atom, tree_to_atom
from hwhile.core.numbers import tree_to_int
from hwhile.core.tree import Tree, show_tree
from hwhile.listutils import tree_to_list
from hwhile.syntax import format_block, format_if, format_program, format_while, tabs


class DisplayMode(Enum):
    """Verbosity modes offered to front ends."""
    RAW = "raw"
    NESTED = "nested"
    ATOMS = "atoms"


def show_list_of(items: list[str]) -> str:
    return "[" + ", ".join(items) + "]"


def show_int_tree(t: Tree, verbose: bool = True) -> str:
    """Numerals as decimal; anything else dotted (verbose) or ``E``."""
    n = tree_to_int(t)
    if n is not None:
        return str(n)
    return show_tree(t) if verbose else "E"


def show_int_list_tree(t: Tree, verbose: bool = True) -> str:
    return show_list_of([show_int_tree(e, verbose) for e in tree_to_list(t)])


def show_nested_int_list(t: Tree) -> str:
    return _show_nested(t, atom_heads=False)


def show_nested_atom_int_list(t: Tree) -> str:
    """Like show_nested_int_list, with list heads shown as atoms when they are one."""
    return _show_nested(t, atom_heads=True)


def _show_nested(t: Tree, atom_heads: bool) -> str:
    # work items: ("visit", tree, is_list_head) or ("join", item_count, None)
    out: list[str] = []
    work: list[tuple] = [("visit", t, False)]
    while work:
        op, arg, is_head = work.pop()
        if op == "join":
            start = len(out) - arg
            items = out[start:]
            del out[start:]
            out.append(show_list_of(items))
            continue
        atom = tree_to_atom(arg) if is_head else None
        if atom is not None:
            out.append(atom.symbol)
            continue
        n = tree_to_int(arg)
        if n is not None:
            out.append(str(n))
            continue
        elems = tree_to_list(arg)
        work.append(("join", len(elems), None))
        for idx in reversed(range(len(elems))):
            work.append(("visit", elems[idx], atom_heads and idx == 0))
    return out[0]


def render_tree(t: Tree, mode: DisplayMode = DisplayMode.NESTED) -> str:
    if mode is DisplayMode.RAW:
        return show_int_tree(t)
    if mode is DisplayMode.NESTED:
        return show_nested_int_list(t)
    if mode is DisplayMode.ATOMS:
        return show_nested_atom_int_list(t)
    raise TypeError(f"unknown display mode {mode!r}")


# ---------------------------------------------------------------------------
# Strict decoders for quoted programs
# ---------------------------------------------------------------------------

def _split_tagged(t: Tree) -> tuple[Optional[Atom], list[Tree]]:
    items = tree_to_list(t)
    if not items:
        return None, []
    return tree_to_atom(items[0]), items[1:]


def _var_text(t: Tree) -> Optional[str]:
    n = tree_to_int(t)
    return None if n is None else f"X{n}"


def decode_expression_text(t: Tree) -> Optional[str]:
    out: list[str] = []
    work: list[tuple[str, Tree]] = [("visit", t)]
    while work:
        op, node = work.pop()
        if op == "hd" or op == "tl":
            out[-1] = f"{op} {out[-1]}"
            continue
        if op == "cons":
            right = out.pop()
            left = out.pop()
            out.append(f"(cons {left} {right})")
            continue
        atom, args = _split_tagged(node)
        if atom is Atom.VAR and len(args) == 1:
            text = _var_text(args[0])
            if text is None:
                return None
            out.append(text)
        elif atom is Atom.QUOTE and len(args) == 1:
            out.append(show_tree(args[0]))
        elif atom in (Atom.HD, Atom.TL) and len(args) == 1:
            work.append(("hd" if atom is Atom.HD else "tl", node))
            work.append(("visit", args[0]))
        elif atom is Atom.CONS and len(args) == 2:
            work.append(("cons", node))
            work.append(("visit", args[1]))
            work.append(("visit", args[0]))
        else:
            return None
    return out[0]


def decode_block_text(t: Tree, depth: int = 0) -> Optional[str]:
    return _decode_commands("block", t, depth)


def decode_command_text(t: Tree, depth: int = 0) -> Optional[str]:
    return _decode_commands("command", t, depth)


def _decode_commands(kind: str, t: Tree, depth: int) -> Optional[str]:
    # work items: (op, payload, depth); finished texts collect on `out`
    out: list[str] = []
    work: list[tuple] = [(kind, t, depth)]
    while work:
        op, payload, d = work.pop()
        if op == "block":
            commands = tree_to_list(payload)
            work.append(("end_block", len(commands), d))
            for c in reversed(commands):
                work.append(("command", c, d + 1))
        elif op == "end_block":
            start = len(out) - payload
            lines = out[start:]
            del out[start:]
            out.append(format_block(lines, d))
        elif op == "end_while":
            body = out.pop()
            out.append(tabs(d) + format_while(payload, body))
        elif op == "end_if":
            else_block = out.pop()
            then_block = out.pop()
            out.append(tabs(d) + format_if(payload, then_block, else_block))
        else:
            atom, args = _split_tagged(payload)
            if atom is Atom.ASGN and len(args) == 2:
                var = _var_text(args[0])
                expr = decode_expression_text(args[1])
                if var is None or expr is None:
                    return None
                out.append(tabs(d) + f"{var} := {expr}")
                continue
            if atom is Atom.WHILE and len(args) == 2:
                guard = decode_expression_text(args[0])
                if guard is None:
                    return None
                work.append(("end_while", guard, d))
                work.append(("block", args[1], d))
                continue
            if atom is Atom.IF and len(args) == 3:
                guard = decode_expression_text(args[0])
                if guard is None:
                    return None
                work.append(("end_if", guard, d))
                work.append(("block", args[2], d))
                work.append(("block", args[1], d))
                continue
            return None
    return out[0]


def decode_program_text(t: Tree) -> Optional[str]:
    items = tree_to_list(t)
    if len(items) != 3:
        return None
    read = _var_text(items[0])
    block = decode_block_text(items[1])
    write = _var_text(items[2])
    if read is None or block is None or write is None:
        return None
    return format_program(read, block, write)
