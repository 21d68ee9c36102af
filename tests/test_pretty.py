"""
Tests for the generic tree renderers (raw, nested-list, atom-tagged).
"""

from hwhile import (
    NIL,
    TRUE,
    Atom,
    DisplayMode,
    Tree,
    cons,
    decode_block_text,
    decode_expression_text,
    int_to_tree,
    list_from_py,
    list_to_tree,
    render_tree,
    show_tree,
    show_int_list_tree,
    show_int_tree,
    show_nested_atom_int_list,
    show_nested_int_list,
)


class TestRawMode:

    def test_numeral_as_decimal(self):
        assert show_int_tree(int_to_tree(7)) == "7"
        assert show_int_tree(NIL) == "0"

    def test_unparsable_in_dotted_form(self):
        assert show_int_tree(cons(TRUE, NIL)) == "<<nil.nil>.nil>"

    def test_unparsable_terse(self):
        assert show_int_tree(cons(TRUE, NIL), verbose=False) == "E"

    def test_int_list(self):
        t = list_to_tree([int_to_tree(1), cons(TRUE, NIL), NIL])
        assert show_int_list_tree(t) == "[1, <<nil.nil>.nil>, 0]"
        assert show_int_list_tree(t, verbose=False) == "[1, E, 0]"


class TestNestedListMode:

    def test_three_renders_as_digit(self):
        assert show_nested_int_list(cons(NIL, cons(NIL, cons(NIL, NIL)))) == "3"

    def test_list_of_numbers(self):
        assert show_nested_int_list(list_from_py([1, 2, 3])) == "[1, 2, 3]"

    def test_nested_lists(self):
        t = list_to_tree([list_from_py([5, 1]), int_to_tree(0), list_from_py([2])])
        assert show_nested_int_list(t) == "[[5, 1], 0, [2]]"


class TestAtomMode:

    def test_top_level_numeral_is_not_an_atom(self):
        assert show_nested_atom_int_list(int_to_tree(5)) == "5"

    def test_list_head_renders_as_atom(self):
        assert show_nested_atom_int_list(list_from_py([5, 5])) == "[@while, 5]"

    def test_non_atom_head_stays_numeric(self):
        assert show_nested_atom_int_list(list_from_py([4, 5])) == "[4, 5]"

    def test_every_atom_symbol(self):
        symbols = [
            "@asgn", "@doAsgn", "@while", "@doWhile", "@if", "@doIf", "@var",
            "@quote", "@hd", "@doHd", "@tl", "@doTl", "@cons", "@doCons",
        ]
        primes = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43]
        for p, symbol in zip(primes, symbols):
            assert show_nested_atom_int_list(list_from_py([p, 1])) == f"[{symbol}, 1]"

    def test_heads_of_nested_lists(self):
        t = list_to_tree([list_from_py([17, 2]), list_from_py([41])])
        assert show_nested_atom_int_list(t) == "[[@var, 2], [@cons]]"


class TestRenderTree:

    def test_modes(self):
        t = list_from_py([23, 1])
        assert render_tree(t, DisplayMode.RAW) == "<" + show_tree(int_to_tree(23)) + ".<<nil.nil>.nil>>"
        assert render_tree(t, DisplayMode.NESTED) == "[23, 1]"
        assert render_tree(t, DisplayMode.ATOMS) == "[@hd, 1]"

    def test_default_is_nested(self):
        assert render_tree(int_to_tree(3)) == "3"


def left_nested(depth):
    t = NIL
    for _ in range(depth):
        t = Tree(t, NIL)
    return t


class TestDeepTrees:
    """Renderers and decoders walk trees with an explicit stack."""

    def test_left_nested_in_every_mode(self):
        t = left_nested(3000)
        nested = "[" * 2999 + "1" + "]" * 2999
        assert render_tree(t, DisplayMode.RAW) == "<" * 3000 + "nil" + ".nil>" * 3000
        assert render_tree(t, DisplayMode.NESTED) == nested
        assert render_tree(t, DisplayMode.ATOMS) == nested

    def test_deep_expression_decodes(self):
        e = list_from_py([17, 0])
        for _ in range(3000):
            e = list_to_tree([Atom.HD.to_tree(), e])
        assert decode_expression_text(e) == "hd " * 3000 + "X0"

    def test_deep_while_nest_decodes(self):
        guard = list_from_py([17, 0])
        c = list_to_tree([Atom.WHILE.to_tree(), guard, NIL])
        for _ in range(600):
            c = list_to_tree([Atom.WHILE.to_tree(), guard, list_to_tree([c])])
        text = decode_block_text(list_to_tree([c]))
        assert text is not None
        assert text.count("while X0") == 601
        assert text.startswith("{\n    while X0 {\n        while X0 {\n")
        assert "    " * 601 + "while X0 {}" in text
        assert text.endswith("\n    }\n}")

    def test_deep_garbage_is_rejected(self):
        e = list_to_tree([Atom.HD.to_tree(), left_nested(3000)])
        assert decode_expression_text(e) is None
