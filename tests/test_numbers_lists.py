"""
Tests for the numeral and list encodings.
"""

import pytest

from hwhile import NIL, TRUE, cons, int_to_tree, list_from_py, list_to_tree, tree_to_int, tree_to_list


class TestNumerals:

    def test_zero_is_nil(self):
        assert int_to_tree(0) == NIL

    def test_three_is_right_nested_chain(self):
        assert int_to_tree(3) == cons(NIL, cons(NIL, cons(NIL, NIL)))

    def test_roundtrip_small(self):
        for n in range(50):
            assert tree_to_int(int_to_tree(n)) == n

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            int_to_tree(-1)

    def test_non_nil_left_child_is_not_a_numeral(self):
        assert tree_to_int(cons(TRUE, NIL)) is None
        assert tree_to_int(cons(NIL, cons(TRUE, NIL))) is None

    def test_non_tree_is_not_a_numeral(self):
        assert tree_to_int(3) is None

    def test_large_numeral(self):
        assert tree_to_int(int_to_tree(5000)) == 5000


class TestLists:

    def test_empty_list_is_nil(self):
        assert list_to_tree([]) == NIL
        assert tree_to_list(NIL) == []

    def test_elements_are_left_children(self):
        t = list_to_tree([TRUE, NIL])
        assert t == cons(TRUE, cons(NIL, NIL))
        assert tree_to_list(t) == [TRUE, NIL]

    def test_elements_are_not_reencoded(self):
        # a list of nils is the same tree as a numeral
        assert list_to_tree([NIL, NIL]) == int_to_tree(2)

    def test_every_tree_reads_as_a_list(self):
        t = cons(TRUE, TRUE)
        assert tree_to_list(t) == [TRUE, NIL]

    def test_non_tree_element_rejected(self):
        with pytest.raises(TypeError):
            list_to_tree([1])

    def test_list_from_py_embeds_ints(self):
        assert list_from_py([1, 2]) == list_to_tree([int_to_tree(1), int_to_tree(2)])
        assert list_from_py([TRUE]) == list_to_tree([TRUE])
