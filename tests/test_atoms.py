"""
Tests for the atom vocabulary and its fixed prime encoding.
"""

from hwhile import Atom, atom_to_int, int_to_atom, int_to_tree
from hwhile.core.atoms import tree_to_atom

PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43]


class TestAtomTable:

    def test_fourteen_atoms_in_fixed_order(self):
        assert [atom_to_int(a) for a in Atom] == PRIMES

    def test_order_of_tags(self):
        assert [a.name for a in Atom] == [
            "ASGN", "DO_ASGN", "WHILE", "DO_WHILE", "IF", "DO_IF", "VAR",
            "QUOTE", "HD", "DO_HD", "TL", "DO_TL", "CONS", "DO_CONS",
        ]

    def test_bijection(self):
        for atom in Atom:
            assert int_to_atom(atom_to_int(atom)) is atom

    def test_out_of_domain_is_not_an_atom(self):
        for n in [0, 1, 4, 6, 44, 47, 1000]:
            assert int_to_atom(n) is None
        assert int_to_atom(None) is None

    def test_symbols(self):
        assert Atom.WHILE.symbol == "@while"
        assert Atom.DO_CONS.symbol == "@doCons"
        assert str(Atom.QUOTE) == "@quote"

    def test_tree_form(self):
        assert Atom.VAR.to_tree() == int_to_tree(17)
        assert tree_to_atom(int_to_tree(5)) is Atom.WHILE
        assert tree_to_atom(int_to_tree(6)) is None
