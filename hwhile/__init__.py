# hwhile/__init__.py
"""
hwhile public API surface.

This module exposes a small, coherent core:

    - Trees: Tree, NIL, TRUE, cons, show_tree
    - Numbers and lists: int_to_tree, tree_to_int, list_to_tree,
      tree_to_list, list_from_py
    - Atoms: Atom, atom_to_int, int_to_atom
    - Core syntax: Name, Program, commands, expressions, names_*, show_*
    - Sugared syntax: SuProgram and its commands, macro_names
    - Front end: check_acyclic, desugar_program, compile_program,
      ProgramRegistry
    - Program-as-data: encode_program, name_table, decoders and renderers
    - Reference evaluator: Evaluator
"""

from __future__ import annotations

from .core.tree import Tree, NIL, TRUE, cons, show_tree
from .core.numbers import int_to_tree, tree_to_int
from .core.atoms import Atom, atom_to_int, int_to_atom

from .listutils import list_to_tree, tree_to_list, list_from_py

from .errors import (
    WhileError,
    CyclicMacroError,
    MacroNotFoundError,
    EncodingError,
    ScopeError,
    EvaluationError,
)

from .syntax import (
    Name,
    Var,
    Lit,
    Cons,
    Hd,
    Tl,
    IsEq,
    Assign,
    While,
    IfElse,
    Program,
    names_expression,
    names_command,
    names_block,
    names_program,
    validate_program,
    show_expression,
    show_command,
    show_block,
    show_program,
)

from .sugar import (
    SuCompos,
    SuAssign,
    SuWhile,
    SuIfElse,
    SuMacro,
    SuSwitch,
    SuProgram,
    sequence,
    macro_names,
    macro_names_program,
)

from .macros import check_acyclic, find_cycle, load_macro_closure
from .desugar import desugar_command, desugar_program, compile_program
from .program_registry import ProgramRegistry

from .encoding import (
    name_table,
    encode_expression,
    encode_command,
    encode_block,
    encode_program,
)

from .pretty import (
    DisplayMode,
    render_tree,
    show_int_tree,
    show_int_list_tree,
    show_nested_int_list,
    show_nested_atom_int_list,
    decode_expression_text,
    decode_command_text,
    decode_block_text,
    decode_program_text,
)

from .engine.evaluator import Evaluator


__all__ = [
    # trees
    "Tree",
    "NIL",
    "TRUE",
    "cons",
    "show_tree",

    # numbers, lists, atoms
    "int_to_tree",
    "tree_to_int",
    "list_to_tree",
    "tree_to_list",
    "list_from_py",
    "Atom",
    "atom_to_int",
    "int_to_atom",

    # errors
    "WhileError",
    "CyclicMacroError",
    "MacroNotFoundError",
    "EncodingError",
    "ScopeError",
    "EvaluationError",

    # core syntax
    "Name",
    "Var",
    "Lit",
    "Cons",
    "Hd",
    "Tl",
    "IsEq",
    "Assign",
    "While",
    "IfElse",
    "Program",
    "names_expression",
    "names_command",
    "names_block",
    "names_program",
    "validate_program",
    "show_expression",
    "show_command",
    "show_block",
    "show_program",

    # sugared syntax
    "SuCompos",
    "SuAssign",
    "SuWhile",
    "SuIfElse",
    "SuMacro",
    "SuSwitch",
    "SuProgram",
    "sequence",
    "macro_names",
    "macro_names_program",

    # front end
    "check_acyclic",
    "find_cycle",
    "load_macro_closure",
    "desugar_command",
    "desugar_program",
    "compile_program",
    "ProgramRegistry",

    # program-as-data
    "name_table",
    "encode_expression",
    "encode_command",
    "encode_block",
    "encode_program",
    "DisplayMode",
    "render_tree",
    "show_int_tree",
    "show_int_list_tree",
    "show_nested_int_list",
    "show_nested_atom_int_list",
    "decode_expression_text",
    "decode_command_text",
    "decode_block_text",
    "decode_program_text",

    # evaluator
    "Evaluator",
]
