# hwhile/desugar.py
"""
Desugaring: sugared syntax -> pure while syntax (assignment and while).

Conditionals are translated with two stacks so they nest. For
``if E { C1 } else { C2 }`` the emitted code is:

    +NOT+EXP+STACK+ := cons (cons nil nil) +NOT+EXP+STACK+;
    +EXP+VAL+STACK+ := cons E +EXP+VAL+STACK+;
    while hd +EXP+VAL+STACK+ {
        +EXP+VAL+STACK+ := cons nil (tl +EXP+VAL+STACK+);
        +NOT+EXP+STACK+ := cons nil (tl +NOT+EXP+STACK+);
        C1
    };
    while hd +NOT+EXP+STACK+ {
        +NOT+EXP+STACK+ := cons nil (tl +NOT+EXP+STACK+);
        C2
    };
    +NOT+EXP+STACK+ := tl +NOT+EXP+STACK+;
    +EXP+VAL+STACK+ := tl +EXP+VAL+STACK+

Each loop body clears its own stack top, so each runs at most once.
Every conditional pushes and pops exactly one frame per stack, so
conditionals nested inside C1 or C2 are balanced before the outer pops.
The stack names contain ``+`` and cannot be written in source programs.

Switches fold right into nested conditionals on ``scrutinee = case``,
with the default as the innermost else branch. Macro calls are inlined:

    X := <f> E    ->    r := E; body; X := w
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence, Tuple

from hwhile.core.tree import NIL, TRUE
from hwhile.errors import CyclicMacroError, MacroNotFoundError
from hwhile.macros import Loader, find_cycle, load_macro_closure
from hwhile.sugar import (
    SuAssign,
    SuCommand,
    SuCompos,
    SuIfElse,
    SuMacro,
    SuProgram,
    SuSwitch,
    SuWhile,
)
from hwhile.syntax import (
    Assign,
    Block,
    Cons,
    Expression,
    Hd,
    IsEq,
    Lit,
    Name,
    Program,
    Tl,
    Var,
    While,
    validate_program,
)

logger = logging.getLogger(__name__)

EXP_STACK = "+EXP+VAL+STACK+"
NOT_EXP_STACK = "+NOT+EXP+STACK+"
WRITE_VAR = "+WRITE+"


# ---------------------------------------------------------------------------
# Conditionals and switches
# ---------------------------------------------------------------------------

def translate_conditional(
    file: str, guard: Expression, then_block: Block, else_block: Block
) -> Block:
    """Pure while code for ``if guard then_block else else_block``."""
    exp = Name(file, EXP_STACK)
    not_exp = Name(file, NOT_EXP_STACK)
    nil = Lit(NIL)

    def pop_replace(stack: Name) -> Assign:
        return Assign(stack, Cons(nil, Tl(Var(stack))))

    return (
        Assign(not_exp, Cons(Lit(TRUE), Var(not_exp))),
        Assign(exp, Cons(guard, Var(exp))),
        While(Hd(Var(exp)), (pop_replace(exp), pop_replace(not_exp)) + tuple(then_block)),
        While(Hd(Var(not_exp)), (pop_replace(not_exp),) + tuple(else_block)),
        Assign(not_exp, Tl(Var(not_exp))),
        Assign(exp, Tl(Var(exp))),
    )


def translate_switch(
    file: str,
    scrutinee: Expression,
    cases: Sequence[Tuple[Expression, Block]],
    default: Block,
) -> Block:
    """Fold switch arms into nested conditionals; earlier arms win."""
    result = tuple(default)
    for case, block in reversed(cases):
        result = translate_conditional(file, IsEq(scrutinee, case), block, result)
    return result


# ---------------------------------------------------------------------------
# Commands and programs
# ---------------------------------------------------------------------------

def expand_macro(
    call: SuMacro, macros: Mapping[str, SuProgram], file: str
) -> Block:
    """
    Inline the program called by *call*.

    The macro's variables are not reset, so a second call starts from
    whatever the first call left in them.
    """
    macro = macros.get(call.file)
    if macro is None:
        raise MacroNotFoundError(call.file, path=file)
    body = desugar_command(macro.body, macros, file)
    return (
        (Assign(macro.read, call.expr),)
        + body
        + (Assign(call.name, macro.write),)
    )


def desugar_command(
    command: SuCommand, macros: Mapping[str, SuProgram], file: str
) -> Block:
    """
    Rewrite a sugared command into a block of pure commands.

    Args:
        command: Sugared command to rewrite.
        macros: Every program reachable by macro calls, by name.
        file: Program whose stack variables the conditionals use.

    Raises:
        MacroNotFoundError: if a macro target is missing from *macros*.
    """
    if isinstance(command, SuCompos):
        return desugar_command(command.first, macros, file) + desugar_command(
            command.second, macros, file
        )
    if isinstance(command, SuAssign):
        return (Assign(command.name, command.expr),)
    if isinstance(command, SuWhile):
        return (While(command.guard, desugar_command(command.body, macros, file)),)
    if isinstance(command, SuIfElse):
        return translate_conditional(
            file,
            command.guard,
            desugar_command(command.then_branch, macros, file),
            desugar_command(command.else_branch, macros, file),
        )
    if isinstance(command, SuMacro):
        return expand_macro(command, macros, file)
    if isinstance(command, SuSwitch):
        return translate_switch(
            file,
            command.scrutinee,
            [(case, desugar_command(arm, macros, file)) for case, arm in command.cases],
            desugar_command(command.default, macros, file),
        )
    raise TypeError(f"unknown sugared command {command!r}")


def desugar_program(
    program: SuProgram, macros: Mapping[str, SuProgram] | None = None
) -> Program:
    """
    Desugar a program whose macro closure is already loaded and acyclic.

    A write expression that is a variable of the program's own file
    becomes the write variable; any other expression is assigned to a
    reserved ``+WRITE+`` variable at the end of the block.
    """
    if macros is None:
        macros = {}
    logger.debug("desugaring %s", program.name)
    block = desugar_command(program.body, macros, program.name)
    write = program.write
    if isinstance(write, Var) and write.name.file == program.name:
        write_var = write.name
    else:
        write_var = Name(program.name, WRITE_VAR)
        block = block + (Assign(write_var, write),)
    return Program(program.name, program.read, block, write_var)


def compile_program(root: SuProgram, loader: Loader) -> Program:
    """
    Full front end: load the macro closure, reject cycles, desugar.

    Args:
        root: The parsed program to compile.
        loader: Mapping or callable giving the parsed program for a name
            (e.g. a ProgramRegistry).

    Raises:
        CyclicMacroError: if macro calls from *root* are recursive.
        MacroNotFoundError: if the loader cannot supply a target.
        ScopeError: if the root's read/write variables are foreign.
    """
    macros = load_macro_closure(root, loader)
    cycle = find_cycle(macros, roots=[root.name])
    if cycle is not None:
        raise CyclicMacroError(cycle, path=root.name)
    return validate_program(desugar_program(root, macros))
