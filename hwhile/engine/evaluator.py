# hwhile/engine/evaluator.py
"""
Reference evaluator for core While programs.

This exists to observe what desugared programs do; it is not a
production runtime. Semantics:

    * every variable starts as nil
    * hd nil = tl nil = nil
    * E = F  is <nil.nil> when structurally equal, nil otherwise
    * while E B  repeats B while E is not nil

Feature flag: HWHILE_MAX_STEPS=<n> sets the default step budget
(0, the default, means unbounded).
"""

from __future__ import annotations

import os
from typing import Dict, Optional

from hwhile.core.tree import NIL, TRUE, Tree
from hwhile.errors import EvaluationError
from hwhile.syntax import (
    Assign,
    Block,
    Command,
    Cons,
    Expression,
    Hd,
    IfElse,
    IsEq,
    Lit,
    Name,
    Program,
    Tl,
    Var,
    While,
)

DEFAULT_MAX_STEPS = int(os.environ.get("HWHILE_MAX_STEPS", "0"))


class Evaluator:
    """Executes core programs over an explicit variable store."""

    def __init__(self, max_steps: Optional[int] = None):
        if max_steps is None:
            max_steps = DEFAULT_MAX_STEPS
        self.max_steps = max_steps
        self.steps = 0
        self.store: Dict[Name, Tree] = {}

    # ----------------------------------------------------------------------
    # Core API
    # ----------------------------------------------------------------------
    def run(self, program: Program, value: Tree) -> Tree:
        """Bind *value* to the read variable, run the block, return the write variable."""
        self.steps = 0
        self.store = {program.read: value}
        self.exec_block(program.block)
        return self.lookup(program.write)

    def lookup(self, name: Name) -> Tree:
        return self.store.get(name, NIL)

    # ----------------------------------------------------------------------
    # Expressions
    # ----------------------------------------------------------------------
    def eval(self, expr: Expression) -> Tree:
        if isinstance(expr, Var):
            return self.lookup(expr.name)
        if isinstance(expr, Lit):
            return expr.value
        if isinstance(expr, Cons):
            return Tree(self.eval(expr.left), self.eval(expr.right))
        if isinstance(expr, Hd):
            return self.eval(expr.arg).head()
        if isinstance(expr, Tl):
            return self.eval(expr.arg).tail()
        if isinstance(expr, IsEq):
            return TRUE if self.eval(expr.left) == self.eval(expr.right) else NIL
        raise TypeError(f"unknown expression {expr!r}")

    # ----------------------------------------------------------------------
    # Commands
    # ----------------------------------------------------------------------
    def exec_block(self, block: Block) -> None:
        for command in block:
            self.exec_command(command)

    def exec_command(self, command: Command) -> None:
        self._tick()
        if isinstance(command, Assign):
            self.store[command.name] = self.eval(command.expr)
        elif isinstance(command, While):
            while self.eval(command.guard).is_pair():
                self.exec_block(command.body)
                self._tick()
        elif isinstance(command, IfElse):
            if self.eval(command.guard).is_pair():
                self.exec_block(command.then_block)
            else:
                self.exec_block(command.else_block)
        else:
            raise TypeError(f"unknown command {command!r}")

    def _tick(self) -> None:
        self.steps += 1
        if self.max_steps and self.steps > self.max_steps:
            raise EvaluationError(f"step budget of {self.max_steps} exhausted")
