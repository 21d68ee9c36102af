"""
Pytest configuration for hwhile tests.

Provides:
- Hypothesis configuration for deterministic fuzzing
- Shared test utilities (name builders, compile-and-run helper)
"""

import os

from hwhile import (
    Evaluator,
    Name,
    NIL,
    ProgramRegistry,
    SuAssign,
    SuMacro,
    SuProgram,
    Var,
    Lit,
    compile_program,
    sequence,
)

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# - print_blob=True makes failures easy to reproduce
# - "ci" derandomizes so CI runs are repeatable

try:
    from hypothesis import settings

    settings.register_profile(
        "default",
        print_blob=True,
        derandomize=False,
    )

    settings.register_profile(
        "ci",
        print_blob=True,
        derandomize=True,
    )

    # Load profile from HYPOTHESIS_PROFILE env var, default to "default"
    settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))

except ImportError:
    pass  # hypothesis not installed, skip configuration


# =============================================================================
# Shared Test Utilities
# =============================================================================

def names_in(file: str):
    """Return a builder for names declared in *file*."""
    def build(text: str) -> Name:
        return Name(file, text)
    return build


def caller(name: str, *targets: str) -> SuProgram:
    """A program whose only job is to call each of *targets* as a macro."""
    n = names_in(name)
    if targets:
        body = sequence(*[SuMacro(n(f"R{i}"), t, Var(n("X"))) for i, t in enumerate(targets)])
    else:
        body = SuAssign(n("Y"), Lit(NIL))
    return SuProgram(name, n("X"), body, Var(n("X")))


def run_sugared(program: SuProgram, value=NIL, macros=(), max_steps=100_000):
    """
    Compile *program* (with *macros* available) and run it on *value*.

    Returns:
        (output tree, evaluator) so tests can inspect the final store.
    """
    registry = ProgramRegistry([program, *macros])
    core = compile_program(program, registry)
    ev = Evaluator(max_steps=max_steps)
    return ev.run(core, value), ev
