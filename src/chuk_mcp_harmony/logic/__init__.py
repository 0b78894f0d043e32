"""
Relational solver.

Logic variables, unification, finite integer domains and goal
combinators, driven by an ordered depth-first search:
- terms: LogicVar, walk, unify
- domain: Domain (immutable integer sets)
- state: SolverState, restrict, assert_difference, enumerate_domain
- goals: succeed, fail, eq, in_domain, difference, conjoin, disjoin, label
- search: run, run_iter
"""

from chuk_mcp_harmony.logic.domain import Domain
from chuk_mcp_harmony.logic.goals import (
    Goal,
    conde,
    conjoin,
    difference,
    disjoin,
    eq,
    fail,
    in_domain,
    label,
    project,
    succeed,
)
from chuk_mcp_harmony.logic.search import ALL, run, run_iter
from chuk_mcp_harmony.logic.state import (
    DomainStore,
    SolverState,
    assert_difference,
    bind,
    enumerate_domain,
    restrict,
)
from chuk_mcp_harmony.logic.terms import LogicVar, is_var, lvar, lvars, unify, walk

__all__ = [
    # Terms
    "LogicVar",
    "lvar",
    "lvars",
    "is_var",
    "walk",
    "unify",
    # Domains
    "Domain",
    "DomainStore",
    "SolverState",
    "bind",
    "restrict",
    "assert_difference",
    "enumerate_domain",
    # Goals
    "Goal",
    "succeed",
    "fail",
    "eq",
    "in_domain",
    "difference",
    "conjoin",
    "disjoin",
    "conde",
    "project",
    "label",
    # Search
    "ALL",
    "run",
    "run_iter",
]
