"""
Goals and goal combinators.

A goal maps one incoming SolverState to an iterator of outgoing states:
zero states means the goal failed on that branch, several states are
alternative solutions. Iteration is lazy, so a caller that stops early
never computes the remaining alternatives.

Primitive goals (eq, in_domain, difference) lift a state operation and
turn any BranchFailure it raises into zero outgoing states.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from functools import reduce
from typing import Any

from chuk_mcp_harmony.errors import BranchFailure
from chuk_mcp_harmony.logic.state import (
    Allowed,
    SolverState,
    assert_difference,
    bind,
    enumerate_domain,
    restrict,
)

logger = logging.getLogger(__name__)

Goal = Callable[[SolverState], Iterator[SolverState]]


def succeed(state: SolverState) -> Iterator[SolverState]:
    """Goal that passes its state through unchanged."""
    yield state


def fail(state: SolverState) -> Iterator[SolverState]:
    """Goal with no solutions."""
    return iter(())


def _lift(operation: Callable[..., SolverState], *args: Any) -> Goal:
    def goal(state: SolverState) -> Iterator[SolverState]:
        try:
            result = operation(state, *args)
        except BranchFailure as e:
            logger.debug(f"Pruned branch in {operation.__name__}: {e}")
            return
        yield result

    return goal


def eq(u: Any, v: Any) -> Goal:
    """Goal that unifies two terms."""
    return _lift(bind, u, v)


def in_domain(term: Any, allowed: Allowed) -> Goal:
    """Goal that restricts a term to a Domain, a set of values or a predicate."""
    return _lift(restrict, term, allowed)


def difference(a: Any, b: Any, distance: Any) -> Goal:
    """Goal that constrains a - b = distance."""
    return _lift(assert_difference, a, b, distance)


def conjoin(*goals: Goal) -> Goal:
    """
    All goals must hold on the same branch.

    For each state of the first goal, the remaining goals run on it in
    turn; the first goal's states form the outer loop.
    """
    if not goals:
        return succeed

    def both(first: Goal, second: Goal) -> Goal:
        def goal(state: SolverState) -> Iterator[SolverState]:
            for intermediate in first(state):
                yield from second(intermediate)

        return goal

    return reduce(both, goals)


def disjoin(*goals: Goal) -> Goal:
    """
    Any goal may hold.

    Each alternative runs on the same incoming state; solutions come out
    in declaration order.
    """

    def goal(state: SolverState) -> Iterator[SolverState]:
        for alternative in goals:
            yield from alternative(state)

    return goal


def conde(*clauses: list[Goal] | tuple[Goal, ...]) -> Goal:
    """Disjunction of conjunctions: conde([g1, g2], [g3])."""
    return disjoin(*(conjoin(*clause) for clause in clauses))


def project(build: Callable[[SolverState], Goal]) -> Goal:
    """
    Defer building a goal until the incoming state is known.

    Relations that dispatch on which arguments are bound use this to
    inspect the walked terms before choosing their alternatives.
    """

    def goal(state: SolverState) -> Iterator[SolverState]:
        yield from build(state)(state)

    return goal


def label(*terms: Any) -> Goal:
    """
    Ground each term in order by trying its domain values ascending.

    Terms already ground pass straight through.
    """
    if not terms:
        return succeed
    head, rest = terms[0], terms[1:]

    def goal(state: SolverState) -> Iterator[SolverState]:
        for value in enumerate_domain(state, head):
            yield from conjoin(eq(head, value), label(*rest))(state)

    return goal
