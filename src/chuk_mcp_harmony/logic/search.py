"""
Search driver - ordered depth-first enumeration of solutions.

run() starts from an empty state, applies the goal, grounds every
queried variable (enumerating its domain when propagation left it open)
and reads back one tuple of values per solution.

Same goal, same branch order, same output order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from itertools import islice
from typing import Any

from chuk_mcp_harmony.core.pitch import DEFAULT_SPACE, PitchSpace
from chuk_mcp_harmony.logic.goals import Goal, conjoin, label
from chuk_mcp_harmony.logic.state import SolverState

logger = logging.getLogger(__name__)

# Pass as limit to exhaust the search space
ALL = None


def run_iter(
    goal: Goal,
    variables: Sequence[Any],
    space: PitchSpace = DEFAULT_SPACE,
) -> Iterator[tuple[Any, ...]]:
    """
    Lazily yield one resolved tuple per solution.

    Args:
        goal: The goal to solve
        variables: Terms to read back, in output order
        space: Pitch space bounding every absolute pitch

    Yields:
        Tuples with one ground value per queried variable
    """
    variables = tuple(variables)
    for state in conjoin(goal, label(*variables))(SolverState.empty(space)):
        yield tuple(state.walk(v) for v in variables)


def run(
    goal: Goal,
    variables: Sequence[Any],
    limit: int | None = ALL,
    space: PitchSpace = DEFAULT_SPACE,
) -> list[tuple[Any, ...]]:
    """
    Solve a goal and return its solutions in order.

    Args:
        goal: The goal to solve
        variables: Terms to read back, in output order
        limit: Maximum number of solutions, or ALL
        space: Pitch space bounding every absolute pitch

    Returns:
        List of tuples, one per solution; empty when unsatisfiable

    Example:
        pitch = lvar()
        run(noteo("C", 4, pitch), [pitch])  # [(60,)]
    """
    if limit is not None and limit < 0:
        raise ValueError(f"Limit must be >= 0, got {limit}")

    solutions = list(islice(run_iter(goal, variables, space), limit))
    logger.debug(f"Query produced {len(solutions)} solution(s) (limit={limit})")
    return solutions
