"""
Interval relations.

intervalo holds when two pitches lie a given distance apart in either
direction; aboveo fixes the direction (high is above low). Distances
are given as semitone counts or interval names, resolved once when the
goal is built.
"""

from __future__ import annotations

from typing import Any

from chuk_mcp_harmony.core.interval import Interval, resolve_distance
from chuk_mcp_harmony.logic import (
    Domain,
    Goal,
    SolverState,
    conjoin,
    difference,
    disjoin,
    in_domain,
    is_var,
    lvar,
    project,
)


def distance_term(distance: str | int | Interval | Any) -> Any:
    """Resolve an interval name or count; variables pass through."""
    if distance is None:
        return lvar()
    if is_var(distance):
        return distance
    return resolve_distance(distance)


def _pitch_term(term: Any) -> Any:
    return lvar() if term is None else term


def _within_space(state: SolverState, *pitches: Any) -> Goal:
    pitch_domain = Domain.interval(*state.space.bound)
    return conjoin(*(in_domain(pitch, pitch_domain) for pitch in pitches))


def aboveo(distance: Any, low: Any, high: Any) -> Goal:
    """
    high lies exactly `distance` semitones above low.

    Raises:
        UnknownInterval: if the distance is an unknown name
    """
    distance = distance_term(distance)
    low = _pitch_term(low)
    high = _pitch_term(high)

    def build(state: SolverState) -> Goal:
        return conjoin(
            _within_space(state, low, high),
            in_domain(distance, Domain.interval(0, state.space.span)),
            difference(high, low, distance),
        )

    return project(build)


def intervalo(distance: Any, pitch_a: Any = None, pitch_b: Any = None) -> Goal:
    """
    pitch_a and pitch_b lie `distance` semitones apart.

    Alternatives, in order: pitch_a above pitch_b, then pitch_b above
    pitch_a. A zero distance yields its solution once.

    Args:
        distance: Semitone count, interval name ('major-third', 'M3') or variable
        pitch_a: Absolute pitch or variable
        pitch_b: Absolute pitch or variable

    Raises:
        UnknownInterval: if the distance is an unknown name
    """
    distance = distance_term(distance)
    pitch_a = _pitch_term(pitch_a)
    pitch_b = _pitch_term(pitch_b)

    def build(state: SolverState) -> Goal:
        span = state.space.span
        return conjoin(
            _within_space(state, pitch_a, pitch_b),
            in_domain(distance, Domain.interval(0, span)),
            disjoin(
                difference(pitch_a, pitch_b, distance),
                conjoin(
                    in_domain(distance, Domain.interval(1, span)),
                    difference(pitch_b, pitch_a, distance),
                ),
            ),
        )

    return project(build)
