"""
Note relation - pitch class, octave and absolute pitch.

noteo relates the three fields of a note under PitchSpace conversion.
It works in any direction: whichever fields are bound determine the
rest, and free fields are enumerated within the query's pitch space.
"""

from __future__ import annotations

from typing import Any

from chuk_mcp_harmony.core.pitch import PitchClass, PitchSpace
from chuk_mcp_harmony.errors import OutOfDomain, UnknownPitchClass
from chuk_mcp_harmony.logic import (
    Goal,
    SolverState,
    conjoin,
    disjoin,
    enumerate_domain,
    eq,
    fail,
    is_var,
    lvar,
    project,
)


def pitch_class_term(term: Any) -> Any:
    """
    Normalize a pitch class argument.

    Names and aliases resolve to their canonical PitchClass here, at the
    query boundary, so an unknown name fails the whole call.
    """
    if term is None:
        return lvar()
    if is_var(term) or isinstance(term, PitchClass):
        return term
    if isinstance(term, str):
        return PitchClass.parse(term)
    raise UnknownPitchClass(term)


def _place(
    pitch_class: Any,
    octave: Any,
    absolute_pitch: Any,
    candidates: list[tuple[PitchClass, int]],
    space: PitchSpace,
) -> Goal:
    """One alternative per (pitch class, octave) candidate inside the space."""
    alternatives = []
    for candidate_class, candidate_octave in candidates:
        try:
            pitch = space.pitch_to_absolute(candidate_class, candidate_octave)
        except OutOfDomain:
            continue
        alternatives.append(
            conjoin(
                eq(pitch_class, candidate_class),
                eq(octave, candidate_octave),
                eq(absolute_pitch, pitch),
            )
        )
    return disjoin(*alternatives)


def noteo(pitch_class: Any = None, octave: Any = None, absolute_pitch: Any = None) -> Goal:
    """
    Relate a pitch class, an octave and an absolute pitch.

    Args:
        pitch_class: PitchClass, name or alias ('C', 'Db', 'Bs'), or a variable
        octave: Octave number or a variable
        absolute_pitch: Absolute pitch (C4 = 60) or a variable

    None stands for a fresh variable.

    Cases:
        absolute pitch bound      -> one solution (canonical class, octave)
        class and octave bound    -> one solution
        only class bound          -> one solution per octave in the space
        only octave bound         -> one solution per pitch class
        nothing bound             -> every pitch in the space, ascending

    Raises:
        UnknownPitchClass: if a pitch class name is not in the table
    """
    pitch_class = pitch_class_term(pitch_class)
    octave = lvar() if octave is None else octave
    absolute_pitch = lvar() if absolute_pitch is None else absolute_pitch

    def build(state: SolverState) -> Goal:
        space = state.space
        pc = state.walk(pitch_class)
        oc = state.walk(octave)
        ap = state.walk(absolute_pitch)

        if not is_var(ap):
            try:
                derived_class, derived_octave = space.absolute_to_pitch(ap)
            except OutOfDomain:
                return fail
            return conjoin(eq(pc, derived_class), eq(oc, derived_octave))

        if not is_var(pc) and not is_var(oc):
            return _place(pc, oc, ap, [(pc, oc)], space)

        if not is_var(pc):
            return _place(pc, oc, ap, [(pc, o) for o in space.octaves], space)

        if not is_var(oc):
            return _place(pc, oc, ap, [(c, oc) for c in PitchClass], space)

        candidates = [space.absolute_to_pitch(p) for p in enumerate_domain(state, ap)]
        return _place(pc, oc, ap, candidates, space)

    return project(build)
