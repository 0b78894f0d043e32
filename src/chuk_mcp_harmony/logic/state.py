"""
Solver state - substitution plus finite domain store.

A SolverState is threaded through one search branch. Every operation
returns a new state and leaves its input untouched, so a disjunction can
hand the same incoming state to each alternative.

The store holds:
- domains: admissible values per variable
- constraints: suspended differences (a - b = d) that are not yet ground

Propagation is bound-checked arithmetic only: once two of a, b, d are
ground the third is derived; with fewer ground terms the domains of the
free terms are narrowed against each other and the constraint stays
suspended until more is known.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Union

from chuk_mcp_harmony.core.pitch import DEFAULT_SPACE, PitchSpace
from chuk_mcp_harmony.errors import EmptyDomain, OutOfDomain, UnificationConflict
from chuk_mcp_harmony.logic.domain import Domain
from chuk_mcp_harmony.logic.terms import LogicVar, Substitution, unify, walk

Allowed = Union[Domain, Callable[[int], bool], Iterable[int]]


@dataclass(frozen=True)
class Difference:
    """Suspended constraint: minuend - subtrahend = distance."""

    minuend: Any
    subtrahend: Any
    distance: Any


@dataclass(frozen=True)
class DomainStore:
    """Per-variable domains and suspended constraints."""

    domains: Mapping[LogicVar, Domain] = field(default_factory=dict)
    constraints: tuple[Difference, ...] = ()

    def get(self, var: LogicVar) -> Domain | None:
        return self.domains.get(var)


@dataclass(frozen=True)
class SolverState:
    """
    Substitution, domain store and the pitch space of the query.

    Created empty per query; extended on every successful constraint.
    """

    substitution: Substitution = field(default_factory=dict)
    store: DomainStore = field(default_factory=DomainStore)
    space: PitchSpace = DEFAULT_SPACE

    @classmethod
    def empty(cls, space: PitchSpace = DEFAULT_SPACE) -> SolverState:
        return cls(space=space)

    def walk(self, term: Any) -> Any:
        """Resolve a term to its value or its unbound terminal variable."""
        return walk(term, self.substitution)

    def domain_of(self, term: Any) -> Domain | None:
        """Current domain of an unbound variable (None if unconstrained or ground)."""
        term = self.walk(term)
        if isinstance(term, LogicVar):
            return self.store.get(term)
        return None


def _space_domain(state: SolverState) -> Domain:
    return Domain.interval(*state.space.bound)


def _as_domain(allowed: Allowed, base: Domain) -> Domain:
    if isinstance(allowed, Domain):
        return allowed
    if callable(allowed):
        return base.filter(allowed)
    return Domain.of(allowed)


def _admits(allowed: Allowed, value: Any) -> bool:
    if isinstance(allowed, Domain):
        return value in allowed
    if callable(allowed):
        return bool(allowed(value))
    return value in set(allowed)


def _with_domains(state: SolverState, domains: Mapping[LogicVar, Domain]) -> SolverState:
    return replace(state, store=replace(state.store, domains=domains))


def _bind(state: SolverState, u: Any, v: Any) -> SolverState:
    u = state.walk(u)
    v = state.walk(v)
    substitution = unify(u, v, state.substitution)
    if substitution is state.substitution:
        return state

    # unify binds its first argument when it is a variable
    var, target = (u, v) if isinstance(u, LogicVar) else (v, u)
    domains = state.store.domains
    domain = domains.get(var)
    if domain is not None:
        if isinstance(target, LogicVar):
            other = domains.get(target)
            merged = domain if other is None else domain.intersect(other)
            if merged.is_empty:
                raise EmptyDomain(f"{var!r} and {target!r} share no values")
            domains = {**domains, target: merged}
        elif target not in domain:
            raise OutOfDomain(f"{target!r} not in {domain!r}")

    return replace(state, substitution=substitution, store=replace(state.store, domains=domains))


def _restrict(state: SolverState, term: Any, allowed: Allowed) -> SolverState:
    term = state.walk(term)
    if not isinstance(term, LogicVar):
        if not _admits(allowed, term):
            raise OutOfDomain(f"{term!r} not admitted")
        return state

    current = state.store.get(term)
    narrowed = _as_domain(allowed, current if current is not None else _space_domain(state))
    if current is not None:
        narrowed = current.intersect(narrowed)
    if narrowed.is_empty:
        raise EmptyDomain(f"no values left for {term!r}")
    if narrowed == current:
        return state

    state = _with_domains(state, {**state.store.domains, term: narrowed})
    if narrowed.is_singleton:
        state = _bind(state, term, narrowed.min)
    return state


def _narrow(state: SolverState, term: Any, derived: Domain | None) -> SolverState:
    if derived is None:
        return state
    return _restrict(state, term, derived)


def _apply(state: SolverState, constraint: Difference) -> tuple[SolverState, bool]:
    """Propagate one difference; the flag reports whether it is fully ground."""
    a = state.walk(constraint.minuend)
    b = state.walk(constraint.subtrahend)
    d = state.walk(constraint.distance)
    ground_a = not isinstance(a, LogicVar)
    ground_b = not isinstance(b, LogicVar)
    ground_d = not isinstance(d, LogicVar)

    if ground_a and ground_b and ground_d:
        if a - b != d:
            raise UnificationConflict(f"{a} - {b} != {d}")
        return state, True
    if ground_a and ground_b:
        return _bind(state, d, a - b), True
    if ground_a and ground_d:
        return _bind(state, b, a - d), True
    if ground_b and ground_d:
        return _bind(state, a, b + d), True

    domain_a = state.domain_of(a)
    domain_b = state.domain_of(b)
    domain_d = state.domain_of(d)
    if ground_d:
        state = _narrow(state, a, domain_b.shift(d) if domain_b is not None else None)
        state = _narrow(state, b, domain_a.shift(-d) if domain_a is not None else None)
    elif ground_a:
        state = _narrow(state, b, domain_d.reflect(a) if domain_d is not None else None)
        state = _narrow(state, d, domain_b.reflect(a) if domain_b is not None else None)
    elif ground_b:
        state = _narrow(state, a, domain_d.shift(b) if domain_d is not None else None)
        state = _narrow(state, d, domain_a.shift(-b) if domain_a is not None else None)
    return state, False


def _propagate(state: SolverState) -> SolverState:
    """Re-run suspended constraints until nothing changes."""
    while True:
        substitution = state.substitution
        domains = state.store.domains
        pending = []
        for constraint in state.store.constraints:
            state, done = _apply(state, constraint)
            if not done:
                pending.append(constraint)
        state = replace(state, store=replace(state.store, constraints=tuple(pending)))
        if state.substitution is substitution and state.store.domains is domains:
            return state


def bind(state: SolverState, u: Any, v: Any) -> SolverState:
    """
    Unify two terms and propagate.

    Raises:
        UnificationConflict: if the terms hold different values
        OutOfDomain: if a value falls outside the variable's domain
        EmptyDomain: if merging two variables leaves no common value
    """
    return _propagate(_bind(state, u, v))


def restrict(state: SolverState, term: Any, allowed: Allowed) -> SolverState:
    """
    Intersect a term's domain with a Domain, a set of values or a predicate.

    A predicate is applied to the term's current domain, or to the pitch
    space when the term has none yet.

    Raises:
        OutOfDomain: if a ground term is not admitted
        EmptyDomain: if no admissible value remains
    """
    return _propagate(_restrict(state, term, allowed))


def assert_difference(state: SolverState, a: Any, b: Any, distance: Any) -> SolverState:
    """
    Constrain a - b = distance.

    With two of the three terms ground, the third is derived and bound.
    Otherwise the free terms are narrowed jointly and the constraint is
    suspended until a later binding grounds it.
    """
    constraint = Difference(a, b, distance)
    store = replace(state.store, constraints=(*state.store.constraints, constraint))
    return _propagate(replace(state, store=store))


def enumerate_domain(state: SolverState, term: Any) -> list[Any]:
    """
    Candidate values for a term, ascending.

    Ground terms yield themselves; unconstrained variables range over
    the pitch space.
    """
    term = state.walk(term)
    if not isinstance(term, LogicVar):
        return [term]
    domain = state.store.get(term)
    if domain is None:
        domain = _space_domain(state)
    return list(domain)
