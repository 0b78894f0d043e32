"""
Logic variables and unification.

A substitution maps variables to values or to other variables. Chains
are resolved by walking. Terms are flat (variables or atomic values),
so unification never needs an occurs check: both sides are walked to
their terminals before anything is bound.
"""

from __future__ import annotations

import itertools
from collections.abc import Mapping
from typing import Any

from chuk_mcp_harmony.errors import UnificationConflict

_counter = itertools.count()


class LogicVar:
    """
    An unresolved placeholder in a query.

    Variables carry no value of their own; two distinct variables are
    only equal once a substitution binds one to the other. Identity is
    the variable.
    """

    __slots__ = ("_id", "name")

    def __init__(self, name: str | None = None) -> None:
        self._id = next(_counter)
        self.name = name

    def __repr__(self) -> str:
        return f"_{self.name or self._id}"


Substitution = Mapping[LogicVar, Any]


def lvar(name: str | None = None) -> LogicVar:
    """Create a fresh logic variable."""
    return LogicVar(name)


def lvars(count: int) -> tuple[LogicVar, ...]:
    """Create several fresh logic variables."""
    return tuple(LogicVar() for _ in range(count))


def is_var(term: object) -> bool:
    return isinstance(term, LogicVar)


def walk(term: Any, substitution: Substitution) -> Any:
    """Follow bindings until reaching a value or an unbound variable."""
    while isinstance(term, LogicVar) and term in substitution:
        term = substitution[term]
    return term


def unify(a: Any, b: Any, substitution: Substitution) -> Substitution:
    """
    Make two terms equal.

    Returns the same substitution object when nothing needed binding,
    otherwise a new extended copy.

    Raises:
        UnificationConflict: if both sides resolve to different values
    """
    a = walk(a, substitution)
    b = walk(b, substitution)

    if a is b:
        return substitution
    if isinstance(a, LogicVar):
        return {**substitution, a: b}
    if isinstance(b, LogicVar):
        return {**substitution, b: a}
    if a == b:
        return substitution
    raise UnificationConflict(f"{a!r} != {b!r}")
