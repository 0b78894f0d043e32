"""
Finite integer domains.

A Domain is the immutable set of values a variable may still take.
Closed intervals are built with Domain.interval; arbitrary sets with
Domain.of. Iteration is always ascending.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Domain:
    """Admissible integer values for one variable."""

    values: frozenset[int]

    @classmethod
    def interval(cls, lowest: int, highest: int) -> Domain:
        """Closed interval [lowest, highest]."""
        return cls(frozenset(range(lowest, highest + 1)))

    @classmethod
    def of(cls, values: Iterable[int]) -> Domain:
        return cls(frozenset(values))

    @property
    def is_empty(self) -> bool:
        return not self.values

    @property
    def is_singleton(self) -> bool:
        return len(self.values) == 1

    @property
    def min(self) -> int:
        return min(self.values)

    @property
    def max(self) -> int:
        return max(self.values)

    def intersect(self, other: Domain) -> Domain:
        return Domain(self.values & other.values)

    def filter(self, predicate: Callable[[int], bool]) -> Domain:
        return Domain(frozenset(v for v in self.values if predicate(v)))

    def shift(self, offset: int) -> Domain:
        """Every value moved by offset."""
        return Domain(frozenset(v + offset for v in self.values))

    def reflect(self, pivot: int) -> Domain:
        """Every value v mapped to pivot - v."""
        return Domain(frozenset(pivot - v for v in self.values))

    def __contains__(self, value: object) -> bool:
        return value in self.values

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        if not self.values:
            return "Domain()"
        if len(self.values) == self.max - self.min + 1:
            return f"Domain({self.min}..{self.max})"
        return f"Domain({sorted(self.values)})"
