"""
Error taxonomy for harmony queries.

Two families:
- Query errors: the caller named something that does not exist
  (pitch class, interval, chord quality). Raised immediately.
- Branch failures: a constraint cannot hold on the current search branch.
  The goal layer catches these and prunes the branch.
"""

from __future__ import annotations


class HarmonyError(Exception):
    """Base class for all harmony errors."""


class UnknownPitchClass(HarmonyError, ValueError):
    """A pitch class name is absent from the pitch class table."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown pitch class: {name}")
        self.name = name


class UnknownInterval(HarmonyError, ValueError):
    """An interval name is absent from the interval table."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown interval: {name}")
        self.name = name


class UnknownChordQuality(HarmonyError, ValueError):
    """A chord quality name is not a known triad quality."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown chord quality: {name}")
        self.name = name


class BranchFailure(HarmonyError):
    """A constraint cannot be satisfied on the current search branch."""


class OutOfDomain(BranchFailure):
    """An absolute pitch (or bound value) falls outside its admissible domain."""


class UnificationConflict(BranchFailure):
    """Two terms resolve to different concrete values."""


class EmptyDomain(BranchFailure):
    """Propagation narrowed a variable's domain to nothing."""
