"""
Exceptions raised by automaton operations.

Every error is local to the call that raised it: the automaton is validated
before it is mutated, so a failed call leaves it exactly as it was.
"""

from typing import Any


class HybridAutomatonError(Exception):
    """Base class for all errors raised by the hybrid automata library."""


class InvalidStateError(HybridAutomatonError, ValueError):
    """An operation referenced a state that is not live in the automaton."""

    def __init__(self, state: Any, nstates: int):
        self.state = state
        self.nstates = nstates
        super().__init__(
            f"Invalid state {state!r}, valid states are 1..{nstates}",
        )


class TransitionNotFoundError(HybridAutomatonError, LookupError):
    """A transition handle does not resolve to a live transition."""

    def __init__(self, transition: Any):
        self.transition = transition
        super().__init__(f"Transition {transition} is not in the automaton")


class UnsupportedOperationError(HybridAutomatonError, NotImplementedError):
    """The automaton variant does not implement the requested operation."""

    def __init__(self, operation: str, automaton_type: type):
        self.operation = operation
        self.automaton_type = automaton_type
        super().__init__(
            f"{automaton_type.__name__} does not support {operation}",
        )
