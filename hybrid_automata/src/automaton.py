"""
Abstract automaton interface for hybrid systems.

An automaton is the discrete part of a hybrid system: its states are the modes
of the system and its transitions are the discrete events between modes.
Algorithms on hybrid systems only use the operations defined by
AbstractAutomaton, so any concrete automaton can back a HybridSystem.

The module level functions mirror the methods so that algorithms can be
written as ``nstates(A)`` as well as ``A.nstates()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from numbers import Integral
from typing import Any, Callable, Hashable, Iterable, Iterator

from .errors import UnsupportedOperationError


class TransitionView:
    """
    Lazy, restartable view over a collection of transitions.

    Each call to ``iter`` walks the backing structure again, so a view stays
    current as long as it is not iterated while its automaton is mutated.
    Take a snapshot with ``list(view)`` before mutating.
    """

    def __init__(self, iterate: Callable[[], Iterator[Any]], count: Callable[[], int]):
        self._iterate = iterate
        self._count = count

    def __iter__(self) -> Iterator[Any]:
        return self._iterate()

    def __len__(self) -> int:
        return self._count()

    def __contains__(self, transition: Any) -> bool:
        return any(t == transition for t in self._iterate())

    def __repr__(self) -> str:
        return f"TransitionView({list(self._iterate())})"


class AbstractAutomaton(ABC):
    """Abstract type for a hybrid automaton.

    States are the integers 1..nstates(). The type of the transition handles
    depends on the implementation, see transition_type().
    """

    @abstractmethod
    def states(self) -> Iterable[int]:
        """Returns an iterable over the states of the automaton."""

    def modes(self) -> Iterable[int]:
        """Alias of states()."""
        return self.states()

    @abstractmethod
    def nstates(self) -> int:
        """Returns the number of states of the automaton."""

    def nmodes(self) -> int:
        """Alias of nstates()."""
        return self.nstates()

    def has_state(self, state: Any) -> bool:
        """Returns True if ``state`` is a live state of the automaton."""
        return isinstance(state, Integral) and 1 <= state <= self.nstates()

    @abstractmethod
    def transition_type(self) -> type:
        """Returns the type of the transitions of the automaton."""

    @abstractmethod
    def transitions(self) -> TransitionView:
        """Returns an iterable over the transitions of the automaton."""

    @abstractmethod
    def ntransitions(self) -> int:
        """Returns the number of transitions of the automaton."""

    def add_transition(self, q: int, r: int, sigma: int) -> Hashable:
        """Adds a transition between states ``q`` and ``r`` with symbol ``sigma``.

        Returns:
            The handle of the new transition
        """
        raise UnsupportedOperationError("add_transition", type(self))

    @abstractmethod
    def has_transition(self, t: Any) -> bool:
        """Returns True if the automaton has the transition ``t``."""

    def rem_transition(self, t: Any) -> None:
        """Removes the transition ``t`` from the automaton."""
        raise UnsupportedOperationError("rem_transition", type(self))

    def rem_state(self, s: int) -> None:
        """Removes the state ``s`` and every transition incident to it."""
        raise UnsupportedOperationError("rem_state", type(self))

    @abstractmethod
    def source(self, t: Any) -> int:
        """Returns the source of the transition ``t``."""

    @abstractmethod
    def target(self, t: Any) -> int:
        """Returns the target of the transition ``t``."""

    @abstractmethod
    def event(self, t: Any) -> int:
        """Returns the event/symbol of the transition ``t``."""

    def symbol(self, t: Any) -> int:
        """Alias of event()."""
        return self.event(t)

    @abstractmethod
    def in_transitions(self, s: int) -> TransitionView:
        """Returns an iterable over the transitions with target ``s``."""

    @abstractmethod
    def out_transitions(self, s: int) -> TransitionView:
        """Returns an iterable over the transitions with source ``s``."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nstates={self.nstates()}, "
            f"ntransitions={self.ntransitions()})"
        )


def states(A: AbstractAutomaton) -> Iterable[int]:
    return A.states()


def nstates(A: AbstractAutomaton) -> int:
    return A.nstates()


modes = states
nmodes = nstates


def transition_type(A: AbstractAutomaton) -> type:
    return A.transition_type()


def transitions(A: AbstractAutomaton) -> TransitionView:
    return A.transitions()


def ntransitions(A: AbstractAutomaton) -> int:
    return A.ntransitions()


def add_transition(A: AbstractAutomaton, q: int, r: int, sigma: int) -> Hashable:
    return A.add_transition(q, r, sigma)


def has_transition(A: AbstractAutomaton, t: Any) -> bool:
    return A.has_transition(t)


def rem_transition(A: AbstractAutomaton, t: Any) -> None:
    A.rem_transition(t)


def rem_state(A: AbstractAutomaton, s: int) -> None:
    A.rem_state(s)


def source(A: AbstractAutomaton, t: Any) -> int:
    return A.source(t)


def target(A: AbstractAutomaton, t: Any) -> int:
    return A.target(t)


def event(A: AbstractAutomaton, t: Any) -> int:
    return A.event(t)


symbol = event


def in_transitions(A: AbstractAutomaton, s: int) -> TransitionView:
    return A.in_transitions(s)


def out_transitions(A: AbstractAutomaton, s: int) -> TransitionView:
    return A.out_transitions(s)
