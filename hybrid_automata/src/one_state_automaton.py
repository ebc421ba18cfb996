"""
Automaton with a single state.

All transitions of a OneStateAutomaton are self-loops on state 1, so a
transition is fully determined by its label. No graph is needed.
"""

from dataclasses import dataclass
from typing import Any

from .automaton import AbstractAutomaton, TransitionView


@dataclass(frozen=True)
class OneStateTransition:
    """Transition of OneStateAutomaton with label ``symbol``."""

    symbol: int


class OneStateAutomaton(AbstractAutomaton):
    """Automaton with one state and the ``nt`` events 1, ..., ``nt``."""

    def __init__(self, nt: int):
        if nt < 0:
            raise ValueError(f"Number of transitions must be non-negative, got {nt}")
        self.nt = nt

    def states(self) -> range:
        return range(1, 2)

    def nstates(self) -> int:
        return 1

    def transition_type(self) -> type:
        return OneStateTransition

    def transitions(self) -> TransitionView:
        return TransitionView(
            lambda: (OneStateTransition(sigma) for sigma in range(1, self.nt + 1)),
            lambda: self.nt,
        )

    def ntransitions(self) -> int:
        return self.nt

    def has_transition(self, t: Any) -> bool:
        return isinstance(t, OneStateTransition) and 1 <= t.symbol <= self.nt

    def source(self, t: OneStateTransition) -> int:
        return 1

    def target(self, t: OneStateTransition) -> int:
        return 1

    def event(self, t: OneStateTransition) -> int:
        return t.symbol

    def in_transitions(self, s: int) -> TransitionView:
        return self.transitions()

    def out_transitions(self, s: int) -> TransitionView:
        return self.transitions()
