"""
Composition of an automaton with the data attached to its modes and transitions.

A HybridSystem consists of:
- An automaton whose states are the modes and whose transitions are the jumps
- A continuous system for each mode
- An invariant set for each mode
- A guard set and a reset map for each transition
- A switching type for each mode

Nothing here evaluates the dynamics or the sets; the class only checks that the
pieces fit together and looks them up by state or by transition.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Dict, Iterator, Union

from .automaton import AbstractAutomaton
from .config import config
from .errors import TransitionNotFoundError

logger = config.get_logger(__name__)


class AutonomousSwitching:
    """The mode is switched by the system itself when a guard is reached."""

    def __repr__(self) -> str:
        return "AutonomousSwitching()"

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, AutonomousSwitching)

    def __hash__(self) -> int:
        return hash(AutonomousSwitching)


class ControlledSwitching:
    """The mode is chosen by the controller among the enabled transitions."""

    def __repr__(self) -> str:
        return "ControlledSwitching()"

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, ControlledSwitching)

    def __hash__(self) -> int:
        return hash(ControlledSwitching)


class FullSpace:
    """Set containing every point, used as a trivial invariant or guard."""

    def __contains__(self, point: Any) -> bool:
        return True

    def __repr__(self) -> str:
        return "FullSpace()"


class ConstantVector(Sequence):
    """Read-only sequence of length ``n`` whose entries are all ``value``."""

    def __init__(self, value: Any, n: int):
        if n < 0:
            raise ValueError(f"Length must be non-negative, got {n}")
        self.value = value
        self.n = n

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self.value] * len(range(*index.indices(self.n)))
        if not -self.n <= index < self.n:
            raise IndexError(f"Index {index} out of range for length {self.n}")
        return self.value

    def __iter__(self) -> Iterator[Any]:
        for _ in range(self.n):
            yield self.value

    def __repr__(self) -> str:
        return f"ConstantVector({self.value!r}, {self.n})"


def _per_transition(
    automaton: AbstractAutomaton, name: str, values: Union[Mapping, Sequence],
) -> Dict[Any, Any]:
    """Key per-transition data by transition handle.

    ``values`` is either a mapping from transition handle to value, or a
    sequence aligned with ``automaton.transitions()``.
    """
    handles = list(automaton.transitions())
    if isinstance(values, Mapping):
        missing = [t for t in handles if t not in values]
        extra = [t for t in values if not automaton.has_transition(t)]
        if missing or extra:
            raise ValueError(
                f"{name} must have one entry per transition, "
                f"missing {missing}, unknown {extra}",
            )
        return {t: values[t] for t in handles}

    if len(values) != len(handles):
        raise ValueError(
            f"Expected {len(handles)} {name}, one per transition, got {len(values)}",
        )
    return dict(zip(handles, values))


class HybridSystem:
    """Hybrid system built on top of an automaton.

    Per-mode data (``modes``, ``invariants``, ``switchings``) is indexed by
    state, per-transition data (``guards``, ``resetmaps``) by transition.
    Accessors take the 1-based state or the transition handle.

    Per-transition data is attached to the transitions present at
    construction; build a new HybridSystem after mutating the automaton.
    """

    def __init__(
        self,
        automaton: AbstractAutomaton,
        modes: Sequence,
        invariants: Sequence,
        guards: Union[Mapping, Sequence],
        resetmaps: Union[Mapping, Sequence],
        switchings: Sequence,
    ):
        """Initialize hybrid system.

        Args:
            automaton: Discrete structure of the system
            modes: Continuous system of each state
            invariants: Invariant set of each state
            guards: Guard set of each transition, as a mapping from transition
                    handle or a sequence in the order of ``automaton.transitions()``
            resetmaps: Reset map of each transition, same layout as ``guards``
            switchings: Switching type of each state

        Raises:
            ValueError: If the data does not match the states or transitions
        """
        n = automaton.nstates()
        for name, values in (
            ("modes", modes),
            ("invariants", invariants),
            ("switchings", switchings),
        ):
            if len(values) != n:
                raise ValueError(
                    f"Expected {n} {name}, one per state, got {len(values)}",
                )

        self.automaton = automaton
        self.modes = modes
        self.invariants = invariants
        self.guards = _per_transition(automaton, "guards", guards)
        self.resetmaps = _per_transition(automaton, "resetmaps", resetmaps)
        self.switchings = switchings
        logger.debug(f"Created {self}")

    def nstates(self) -> int:
        return self.automaton.nstates()

    def nmodes(self) -> int:
        return self.automaton.nstates()

    def ntransitions(self) -> int:
        return self.automaton.ntransitions()

    def mode(self, q: int) -> Any:
        """Continuous system of state ``q``."""
        return self.modes[q - 1]

    def stateset(self, q: int) -> Any:
        """Invariant set of state ``q``."""
        return self.invariants[q - 1]

    def switching(self, q: int) -> Any:
        """Switching type of state ``q``."""
        return self.switchings[q - 1]

    def guard(self, t: Any) -> Any:
        """Guard set of transition ``t``."""
        if t not in self.guards:
            raise TransitionNotFoundError(t)
        return self.guards[t]

    def resetmap(self, t: Any) -> Any:
        """Reset map of transition ``t``."""
        if t not in self.resetmaps:
            raise TransitionNotFoundError(t)
        return self.resetmaps[t]

    def statedim(self, q: int) -> int:
        return self.mode(q).statedim

    def inputdim(self, q: int) -> int:
        return self.mode(q).inputdim

    def __str__(self) -> str:
        return (
            f"HybridSystem ({self.nstates()} modes, "
            f"{self.ntransitions()} transitions)"
        )
