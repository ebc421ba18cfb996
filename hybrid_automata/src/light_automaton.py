"""
Hybrid automaton backed by a networkx directed graph.

The states of a LightAutomaton are the nodes 1..n of a ``nx.DiGraph`` and its
transitions are the edges of that graph. The event label of each transition is
kept in a dictionary keyed by the edge. The graph and the dictionary are only
modified together, through add_transition, rem_transition and rem_state.

Since a DiGraph holds at most one edge per ordered pair of states, adding a
transition between the same pair twice replaces the label of the first one
instead of creating a parallel transition.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from types import MappingProxyType
from typing import Any, Mapping, Optional

import networkx as nx

from .automaton import AbstractAutomaton, TransitionView
from .config import config
from .errors import InvalidStateError, TransitionNotFoundError

logger = config.get_logger(__name__)


@dataclass(frozen=True)
class Edge:
    """Transition of a LightAutomaton from state ``src`` to state ``dst``."""

    src: int
    dst: int

    def __iter__(self):
        yield self.src
        yield self.dst

    def __str__(self) -> str:
        return f"Edge {self.src} => {self.dst}"


class LightAutomaton(AbstractAutomaton):
    """
    A hybrid automaton that uses a networkx DiGraph as backend.

    Example:
        Two states with a self-loop of label 1 on each state, a transition
        from 1 to 2 with label 2 and a transition from 2 to 1 with label 3:

        >>> a = LightAutomaton(2)
        >>> a.add_transition(1, 1, 1)
        Edge(src=1, dst=1)
        >>> a.add_transition(2, 2, 1)
        Edge(src=2, dst=2)
        >>> a.add_transition(1, 2, 2)
        Edge(src=1, dst=2)
        >>> a.add_transition(2, 1, 3)
        Edge(src=2, dst=1)

    Removing a state keeps the states numbered 1..n: the last state takes the
    number of the removed one.
    """

    def __init__(self, n: int):
        """
        Create an automaton with ``n`` states 1, 2, ..., ``n`` and no transitions.

        Args:
            n: Number of states
        """
        if n < 0:
            raise ValueError(f"Number of states must be non-negative, got {n}")
        self._graph = nx.DiGraph()
        self._graph.add_nodes_from(range(1, n + 1))
        self._labels: dict[Edge, int] = {}

    @property
    def labels(self) -> Mapping[Edge, int]:
        """Read-only mapping from each transition to its event label."""
        return MappingProxyType(self._labels)

    def states(self) -> range:
        return range(1, self._graph.number_of_nodes() + 1)

    def nstates(self) -> int:
        return self._graph.number_of_nodes()

    def transition_type(self) -> type:
        return Edge

    def transitions(self) -> TransitionView:
        return TransitionView(
            lambda: (Edge(u, v) for u, v in self._graph.edges()),
            self._graph.number_of_edges,
        )

    def ntransitions(self) -> int:
        return self._graph.number_of_edges()

    def _check_state(self, s: Any) -> None:
        if not self.has_state(s):
            raise InvalidStateError(s, self.nstates())

    @staticmethod
    def _as_edge(t: Any) -> Optional[Edge]:
        """Edge with the same endpoints as ``t``, or None if ``t`` has no endpoints."""
        if isinstance(t, Edge):
            endpoints = (t.src, t.dst)
        elif isinstance(t, tuple) and len(t) == 2:
            endpoints = t
        else:
            return None
        if not all(isinstance(s, Integral) for s in endpoints):
            return None
        return Edge(*endpoints)

    def add_transition(self, q: int, r: int, sigma: int) -> Edge:
        """
        Add a transition from ``q`` to ``r`` with event label ``sigma``.

        Raises:
            InvalidStateError: If ``q`` or ``r`` is not a state of the automaton
            ValueError: If ``sigma`` is not an integer
        """
        self._check_state(q)
        self._check_state(r)
        if not isinstance(sigma, Integral):
            raise ValueError(f"Event label must be an integer, got {sigma!r}")
        t = Edge(int(q), int(r))
        previous = self._labels.get(t)
        if (
            previous is not None
            and previous != sigma
            and config.automaton.log_label_overwrite
        ):
            logger.debug(f"Replacing label {previous} of {t} by {sigma}")
        self._graph.add_edge(t.src, t.dst)
        self._labels[t] = sigma
        return t

    def has_transition(self, t: Any) -> bool:
        edge = self._as_edge(t)
        if edge is None:
            return False
        return self._graph.has_edge(edge.src, edge.dst)

    def rem_transition(self, t: Any) -> None:
        """
        Remove the transition ``t``.

        Raises:
            TransitionNotFoundError: If ``t`` is not a transition of the automaton
        """
        if not self.has_transition(t):
            raise TransitionNotFoundError(t)
        edge = self._as_edge(t)
        self._graph.remove_edge(edge.src, edge.dst)
        del self._labels[edge]

    def rem_state(self, s: int) -> None:
        """
        Remove the state ``s`` together with all its incoming and outgoing transitions.

        If ``s`` is not the last state, the last state n is renumbered to ``s``
        so that the states remain 1..n-1. Identifiers of the other states are
        unchanged.

        Raises:
            InvalidStateError: If ``s`` is not a state of the automaton
        """
        self._check_state(s)
        incident = list(self.in_transitions(s)) + [
            t for t in self.out_transitions(s) if t.dst != s
        ]
        for t in incident:
            self.rem_transition(t)
        self._graph.remove_node(s)

        last = self._graph.number_of_nodes() + 1
        if s != last:
            self._renumber_state(last, s)
            logger.debug(f"Removed state {s}, state {last} renumbered to {s}")
        else:
            logger.debug(f"Removed state {s}")

    def _renumber_state(self, old: int, new: int) -> None:
        nx.relabel_nodes(self._graph, {old: new}, copy=False)
        moved = [t for t in self._labels if old in (t.src, t.dst)]
        for t in moved:
            sigma = self._labels.pop(t)
            src = new if t.src == old else t.src
            dst = new if t.dst == old else t.dst
            self._labels[Edge(src, dst)] = sigma

    def source(self, t: Edge) -> int:
        return t.src

    def target(self, t: Edge) -> int:
        return t.dst

    def event(self, t: Edge) -> int:
        """
        Event label of the transition ``t``.

        Raises:
            TransitionNotFoundError: If no label is stored for ``t``
        """
        edge = self._as_edge(t)
        if edge is None or edge not in self._labels:
            raise TransitionNotFoundError(t)
        return self._labels[edge]

    def in_transitions(self, s: int) -> TransitionView:
        self._check_state(s)
        return TransitionView(
            lambda: (Edge(u, s) for u in self._graph.predecessors(s)),
            lambda: self._graph.in_degree(s),
        )

    def out_transitions(self, s: int) -> TransitionView:
        self._check_state(s)
        return TransitionView(
            lambda: (Edge(s, v) for v in self._graph.successors(s)),
            lambda: self._graph.out_degree(s),
        )
