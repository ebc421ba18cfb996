"""
Morse graph computation for hybrid automata.

This module converts any automaton into a networkx graph, using only the
automaton interface, and computes the Hasse diagram of its non-trivial
strongly connected components. These components are the sets of modes the
system can keep switching between.
"""

from typing import List, Set, Tuple

import networkx as nx

from .automaton import AbstractAutomaton


def to_networkx(A: AbstractAutomaton) -> nx.MultiDiGraph:
    """
    Convert an automaton to a networkx multigraph.

    Every transition becomes one edge with its event label stored in the
    ``event`` attribute, so variants with parallel transitions (such as
    OneStateAutomaton) are represented faithfully.

    Args:
        A: The automaton to convert.

    Returns:
        MultiDiGraph whose nodes are the states of ``A``.
    """
    G = nx.MultiDiGraph()
    G.add_nodes_from(A.states())
    for t in A.transitions():
        G.add_edge(A.source(t), A.target(t), event=A.event(t))
    return G


def create_morse_graph(A: AbstractAutomaton) -> Tuple[nx.DiGraph, List[Set[int]]]:
    """
    Create a Hasse diagram of the non-trivial strongly connected components of ``A``.

    This is computed by taking the transitive reduction of the reachability
    relation between the non-trivial SCCs. A non-trivial SCC is one that has
    more than one state, or a single state with a self-loop.

    Args:
        A: The automaton.

    Returns:
        Tuple of (hasse_diagram, nontrivial_sccs) where:
        - hasse_diagram: DiGraph representing the partial order of non-trivial SCCs.
        - nontrivial_sccs: List of non-trivial SCCs, where the index in the list
                           corresponds to the node ID in the Hasse diagram.
    """
    G = nx.DiGraph(to_networkx(A))

    sccs = list(nx.strongly_connected_components(G))

    nontrivial_sccs = []
    for scc in sccs:
        if len(scc) > 1 or G.has_edge(next(iter(scc)), next(iter(scc))):
            nontrivial_sccs.append(scc)
    nontrivial_sccs.sort(key=min)

    condensation = nx.condensation(G, sccs)
    state_to_cond_node = condensation.graph["mapping"]

    morse_reachability = nx.DiGraph()
    for i, scc1 in enumerate(nontrivial_sccs):
        morse_reachability.add_node(i)
        cond1 = state_to_cond_node[next(iter(scc1))]
        descendants = nx.descendants(condensation, cond1)
        for j, scc2 in enumerate(nontrivial_sccs):
            if i != j and state_to_cond_node[next(iter(scc2))] in descendants:
                morse_reachability.add_edge(i, j)

    hasse_diagram = nx.transitive_reduction(morse_reachability)

    return hasse_diagram, nontrivial_sccs
