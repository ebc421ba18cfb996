"""
Core modules for hybrid automata.

This module provides the automaton interface and its implementations, the
hybrid system composition, graph analysis, and visualization.
"""

# Automaton interface
from .automaton import (
    AbstractAutomaton,
    TransitionView,
    add_transition,
    event,
    has_transition,
    in_transitions,
    modes,
    nmodes,
    nstates,
    ntransitions,
    out_transitions,
    rem_state,
    rem_transition,
    source,
    states,
    symbol,
    target,
    transition_type,
    transitions,
)
from .errors import (
    HybridAutomatonError,
    InvalidStateError,
    TransitionNotFoundError,
    UnsupportedOperationError,
)

# Implementations
from .light_automaton import Edge, LightAutomaton
from .one_state_automaton import OneStateAutomaton, OneStateTransition

# Hybrid system composition
from .continuous_system import DiscreteIdentitySystem, DiscreteLinearControlSystem
from .hybrid_system import (
    AutonomousSwitching,
    ConstantVector,
    ControlledSwitching,
    FullSpace,
    HybridSystem,
)

# Graph analysis
from .morse_graph import create_morse_graph, to_networkx

# Visualization
from .plot_utils import plot_automaton

__all__ = [
    # Automaton interface
    "AbstractAutomaton",
    "TransitionView",
    "states",
    "modes",
    "nstates",
    "nmodes",
    "transitions",
    "ntransitions",
    "transition_type",
    "add_transition",
    "has_transition",
    "rem_transition",
    "rem_state",
    "source",
    "target",
    "event",
    "symbol",
    "in_transitions",
    "out_transitions",
    # Errors
    "HybridAutomatonError",
    "InvalidStateError",
    "TransitionNotFoundError",
    "UnsupportedOperationError",
    # Implementations
    "Edge",
    "LightAutomaton",
    "OneStateAutomaton",
    "OneStateTransition",
    # Hybrid system
    "HybridSystem",
    "DiscreteIdentitySystem",
    "DiscreteLinearControlSystem",
    "AutonomousSwitching",
    "ControlledSwitching",
    "ConstantVector",
    "FullSpace",
    # Graph analysis
    "to_networkx",
    "create_morse_graph",
    # Visualization
    "plot_automaton",
]
