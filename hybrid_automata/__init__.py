"""
Hybrid Automata - A Python library for the discrete structure of hybrid systems.

This library provides tools for:
- Building and editing hybrid automata (modes and labeled transitions)
- Composing an automaton with per-mode dynamics, invariants, guards and resets
- Morse graph analysis of the recurrent modes
- Visualization of the mode graph
"""

# Global configuration
from .src.config import config

# Automaton interface
from .src.automaton import (
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
from .src.errors import (
    HybridAutomatonError,
    InvalidStateError,
    TransitionNotFoundError,
    UnsupportedOperationError,
)
from .src.light_automaton import Edge, LightAutomaton
from .src.one_state_automaton import OneStateAutomaton, OneStateTransition

# Hybrid system composition
from .src.continuous_system import DiscreteIdentitySystem, DiscreteLinearControlSystem
from .src.hybrid_system import (
    AutonomousSwitching,
    ConstantVector,
    ControlledSwitching,
    FullSpace,
    HybridSystem,
)

# Graph analysis functions
from .src.morse_graph import create_morse_graph, to_networkx

# Visualization functions
from .src.plot_utils import plot_automaton


__version__ = "0.1.0"

__all__ = [
    # Core
    "AbstractAutomaton",
    "TransitionView",
    "LightAutomaton",
    "Edge",
    "OneStateAutomaton",
    "OneStateTransition",
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
    # Hybrid system
    "HybridSystem",
    "DiscreteIdentitySystem",
    "DiscreteLinearControlSystem",
    "AutonomousSwitching",
    "ControlledSwitching",
    "ConstantVector",
    "FullSpace",
    # Graph
    "to_networkx",
    "create_morse_graph",
    # Plotting
    "plot_automaton",
    # Config
    "config",
]
