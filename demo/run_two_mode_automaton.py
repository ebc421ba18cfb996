#!/usr/bin/env python3
"""
Two-Mode Automaton Demo: construction, Morse graph and visualization

Builds a hybrid automaton with two modes, self-loops of label 1 on each mode,
a transition 1 -> 2 with label 2 and a transition 2 -> 1 with label 3, then
removes a mode and shows how the remaining mode is renumbered.
"""
from hybrid_automata import (
    LightAutomaton,
    config,
    create_morse_graph,
    plot_automaton,
)


def main():
    automaton = LightAutomaton(2)
    automaton.add_transition(1, 1, 1)
    automaton.add_transition(2, 2, 1)
    automaton.add_transition(1, 2, 2)
    automaton.add_transition(2, 1, 3)
    print(automaton)

    for q in automaton.states():
        for t in automaton.out_transitions(q):
            print(f"  {t} (event {automaton.event(t)})")

    hasse, sccs = create_morse_graph(automaton)
    print(f"Morse sets: {sccs}, order: {list(hasse.edges())}")

    output_dir = config.get_output_subdir("two_mode_automaton")
    plot_automaton(automaton, output_dir / "automaton.png")
    print(f"Figure saved to {output_dir / 'automaton.png'}")

    automaton.rem_state(1)
    print(f"After removing mode 1: {automaton}")
    for t in automaton.transitions():
        print(f"  {t} (event {automaton.event(t)})")


if __name__ == "__main__":
    main()
