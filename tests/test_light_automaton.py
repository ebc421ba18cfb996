#!/usr/bin/env python3
"""
Tests for LightAutomaton, the networkx backed hybrid automaton.
"""
import pytest

from hybrid_automata import (
    Edge,
    InvalidStateError,
    LightAutomaton,
    TransitionNotFoundError,
    add_transition,
    event,
    in_transitions,
    nmodes,
    nstates,
    ntransitions,
    out_transitions,
    rem_state,
    source,
    symbol,
    target,
    transitions,
)


def build_two_state_automaton():
    """Two states with self-loops of label 1 and transitions 1 -> 2 (2) and 2 -> 1 (3)."""
    a = LightAutomaton(2)
    a.add_transition(1, 1, 1)
    a.add_transition(2, 2, 1)
    a.add_transition(1, 2, 2)
    a.add_transition(2, 1, 3)
    return a


def triples(a):
    return {(a.source(t), a.target(t), a.event(t)) for t in a.transitions()}


def assert_counts_consistent(a):
    assert a.nstates() == len(list(a.states()))
    assert a.ntransitions() == len(list(a.transitions()))
    assert a.ntransitions() == len(a.transitions())


def test_new_automaton_has_isolated_states():
    a = LightAutomaton(3)
    assert list(a.states()) == [1, 2, 3]
    assert list(a.modes()) == [1, 2, 3]
    assert a.nstates() == 3
    assert a.nmodes() == 3
    assert a.ntransitions() == 0
    assert list(a.transitions()) == []
    assert a.transition_type() is Edge
    assert dict(a.labels) == {}
    assert_counts_consistent(a)


def test_empty_automaton():
    a = LightAutomaton(0)
    assert a.nstates() == 0
    assert list(a.states()) == []
    with pytest.raises(InvalidStateError):
        a.add_transition(1, 1, 1)


def test_negative_state_count_rejected():
    with pytest.raises(ValueError):
        LightAutomaton(-1)


def test_two_state_scenario():
    a = build_two_state_automaton()
    assert a.nstates() == 2
    assert a.ntransitions() == 4
    assert_counts_consistent(a)

    out1 = list(a.out_transitions(1))
    assert {a.target(t) for t in out1} == {1, 2}
    assert {a.event(t) for t in out1} == {1, 2}
    assert all(a.source(t) == 1 for t in out1)

    in2 = list(a.in_transitions(2))
    assert {a.source(t) for t in in2} == {1, 2}
    assert {a.event(t) for t in in2} == {2, 1}
    assert all(a.target(t) == 2 for t in in2)

    assert len(a.out_transitions(1)) == 2
    assert len(a.in_transitions(2)) == 2


def test_add_transition_round_trip():
    a = LightAutomaton(3)
    t = a.add_transition(1, 3, 7)
    assert t == Edge(1, 3)
    assert str(t) == "Edge 1 => 3"
    assert a.has_transition(t)
    assert a.source(t) == 1
    assert a.target(t) == 3
    assert a.event(t) == 7
    assert a.symbol(t) == 7
    assert a.labels[t] == 7
    assert_counts_consistent(a)


def test_has_transition_accepts_pairs():
    a = LightAutomaton(2)
    a.add_transition(1, 2, 4)
    assert a.has_transition((1, 2))
    assert not a.has_transition((2, 1))
    assert a.event((1, 2)) == 4
    assert not a.has_transition("not a transition")


def test_adding_same_pair_overwrites_label():
    a = LightAutomaton(2)
    t1 = a.add_transition(1, 2, 1)
    t2 = a.add_transition(1, 2, 2)
    assert t1 == t2
    assert a.ntransitions() == 1
    assert len(a.labels) == 1
    assert a.event(t1) == 2
    assert triples(a) == {(1, 2, 2)}


def test_add_transition_with_invalid_state():
    a = build_two_state_automaton()
    before = triples(a)
    for q, r in [(0, 1), (1, 3), (3, 3), (-1, 2)]:
        with pytest.raises(InvalidStateError) as excinfo:
            a.add_transition(q, r, 1)
        assert excinfo.value.nstates == 2
    assert triples(a) == before
    assert a.ntransitions() == 4


def test_add_transition_requires_integer_label():
    a = LightAutomaton(2)
    for sigma in ["a", 1.5, None]:
        with pytest.raises(ValueError, match="integer"):
            a.add_transition(1, 2, sigma)
    assert a.ntransitions() == 0
    assert dict(a.labels) == {}
    t = a.add_transition(1, 2, 0)
    assert a.event(t) == 0


def test_has_transition_with_non_integer_endpoints():
    a = LightAutomaton(2)
    a.add_transition(1, 2, 1)
    assert not a.has_transition(([1], 2))
    assert not a.has_transition(Edge([1], 2))
    assert not a.has_transition(("1", 2))
    with pytest.raises(TransitionNotFoundError):
        a.event(([1], 2))
    with pytest.raises(TransitionNotFoundError):
        a.rem_transition(([1], 2))
    assert a.ntransitions() == 1


def test_invalid_state_error_is_value_error():
    a = LightAutomaton(1)
    with pytest.raises(ValueError):
        a.add_transition(1, 2, 1)


def test_rem_transition():
    a = build_two_state_automaton()
    t = Edge(1, 2)
    a.rem_transition(t)
    assert not a.has_transition(t)
    assert t not in a.labels
    assert a.ntransitions() == 3
    assert triples(a) == {(1, 1, 1), (2, 2, 1), (2, 1, 3)}
    assert_counts_consistent(a)


def test_rem_missing_transition_raises():
    a = build_two_state_automaton()
    t = a.add_transition(1, 2, 5)
    a.rem_transition(t)
    with pytest.raises(TransitionNotFoundError) as excinfo:
        a.rem_transition(t)
    assert excinfo.value.transition == t
    with pytest.raises(LookupError):
        a.rem_transition(Edge(5, 6))
    assert a.ntransitions() == 3


def test_event_of_missing_transition_raises():
    a = LightAutomaton(2)
    with pytest.raises(TransitionNotFoundError):
        a.event(Edge(1, 2))


def test_rem_state_scenario():
    a = build_two_state_automaton()
    a.rem_state(1)
    assert a.nstates() == 1
    assert a.ntransitions() == 1
    # state 2 is renumbered to 1, its self-loop follows it
    assert list(a.states()) == [1]
    assert triples(a) == {(1, 1, 1)}
    assert dict(a.labels) == {Edge(1, 1): 1}
    assert_counts_consistent(a)


def test_rem_state_renumbers_last_state():
    a = LightAutomaton(3)
    a.add_transition(1, 2, 5)
    a.add_transition(2, 3, 6)
    a.add_transition(3, 3, 7)
    a.add_transition(3, 1, 8)

    a.rem_state(1)

    assert list(a.states()) == [1, 2]
    assert triples(a) == {(2, 1, 6), (1, 1, 7)}
    assert set(a.labels) == {Edge(2, 1), Edge(1, 1)}
    assert {a.event(t) for t in a.in_transitions(1)} == {6, 7}
    assert list(a.out_transitions(2)) == [Edge(2, 1)]
    assert_counts_consistent(a)


def test_rem_last_state_keeps_numbering():
    a = LightAutomaton(3)
    a.add_transition(1, 2, 1)
    a.add_transition(2, 3, 2)
    a.add_transition(3, 1, 3)

    a.rem_state(3)

    assert list(a.states()) == [1, 2]
    assert triples(a) == {(1, 2, 1)}


def test_rem_state_removes_every_incident_transition():
    a = LightAutomaton(4)
    for q in range(1, 5):
        for r in range(1, 5):
            a.add_transition(q, r, 10 * q + r)
    removed = 2
    a.rem_state(removed)
    assert a.nstates() == 3
    assert a.ntransitions() == 9
    assert len(a.labels) == 9
    # former state 4 now carries number 2
    assert a.event(Edge(2, 2)) == 44
    assert a.event(Edge(1, 2)) == 14
    assert a.event(Edge(2, 3)) == 43
    for t in a.transitions():
        assert a.has_state(a.source(t))
        assert a.has_state(a.target(t))
    assert_counts_consistent(a)


def test_rem_invalid_state_raises():
    a = build_two_state_automaton()
    with pytest.raises(InvalidStateError):
        a.rem_state(3)
    assert a.nstates() == 2
    assert a.ntransitions() == 4


def test_in_out_transitions_of_invalid_state():
    a = LightAutomaton(2)
    with pytest.raises(InvalidStateError):
        a.in_transitions(3)
    with pytest.raises(InvalidStateError):
        a.out_transitions(0)


def test_transition_views_are_restartable():
    a = build_two_state_automaton()
    view = a.transitions()
    first = list(view)
    second = list(view)
    assert first == second
    assert Edge(1, 2) in view
    assert Edge(1, 2) in a.out_transitions(1)
    assert Edge(1, 2) not in a.in_transitions(1)


def test_views_follow_mutations():
    a = LightAutomaton(2)
    view = a.transitions()
    assert len(view) == 0
    a.add_transition(1, 2, 1)
    assert list(view) == [Edge(1, 2)]
    assert len(view) == 1


def test_functional_interface():
    a = LightAutomaton(2)
    t = add_transition(a, 1, 2, 3)
    assert nstates(a) == nmodes(a) == 2
    assert ntransitions(a) == 1
    assert list(transitions(a)) == [t]
    assert source(a, t) == 1
    assert target(a, t) == 2
    assert event(a, t) == symbol(a, t) == 3
    assert list(out_transitions(a, 1)) == [t]
    assert list(in_transitions(a, 2)) == [t]
    rem_state(a, 2)
    assert nstates(a) == 1
    assert ntransitions(a) == 0


def test_repr():
    a = build_two_state_automaton()
    assert repr(a) == "LightAutomaton(nstates=2, ntransitions=4)"


if __name__ == "__main__":
    pytest.main([__file__])
