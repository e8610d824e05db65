from __future__ import annotations

import pytest

from stoprouter import INFINITY, InvariantViolation, RoutingEntry, Stop


def test_new_table_only_knows_itself():
    a = Stop("A", 1, 2)
    table = a.get_routing_table()
    assert table.get_stop() is a
    assert table.get_costs() == {a: 0}
    assert table.next_stop(a) == a
    assert table.entries() == {a: RoutingEntry(a, 0)}


def test_unknown_destination_sentinels():
    a, z = Stop("A", 0, 0), Stop("Z", 5, 5)
    table = a.get_routing_table()
    assert table.cost_to(z) == INFINITY
    assert table.next_stop(z) is None
    assert table.next_stop(None) is None
    assert z not in table


def test_add_or_update_entry_only_accepts_strict_improvements():
    a, b, c = Stop("A", 0, 0), Stop("B", 1, 0), Stop("C", 2, 0)
    table = a.get_routing_table()

    assert table.add_or_update_entry(c, 10, b) is True
    assert table.cost_to(c) == 10 and table.next_stop(c) == b

    # equal cost through another hop is not an improvement
    assert table.add_or_update_entry(c, 10, c) is False
    assert table.next_stop(c) == b

    assert table.add_or_update_entry(c, 12, c) is False
    assert table.cost_to(c) == 10

    assert table.add_or_update_entry(c, 2, c) is True
    assert table.entries()[c] == RoutingEntry(c, 2)


def test_self_entry_is_never_replaced():
    a, b = Stop("A", 0, 0), Stop("B", 1, 0)
    table = a.get_routing_table()
    assert table.add_or_update_entry(a, 0, b) is False
    assert table.add_or_update_entry(a, 4, b) is False
    assert table.next_stop(a) == a and table.cost_to(a) == 0


def test_get_costs_is_a_snapshot():
    a, b = Stop("A", 0, 0), Stop("B", 1, 0)
    table = a.get_routing_table()
    costs = table.get_costs()
    table.add_or_update_entry(b, 1, b)
    assert b not in costs
    costs[a] = 99
    assert table.cost_to(a) == 0


def test_add_neighbour_registers_adjacency_both_ways():
    a, b = Stop("A", 0, 0), Stop("B", 2, 3)
    a.get_routing_table().add_neighbour(b)
    assert a.get_neighbours() == [b]
    assert b.get_neighbours() == [a]
    assert a.get_routing_table().cost_to(b) == 5
    assert b.get_routing_table().cost_to(a) == 5
    assert b.get_routing_table().next_stop(a) == a


def test_add_neighbour_keeps_cheaper_existing_entry():
    a, b, c = Stop("A", 0, 0), Stop("B", 10, 0), Stop("C", 1, 0)
    table = a.get_routing_table()
    table.add_or_update_entry(b, 3, c)
    table.add_neighbour(b)
    assert table.cost_to(b) == 3 and table.next_stop(b) == c
    assert a.is_neighbour(b)


def test_add_neighbour_twice_is_idempotent():
    a, b = Stop("A", 0, 0), Stop("B", 1, 1)
    a.get_routing_table().add_neighbour(b)
    a.get_routing_table().add_neighbour(b)
    b.get_routing_table().add_neighbour(a)
    assert a.get_neighbours() == [b]
    assert b.get_neighbours() == [a]


def test_transfer_entries_reports_any_change():
    a, b, c, d = Stop("A", 0, 0), Stop("B", 1, 0), Stop("C", 5, 0), Stop("D", 0, 7)
    a.add_neighbouring_stop(b)
    ta, tb = a.get_routing_table(), b.get_routing_table()
    ta.add_or_update_entry(c, 5, c)
    ta.add_or_update_entry(d, 7, d)
    # B already has a better route to D, the last destination transferred
    tb.add_or_update_entry(d, 1, d)

    assert ta.transfer_entries(b) is True
    assert tb.cost_to(a) == 1 and tb.next_stop(a) == a
    assert tb.cost_to(c) == 6 and tb.next_stop(c) == a
    assert tb.cost_to(d) == 1 and tb.next_stop(d) == d

    assert ta.transfer_entries(b) is False


def test_transfer_entries_to_non_adjacent_stop_fails():
    a, b = Stop("A", 0, 0), Stop("B", 1, 0)
    with pytest.raises(InvariantViolation):
        a.get_routing_table().transfer_entries(b)
    assert b.get_routing_table().cost_to(a) == INFINITY


def test_traverse_network_visits_each_reachable_stop_once():
    a, b, c, d, lone = (Stop(n, i, 0) for i, n in enumerate("ABCDL"))
    a.add_neighbouring_stop(b)
    a.add_neighbouring_stop(c)
    b.add_neighbouring_stop(d)
    c.add_neighbouring_stop(d)

    assert a.get_routing_table().traverse_network() == [a, b, d, c]
    assert d.get_routing_table().traverse_network() == [d, b, a, c]
    assert lone.get_routing_table().traverse_network() == [lone]
