import logging

from themeseat.pairs import (PairConstraints, are_ring_neighbors, enforce_constant_pairs,
                             resolve_constant_pairs)


def test_resolve_constant_pairs(party):
    constraints = resolve_constant_pairs([("Anna", "Eva"), (" Bjorn ", "Ida")], party)
    assert constraints.pairs == [(0, 4), (1, 8)]
    assert constraints.partner_of(4) == 0
    assert constraints.partner_of(8) == 1
    assert constraints.partner_of(2) is None


def test_missing_person_is_dropped_with_warning(party, caplog):
    with caplog.at_level(logging.WARNING, logger="themeseat.pairs"):
        constraints = resolve_constant_pairs([("Anna", "Nobody"), ("Eva", "Ida")], party)
    assert constraints.pairs == [(4, 8)]
    assert "Nobody" in caplog.text


def test_first_registered_pair_wins(party, caplog):
    with caplog.at_level(logging.WARNING, logger="themeseat.pairs"):
        constraints = resolve_constant_pairs([("Anna", "Eva"), ("Eva", "Ida"), ("Anna", "Anna")], party)
    assert constraints.pairs == [(0, 4)]
    assert len(caplog.records) == 2


def test_are_ring_neighbors():
    assert are_ring_neighbors(2, 3, 6)
    assert are_ring_neighbors(0, 5, 6)
    assert not are_ring_neighbors(1, 3, 6)
    assert not are_ring_neighbors(2, 2, 6)


def test_enforce_moves_partner_next_to_earlier_member():
    constraints = PairConstraints([(1, 3)])
    assert enforce_constant_pairs([0, 1, 2, 3, 4], constraints) == [0, 1, 3, 2, 4]

    constraints = PairConstraints([(3, 1)])
    assert enforce_constant_pairs([0, 1, 2, 3, 4], constraints) == [0, 1, 3, 2, 4]


def test_enforce_keeps_ring_neighbors_and_input():
    order = [0, 1, 2, 3, 4]
    constraints = PairConstraints([(0, 4), (1, 2)])
    assert enforce_constant_pairs(order, constraints) == order
    enforce_constant_pairs(order, PairConstraints([(0, 2)]))
    assert order == [0, 1, 2, 3, 4]
