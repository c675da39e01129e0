import itertools

import pytest

from themeseat.affinity import (avg_distance, build_distance_matrix, commonality_distance,
                                find_farthest_pair, get_distance_function, has_common_themes,
                                shared_themes)
from themeseat.errors import InvalidSeatingInput
from themeseat.models import Participant

from conftest import make_people

THEME_SETS = [
    frozenset(),
    frozenset({"a"}),
    frozenset({"a", "b"}),
    frozenset({"b", "c", "d"}),
    frozenset({"a", "b", "c", "d", "e"}),
    frozenset({"a", "b", "c", "d", "e", "f"}),
]


def test_commonality_distance_values():
    assert commonality_distance(frozenset({"a"}), frozenset({"b"})) == 1
    assert commonality_distance(frozenset({"a", "b"}), frozenset({"a", "b", "c"})) == 0.5
    assert commonality_distance(THEME_SETS[4], THEME_SETS[5]) == 0


def test_commonality_distance_symmetric_and_bounded():
    for a, b in itertools.product(THEME_SETS, repeat=2):
        d = commonality_distance(a, b)
        assert d == commonality_distance(b, a)
        assert 0 <= d <= 1


def test_avg_distance_empty_sets_are_maximally_distant():
    assert avg_distance(frozenset(), frozenset()) == 1


def test_avg_distance_values():
    assert avg_distance(frozenset({"a", "b"}), frozenset({"a", "b"})) == 0
    assert avg_distance(frozenset({"a", "b"}), frozenset({"b", "c"})) == pytest.approx(2 / 3)
    for a, b in itertools.product(THEME_SETS, repeat=2):
        assert avg_distance(a, b) == avg_distance(b, a)


def test_get_distance_function_by_name():
    assert get_distance_function("commonality") is commonality_distance
    assert get_distance_function("avg_distance") is avg_distance
    with pytest.raises(InvalidSeatingInput):
        get_distance_function("euclidean")


def test_participant_themes_are_trimmed():
    person = Participant(" Anna ", frozenset({" books", "books ", "", "  "}))
    assert person.name == "Anna"
    assert person.themes == frozenset({"books"})


def test_participant_requires_name():
    with pytest.raises(InvalidSeatingInput):
        Participant("  ", frozenset({"books"}))


def test_theme_helpers(scenario_people):
    a, b, c, d = scenario_people
    assert has_common_themes(a, b)
    assert not has_common_themes(b, c)
    assert not has_common_themes(a, d)
    assert shared_themes(a, c) == {"y"}


def test_distance_matrix_symmetric_with_zero_diagonal(party):
    matrix = build_distance_matrix(party, commonality_distance)
    n = len(party)
    for i in range(n):
        assert matrix[i][i] == 0
        for j in range(n):
            assert matrix[i][j] == matrix[j][i]


def test_distance_matrix_pinned_pair_is_zero():
    people = make_people({"A": ["x"], "B": ["y"], "C": ["z"]})
    matrix = build_distance_matrix(people, commonality_distance, {0: 2, 2: 0})
    assert matrix[0][2] == matrix[2][0] == 0
    assert matrix[0][1] == 1


def test_find_farthest_pair_first_maximum_wins():
    people = make_people({"A": ["x", "y"], "B": ["x"], "C": ["z"], "D": ["w"]})
    matrix = build_distance_matrix(people, avg_distance)
    assert find_farthest_pair(matrix) == (0, 2)


def test_participant_rejects_single_string_themes():
    with pytest.raises(InvalidSeatingInput):
        Participant("Anna", "books")
