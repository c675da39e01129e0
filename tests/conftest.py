import pytest

from themeseat.models import Participant


def make_people(themes_by_name):
    """Builds participants from a {name: [themes]} dict, keeping its order."""
    return [Participant(name, frozenset(themes)) for name, themes in themes_by_name.items()]


@pytest.fixture
def scenario_people():
    return make_people({
        "A": ["x", "y"],
        "B": ["x"],
        "C": ["y"],
        "D": [],
    })


@pytest.fixture
def party():
    return make_people({
        "Anna": ["football", "travel", "cooking", "books"],
        "Bjorn": ["travel", "cooking", "film"],
        "Cecilie": ["books", "film", "music"],
        "David": ["football", "music", "gaming"],
        "Eva": ["cooking", "books", "gardening"],
        "Frode": ["gaming", "film", "travel"],
        "Guro": ["gardening", "music", "football"],
        "Henrik": ["books", "travel", "gaming"],
        "Ida": ["film", "cooking", "gardening"],
        "Jonas": ["music", "football", "books"],
    })
