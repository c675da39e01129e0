from .errors import InvalidSeatingInput
from .models import Participant

#####################################
# 1. Text Area Parsers              #
#####################################

def parse_lines(text):
    return [line.strip() for line in text.splitlines() if line.strip()]

def parse_participants(text):
    """
    Parses lines of the form ``Name: theme, theme, ...``.
    A name without a colon is a participant without themes.
    Repeated names keep their first line.
    """
    people = []
    seen = set()
    for line in parse_lines(text):
        name, _, themes_str = line.partition(":")
        name = name.strip()
        if not name or name in seen:
            continue
        themes = [t.strip() for t in themes_str.split(",") if t.strip()]
        people.append(Participant(name, frozenset(themes)))
        seen.add(name)
    return people

def parse_table_definitions(text):
    """
    Parses lines of the form ``Label: seats``, sorted by label.
    Returns (table_sizes, table_labels) as parallel lists.
    """
    tables_list = []
    for line in parse_lines(text):
        try:
            label, seats_str = line.split(":")
            seats = int(seats_str.strip())
        except ValueError:
            continue
        if seats < 1:
            continue
        tables_list.append((label.strip(), seats))
    tables_list.sort(key=lambda x: x[0])
    table_sizes = [seats for _, seats in tables_list]
    table_labels = [label for label, _ in tables_list]
    return table_sizes, table_labels

def parse_constant_pairs(text):
    """Parses lines of the form ``NameA, NameB``."""
    pairs = []
    for line in parse_lines(text):
        names = [name.strip() for name in line.split(",")]
        if len(names) != 2 or not all(names):
            continue
        pairs.append((names[0], names[1]))
    return pairs

def check_unique_names(people):
    seen = set()
    for person in people:
        if person.name in seen:
            raise InvalidSeatingInput(f"Duplicate participant name: {person.name}")
        seen.add(person.name)
