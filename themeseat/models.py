from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .errors import InvalidSeatingInput


@dataclass(frozen=True)
class Participant:
    """A participant and the themes they like to talk about.

    Themes are trimmed and empty entries dropped, so ``"books , "`` and
    ``"books"`` are the same theme.
    """
    name: str
    themes: frozenset = field(default_factory=frozenset)

    def __post_init__(self):
        name = self.name.strip() if isinstance(self.name, str) else ""
        if not name:
            raise InvalidSeatingInput("Participant name must be a non-empty string")
        if isinstance(self.themes, str):
            raise InvalidSeatingInput(
                f"Themes of {name} must be a collection of strings, not a single string"
            )
        themes = frozenset(t.strip() for t in self.themes if t and t.strip())
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "themes", themes)


@dataclass
class SeatingResult:
    """Best route found by the search and the score it achieved."""
    order: List[int]
    score: float
    people: List[Participant]
    distance_function: str = "commonality"
    optimization_mode: str = "poor_connections"


@dataclass
class Table:
    """Seats of one table; ``None`` marks an empty seat."""
    capacity: int
    seats: List[Optional[Participant]] = field(default_factory=list)

    def empty_seats(self):
        return sum(1 for p in self.seats if p is None)


@dataclass
class SeatStatistic:
    name: str
    common_themes: Tuple[str, ...]
    combined_similarity: float
    has_common: bool
    table_number: int
    position: int


@dataclass
class TableAssignment:
    tables: List[Table]
    statistics: List[SeatStatistic] = field(default_factory=list)
    unsatisfied_pairs: List[Tuple[str, str]] = field(default_factory=list)
