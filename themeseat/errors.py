class SeatingError(Exception):
    """Base class for seating planner failures."""


class InvalidSeatingInput(SeatingError, ValueError):
    """Raised when participants, tables or search settings cannot be planned."""


class RouteConstructionError(SeatingError, RuntimeError):
    """Raised when the route constructor runs out of candidates early."""
