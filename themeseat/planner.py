import logging
import random

from .defaults import DEFAULT_ATTEMPTS, DEFAULT_DISTANCE_FUNCTION, DEFAULT_OPTIMIZATION_MODE
from .errors import InvalidSeatingInput
from .inputs import check_unique_names
from .pairs import resolve_constant_pairs
from .search import optimize_seating
from .tables import assign_to_tables, validate_table_sizes

logger = logging.getLogger(__name__)


def plan_seating(people, table_sizes, constant_pairs=(), attempts=DEFAULT_ATTEMPTS,
                 distance_function=DEFAULT_DISTANCE_FUNCTION,
                 optimization_mode=DEFAULT_OPTIMIZATION_MODE,
                 on_progress=None, seed=None, rotate_farthest_pair=False):
    """
    Runs the whole pipeline: validate input, resolve pinned pairs, search for
    the best route and place it on the tables.

    Returns (SeatingResult, TableAssignment).
    """
    if not people:
        raise InvalidSeatingInput("No participants to seat")
    check_unique_names(people)
    validate_table_sizes(table_sizes)
    if sum(table_sizes) < len(people):
        raise InvalidSeatingInput(
            f"Tables seat {sum(table_sizes)} people but there are {len(people)} participants"
        )

    constraints = resolve_constant_pairs(constant_pairs, people)
    logger.info("Seating %d people at %d tables with %d constant pairs",
                len(people), len(table_sizes), len(constraints))

    result = optimize_seating(
        people,
        attempts=attempts,
        distance_function=distance_function,
        optimization_mode=optimization_mode,
        on_progress=on_progress,
        constraints=constraints,
        rng=random.Random(seed),
        rotate_farthest_pair=rotate_farthest_pair,
    )
    assignment = assign_to_tables(result, table_sizes, constraints)
    return result, assignment
