import logging
import random

from .affinity import (build_distance_matrix, find_farthest_pair, get_distance_function,
                       shared_themes)
from .defaults import (DEFAULT_ATTEMPTS, DEFAULT_DISTANCE_FUNCTION, DEFAULT_OPTIMIZATION_MODE,
                       POOR_CONNECTION_THRESHOLD, OptimizationMode)
from .errors import InvalidSeatingInput
from .models import SeatingResult
from .pairs import PairConstraints, enforce_constant_pairs
from .route import nearest_neighbor_route, two_opt

logger = logging.getLogger(__name__)

#####################################
# 1. Route Scoring                  #
#####################################

def calculate_total_cost(route, dist_matrix):
    """Sum of distances between consecutive people (path, not cycle)."""
    cost = 0.0
    for i in range(len(route) - 1):
        cost += dist_matrix[route[i]][route[i + 1]]
    return cost

def count_poor_connections(route, people, threshold=POOR_CONNECTION_THRESHOLD):
    """Counts people sharing `threshold` or fewer themes with their route neighbours."""
    poor_count = 0
    for i in range(len(route)):
        person = people[route[i]]
        common = set()
        if i > 0:
            common |= shared_themes(person, people[route[i - 1]])
        if i < len(route) - 1:
            common |= shared_themes(person, people[route[i + 1]])
        if len(common) <= threshold:
            poor_count += 1
    return poor_count

def score_route(route, dist_matrix, people, optimization_mode):
    if OptimizationMode(optimization_mode) is OptimizationMode.DISTANCE:
        return calculate_total_cost(route, dist_matrix)
    return count_poor_connections(route, people)

def rotate_to_ends(order, pair):
    """
    Rotates the route, keeping its ring order, so one member of `pair` comes
    first and the other lands as far towards the end as the ring allows.
    """
    a, b = pair
    n = len(order)
    if n < 2 or a == b:
        return list(order)
    pos_a = order.index(a)
    pos_b = order.index(b)
    gap_from_a = (pos_b - pos_a) % n
    start = pos_a if gap_from_a >= n - gap_from_a else pos_b
    return order[start:] + order[:start]

#####################################
# 2. Multi-start Search             #
#####################################

def optimize_seating(people, attempts=DEFAULT_ATTEMPTS,
                     distance_function=DEFAULT_DISTANCE_FUNCTION,
                     optimization_mode=DEFAULT_OPTIMIZATION_MODE,
                     on_progress=None, constraints=None, rng=None,
                     rotate_farthest_pair=False):
    """
    Runs nearest-neighbour + 2-opt from `attempts` random start points and
    keeps the lowest scoring route.

    Args:
        people: list of Participant
        attempts: number of independent restarts
        distance_function: "commonality" or "avg_distance"
        optimization_mode: "poor_connections" or "distance"
        on_progress: optional callback(attempt_number, best_score), called on
            every improvement
        constraints: PairConstraints of hard-pinned index pairs
        rng: random.Random used for start points; pass a seeded one for
            reproducible runs
        rotate_farthest_pair: rotate every refined route so the most
            dissimilar pair sit far apart before scoring

    Returns:
        SeatingResult
    """
    n = len(people)
    if n == 0:
        raise InvalidSeatingInput("Cannot optimize seating without participants")
    if not isinstance(attempts, int) or attempts < 1:
        raise InvalidSeatingInput(f"Number of attempts must be a positive integer, got {attempts!r}")
    try:
        optimization_mode = OptimizationMode(optimization_mode)
    except ValueError:
        raise InvalidSeatingInput(f"Unknown optimization mode: {optimization_mode!r}") from None
    distance_func = get_distance_function(distance_function)
    if constraints is None:
        constraints = PairConstraints()
    if rng is None:
        rng = random.Random()

    dist_matrix = build_distance_matrix(people, distance_func, constraints.partners)
    farthest_pair = find_farthest_pair(dist_matrix) if rotate_farthest_pair else None

    logger.debug("Optimizing for %s over %d attempts", optimization_mode, attempts)

    best_order = None
    best_score = float("inf")
    for attempt in range(attempts):
        start_idx = rng.randrange(n)
        order = nearest_neighbor_route(dist_matrix, people, start_idx, constraints)
        order = two_opt(order, dist_matrix, people, constraints)
        if farthest_pair is not None:
            order = rotate_to_ends(order, farthest_pair)
        order = enforce_constant_pairs(order, constraints)

        score = score_route(order, dist_matrix, people, optimization_mode)
        if score < best_score:
            best_score = score
            best_order = order
            logger.debug("Attempt %d: new best = %s (start from person %d)",
                         attempt + 1, score, start_idx)
            if on_progress is not None:
                on_progress(attempt + 1, score)

    return SeatingResult(
        order=best_order,
        score=best_score,
        people=list(people),
        distance_function=str(distance_function),
        optimization_mode=str(optimization_mode),
    )
