import math

from .affinity import has_common_themes
from .defaults import ISOLATION_PENALTY
from .errors import RouteConstructionError
from .pairs import PairConstraints, are_ring_neighbors

#####################################
# 1. Route Construction             #
#####################################

def nearest_neighbor_route(dist_matrix, people, start_idx=0, constraints=None):
    """
    Nearest-neighbour route that prefers people sharing a theme.

    From the current person the next one is, in order of priority:
      1. their pinned partner, if not yet visited;
      2. the closest unvisited person sharing at least one theme;
      3. the closest unvisited person.
    Ties go to the lowest index.
    """
    if constraints is None:
        constraints = PairConstraints()
    n = len(dist_matrix)
    route = [start_idx]
    visited = {start_idx}
    current = start_idx

    while len(route) < n:
        next_idx = -1
        partner = constraints.partner_of(current)
        if partner is not None and partner not in visited:
            next_idx = partner

        if next_idx == -1:
            best_dist = math.inf
            for j in range(n):
                if (j not in visited
                        and has_common_themes(people[current], people[j])
                        and dist_matrix[current][j] < best_dist):
                    best_dist = dist_matrix[current][j]
                    next_idx = j

        if next_idx == -1:
            best_dist = math.inf
            for j in range(n):
                if j not in visited and dist_matrix[current][j] < best_dist:
                    best_dist = dist_matrix[current][j]
                    next_idx = j

        if next_idx == -1:
            raise RouteConstructionError(
                f"Could not find next person in route after {len(route)} of {n} people"
            )

        route.append(next_idx)
        visited.add(next_idx)
        current = next_idx

    return route

#####################################
# 2. Constraint-aware 2-opt          #
#####################################

def would_break_pair(i, j, positions, constraints, n):
    """
    True if reversing route[i..j] separates a pinned pair that is
    currently adjacent.
    """
    for idx1, idx2 in constraints:
        pos1 = positions[idx1]
        pos2 = positions[idx2]
        if not are_ring_neighbors(pos1, pos2, n):
            continue
        inside1 = i <= pos1 <= j
        inside2 = i <= pos2 <= j
        if inside1 != inside2:
            return True
        if inside1 and inside2:
            new_pos1 = j - (pos1 - i)
            new_pos2 = j - (pos2 - i)
            if not are_ring_neighbors(new_pos1, new_pos2, n):
                return True
    return False

def isolation_penalty(left_a, left_b, right_a, right_b):
    penalty = 0.0
    if not has_common_themes(left_a, left_b):
        penalty += ISOLATION_PENALTY
    if not has_common_themes(right_a, right_b):
        penalty += ISOLATION_PENALTY
    return penalty

def two_opt(route, dist_matrix, people, constraints=None):
    """
    First-improvement 2-opt over a linear route.

    A reversal of route[i..j] is taken only when the distance gain beats the
    isolation penalty for new boundary neighbours that share no theme.
    Reversals that would split a pinned pair are skipped.
    Returns a new list; the input route is left untouched.
    """
    route = list(route)
    n = len(route)
    improved = True

    while improved:
        improved = False
        positions = {person: pos for pos, person in enumerate(route)}

        for i in range(1, n - 2):
            for j in range(i + 1, n - 1):
                if constraints and would_break_pair(i, j, positions, constraints, n):
                    continue

                before = dist_matrix[route[i - 1]][route[i]] + dist_matrix[route[j]][route[j + 1]]
                after = dist_matrix[route[i - 1]][route[j]] + dist_matrix[route[i]][route[j + 1]]
                if after >= before:
                    continue

                penalty = isolation_penalty(people[route[i - 1]], people[route[j]],
                                            people[route[i]], people[route[j + 1]])
                if after + penalty < before:
                    route[i:j + 1] = route[i:j + 1][::-1]
                    improved = True
                    break
            if improved:
                break

    return route
