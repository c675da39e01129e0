from .defaults import COMMONALITY_CAP, DistanceFunction
from .errors import InvalidSeatingInput

#####################################
# 1. Distance Functions             #
#####################################

def commonality_distance(a, b):
    """
    0 when two theme sets share COMMONALITY_CAP or more themes,
    1 when they share none.
    """
    common_count = min(len(a & b), COMMONALITY_CAP)
    return (COMMONALITY_CAP - common_count) / COMMONALITY_CAP

def avg_distance(a, b):
    """Jaccard distance. Two empty sets carry no information and count as 1."""
    union = len(a | b)
    if union == 0:
        return 1.0
    return 1 - len(a & b) / union

DISTANCE_FUNCTIONS = {
    DistanceFunction.COMMONALITY: commonality_distance,
    DistanceFunction.AVG_DISTANCE: avg_distance,
}

def get_distance_function(selector):
    try:
        return DISTANCE_FUNCTIONS[DistanceFunction(selector)]
    except ValueError:
        raise InvalidSeatingInput(f"Unknown distance function: {selector!r}") from None

#####################################
# 2. Theme Helpers                  #
#####################################

def has_common_themes(person_a, person_b):
    return not person_a.themes.isdisjoint(person_b.themes)

def shared_themes(person_a, person_b):
    return person_a.themes & person_b.themes

#####################################
# 3. Distance Matrix                #
#####################################

def build_distance_matrix(people, distance_func, partners=None):
    """
    Builds the symmetric n x n distance matrix.
    Entries of hard-pinned pairs (``partners`` maps index -> partner index)
    are forced to 0 regardless of theme overlap.
    """
    if partners is None:
        partners = {}
    n = len(people)
    dist_matrix = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            if partners.get(i) == j:
                d = 0.0
            else:
                d = distance_func(people[i].themes, people[j].themes)
            dist_matrix[i][j] = dist_matrix[j][i] = d
    return dist_matrix

def find_farthest_pair(dist_matrix):
    """Returns the most dissimilar pair (i, j); the first maximum wins."""
    n = len(dist_matrix)
    max_dist = -1
    pair = (0, 0)
    for i in range(n):
        for j in range(i + 1, n):
            if dist_matrix[i][j] > max_dist:
                max_dist = dist_matrix[i][j]
                pair = (i, j)
    return pair
