import logging
import math

from .affinity import commonality_distance, shared_themes
from .errors import InvalidSeatingInput
from .models import SeatStatistic, Table, TableAssignment
from .pairs import PairConstraints, are_ring_neighbors

logger = logging.getLogger(__name__)

#####################################
# 1. Snake Placement                #
#####################################

def validate_table_sizes(table_sizes):
    if not table_sizes:
        raise InvalidSeatingInput("At least one table is required")
    for size in table_sizes:
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise InvalidSeatingInput(f"Table sizes must be positive integers, got {size!r}")

def _take(order, start, count):
    taken = list(order[start:start + count])
    return taken + [None] * (count - len(taken))

def snake_fill(order, table_sizes):
    """
    Places route indices on tables.

    Each table takes the left side (ceil(size/2) seats) from the front of the
    route, then the right side, stored reversed so the route snakes back along
    the other side of the table. Seats left once the route runs out are None.
    """
    tables = []
    position = 0
    for size in table_sizes:
        left_count = math.ceil(size / 2)
        right_count = size - left_count
        left = _take(order, position, left_count)
        position += left_count
        right = _take(order, position, right_count)
        position += right_count
        tables.append(left + right[::-1])
    if position < len(order):
        raise InvalidSeatingInput(
            f"Tables seat {sum(table_sizes)} people but the route holds {len(order)}"
        )
    return tables

#####################################
# 2. Pair Repair                    #
#####################################

def _locate(tables, idx):
    for table_idx, seats in enumerate(tables):
        for seat_idx, occupant in enumerate(seats):
            if occupant == idx:
                return table_idx, seat_idx
    raise LookupError(f"Person {idx} is not seated")

def pair_is_seated_together(tables, idx1, idx2):
    t1, s1 = _locate(tables, idx1)
    t2, s2 = _locate(tables, idx2)
    return t1 == t2 and are_ring_neighbors(s1, s2, len(tables[t1]))

def _can_host(tables, host, guest, pinned):
    """
    True if `guest` can be brought next to `host` without unseating anyone
    from another pinned pair.
    """
    t_host, _ = _locate(tables, host)
    t_guest, _ = _locate(tables, guest)
    seats = tables[t_host]
    if len(seats) < 2:
        return False
    if t_host == t_guest or None in seats:
        return True
    return any(occupant not in pinned for occupant in seats if occupant != host)

def _place_next_to(tables, host, guest, pinned):
    """
    Moves `guest` beside `host`. The guest's old seat is left empty; the
    host's table is kept at its size by dropping its last empty seat, or, when
    it has none, by moving its last unpinned occupant into the vacated seat.
    Callers check `_can_host` first.
    """
    t_guest, s_guest = _locate(tables, guest)
    tables[t_guest][s_guest] = None
    t_host, s_host = _locate(tables, host)
    seats = tables[t_host]
    n = len(seats)

    after = (s_host + 1) % n
    before = (s_host - 1) % n
    if seats[after] is None:
        seats[after] = guest
        return
    if seats[before] is None:
        seats[before] = guest
        return

    seats.insert(s_host + 1, guest)
    empties = [s for s, occupant in enumerate(seats) if occupant is None]
    if empties:
        seats.pop(empties[-1])
        return

    unpinned = [s for s, occupant in enumerate(seats)
                if occupant not in (host, guest) and occupant not in pinned]
    evicted = seats.pop(unpinned[-1])
    tables[t_guest][s_guest] = evicted

def _pair_room(capacities):
    return sum(capacity // 2 for capacity in capacities)

def repack_tables(tables, constraints):
    """
    Lays the tables out again with every pinned pair as one two-seat unit.

    Units are taken in current seat order. A single is held back whenever
    seating it would leave too little room for the pairs still waiting.
    Returns new tables of the same sizes, or None when the pairs cannot all
    fit two-by-two.
    """
    sizes = [len(seats) for seats in tables]
    if len(constraints) > _pair_room(sizes):
        return None

    units = []
    emitted = set()
    for seats in tables:
        for occupant in seats:
            if occupant is None or occupant in emitted:
                continue
            partner = constraints.partner_of(occupant)
            unit = (occupant,) if partner is None else (occupant, partner)
            units.append(unit)
            emitted.update(unit)

    packed = []
    for table_idx, size in enumerate(sizes):
        seats = []
        remaining = size
        while remaining and units:
            pairs_left = sum(1 for unit in units if len(unit) == 2)
            later_room = _pair_room(sizes[table_idx + 1:])
            pick = None
            for k, unit in enumerate(units):
                if len(unit) > remaining:
                    continue
                if len(unit) == 1 and (remaining - 1) // 2 + later_room < pairs_left:
                    continue
                pick = k
                break
            if pick is None:
                break
            unit = units.pop(pick)
            seats.extend(unit)
            remaining -= len(unit)
        packed.append(seats + [None] * remaining)

    if units:
        return None
    return packed

def enforce_table_pairs(tables, constraints):
    """
    Seats every pinned pair side by side on one table, working in place on
    tables of route indices.

    Each pair is first repaired locally, moving one partner next to the
    other. Pairs that cannot be repaired that way, because both partners'
    tables are full of other pinned people, are settled by `repack_tables`.
    """
    pinned = set(constraints.partners)
    for _ in range(len(constraints) + 1):
        changed = False
        for idx1, idx2 in constraints:
            if pair_is_seated_together(tables, idx1, idx2):
                continue
            for host, guest in ((idx1, idx2), (idx2, idx1)):
                if _can_host(tables, host, guest, pinned):
                    _place_next_to(tables, host, guest, pinned)
                    changed = True
                    break
        if not changed:
            break

    if all(pair_is_seated_together(tables, idx1, idx2) for idx1, idx2 in constraints):
        return tables
    packed = repack_tables(tables, constraints)
    if packed is not None:
        tables[:] = packed
    return tables

def validate_table_pairs(tables, constraints, people):
    """Logs and returns the pinned pairs (by name) that are not seated together."""
    unsatisfied = []
    for idx1, idx2 in constraints:
        if not pair_is_seated_together(tables, idx1, idx2):
            logger.warning("Constant pair %s, %s is not seated side by side at one table",
                           people[idx1].name, people[idx2].name)
            unsatisfied.append((people[idx1].name, people[idx2].name))
    return unsatisfied

#####################################
# 3. Seat Statistics                #
#####################################

def calculate_statistics(tables):
    """
    Per seated person: themes shared with the left and right neighbour and
    the mean commonality distance to them. Tables are read as a straight
    line here, the first and last seat are not neighbours.
    """
    stats = []
    for table_idx, table in enumerate(tables):
        seats = table.seats
        for seat_idx, person in enumerate(seats):
            if person is None:
                continue
            neighbors = []
            if seat_idx > 0 and seats[seat_idx - 1] is not None:
                neighbors.append(seats[seat_idx - 1])
            if seat_idx < len(seats) - 1 and seats[seat_idx + 1] is not None:
                neighbors.append(seats[seat_idx + 1])

            common_themes = set()
            distances = []
            for neighbor in neighbors:
                common_themes |= shared_themes(person, neighbor)
                distances.append(commonality_distance(person.themes, neighbor.themes))
            combined = sum(distances) / len(distances) if distances else 1.0

            stats.append(SeatStatistic(
                name=person.name,
                common_themes=tuple(sorted(common_themes)),
                combined_similarity=combined,
                has_common=bool(common_themes),
                table_number=table_idx + 1,
                position=seat_idx + 1,
            ))
    return stats

#####################################
# 4. Table Assignment               #
#####################################

def assign_to_tables(seating_result, table_sizes, constraints=None):
    """
    Maps the best route onto tables in a snake pattern, repairs pinned pairs
    and computes per-seat statistics.

    Returns a TableAssignment; pairs that could not be repaired are logged
    and listed in `unsatisfied_pairs`.
    """
    validate_table_sizes(table_sizes)
    if constraints is None:
        constraints = PairConstraints()
    people = seating_result.people

    index_tables = snake_fill(seating_result.order, table_sizes)
    enforce_table_pairs(index_tables, constraints)
    unsatisfied = validate_table_pairs(index_tables, constraints, people)

    tables = []
    for size, seats in zip(table_sizes, index_tables):
        tables.append(Table(capacity=size,
                            seats=[None if idx is None else people[idx] for idx in seats]))

    return TableAssignment(
        tables=tables,
        statistics=calculate_statistics(tables),
        unsatisfied_pairs=unsatisfied,
    )
