import logging

logger = logging.getLogger(__name__)


class PairConstraints:
    """
    Hard-pinned pairs resolved to participant indices.

    ``pairs`` keeps registration order, ``partners`` maps every pinned index
    to its partner in both directions.
    """

    def __init__(self, pairs=()):
        self.pairs = []
        self.partners = {}
        for idx1, idx2 in pairs:
            self.add(idx1, idx2)

    def add(self, idx1, idx2):
        if idx1 == idx2 or idx1 in self.partners or idx2 in self.partners:
            return False
        self.pairs.append((idx1, idx2))
        self.partners[idx1] = idx2
        self.partners[idx2] = idx1
        return True

    def partner_of(self, idx):
        return self.partners.get(idx)

    def __iter__(self):
        return iter(self.pairs)

    def __len__(self):
        return len(self.pairs)

    def __bool__(self):
        return bool(self.pairs)


def resolve_constant_pairs(name_pairs, people):
    """
    Resolves (name, name) pairs against the participant list.

    Pairs with a missing participant are dropped with a warning. A participant
    keeps the first pair it was registered in; later pairs naming it are
    dropped with a warning.
    """
    index_by_name = {person.name: idx for idx, person in enumerate(people)}
    constraints = PairConstraints()
    for name1, name2 in name_pairs:
        name1, name2 = name1.strip(), name2.strip()
        idx1 = index_by_name.get(name1)
        idx2 = index_by_name.get(name2)
        if idx1 is None or idx2 is None:
            logger.warning("Could not find one or both persons for constant pair: %s, %s", name1, name2)
            continue
        if idx1 == idx2:
            logger.warning("Constant pair names the same person twice: %s", name1)
            continue
        if not constraints.add(idx1, idx2):
            logger.warning("Dropping constant pair %s, %s: a person is already pinned to someone else",
                           name1, name2)
    return constraints


def are_ring_neighbors(pos1, pos2, n):
    """True when two positions are adjacent in a ring of length n."""
    if pos1 == pos2:
        return False
    return abs(pos1 - pos2) == 1 or {pos1, pos2} == {0, n - 1}


def enforce_constant_pairs(order, constraints):
    """
    Moves pinned partners next to each other on a flat route.
    The later of the two is moved to directly after the earlier one.
    Returns a new list.
    """
    new_order = list(order)
    if not constraints:
        return new_order
    n = len(new_order)
    for idx1, idx2 in constraints:
        pos1 = new_order.index(idx1)
        pos2 = new_order.index(idx2)
        if are_ring_neighbors(pos1, pos2, n):
            continue
        if pos1 < pos2:
            new_order.pop(pos2)
            new_order.insert(pos1 + 1, idx2)
        else:
            new_order.pop(pos1)
            new_order.insert(pos2 + 1, idx1)
    return new_order
