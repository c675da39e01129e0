from .affinity import avg_distance, build_distance_matrix, commonality_distance
from .defaults import DistanceFunction, OptimizationMode
from .errors import InvalidSeatingInput, RouteConstructionError, SeatingError
from .models import Participant, SeatingResult, SeatStatistic, Table, TableAssignment
from .pairs import PairConstraints, resolve_constant_pairs
from .planner import plan_seating
from .search import optimize_seating
from .tables import assign_to_tables

__version__ = "0.1.0"
