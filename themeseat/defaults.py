from enum import Enum

#####################################
# 0. Default Values                 #
#####################################

class DistanceFunction(Enum):
    COMMONALITY = "commonality"
    AVG_DISTANCE = "avg_distance"

    def __str__(self):
        return self.value

class OptimizationMode(Enum):
    POOR_CONNECTIONS = "poor_connections"
    DISTANCE = "distance"

    def __str__(self):
        return self.value

# Affinity
COMMONALITY_CAP = 4  # shared themes beyond this do not bring people closer

# Local search
ISOLATION_PENALTY = 0.5

# Scoring
POOR_CONNECTION_THRESHOLD = 2

# Optimization Defaults
DEFAULT_ATTEMPTS = 100
DEFAULT_DISTANCE_FUNCTION = DistanceFunction.COMMONALITY
DEFAULT_OPTIMIZATION_MODE = OptimizationMode.POOR_CONNECTIONS

# Front end defaults
DEFAULT_TABLE_DEF = "1: 6\n2: 6"

DEFAULT_PARTICIPANTS = """Anna: football, travel, cooking, books
Bjorn: travel, cooking, film
Cecilie: books, film, music
David: football, music, gaming
Eva: cooking, books, gardening
Frode: gaming, film, travel
Guro: gardening, music, football
Henrik: books, travel, gaming
Ida: film, cooking, gardening
Jonas: music, football, books"""

DEFAULT_CONSTANT_PAIRS = """Anna, Bjorn"""
