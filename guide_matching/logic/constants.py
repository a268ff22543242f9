"""
Matching Engine Constants

Defines the component weights, saturation points, grade bands, and enums
used by the guide/traveler matching engine.
All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict, List, Tuple

# =============================================================================
# COMPONENT WEIGHTS
# =============================================================================

# Maximum points per component (must sum to MAX_SCORE)
COMPONENT_WEIGHTS: Dict[str, float] = {
    "language": 40.0,     # Shared spoken languages
    "interests": 30.0,    # Traveler interests covered by the guide
    "rating": 20.0,       # Guide's average review rating
    "experience": 10.0,   # Completed tours
}

MIN_SCORE = 0
MAX_SCORE = 100

# Rating domain
MIN_RATING = 0.0
MAX_RATING = 5.0

# Number of completed tours that earns the full experience component
EXPERIENCE_SATURATION_TOURS = 10

# =============================================================================
# GRADES
# =============================================================================

class MatchGrade(str, Enum):
    """Coarse letter classification of a match score."""
    S = "S"
    A = "A"
    B = "B"
    C = "C"
    D = "D"


# Evaluated high-to-low, lower bound inclusive. Anything below falls to D.
GRADE_BANDS: List[Tuple[int, MatchGrade, str]] = [
    (90, MatchGrade.S, "perfect match"),
    (80, MatchGrade.A, "very good"),
    (70, MatchGrade.B, "good"),
    (60, MatchGrade.C, "fair"),
]

FALLBACK_GRADE: Tuple[MatchGrade, str] = (MatchGrade.D, "low")

# =============================================================================
# DOMAIN VOCABULARY
# =============================================================================

class TourCategory(str, Enum):
    """Tour categories a guide can cover and a traveler can be interested in."""
    FOOD = "FOOD"
    CAFE = "CAFE"
    HISTORY = "HISTORY"
    NATURE = "NATURE"
    SHOPPING = "SHOPPING"
    NIGHTLIFE = "NIGHTLIFE"


class UserRole(str, Enum):
    TRAVELER = "TRAVELER"
    GUIDE = "GUIDE"


# Record keys that must never be carried into recommendation output
SENSITIVE_FIELDS = frozenset({"password", "passwordHash", "password_hash"})

ENGINE_VERSION = "1.0.0"
