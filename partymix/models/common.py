"""Common types used across the party app."""

from enum import Enum

# ============================================================================
# Measurement Enums
# ============================================================================

class Unit(str, Enum):
    """How an ingredient amount is measured."""
    ML = "ml"          # volume
    PIECE = "piece"    # count, may be fractional (half a lime)
    LEAF = "leaf"      # leaf count
    G = "g"            # weight
    WEDGE = "wedge"    # wedge count
