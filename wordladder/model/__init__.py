"""Value types of wordladder: the multi-resolution cost and the ladder result."""

from wordladder.model.cost import MAX_DIMENSION, UINT8, CostScalar, PathMultiCost
from wordladder.model.path import LadderPath

__all__ = [
    "MAX_DIMENSION",
    "UINT8",
    "CostScalar",
    "PathMultiCost",
    "LadderPath",
]
