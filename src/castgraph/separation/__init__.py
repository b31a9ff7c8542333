"""
Degree-of-separation search between participants.
"""

from castgraph.separation.separation_engine import SeparationEngine, SeparationResult

__all__ = [
    "SeparationEngine",
    "SeparationResult",
]
