"""Settlement-spot enumeration, scoring and ranking."""

from .analyzer import SettlementAnalyzer, analyze_board
from .enumeration import enumerate_junctions, junction_key
from .orientation import orient_junction
from .ranking import rank_junctions
from .runtime import AnalysisCancelled, AnalysisRuntime
from .scoring import (
    DICE_PROBABILITIES,
    RESOURCE_WEIGHTS,
    SCORE_SCALE,
    dice_probability,
    score_junction,
)
from .types import (
    AnalysisConfig,
    AnalysisResult,
    Junction,
    JunctionScore,
    OrientedHexes,
    RankedJunction,
)

__all__ = [
    "SettlementAnalyzer",
    "analyze_board",
    "enumerate_junctions",
    "junction_key",
    "orient_junction",
    "rank_junctions",
    "AnalysisCancelled",
    "AnalysisRuntime",
    "DICE_PROBABILITIES",
    "RESOURCE_WEIGHTS",
    "SCORE_SCALE",
    "dice_probability",
    "score_junction",
    "AnalysisConfig",
    "AnalysisResult",
    "Junction",
    "JunctionScore",
    "OrientedHexes",
    "RankedJunction",
]
