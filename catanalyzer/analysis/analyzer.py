from __future__ import annotations

import logging

from catanalyzer.domain.board import Board

from .enumeration import enumerate_junctions
from .ranking import rank_junctions
from .runtime import AnalysisRuntime
from .scoring import score_junction
from .types import AnalysisConfig, AnalysisResult

logger = logging.getLogger(__name__)


class SettlementAnalyzer:
    """Runs enumerate -> score/orient -> rank over one board snapshot.

    Holds no state between runs; call again with the current board after every
    edit.
    """

    def analyze(
        self,
        board: Board,
        config: AnalysisConfig | None = None,
        runtime: AnalysisRuntime | None = None,
    ) -> AnalysisResult:
        config = config or AnalysisConfig()
        _validate_config(config)
        snapshot = board.copy()

        if runtime is not None:
            runtime.report_progress("Enumerating junctions…", 0.0, force=True)
        junctions = enumerate_junctions(snapshot, runtime=runtime)
        logger.debug(
            "Found %d junctions across %d production tiles",
            len(junctions),
            len(snapshot.production_tiles()),
        )

        scores = []
        total = len(junctions)
        for index, junction in enumerate(junctions, start=1):
            if runtime is not None:
                runtime.report_progress("Scoring junctions…", index / max(1, total))
            scores.append(score_junction(junction))

        ranked = rank_junctions(scores, top_k=config.top_k)
        if runtime is not None:
            runtime.report_progress("Done", 1.0, force=True)
        if ranked:
            logger.debug("Best junction %s scored %.2f", ranked[0].junction.key, ranked[0].score)
        return AnalysisResult(ranked=ranked, junction_count=total)


def analyze_board(
    board: Board,
    config: AnalysisConfig | None = None,
    runtime: AnalysisRuntime | None = None,
) -> AnalysisResult:
    return SettlementAnalyzer().analyze(board, config, runtime)


def _validate_config(config: AnalysisConfig) -> None:
    if isinstance(config.top_k, bool) or not isinstance(config.top_k, int):
        raise ValueError("top_k must be an integer.")
    if config.top_k < 1:
        raise ValueError("top_k must be >= 1.")
