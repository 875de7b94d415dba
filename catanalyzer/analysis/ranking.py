from __future__ import annotations

from typing import Iterable, List

from .types import DEFAULT_TOP_K, JunctionScore, RankedJunction


def rank_junctions(scores: Iterable[JunctionScore], top_k: int = DEFAULT_TOP_K) -> List[RankedJunction]:
    """Best ``top_k`` junctions by score; equal scores keep enumeration order."""
    if top_k < 1:
        raise ValueError("top_k must be >= 1.")
    ordered = sorted(scores, key=lambda item: item.score, reverse=True)
    return [
        RankedJunction(
            rank=rank,
            score=item.score,
            pip_score=item.pip_score,
            diversity=item.diversity,
            diversity_bonus=item.diversity_bonus,
            oriented=item.oriented,
            junction=item.junction,
        )
        for rank, item in enumerate(ordered[:top_k], start=1)
    ]
