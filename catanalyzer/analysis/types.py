from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from catanalyzer.domain.board import HexTile
from catanalyzer.domain.hexgrid import Axial

TileTriple = Tuple[HexTile, HexTile, HexTile]

DEFAULT_TOP_K = 10


@dataclass(frozen=True)
class AnalysisConfig:
    top_k: int = DEFAULT_TOP_K


@dataclass(frozen=True)
class Junction:
    """Three mutually adjacent production tiles meeting at one vertex.

    ``tiles`` keeps the order in which the enumerator first found the junction:
    the pivot tile followed by the two neighbours.
    """

    key: str
    tiles: TileTriple
    vertex: Tuple[float, float]

    @property
    def coords(self) -> FrozenSet[Axial]:
        return frozenset(tile.coord for tile in self.tiles)


@dataclass(frozen=True)
class OrientedHexes:
    top: HexTile
    left: HexTile
    right: HexTile

    def as_tuple(self) -> TileTriple:
        return (self.top, self.left, self.right)


@dataclass(frozen=True)
class JunctionScore:
    junction: Junction
    score: float
    pip_score: float
    diversity: int
    diversity_bonus: float
    oriented: OrientedHexes


@dataclass(frozen=True)
class RankedJunction:
    rank: int
    score: float
    pip_score: float
    diversity: int
    diversity_bonus: float
    oriented: OrientedHexes
    junction: Junction

    @property
    def hex_coords(self) -> FrozenSet[Axial]:
        return self.junction.coords

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "score": self.score,
            "diversity": self.diversity,
            "hexes": [tile.to_dict() for tile in self.oriented.as_tuple()],
            "hex_coords": [{"q": tile.q, "r": tile.r} for tile in self.junction.tiles],
        }


@dataclass
class AnalysisResult:
    ranked: List[RankedJunction] = field(default_factory=list)
    junction_count: int = 0

    @property
    def best(self) -> Optional[RankedJunction]:
        return self.ranked[0] if self.ranked else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "junction_count": self.junction_count,
            "results": [ranked.to_dict() for ranked in self.ranked],
        }
