from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .hexgrid import BOARD_RADIUS, Axial, generate_axial_coords, in_radius

MIN_TOKEN_NUMBER = 1
MAX_TOKEN_NUMBER = 12
ROBBER_NUMBER = 7
# Largest radius accepted from external board files.
MAX_BOARD_RADIUS = 10


class Resource(str, Enum):
    WOOD = "wood"
    BRICK = "brick"
    WHEAT = "wheat"
    ORE = "ore"
    SHEEP = "sheep"
    DESERT = "desert"
    NONE = "none"


NON_PRODUCING = frozenset({Resource.DESERT, Resource.NONE})


class InvalidTileEdit(ValueError):
    """Raised when an edit would break a tile invariant."""


class BoardFormatError(ValueError):
    """Raised when a serialized board cannot be loaded."""


@dataclass(frozen=True)
class HexTile:
    q: int
    r: int
    resource: Resource = Resource.NONE
    number: Optional[int] = None

    @property
    def coord(self) -> Axial:
        return (self.q, self.r)

    @property
    def is_production(self) -> bool:
        return self.resource not in NON_PRODUCING and self.number is not None

    def to_dict(self) -> Dict[str, Any]:
        return {"q": self.q, "r": self.r, "resource": self.resource.value, "number": self.number}


def validate_token_number(number: Any) -> int:
    # bool is an int subclass; True would otherwise pass as 1
    if isinstance(number, bool) or not isinstance(number, int):
        raise InvalidTileEdit(f"Number token must be an integer, received {number!r}.")
    if number < MIN_TOKEN_NUMBER or number > MAX_TOKEN_NUMBER:
        raise InvalidTileEdit(
            f"Number token must be between {MIN_TOKEN_NUMBER} and {MAX_TOKEN_NUMBER}, received {number}."
        )
    if number == ROBBER_NUMBER:
        raise InvalidTileEdit(f"{ROBBER_NUMBER} is the robber roll and cannot be assigned to a tile.")
    return number


@dataclass
class Board:
    radius: int
    tiles: List[HexTile]
    _tile_lookup: Dict[Axial, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._tile_lookup = {}
        for index, tile in enumerate(self.tiles):
            if tile.coord in self._tile_lookup:
                raise BoardFormatError(f"Duplicate tile at {tile.q},{tile.r}.")
            if not in_radius(tile.q, tile.r, self.radius):
                raise BoardFormatError(f"Tile {tile.q},{tile.r} lies outside radius {self.radius}.")
            self._tile_lookup[tile.coord] = index

    def __len__(self) -> int:
        return len(self.tiles)

    def __contains__(self, coord: object) -> bool:
        return coord in self._tile_lookup

    def get_tile(self, q: int, r: int) -> HexTile:
        return self.tiles[self._tile_lookup[(q, r)]]

    def production_tiles(self) -> List[HexTile]:
        return [tile for tile in self.tiles if tile.is_production]

    def set_resource(self, q: int, r: int, resource: Resource) -> HexTile:
        index = self._tile_lookup[(q, r)]
        resource = Resource(resource)
        current = self.tiles[index]
        number = None if resource in NON_PRODUCING else current.number
        updated = replace(current, resource=resource, number=number)
        self.tiles[index] = updated
        return updated

    def set_number(self, q: int, r: int, number: Optional[int]) -> HexTile:
        index = self._tile_lookup[(q, r)]
        current = self.tiles[index]
        if number is not None:
            validate_token_number(number)
            if current.resource in NON_PRODUCING:
                raise InvalidTileEdit(
                    f"Tile {q},{r} has resource {current.resource.value!r} and cannot carry a number."
                )
        updated = replace(current, number=number)
        self.tiles[index] = updated
        return updated

    def clear(self) -> None:
        self.tiles = [HexTile(q=tile.q, r=tile.r) for tile in self.tiles]

    def missing_assignments(self) -> List[Axial]:
        missing: List[Axial] = []
        for tile in self.tiles:
            if tile.resource is Resource.NONE:
                missing.append(tile.coord)
            elif tile.resource is not Resource.DESERT and tile.number is None:
                missing.append(tile.coord)
        return missing

    def is_filled(self) -> bool:
        return not self.missing_assignments()

    def copy(self) -> "Board":
        return Board(radius=self.radius, tiles=list(self.tiles))

    def to_dict(self) -> Dict[str, Any]:
        return {"radius": self.radius, "tiles": [tile.to_dict() for tile in self.tiles]}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Board":
        radius = payload.get("radius", BOARD_RADIUS)
        if isinstance(radius, bool) or not isinstance(radius, int) or radius < 0:
            raise BoardFormatError(f"Board radius must be a non-negative integer, received {radius!r}.")
        if radius > MAX_BOARD_RADIUS:
            raise BoardFormatError(f"Board radius must be at most {MAX_BOARD_RADIUS}, received {radius}.")

        raw_tiles = payload.get("tiles")
        if not isinstance(raw_tiles, list):
            raise BoardFormatError("Board payload must contain a 'tiles' list.")

        board = build_board(radius)
        seen: set[Axial] = set()
        for raw in raw_tiles:
            tile = _tile_from_dict(raw)
            if tile.coord not in board:
                raise BoardFormatError(f"Tile {tile.q},{tile.r} lies outside radius {radius}.")
            if tile.coord in seen:
                raise BoardFormatError(f"Duplicate tile at {tile.q},{tile.r}.")
            seen.add(tile.coord)
            board.tiles[board._tile_lookup[tile.coord]] = tile
        return board


def build_board(radius: int = BOARD_RADIUS, tiles: Optional[Iterable[HexTile]] = None) -> Board:
    """Return an empty board of the given radius, optionally pre-filled.

    Supplied tiles replace the blank tile at their coordinate; every
    coordinate keeps its generation-order slot.
    """
    board = Board(radius=radius, tiles=[HexTile(q=q, r=r) for q, r in generate_axial_coords(radius)])
    for tile in tiles or ():
        if tile.coord not in board:
            raise BoardFormatError(f"Tile {tile.q},{tile.r} lies outside radius {radius}.")
        board.tiles[board._tile_lookup[tile.coord]] = tile
    return board


def _tile_from_dict(raw: Any) -> HexTile:
    if not isinstance(raw, Mapping):
        raise BoardFormatError(f"Tile entries must be objects, received {raw!r}.")
    try:
        q = raw["q"]
        r = raw["r"]
    except KeyError as exc:
        raise BoardFormatError(f"Tile entry is missing coordinate {exc.args[0]!r}.") from exc
    if any(isinstance(value, bool) or not isinstance(value, int) for value in (q, r)):
        raise BoardFormatError(f"Tile coordinates must be integers, received {q!r},{r!r}.")

    try:
        resource = Resource(raw.get("resource", Resource.NONE.value))
    except ValueError as exc:
        raise BoardFormatError(f"Unknown resource {raw.get('resource')!r} at {q},{r}.") from exc

    number = raw.get("number")
    if number is not None:
        if resource in NON_PRODUCING:
            raise BoardFormatError(f"Tile {q},{r} has resource {resource.value!r} and cannot carry a number.")
        try:
            validate_token_number(number)
        except InvalidTileEdit as exc:
            raise BoardFormatError(f"Tile {q},{r}: {exc}") from exc

    return HexTile(q=q, r=r, resource=resource, number=number)
