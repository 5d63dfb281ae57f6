import typing, dataclasses
from .errors import ProjectionError
from .geometry import Face, Color, CORNER_COLORS, CORNER_LOCATIONS, EDGE_COLORS, EDGE_LOCATIONS, CORNER_SLOT_MIRRORED
from .state import CubeState

#Corner twist -> order in which the home colors show up on the slot's faces
CORNER_TWISTS: typing.Dict[int, typing.Tuple[int, int, int]] = {
    1: (1, 2, 0),
    2: (2, 0, 1),
    3: (0, 1, 2)
}

@dataclasses.dataclass(frozen=True)
class ProjectedCorner:
    position: typing.Tuple[Face, Face, Face]
    colors: typing.Tuple[Color, Color, Color]

@dataclasses.dataclass(frozen=True)
class ProjectedEdge:
    position: typing.Tuple[Face, Face]
    colors: typing.Tuple[Color, Color]

@dataclasses.dataclass(frozen=True)
class ProjectedState:
    """
    The colors visible on every corner and edge slot of the cube.

    A corner with position (D, R, F) and colors (YELLOW, RED, GREEN) shows yellow on D, red on R and green on F.
    """
    corners: typing.Tuple[ProjectedCorner, ...]
    edges: typing.Tuple[ProjectedEdge, ...]

    def to_dict(self) -> typing.Dict[str, typing.List[typing.Dict[str, typing.List[str]]]]:
        def piece(p): return { "position": [f.value for f in p.position], "colors": [c.value for c in p.colors] }
        return { "corners": [piece(c) for c in self.corners], "edges": [piece(e) for e in self.edges] }

def correct_corner_orientation(slot: int, orientation: int) -> int:
    if CORNER_SLOT_MIRRORED[slot] and orientation != 3: return 3 - orientation
    return orientation

def map_corner_colors(colors: typing.Sequence[Color], orientation: int, slot: int) -> typing.Tuple[Color, Color, Color]:
    if orientation not in CORNER_TWISTS: raise ProjectionError(f"invalid orientation {orientation} of corner slot {slot}")
    return tuple(colors[i] for i in CORNER_TWISTS[correct_corner_orientation(slot, orientation)])

def map_edge_colors(colors: typing.Sequence[Color], flipped: bool) -> typing.Tuple[Color, Color]:
    return (colors[1], colors[0]) if flipped else (colors[0], colors[1])

def _home_colors(table: typing.Sequence[tuple], piece: int, kind: str) -> tuple:
    if not 1 <= piece <= len(table): raise ProjectionError(f"invalid {kind} piece id {piece}")
    return table[piece - 1]

def project_state(state: CubeState) -> ProjectedState:
    if len(state.corner_positions) != len(CORNER_LOCATIONS) or len(state.corner_orientations) != len(CORNER_LOCATIONS):
        raise ProjectionError(f"expected {len(CORNER_LOCATIONS)} corner slots")
    if len(state.edge_positions) != len(EDGE_LOCATIONS) or len(state.edge_orientations) != len(EDGE_LOCATIONS):
        raise ProjectionError(f"expected {len(EDGE_LOCATIONS)} edge slots")

    corners = tuple(
        ProjectedCorner(CORNER_LOCATIONS[slot], map_corner_colors(_home_colors(CORNER_COLORS, piece, "corner"), orientation, slot))
        for slot, (piece, orientation) in enumerate(zip(state.corner_positions, state.corner_orientations))
    )
    edges = tuple(
        ProjectedEdge(EDGE_LOCATIONS[slot], map_edge_colors(_home_colors(EDGE_COLORS, piece, "edge"), flipped))
        for slot, (piece, flipped) in enumerate(zip(state.edge_positions, state.edge_orientations))
    )
    return ProjectedState(corners, edges)
