import typing
from .errors import FaceletPartitionError, ProjectionError
from .geometry import Face, CORNER_FACE_INDICES, EDGE_FACE_INDICES, CENTER_FACE_INDICES, FACELET_FACE_ORDER, NUM_FACELETS
from .projection import ProjectedState, project_state
from .state import CubeState

def verify_facelet_partition(corner_indices: typing.Sequence[typing.Sequence[int]], edge_indices: typing.Sequence[typing.Sequence[int]], center_indices: typing.Iterable[int]):
    idxs = [i for piece in corner_indices for i in piece] + [i for piece in edge_indices for i in piece] + list(center_indices)
    if sorted(idxs) != list(range(NUM_FACELETS)):
        dups = sorted({i for i in idxs if idxs.count(i) > 1})
        missing = sorted(set(range(NUM_FACELETS)) - set(idxs))
        raise FaceletPartitionError(f"facelet indices don't partition 0..{NUM_FACELETS-1} (duplicate: {dups}, missing: {missing})")

verify_facelet_partition(CORNER_FACE_INDICES, EDGE_FACE_INDICES, CENTER_FACE_INDICES)

def to_facelet_string(projected: ProjectedState) -> str:
    """
    Flattens a projected state into a facelet string as used by cubejs' Cube.fromString.

    The string holds the faces in URFDLB order, 9 facelets each; every facelet is the letter of
    the face whose center has the same color.
    """
    if len(projected.corners) != len(CORNER_FACE_INDICES) or len(projected.edges) != len(EDGE_FACE_INDICES):
        raise ProjectionError(f"projected state has {len(projected.corners)} corners and {len(projected.edges)} edges")

    facelets: typing.List[typing.Optional[Face]] = [None] * NUM_FACELETS

    for idxs, piece in zip(CORNER_FACE_INDICES + EDGE_FACE_INDICES, tuple(projected.corners) + tuple(projected.edges)):
        if len(piece.colors) != len(idxs): raise ProjectionError(f"piece at {piece.position} has {len(piece.colors)} colors, expected {len(idxs)}")
        for i, c in zip(idxs, piece.colors): facelets[i] = c.face
    for i, f in CENTER_FACE_INDICES.items(): facelets[i] = f

    return "".join(f.value for f in facelets)

def state_string(state: CubeState) -> str: return to_facelet_string(project_state(state))

def face_states(facelets: str) -> typing.Dict[Face, bool]:
    if len(facelets) != NUM_FACELETS: raise ValueError(f"facelet string has {len(facelets)} characters, expected {NUM_FACELETS}")
    return { f: facelets[9*i : 9*i+9] == f.value * 9 for i, f in enumerate(FACELET_FACE_ORDER) }

def is_solved_string(facelets: str) -> bool: return all(face_states(facelets).values())
