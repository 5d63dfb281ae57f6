import typing, dataclasses
from .errors import NibbleDomainError
from .geometry import Face, FACES

#Turn nibble minus one -> number of quarter turns (negative is counter-clockwise)
TURN_AMOUNTS: typing.Dict[int, int] = {
    0: 1,
    1: 2,
    2: -1,
    8: -2
}

_NOTATION_SUFFIXES: typing.Dict[int, str] = {
    1: "",
    2: "2",
    -1: "'",
    -2: "2'"
}

@dataclasses.dataclass(frozen=True)
class Move:
    face: Face
    amount: int
    notation: str

    @staticmethod
    def from_face(face: Face, amount: int) -> "Move":
        if amount not in _NOTATION_SUFFIXES: raise ValueError(f"invalid turn amount {amount}")
        return Move(face, amount, face.value + _NOTATION_SUFFIXES[amount])

    @staticmethod
    def parse(notation: str) -> "Move":
        """Inverse of the notation written by the cube, e.g. "R2'" -> (R, -2)"""
        try: face = Face(notation[:1])
        except ValueError: raise ValueError(f"unknown move notation {notation!r}") from None

        for amount, suffix in _NOTATION_SUFFIXES.items():
            if notation[1:] == suffix: return Move(face, amount, notation)
        raise ValueError(f"unknown move notation {notation!r}")

    def __str__(self): return self.notation

def decode_move(face_nibble: int, turn_nibble: int) -> Move:
    if not 1 <= face_nibble <= len(FACES): raise NibbleDomainError("face", face_nibble)
    if turn_nibble - 1 not in TURN_AMOUNTS: raise NibbleDomainError("turn", turn_nibble)
    return Move.from_face(FACES[face_nibble - 1], TURN_AMOUNTS[turn_nibble - 1])
