import typing, dataclasses
from .errors import FrameLengthError, NibbleDomainError
from .move import Move, decode_move

STATE_FRAME_LEN = 16
CORNER_ORIENTATIONS = (1, 2, 3)

@dataclasses.dataclass(frozen=True)
class CubeState:
    corner_positions: typing.Tuple[int, ...]
    corner_orientations: typing.Tuple[int, ...]
    edge_positions: typing.Tuple[int, ...]
    edge_orientations: typing.Tuple[bool, ...]

    @staticmethod
    def solved() -> "CubeState":
        return CubeState(tuple(range(1, 9)), (3,) * 8, tuple(range(1, 13)), (False,) * 12)

    @property
    def is_solved(self) -> bool: return self == CubeState.solved()

    def __str__(self):
        return " ".join([
            "".join(f"{p:x}" for p in self.corner_positions),
            "".join(f"{o:x}" for o in self.corner_orientations),
            "".join(f"{p:x}" for p in self.edge_positions),
            "".join("1" if o else "0" for o in self.edge_orientations)
        ])

    @staticmethod
    def decode_state(bts: bytes) -> "CubeState":
        if len(bts) < STATE_FRAME_LEN: raise FrameLengthError(len(bts), STATE_FRAME_LEN)
        def get_nibble(i) -> int: return (bts[i//2] >> (4 - 4 * (i%2))) & 0xf

        #nibbles 0-7: index of piece at corner slot | 1 nibble [1;8]
        #nibbles 8-15: twist of piece at corner slot | 1 nibble [1;3]
        #nibbles 16-27: index of piece at edge slot | 1 nibble [1;12]
        #bits 112-123: flip of piece at edge slot | 1 bit, MSB first (byte 15 low nibble unused)
        corner_orientations = tuple(get_nibble(i) for i in range(8, 16))
        for o in corner_orientations:
            if o not in CORNER_ORIENTATIONS: raise NibbleDomainError("orientation", o)

        return CubeState(
            corner_positions=tuple(get_nibble(i) for i in range(0, 8)),
            corner_orientations=corner_orientations,
            edge_positions=tuple(get_nibble(i) for i in range(16, 28)),
            edge_orientations=tuple(bool((bts[14 + i//8] >> (7 - (i%8))) & 1) for i in range(12))
        )

@dataclasses.dataclass(frozen=True)
class DecodedFrame:
    state: CubeState
    moves: typing.Tuple[Move, ...]

    @property
    def last_move(self) -> typing.Optional[Move]: return self.moves[0] if self.moves else None

def decode_frame(bts: bytes) -> DecodedFrame:
    """
    Decodes a raw state frame sent by the cube.

    The first 16 bytes carry the piece permutation and orientation, every byte after that is
    one entry of the move log (face nibble, turn nibble), most recent move first.
    """
    bts = bytes(bts)
    st = CubeState.decode_state(bts)
    moves = tuple(decode_move(b >> 4, b & 0xf) for b in bts[STATE_FRAME_LEN:])
    return DecodedFrame(st, moves)
