import typing, enum

class Face(enum.Enum):
    B = 'B'
    D = 'D'
    L = 'L'
    U = 'U'
    R = 'R'
    F = 'F'

    def __str__(self): return self.value

class Color(enum.Enum):
    BLUE = 'blue'
    YELLOW = 'yellow'
    ORANGE = 'orange'
    WHITE = 'white'
    RED = 'red'
    GREEN = 'green'

    @property
    def face(self) -> Face: return {
        Color.BLUE: Face.B,
        Color.YELLOW: Face.D,
        Color.ORANGE: Face.L,
        Color.WHITE: Face.U,
        Color.RED: Face.R,
        Color.GREEN: Face.F
    }[self]

    def __str__(self): return self.value

#Wire order of the face nibbles (1-based on the wire)
FACES: typing.Tuple[Face, ...] = tuple(Face)
COLORS: typing.Tuple[Color, ...] = tuple(Color)

#Order of the faces in a facelet string
FACELET_FACE_ORDER: typing.Tuple[Face, ...] = (Face.U, Face.R, Face.F, Face.D, Face.L, Face.B)

B, D, L, U, R, F = FACES
_b, _y, _o, _w, _r, _g = COLORS

#Colors of corner piece 1..8 in its home slot, in the face order of CORNER_LOCATIONS
CORNER_COLORS: typing.Tuple[typing.Tuple[Color, Color, Color], ...] = (
    (_y, _r, _g),
    (_r, _w, _g),
    (_w, _o, _g),
    (_o, _y, _g),
    (_r, _y, _b),
    (_w, _r, _b),
    (_o, _w, _b),
    (_y, _o, _b)
)

CORNER_LOCATIONS: typing.Tuple[typing.Tuple[Face, Face, Face], ...] = (
    (D, R, F),
    (R, U, F),
    (U, L, F),
    (L, D, F),
    (R, D, B),
    (U, R, B),
    (L, U, B),
    (D, L, B)
)

EDGE_COLORS: typing.Tuple[typing.Tuple[Color, Color], ...] = (
    (_g, _y),
    (_g, _r),
    (_g, _w),
    (_g, _o),
    (_y, _r),
    (_w, _r),
    (_w, _o),
    (_y, _o),
    (_b, _y),
    (_b, _r),
    (_b, _w),
    (_b, _o)
)

EDGE_LOCATIONS: typing.Tuple[typing.Tuple[Face, Face], ...] = (
    (F, D),
    (F, R),
    (F, U),
    (F, L),
    (D, R),
    (U, R),
    (U, L),
    (D, L),
    (B, D),
    (B, R),
    (B, U),
    (B, L)
)

#Corner slots whose reported twist runs the other way around
CORNER_SLOT_MIRRORED: typing.Tuple[bool, ...] = (True, False, True, False, False, True, False, True)

#Facelet string index of every face of every slot, matching CORNER_LOCATIONS / EDGE_LOCATIONS
CORNER_FACE_INDICES: typing.Tuple[typing.Tuple[int, int, int], ...] = (
    (29, 15, 26),
    (9, 8, 20),
    (6, 38, 18),
    (44, 27, 24),
    (17, 35, 51),
    (2, 11, 45),
    (36, 0, 47),
    (33, 42, 53)
)

EDGE_FACE_INDICES: typing.Tuple[typing.Tuple[int, int], ...] = (
    (25, 28),
    (23, 12),
    (19, 7),
    (21, 41),
    (32, 16),
    (5, 10),
    (3, 37),
    (30, 43),
    (52, 34),
    (48, 14),
    (46, 1),
    (50, 39)
)

#Centers aren't reported by the cube, they always sit in the middle of their face
CENTER_FACE_INDICES: typing.Dict[int, Face] = {
    4: Face.U,
    13: Face.R,
    22: Face.F,
    31: Face.D,
    40: Face.L,
    49: Face.B
}

NUM_FACELETS = 54
