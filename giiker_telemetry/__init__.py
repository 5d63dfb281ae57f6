from .log import LOGGER
from .errors import GiikerError, DecodeError, FrameLengthError, NibbleDomainError, ProjectionError, FaceletPartitionError
from .geometry import Face, Color
from .move import Move, decode_move
from .state import CubeState, DecodedFrame, decode_frame
from .projection import ProjectedCorner, ProjectedEdge, ProjectedState, project_state
from .facelets import to_facelet_string, state_string, face_states, is_solved_string
from .cube import CubeDevice, BatteryInfo
from .scan import scan_for_cube, scan_for_cube_devices
