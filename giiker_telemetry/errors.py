class GiikerError(Exception): pass

class DecodeError(GiikerError):
    """A raw state frame could not be decoded"""

class FrameLengthError(DecodeError):
    def __init__(self, length: int, min_length: int):
        super().__init__(f"state frame has {length} bytes, expected at least {min_length}")
        self.length, self.min_length = length, min_length

class NibbleDomainError(DecodeError):
    def __init__(self, kind: str, value: int):
        super().__init__(f"{kind} nibble {value} is outside its defined domain")
        self.kind, self.value = kind, value

class ProjectionError(GiikerError):
    """A cube state can't be projected onto visible piece colors"""

class FaceletPartitionError(GiikerError):
    """The facelet index tables don't cover indices 0..53 exactly once"""
