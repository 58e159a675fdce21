# core/uv.py
class UV:
    """
    Represents a 2D texture coordinate.
    """
    __slots__ = ("u", "v")

    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    def clamped(self) -> "UV":
        """Returns a copy with both coordinates clamped to [0, 1]."""
        return UV(min(max(self.u, 0.0), 1.0), min(max(self.v, 0.0), 1.0))

    def __eq__(self, other) -> bool:
        if not isinstance(other, UV):
            return NotImplemented
        return self.u == other.u and self.v == other.v

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
