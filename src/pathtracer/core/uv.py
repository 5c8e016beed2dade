# core/uv.py
class UV:
    """
    Represents a 2D surface (texture) coordinate.
    """
    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    def __iter__(self):
        yield self.u
        yield self.v

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
