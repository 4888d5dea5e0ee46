class UV:
    """
    Represents a 2D surface coordinate used for texture lookups.
    """
    __slots__ = ("u", "v")

    def __init__(self, u: float = 0.0, v: float = 0.0):
        self.u = u
        self.v = v

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
