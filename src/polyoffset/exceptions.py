"""Exception hierarchy for polyoffset."""


class PolyoffsetError(Exception):
    """Base exception for all polyoffset errors."""

    pass


class ArgumentError(PolyoffsetError, ValueError):
    """Invalid input passed to an offset function or polyline query."""

    pass


class DistanceCountError(ArgumentError):
    """Number of offset distances does not match the number of segments."""

    def __init__(self, given: int, expected: int, context: str = "") -> None:
        self.given = given
        self.expected = expected
        suffix = f" ({context})" if context else ""
        super().__init__(
            f"Expected {expected} offset distances but got {given}{suffix}"
        )


class CollinearDistanceError(ArgumentError):
    """Collinear segments carry different distances and the policy is FAIL."""

    def __init__(self, index: int, prev_distance: float, next_distance: float) -> None:
        self.index = index
        self.prev_distance = prev_distance
        self.next_distance = next_distance
        super().__init__(
            f"Point {index} joins collinear segments with different offset "
            f"distances {prev_distance} and {next_distance}"
        )


class GeometryError(PolyoffsetError):
    """Errors in geometric calculations."""

    pass


class UTurnError(GeometryError):
    """A corner turns back on itself beyond the allowed threshold."""

    def __init__(self, index: int, degrees: float, max_degrees: float) -> None:
        self.index = index
        self.degrees = degrees
        self.max_degrees = max_degrees
        super().__init__(
            f"Point {index} makes a {degrees:.4f} degree U-turn, "
            f"max {max_degrees:.4f} is allowed"
        )
