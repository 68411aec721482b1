"""Exception hierarchy for polytree."""


class PolyTreeError(Exception):
    """Base exception for all polytree errors."""

    pass


class InvalidArgumentError(PolyTreeError, ValueError):
    """Malformed point, bounding box or contour."""

    def __init__(self, argument: object, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument {argument!r}: {reason}")


class EmptyInputError(PolyTreeError, ValueError):
    """No contours were supplied to the tree builder."""

    def __init__(self, message: str = "No contours") -> None:
        super().__init__(message)


class PolyFileError(PolyTreeError, OSError):
    """Error reading a boundary file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Couldn't open '{path}': {reason}")


class ClippingError(PolyTreeError):
    """The polygon clipping backend failed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Polygon clipping failed: {reason}")
