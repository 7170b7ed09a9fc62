"""Exception hierarchy for gridkit."""


class GridKitError(Exception):
    """Base exception for all gridkit errors."""

    pass


class GridError(GridKitError):
    """Errors related to grid construction or access."""

    pass


class OutOfBoundsError(GridError):
    """Coordinate lies outside the grid extents."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Cell ({x}, {y}) is outside grid of size {width}x{height}"
        )


class GridShapeError(GridError):
    """Rows are missing or not all of the same length."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid grid shape: {reason}")


class GridLoadError(GridError):
    """Error loading a grid from a text file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load grid '{path}': {reason}")


class GraphError(GridKitError):
    """Errors related to graph search."""

    pass


class VertexNotFoundError(GraphError):
    """Source or target node is not part of the vertex set."""

    def __init__(self, role: str, position: tuple[int, int]) -> None:
        self.role = role
        self.position = position
        super().__init__(
            f"{role.capitalize()} node at {position} is not in the vertex set"
        )


class ElevationError(GraphError):
    """Terrain symbol has no height on a climbing grid."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(
            f"Symbol '{symbol}' has no elevation; climbing grids use letters a-z"
        )
