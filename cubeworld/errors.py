"""Exception types raised by the package."""


class GLError(Exception):
    """Raised when a rendering or world operation fails."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class RubiksCubeError(Exception):
    """Raised when a cube operation is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message