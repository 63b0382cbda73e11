"""Exceptions raised by touchcam."""


class MissingCameraError(RuntimeError):
    """Raised when a camera session is started without a camera."""

    def __init__(self) -> None:
        """Initialize with a fixed message."""
        super().__init__("A camera is required to start a touch camera session")
