class DockvizError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputReadError(DockvizError):
    """Raised when the input stream cannot be fully read."""


class DecodeError(DockvizError):
    """Raised when the input is not a valid JSON array of image records."""


class LineageCycleError(DecodeError):
    """Raised when an image turns out to be its own ancestor."""

    def __init__(self, image_id: str):
        self.image_id = image_id
        super().__init__(f"Image {image_id!r} is its own ancestor")


class UsageError(DockvizError):
    """Raised when no rendering mode was selected."""
