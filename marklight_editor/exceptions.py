"""Package-specific exception types."""

from __future__ import annotations


class EditorError(ValueError):
    """Base class for errors raised by the editing primitives.

    Engine operations report unmet preconditions as no-ops; these errors
    signal misuse of the underlying types.
    """


class InvalidRangeError(EditorError):
    """Raised when a text range is built with a negative field.

    Args:
        location: Requested start offset.
        length: Requested length.
    """

    def __init__(self, location: int, length: int):
        self.location = location
        self.length = length
        super().__init__(
            f"Invalid range (location={self.location}, length={self.length}): "
            "fields must be non-negative"
        )


class RangeOutOfBoundsError(EditorError):
    """Raised when a buffer primitive receives a range past the end of the text.

    Args:
        location: Start offset of the offending range.
        length: Length of the offending range.
        buffer_length: Length of the buffer at the time of the call.
    """

    def __init__(self, location: int, length: int, buffer_length: int):
        self.location = location
        self.length = length
        self.buffer_length = buffer_length
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"Range (location={self.location}, length={self.length}) exceeds "
            f"buffer length {self.buffer_length}"
        )
