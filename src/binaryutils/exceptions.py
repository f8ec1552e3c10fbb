"""Exception hierarchy for binaryutils.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BinaryUtilsError for easy catching of any binaryutils-specific error.
"""

from __future__ import annotations


class BinaryUtilsError(Exception):
    """Base exception for all binaryutils errors."""

    pass


class DecodeError(BinaryUtilsError):
    """Raised when decoding binary data fails."""

    pass


class InvalidInputError(DecodeError):
    """Raised when a decode call receives input of the wrong shape.

    Examples:
        - Slice length does not match the fixed width of the type
        - Negative read length
        - Stream offset outside the buffer
    """

    pass


class UnexpectedEndOfBufferError(DecodeError):
    """Raised when a read requests more bytes than remain in the buffer."""

    pass


class MalformedVarIntError(DecodeError):
    """Raised when a variable-length integer does not terminate within 10 bytes."""

    pass


class EncodeError(BinaryUtilsError):
    """Raised when encoding a value fails."""

    pass


class ValueTooLargeError(EncodeError):
    """Raised when a value needs more than 10 bytes as a variable-length integer."""

    pass
