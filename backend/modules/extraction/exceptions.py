"""
Document extraction exceptions.
"""

from shared.exceptions import ValidationError


class EmptyImageError(ValidationError):
    """Raised when an upload carries no bytes."""

    def __init__(self):
        super().__init__(
            "No image file provided or file buffer is empty",
            code="EMPTY_IMAGE",
        )


class UnsupportedImageTypeError(ValidationError):
    """Raised when the MIME type is not an accepted image type."""

    def __init__(self, mime_type: str, allowed: tuple[str, ...]):
        super().__init__(
            f"Unsupported image type: {mime_type}. Supported image types: {', '.join(allowed)}",
            code="UNSUPPORTED_IMAGE_TYPE",
            details={"mime_type": mime_type, "allowed": list(allowed)},
        )


class ImageTooLargeError(ValidationError):
    """Raised when an image exceeds the size limit."""

    def __init__(self, size: int, max_bytes: int):
        super().__init__(
            f"Image file too large. Maximum size is {max_bytes // (1024 * 1024)}MB",
            code="IMAGE_TOO_LARGE",
            details={"size": size, "max_bytes": max_bytes},
        )
