"""
Image upload gate.

Parses a multipart body and enforces the upload rules before any route
logic runs: a single file under the field name "image", an accepted image
MIME type and at most 5MB.
"""

from typing import Optional

from fastapi import Request
from starlette.datastructures import UploadFile

from modules.extraction.models import ImageUpload
from modules.extraction.service import ALLOWED_MIME_TYPES, MAX_IMAGE_BYTES
from shared.exceptions import ValidationError

IMAGE_FIELD = "image"

# Room for multipart boundaries, part headers and small form fields
MULTIPART_OVERHEAD_BYTES = 64 * 1024


class UploadRejectedError(ValidationError):
    """Raised when a multipart upload breaks the upload rules."""

    def __init__(self, message: str, code: str):
        super().__init__(message, code=code)


def _too_large() -> UploadRejectedError:
    return UploadRejectedError(
        f"Image file too large. Maximum size is {MAX_IMAGE_BYTES // (1024 * 1024)}MB.",
        code="FILE_TOO_LARGE",
    )


async def read_image_upload(request: Request) -> Optional[ImageUpload]:
    """
    Dependency that reads the uploaded image, if any.

    Returns:
        The image held in memory, or None when the request carries no file

    Raises:
        UploadRejectedError: If the upload breaks a rule (400)
    """
    content_type = request.headers.get("content-type", "")
    if not content_type.startswith("multipart/form-data"):
        return None

    # Refuse oversized bodies before they are spooled
    content_length = request.headers.get("content-length", "")
    if content_length.isdigit() and int(content_length) > MAX_IMAGE_BYTES + MULTIPART_OVERHEAD_BYTES:
        raise _too_large()

    form = await request.form()
    files = [
        (field, value)
        for field, value in form.multi_items()
        if isinstance(value, UploadFile)
    ]
    if not files:
        return None

    if any(field != IMAGE_FIELD for field, _ in files):
        raise UploadRejectedError(
            'Unexpected file field. Please use field name "image".',
            code="UNEXPECTED_FIELD",
        )
    if len(files) > 1:
        raise UploadRejectedError(
            "Too many files. Only one image file is allowed.",
            code="TOO_MANY_FILES",
        )

    upload = files[0][1]
    mime_type = upload.content_type or ""
    if mime_type not in ALLOWED_MIME_TYPES:
        raise UploadRejectedError(
            f"Unsupported file type: {mime_type or 'unknown'}. "
            f"Supported image types: {', '.join(ALLOWED_MIME_TYPES)}",
            code="UNSUPPORTED_FILE_TYPE",
        )
    if upload.size is not None and upload.size > MAX_IMAGE_BYTES:
        raise _too_large()

    content = await upload.read(MAX_IMAGE_BYTES + 1)
    if len(content) > MAX_IMAGE_BYTES:
        raise _too_large()

    return ImageUpload(
        content=content,
        mime_type=mime_type,
        size=len(content),
        filename=upload.filename or "",
    )
