from PIL import Image, UnidentifiedImageError
import base64
import io
import logging
from typing import Optional

from touristid.core.config import settings
from touristid.core.exceptions import EncodingError

logger = logging.getLogger(__name__)

def validate_image(image_bytes: bytes, max_size_mb: int = None) -> str:
    """
    Validate image file
    Returns the detected format (e.g. "PNG"), raises EncodingError otherwise
    """
    max_size_mb = max_size_mb or settings.MAX_UPLOAD_SIZE_MB

    size_mb = len(image_bytes) / (1024 * 1024)
    if size_mb > max_size_mb:
        raise EncodingError(f"Image too large: {size_mb:.2f}MB (max {max_size_mb}MB)")

    try:
        with Image.open(io.BytesIO(image_bytes)) as image:
            image.verify()
            image_format = image.format
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as e:
        raise EncodingError(f"Unreadable image: {e}") from e

    if image_format not in settings.ALLOWED_IMAGE_TYPES:
        raise EncodingError(f"Unsupported format: {image_format}")

    return image_format

def encode_photo(image_bytes: Optional[bytes]) -> Optional[str]:
    """Encode an uploaded photo as a base64 data URL. No bytes means no photo."""
    if not image_bytes:
        return None

    try:
        image_format = validate_image(image_bytes)
    except EncodingError as e:
        logger.warning(f"Photo rejected: {e.reason}")
        raise

    mime = Image.MIME.get(image_format, f"image/{image_format.lower()}")
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime};base64,{encoded}"
