"""Resolve picture symbol image references to inline data URIs with their size."""

from __future__ import annotations

import base64
import binascii
import io
import logging
from dataclasses import dataclass

import httpx
from PIL import Image, UnidentifiedImageError

from symbology.exceptions import ImageResourceError
from symbology.remote import get_bytes

logger = logging.getLogger(__name__)

_DATA_URI_PREFIX = "data:"


@dataclass(frozen=True)
class ResolvedImage:
    data_uri: str
    width: int
    height: int


def image_reference(image_data: str | None, content_type: str | None, url: str | None) -> str | None:
    """Inline image bytes take precedence over a remote url."""
    if image_data:
        return f"data:{content_type or 'image/png'};base64,{image_data}"
    return url


async def load_image(uri: str, client: httpx.AsyncClient | None = None) -> ResolvedImage:
    """Fetch (when remote) and decode an image, returning it as a data URI.

    Raises ImageResourceError when the bytes cannot be fetched or decoded.
    """
    if uri.startswith(_DATA_URI_PREFIX):
        payload, content_type = _decode_data_uri(uri)
    else:
        try:
            payload, content_type = await get_bytes(uri, client)
        except httpx.HTTPError as e:
            raise ImageResourceError(f"cannot fetch image {uri}: {e}") from e

    width, height, detected_type = _measure(payload)
    content_type = _clean_content_type(content_type) or detected_type
    encoded = base64.b64encode(payload).decode("ascii")
    return ResolvedImage(
        data_uri=f"data:{content_type};base64,{encoded}",
        width=width,
        height=height,
    )


def _decode_data_uri(uri: str) -> tuple[bytes, str | None]:
    header, sep, data = uri[len(_DATA_URI_PREFIX):].partition(",")
    if not sep:
        raise ImageResourceError("data URI has no payload")
    params = header.split(";")
    content_type = params[0] or None
    if "base64" not in params[1:]:
        raise ImageResourceError("only base64 data URIs are supported")
    try:
        return base64.b64decode(data, validate=True), content_type
    except (binascii.Error, ValueError) as e:
        raise ImageResourceError(f"invalid base64 image data: {e}") from e


def _measure(payload: bytes) -> tuple[int, int, str]:
    try:
        with Image.open(io.BytesIO(payload)) as img:
            width, height = img.size
            mime = Image.MIME.get(img.format or "", "image/png")
    except (UnidentifiedImageError, OSError) as e:
        raise ImageResourceError(f"cannot decode image: {e}") from e
    return width, height, mime


def _clean_content_type(content_type: str | None) -> str | None:
    if not content_type:
        return None
    return content_type.split(";")[0].strip() or None
