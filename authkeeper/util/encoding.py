"""
Encoding and comparison helpers for secret handling.
"""

import base64
import binascii
import hashlib
import hmac
from typing import Optional, Union


def to_bytes(data: Union[str, bytes]) -> bytes:
    """Encode text as UTF-8, pass bytes through."""
    if isinstance(data, bytes):
        return data
    return data.encode('utf-8')


def secure_compare(a: Union[str, bytes], b: Union[str, bytes]) -> bool:
    """
    Timing-safe comparison of two secrets.

    Both sides are digested first so the comparison runs over two values of
    equal length, and the time taken reveals neither content nor length.
    """
    if not isinstance(a, (str, bytes)) or not isinstance(b, (str, bytes)):
        return False

    a_bytes = to_bytes(a)
    b_bytes = to_bytes(b)
    digests_equal = hmac.compare_digest(
        hashlib.sha256(a_bytes).digest(),
        hashlib.sha256(b_bytes).digest()
    )
    # Digest equality alone would accept a SHA-256 collision.
    return digests_equal and hmac.compare_digest(a_bytes, b_bytes)


def url_safe_encode(data: Union[str, bytes]) -> str:
    """Encode data to URL-safe base64 string without padding."""
    return base64.urlsafe_b64encode(to_bytes(data)).decode('ascii').rstrip('=')


def url_safe_decode(encoded: str) -> Optional[bytes]:
    """Decode URL-safe base64 string, returning None for malformed input."""
    padding = 4 - (len(encoded) % 4)
    if padding != 4:
        encoded += '=' * padding

    try:
        return base64.urlsafe_b64decode(encoded)
    except (binascii.Error, ValueError):
        return None
