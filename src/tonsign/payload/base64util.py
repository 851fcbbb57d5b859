"""
Payload Layer - Base64 boundary decoding
"""
import base64
import binascii

from ..errors import PayloadError


def decode_base64(value: str, field: str) -> bytes:
    """Strictly decode standard base64; malformed input is a PayloadError"""
    if not isinstance(value, str):
        raise PayloadError(f"{field}: expected base64 text, got {type(value).__name__}")
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise PayloadError(f"{field}: malformed base64: {e}") from e
