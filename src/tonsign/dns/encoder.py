"""
DNS Layer - Domain Name Encoding
Turns a human-readable domain into the null-terminated, reversed-label wire
form bound into sign-data digests (TEP-81 style).

    encode_dns_name("tonkeeper.com")  ->  b"com\\0tonkeeper\\0"
    encode_dns_name(".")              ->  b"\\0"

Non-ASCII labels are NFC-normalized, lowercased and converted to punycode
with the "xn--" prefix, one label at a time.
"""
import unicodedata
from typing import List

from ..errors import (
    EmptyDomainError,
    EmptyLabelError,
    InvalidLabelError,
    NameTooLongError,
)

MAX_LABEL_BYTES = 63
MAX_ENCODED_NAME_BYTES = 126

ACE_PREFIX = "xn--"

# TEP-81 label alphabet
_MIN_LABEL_BYTE = 0x21
_MAX_LABEL_BYTE = 0x7E


def _to_ascii_label(label: str) -> bytes:
    """Lowercase a label and apply punycode when it is not plain ASCII"""
    if label.isascii():
        return label.lower().encode('ascii')

    for ch in label:
        if unicodedata.category(ch)[0] in ('C', 'Z'):
            raise InvalidLabelError(
                f"invalid label {label!r}: disallowed character U+{ord(ch):04X}"
            )

    # No IDNA mapping: ß and ς stay distinct from ss and σ
    prepared = unicodedata.normalize('NFC', label).lower()
    if prepared.isascii():
        raise InvalidLabelError(
            f"invalid label {label!r}: non-ASCII characters fold onto ASCII {prepared!r}"
        )
    return (ACE_PREFIX + prepared.encode('punycode').decode('ascii')).encode('ascii')


def _check_label(label: str, encoded: bytes):
    if not 1 <= len(encoded) <= MAX_LABEL_BYTES:
        raise InvalidLabelError(
            f"invalid label {label!r}: {len(encoded)} bytes, "
            f"expected 1-{MAX_LABEL_BYTES}"
        )
    for b in encoded:
        if not _MIN_LABEL_BYTE <= b <= _MAX_LABEL_BYTE:
            raise InvalidLabelError(
                f"invalid label {label!r}: byte 0x{b:02x} outside "
                f"0x{_MIN_LABEL_BYTE:02x}-0x{_MAX_LABEL_BYTE:02x}"
            )


def encode_dns_name(domain: str) -> bytes:
    """
    Encode a domain name into its sign-data wire form.

    Raises:
        EmptyDomainError: domain is an empty string
        EmptyLabelError: consecutive dots or a leading dot
        InvalidLabelError: disallowed character or label outside 1-63 bytes
        NameTooLongError: encoded form exceeds 126 bytes
    """
    if not isinstance(domain, str):
        raise TypeError("domain must be a string")
    if not domain:
        raise EmptyDomainError("domain must be a non-empty string")

    name = domain[:-1] if domain.endswith('.') else domain
    if not name:
        # Root domain
        return b'\x00'

    labels = name.split('.')
    if any(label == '' for label in labels):
        raise EmptyLabelError(f"domain {domain!r} contains an empty label")

    encoded_labels: List[bytes] = []
    for label in labels:
        encoded = _to_ascii_label(label)
        _check_label(label, encoded)
        encoded_labels.append(encoded)

    out = b''.join(label + b'\x00' for label in reversed(encoded_labels))
    if len(out) > MAX_ENCODED_NAME_BYTES:
        raise NameTooLongError(len(out), MAX_ENCODED_NAME_BYTES)
    return out


def decode_dns_name(encoded: bytes) -> str:
    """Reverse encode_dns_name into dotted form (punycode labels stay ASCII)"""
    if not encoded or encoded[-1] != 0:
        raise ValueError("encoded name must end with a null byte")
    if encoded == b'\x00':
        return '.'
    labels = encoded[:-1].split(b'\x00')
    return '.'.join(label.decode('ascii') for label in reversed(labels))
