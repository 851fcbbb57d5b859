"""
Account addresses
Parses raw ("0:<hex>") and user-friendly (base64) account addresses into
the (workchain, 32-byte hash) pair that is bound into sign-data digests.
"""
import base64
import binascii
import re
import struct
from dataclasses import dataclass

from .errors import AddressError

HASH_SIZE = 32
FRIENDLY_LENGTH = 48

TAG_BOUNCEABLE = 0x11
TAG_NON_BOUNCEABLE = 0x51
TAG_TEST_ONLY = 0x80

_RAW_RE = re.compile(r'(-?[0-9]+):([0-9a-fA-F]{64})')


def _crc16(data: bytes) -> bytes:
    # CRC-16/XMODEM
    return binascii.crc_hqx(data, 0).to_bytes(2, 'big')


@dataclass(frozen=True)
class AccountId:
    """Structural account identity"""
    workchain: int
    hash_part: bytes

    def __post_init__(self):
        if not -2**31 <= self.workchain < 2**31:
            raise AddressError(f"workchain {self.workchain} does not fit in int32")
        if len(self.hash_part) != HASH_SIZE:
            raise AddressError(f"account hash must be {HASH_SIZE} bytes, got {len(self.hash_part)}")

    def to_bytes(self) -> bytes:
        """int32 big-endian workchain followed by the account hash"""
        return struct.pack('>i', self.workchain) + self.hash_part

    def to_raw(self) -> str:
        return f"{self.workchain}:{self.hash_part.hex()}"


def _parse_raw(match) -> AccountId:
    return AccountId(int(match.group(1)), bytes.fromhex(match.group(2)))


def _parse_friendly(text: str) -> AccountId:
    url_safe = '-' in text or '_' in text
    if url_safe and ('+' in text or '/' in text):
        raise AddressError(f"address {text!r} mixes standard and url-safe base64")
    altchars = b'-_' if url_safe else None
    try:
        data = base64.b64decode(text, altchars=altchars, validate=True)
    except (binascii.Error, ValueError) as e:
        raise AddressError(f"address {text!r} is not valid base64: {e}") from e

    if len(data) != 36:
        raise AddressError(f"address {text!r} decodes to {len(data)} bytes, expected 36")

    tag = data[0] & ~TAG_TEST_ONLY
    if tag not in (TAG_BOUNCEABLE, TAG_NON_BOUNCEABLE):
        raise AddressError(f"address {text!r} has unknown tag 0x{data[0]:02x}")

    if _crc16(data[:34]) != data[34:]:
        raise AddressError(f"address {text!r} has an invalid checksum")

    workchain = struct.unpack('>b', data[1:2])[0]
    return AccountId(workchain, data[2:34])


def parse_address(text: str) -> AccountId:
    """
    Parse an account address.

    Raises:
        AddressError: text is neither a raw nor a user-friendly address
    """
    if not isinstance(text, str):
        raise AddressError(f"address must be a string, got {type(text).__name__}")

    match = _RAW_RE.fullmatch(text)
    if match:
        return _parse_raw(match)
    if len(text) == FRIENDLY_LENGTH:
        return _parse_friendly(text)
    raise AddressError(f"unrecognized address format: {text!r}")


def format_address(account: AccountId, bounceable: bool = True,
                   test_only: bool = False, url_safe: bool = True) -> str:
    """Render the user-friendly form of an account (int8 workchains only)"""
    if not -128 <= account.workchain <= 127:
        raise AddressError(f"workchain {account.workchain} has no user-friendly form")

    tag = TAG_BOUNCEABLE if bounceable else TAG_NON_BOUNCEABLE
    if test_only:
        tag |= TAG_TEST_ONLY
    body = bytes([tag]) + struct.pack('>b', account.workchain) + account.hash_part
    data = body + _crc16(body)
    if url_safe:
        return base64.urlsafe_b64encode(data).decode()
    return base64.b64encode(data).decode()
