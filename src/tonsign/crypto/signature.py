"""
Cryptography Layer - Sign-data Message with Domain Separation
Fixed field order and widths; signer and verifier build identical bytes

    0xffff || "ton-connect/sign-data/"
    || workchain (int32 BE) || account hash (32)
    || len(domain) (uint32 BE) || encoded domain
    || timestamp (uint64 BE)
    || payload tag (3)
    || text/binary: len (uint32 BE) || bytes
       cell:        sha256(schema) || cell hash

The SHA-256 of these bytes is what gets signed.
"""
import struct

from .hashing import hash_data
from .keys import KeyPair
from ..errors import PayloadError

SIGN_DATA_PREFIX = b"\xff\xff" + b"ton-connect/sign-data/"

MAX_TIMESTAMP = 2**64 - 1
MAX_SEGMENT = 2**32 - 1


def _u32(n: int, what: str) -> bytes:
    if not 0 <= n <= MAX_SEGMENT:
        raise PayloadError(f"{what} length {n} does not fit in uint32")
    return struct.pack('>I', n)


class SignDataMessage:
    """Digest assembler for one (account, domain, timestamp, payload) tuple"""

    def __init__(self, account, domain_bytes: bytes, timestamp: int, payload):
        if isinstance(timestamp, bool) or not isinstance(timestamp, int):
            raise PayloadError(f"timestamp must be an integer, got {type(timestamp).__name__}")
        if not 0 <= timestamp <= MAX_TIMESTAMP:
            raise PayloadError(f"timestamp {timestamp} does not fit in uint64")
        self.account = account
        self.domain_bytes = domain_bytes
        self.timestamp = timestamp
        self.payload = payload
        self.signature = None

    def get_signing_bytes(self) -> bytes:
        """Get deterministic pre-image with domain separation"""
        parts = [
            SIGN_DATA_PREFIX,
            self.account.to_bytes(),
            _u32(len(self.domain_bytes), "domain"),
            self.domain_bytes,
            struct.pack('>Q', self.timestamp),
            self.payload.tag,
        ]
        if self.payload.is_cell:
            parts.append(self.payload.schema_hash)
            parts.append(self.payload.cell_hash)
        else:
            parts.append(_u32(len(self.payload.data), "payload"))
            parts.append(self.payload.data)
        return b"".join(parts)

    def get_digest(self) -> bytes:
        """The 32-byte digest that is actually signed"""
        return hash_data(self.get_signing_bytes())

    def sign(self, keypair: KeyPair) -> bytes:
        """Sign the digest with given keypair"""
        self.signature = keypair.sign(self.get_digest())
        return self.signature

    def verify(self, public_key_bytes: bytes) -> bool:
        """Verify the signature"""
        if self.signature is None:
            return False
        return KeyPair.verify(public_key_bytes, self.signature, self.get_digest())
