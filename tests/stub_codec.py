"""
Stand-in structural-data codec for tests
The "cell" is the decoded BoC bytes and its content hash is their SHA-256
"""
import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from tonsign.crypto.hashing import hash_data
from tonsign.errors import PayloadError
from tonsign.payload.base64util import decode_base64


class StubCellCodec:
    """Counts calls so tests can check the codec was consulted"""

    def __init__(self):
        self.decoded = 0

    def decode(self, boc_b64: str) -> bytes:
        raw = decode_base64(boc_b64, "cell")
        if not raw:
            raise PayloadError("cell: empty bag of cells")
        self.decoded += 1
        return raw

    def content_hash(self, cell: bytes) -> bytes:
        return hash_data(cell)
