"""
Payload Layer - Canonicalization
Maps each payload variant onto the tag and byte segment mixed into the digest
"""
from dataclasses import dataclass
from typing import Optional

from ..crypto.hashing import hash_data
from ..errors import PayloadError
from ..types import TextPayload, BinaryPayload, CellPayload, SignDataPayload
from .base64util import decode_base64
from .cells import CellCodec, PytoniqCellCodec

TAG_TEXT = b"txt"
TAG_BINARY = b"bin"
TAG_CELL = b"cel"

CELL_HASH_SIZE = 32


@dataclass(frozen=True)
class CanonicalPayload:
    """Payload-type discriminator plus its canonical bytes"""
    tag: bytes
    data: bytes = b""
    schema_hash: bytes = b""
    cell_hash: bytes = b""

    @property
    def is_cell(self) -> bool:
        return self.tag == TAG_CELL


def _utf8(value: str, field: str) -> bytes:
    if not isinstance(value, str):
        raise PayloadError(f"{field}: expected a string")
    try:
        return value.encode('utf-8')
    except UnicodeEncodeError as e:
        raise PayloadError(f"{field}: not valid UTF-8 ({e.reason} at {e.start})") from e


def canonicalize_text(payload: TextPayload) -> CanonicalPayload:
    return CanonicalPayload(TAG_TEXT, data=_utf8(payload.text, "text"))


def canonicalize_binary(payload: BinaryPayload) -> CanonicalPayload:
    return CanonicalPayload(TAG_BINARY, data=decode_base64(payload.bytes, "bytes"))


def canonicalize_cell(payload: CellPayload, codec: CellCodec) -> CanonicalPayload:
    """
    Hash the schema as opaque text and take the content hash of the decoded
    cell. The schema is never parsed.
    """
    schema_hash = hash_data(_utf8(payload.schema, "schema"))
    try:
        cell = codec.decode(payload.cell)
        cell_hash = bytes(codec.content_hash(cell))
    except PayloadError:
        raise
    except Exception as e:
        raise PayloadError(f"cell: codec failed: {type(e).__name__}: {e}") from e
    if len(cell_hash) != CELL_HASH_SIZE:
        raise PayloadError(
            f"cell: content hash must be {CELL_HASH_SIZE} bytes, got {len(cell_hash)}"
        )
    return CanonicalPayload(TAG_CELL, schema_hash=schema_hash, cell_hash=cell_hash)


def canonicalize_payload(payload: SignDataPayload,
                         cell_codec: Optional[CellCodec] = None) -> CanonicalPayload:
    """Dispatch on the payload variant"""
    if isinstance(payload, TextPayload):
        return canonicalize_text(payload)
    if isinstance(payload, BinaryPayload):
        return canonicalize_binary(payload)
    if isinstance(payload, CellPayload):
        return canonicalize_cell(payload, cell_codec or PytoniqCellCodec())
    raise TypeError(f"unsupported payload type: {type(payload).__name__}")
