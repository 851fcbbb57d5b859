"""
Sign-data records
Payload variants, signing parameters and the transmissible signed result
"""
from dataclasses import dataclass
from typing import Dict, Any, Union

from .errors import PayloadError

PAYLOAD_TEXT = "text"
PAYLOAD_BINARY = "binary"
PAYLOAD_CELL = "cell"


@dataclass(frozen=True)
class TextPayload:
    """Free text, signed as UTF-8"""
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": PAYLOAD_TEXT, "text": self.text}


@dataclass(frozen=True)
class BinaryPayload:
    """Arbitrary bytes carried as standard (not url-safe) base64"""
    bytes: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": PAYLOAD_BINARY, "bytes": self.bytes}


@dataclass(frozen=True)
class CellPayload:
    """Bag-of-cells (base64) together with the TL-B schema describing it"""
    schema: str
    cell: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": PAYLOAD_CELL, "schema": self.schema, "cell": self.cell}


SignDataPayload = Union[TextPayload, BinaryPayload, CellPayload]


def payload_from_dict(d: Dict[str, Any]) -> SignDataPayload:
    """Reconstruct a payload from its dictionary form"""
    kind = d.get("type")
    try:
        if kind == PAYLOAD_TEXT:
            return TextPayload(d["text"])
        if kind == PAYLOAD_BINARY:
            return BinaryPayload(d["bytes"])
        if kind == PAYLOAD_CELL:
            return CellPayload(d["schema"], d["cell"])
    except KeyError as e:
        raise PayloadError(f"{kind} payload is missing field {e.args[0]!r}") from e
    raise PayloadError(f"unknown payload type {kind!r}")


@dataclass(frozen=True)
class SignDataParams:
    """Everything needed for one sign_data call"""
    payload: SignDataPayload
    domain: str
    private_key: bytes
    address: str

    def __repr__(self) -> str:
        return (
            f"SignDataParams(payload={self.payload!r}, domain={self.domain!r}, "
            f"private_key=<{len(self.private_key)} bytes>, address={self.address!r})"
        )


@dataclass(frozen=True)
class SignDataResult:
    """
    Signed result handed back to the requesting application.

    address, domain and payload are kept exactly as supplied; verification
    re-derives the digest from these fields and the timestamp.
    """
    signature: str  # base64
    address: str
    timestamp: int
    domain: str
    payload: SignDataPayload

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "signature": self.signature,
            "address": self.address,
            "timestamp": self.timestamp,
            "domain": self.domain,
            "payload": self.payload.to_dict()
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]):
        """Reconstruct from dictionary"""
        try:
            return cls(
                signature=d["signature"],
                address=d["address"],
                timestamp=d["timestamp"],
                domain=d["domain"],
                payload=payload_from_dict(d["payload"])
            )
        except KeyError as e:
            raise PayloadError(f"signed data is missing field {e.args[0]!r}") from e
