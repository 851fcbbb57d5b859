"""
Payload Layer - Cell codec
Structural-data collaborator: decodes a base64 bag of cells and yields the
root cell's representation hash. The cell format itself is left to
pytoniq-core; any object with the same two methods can be injected instead.
"""
from typing import Any, Protocol

from ..errors import PayloadError
from .base64util import decode_base64


class CellCodec(Protocol):
    """Interface consumed by the cell payload canonicalizer"""

    def decode(self, boc_b64: str) -> Any:
        ...

    def content_hash(self, cell: Any) -> bytes:
        ...


class PytoniqCellCodec:
    """CellCodec backed by pytoniq_core.Cell"""

    def __init__(self):
        try:
            from pytoniq_core import Cell
        except ImportError as e:
            raise PayloadError(
                "cell payloads need pytoniq-core (pip install 'tonsign[cell]') "
                "or an injected cell codec"
            ) from e
        self._cell_cls = Cell

    def decode(self, boc_b64: str) -> Any:
        boc = decode_base64(boc_b64, "cell")
        try:
            return self._cell_cls.one_from_boc(boc)
        except Exception as e:
            raise PayloadError(f"cell: cannot deserialize bag of cells: {e}") from e

    def content_hash(self, cell: Any) -> bytes:
        return bytes(cell.hash)
