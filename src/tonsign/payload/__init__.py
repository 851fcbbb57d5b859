"""Payload layer initialization"""
from .canonical import CanonicalPayload, canonicalize_payload, TAG_TEXT, TAG_BINARY, TAG_CELL
from .cells import CellCodec, PytoniqCellCodec
from .base64util import decode_base64

__all__ = ['CanonicalPayload', 'canonicalize_payload', 'TAG_TEXT', 'TAG_BINARY', 'TAG_CELL',
           'CellCodec', 'PytoniqCellCodec', 'decode_base64']
