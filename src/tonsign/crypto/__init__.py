"""Crypto layer initialization"""
from .keys import KeyPair
from .signature import SignDataMessage, SIGN_DATA_PREFIX
from .hashing import hash_data, hash_text, hash_hex

__all__ = ['KeyPair', 'SignDataMessage', 'SIGN_DATA_PREFIX', 'hash_data', 'hash_text', 'hash_hex']
