"""
Cryptography Layer - Hashing
Collision-resistant hash function behind the sign-data digest
"""
import hashlib


def hash_data(data: bytes) -> bytes:
    """Hash arbitrary bytes using SHA-256"""
    return hashlib.sha256(data).digest()


def hash_text(text: str) -> bytes:
    """Hash the UTF-8 encoding of a string"""
    return hash_data(text.encode('utf-8'))


def hash_hex(data: bytes) -> str:
    """Return hex representation of hash"""
    return hashlib.sha256(data).hexdigest()
