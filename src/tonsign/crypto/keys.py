"""
Cryptography Layer - Key Management
Ed25519 key pairs in the 32-byte seed / 64-byte secret key forms used by wallets
"""
from cryptography.hazmat.primitives.asymmetric import ed25519
from cryptography.hazmat.primitives import serialization

SEED_SIZE = 32
SECRET_KEY_SIZE = 64


class KeyPair:
    """Represents a public/private key pair for signing"""

    def __init__(self, private_key=None, seed: bytes = None):
        if private_key is not None and seed is not None:
            raise ValueError("Provide either an existing private_key or a seed, not both")

        if seed is not None:
            if len(seed) != SEED_SIZE:
                raise ValueError("Ed25519 seeds must be exactly 32 bytes")
            private_key = ed25519.Ed25519PrivateKey.from_private_bytes(bytes(seed))

        if private_key is None:
            # Generate new key pair
            private_key = ed25519.Ed25519PrivateKey.generate()

        self.private_key = private_key
        self.public_key = self.private_key.public_key()

    def sign(self, data: bytes) -> bytes:
        """Sign data with private key"""
        return self.private_key.sign(data)

    def get_public_key_bytes(self) -> bytes:
        """Get public key as bytes"""
        return self.public_key.public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw
        )

    def get_seed_bytes(self) -> bytes:
        return self.private_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption()
        )

    def get_secret_key_bytes(self) -> bytes:
        """Get the 64-byte secret key (seed followed by public key)"""
        return self.get_seed_bytes() + self.get_public_key_bytes()

    @staticmethod
    def from_seed(seed: bytes) -> 'KeyPair':
        """Create deterministic keypair from 32-byte seed"""
        return KeyPair(seed=seed)

    @staticmethod
    def from_secret_key(secret_key: bytes) -> 'KeyPair':
        """
        Load a keypair from wallet key material.

        Accepts a 32-byte seed or a 64-byte secret key whose second half
        must be the public key derived from the first.
        """
        secret_key = bytes(secret_key)
        if len(secret_key) == SEED_SIZE:
            return KeyPair(seed=secret_key)
        if len(secret_key) != SECRET_KEY_SIZE:
            raise ValueError(
                f"Secret key must be {SEED_SIZE} or {SECRET_KEY_SIZE} bytes, "
                f"got {len(secret_key)}"
            )
        keypair = KeyPair(seed=secret_key[:SEED_SIZE])
        if keypair.get_public_key_bytes() != secret_key[SEED_SIZE:]:
            raise ValueError("Secret key public half does not match its seed")
        return keypair

    @staticmethod
    def verify(public_key_bytes: bytes, signature: bytes, data: bytes) -> bool:
        """Verify signature against public key and data"""
        try:
            public_key = ed25519.Ed25519PublicKey.from_public_bytes(bytes(public_key_bytes))
            public_key.verify(bytes(signature), data)
            return True
        except Exception:
            return False
