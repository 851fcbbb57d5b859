"""
Sign-data facade
sign_data / verify_sign_data for text, binary and cell payloads.

Both directions run the same assembly: parse the address, encode the
domain, canonicalize the payload, then build the SignDataMessage.
Verification only uses fields carried by the signed result.
"""
import base64
import binascii
import time
from typing import Callable, Optional

from .address import parse_address
from .crypto.keys import KeyPair
from .crypto.signature import SignDataMessage
from .dns.encoder import encode_dns_name
from .errors import SignDataError
from .logger import Logger
from .payload.canonical import canonicalize_payload
from .payload.cells import CellCodec
from .types import SignDataParams, SignDataResult, SignDataPayload


def _log(logger: Optional[Logger], category: str, message: str, stage: Optional[str] = None):
    if logger is not None:
        logger.log(category, message, stage)


def build_sign_data_message(payload: SignDataPayload, domain: str, address: str,
                            timestamp: int,
                            cell_codec: Optional[CellCodec] = None) -> SignDataMessage:
    """
    Assemble the message for signing or verification.

    Raises AddressError, DnsNameError or PayloadError depending on which
    field is malformed.
    """
    account = parse_address(address)
    domain_bytes = encode_dns_name(domain)
    canonical = canonicalize_payload(payload, cell_codec)
    return SignDataMessage(account, domain_bytes, timestamp, canonical)


def sign_data(params: SignDataParams, *, clock: Callable[[], float] = time.time,
              cell_codec: Optional[CellCodec] = None,
              logger: Optional[Logger] = None) -> SignDataResult:
    """
    Sign a payload for a requesting domain on behalf of an account.

    Args:
        params: payload, domain, secret key (32-byte seed or 64-byte secret key)
            and account address
        clock: time source, read once, returning seconds since the epoch
        cell_codec: structural-data codec for cell payloads
        logger: optional Logger receiving SIGN events

    Returns:
        SignDataResult carrying the base64 signature and the inputs as supplied
    """
    timestamp = int(clock())
    keypair = KeyPair.from_secret_key(params.private_key)

    try:
        msg = build_sign_data_message(params.payload, params.domain, params.address,
                                      timestamp, cell_codec)
    except SignDataError as e:
        _log(logger, "SIGN", f"Rejected {e.stage}: {e}", e.stage)
        raise

    signature = msg.sign(keypair)
    _log(logger, "SIGN",
         f"Signed {params.payload.to_dict()['type']} payload for {params.domain!r} "
         f"at {timestamp} (digest {msg.get_digest().hex()[:16]}...)")

    return SignDataResult(
        signature=base64.b64encode(signature).decode(),
        address=params.address,
        timestamp=timestamp,
        domain=params.domain,
        payload=params.payload
    )


def verify_sign_data(signed_data: SignDataResult, public_key: bytes, *,
                     cell_codec: Optional[CellCodec] = None,
                     logger: Optional[Logger] = None) -> bool:
    """
    Check a signed result against a public key.

    Returns False for a bad signature, a tampered field, a wrong key, or any
    malformed field; it does not raise for those.
    """
    try:
        signature = base64.b64decode(signed_data.signature, validate=True)
    except (binascii.Error, ValueError, TypeError):
        _log(logger, "VERIFY", "Rejected: signature is not valid base64", "signature")
        return False

    try:
        msg = build_sign_data_message(signed_data.payload, signed_data.domain,
                                      signed_data.address, signed_data.timestamp,
                                      cell_codec)
    except SignDataError as e:
        _log(logger, "VERIFY", f"Rejected {e.stage}: {e}", e.stage)
        return False

    msg.signature = signature
    valid = msg.verify(public_key)
    _log(logger, "VERIFY",
         f"Signature {'valid' if valid else 'INVALID'} for {signed_data.domain!r} "
         f"at {signed_data.timestamp}")
    return valid
