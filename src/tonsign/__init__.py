"""
tonsign - domain-bound sign-data for wallet-to-application connections
"""
__version__ = "0.1.0"

from .address import AccountId, parse_address, format_address
from .dns import encode_dns_name, decode_dns_name
from .errors import (
    SignDataError,
    DnsNameError,
    EmptyDomainError,
    EmptyLabelError,
    InvalidLabelError,
    NameTooLongError,
    AddressError,
    PayloadError,
)
from .logger import Logger
from .signer import sign_data, verify_sign_data, build_sign_data_message
from .types import (
    TextPayload,
    BinaryPayload,
    CellPayload,
    SignDataParams,
    SignDataResult,
    payload_from_dict,
)

__all__ = [
    'AccountId', 'parse_address', 'format_address',
    'encode_dns_name', 'decode_dns_name',
    'SignDataError', 'DnsNameError', 'EmptyDomainError', 'EmptyLabelError',
    'InvalidLabelError', 'NameTooLongError', 'AddressError', 'PayloadError',
    'Logger',
    'sign_data', 'verify_sign_data', 'build_sign_data_message',
    'TextPayload', 'BinaryPayload', 'CellPayload', 'SignDataParams', 'SignDataResult',
    'payload_from_dict',
]
