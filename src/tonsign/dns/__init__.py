"""DNS layer initialization"""
from .encoder import encode_dns_name, decode_dns_name, MAX_LABEL_BYTES, MAX_ENCODED_NAME_BYTES

__all__ = ['encode_dns_name', 'decode_dns_name', 'MAX_LABEL_BYTES', 'MAX_ENCODED_NAME_BYTES']
