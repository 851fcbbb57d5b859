"""
Error taxonomy for sign-data
Every failure names the stage it came from (domain, address, payload)
"""


class SignDataError(ValueError):
    """Base class for malformed sign-data input"""

    stage = "sign-data"


class DnsNameError(SignDataError):
    """Domain could not be canonicalized"""

    stage = "domain"


class EmptyDomainError(DnsNameError):
    pass


class EmptyLabelError(DnsNameError):
    pass


class InvalidLabelError(DnsNameError):
    pass


class NameTooLongError(DnsNameError):

    def __init__(self, size: int, limit: int):
        super().__init__(f"Encoded name is {size} bytes, limit is {limit}")
        self.size = size
        self.limit = limit


class AddressError(SignDataError):
    """Account address text is malformed"""

    stage = "address"


class PayloadError(SignDataError):
    """Payload cannot be decoded or canonicalized"""

    stage = "payload"
