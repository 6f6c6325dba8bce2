# Copyright (2025) Beijing Volcano Engine Technology Ltd.
# SPDX-License-Identifier: MIT

"""
Typed failures raised while building, parsing or extracting access tokens.
"""


class TokenError(Exception):
    """Base exception for the token codec."""

    def __init__(self, code, message, details=None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self):
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidCredentialFormat(TokenError):
    """App id or app certificate is not a 32 character hex string."""

    def __init__(self, message="Invalid credential format", details=None):
        super().__init__("INVALID_CREDENTIAL_FORMAT", message, details)


class InvalidAccountId(TokenError):
    """Uid outside [1, 2^32-1] or account outside [1, 255] ASCII characters."""

    def __init__(self, message="Invalid account id", details=None):
        super().__init__("INVALID_ACCOUNT_ID", message, details)


class MalformedData(TokenError):
    """Buffer underrun or undecodable payload."""

    def __init__(self, message="Malformed token data", details=None):
        super().__init__("MALFORMED_DATA", message, details)


class UnknownServiceType(TokenError):

    def __init__(self, service_type, details=None):
        self.service_type = service_type
        super().__init__("UNKNOWN_SERVICE_TYPE",
                         "Unknown service type %s" % service_type, details)


class VersionMismatch(TokenError):

    def __init__(self, version, expected, details=None):
        self.version = version
        self.expected = expected
        super().__init__("VERSION_MISMATCH",
                         "Invalid token version %r, expected %r" % (version, expected),
                         details)


class EncodingOverflow(TokenError):
    """Value does not fit its fixed-width or length-prefixed field."""

    def __init__(self, message="Value exceeds encoding capacity", details=None):
        super().__init__("ENCODING_OVERFLOW", message, details)


class EmptyRequiredField(TokenError):

    def __init__(self, name, details=None):
        self.field = name
        super().__init__("EMPTY_REQUIRED_FIELD",
                         "%s check failed, should be a non-empty string" % name,
                         details)
