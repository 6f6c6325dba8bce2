# Copyright (2025) Beijing Volcano Engine Technology Ltd.
# SPDX-License-Identifier: MIT

"""
Version 007 access tokens.

Wire format::

    "007" + base64(deflate(pack_bytes(signature) + content))

where ``content`` is the app id, issue timestamp, expire, salt and the
service records in ascending service type order. The signature is an
HMAC-SHA256 over ``content`` with a key derived from the app certificate,
issue timestamp and salt (see ``Signing.signing_key``).
"""

import base64
import string
import time
import zlib

from ByteBuffer import ReadByteBuffer, pack_bytes, pack_string, pack_uint16, pack_uint32
from Services import new_service
from Signing import generate_salt, sign_v007
from TokenConfig import APP_ID_LENGTH, DEFAULT_EXPIRE_SECONDS, VERSION_007, VERSION_LENGTH
from TokenErrors import InvalidCredentialFormat, MalformedData, TokenError, VersionMismatch
from TokenLog import get_logger

VERSION = VERSION_007

logger = get_logger(__name__)


def is_uuid(value):
    return (isinstance(value, str) and len(value) == APP_ID_LENGTH
            and all(c in string.hexdigits for c in value))


class AccessToken:

    def __init__(self, app_id="", app_cert="", expire=DEFAULT_EXPIRE_SECONDS, issue_ts=None, salt=None):
        self.app_id = app_id
        self.app_cert = app_cert
        self.expire = expire
        self.issue_ts = int(time.time()) if issue_ts is None else issue_ts
        self.salt = generate_salt() if salt is None else salt
        self.services = {}
        self.signature = b""

    # AddService registers a service record; a record of the same type is replaced.
    def add_service(self, service):
        self.services[service.service_type] = service
        return self

    def _check_credentials(self):
        if not is_uuid(self.app_id):
            raise InvalidCredentialFormat(
                "Application Id: %s is not a valid UUID" % self.app_id,
                details={"field": "app_id"})
        if not is_uuid(self.app_cert):
            # never echo the certificate back
            raise InvalidCredentialFormat(
                "Application Cert is not a valid UUID",
                details={"field": "app_cert"})

    def pack_content(self):
        m = pack_string(self.app_id)
        m += pack_uint32(self.issue_ts)
        m += pack_uint32(self.expire)
        m += pack_uint32(self.salt)
        m += pack_uint16(len(self.services))
        for service_type in sorted(self.services):
            m += self.services[service_type].pack()
        return m

    # Build generates the token string. With throw=False an invalid app id or
    # certificate yields "" instead of raising.
    def build(self, throw=True):
        try:
            self._check_credentials()
        except InvalidCredentialFormat as e:
            if throw:
                raise
            logger.warning("token build skipped", version=VERSION, reason=e.message)
            return ""

        content = self.pack_content()
        signature = sign_v007(self.app_cert, self.issue_ts, self.salt, content)
        token = VERSION + base64.b64encode(zlib.compress(pack_bytes(signature) + content)).decode('utf-8')

        logger.debug("token built", version=VERSION, issue_ts=self.issue_ts,
                     services=sorted(self.services))
        return token


# Parse retrieves token information from raw string. The signature is read
# but not verified; the returned token has no app certificate.
def parse(raw):
    version = raw[:VERSION_LENGTH]
    if version != VERSION:
        logger.warning("token parse failed", reason="version", version=version)
        raise VersionMismatch(version, VERSION)

    try:
        data = zlib.decompress(base64.b64decode(raw[VERSION_LENGTH:], validate=True))
    except (ValueError, zlib.error) as e:
        logger.warning("token parse failed", reason="decode", error=str(e))
        raise MalformedData("token body is not base64 encoded deflate data") from e

    try:
        token = _unpack_content(ReadByteBuffer(data))
    except TokenError as e:
        logger.warning("token parse failed", reason=e.code, error=e.message)
        raise

    logger.debug("token parsed", version=VERSION, issue_ts=token.issue_ts,
                 services=sorted(token.services))
    return token


def _unpack_content(readbuf):
    signature = readbuf.unpack_bytes()
    token = AccessToken(
        app_id=readbuf.unpack_string(),
        issue_ts=readbuf.unpack_uint32(),
        expire=readbuf.unpack_uint32(),
        salt=readbuf.unpack_uint32(),
    )
    token.signature = signature

    service_count = readbuf.unpack_uint16()
    for index in range(service_count):
        service_type = readbuf.unpack_uint16()
        token.services[service_type] = new_service(service_type).unpack(readbuf)
    return token
