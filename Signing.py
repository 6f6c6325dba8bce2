# Copyright (2025) Beijing Volcano Engine Technology Ltd.
# SPDX-License-Identifier: MIT

import hashlib
import hmac
import secrets
import zlib

from ByteBuffer import pack_uint32
from TokenConfig import SALT_MAX


def _to_bytes(content):
    if isinstance(content, str):
        return content.encode("utf-8")
    return content


def hmac_sha256(key, content):
    return hmac.new(_to_bytes(key), _to_bytes(content), hashlib.sha256).digest()


# v007: the app certificate is first keyed by the issue timestamp, then the
# result is keyed by the salt.
def signing_key(app_cert, issue_ts, salt):
    signing = hmac_sha256(pack_uint32(issue_ts), app_cert)
    return hmac_sha256(pack_uint32(salt), signing)


def sign_v007(app_cert, issue_ts, salt, data):
    return hmac_sha256(signing_key(app_cert, issue_ts, salt), data)


# v006: plain HMAC over appId + channelName + uid + message, keyed by the certificate.
def sign_v006(app_certificate, app_id, channel_name, uid, message):
    content = _to_bytes(app_id) + _to_bytes(channel_name) + _to_bytes(uid) + message
    return hmac_sha256(app_certificate, content)


def crc32(value):
    return zlib.crc32(_to_bytes(value)) & 0xffffffff


def generate_salt():
    return secrets.randbelow(SALT_MAX) + 1
