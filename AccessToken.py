# Copyright (2025) Beijing Volcano Engine Technology Ltd.
# SPDX-License-Identifier: MIT

# Version 006 (legacy) access tokens, single channel.
#
#   "006" + appId + base64(pack_bytes(signature) + crc(channelName) + crc(uid) + pack_bytes(message))
#
# The app id is written as is, without a length prefix.
import base64
import time

from ByteBuffer import ReadByteBuffer, pack_bytes, pack_map_uint32, pack_uint32
from Signing import crc32, generate_salt, sign_v006
from TokenConfig import APP_ID_LENGTH, LEGACY_MESSAGE_TTL, VERSION_006, VERSION_LENGTH
from TokenErrors import EmptyRequiredField, MalformedData, TokenError, VersionMismatch
from TokenLog import get_logger
from UserAccount import user_id

VERSION = VERSION_006

logger = get_logger(__name__)


class Message:

    def __init__(self, salt=None, ts=None):
        self.salt = generate_salt() if salt is None else salt
        self.ts = int(time.time()) + LEGACY_MESSAGE_TTL if ts is None else ts
        self.privileges = {}

    def pack_content(self):
        return pack_uint32(self.salt) + pack_uint32(self.ts) + pack_map_uint32(self.privileges)


class AccessToken:
    # Initializes token struct by required parameters.
    def __init__(self, app_id="", app_certificate="", channel_name="", uid=""):
        self.app_id = app_id
        self.app_certificate = app_certificate
        self.channel_name = channel_name
        self.uid = user_id(uid)
        self.message = Message()

        # filled in by extract, never checked against the other fields
        self.signature = b""
        self.crc_channel_name = 0
        self.crc_uid = 0
        self.raw_message = b""

    # AddPrivilege adds permission for token with an expiration.
    def add_privilege(self, privilege, expire_ts):
        self.message.privileges[privilege] = expire_ts
        return self

    # Build generates the token string
    def build(self):
        uid = str(self.uid)
        m = self.message.pack_content()
        signature = sign_v006(self.app_certificate, self.app_id, self.channel_name, uid, m)

        content = pack_bytes(signature)
        content += pack_uint32(crc32(self.channel_name))
        content += pack_uint32(crc32(uid))
        content += pack_bytes(m)

        logger.debug("token built", version=VERSION, privileges=sorted(self.message.privileges))
        return VERSION + self.app_id + base64.b64encode(content).decode('utf-8')

    # Extract recovers the app id from token and takes the remaining fields
    # from the arguments. The embedded signature, CRCs and message are read
    # for inspection only and are not verified.
    def extract(self, token, app_certificate, channel_name, uid):
        version = token[:VERSION_LENGTH]
        if version != VERSION:
            logger.warning("token extract failed", reason="version", version=version)
            raise VersionMismatch(version, VERSION)

        check_not_empty("token", token)
        check_not_empty("appCertificate", app_certificate)
        check_not_empty("channelName", channel_name)

        offset = VERSION_LENGTH + APP_ID_LENGTH
        try:
            content = base64.b64decode(token[offset:], validate=True)
        except ValueError as e:
            logger.warning("token extract failed", reason="decode", error=str(e))
            raise MalformedData("token body is not base64 encoded") from e

        readbuf = ReadByteBuffer(content)
        try:
            self.signature = readbuf.unpack_bytes()
            self.crc_channel_name = readbuf.unpack_uint32()
            self.crc_uid = readbuf.unpack_uint32()
            self.raw_message = readbuf.unpack_bytes()
        except TokenError as e:
            logger.warning("token extract failed", reason=e.code, error=e.message)
            raise

        self.app_id = token[VERSION_LENGTH:offset]
        self.message = Message()
        self.app_certificate = app_certificate
        self.channel_name = channel_name
        self.uid = user_id(uid)
        return True


def check_not_empty(name, value):
    if not str(value).strip():
        raise EmptyRequiredField(name)


# init returns an empty token for the given channel after checking the required fields.
def init(app_id, app_certificate, channel_name, uid=""):
    check_not_empty("appID", app_id)
    check_not_empty("appCertificate", app_certificate)
    check_not_empty("channelName", channel_name)
    return AccessToken(app_id, app_certificate, channel_name, uid)


def init_with_token(token, app_certificate, channel_name, uid):
    access_token = AccessToken(channel_name=channel_name)
    access_token.extract(token, app_certificate, channel_name, uid)
    return access_token
