# Copyright (2025) Beijing Volcano Engine Technology Ltd.
# SPDX-License-Identifier: MIT

"""
Per-service records packed into a v007 token.

Every record starts with its service type and privilege map; the concrete
services append their own fields after that. The service type is read by
the token parser, which then hands the rest of the buffer to ``unpack``.
"""

from ByteBuffer import pack_int16, pack_map_uint32, pack_string, pack_uint16
from TokenErrors import UnknownServiceType

kRtcServiceType = 1
kRtmServiceType = 2
kFpaServiceType = 4
kChatServiceType = 5
kApaasServiceType = 7


# Record fields are text on the wire; unpack always yields str.
def _text(value):
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


class Service:
    service_type = 0
    name = ""

    # fields appended after the common prefix, in wire order
    fields = ()

    def __init__(self):
        self.privileges = {}

    # AddPrivilege grants privilege until the absolute unix timestamp expire.
    def add_privilege(self, privilege, expire):
        self.privileges[privilege] = expire
        return self

    def service_name(self):
        return self.name

    def pack(self):
        return pack_uint16(self.service_type) + pack_map_uint32(self.privileges)

    def unpack(self, buffer):
        self.privileges = buffer.unpack_map_uint32()
        return self

    # compared by value, never hashed
    __hash__ = None

    def __eq__(self, other):
        if not isinstance(other, Service) or other.service_type != self.service_type:
            return False
        return self.privileges == other.privileges and all(
            getattr(self, f) == getattr(other, f) for f in self.fields)

    def __repr__(self):
        attrs = ", ".join("%s=%r" % (f, getattr(self, f)) for f in self.fields + ("privileges",))
        return "%s(%s)" % (type(self).__name__, attrs)


class ServiceRtc(Service):
    service_type = kRtcServiceType
    name = "RTC"
    fields = ("channel_name", "uid")

    def __init__(self, channel_name="", uid=""):
        super().__init__()
        self.channel_name = _text(channel_name)
        self.uid = "" if uid == 0 else _text(uid)

    def pack(self):
        return super().pack() + pack_string(self.channel_name) + pack_string(self.uid)

    def unpack(self, buffer):
        super().unpack(buffer)
        self.channel_name = buffer.unpack_string()
        self.uid = buffer.unpack_string()
        return self


class ServiceRtm(Service):
    service_type = kRtmServiceType
    name = "RTM"
    fields = ("user_id",)

    def __init__(self, user_id=""):
        super().__init__()
        self.user_id = _text(user_id)

    def pack(self):
        return super().pack() + pack_string(self.user_id)

    def unpack(self, buffer):
        super().unpack(buffer)
        self.user_id = buffer.unpack_string()
        return self


class ServiceFpa(Service):
    service_type = kFpaServiceType
    name = "FPA"


class ServiceChat(Service):
    service_type = kChatServiceType
    name = "CHAT"
    fields = ("user_id",)

    def __init__(self, user_id=""):
        super().__init__()
        self.user_id = _text(user_id)

    def pack(self):
        return super().pack() + pack_string(self.user_id)

    def unpack(self, buffer):
        super().unpack(buffer)
        self.user_id = buffer.unpack_string()
        return self


class ServiceApaas(Service):
    service_type = kApaasServiceType
    name = "APAAS"
    fields = ("room_uuid", "user_uuid", "role")

    def __init__(self, room_uuid="", user_uuid="", role=-1):
        super().__init__()
        self.room_uuid = _text(room_uuid)
        self.user_uuid = _text(user_uuid)
        self.role = role

    def pack(self):
        return (super().pack() + pack_string(self.room_uuid)
                + pack_string(self.user_uuid) + pack_int16(self.role))

    def unpack(self, buffer):
        super().unpack(buffer)
        self.room_uuid = buffer.unpack_string()
        self.user_uuid = buffer.unpack_string()
        self.role = buffer.unpack_int16()
        return self


SERVICES = {
    kRtcServiceType: ServiceRtc,
    kRtmServiceType: ServiceRtm,
    kFpaServiceType: ServiceFpa,
    kChatServiceType: ServiceChat,
    kApaasServiceType: ServiceApaas,
}


def new_service(service_type):
    """Return an empty record for service_type, ready to unpack into."""
    cls = SERVICES.get(service_type)
    if cls is None:
        raise UnknownServiceType(service_type)
    return cls()
