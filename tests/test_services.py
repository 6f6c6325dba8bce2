"""
Tests for per-service record packing.
"""

import pytest

import Privileges
from ByteBuffer import ReadByteBuffer, pack_int16, pack_map_uint32, pack_string, pack_uint16
from Services import (
    SERVICES,
    ServiceApaas,
    ServiceChat,
    ServiceFpa,
    ServiceRtc,
    ServiceRtm,
    new_service,
)
from TokenErrors import UnknownServiceType


def unpack_record(packed):
    """Read the tag like the token parser does, then unpack the rest."""
    buf = ReadByteBuffer(packed)
    service = new_service(buf.unpack_uint16()).unpack(buf)
    assert buf.remaining() == 0
    return service


def test_service_type_tags():
    assert {t: cls().service_type for t, cls in SERVICES.items()} == {1: 1, 2: 2, 4: 4, 5: 5, 7: 7}


def test_rtc_layout():
    service = ServiceRtc("chan1", "2882341273").add_privilege(Privileges.RTC_JOIN_CHANNEL, 1000003600)
    assert service.pack() == (
        pack_uint16(1) + pack_map_uint32({1: 1000003600})
        + pack_string("chan1") + pack_string("2882341273")
    )


def test_rtc_uid_zero_is_wildcard():
    assert ServiceRtc("chan1", 0).uid == ""
    assert ServiceRtc("chan1", 42).uid == "42"


def test_rtm_and_chat_layout():
    rtm = ServiceRtm("alice").add_privilege(Privileges.RTM_LOGIN, 100)
    chat = ServiceChat("alice").add_privilege(Privileges.CHAT_USER, 100)
    suffix = pack_map_uint32({1: 100}) + pack_string("alice")
    assert rtm.pack() == pack_uint16(2) + suffix
    assert chat.pack() == pack_uint16(5) + suffix


def test_fpa_has_no_suffix():
    fpa = ServiceFpa().add_privilege(Privileges.FPA_LOGIN, 100)
    assert fpa.pack() == pack_uint16(4) + pack_map_uint32({1: 100})


def test_apaas_layout_with_negative_role():
    apaas = ServiceApaas("room", "user").add_privilege(Privileges.APAAS_ROOM_USER, 100)
    assert apaas.role == -1
    assert apaas.pack() == (
        pack_uint16(7) + pack_map_uint32({1: 100})
        + pack_string("room") + pack_string("user") + pack_int16(-1)
    )


def test_privileges_serialized_in_key_order():
    a = ServiceRtc("c", "u")
    b = ServiceRtc("c", "u")
    for key in (4, 1, 3, 2):
        a.add_privilege(key, 1000 + key)
    for key in (1, 2, 3, 4):
        b.add_privilege(key, 1000 + key)
    assert a.pack() == b.pack()


@pytest.mark.parametrize("service", [
    ServiceRtc("chan1", "2882341273").add_privilege(1, 1000003600).add_privilege(2, 1000003600),
    ServiceRtm("alice").add_privilege(1, 5),
    ServiceFpa().add_privilege(1, 5),
    ServiceChat("alice").add_privilege(2, 5),
    ServiceApaas("room", "user", 2).add_privilege(3, 5),
    ServiceApaas("room", "user", -1),
])
def test_record_unpacks_to_equal_record(service):
    assert unpack_record(service.pack()) == service


def test_records_of_different_type_are_not_equal():
    assert ServiceRtm("alice") != ServiceChat("alice")


def test_service_names():
    assert [SERVICES[t]().service_name() for t in sorted(SERVICES)] == ["RTC", "RTM", "FPA", "CHAT", "APAAS"]


@pytest.mark.parametrize("tag", [0, 3, 6, 8, 65535])
def test_unknown_tag(tag):
    with pytest.raises(UnknownServiceType) as exc_info:
        new_service(tag)
    assert exc_info.value.service_type == tag


def test_records_are_not_hashable():
    with pytest.raises(TypeError):
        hash(ServiceRtc("chan1", "1"))


@pytest.mark.parametrize("service,expected", [
    (ServiceRtc(b"chan1", 2882341273), ServiceRtc("chan1", "2882341273")),
    (ServiceRtm(b"alice"), ServiceRtm("alice")),
    (ServiceChat(42), ServiceChat("42")),
    (ServiceApaas(b"room", b"user", 1), ServiceApaas("room", "user", 1)),
])
def test_fields_are_normalised_to_text(service, expected):
    assert service == expected
    assert unpack_record(service.pack()) == service
