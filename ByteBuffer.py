# Copyright (2025) Beijing Volcano Engine Technology Ltd.
# SPDX-License-Identifier: MIT

# Little-endian packing helpers shared by the v006 and v007 token formats.
import struct

from TokenErrors import EncodingOverflow, MalformedData

STRING_MAX_LENGTH = 0xFFFF


def _pack(fmt, x):
    try:
        return struct.pack(fmt, int(x))
    except struct.error as e:
        raise EncodingOverflow("%r does not fit %s" % (x, fmt)) from e


def pack_uint16(x):
    return _pack('<H', x)


def pack_uint32(x):
    return _pack('<I', x)


def pack_int16(x):
    return _pack('<h', x)


def pack_string(string):
    if isinstance(string, int):
        string = str(string)
    if isinstance(string, str):
        string = string.encode('utf-8')
    return pack_bytes(string)


def pack_bytes(b):
    if len(b) > STRING_MAX_LENGTH:
        raise EncodingOverflow(
            "length %d exceeds the 16-bit length prefix" % len(b),
            details={"length": len(b), "max": STRING_MAX_LENGTH})
    return pack_uint16(len(b)) + bytes(b)


# pack_map_uint32 writes entries in ascending key order; the verifier depends on it.
def pack_map_uint32(m):
    ret = pack_uint16(len(m))

    for k, v in sorted(m.items(), key=lambda x: int(x[0])):
        ret += pack_uint16(k) + pack_uint32(v)
    return ret


class ReadByteBuffer:

    def __init__(self, bytes):
        self.buffer = bytes
        self.position = 0

    def remaining(self):
        return len(self.buffer) - self.position

    def _take(self, size):
        if self.remaining() < size:
            raise MalformedData(
                "need %d bytes at offset %d, only %d left" % (size, self.position, self.remaining()),
                details={"offset": self.position, "needed": size})
        buff = self.buffer[self.position: self.position + size]
        self.position += size
        return buff

    def _unpack(self, fmt):
        return struct.unpack(fmt, self._take(struct.calcsize(fmt)))[0]

    def unpack_uint16(self):
        return self._unpack('<H')

    def unpack_uint32(self):
        return self._unpack('<I')

    def unpack_int16(self):
        return self._unpack('<h')

    def unpack_string(self):
        raw = self.unpack_bytes()
        try:
            return raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise MalformedData("string field is not valid utf-8") from e

    def unpack_bytes(self):
        strlen = self.unpack_uint16()
        return bytes(self._take(strlen))

    def unpack_map_uint32(self):
        messages = {}
        maplen = self.unpack_uint16()

        for index in range(maplen):
            key = self.unpack_uint16()
            value = self.unpack_uint32()
            messages[key] = value
        return messages
