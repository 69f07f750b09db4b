"""
sfntread.struct - binary structures

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""

import io
import ctypes
from types import SimpleNamespace
from functools import partial


##############################################################################
# decoding errors

class DecodeError(Exception):
    """Failure to decode a value from a byte source."""


class EndOfInput(DecodeError):
    """Byte source exhausted before the value was complete."""


class InvalidContent(DecodeError):
    """Bytes are present but violate a format constraint."""

    def __init__(self, reason=None):
        super().__init__(*(() if reason is None else (reason,)))
        self.reason = reason


class OtherError(DecodeError):
    """Decoding failure carrying an auxiliary payload."""

    def __init__(self, payload=None):
        super().__init__(payload)
        self.payload = payload


def read_exact(stream, size):
    """Read exactly `size` bytes from stream; raise EndOfInput on short read."""
    try:
        data = stream.read(size)
    except OSError as e:
        raise OtherError(e) from e
    # raw non-blocking streams return None if no data available
    data = data or b''
    if len(data) < size:
        raise EndOfInput(f'Expected {size} bytes, found {len(data)}.')
    return bytes(data)


##############################################################################
# binary structs


# type strings
TYPES = {
    'byte': ctypes.c_uint8,
    'ubyte': ctypes.c_uint8,
    'uint8': ctypes.c_uint8,
    'B': ctypes.c_uint8,

    'int8': ctypes.c_int8,
    'b': ctypes.c_int8,

    'word': ctypes.c_uint16,
    'uword': ctypes.c_uint16,
    'uint16': ctypes.c_uint16,
    'H': ctypes.c_uint16,

    'short': ctypes.c_int16,
    'int16': ctypes.c_int16,
    'h': ctypes.c_int16,

    'dword': ctypes.c_uint32,
    'uint32': ctypes.c_uint32,
    'I': ctypes.c_uint32,
    'L': ctypes.c_uint32,

    'long': ctypes.c_int32,
    'int32': ctypes.c_int32,
    'i': ctypes.c_int32,
    'l': ctypes.c_int32,
}


class counted:
    """Pair (element_type, count_field) to describe a counted array field."""

    def __init__(self, element_type, count_field):
        """Array of element_type, length given by earlier field count_field."""
        self.element_type = element_type
        self.count_field = count_field


def _parse_type(atype, endian):
    """Convert struct member type specification to a decodable type."""
    if isinstance(atype, counted):
        return counted(_parse_type(atype.element_type, endian), atype.count_field)
    # wrapped types, structures and other classes that know how to decode
    if hasattr(atype, 'read_from'):
        return atype
    if isinstance(atype, type) and issubclass(atype, ctypes._SimpleCData):
        return ScalarType(endian, atype)
    try:
        return ScalarType(endian, TYPES[atype])
    except (KeyError, TypeError):
        pass
    if isinstance(atype, str) and atype.endswith('s'):
        return BytesType(int(atype[:-1]))
    raise ValueError('Field type `{}` not understood'.format(atype))


def _parse_endian(endian):
    """Normalise endianness specification to '>' or '<'."""
    if endian[:1].lower() in ('b', '>'):
        return '>'
    elif endian[:1].lower() in ('l', '<'):
        return '<'
    raise ValueError(f"Endianness '{endian}' not recognised.")


class _DecodableType:
    """Base for types that decode values from a seekable byte source."""

    def read_from(self, stream, offset=None):
        """Read value from stream, at given absolute offset or at current position."""
        raise NotImplementedError

    def from_bytes(self, data, offset=0):
        """Decode value from bytes-like object."""
        return self.read_from(io.BytesIO(data), offset)

    def array(self, count):
        return ArrayType(self, count)

    def __mul__(self, count):
        """Create an array."""
        return self.array(count)

    __rmul__ = __mul__


class ScalarType(_DecodableType):
    """Fixed-width integer type."""

    def __init__(self, endian, ctype):
        if _parse_endian(endian) == '>':
            self._ctype = ctype.__ctype_be__
        else:
            self._ctype = ctype.__ctype_le__

    @property
    def size(self):
        return ctypes.sizeof(self._ctype)

    def read_from(self, stream, offset=None):
        """Read integer from stream."""
        if offset is not None:
            stream.seek(offset)
        data = read_exact(stream, self.size)
        return self._ctype.from_buffer_copy(data).value

    def __repr__(self):
        return f'{type(self).__name__}({self._ctype.__name__})'


class BytesType(_DecodableType):
    """Fixed-length raw bytes."""

    def __init__(self, length):
        self._length = length

    @property
    def size(self):
        return self._length

    def read_from(self, stream, offset=None):
        if offset is not None:
            stream.seek(offset)
        return read_exact(stream, self._length)


class ArrayType(_DecodableType):
    """Fixed-count sequence of decodable elements."""

    def __init__(self, element_type, count):
        self._count = count
        self.element_type = element_type

    @property
    def size(self):
        return self._count * self.element_type.size

    def read_from(self, stream, offset=None):
        """Decode `count` elements in sequence; first failure is propagated."""
        if offset is not None:
            stream.seek(offset)
        return tuple(
            self.element_type.read_from(stream)
            for _ in range(self._count)
        )


class StructValue:
    """Record of decoded struct fields."""

    def __init__(self, **fields):
        self.__dict__.update(fields)

    def __eq__(self, other):
        return type(self) == type(other) and vars(self) == vars(other)

    def __repr__(self):
        props = vars(self)
        return type(self).__name__ + '({})'.format(
            ', '.join(
                '{}={!r}'.format(_fld, _val)
                for _fld, _val in props.items()
                if not _fld.startswith('_')
            )
        )


class StructType(_DecodableType):
    """
    Represent a structured type.

    mystruct = StructType('big', count='uint8', items=counted('uint16', 'count'))
    s = mystruct.from_bytes(b'\\2\\0\\1\\0\\2')

    assert s.count == 2
    assert s.items == (1, 2)
    """

    def __init__(self, endian, /, **description):
        """Create a structured type."""
        self._endian = _parse_endian(endian)
        self.element_types = {
            _field: _parse_type(_type, self._endian)
            for _field, _type in description.items()
        }
        declared = []
        for field, element in self.element_types.items():
            if isinstance(element, counted) and element.count_field not in declared:
                raise ValueError(
                    f'Count field `{element.count_field}` for `{field}` '
                    'must be declared before it.'
                )
            declared.append(field)

    @property
    def size(self):
        """Size in bytes of a fixed-size struct."""
        if any(isinstance(_e, counted) for _e in self.element_types.values()):
            raise ValueError('Struct with counted array has no fixed size.')
        return sum(_e.size for _e in self.element_types.values())

    def read_fields(self, stream):
        """Decode fields in declaration order; return dict of values."""
        values = {}
        for field, element in self.element_types.items():
            if isinstance(element, counted):
                element = ArrayType(
                    element.element_type, values[element.count_field]
                )
            values[field] = element.read_from(stream)
        return values

    def read_from(self, stream, offset=None):
        """Read struct from stream."""
        if offset is not None:
            stream.seek(offset)
        return StructValue(**self.read_fields(stream))


class Structure(StructValue):
    """Base for record classes decoded from a binary struct."""

    # StructType describing the fields, to be defined by subclass
    _struct = None

    @classmethod
    def read_from(cls, stream, offset=None):
        """Read record from stream."""
        if offset is not None:
            stream.seek(offset)
        return cls(**cls._struct.read_fields(stream))

    @classmethod
    def from_bytes(cls, data, offset=0):
        """Decode record from bytes-like object."""
        return cls.read_from(io.BytesIO(data), offset)


def sizeof(wrapped):
    """Get size in bytes of a fixed-size type."""
    if isinstance(wrapped, type) and issubclass(wrapped, Structure):
        return wrapped._struct.size
    return wrapped.size


big_endian = SimpleNamespace(
    Struct=partial(StructType, '>'),
    uint8=ScalarType('>', ctypes.c_uint8),
    int8=ScalarType('>', ctypes.c_int8),
    uint16=ScalarType('>', ctypes.c_uint16),
    int16=ScalarType('>', ctypes.c_int16),
    uint32=ScalarType('>', ctypes.c_uint32),
    int32=ScalarType('>', ctypes.c_int32),
)

little_endian = SimpleNamespace(
    Struct=partial(StructType, '<'),
    uint8=ScalarType('<', ctypes.c_uint8),
    int8=ScalarType('<', ctypes.c_int8),
    uint16=ScalarType('<', ctypes.c_uint16),
    int16=ScalarType('<', ctypes.c_int16),
    uint32=ScalarType('<', ctypes.c_uint32),
    int32=ScalarType('<', ctypes.c_int32),
)
