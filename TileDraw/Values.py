''' Typed tag values and their encoding as vector tile Value messages.

Python has one integer type and one float type, while the vector tile Value
message distinguishes unsigned, signed, 32-bit and 64-bit numbers. Plain
Python values are mapped like this:

    str, bytes   string_value (field 1)
    bool         bool_value   (field 7)
    float        double_value (field 3)
    int          sint_value   (field 6) within int64 range,
                 uint_value   (field 5) above it up to 2**64 - 1

Wrap a value in one of the fixed-width classes below to choose the field
explicitly, e.g. Uint32(7) or Float32(0.5). Narrow integer widths encode
exactly like their 64-bit counterparts; the width only bounds the range.

Any other value is encoded as the string returned by str().
'''

from struct import pack, unpack

from .Wire import WIRE_FIXED32, WIRE_FIXED64, WIRE_VARINT
from .Wire import tag_byte, uvarint, varint, length_delimited

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1

class Unsigned(int):
    ''' Unsigned integer tag value, encoded as uint_value.
    '''
    bits = 64
    
    def __new__(cls, value=0):
        value = int.__new__(cls, value)
        
        if not 0 <= value < (1 << cls.bits):
            raise ValueError('%s out of range: %d' % (cls.__name__, value))
        
        return value

    def __repr__(self):
        return '%s(%d)' % (self.__class__.__name__, self)

class Signed(int):
    ''' Signed integer tag value, encoded as sint_value.
    '''
    bits = 64
    
    def __new__(cls, value=0):
        value = int.__new__(cls, value)
        limit = 1 << (cls.bits - 1)
        
        if not -limit <= value < limit:
            raise ValueError('%s out of range: %d' % (cls.__name__, value))
        
        return value

    def __repr__(self):
        return '%s(%d)' % (self.__class__.__name__, self)

class Uint8(Unsigned):
    bits = 8

class Uint16(Unsigned):
    bits = 16

class Uint32(Unsigned):
    bits = 32

class Uint64(Unsigned):
    bits = 64

class Int8(Signed):
    bits = 8

class Int16(Signed):
    bits = 16

class Int32(Signed):
    bits = 32

class Int64(Signed):
    bits = 64

class Float32(float):
    ''' Single precision tag value, encoded as float_value.

        The value is rounded to single precision on construction.
    '''
    def __new__(cls, value=0.0):
        value = float(value)
        
        try:
            (value, ) = unpack('<f', pack('<f', value))
        except OverflowError:
            raise ValueError('Float32 out of range: %r' % value)
        
        return float.__new__(cls, value)

    def __repr__(self):
        return 'Float32(%r)' % float(self)

class Float64(float):
    ''' Double precision tag value, encoded as double_value.
    '''
    def __repr__(self):
        return 'Float64(%r)' % float(self)

# names accepted by TileDraw.Config for explicitly typed values
valueTypes = {
    'string': str, 'bool': bool,
    'uint8': Uint8, 'uint16': Uint16, 'uint32': Uint32, 'uint64': Uint64,
    'int8': Int8, 'int16': Int16, 'int32': Int32, 'int64': Int64,
    'float32': Float32, 'float64': Float64,
    }

def encode_key(key):
    ''' Encode a tag key as a layer keys entry (field 3).
    '''
    if not isinstance(key, (str, bytes, bytearray)):
        key = str(key)
    
    if isinstance(key, str):
        key = key.encode('utf8')
    
    return length_delimited(3, key)

def encode_value(value):
    ''' Encode a tag value as an embedded Value message, without its wrapper.

        The result doubles as the deduplication key for the layer values
        table, so two values are shared only when type and content agree.
    '''
    if isinstance(value, (bytes, bytearray)):
        return length_delimited(1, value)
    
    elif isinstance(value, str):
        return length_delimited(1, value.encode('utf8'))
    
    elif isinstance(value, Float32):
        return tag_byte(2, WIRE_FIXED32) + pack('<f', value)
    
    elif isinstance(value, float):
        return tag_byte(3, WIRE_FIXED64) + pack('<d', value)
    
    elif isinstance(value, bool):
        # before int, bool is an int subclass
        return tag_byte(7, WIRE_VARINT) + uvarint(int(value))
    
    elif isinstance(value, Unsigned):
        return tag_byte(5, WIRE_VARINT) + uvarint(value)
    
    elif isinstance(value, Signed):
        return tag_byte(6, WIRE_VARINT) + varint(value)
    
    elif isinstance(value, int):
        if INT64_MIN <= value <= INT64_MAX:
            return tag_byte(6, WIRE_VARINT) + varint(value)
        
        elif INT64_MAX < value <= UINT64_MAX:
            return tag_byte(5, WIRE_VARINT) + uvarint(value)
    
    return encode_value(str(value))

def typed_value(type_name, value):
    ''' Build a tag value from a type name in valueTypes, or raise KeyError.
    '''
    return valueTypes[type_name.lower()](value)
