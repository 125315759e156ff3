''' Low-level protocol buffer wire primitives.

Every field in a vector tile is a tag byte followed by a payload. The tag
byte packs a field number and a wire type:

    (field << 3) | wire_type

Wire types used here are 0 (varint), 1 (64-bit fixed), 2 (length-delimited)
and 5 (32-bit fixed).

See also:
    https://developers.google.com/protocol-buffers/docs/encoding
    https://github.com/mapbox/vector-tile-spec/tree/master/2.1
'''

WIRE_VARINT = 0
WIRE_FIXED64 = 1
WIRE_BYTES = 2
WIRE_FIXED32 = 5

# geometry command ids
MOVE_TO = 1
LINE_TO = 2
CLOSE_PATH = 7

def uvarint(n):
    ''' Encode an unsigned integer as a base-128 varint.

        Groups of seven bits are written least-significant first, with the
        high bit of each byte set when more bytes follow.
    '''
    n &= 0xFFFFFFFFFFFFFFFF
    out = bytearray()
    
    while n >= 0x80:
        out.append((n & 0x7F) | 0x80)
        n >>= 7
    
    out.append(n)
    return bytes(out)

def zigzag(n):
    ''' Map a signed 64-bit integer onto an unsigned one, small magnitudes first.
    '''
    return ((n << 1) ^ (n >> 63)) & 0xFFFFFFFFFFFFFFFF

def varint(n):
    ''' Encode a signed integer as a zigzag varint.
    '''
    return uvarint(zigzag(n))

def tag_byte(field, wire_type):
    return uvarint((field << 3) | wire_type)

def length_delimited(field, body):
    ''' Wrap a byte string as a length-prefixed field.
    '''
    return tag_byte(field, WIRE_BYTES) + uvarint(len(body)) + bytes(body)

def command_integer(kind, count):
    ''' Geometry command header: command id in the low three bits, run count above.
    '''
    return (kind & 0x7) | (count << 3)
