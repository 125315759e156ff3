from tempfile import mkstemp
import os

def create_temp_file(buffer):
    '''
    Helper method to create temp file on disk. Caller is responsible
    for deleting file once done
    '''
    fd, absolute_file_name = mkstemp(text=True)
    file = os.fdopen(fd, 'w')
    file.write(buffer)
    file.close()
    return absolute_file_name

def read_varints(data):
    '''
    Split a packed varint byte string into a list of integers
    '''
    values, value, shift = [], 0, 0

    for byte in bytearray(data):
        value |= (byte & 0x7F) << shift

        if byte & 0x80:
            shift += 7
        else:
            values.append(value)
            value, shift = 0, 0

    return values

def unzigzag(n):
    return (n >> 1) ^ -(n & 1)

def replay_geometry(data):
    '''
    Decode a geometry command stream into a list of (command, x, y)
    tuples with absolute positions, replaying deltas from (0, 0)
    '''
    integers = read_varints(data)
    commands, x, y, i = [], 0, 0, 0

    while i < len(integers):
        kind, count = integers[i] & 0x7, integers[i] >> 3
        i += 1

        if kind == 7:
            commands.append(('closePath', x, y))
            continue

        for _ in range(count):
            x += unzigzag(integers[i])
            y += unzigzag(integers[i + 1])
            i += 2
            commands.append(('moveTo' if kind == 1 else 'lineTo', x, y))

    return commands
