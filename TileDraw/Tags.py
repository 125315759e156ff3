''' Per-layer interning of tag keys and values.

Vector tile features do not carry their attributes inline. Each layer holds a
table of distinct keys and a table of distinct values, and every feature lists
its tags as pairs of indexes into those tables.

Keys and values are deduplicated on their encoded bytes, so Int64(1) and
Uint64(1) are two different values while every "freeze" string in a layer
shares one entry. Indexes are handed out in the order values are first seen.
'''

from .Values import encode_key, encode_value
from .Wire import length_delimited, uvarint

class Table:
    ''' Ordered set of encoded entries, indexed by first appearance.
    '''
    def __init__(self):
        self.indexes = {}
        self.entries = []

    def intern(self, encoded):
        ''' Return the index of an encoded entry, appending it if it's new.
        '''
        if encoded not in self.indexes:
            self.indexes[encoded] = len(self.entries)
            self.entries.append(encoded)
        
        return self.indexes[encoded]

    def __len__(self):
        return len(self.entries)

class Interner:
    ''' Keys and values tables for one layer, built fresh for each render.

        Attributes:

          keys:
            Table of encoded key entries, each a complete layer field 3.

          values:
            Table of encoded Value messages, unwrapped.
    '''
    def __init__(self):
        self.keys = Table()
        self.values = Table()

    def intern(self, key, value):
        ''' Return the (key index, value index) pair for one tag.
        '''
        return self.keys.intern(encode_key(key)), self.values.intern(encode_value(value))

    def feature_tags(self, tags):
        ''' Intern a feature's tags and return its packed tags field body.
        '''
        indexes = [self.intern(key, value) for (key, value) in tags]
        return b''.join([uvarint(k) + uvarint(v) for (k, v) in indexes])

    def encode(self):
        ''' Return the keys (field 3) then values (field 4) entries of a layer.
        '''
        keys = b''.join(self.keys.entries)
        values = b''.join([length_delimited(4, value) for value in self.values.entries])
        
        return keys + values
