''' Geometry commands and their encoding as a vector tile command stream.

Features are drawn on a 256x256 canvas regardless of the layer extent. At
render time each coordinate is rescaled to the extent, truncated toward zero
and clamped to a 10% overscan margin around the tile, then written as zigzag
deltas from the previous point:

    [MoveTo x 1] dx dy  [LineTo x n] dx dy ...  [ClosePath x 1]

A LineTo run with no MoveTo before it gets a zero-length MoveTo first, and
points that land on the previous point after scaling are dropped from the run.

See also:
    https://github.com/mapbox/vector-tile-spec/tree/master/2.1#43-geometry-encoding
'''

from collections import namedtuple
from itertools import groupby
from operator import attrgetter

from .Wire import MOVE_TO, LINE_TO, CLOSE_PATH
from .Wire import command_integer, uvarint, varint

# size of the canvas feature coordinates are drawn on
CANVAS_SIZE = 256.0

# fraction of the extent allowed outside the tile on each side
OVERSCAN = 0.10

# close path carries no position, x and y stay at zero
Command = namedtuple('Command', ('kind', 'x', 'y'))

def scale_xy(x, y, extent):
    ''' Rescale a canvas point to integer extent units.
    '''
    lo, hi = 0 - extent * OVERSCAN, extent + extent * OVERSCAN
    
    # NaN lands on the low bound
    x = lo if x != x else min(max(x / CANVAS_SIZE * extent, lo), hi)
    y = lo if y != y else min(max(y / CANVAS_SIZE * extent, lo), hi)
    
    return int(x), int(y)

def encode(commands, extent):
    ''' Encode a list of Commands into the body of a feature geometry field.

        Returns an empty string for an empty command list.
    '''
    parts = []
    last_x, last_y = 0, 0
    has_move_to = False
    
    for (kind, run) in groupby(commands, attrgetter('kind')):
        if kind == CLOSE_PATH:
            for command in run:
                parts.append(uvarint(command_integer(CLOSE_PATH, 1)))
            
            has_move_to = False
        
        elif kind == MOVE_TO:
            for command in run:
                x, y = scale_xy(command.x, command.y, extent)
                parts.extend([uvarint(command_integer(MOVE_TO, 1)), varint(x - last_x), varint(y - last_y)])
                last_x, last_y = x, y
            
            has_move_to = True
        
        elif kind == LINE_TO:
            if not has_move_to:
                # line runs need a starting point, stay where we are
                parts.extend([uvarint(command_integer(MOVE_TO, 1)), varint(0), varint(0)])
                has_move_to = True
            
            deltas = []
            
            for command in run:
                x, y = scale_xy(command.x, command.y, extent)
                dx, dy = x - last_x, y - last_y
                
                if dx == 0 and dy == 0:
                    continue
                
                deltas.append(varint(dx) + varint(dy))
                last_x, last_y = x, y
            
            # count is final only after degenerate points are gone
            parts.append(uvarint(command_integer(LINE_TO, len(deltas))))
            parts.extend(deltas)
    
    return b''.join(parts)
