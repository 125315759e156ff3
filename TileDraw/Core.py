''' The core class bits of TileDraw.

A Tile holds Layers, a Layer holds Features, and each Feature has a geometry
type, an optional id, a list of tags and a list of drawing commands. Build
them up and call Tile.render() for the protocol buffer bytes of a Mapbox
vector tile, version 2:

    tile = Tile()
    roads = tile.addLayer('roads')
    
    road = roads.addFeature(LineString)
    road.setID(1)
    road.addTag('highway', 'primary')
    road.moveTo(0, 128)
    road.lineTo(256, 128)
    
    body = tile.render()

Coordinates are given on a 256x256 canvas and rescaled to the layer extent,
4096 by default, during render. Render does not change the model, so it can
be called repeatedly and always produces the same bytes.

Layers and features are plain objects appended to their container's list;
the handles returned by addLayer() and addFeature() stay valid as more are
added, and separate threads may fill separate layers at the same time.
'''

import logging

from . import Geometry
from .Curves import tessellate
from .Tags import Interner
from .Wire import MOVE_TO, LINE_TO, CLOSE_PATH, WIRE_VARINT
from .Wire import length_delimited, tag_byte, uvarint
from .Values import Uint64

#
# Geometry types
#
Unknown = 0
Point = 1
LineString = 2
Polygon = 3

geometryTypes = {'unknown': Unknown, 'point': Point, 'linestring': LineString, 'polygon': Polygon}

DEFAULT_EXTENT = 4096

# vector tile specification version written to every layer
VERSION = 2

class KnownUnknown(Exception):
    """ There are known unknowns. That is to say, there are things that we now know we don't know.

        This exception gets thrown in a couple places where common mistakes are made.
    """
    pass

class Feature:
    """ A single feature with tags and drawing commands.

        Attributes:

          geomType:
            One of Unknown, Point, LineString or Polygon.

          id:
            Unsigned 64-bit feature id, or None when not set.

          tags:
            List of (key, value) pairs in the order they were added.

          geometry:
            List of Geometry.Command tuples in canvas coordinates.
    """
    def __init__(self, geomType=Unknown):
        self.geomType = geomType
        self.id = None
        self.tags = []
        self.geometry = []

    def setID(self, id):
        self.id = Uint64(id)

    def addTag(self, key, value):
        """ Add a tag. See TileDraw.Values for how values are typed.
        """
        self.tags.append((key, value))

    def moveTo(self, x, y):
        """ Move to a point on the 256x256 canvas.
        """
        self.geometry.append(Geometry.Command(MOVE_TO, x, y))

    def lineTo(self, x, y):
        """ Draw a line to a point on the 256x256 canvas.
        """
        self.geometry.append(Geometry.Command(LINE_TO, x, y))

    def closePath(self):
        self.geometry.append(Geometry.Command(CLOSE_PATH, 0, 0))

    def quadraticTo(self, x1, y1, x2, y2):
        """ Draw a quadratic curve from the current position, as line segments.
        """
        for (x, y) in tessellate([self._position(), (x1, y1), (x2, y2)]):
            self.lineTo(x, y)

    def cubicTo(self, x1, y1, x2, y2, x3, y3):
        """ Draw a cubic curve from the current position, as line segments.
        """
        for (x, y) in tessellate([self._position(), (x1, y1), (x2, y2), (x3, y3)]):
            self.lineTo(x, y)

    def _position(self):
        """ Position of the last command, or the origin for an empty feature.
        """
        if not self.geometry:
            return (0.0, 0.0)
        
        return (self.geometry[-1].x, self.geometry[-1].y)

    def encode(self, interner, extent):
        """ Return this feature as a complete layer features entry (field 2).

            Tags are interned into the given Tags.Interner along the way.
        """
        parts = []
        
        if self.id is not None:
            parts.append(tag_byte(1, WIRE_VARINT) + uvarint(self.id))
        
        if self.tags:
            parts.append(length_delimited(2, interner.feature_tags(self.tags)))
        
        if self.geomType != Unknown:
            parts.append(tag_byte(3, WIRE_VARINT) + uvarint(self.geomType))
        
        if self.geometry:
            parts.append(length_delimited(4, Geometry.encode(self.geometry, extent)))
        
        return length_delimited(2, b''.join(parts))

class Layer:
    """ A named layer of features sharing one coordinate extent.
    """
    def __init__(self, name):
        self.name = name
        self.extent = DEFAULT_EXTENT
        self.features = []

    def setExtent(self, extent):
        """ Set the layer extent, 4096 by default.
        """
        self.extent = int(extent)

    def addFeature(self, geomType=Unknown):
        """ Add and return a new empty feature.
        """
        feature = Feature(geomType)
        self.features.append(feature)
        return feature

    def render(self):
        """ Return this layer as a complete tile layers entry (field 3).
        """
        interner = Interner()
        name = self.name.encode('utf8') if isinstance(self.name, str) else self.name
        parts = []
        
        if name:
            parts.append(length_delimited(1, name))
        
        parts.extend([feature.encode(interner, self.extent) for feature in self.features])
        parts.append(interner.encode())
        parts.append(tag_byte(5, WIRE_VARINT) + uvarint(self.extent))
        parts.append(tag_byte(15, WIRE_VARINT) + uvarint(VERSION))
        
        body = length_delimited(3, b''.join(parts))
        
        logging.debug('TileDraw.Core.Layer.render() %s: %d features, %d keys, %d values in %d bytes',
                      repr(self.name), len(self.features), len(interner.keys), len(interner.values), len(body))
        
        return body

class Tile:
    """ An ordered collection of layers, rendered in the order they were added.
    """
    def __init__(self):
        self.layers = []

    def addLayer(self, name):
        """ Add and return a new empty layer.
        """
        layer = Layer(name)
        self.layers.append(layer)
        return layer

    def render(self):
        """ Return the protocol buffer bytes for the whole tile.
        """
        body = b''.join([layer.render() for layer in self.layers])
        
        logging.debug('TileDraw.Core.Tile.render() %d layers in %d bytes', len(self.layers), len(body))
        
        return body
