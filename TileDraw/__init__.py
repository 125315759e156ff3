""" Draw Mapbox vector tiles.

TileDraw builds the protocol buffer payload of a Mapbox vector tile from
layers, features, tags and drawing commands on a 256x256 tile canvas. It also
converts latitude and longitude to tile pixels for placing real geography.

    from TileDraw import Tile, LineString

    tile = Tile()
    feature = tile.addLayer('roads').addFeature(LineString)
    feature.addTag('highway', 'primary')
    feature.moveTo(0, 128)
    feature.lineTo(256, 128)

    body = tile.render()

Vector tile specification: https://github.com/mapbox/vector-tile-spec
"""
import os.path

__version__ = open(os.path.join(os.path.dirname(__file__), 'VERSION')).read().strip()

from json import load as json_load

from . import Core
from . import Config

from .Core import Tile, Layer, Feature, KnownUnknown
from .Core import Unknown, Point, LineString, Polygon
from .Geography import latLonXY, tileBounds
from .Values import Uint8, Uint16, Uint32, Uint64, Int8, Int16, Int32, Int64, Float32, Float64

def parseConfig(configHandle):
    """ Parse a tile description and return a Core.Tile object.

        Description could be a Python dictionary, a path to a JSON file or
        an open JSON file. See TileDraw.Config for the format.
    """
    if isinstance(configHandle, dict):
        config_dict = configHandle
    elif hasattr(configHandle, 'read'):
        config_dict = json_load(configHandle)
    else:
        with open(configHandle) as file:
            config_dict = json_load(file)

    return Config.buildTile(config_dict)

def parseConfigfile(configFile):
    """ Parse a JSON tile description file and return a Core.Tile object.
    """
    with open(configFile) as file:
        return parseConfig(file)

def renderConfig(configHandle):
    """ Parse a tile description and return its rendered bytes.
    """
    return parseConfig(configHandle).render()
