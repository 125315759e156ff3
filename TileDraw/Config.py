""" The configuration bits of TileDraw.

A tile can be described in JSON instead of built up in code. The document has
a list of layers, each with a list of features:

    {
      "logging": "info",
      "layers": [
        {
          "name": "roads",
          "extent": 4096,
          "features": [
            {
              "type": "linestring",
              "id": 1,
              "tags": {"highway": "primary", "lanes": {"type": "uint8", "value": 2}},
              "geometry": [["moveTo", 0, 128], ["lineTo", 256, 128]]
            }
          ]
        }
      ]
    }

Layer "extent" is optional and defaults to 4096. Feature "type" is one of
"unknown", "point", "linestring" or "polygon", and defaults to "unknown".
Feature "id" is optional.

Tags can be an object or a list of [key, value] pairs, if order or repeated
keys matter. Values are JSON strings, numbers and booleans, or an object with
"type" and "value" to pick a specific encoding; type is one of "string",
"bool", "uint8", "uint16", "uint32", "uint64", "int8", "int16", "int32",
"int64", "float32" or "float64". JSON numbers with a fraction are encoded as
64-bit floats and whole numbers as signed integers.

Geometry is a list of commands, each a list of a command name and its canvas
coordinates: ["moveTo", x, y], ["lineTo", x, y], ["closePath"],
["quadraticTo", x1, y1, x2, y2] or ["cubicTo", x1, y1, x2, y2, x3, y3].

Configuration also supports this additional setting:

- "logging": one of "debug", "info", "warning", "error" or "critical", as
  described in Python's logging module: http://docs.python.org/howto/logging.html
"""

import logging

from . import Core
from .Values import typed_value

# drawing method names and their argument counts
_commands = {'moveTo': 2, 'lineTo': 2, 'closePath': 0, 'quadraticTo': 4, 'cubicTo': 6}

def buildTile(config_dict):
    """ Build and return a Core.Tile from a configuration dictionary.
    """
    if 'logging' in config_dict:
        level = config_dict['logging'].upper()

        if hasattr(logging, level):
            logging.basicConfig(level=getattr(logging, level))

    tile = Core.Tile()

    for layer_dict in config_dict.get('layers', []):
        _parseConfigLayer(layer_dict, tile)

    logging.debug('TileDraw.Config.buildTile() built %d layers', len(tile.layers))

    return tile

def _parseConfigLayer(layer_dict, tile):
    """ Add one layer described by a configuration dictionary to a tile.
    """
    layer = tile.addLayer(layer_dict.get('name', ''))

    if 'extent' in layer_dict:
        layer.setExtent(layer_dict['extent'])

    for feature_dict in layer_dict.get('features', []):
        _parseConfigFeature(feature_dict, layer)

    logging.debug('TileDraw.Config._parseConfigLayer() %s with %d features', repr(layer.name), len(layer.features))

def _parseConfigFeature(feature_dict, layer):
    """ Add one feature described by a configuration dictionary to a layer.
    """
    type_name = str(feature_dict.get('type', 'unknown'))

    if type_name.lower() not in Core.geometryTypes:
        raise Core.KnownUnknown('Unrecognized geometry type in layer %s: "%s"' % (repr(layer.name), type_name))

    feature = layer.addFeature(Core.geometryTypes[type_name.lower()])

    if 'id' in feature_dict:
        feature.setID(feature_dict['id'])

    tags = feature_dict.get('tags', {})

    for (key, value) in (tags.items() if hasattr(tags, 'items') else tags):
        feature.addTag(key, _parseConfigValue(value))

    for command in feature_dict.get('geometry', []):
        _parseConfigCommand(command, feature)

def _parseConfigValue(value):
    """ Convert a configuration tag value to a tag value.

        Objects with "type" and "value" become the named type, other values
        are passed through.
    """
    if not (isinstance(value, dict) and 'type' in value):
        return value

    try:
        return typed_value(value['type'], value.get('value'))

    except KeyError:
        raise Core.KnownUnknown('Unrecognized tag value type: "%s"' % value['type'])

    except (TypeError, ValueError) as e:
        raise Core.KnownUnknown('Bad %s tag value: %s' % (value['type'], e))

def _parseConfigCommand(command, feature):
    """ Apply one geometry command from a configuration list to a feature.
    """
    name, args = (command[0], command[1:]) if command else (None, [])

    if name not in _commands:
        raise Core.KnownUnknown('Unrecognized geometry command: "%s"' % name)

    if len(args) != _commands[name]:
        raise Core.KnownUnknown('Geometry command "%s" takes %d coordinates, not %d' % (name, _commands[name], len(args)))

    getattr(feature, name)(*[float(arg) for arg in args])
