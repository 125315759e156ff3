""" The geography bits of TileDraw.

Features are drawn in tile pixel coordinates, 256x256 per tile. To place real
geography on a tile, convert latitude and longitude to pixels with latLonXY(),
and find the area a tile covers with tileBounds():

    x, y = latLonXY(33.4131, -111.9396, 6195, 13154, 15)
    minLat, minLon, maxLat, maxLon = tileBounds(6195, 13154, 15)

Both use the "spherical mercator" projection common to web maps, with tiles
numbered from the north-west corner as in Google and OpenStreetMap tiles.
Latitudes are clamped to the +/-85.05112878 degree extent of the projection.
"""

from ModestMaps.Core import Point, Coordinate
from ModestMaps.Geo import deriveTransformation, MercatorProjection, Location
from math import pi as _pi, fmod as _fmod

MIN_LAT = -85.05112878
MAX_LAT = 85.05112878
MIN_LON = -180.0
MAX_LON = 180.0

TILE_SIZE = 256

def _clamp(value, lo, hi):
    return min(max(value, lo), hi)

def mapSize(zoom):
    """ Width and height in pixels of the whole world at a zoom level.
    """
    return float(TILE_SIZE << zoom)

class SphericalMercator(MercatorProjection):
    """ Spherical mercator projection for most commonly-used web map tile scheme.

        Zoom-zero coordinates run from 0 to 1 across the world, north-west
        corner first. The simplified projection used here is described in
        greater detail at: http://trac.openlayers.org/wiki/SphericalMercator
    """
    def __init__(self):
        pi = _pi

        # Transform from raw mercator projection to tile coordinates
        t = deriveTransformation(-pi, pi, 0, 0, pi, pi, 1, 0, -pi, -pi, 0, 1)

        MercatorProjection.__init__(self, 0, t)

    def locationPixel(self, location, zoom):
        """ Convert from Location object to a world pixel Point at a zoom level.
        """
        size = mapSize(zoom)
        coord = self.locationCoordinate(location).zoomTo(zoom)
        
        return Point(_clamp(coord.column * TILE_SIZE, 0, size),
                     _clamp(coord.row * TILE_SIZE, 0, size))

    def pixelLocation(self, point, zoom):
        """ Convert from world pixel Point at a zoom level to a Location object.

            Pixels are clamped to the last pixel inside the world.
        """
        size = mapSize(zoom)
        row = _clamp(point.y, 0, size - 1) / TILE_SIZE
        column = _clamp(point.x, 0, size - 1) / TILE_SIZE
        
        return self.coordinateLocation(Coordinate(row, column, zoom))

    def latLonXY(self, lat, lon, tileX, tileY, zoom):
        """ Return tile pixel (x, y) of a latitude and longitude.
        """
        location = Location(_clamp(lat, MIN_LAT, MAX_LAT), _clamp(lon, MIN_LON, MAX_LON))
        pixel = self.locationPixel(location, zoom)
        
        return pixel.x - tileX * TILE_SIZE, pixel.y - tileY * TILE_SIZE

    def tileBounds(self, tileX, tileY, zoom):
        """ Return (minLat, minLon, maxLat, maxLon) covered by a tile.

            Tiles along the edges of the world are snapped to its full
            extent, so the left-most column always starts at -180 degrees.
            Columns wrap with a truncating remainder, so a negative column
            is never mistaken for an edge.
        """
        size = 1 << zoom
        column = int(_fmod(tileX, size))
        
        northwest = self.pixelLocation(Point(tileX * TILE_SIZE, tileY * TILE_SIZE), zoom)
        southeast = self.pixelLocation(Point((tileX + 1) * TILE_SIZE, (tileY + 1) * TILE_SIZE), zoom)
        
        minLat, minLon = southeast.lat, northwest.lon
        maxLat, maxLon = northwest.lat, southeast.lon
        
        if column == 0:
            minLon = MIN_LON
        
        if column == size - 1:
            maxLon = MAX_LON
        
        if tileY <= 0:
            maxLat = MAX_LAT
        
        if tileY >= size - 1:
            minLat = MIN_LAT
        
        return minLat, minLon, maxLat, maxLon

_mercator = SphericalMercator()

def latLonXY(lat, lon, tileX, tileY, zoom):
    """ Return tile pixel (x, y) of a latitude and longitude.

        See SphericalMercator.latLonXY().
    """
    return _mercator.latLonXY(lat, lon, tileX, tileY, zoom)

def tileBounds(tileX, tileY, zoom):
    """ Return (minLat, minLon, maxLat, maxLon) covered by a tile.

        See SphericalMercator.tileBounds().
    """
    return _mercator.tileBounds(tileX, tileY, zoom)
