from unittest import TestCase

from ModestMaps.Geo import Location

from TileDraw.Geography import SphericalMercator, latLonXY, tileBounds, mapSize

class GeographyTests(TestCase):

    def assertEqualBounds(self, bounds, expected):
        for (value, other) in zip(bounds, expected):
            self.assertAlmostEqual(value, other, places=5)

    def test_lat_lon_xy(self):
        '''Latitude and longitude to tile pixels'''
        x, y = latLonXY(33.4131, -111.9396, 6195, 13154, 15)

        self.assertAlmostEqual(x, 2.26645, places=5)
        self.assertAlmostEqual(y, 0.06180, places=5)

    def test_lat_lon_xy_world(self):
        self.assertEqual(mapSize(0), 256.0)
        self.assertEqual(mapSize(2), 1024.0)

        x, y = latLonXY(0, 0, 0, 0, 0)
        self.assertAlmostEqual(x, 128.0)
        self.assertAlmostEqual(y, 128.0)

        x, y = latLonXY(0, 0, 1, 1, 1)
        self.assertAlmostEqual(x, 0.0)
        self.assertAlmostEqual(y, 0.0)

    def test_lat_lon_xy_clamped(self):
        '''Points beyond the projection land on the edge of the world'''
        x, y = latLonXY(90, -200, 0, 0, 0)
        self.assertAlmostEqual(x, 0.0)
        self.assertAlmostEqual(y, 0.0, places=4)

        x, y = latLonXY(-90, 200, 1, 1, 1)
        self.assertAlmostEqual(x, 256.0)
        self.assertAlmostEqual(y, 256.0, places=4)

    def test_tile_bounds(self):
        '''Tile bounds, snapped to the edges of the world'''
        self.assertEqualBounds(tileBounds(6195, 13154, 15), (33.40393, -111.93970, 33.41310, -111.92871))
        self.assertEqualBounds(tileBounds(0, 0, 1), (0.0, -180.0, 85.05113, 0.0))
        self.assertEqualBounds(tileBounds(3, 2, 2), (-66.51326, 90.0, 0.0, 180.0))

    def test_tile_bounds_negative_column(self):
        '''Columns left of the world are not snapped to its right edge'''
        self.assertEqualBounds(tileBounds(-1, 0, 1), (0.0, -180.0, 85.05113, -180.0))

    def test_tile_bounds_world(self):
        self.assertEqual(tileBounds(0, 0, 0), (-85.05112878, -180.0, 85.05112878, 180.0))

    def test_round_trip(self):
        '''Tile corners land on tile pixel corners'''
        minLat, minLon, maxLat, maxLon = tileBounds(6195, 13154, 15)

        x, y = latLonXY(maxLat, minLon, 6195, 13154, 15)
        self.assertAlmostEqual(x, 0.0, places=6)
        self.assertAlmostEqual(y, 0.0, places=6)

        x, y = latLonXY(minLat, maxLon, 6195, 13154, 15)
        self.assertAlmostEqual(x, 256.0, places=6)
        self.assertAlmostEqual(y, 256.0, places=6)

    def test_projection(self):
        projection = SphericalMercator()
        point = projection.locationPixel(Location(0, -180), 3)

        self.assertAlmostEqual(point.x, 0.0)
        self.assertAlmostEqual(point.y, 1024.0)

        location = projection.pixelLocation(point, 3)

        self.assertAlmostEqual(location.lat, 0.0)
        self.assertAlmostEqual(location.lon, -180.0)
