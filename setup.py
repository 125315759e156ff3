#!/usr/bin/env python

from setuptools import setup


version = open('TileDraw/VERSION', 'r').read().strip()

requires = ['ModestMaps >=1.3.0']

tests_require = ['pytest', 'mapbox-vector-tile >=2.0']


setup(name='TileDraw',
      version=version,
      description='Draw Mapbox vector tiles with a few simple commands.',
      install_requires=requires,
      extras_require={'test': tests_require},
      packages=['TileDraw'],
      package_data={'TileDraw': ['VERSION']},
      license='BSD')
