"""Flat GeoJSON geometry values.

Coordinates are plain nested lists of floats, shaped the way GeoJSON encodes
them. The 7 standard geometry objects are defined as tagged structs, so they
can be decoded from (or encoded to) GeoJSON text directly with
``msgspec.json``:

>>> import msgspec
>>> msgspec.json.decode(
...     b'{"type": "Point", "coordinates": [1.0, 2.0]}',
...     type=Geometry,
... )
Point(coordinates=[1.0, 2.0])
"""
from __future__ import annotations

from typing import List, Union

import msgspec

__all__ = (
    "Position",
    "LineStringType",
    "PolygonType",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "Geometry",
)


def __dir__():
    return __all__


# An ``[x, y]`` pair. Any further ordinates are ignored when decoding.
Position = List[float]

LineStringType = List[Position]

# Element 0 is the exterior ring, any others are interior rings.
PolygonType = List[LineStringType]


# All types set `tag=True`, meaning that they'll make use of a `type` field to
# disambiguate between types when decoding.
class Point(msgspec.Struct, tag=True):
    coordinates: Position


class MultiPoint(msgspec.Struct, tag=True):
    coordinates: List[Position]


class LineString(msgspec.Struct, tag=True):
    coordinates: LineStringType


class MultiLineString(msgspec.Struct, tag=True):
    coordinates: List[LineStringType]


class Polygon(msgspec.Struct, tag=True):
    coordinates: PolygonType


class MultiPolygon(msgspec.Struct, tag=True):
    coordinates: List[PolygonType]


class GeometryCollection(msgspec.Struct, tag=True):
    geometries: List[Geometry]


Geometry = Union[
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
]
