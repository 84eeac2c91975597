"""Typed 2-D geometry.

Every type here is a frozen, generic `msgspec.Struct`, parametrized over the
coordinate type ``T`` (``float`` unless stated otherwise). Sequences are
stored as tuples, so a geometry is an immutable snapshot that compares
structurally and order-sensitively with ``==``.

Nothing here checks geometric validity. A `Polygon` ring may be open, or
have fewer than 4 coordinates; it's carried through as is.
"""
from __future__ import annotations

from typing import Generic, Iterator, List, Tuple, TypeVar, Union

import msgspec

__all__ = (
    "Coordinate",
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


T = TypeVar("T")


class Coordinate(msgspec.Struct, Generic[T], frozen=True):
    """An ``(x, y)`` pair."""

    x: T
    y: T


class Point(msgspec.Struct, Generic[T], frozen=True):
    """A single location.

    Parameters
    ----------
    coord: Coordinate
        The location of the point.
    """

    coord: Coordinate[T]

    @classmethod
    def from_xy(cls, x: T, y: T) -> Point[T]:
        """Create a point from its ``x`` and ``y`` values."""
        return cls(Coordinate(x, y))

    @property
    def x(self) -> T:
        return self.coord.x

    @property
    def y(self) -> T:
        return self.coord.y


class MultiPoint(msgspec.Struct, Generic[T], frozen=True):
    points: Tuple[Point[T], ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point[T]]:
        return iter(self.points)


class LineString(msgspec.Struct, Generic[T], frozen=True):
    """An ordered path through a sequence of coordinates.

    Parameters
    ----------
    coords: Tuple[Coordinate, ...], optional
        The coordinates along the path, in order. May be empty.
    """

    coords: Tuple[Coordinate[T], ...] = ()

    def points(self) -> List[Point[T]]:
        """The coordinates of this line string, each as a `Point`."""
        return [Point(c) for c in self.coords]

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[Coordinate[T]]:
        return iter(self.coords)


class MultiLineString(msgspec.Struct, Generic[T], frozen=True):
    lines: Tuple[LineString[T], ...] = ()

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[LineString[T]]:
        return iter(self.lines)


class Polygon(msgspec.Struct, Generic[T], frozen=True):
    """A polygon, bounded by one exterior ring with zero or more holes.

    Parameters
    ----------
    exterior: LineString
        The outer ring.
    interiors: Tuple[LineString, ...], optional
        The interior rings (holes), in order.
    """

    exterior: LineString[T]
    interiors: Tuple[LineString[T], ...] = ()


class MultiPolygon(msgspec.Struct, Generic[T], frozen=True):
    polygons: Tuple[Polygon[T], ...] = ()

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self) -> Iterator[Polygon[T]]:
        return iter(self.polygons)


class GeometryCollection(msgspec.Struct, Generic[T], frozen=True):
    """An ordered collection of geometries of any kind, including other
    collections."""

    geometries: Tuple[Geometry[T], ...] = ()

    def __len__(self) -> int:
        return len(self.geometries)

    def __iter__(self) -> Iterator[Geometry[T]]:
        return iter(self.geometries)


Geometry = Union[
    Point[T],
    MultiPoint[T],
    LineString[T],
    MultiLineString[T],
    Polygon[T],
    MultiPolygon[T],
    GeometryCollection[T],
]
