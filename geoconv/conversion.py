"""Conversion between typed geometries and flat GeoJSON values.

The ``encode_*`` functions turn a `geoconv.geometry` value into nested lists
of floats (or, for `encode_geometry`, into a tagged `geoconv.geojson`
struct). The ``decode_*`` functions go the other way, building coordinates of
the type given by their ``type`` keyword (``float`` by default).

All functions are pure: inputs are never mutated or retained, and every call
returns a newly built value.
"""
import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Type, TypeVar

import msgspec

from . import geojson
from ._errors import EncodeError, ValidationError
from ._numeric import check_coordinate_type, from_double, to_double
from .geometry import (
    Coordinate,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

__all__ = (
    "encode_coordinate",
    "encode_point",
    "encode_multi_point",
    "encode_line_string",
    "encode_multi_line_string",
    "encode_polygon",
    "encode_multi_polygon",
    "encode_geometry_collection",
    "encode_geometry",
    "decode_coordinate",
    "decode_point",
    "decode_multi_point",
    "decode_line_string",
    "decode_multi_line_string",
    "decode_polygon",
    "decode_multi_polygon",
    "decode_geometry_collection",
    "decode_geometry",
    "Decoder",
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def encode_coordinate(coord: Coordinate) -> geojson.Position:
    return [to_double(coord.x), to_double(coord.y)]


def encode_point(point: Point) -> geojson.Position:
    """Encode a `Point` as an ``[x, y]`` position.

    Raises
    ------
    EncodeError
        If a coordinate can't be represented as a double.
    """
    return encode_coordinate(point.coord)


def encode_multi_point(multi_point: MultiPoint) -> List[geojson.Position]:
    return [encode_point(point) for point in multi_point.points]


def encode_line_string(line_string: LineString) -> geojson.LineStringType:
    """Encode a `LineString` as a list of positions, in path order."""
    return [encode_coordinate(coord) for coord in line_string.coords]


def encode_multi_line_string(
    multi_line_string: MultiLineString,
) -> List[geojson.LineStringType]:
    return [encode_line_string(line) for line in multi_line_string.lines]


def encode_polygon(polygon: Polygon) -> geojson.PolygonType:
    """Encode a `Polygon` as a list of rings.

    The exterior ring always comes first, followed by the interior rings in
    order. A polygon without holes encodes to a single ring.
    """
    rings = [encode_line_string(polygon.exterior)]
    rings.extend(encode_line_string(ring) for ring in polygon.interiors)
    return rings


def encode_multi_polygon(multi_polygon: MultiPolygon) -> List[geojson.PolygonType]:
    return [encode_polygon(polygon) for polygon in multi_polygon.polygons]


def encode_geometry_collection(
    collection: GeometryCollection,
) -> List[geojson.Geometry]:
    """Encode every member of a `GeometryCollection` as a tagged geometry."""
    logger.debug("Encoding geometry collection of %d members", len(collection))
    return [encode_geometry(geometry) for geometry in collection.geometries]


_ENCODERS = {
    Point: (geojson.Point, encode_point),
    MultiPoint: (geojson.MultiPoint, encode_multi_point),
    LineString: (geojson.LineString, encode_line_string),
    MultiLineString: (geojson.MultiLineString, encode_multi_line_string),
    Polygon: (geojson.Polygon, encode_polygon),
    MultiPolygon: (geojson.MultiPolygon, encode_multi_polygon),
    GeometryCollection: (geojson.GeometryCollection, encode_geometry_collection),
}


def _lookup(table, obj):
    for cls in obj.__class__.__mro__:
        if cls in table:
            return table[cls]
    return None


def encode_geometry(geometry: Geometry) -> geojson.Geometry:
    """Encode any typed geometry as the matching tagged GeoJSON geometry.

    Parameters
    ----------
    geometry : Geometry
        The geometry to encode. Collections are encoded recursively.

    Returns
    -------
    out : geojson.Geometry
        A new tagged geometry struct, ready to be serialized with e.g.
        ``msgspec.json.encode``.

    Raises
    ------
    EncodeError
        If ``geometry`` isn't a typed geometry, or a coordinate can't be
        represented as a double.
    """
    entry = _lookup(_ENCODERS, geometry)
    if entry is None:
        raise EncodeError(
            f"Expected a geometry, got `{geometry.__class__.__name__}`"
        )
    flat_type, encoder = entry
    return flat_type(encoder(geometry))


def decode_coordinate(
    position: geojson.Position, *, type: Type[T] = float
) -> Coordinate[T]:
    """Decode an ``[x, y]`` position into a `Coordinate`.

    Parameters
    ----------
    position : list
        The position. Must have at least 2 elements; any beyond the second
        are ignored.
    type : type, optional
        The coordinate type to decode into. Defaults to ``float``.

    Returns
    -------
    coord : Coordinate

    Raises
    ------
    ValidationError
        If ``position`` has fewer than 2 elements.
    DecodeError
        If a value can't be represented as ``type``.
    """
    type = check_coordinate_type(type)
    try:
        x = position[0]
        y = position[1]
    except IndexError:
        raise ValidationError(
            f"Expected a position of at least 2 elements, got {len(position)}"
        ) from None
    return Coordinate(from_double(x, type), from_double(y, type))


def decode_point(
    position: geojson.Position, *, type: Type[T] = float
) -> Point[T]:
    """Decode an ``[x, y]`` position into a `Point`.

    Same contract as `decode_coordinate`.
    """
    return Point(decode_coordinate(position, type=type))


def decode_multi_point(
    positions: List[geojson.Position], *, type: Type[T] = float
) -> MultiPoint[T]:
    type = check_coordinate_type(type)
    return MultiPoint(tuple(decode_point(p, type=type) for p in positions))


def decode_line_string(
    line_string: geojson.LineStringType, *, type: Type[T] = float
) -> LineString[T]:
    """Decode a list of positions into a `LineString`, keeping their order.

    An empty list decodes to an empty `LineString`.
    """
    type = check_coordinate_type(type)
    return LineString(tuple(decode_coordinate(p, type=type) for p in line_string))


def decode_multi_line_string(
    line_strings: List[geojson.LineStringType], *, type: Type[T] = float
) -> MultiLineString[T]:
    type = check_coordinate_type(type)
    return MultiLineString(
        tuple(decode_line_string(line, type=type) for line in line_strings)
    )


def decode_polygon(
    polygon: geojson.PolygonType, *, type: Type[T] = float
) -> Polygon[T]:
    """Decode a list of rings into a `Polygon`.

    Ring 0 is the exterior, all following rings are interiors (in order). An
    empty list decodes to a polygon with an empty exterior and no interiors.

    Parameters
    ----------
    polygon : list
        The rings of the polygon.
    type : type, optional
        The coordinate type to decode into. Defaults to ``float``.

    Returns
    -------
    polygon : Polygon
    """
    type = check_coordinate_type(type)
    if not polygon:
        return Polygon(decode_line_string([], type=type))
    return Polygon(
        decode_line_string(polygon[0], type=type),
        tuple(decode_line_string(ring, type=type) for ring in polygon[1:]),
    )


def decode_multi_polygon(
    polygons: List[geojson.PolygonType], *, type: Type[T] = float
) -> MultiPolygon[T]:
    type = check_coordinate_type(type)
    return MultiPolygon(tuple(decode_polygon(p, type=type) for p in polygons))


def decode_geometry_collection(
    geometries: Iterable[geojson.Geometry], *, type: Type[T] = float
) -> GeometryCollection[T]:
    """Decode a list of tagged geometries into a `GeometryCollection`.

    Each member is decoded according to its tag; nested collections are
    decoded recursively. Order is preserved.

    Parameters
    ----------
    geometries : iterable
        The tagged geometries, as `geoconv.geojson` structs or as mappings
        with a ``"type"`` key.
    type : type, optional
        The coordinate type to decode into. Defaults to ``float``.

    Returns
    -------
    collection : GeometryCollection

    Raises
    ------
    ValidationError
        If a member isn't a recognized geometry.
    """
    type = check_coordinate_type(type)
    geometries = tuple(geometries)
    logger.debug("Decoding geometry collection of %d members", len(geometries))
    return GeometryCollection(
        tuple(decode_geometry(g, type=type) for g in geometries)
    )


_DECODERS = {
    geojson.Point: (decode_point, "coordinates"),
    geojson.MultiPoint: (decode_multi_point, "coordinates"),
    geojson.LineString: (decode_line_string, "coordinates"),
    geojson.MultiLineString: (decode_multi_line_string, "coordinates"),
    geojson.Polygon: (decode_polygon, "coordinates"),
    geojson.MultiPolygon: (decode_multi_polygon, "coordinates"),
    geojson.GeometryCollection: (decode_geometry_collection, "geometries"),
}


def decode_geometry(value: Any, *, type: Type[T] = float) -> Geometry[T]:
    """Decode a single tagged geometry into the matching typed geometry.

    Parameters
    ----------
    value : geojson.Geometry or mapping
        The tagged geometry. A mapping (e.g. the output of ``json.loads``) is
        first converted to the matching `geoconv.geojson` struct by its
        ``"type"`` key.
    type : type, optional
        The coordinate type to decode into. Defaults to ``float``.

    Returns
    -------
    geometry : Geometry

    Raises
    ------
    ValidationError
        If ``value`` isn't a recognized geometry, or is malformed.
    DecodeError
        If a value can't be represented as ``type``.
    """
    type = check_coordinate_type(type)
    if isinstance(value, Mapping):
        try:
            value = msgspec.convert(dict(value), geojson.Geometry)
        except msgspec.ValidationError as exc:
            raise ValidationError(str(exc)) from None
    entry = _lookup(_DECODERS, value)
    if entry is None:
        raise ValidationError(
            f"Expected a GeoJSON geometry, got `{value.__class__.__name__}`"
        )
    decoder, field = entry
    return decoder(getattr(value, field), type=type)


class Decoder:
    """A reusable decoder for tagged geometries.

    Parameters
    ----------
    type : type, optional
        The coordinate type to decode into. Checked once, here. Defaults to
        ``float``.

    Examples
    --------
    >>> from decimal import Decimal
    >>> dec = Decoder(Decimal)
    >>> dec.decode(geojson.Point([0.5, 1.0]))
    Point(coord=Coordinate(x=Decimal('0.5'), y=Decimal('1')))
    """

    __slots__ = ("type",)

    def __init__(self, type: Type[T] = float):
        self.type = check_coordinate_type(type)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.type.__name__})"

    def decode(self, value: Any) -> Geometry[T]:
        """Decode a tagged geometry. See `decode_geometry`."""
        return decode_geometry(value, type=self.type)

    def decode_collection(self, geometries: List[Any]) -> GeometryCollection[T]:
        """Decode a list of tagged geometries. See `decode_geometry_collection`."""
        return decode_geometry_collection(geometries, type=self.type)
