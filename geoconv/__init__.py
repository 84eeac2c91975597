from ._errors import DecodeError, EncodeError, GeoConvError, ValidationError
from ._numeric import check_coordinate_type
from . import geojson, geometry
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
from .conversion import (
    Decoder,
    decode_coordinate,
    decode_geometry,
    decode_geometry_collection,
    decode_line_string,
    decode_multi_line_string,
    decode_multi_point,
    decode_multi_polygon,
    decode_point,
    decode_polygon,
    encode_coordinate,
    encode_geometry,
    encode_geometry_collection,
    encode_line_string,
    encode_multi_line_string,
    encode_multi_point,
    encode_multi_polygon,
    encode_point,
    encode_polygon,
)
from ._version import __version__
