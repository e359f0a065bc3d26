"""Polyline Codec

Encodes and decodes coordinate sequences with the Google Encoded Polyline
Algorithm Format.

    from polyline_codec import encode, decode

    encode([(-120.2, 38.5)])      # "_p~iF~ps|U"
    decode("_p~iF~ps|U")          # [Coordinate(longitude=-120.2, latitude=38.5)]
"""

from .codec import decode, encode
from .config import get_config
from .errors import (
    ConfigurationError,
    ErrorCode,
    InvalidGeometryError,
    InvalidPointError,
    InvalidPrecisionError,
    MalformedPolylineError,
    PolylineError,
)
from .geojson import LineString, Point, geojson_to_polyline, polyline_to_geojson
from .logging_config import configure_logging
from .points import Coordinate, normalize_points, to_coordinate
from .scalar import decode_scalar, encode_scalar

__version__ = "1.0.0"
__all__ = [
    "encode",
    "decode",
    "encode_scalar",
    "decode_scalar",
    "Coordinate",
    "to_coordinate",
    "normalize_points",
    "Point",
    "LineString",
    "polyline_to_geojson",
    "geojson_to_polyline",
    "ErrorCode",
    "PolylineError",
    "InvalidPointError",
    "MalformedPolylineError",
    "InvalidPrecisionError",
    "InvalidGeometryError",
    "ConfigurationError",
    "get_config",
    "configure_logging",
]
