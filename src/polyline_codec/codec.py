"""Polyline encoding and decoding.

Implements the Encoded Polyline Algorithm Format on top of the scalar
codec. Points go in and come out as (longitude, latitude); on the wire
each point is written latitude first, as in Google's reference encoder.

ref: https://developers.google.com/maps/documentation/utilities/polylinealgorithm
"""

import math
from typing import Any, Iterable, List, Optional

import structlog

from .config import get_config
from .errors import InvalidPointError, InvalidPrecisionError, MalformedPolylineError
from .points import Coordinate, normalize_points
from .scalar import decode_scalar, encode_scalar

logger = structlog.get_logger(__name__)


def resolve_precision(precision: Optional[int]) -> int:
    """Return ``precision``, or the configured default when None.

    Raises:
        InvalidPrecisionError: If precision is not a non-negative integer
    """
    if precision is None:
        return get_config().default_precision

    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise InvalidPrecisionError(precision)

    return precision


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's round() ties to even, which disagrees with the reference
    encoder on negative half values.
    """
    magnitude = abs(value)
    rounded = math.floor(magnitude)
    # magnitude - rounded is exact for doubles; magnitude + 0.5 is not
    if magnitude - rounded >= 0.5:
        rounded += 1
    return -rounded if value < 0 else rounded


def scale(value: float, factor: int) -> int:
    """Scale degrees to the integer grid used on the wire."""
    try:
        scaled = value * factor
    except OverflowError:
        scaled = math.inf

    if not math.isfinite(scaled):
        raise InvalidPointError(
            "Coordinate too large for the requested precision",
            detail=f"{value!r} * {factor}",
        )
    return round_half_away(scaled)


def encode(points: Iterable[Any], precision: Optional[int] = None) -> str:
    """
    Encode a sequence of points into a polyline string.

    Args:
        points: (longitude, latitude) pairs, or any shape accepted by
            ``points.to_coordinate``. Shapes may be mixed.
        precision: Decimal digits kept (default 5)

    Returns:
        Encoded polyline string ("" for no points)

    Raises:
        InvalidPointError: If a point has an unsupported shape
        InvalidPrecisionError: If precision is negative or not an integer
    """
    factor = 10 ** resolve_precision(precision)
    coordinates = normalize_points(points)

    result = []
    prev_lat = 0
    prev_lon = 0

    for index, (lon, lat) in enumerate(coordinates):
        try:
            lat_scaled = scale(lat, factor)
            lon_scaled = scale(lon, factor)
        except InvalidPointError as e:
            e.index = index
            logger.warning("unscalable_point", index=index, detail=e.detail)
            raise

        result.append(encode_scalar(lat_scaled - prev_lat))
        result.append(encode_scalar(lon_scaled - prev_lon))

        prev_lat = lat_scaled
        prev_lon = lon_scaled

    return "".join(result)


def decode(encoded: str, precision: Optional[int] = None, strict: bool = True) -> List[Coordinate]:
    """
    Decode a polyline string into (longitude, latitude) pairs.

    Args:
        encoded: Encoded polyline string
        precision: Decimal digits the string was encoded with (default 5)
        strict: When False, a trailing latitude with no longitude is
            dropped instead of rejected

    Returns:
        List of Coordinate(longitude, latitude)

    Raises:
        MalformedPolylineError: If the string ends inside a scalar, holds a
            character outside the polyline alphabet, or (strict only) ends
            with an unpaired value
    """
    factor = 10 ** resolve_precision(precision)

    if not encoded:
        return []

    points = []
    index = 0
    lat = 0
    lon = 0

    try:
        while index < len(encoded):
            d_lat, index = decode_scalar(encoded, index)

            if index >= len(encoded):
                if not strict:
                    break
                raise MalformedPolylineError(
                    "Polyline ends with an unpaired value",
                    position=index,
                    detail=f"latitude delta without longitude after {len(points)} points",
                )

            d_lon, index = decode_scalar(encoded, index)

            lat += d_lat
            lon += d_lon
            points.append(Coordinate(lon / factor, lat / factor))
    except MalformedPolylineError as e:
        logger.warning("malformed_polyline", position=e.position, reason=e.message, length=len(encoded))
        raise

    return points
