"""Point normalization.

Turns the point shapes callers hand to ``encode`` into plain
``Coordinate`` pairs before the codec runs.

Accepted shapes:
- (longitude, latitude) tuple or list
- {"longitude": ..., "latitude": ...}
- {"lon": ..., "lat": ...}
- {"coordinates": (longitude, latitude)} (GeoJSON Point dicts)
- any object with a ``coordinates`` attribute holding (longitude, latitude)
"""

import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, Iterable, List, NamedTuple, Optional

import structlog

from .errors import InvalidPointError

logger = structlog.get_logger(__name__)


class Coordinate(NamedTuple):
    """A (longitude, latitude) pair in degrees."""
    longitude: float
    latitude: float


_KEY_PAIRS = (
    ("longitude", "latitude"),
    ("lon", "lat"),
)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _pair(value: Any) -> Optional[Coordinate]:
    if isinstance(value, (tuple, list)) and len(value) == 2:
        lon, lat = value
        if _is_number(lon) and _is_number(lat):
            return Coordinate(float(lon), float(lat))
    return None


def _match(point: Any) -> Optional[Coordinate]:
    if isinstance(point, (tuple, list)):
        return _pair(point)

    if isinstance(point, Mapping):
        for lon_key, lat_key in _KEY_PAIRS:
            if lon_key in point and lat_key in point:
                return _pair((point[lon_key], point[lat_key]))
        if "coordinates" in point:
            return _pair(point["coordinates"])
        return None

    coordinates = getattr(point, "coordinates", None)
    if coordinates is not None:
        return _pair(coordinates)

    return None


def to_coordinate(point: Any, index: Optional[int] = None) -> Coordinate:
    """Normalize one point to a Coordinate.

    Args:
        point: Any of the accepted point shapes
        index: Position of the point in its sequence, for error reporting

    Returns:
        Coordinate(longitude, latitude)

    Raises:
        InvalidPointError: If the shape is not recognized or a value is not finite
    """
    coordinate = _match(point)

    if coordinate is None:
        logger.warning("unsupported_point_shape", index=index, point_type=type(point).__name__)
        raise InvalidPointError(
            "Unsupported point shape",
            index=index,
            detail=f"{point!r}",
        )

    if not (math.isfinite(coordinate.longitude) and math.isfinite(coordinate.latitude)):
        logger.warning("non_finite_point", index=index)
        raise InvalidPointError(
            "Point coordinates must be finite",
            index=index,
            detail=f"{point!r}",
        )

    return coordinate


def normalize_points(points: Iterable[Any]) -> List[Coordinate]:
    """Normalize a sequence of mixed point shapes."""
    return [to_coordinate(point, index) for index, point in enumerate(points)]
