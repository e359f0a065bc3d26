"""GeoJSON geometry interop.

Minimal pydantic models for the two geometries a polyline maps onto:
a ``Point`` (one coordinate) and a ``LineString`` (the whole polyline).
"""

from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ValidationError

from .codec import decode, encode
from .errors import InvalidGeometryError


class Point(BaseModel):
    """GeoJSON Point. Accepted directly by ``encode``."""
    type: Literal["Point"] = "Point"
    coordinates: Tuple[float, float]


class LineString(BaseModel):
    """GeoJSON LineString with (longitude, latitude) positions."""
    type: Literal["LineString"] = "LineString"
    coordinates: List[Tuple[float, float]]

    @classmethod
    def from_polyline(cls, encoded: str, precision: Optional[int] = None, strict: bool = True) -> "LineString":
        return cls(coordinates=[tuple(c) for c in decode(encoded, precision, strict=strict)])

    def to_polyline(self, precision: Optional[int] = None) -> str:
        return encode(self.coordinates, precision)


def polyline_to_geojson(encoded: str, precision: Optional[int] = None, strict: bool = True) -> Dict[str, Any]:
    """Decode a polyline into a GeoJSON LineString dict."""
    return LineString.from_polyline(encoded, precision, strict=strict).model_dump(mode="json")


def geojson_to_polyline(geometry: Union[LineString, Dict[str, Any]], precision: Optional[int] = None) -> str:
    """
    Encode a GeoJSON LineString into a polyline.

    Args:
        geometry: LineString model or a GeoJSON dict
        precision: Decimal digits kept (default 5)

    Raises:
        InvalidGeometryError: If the dict is not a valid LineString
    """
    if not isinstance(geometry, LineString):
        try:
            geometry = LineString.model_validate(geometry)
        except ValidationError as e:
            raise InvalidGeometryError("Invalid LineString geometry", detail=str(e)) from e

    return geometry.to_polyline(precision)
