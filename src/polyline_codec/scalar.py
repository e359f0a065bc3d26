"""Scalar codec for the Encoded Polyline Algorithm Format.

Each signed integer delta is zigzag-encoded, split into 5-bit chunks
(least significant first) with 0x20 as the continuation bit, and offset
by 63 to land in the printable range '?'..'~'.

ref: https://developers.google.com/maps/documentation/utilities/polylinealgorithm
"""

from typing import Tuple

from .errors import MalformedPolylineError

OFFSET = 63
CHUNK_BITS = 5
CHUNK_MASK = 0x1F
CONTINUATION = 0x20


def encode_scalar(value: int) -> str:
    """Encode a single signed integer delta."""
    result = value << 1
    if value < 0:
        result = ~result

    chunks = []
    while result >= CONTINUATION:
        chunks.append(chr(((result & CHUNK_MASK) | CONTINUATION) + OFFSET))
        result >>= CHUNK_BITS
    chunks.append(chr(result + OFFSET))

    return "".join(chunks)


def decode_scalar(encoded: str, index: int) -> Tuple[int, int]:
    """Decode one signed integer delta starting at ``index``.

    Args:
        encoded: Polyline string
        index: Position of the first character of the scalar

    Returns:
        (value, index of the character after the scalar)

    Raises:
        MalformedPolylineError: If the string ends before the scalar is
            terminated, or a character falls outside '?'..'~'
    """
    start = index
    shift = 0
    result = 0

    while True:
        if index >= len(encoded):
            raise MalformedPolylineError(
                "Polyline ends inside a scalar",
                position=index,
                detail=f"continuation bit still set after scalar starting at {start}",
            )

        char = encoded[index]
        b = ord(char) - OFFSET
        if b < 0 or b > (CHUNK_MASK | CONTINUATION):
            raise MalformedPolylineError(
                "Character outside the polyline alphabet",
                position=index,
                detail=f"{char!r} at position {index}",
            )

        index += 1
        result |= (b & CHUNK_MASK) << shift
        shift += CHUNK_BITS
        if not b & CONTINUATION:
            break

    value = ~(result >> 1) if result & 1 else result >> 1
    return value, index
