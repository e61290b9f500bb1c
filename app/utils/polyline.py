"""
Polyline encoding utility.
Implements the Encoded Polyline Algorithm Format.
ref: https://developers.google.com/maps/documentation/utilities/polylinealgorithm

Points are (lat, lng) tuples. Each coordinate is scaled by 1e5, rounded
half away from zero and written as a zig-zag signed delta from the
previous point in 5-bit chunks offset by 63.
"""
import math
from typing import Sequence, Tuple

from app.core.exceptions import InvalidInputError

PRECISION = 1e5


def encode_polyline(points: Sequence[Tuple[float, float]]) -> str:
    """
    Encode a sequence of (lat, lng) tuples into a polyline string.

    Args:
        points: Sequence of (latitude, longitude) tuples.

    Returns:
        Encoded polyline string. Empty input yields an empty string.

    Raises:
        InvalidInputError: If a coordinate is NaN or infinite.
    """
    result = []
    prev_lat = 0
    prev_lng = 0

    for lat, lng in points:
        lat_e5 = _round_e5(lat)
        lng_e5 = _round_e5(lng)

        d_lat = lat_e5 - prev_lat
        d_lng = lng_e5 - prev_lng

        prev_lat = lat_e5
        prev_lng = lng_e5

        result.append(_encode_signed(d_lat))
        result.append(_encode_signed(d_lng))

    return "".join(result)


def _round_e5(coordinate: float) -> int:
    """Scale to 1e5 and round half away from zero."""
    if not math.isfinite(coordinate):
        raise InvalidInputError(f"Coordinate must be finite, got {coordinate}")
    scaled = abs(coordinate) * PRECISION
    return int(math.copysign(math.floor(scaled + 0.5), coordinate))


def _encode_signed(value: int) -> str:
    """Encode a signed delta."""
    shifted = value << 1
    if value < 0:
        shifted = ~shifted
    return _encode_unsigned(shifted)


def _encode_unsigned(value: int) -> str:
    """Encode a non-negative value in 5-bit chunks."""
    result = []
    while value >= 0x20:
        result.append(chr((0x20 | (value & 0x1f)) + 63))
        value >>= 5
    result.append(chr(value + 63))

    return "".join(result)
