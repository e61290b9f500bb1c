"""
Path simplification utility.

Two passes over a sequence of (x, y) points:

1. Radial distance: drop points closer than the tolerance to the last
   kept point.
2. Douglas-Peucker: keep only points deviating from the chord between
   already kept points by more than the tolerance.

Distances are compared squared so no square roots are taken. The
Douglas-Peucker pass walks an explicit stack of index ranges so deep
inputs cannot exhaust the interpreter's recursion limit.
"""
import math
from typing import List, Sequence, Tuple

from app.core.exceptions import InvalidInputError

Point = Tuple[float, float]


def simplify_path(points: Sequence[Point], tolerance: float) -> List[Point]:
    """
    Reduce the number of points in a path while keeping its shape.

    Args:
        points: Ordered (x, y) points. The axis order is the caller's choice.
        tolerance: Maximum deviation, in coordinate units, a dropped point
            may introduce. Zero only drops exact duplicates and points lying
            exactly on the chord.

    Returns:
        The surviving points in their original order. The first and last
        points are always kept. Paths of two points or fewer are returned
        unchanged.

    Raises:
        InvalidInputError: If the tolerance is negative or not finite, or a
            coordinate is NaN or infinite.
    """
    if not math.isfinite(tolerance) or tolerance < 0:
        raise InvalidInputError(f"Tolerance must be a non-negative number, got {tolerance}")

    for x, y in points:
        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidInputError(f"Coordinates must be finite, got ({x}, {y})")

    if len(points) <= 2:
        return list(points)

    sq_tolerance = tolerance * tolerance
    reduced = _simplify_radial_distance(points, sq_tolerance)
    return _simplify_douglas_peucker(reduced, sq_tolerance)


def _sq_distance(p1: Point, p2: Point) -> float:
    dx = p1[0] - p2[0]
    dy = p1[1] - p2[1]
    return dx * dx + dy * dy


def _sq_segment_distance(p: Point, p1: Point, p2: Point) -> float:
    """Squared distance from p to the segment p1-p2."""
    x, y = p1
    dx = p2[0] - x
    dy = p2[1] - y

    if dx != 0 or dy != 0:
        t = ((p[0] - x) * dx + (p[1] - y) * dy) / (dx * dx + dy * dy)

        if t > 1:
            x, y = p2
        elif t > 0:
            x += dx * t
            y += dy * t

    dx = p[0] - x
    dy = p[1] - y
    return dx * dx + dy * dy


def _simplify_radial_distance(points: Sequence[Point], sq_tolerance: float) -> List[Point]:
    last = len(points) - 1
    prev_point = points[0]
    new_points = [prev_point]

    for i in range(1, last):
        point = points[i]
        if _sq_distance(point, prev_point) > sq_tolerance:
            new_points.append(point)
            prev_point = point

    new_points.append(points[last])

    return new_points


def _simplify_douglas_peucker(points: List[Point], sq_tolerance: float) -> List[Point]:
    last = len(points) - 1
    keep = [False] * len(points)
    keep[0] = keep[last] = True

    stack = [(0, last)]
    while stack:
        first, last = stack.pop()
        max_sq_dist = sq_tolerance
        index = 0

        for i in range(first + 1, last):
            sq_dist = _sq_segment_distance(points[i], points[first], points[last])
            if sq_dist > max_sq_dist:
                index = i
                max_sq_dist = sq_dist

        if index:
            keep[index] = True
            if index - first > 1:
                stack.append((first, index))
            if last - index > 1:
                stack.append((index, last))

    return [point for point, kept in zip(points, keep) if kept]
