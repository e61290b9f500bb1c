"""
python -m scripts.encode_boundary <geojson-file> [tolerance]

Reads a GeoJSON Polygon/MultiPolygon (bare geometry or a Feature),
simplifies and encodes its outer boundary, and prints the reduction.
"""

import json
import sys

from fastapi import HTTPException

sys.path.insert(0, ".")

from app.core.config import settings
from app.services.boundary import boundary_service
from app.utils.polyline import encode_polyline


def load_geometry(path):
    """Load a geometry from a GeoJSON file, unwrapping Features."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if data.get("type") == "FeatureCollection":
        features = data.get("features") or []
        if not features:
            raise ValueError(f"No features in {path}")
        data = features[0]
    if data.get("type") == "Feature":
        data = data.get("geometry") or {}
    return data


def encode_boundary(path, tolerance):
    geometry = load_geometry(path)
    points = boundary_service.flatten_geometry(geometry)
    result = boundary_service.encode_path(points, tolerance)

    raw = encode_polyline(points)
    before_len = len(raw)
    after_len = len(result.encoded_polyline)
    reduction = ((before_len - after_len) / before_len) * 100 if before_len else 0.0

    print(f"--- Running with Tolerance: {result.tolerance} ---")
    print(f"Geometry:        {geometry.get('type')}")
    print(f"Points:          {result.original_points} -> {result.simplified_points}")
    print(f"Original Length: {before_len} chars")
    print(f"Encoded Length:  {after_len} chars")
    print(f"Reduction:       {reduction:.2f}%")
    print(result.path_param)


def main(argv):
    if not argv:
        print(__doc__.strip())
        return 1

    # Fall back to the configured default if the tolerance is missing or bad
    try:
        t_val = float(argv[1]) if len(argv) > 1 else settings.DEFAULT_TOLERANCE
    except ValueError:
        print(f"Invalid tolerance provided. Using default {settings.DEFAULT_TOLERANCE}")
        t_val = settings.DEFAULT_TOLERANCE

    try:
        encode_boundary(argv[0], t_val)
    except HTTPException as e:
        print(f"Error: {e.detail}")
        return 1
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
