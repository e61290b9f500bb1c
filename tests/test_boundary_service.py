"""
Tests for BoundaryService: flattening GeoJSON and encoding paths.
"""

import math

import pytest
from fastapi import HTTPException

from app.core.config import settings
from app.services.boundary import BoundaryService, boundary_service

GOOGLE_EXAMPLE_POINTS = [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]
GOOGLE_EXAMPLE_ENCODED = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


class TestEncodePath:
    def test_encodes_simplified_path(self):
        result = boundary_service.encode_path(GOOGLE_EXAMPLE_POINTS, tolerance=0)

        assert result.encoded_polyline == GOOGLE_EXAMPLE_ENCODED
        assert result.path_param == f"enc:{GOOGLE_EXAMPLE_ENCODED}"
        assert result.original_points == 3
        assert result.simplified_points == 3
        assert result.tolerance == 0

    def test_default_tolerance_from_settings(self):
        result = boundary_service.encode_path([(0, 0), (0, 0.00001), (0, 1)])

        assert result.tolerance == settings.DEFAULT_TOLERANCE
        assert result.simplified_points == 2

    def test_empty_path(self):
        result = boundary_service.encode_path([], tolerance=0.001)

        assert result.encoded_polyline == ""
        assert result.path_param == "enc:"
        assert result.simplified_points == 0

    def test_zero_max_points_rejects_any_point(self):
        service = BoundaryService(max_points=0)

        assert service.max_points == 0
        with pytest.raises(HTTPException) as exc_info:
            service.encode_path([(0, 0)], tolerance=0)
        assert exc_info.value.status_code == 400

    def test_too_many_points(self):
        service = BoundaryService(max_points=3)

        with pytest.raises(HTTPException) as exc_info:
            service.encode_path([(0, 0), (0, 1), (1, 1), (1, 0)], tolerance=0)
        assert exc_info.value.status_code == 400

    def test_non_finite_coordinate_is_bad_request(self):
        with pytest.raises(HTTPException) as exc_info:
            boundary_service.encode_path([(0, 0), (math.nan, 1), (2, 0)], tolerance=0.1)
        assert exc_info.value.status_code == 400
        assert "finite" in exc_info.value.detail

    def test_negative_tolerance_is_bad_request(self):
        with pytest.raises(HTTPException) as exc_info:
            boundary_service.encode_path([(0, 0), (1, 1), (2, 0)], tolerance=-1)
        assert exc_info.value.status_code == 400


class TestFlattenGeometry:
    def test_polygon_outer_ring_swapped_to_lat_lng(self, square_polygon):
        points = boundary_service.flatten_geometry(square_polygon)

        assert points == [
            (42.3, -71.1),
            (42.3, -71.0),
            (42.4, -71.0),
            (42.4, -71.1),
            (42.3, -71.1),
        ]

    def test_multipolygon_rings_concatenated_in_order(self):
        geometry = {
            "type": "MultiPolygon",
            "coordinates": [
                [[[0, 0], [1, 0], [1, 1], [0, 0]]],
                [[[10, 10], [11, 10], [11, 11], [10, 10]]],
            ],
        }
        points = boundary_service.flatten_geometry(geometry)

        assert len(points) == 8
        assert points[0] == (0, 0)
        assert points[3] == (0, 0)
        assert points[4] == (10, 10)
        assert points[5] == (10, 11)

    @pytest.mark.parametrize("geo_type", ["Point", "LineString", "GeometryCollection", None])
    def test_unsupported_geometry_type(self, geo_type):
        with pytest.raises(HTTPException) as exc_info:
            boundary_service.flatten_geometry({"type": geo_type, "coordinates": [0, 0]})
        assert exc_info.value.status_code == 400
        assert "Unsupported geometry type" in exc_info.value.detail

    def test_malformed_polygon(self):
        with pytest.raises(HTTPException) as exc_info:
            boundary_service.flatten_geometry({"type": "Polygon", "coordinates": [[[0, 0], [1, 1]]]})
        assert exc_info.value.status_code == 400

    def test_encode_geometry_keeps_square_corners(self, square_polygon):
        result = boundary_service.encode_geometry(square_polygon, tolerance=0.0001)

        assert result.original_points == 5
        assert result.simplified_points == 5
        assert result.path_param.startswith("enc:")
