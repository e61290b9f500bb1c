from typing import Any, Dict, List, Optional, Sequence, Tuple
from fastapi import HTTPException, status
from shapely.geometry import shape, Polygon, MultiPolygon

from app.core.config import settings
from app.core.exceptions import InvalidInputError
from app.core.logging_config import logger
from app.schemas.boundary import BoundaryPolylineResponse
from app.utils.polyline import encode_polyline
from app.utils.simplify import simplify_path

SUPPORTED_GEOMETRY_TYPES = ("Polygon", "MultiPolygon")


class BoundaryService:
    """
    Service layer for turning boundary geometries into encoded polylines.

    Points are handled latitude-first, (lat, lng), from simplification
    through encoding. GeoJSON input ([lng, lat]) is swapped on the way in.
    """

    def __init__(self, max_points: Optional[int] = None):
        self.max_points = settings.MAX_PATH_POINTS if max_points is None else max_points

    def encode_path(
        self,
        points: Sequence[Tuple[float, float]],
        tolerance: Optional[float] = None
    ) -> BoundaryPolylineResponse:
        """
        Simplify a path and encode it as a polyline.

        Args:
            points: (lat, lng) vertices in drawing order
            tolerance: Simplification tolerance in degrees (default from settings)

        Returns:
            BoundaryPolylineResponse with the encoded string and point counts

        Raises:
            HTTPException 400: If the path is too long or holds invalid values
        """
        if tolerance is None:
            tolerance = settings.DEFAULT_TOLERANCE

        if len(points) > self.max_points:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Path has {len(points)} points, maximum is {self.max_points}"
            )

        try:
            simplified = simplify_path(points, tolerance)
            encoded = encode_polyline(simplified)
        except InvalidInputError as e:
            logger.warning(f"Rejected path of {len(points)} points: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )

        logger.info(
            f"Encoded path: {len(points)} -> {len(simplified)} points, "
            f"tolerance={tolerance}, length={len(encoded)}"
        )

        return BoundaryPolylineResponse(
            encoded_polyline=encoded,
            path_param=f"enc:{encoded}",
            original_points=len(points),
            simplified_points=len(simplified),
            tolerance=tolerance
        )

    def flatten_geometry(self, geometry: Dict[str, Any]) -> List[Tuple[float, float]]:
        """
        Flatten a GeoJSON Polygon or MultiPolygon into one (lat, lng) path.

        Only outer rings are used. MultiPolygon rings are concatenated in
        the order they appear.

        Raises:
            HTTPException 400: If the geometry type is unsupported or malformed
        """
        geo_type = geometry.get("type")
        if geo_type not in SUPPORTED_GEOMETRY_TYPES:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unsupported geometry type: {geo_type}"
            )

        try:
            geom = shape(geometry)
        except Exception as e:
            logger.error(f"Could not parse {geo_type} geometry: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Malformed {geo_type} geometry"
            )

        if isinstance(geom, Polygon):
            polygons = [geom]
        elif isinstance(geom, MultiPolygon):
            polygons = list(geom.geoms)
        else:
            polygons = []

        points_lat_lng = []
        for polygon in polygons:
            if polygon.is_empty:
                continue
            # [[lng, lat], [lng, lat], ...]
            points_lat_lng.extend([(c[1], c[0]) for c in polygon.exterior.coords])

        return points_lat_lng

    def encode_geometry(
        self,
        geometry: Dict[str, Any],
        tolerance: Optional[float] = None
    ) -> BoundaryPolylineResponse:
        """Flatten a GeoJSON boundary and encode it as a polyline."""
        points = self.flatten_geometry(geometry)
        logger.info(f"Flattened {geometry.get('type')} into {len(points)} points")
        return self.encode_path(points, tolerance)


# Create a singleton instance
boundary_service = BoundaryService()
