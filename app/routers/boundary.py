from fastapi import APIRouter
from app.schemas.boundary import PathEncodeRequest, GeometryEncodeRequest, BoundaryPolylineResponse
from app.services.boundary import boundary_service
from app.core.logging_config import logger

router = APIRouter()


@router.post("/encode", response_model=BoundaryPolylineResponse)
def encode_path(request_data: PathEncodeRequest):
    """
    Simplify a boundary path and encode it as a Google polyline.
    
    Points are latitude-first. When tolerance is omitted the service
    default is used.
    
    Example:
        ```json
        {
            "points": [[38.5, -120.2], [40.7, -120.95], [43.252, -126.453]],
            "tolerance": 0.0001
        }
        ```
    """
    try:
        logger.info(f"Encoding path: points={len(request_data.points)}, tolerance={request_data.tolerance}")
        return boundary_service.encode_path(
            points=request_data.points,
            tolerance=request_data.tolerance
        )
    except Exception as e:
        logger.error(f"Error encoding path: {type(e).__name__}: {str(e)}")
        raise


@router.post("/geometry", response_model=BoundaryPolylineResponse)
def encode_geometry(request_data: GeometryEncodeRequest):
    """
    Flatten a GeoJSON Polygon or MultiPolygon boundary and encode it.
    
    GeoJSON coordinates are [lng, lat]; the encoded polyline is
    latitude-first, ready for a static map `path=enc:...` parameter.
    """
    try:
        logger.info(f"Encoding geometry: type={request_data.geometry.get('type')}")
        return boundary_service.encode_geometry(
            geometry=request_data.geometry,
            tolerance=request_data.tolerance
        )
    except Exception as e:
        logger.error(f"Error encoding geometry: {type(e).__name__}: {str(e)}")
        raise
