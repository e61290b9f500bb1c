from pydantic import BaseModel, Field
from typing import Optional, List, Tuple, Dict, Any

class PathEncodeRequest(BaseModel):
    points: List[Tuple[float, float]] = Field(..., description="Boundary vertices as [lat, lng] pairs")
    tolerance: Optional[float] = Field(None, ge=0, description="Simplification tolerance in degrees")

class GeometryEncodeRequest(BaseModel):
    geometry: Dict[str, Any] = Field(..., description="GeoJSON Polygon or MultiPolygon ([lng, lat] order)")
    tolerance: Optional[float] = Field(None, ge=0, description="Simplification tolerance in degrees")

class BoundaryPolylineResponse(BaseModel):
    encoded_polyline: str
    path_param: str = Field(..., description="Value for a static map 'path' parameter, e.g. enc:<polyline>")
    original_points: int
    simplified_points: int
    tolerance: float
