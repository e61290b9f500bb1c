from .boundary import boundary_service

__all__ = ["boundary_service"]
