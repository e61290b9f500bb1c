import logging
import sys
from app.core.config import settings

def setup_logging():
    """
    Configure structured logging for the application.
    
    Sets up logging to stdout with timestamps, log levels, and module names.
    The level comes from the LOG_LEVEL setting.
    """
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    
    # Reduce uvicorn access noise in logs
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    
    return logging.getLogger("boundary_polyline")


# Create global logger instance
logger = setup_logging()
