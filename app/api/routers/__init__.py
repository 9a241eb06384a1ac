"""
app/api/routers package marker.
"""

from app.api.routers.analytics_router import router as analytics_router
from app.api.routers.tools_router import router as tools_router

__all__ = [
    "analytics_router",
    "tools_router",
]
