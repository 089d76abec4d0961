"""Health module - service status."""

from apps.health.routes import router

__all__ = ["router"]
