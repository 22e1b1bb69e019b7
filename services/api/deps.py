"""FastAPI dependencies for application-scoped objects.

The app factory stores the settings and metrics on ``app.state``; handlers
receive them through these dependencies instead of module globals.
"""

from fastapi import Request

from core.config.settings import Settings
from services.api.prometheus import WordMetrics


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_metrics(request: Request) -> WordMetrics:
    """Counters shared by all handlers of the running application."""
    return request.app.state.metrics
