"""
Health Views - Health Check Endpoint
"""
from .health_check_view import PublicHealthCheckView

__all__ = [
    'PublicHealthCheckView',
]
