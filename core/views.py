"""
Core views for health checks and system status.
"""

from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt


def database_available() -> bool:
    """Run a trivial query against the default database."""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError:
        return False
    return True


@method_decorator(csrf_exempt, name="dispatch")
class HealthView(View):
    """Health check endpoint."""

    def get(self, _request):
        """Return service health status."""
        return JsonResponse({"status": "healthy", "service": "license-server"})


@method_decorator(csrf_exempt, name="dispatch")
class HealthDBView(View):
    """Database health check endpoint."""

    def get(self, _request):
        """Check database connectivity."""
        if database_available():
            return JsonResponse({"status": "healthy", "database": "connected"})
        return JsonResponse(
            {"status": "unhealthy", "database": "disconnected"},
            status=503,
        )


@method_decorator(csrf_exempt, name="dispatch")
class ReadyView(View):
    """Readiness check endpoint."""

    def get(self, _request):
        """Check if service is ready to accept traffic."""
        checks = {"database": database_available()}

        all_healthy = all(checks.values())
        status_code = 200 if all_healthy else 503

        return JsonResponse(
            {
                "status": "ready" if all_healthy else "not_ready",
                "checks": checks,
            },
            status=status_code,
        )
