import logging

from django.conf import settings
from django.db import DatabaseError, connection
from django.http import FileResponse, Http404, JsonResponse
from django.utils import timezone

logger = logging.getLogger(__name__)


def health_check(request):
    """Liveness probe: the app answers and the database accepts a query."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError as e:
        logger.error("Health check database ping failed: %s", e)
        return JsonResponse({
            'status': 'error',
            'database': 'unavailable',
            'timestamp': timezone.now().isoformat(),
        }, status=503)

    return JsonResponse({
        'status': 'ok',
        'database': 'ok',
        'timestamp': timezone.now().isoformat(),
    })


def serve_frontend(request, page='index'):
    """Serve a page of the static frontend build, when one is deployed."""
    path = (settings.FRONTEND_DIR / f'{page}.html').resolve()
    if settings.FRONTEND_DIR.resolve() not in path.parents or not path.is_file():
        raise Http404(page)
    return FileResponse(path.open('rb'), content_type='text/html')


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'success': False,
        'message': 'Not found',
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'success': False,
        'message': 'Internal server error',
    }, status=500)
