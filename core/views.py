import logging

from django.conf import settings
from django.db import DatabaseError, connection
from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny

from .responses import success_response
from .serializers import HealthCheckSerializer

logger = logging.getLogger(__name__)


def database_status():
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError as e:
        logger.error(f"Health check could not reach the database: {e}")
        return f'error: {e}'
    return 'connected'


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    """Unauthenticated liveness check used by the dashboard before login."""
    serializer = HealthCheckSerializer({
        'status': 'healthy',
        'timestamp': timezone.now(),
        'database': database_status(),
        'service': 'mealprep-dashboard',
        'version': getattr(settings, 'SERVICE_VERSION', '0.1.0'),
    })
    return success_response(serializer.data)
