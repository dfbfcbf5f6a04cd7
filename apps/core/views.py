import logging

from django.db import DatabaseError, connection
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

logger = logging.getLogger(__name__)


@api_view(['GET'])
def health(request):
    """Report whether the database answers a trivial query."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError as e:
        logger.error(f"Health check failed: {e}")
        return Response({
            'status': 'error',
            'timestamp': timezone.now().isoformat(),
            'database': {'connected': False, 'error': str(e)},
        }, status=status.HTTP_503_SERVICE_UNAVAILABLE)

    return Response({
        'status': 'ok',
        'timestamp': timezone.now().isoformat(),
        'database': {'connected': True, 'vendor': connection.vendor},
    })
