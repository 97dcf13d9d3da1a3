from rest_framework import status as http_status
from rest_framework.response import Response


def success_response(data=None, status=http_status.HTTP_200_OK, message=None, count=None):
    """Build the {success: true, data, count?, message?} envelope"""
    body = {'success': True}
    if data is not None:
        body['data'] = data
    if count is not None:
        body['count'] = count
    if message:
        body['message'] = message
    return Response(body, status=status)


def error_response(error, status=http_status.HTTP_400_BAD_REQUEST):
    return Response({'success': False, 'error': error}, status=status)
