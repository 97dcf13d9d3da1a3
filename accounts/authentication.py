# accounts/authentication.py
from django.contrib.auth import get_user_model
from rest_framework import authentication
from rest_framework.exceptions import AuthenticationFailed
from .utils import verify_jwt_token

User = get_user_model()


class JWTAuthentication(authentication.BaseAuthentication):
    """JWT authentication for DRF"""

    def authenticate(self, request):
        auth_header = request.headers.get('Authorization', '')

        if not auth_header.startswith('Bearer '):
            return None  # Let other auth classes try

        parts = auth_header.split(' ')
        if len(parts) != 2 or not parts[1]:
            raise AuthenticationFailed('Invalid authorization header')

        token = parts[1]
        payload = verify_jwt_token(token)

        if not payload:
            raise AuthenticationFailed('Invalid or expired token')

        user_id = payload.get('user_id')
        if not user_id:
            raise AuthenticationFailed('Invalid token payload')

        try:
            user = User.objects.get(id=user_id)
        except (User.DoesNotExist, ValueError):
            raise AuthenticationFailed('User not found')

        # Check if user is active
        if not user.can_sign_in:
            raise AuthenticationFailed('User account is disabled')

        return (user, token)

    def authenticate_header(self, request):
        return 'Bearer'
