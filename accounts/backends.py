from django.contrib.auth.backends import ModelBackend
from django.contrib.auth import get_user_model

User = get_user_model()


class EmailModelBackend(ModelBackend):
    """Sign staff in with their email address instead of a username"""

    def authenticate(self, request, username=None, password=None, email=None, **kwargs):
        email = email or username
        if not email or not password:
            return None

        for user in User.objects.filter(email__iexact=email.strip()):
            if user.check_password(password) and self.user_can_authenticate(user):
                return user
        return None
