from rest_framework import permissions


def has_role(user, roles):
    return bool(user and user.is_authenticated and user.effective_role in roles)


class IsStaffOrHigher(permissions.BasePermission):
    """Allow access to every staff role"""

    def has_permission(self, request, view):
        return has_role(request.user, ['admin', 'manager', 'staff', 'kitchen_staff'])


class IsManagerOrReadOnly(permissions.BasePermission):
    """Any authenticated user may read; managers and admins may write"""

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return bool(request.user and request.user.is_authenticated)
        return has_role(request.user, ['admin', 'manager'])
