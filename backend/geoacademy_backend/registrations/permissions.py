from rest_framework.permissions import SAFE_METHODS, BasePermission


def is_admin(request):
    user = getattr(request, "user", None)
    return bool(user and user.is_authenticated and user.is_staff)


class IsAdminOrReadOnly(BasePermission):
    """Anyone may read; writes need a staff session."""

    def has_permission(self, request, view):
        return request.method in SAFE_METHODS or is_admin(request)


class IsAdminOrCreateOnly(BasePermission):
    """Public forms: anyone may POST, everything else needs a staff session."""

    def has_permission(self, request, view):
        return request.method == "POST" or is_admin(request)
