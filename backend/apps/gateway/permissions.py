from rest_framework.exceptions import NotAuthenticated
from rest_framework.permissions import BasePermission

from .credentials import ADMIN, DELIVERY, SHOPPER, BackendCredentials


class _AudiencePermission(BasePermission):
    audience = SHOPPER
    message = "Authentication required"

    def has_permission(self, request, view):
        if BackendCredentials(request.session).is_authenticated(self.audience):
            return True
        # Credentials live in the session, so a missing login is always a 401
        raise NotAuthenticated(self.message)


class IsShopper(_AudiencePermission):
    audience = SHOPPER
    message = "Please login to continue"


class IsAdmin(_AudiencePermission):
    audience = ADMIN
    message = "Admin login required"


class IsDeliveryAgent(_AudiencePermission):
    audience = DELIVERY
    message = "Delivery agent login required"
