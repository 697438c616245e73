from __future__ import annotations

from typing import Any, Dict, MutableMapping, Optional

SHOPPER = "shopper"
ADMIN = "admin"
DELIVERY = "delivery"
AUDIENCES = (SHOPPER, ADMIN, DELIVERY)

COOKIES_KEY = "danl_backend_cookies"
PROFILE_KEYS = {
    SHOPPER: "danl_user",
    ADMIN: "danl_admin_user",
    DELIVERY: "danl_delivery_user",
}
DELIVERY_TOKEN_KEY = "danl_delivery_token"


class BackendCredentials:
    """Backend auth material kept in the visitor's session, one slot per audience.

    Shoppers and admins authenticate with backend cookies; delivery agents use a
    bearer token. Profiles are cached copies of what the backend returned at login.
    """

    def __init__(self, session: MutableMapping):
        self.session = session

    def cookies_for(self, audience: str) -> Dict[str, str]:
        jar = self.session.get(COOKIES_KEY) or {}
        return dict(jar.get(audience) or {})

    def store_cookies(self, audience: str, cookies: Dict[str, str]) -> None:
        jar = dict(self.session.get(COOKIES_KEY) or {})
        merged = {**(jar.get(audience) or {}), **cookies}
        jar[audience] = merged
        self.session[COOKIES_KEY] = jar

    def profile(self, audience: str) -> Optional[Dict[str, Any]]:
        profile = self.session.get(PROFILE_KEYS[audience])
        return dict(profile) if isinstance(profile, dict) else None

    def set_profile(self, audience: str, profile: Dict[str, Any]) -> None:
        self.session[PROFILE_KEYS[audience]] = dict(profile)

    def is_authenticated(self, audience: str) -> bool:
        if audience == DELIVERY:
            return bool(self.delivery_token) and self.profile(DELIVERY) is not None
        return self.profile(audience) is not None

    @property
    def delivery_token(self) -> Optional[str]:
        return self.session.get(DELIVERY_TOKEN_KEY)

    def set_delivery_token(self, token: str) -> None:
        self.session[DELIVERY_TOKEN_KEY] = token

    def clear(self, audience: str) -> None:
        jar = dict(self.session.get(COOKIES_KEY) or {})
        jar.pop(audience, None)
        self.session[COOKIES_KEY] = jar
        self.session.pop(PROFILE_KEYS[audience], None)
        if audience == DELIVERY:
            self.session.pop(DELIVERY_TOKEN_KEY, None)


def normalize_profile(user: Dict[str, Any]) -> Dict[str, Any]:
    """Backend users carry ``_id``; the storefront also exposes it as ``id``."""
    profile = dict(user)
    if "id" not in profile and "_id" in profile:
        profile["id"] = profile["_id"]
    return profile
