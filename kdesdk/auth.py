from dataclasses import dataclass
from typing import Optional

from .errors import AuthError
from .utils import parse_url_params


@dataclass
class AuthState:
    is_authenticated: bool
    auth_cookie: Optional[str]


def is_authenticated(cookie_string: str) -> bool:
    """Whether the host's cookie string carries an ``auth`` marker."""
    return "auth" in (cookie_string or "")


class KDEAuth:
    def __init__(self, url: str):
        cookie = parse_url_params(url).get("cookie")
        if not cookie:
            raise AuthError("Authentication cookie is missing.")
        self._auth_cookie = cookie

    def get_auth_cookie(self) -> str:
        return self._auth_cookie

    def state(self, cookie_string: str) -> AuthState:
        return AuthState(is_authenticated=is_authenticated(cookie_string), auth_cookie=self._auth_cookie)
