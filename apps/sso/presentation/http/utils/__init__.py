"""HTTP utilities."""

from apps.sso.presentation.http.utils.client_ip import (
    get_remote_ip_address,
    normalize_ip_address,
)
from apps.sso.presentation.http.utils.redirect import (
    SsoFailRedirect,
    build_sso_fail_url,
    to_http_response,
)

__all__ = [
    "SsoFailRedirect",
    "get_remote_ip_address",
    "normalize_ip_address",
    "build_sso_fail_url",
    "to_http_response",
]
