from __future__ import annotations

from urllib.parse import urlsplit

from ..core.constants import LOCAL_HOSTNAMES, RESET_PASSWORD_PATH


def is_local_origin(origin: str) -> bool:
    return (urlsplit(origin).hostname or "") in LOCAL_HOSTNAMES


def resolve_redirect_url(origin: str, deployed_url: str) -> str:
    """Where the reset e-mail link should send the user.

    Local development keeps the user on the origin they came from; any other
    origin goes to the deployed reset page.
    """
    if is_local_origin(origin):
        return f"{origin.rstrip('/')}{RESET_PASSWORD_PATH}"
    return deployed_url
