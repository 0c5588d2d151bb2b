"""Reference pages for the error codes a revocation endpoint answers
with. The ``error_uri`` of every locally raised error is looked up here,
so the mapping from code to RFC section stays in one place.
"""

from __future__ import annotations

from collections.abc import Mapping

ERROR_URIS = {
    "invalid_request": "https://tools.ietf.org/html/rfc7009#section-2.1",
    "unsupported_token_type": "https://tools.ietf.org/html/rfc7009#section-2.2.1",
    "invalid_client": "https://tools.ietf.org/html/rfc6749#section-5.2",
    "invalid_grant": "https://tools.ietf.org/html/rfc6749#section-5.2",
    "server_error": "https://tools.ietf.org/html/rfc6749#section-4.1.2.1",
}


def get_error_uri(error: str, overrides: Mapping[str, str] | None = None):
    """Resolve the reference page for an error code. Entries in
    ``overrides`` take precedence over :data:`ERROR_URIS`.
    """
    if overrides and error in overrides:
        return overrides[error]
    return ERROR_URIS.get(error)
