from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..rfc6749.errors import InvalidRequestError
from .errors import get_error_uri
from .models import TokenRevocationRequest

TOKEN = "token"
TOKEN_TYPE_HINT = "token_type_hint"


def get_parameter_values(params, name: str) -> list[str]:
    """Return every value of ``name`` in a multi-valued mapping.

    Framework containers (werkzeug ``MultiDict``, Django ``QueryDict``,
    Starlette ``FormData``) are read through ``getlist``. Plain dicts may
    hold a single string or a list of strings, as ``parse_qs`` returns.
    """
    if hasattr(params, "getlist"):
        return list(params.getlist(name))

    value = params.get(name)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def parse_revocation_request(
    params,
    principal: Any = None,
    error_uris: Mapping[str, str] | None = None,
) -> TokenRevocationRequest:
    """Build a revocation request from the form parameters, per
    `Section 2.1`_. The client constructs the request by including the
    following parameters using the "application/x-www-form-urlencoded"
    format in the HTTP request entity-body:

    token
        REQUIRED.  The token that the client wants to get revoked.

    token_type_hint
        OPTIONAL.  A hint about the type of the token submitted for
        revocation.

    The hint is passed on as given; interpreting it is left to the
    authenticator. ``principal`` is whatever the caller has already
    authenticated for this request and is carried over unchecked.

    :param params: multi-valued form parameters
    :param principal: current principal, or None
    :param error_uris: overrides for the error reference pages
    :raise: InvalidRequestError

    .. _`Section 2.1`: https://tools.ietf.org/html/rfc7009#section-2.1
    """
    tokens = get_parameter_values(params, TOKEN)
    if len(tokens) != 1 or not _has_text(tokens[0]):
        raise _invalid_parameter(TOKEN, error_uris)

    hints = get_parameter_values(params, TOKEN_TYPE_HINT)
    token_type_hint = hints[0] if hints else None
    # uploaded files are not parameter values
    if token_type_hint is not None and not isinstance(token_type_hint, str):
        raise _invalid_parameter(TOKEN_TYPE_HINT, error_uris)

    return TokenRevocationRequest(
        token=tokens[0],
        token_type_hint=token_type_hint,
        principal=principal,
    )


def _invalid_parameter(name, error_uris):
    error = InvalidRequestError.error
    return InvalidRequestError(
        description=f"Token Revocation Request Parameter: {name}",
        uri=get_error_uri(error, error_uris),
    )


def _has_text(value):
    return isinstance(value, str) and bool(value.strip())
