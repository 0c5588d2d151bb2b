from __future__ import annotations

from typing import Any


class OAuth2Request:
    """Framework neutral view of an incoming request.

    Integrations subclass it to read the form parameters and the
    current principal from their own request objects, and to clear
    that principal the way their framework stores it.

    :param method: HTTP method, e.g. ``POST``
    :param path: request path, without query string
    :param form: multi-valued form parameters
    :param principal: identity already established for this request
    """

    def __init__(self, method: str, path: str, form=None, principal: Any = None):
        self.method = method
        self.path = path
        self.form = form if form is not None else {}
        self.principal = principal

    def clear_principal(self):
        """Drop the principal attached to this request. Integrations
        extend this to reset their framework's security context.
        """
        self.principal = None

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.method} {self.path}>"
