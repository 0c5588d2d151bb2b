"""oauthrevoke.
~~~~~~~~~~~

OAuth 2.0 Token Revocation (RFC7009) endpoint filtering for Python web
frameworks.
"""

from .consts import homepage
from .consts import version

__version__ = version
__homepage__ = homepage
