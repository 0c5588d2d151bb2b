"""Route matching for endpoint filters.

Patterns are either plain paths, matched exactly, or Ant-style patterns:

- ``?`` matches one character
- ``*`` matches zero or more characters within a path segment
- ``**`` matches zero or more path segments
"""

from __future__ import annotations

import re

_WILDCARDS = ("*", "?")


def compile_path_pattern(pattern: str) -> re.Pattern:
    regex = ""
    for index, segment in enumerate(pattern.split("/")):
        if segment == "**":
            # the leading slash belongs to the repeated group, so
            # "/a/**/b" also matches "/a/b"
            regex += "(?:/[^/]*)*" if index else "[^/]*(?:/[^/]*)*"
            continue
        if index:
            regex += "/"
        for char in segment:
            if char == "*":
                regex += "[^/]*"
            elif char == "?":
                regex += "[^/]"
            else:
                regex += re.escape(char)
    return re.compile(regex)


class RequestMatcher:
    """Match requests by HTTP method and path.

    :param pattern: exact path or Ant-style pattern
    :param method: HTTP method to match, None to match any method
    """

    def __init__(self, pattern: str, method: str | None = "POST"):
        if not pattern:
            raise ValueError("pattern cannot be empty")
        self.pattern = pattern
        self.method = method.upper() if method else None

        if any(w in pattern for w in _WILDCARDS):
            self._regex = compile_path_pattern(pattern)
        else:
            self._regex = None

    def matches(self, method: str, path: str) -> bool:
        if self.method and (method or "").upper() != self.method:
            return False
        if self._regex is None:
            return path == self.pattern
        return self._regex.fullmatch(path) is not None

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.method or '*'} {self.pattern}>"
