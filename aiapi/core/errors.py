"""
Exception types raised by the request-construction layer.

Only unaddressable requests are hard failures. A payload that cannot be encoded
is handled softly by the builders and never surfaces here.
"""


class AiApiError(Exception):
    """Base class for all errors raised by this package."""


class MalformedURLError(AiApiError, ValueError):
    """A string intended to be a URL could not be parsed as one."""

    def __init__(self, text: str, reason: str = "could not convert this string to a url"):
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}: {text!r}")
