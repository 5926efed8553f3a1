"""
alp.errors
----------
Two tiers of failure:

* ``RequestError`` - the caller sent missing / malformed inputs; detected
  before the pricer runs (HTTP 400).
* ``InvalidArgument`` - raised by the pricer itself, e.g. an unknown
  option type (HTTP 500, message passed through).
"""


class PricingError(Exception):
    """Base class for every error raised by this package."""


class RequestError(PricingError):
    """Caller-side validation failure."""


class MissingParameter(RequestError):
    def __init__(self, names):
        self.names = list(names)
        super().__init__(
            "Missing required query parameters: " + ", ".join(self.names)
        )


class MalformedParameter(RequestError):
    def __init__(self, name: str, value, reason: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid value for {name}: {value!r} ({reason})")


class InvalidArgument(PricingError, ValueError):
    """Pricer-domain error (unknown option type, inconsistent lattice)."""
