"""Error definitions for dashkit."""


class DashkitError(Exception):
    """Base class for all dashkit errors."""


class InvalidArgumentError(DashkitError, TypeError):
    """Raised when a helper receives an argument of an unusable kind.

    Subclasses `TypeError` so callers that guard against the built-in error
    keep working.
    """

    def __init__(self, name: str, value: object, expected: str) -> None:
        super().__init__(
            f"Expected {name} to be {expected}, got {type(value).__name__}"
        )
        self.name = name
        self.value = value
        self.expected = expected


class UnknownCacheStoreError(DashkitError, ValueError):
    """Raised when configuration names a cache store kind that does not exist."""

    def __init__(self, kind: str, choices: tuple[str, ...]) -> None:
        super().__init__(
            f"Unknown cache store {kind!r} (expected one of: {', '.join(choices)})"
        )
        self.kind = kind
        self.choices = choices
