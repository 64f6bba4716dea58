"""Errors surfaced to callers of the builder."""


class PropertiesParseError(ValueError):
    """A ``.properties`` entry could not be parsed."""

    def __init__(self, key: str, cause: Exception):
        self.key = key
        self.cause = cause
        super().__init__(f"ConfigMap entry '{key}' is not a valid properties payload: {cause}")
