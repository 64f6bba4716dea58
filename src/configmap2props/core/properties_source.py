"""Properties entries: ``java.util.Properties`` text to a flat mapping."""

import javaproperties

from configmap2props.pacts.errors import PropertiesParseError


def properties_to_map(key: str, text: str) -> dict[str, str]:
    """Parse *text* (the value of entry *key*); keys are kept as written.

    Raises PropertiesParseError when the payload is malformed, e.g. a bad
    ``\\uXXXX`` escape.
    """
    try:
        return dict(javaproperties.loads(text))
    except ValueError as exc:
        raise PropertiesParseError(key, exc) from exc
