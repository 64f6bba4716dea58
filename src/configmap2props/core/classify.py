"""Entry classification: literal value, YAML file, or properties file."""

from configmap2props.core.constants import PROPERTIES_EXTENSION, YAML_EXTENSIONS
from configmap2props.pacts.helpers import get_filename_extension, strip_filename_extension
from configmap2props.pacts.types import (
    Classification, ConfigNames, Literal, PropertiesDocument, YamlDocument,
)


def classify(key: str, value: str, config_names: ConfigNames) -> Classification:
    """Decide how a single ConfigMap entry turns into properties.

    Only entries whose basename is a recognized config name are parsed, and
    only when the extension is a YAML or properties one. Everything else,
    including ``application`` with no or an unknown extension, is a literal.
    """
    if strip_filename_extension(key) not in config_names:
        return Literal(key, value)
    extension = get_filename_extension(key)
    if extension in YAML_EXTENSIONS:
        return YamlDocument(key, value)
    if extension == PROPERTIES_EXTENSION:
        return PropertiesDocument(key, value)
    return Literal(key, value)
