"""Public contracts: what a ConfigMap client must provide and what the builder returns."""

from configmap2props.pacts.types import (
    ConfigMapClient, ConfigNames, FetchFailed, FetchResult, Found, Literal,
    NamedPropertyMap, NotFound, PropertiesDocument, YamlDocument,
)
from configmap2props.pacts.errors import PropertiesParseError
from configmap2props.pacts.helpers import (
    get_filename_extension, strip_filename_extension, stringify,
)

__all__ = [
    "ConfigMapClient",
    "ConfigNames",
    "FetchFailed",
    "FetchResult",
    "Found",
    "Literal",
    "NamedPropertyMap",
    "NotFound",
    "PropertiesDocument",
    "YamlDocument",
    "PropertiesParseError",
    "get_filename_extension",
    "strip_filename_extension",
    "stringify",
]
