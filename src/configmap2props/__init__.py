"""configmap2props — flatten a Kubernetes ConfigMap into a named property source.

Re-exports the public API. Callers can import directly from here or from
configmap2props.pacts.
"""

from configmap2props.pacts.types import (
    ConfigMapClient, ConfigNames, FetchFailed, Found, Literal,
    NamedPropertyMap, NotFound, PropertiesDocument, YamlDocument,
)
from configmap2props.pacts.errors import PropertiesParseError
from configmap2props.core.builder import (
    PropertySourceBuilder, build_property_source, source_name,
)
from configmap2props.core.classify import classify
from configmap2props.core.env import config_names_from_env

__all__ = [
    "ConfigMapClient",
    "ConfigNames",
    "FetchFailed",
    "Found",
    "Literal",
    "NamedPropertyMap",
    "NotFound",
    "PropertiesDocument",
    "YamlDocument",
    "PropertiesParseError",
    "PropertySourceBuilder",
    "build_property_source",
    "source_name",
    "classify",
    "config_names_from_env",
]
