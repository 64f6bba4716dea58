"""Build a named property source from one ConfigMap."""

import logging
from collections.abc import Mapping, Sequence

from configmap2props.core.classify import classify
from configmap2props.core.constants import SOURCE_NAME_PREFIX, SOURCE_NAME_SEPARATOR
from configmap2props.core.properties_source import properties_to_map
from configmap2props.core.yaml_source import yaml_to_properties
from configmap2props.pacts.types import (
    Classification, ConfigMapClient, ConfigNames, FetchFailed, Found,
    Literal, NamedPropertyMap, NotFound, PropertiesDocument, YamlDocument,
)

logger = logging.getLogger(__name__)


def source_name(client: ConfigMapClient, name: str, namespace: str | None = None) -> str:
    """Return ``configmap:<name>:<namespace>``, using the client's default namespace if empty."""
    return SOURCE_NAME_SEPARATOR.join(
        (SOURCE_NAME_PREFIX, name, namespace or client.namespace))


def extract(entry: Classification, profiles: Sequence[str] | None = None) -> dict[str, str]:
    """Turn one classified entry into its flat properties."""
    if isinstance(entry, YamlDocument):
        return yaml_to_properties(entry.value, profiles)
    if isinstance(entry, PropertiesDocument):
        return properties_to_map(entry.key, entry.value)
    if isinstance(entry, Literal):
        return {entry.key: entry.value}
    raise TypeError(f"unknown entry classification: {entry!r}")


class PropertySourceBuilder:
    """Turn a ConfigMap's data into a ``NamedPropertyMap``.

    A missing or unreadable ConfigMap yields an empty map and a warning.
    Malformed properties entries raise PropertiesParseError; YAML errors
    propagate from PyYAML as they are.
    """

    def __init__(self, config_names: ConfigNames | None = None):
        self.config_names = config_names or ConfigNames()

    def build(self, client: ConfigMapClient, name: str, namespace: str | None = None,
              profiles: Sequence[str] | None = None) -> NamedPropertyMap:
        source = source_name(client, name, namespace)
        result = client.get(name, namespace or None)
        if isinstance(result, NotFound):
            logger.warning(f"Can't read configMap with name: [{name}] in namespace: "
                           f"[{namespace or client.namespace}] (not found). Ignoring")
            return NamedPropertyMap(source, {})
        if isinstance(result, FetchFailed):
            logger.warning(f"Can't read configMap with name: [{name}] in namespace: "
                           f"[{namespace or client.namespace}] "
                           f"({result.cause.__class__.__name__}: {result.cause}). Ignoring")
            return NamedPropertyMap(source, {})
        if not isinstance(result, Found):
            raise TypeError(f"unexpected fetch result: {result!r}")
        return NamedPropertyMap(source, self.merge(result.data, profiles))

    def merge(self, data: Mapping[str, str],
              profiles: Sequence[str] | None = None) -> dict[str, str]:
        """Extract every entry in iteration order; later entries win on key collisions."""
        if isinstance(profiles, str):
            profiles = [profiles]
        properties: dict[str, str] = {}
        for key, value in data.items():
            extracted = extract(classify(key, value, self.config_names), profiles)
            logger.debug(f"{key} => {extracted}")
            properties.update(extracted)
        return properties


def build_property_source(client: ConfigMapClient, name: str, namespace: str | None = None,
                          profiles: Sequence[str] | None = None,
                          config_names: ConfigNames | None = None) -> NamedPropertyMap:
    """One-shot form of ``PropertySourceBuilder(config_names).build(...)``."""
    return PropertySourceBuilder(config_names).build(client, name, namespace, profiles)
