"""Public data types: what clients hand in and what the builder hands back."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol, Union

from configmap2props.core.constants import DEFAULT_CONFIG_NAME


@dataclass(frozen=True)
class ConfigNames:
    """Basenames whose ``.yml``/``.yaml``/``.properties`` entries get parsed.

    Built once at startup (see ``core.env.config_names_from_env``) and handed
    to the builder. Never mutated afterwards.
    """
    names: frozenset[str] = frozenset({DEFAULT_CONFIG_NAME})

    def __post_init__(self):
        # "application" is always recognized, whatever the caller passed
        object.__setattr__(self, "names", frozenset(self.names) | {DEFAULT_CONFIG_NAME})

    def __contains__(self, basename: object) -> bool:
        return basename in self.names


# ---------------------------------------------------------------------------
# Fetch results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Found:
    """The ConfigMap exists; ``data`` is its key → string blob mapping."""
    data: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class NotFound:
    """The ConfigMap does not exist in the namespace."""
    name: str
    namespace: str | None = None


@dataclass(frozen=True)
class FetchFailed:
    """The API, transport or source read failed."""
    name: str
    namespace: str | None
    cause: BaseException


FetchResult = Union[Found, NotFound, FetchFailed]


class ConfigMapClient(Protocol):
    """Fetch capability consumed by the builder.

    ``namespace`` is the client's default namespace, used whenever the
    caller leaves the namespace empty. ``get`` never raises: every failure
    is reported as a ``NotFound`` or ``FetchFailed`` value.
    """
    namespace: str

    def get(self, name: str, namespace: str | None = None) -> FetchResult:
        ...


# ---------------------------------------------------------------------------
# Entry classification
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Literal:
    """Opaque entry: becomes exactly one property, ``key = value``."""
    key: str
    value: str


@dataclass(frozen=True)
class YamlDocument:
    """Entry holding one or more YAML documents, profile-filtered and flattened."""
    key: str
    value: str


@dataclass(frozen=True)
class PropertiesDocument:
    """Entry holding ``.properties`` text; keys are used as they are."""
    key: str
    value: str


Classification = Union[Literal, YamlDocument, PropertiesDocument]


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NamedPropertyMap:
    """A named, read-only, ordered string → string property source."""
    name: str
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.properties.get(key, default)

    def property_names(self) -> list[str]:
        return list(self.properties)

    def __contains__(self, key: object) -> bool:
        return key in self.properties

    def __len__(self) -> int:
        return len(self.properties)

    def __iter__(self) -> Iterator[str]:
        return iter(self.properties)
