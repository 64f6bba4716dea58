"""YAML entries: multi-document load, profile matching, and flattening."""

import re
from collections.abc import Sequence

import yaml

from configmap2props.core.constants import (
    DEFAULT_PROFILE, NON_MAPPING_DOCUMENT_KEY, PROFILES_KEY,
)
from configmap2props.pacts.helpers import stringify

# spring.profiles given as a YAML list flattens to spring.profiles[0], [1], ...
_PROFILES_ITEM_RE = re.compile(re.escape(PROFILES_KEY) + r'\[\d+\]')


def _as_mapping(document) -> dict:
    """Normalize a loaded document: non-string keys become ``[key]``."""
    if not isinstance(document, dict):
        return {NON_MAPPING_DOCUMENT_KEY: document}
    result = {}
    for key, value in document.items():
        if isinstance(value, dict):
            value = _as_mapping(value)
        if isinstance(key, str):
            result[key] = value
        else:
            result[f"[{stringify(key)}]"] = value
    return result


def _flatten(result: dict[str, str], source: dict, path: str = "") -> None:
    """Write dotted ``a.b.c`` / indexed ``a[0]`` keys of *source* into *result*."""
    for key, value in source.items():
        if path:
            key = path + key if key.startswith("[") else f"{path}.{key}"
        if isinstance(value, dict):
            _flatten(result, _as_mapping(value), key)
        elif isinstance(value, list):
            if not value:
                result[key] = ""
            for i, item in enumerate(value):
                _flatten(result, {f"[{i}]": item}, key)
        else:
            result[key] = stringify(value)


def flatten_document(document) -> dict[str, str]:
    """Flatten one loaded YAML document into string keys and values."""
    result: dict[str, str] = {}
    _flatten(result, _as_mapping(document))
    return result


def document_profiles(flat: dict[str, str]) -> list[str]:
    """Profile expressions a flattened document is gated on (may be empty)."""
    raw = []
    if PROFILES_KEY in flat:
        raw.append(flat[PROFILES_KEY])
    raw.extend(v for k, v in flat.items() if _PROFILES_ITEM_RE.fullmatch(k))
    return [p.strip() for value in raw for p in value.split(",") if p.strip()]


def profiles_match(expressions: Sequence[str], active: Sequence[str] | None) -> bool:
    """Decide whether a document gated on *expressions* applies.

    ``!name`` entries are negations. Without active profiles only the
    ``default`` profile counts as active.
    """
    if not expressions:
        return True
    active_set = set(active) if active else {DEFAULT_PROFILE}
    positive = {e for e in expressions if not e.startswith("!")}
    negative = {e[1:].strip() for e in expressions if e.startswith("!")}
    if negative & active_set:
        return False
    if not positive:
        return True
    return bool(positive & active_set)


def yaml_to_properties(text: str, profiles: Sequence[str] | None = None) -> dict[str, str]:
    """Parse every document in *text*, keep the matching ones, merge them flat.

    Later documents override earlier ones. ``yaml.YAMLError`` propagates.
    """
    result: dict[str, str] = {}
    for document in yaml.safe_load_all(text):
        if document is None:
            continue
        flat = flatten_document(document)
        if profiles_match(document_profiles(flat), profiles):
            result.update(flat)
    return result
