"""ConfigMap client backed by rendered manifest files (helm/helmfile/kustomize output)."""

import logging
from pathlib import Path

import yaml

from configmap2props.core.constants import FALLBACK_NAMESPACE
from configmap2props.pacts.types import FetchFailed, FetchResult, Found, NotFound

logger = logging.getLogger(__name__)


def _manifest_files(source: Path) -> list[Path]:
    if not source.exists():
        raise FileNotFoundError(f"Manifest source not found: {source}")
    if source.is_file():
        return [source]
    return sorted(p for p in source.rglob("*") if p.suffix in (".yaml", ".yml"))


def parse_configmaps(source: str | Path,
                     default_namespace: str = FALLBACK_NAMESPACE) -> dict[tuple[str, str], dict]:
    """Load every ConfigMap manifest under *source*, keyed by (namespace, name).

    *source* is a single YAML file or a directory searched recursively.
    Files that fail to decode or parse, and ConfigMaps whose metadata is not
    a mapping, are skipped with a warning; manifests without
    ``metadata.namespace`` land in *default_namespace*.
    """
    configmaps: dict[tuple[str, str], dict] = {}
    for yaml_file in _manifest_files(Path(source)):
        try:
            with open(yaml_file, encoding="utf-8") as f:
                docs = list(yaml.safe_load_all(f))
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            logger.warning(f"Skipping {yaml_file.name}: {exc.__class__.__name__}")
            continue
        for doc in docs:
            if not doc or not isinstance(doc, dict) or doc.get("kind") != "ConfigMap":
                continue
            meta = doc.get("metadata") or {}
            if not isinstance(meta, dict):
                logger.warning(f"Skipping ConfigMap in {yaml_file.name}: metadata is not a mapping")
                continue
            name = meta.get("name", "")
            if name:
                ns = meta.get("namespace") or default_namespace
                configmaps[(ns, name)] = doc
    return configmaps


class ManifestConfigMapClient:
    """Serve ConfigMaps from YAML manifests on disk instead of a cluster.

    Manifests are re-read on every ``get`` so that a lookup reflects the
    files as they are at that moment.
    """

    def __init__(self, source: str | Path, namespace: str = FALLBACK_NAMESPACE):
        self.source = Path(source)
        self.namespace = namespace

    def get(self, name: str, namespace: str | None = None) -> FetchResult:
        ns = namespace or self.namespace
        try:
            configmaps = parse_configmaps(self.source, self.namespace)
        except OSError as exc:
            return FetchFailed(name, ns, exc)
        manifest = configmaps.get((ns, name))
        if manifest is None:
            return NotFound(name, ns)
        data = manifest.get("data") or {}
        if not isinstance(data, dict):
            return FetchFailed(name, ns, TypeError(
                f"ConfigMap {ns}/{name}: data is a {type(data).__name__}, not a mapping"))
        return Found({str(k): "" if v is None else str(v) for k, v in data.items()})
