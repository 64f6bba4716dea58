"""configmap2props — flatten a Kubernetes ConfigMap into a property source."""

import argparse
import json
import logging
import os
import sys

import javaproperties
import yaml
from kubernetes.config.config_exception import ConfigException

from configmap2props.clients.kube import KubeConfigMapClient
from configmap2props.clients.manifests import ManifestConfigMapClient
from configmap2props.core.builder import PropertySourceBuilder
from configmap2props.core.constants import FALLBACK_NAMESPACE, SETTINGS_FILE
from configmap2props.core.env import (
    active_profiles_from_env, config_names_from_env, split_profiles,
)
from configmap2props.pacts.errors import PropertiesParseError
from configmap2props.pacts.types import NamedPropertyMap

OUTPUT_FORMATS = ("properties", "json", "yaml")


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def load_config(path: str) -> dict:
    """Load configmap2props.yaml or return empty config.

    Raises ValueError when the file does not hold a mapping.
    """
    if os.path.exists(path):
        with open(path, encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    else:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{path} must hold a mapping, not a {type(cfg).__name__}")
    cfg.setdefault("namespace", None)
    if cfg["namespace"] is not None:
        cfg["namespace"] = str(cfg["namespace"])
    cfg.setdefault("profiles", [])
    cfg.setdefault("configNames", [])
    for key in ("profiles", "configNames"):
        value = cfg[key]
        if value is None:
            value = []
        elif not isinstance(value, list):
            value = [value]
        cfg[key] = [str(v) for v in value if v is not None]
    return cfg


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def render(source: NamedPropertyMap, fmt: str) -> str:
    """Render the property source in the requested output format."""
    props = dict(source.properties)
    if fmt == "json":
        return json.dumps({"name": source.name, "properties": props}, indent=2) + "\n"
    if fmt == "yaml":
        return yaml.dump({"name": source.name, "properties": props},
                         default_flow_style=False, sort_keys=False)
    return javaproperties.dumps(props, comments=source.name, timestamp=False)


def write_output(text: str, path: str | None) -> None:
    if not path:
        sys.stdout.write(text)
        return
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    print(f"Wrote {path}", file=sys.stderr)


class _WarningFormatter(logging.Formatter):
    """Warnings and above get the ⚠ marker, everything else prints plain."""

    def format(self, record):
        msg = super().format(record)
        return f"⚠ {msg}" if record.levelno >= logging.WARNING else msg


def _setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_WarningFormatter("%(message)s"))
    root = logging.getLogger("configmap2props")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.propagate = False


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="configmap2props",
        description="Flatten a Kubernetes ConfigMap into a named property source",
    )
    parser.add_argument("name", help="ConfigMap name")
    parser.add_argument(
        "-n", "--namespace",
        help="Namespace to read from (default: the client's namespace)",
    )
    parser.add_argument(
        "-p", "--profile", action="append", default=[],
        help="Active profile; repeatable or comma-separated "
             "(default: $SPRING_PROFILES_ACTIVE)",
    )
    parser.add_argument(
        "--config-name", action="append", default=[],
        help="Extra basename treated like 'application' (repeatable)",
    )
    parser.add_argument(
        "--from-dir",
        help="Read ConfigMaps from rendered manifests (file or directory) instead of the cluster",
    )
    parser.add_argument(
        "--default-namespace", default=FALLBACK_NAMESPACE,
        help=f"Namespace for manifests that declare none, with --from-dir (default: {FALLBACK_NAMESPACE})",
    )
    parser.add_argument(
        "--context",
        help="kubeconfig context to use when reading from the cluster",
    )
    parser.add_argument(
        "--format", choices=OUTPUT_FORMATS, default="properties",
        help="Output format (default: properties)",
    )
    parser.add_argument("-o", "--output", help="Write to this file instead of stdout")
    parser.add_argument(
        "--config", default=SETTINGS_FILE,
        help=f"Settings file providing defaults (default: {SETTINGS_FILE})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = _build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    # Step 1: settings (flags > settings file > environment)
    try:
        config = load_config(args.config)
    except (ValueError, yaml.YAMLError) as exc:
        print(f"Error: invalid settings file: {exc}", file=sys.stderr)
        return 1
    namespace = args.namespace or config["namespace"]
    profiles = (split_profiles(args.profile)
                or split_profiles(config["profiles"])
                or active_profiles_from_env())
    config_names = config_names_from_env(extra=[*config["configNames"], *args.config_name])

    # Step 2: pick the fetch capability
    if args.from_dir:
        client = ManifestConfigMapClient(args.from_dir, namespace=args.default_namespace)
    else:
        try:
            client = KubeConfigMapClient.from_environment(context=args.context)
        except ConfigException as exc:
            print(f"Error: no Kubernetes configuration available: {exc}", file=sys.stderr)
            return 1

    # Step 3: build
    try:
        source = PropertySourceBuilder(config_names).build(
            client, args.name, namespace, profiles)
    except (PropertiesParseError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    print(f"Built {source.name} with {len(source)} properties", file=sys.stderr)

    # Step 4: write
    write_output(render(source, args.format), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
