"""ConfigMap client backed by the Kubernetes API."""

import logging
import os

import urllib3
from kubernetes import client as k8s_client
from kubernetes import config as k8s_config
from kubernetes.client.exceptions import ApiException
from kubernetes.config.config_exception import ConfigException

from configmap2props.core.constants import FALLBACK_NAMESPACE, SERVICE_ACCOUNT_NAMESPACE_PATH
from configmap2props.pacts.types import FetchFailed, FetchResult, Found, NotFound

logger = logging.getLogger(__name__)


def _service_account_namespace() -> str | None:
    """Namespace of the pod's service account, when running in-cluster."""
    try:
        with open(SERVICE_ACCOUNT_NAMESPACE_PATH, encoding="utf-8") as f:
            return f.read().strip() or None
    except OSError:
        return None


def _kubeconfig_namespace(context: str | None = None) -> str | None:
    """Namespace set on the active (or named) kubeconfig context."""
    try:
        contexts, active = k8s_config.list_kube_config_contexts()
    except (ConfigException, OSError):
        return None
    if context:
        active = next((c for c in contexts or [] if c.get("name") == context), None)
    return ((active or {}).get("context") or {}).get("namespace") or None


def default_namespace(context: str | None = None) -> str:
    """Service account namespace, then kubeconfig context namespace, then ``default``."""
    return (_service_account_namespace()
            or _kubeconfig_namespace(context)
            or FALLBACK_NAMESPACE)


def load_api(context: str | None = None) -> k8s_client.CoreV1Api:
    """Load in-cluster config, falling back to ~/.kube/config (or $KUBECONFIG)."""
    try:
        k8s_config.load_incluster_config()
        logger.debug("Using in-cluster Kubernetes configuration")
    except ConfigException:
        k8s_config.load_kube_config(context=context)
        logger.debug(f"Using kubeconfig {os.environ.get('KUBECONFIG', '~/.kube/config')}")
    return k8s_client.CoreV1Api()


class KubeConfigMapClient:
    """Read ConfigMaps through ``CoreV1Api.read_namespaced_config_map``.

    Every failure is reported as a result value: 404 is NotFound, any other
    API, HTTP or socket error is FetchFailed.
    """

    def __init__(self, api: k8s_client.CoreV1Api, namespace: str = FALLBACK_NAMESPACE):
        self.api = api
        self.namespace = namespace

    @classmethod
    def from_environment(cls, namespace: str | None = None,
                         context: str | None = None) -> "KubeConfigMapClient":
        api = load_api(context)
        return cls(api, namespace or default_namespace(context))

    def get(self, name: str, namespace: str | None = None) -> FetchResult:
        ns = namespace or self.namespace
        try:
            configmap = self.api.read_namespaced_config_map(name, ns)
        except ApiException as exc:
            if exc.status == 404:
                return NotFound(name, ns)
            return FetchFailed(name, ns, exc)
        except (urllib3.exceptions.HTTPError, OSError) as exc:
            return FetchFailed(name, ns, exc)
        return Found(dict(configmap.data or {}))
