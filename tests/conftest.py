import pytest

from configmap2props.pacts.types import FetchFailed, Found, NotFound


class FakeClient:
    """In-memory ConfigMap client; records every lookup."""

    def __init__(self, configmaps=None, namespace="dev", error=None):
        self.configmaps = configmaps or {}
        self.namespace = namespace
        self.error = error
        self.calls = []

    def get(self, name, namespace=None):
        self.calls.append((name, namespace))
        ns = namespace or self.namespace
        if self.error is not None:
            return FetchFailed(name, ns, self.error)
        if (ns, name) not in self.configmaps:
            return NotFound(name, ns)
        return Found(self.configmaps[(ns, name)])


@pytest.fixture
def make_client():
    def _make(data=None, name="app-config", namespace="dev", **kwargs):
        configmaps = {(namespace, name): data} if data is not None else {}
        return FakeClient(configmaps, namespace=namespace, **kwargs)
    return _make


@pytest.fixture(autouse=True)
def reset_package_logger():
    """The CLI installs its own handler; put the package logger back afterwards."""
    import logging
    logger = logging.getLogger("configmap2props")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
