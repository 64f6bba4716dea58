import logging

import pytest
import yaml

from configmap2props.core.builder import (
    PropertySourceBuilder, build_property_source, extract, source_name,
)
from configmap2props.pacts.errors import PropertiesParseError
from configmap2props.pacts.types import ConfigNames, Literal, NamedPropertyMap

PROFILED_YAML = """\
server:
  port: 8080
---
spring.profiles: prod
server:
  port: 443
"""


def test_literal_entries_pass_through(make_client):
    data = {"log.level": "DEBUG", "motd": "hello\nworld", "application-override.yml": "a: 1"}
    source = build_property_source(make_client(data), "app-config")
    assert dict(source.properties) == data


def test_properties_entry(make_client):
    source = build_property_source(
        make_client({"application.properties": "foo.bar=1\nfoo.baz=2"}), "app-config")
    assert dict(source.properties) == {"foo.bar": "1", "foo.baz": "2"}


def test_properties_and_unrecognized_yaml(make_client):
    raw = "greeting:\n  message: hi\n"
    data = {"application.properties": "x=1", "application-override.yml": raw}
    source = build_property_source(make_client(data), "app-config")
    assert dict(source.properties) == {"x": "1", "application-override.yml": raw}


def test_yaml_profiles(make_client):
    client = make_client({"application.yml": PROFILED_YAML})
    prod = build_property_source(client, "app-config", profiles=["prod"])
    assert prod.get("server.port") == "443"
    plain = build_property_source(client, "app-config", profiles=[])
    assert dict(plain.properties) == {"server.port": "8080"}


def test_custom_config_name(make_client):
    client = make_client({"orders.yaml": "queue:\n  size: 10\n"})
    assert dict(build_property_source(client, "app-config").properties) == {
        "orders.yaml": "queue:\n  size: 10\n",
    }
    builder = PropertySourceBuilder(ConfigNames(frozenset({"orders"})))
    assert dict(builder.build(client, "app-config").properties) == {"queue.size": "10"}


def test_later_entries_win(make_client):
    data = {
        "application.yml": "a: from-yaml\nb: yaml-only\n",
        "application.properties": "a=from-properties",
        "a": "literal",
    }
    source = build_property_source(make_client(data), "app-config")
    assert dict(source.properties) == {"a": "literal", "b": "yaml-only"}


def test_not_found_yields_empty_map(make_client, caplog):
    client = make_client({"a": "b"}, name="other")
    with caplog.at_level(logging.WARNING, logger="configmap2props"):
        source = build_property_source(client, "missing-map")
    assert len(source) == 0
    assert source.name == "configmap:missing-map:dev"
    assert "Can't read configMap with name: [missing-map]" in caplog.text


def test_fetch_failure_yields_empty_map(make_client, caplog):
    client = make_client({"a": "b"}, error=ConnectionRefusedError("refused"))
    with caplog.at_level(logging.WARNING, logger="configmap2props"):
        source = build_property_source(client, "app-config", "prod-ns")
    assert len(source) == 0
    assert source.name == "configmap:app-config:prod-ns"
    assert "ConnectionRefusedError" in caplog.text


def test_source_name_uses_client_default_namespace(make_client):
    client = make_client({"a": "b"})
    assert build_property_source(client, "app-config", "", None).name == "configmap:app-config:dev"
    assert source_name(client, "app-config", None) == "configmap:app-config:dev"
    assert source_name(client, "app-config", "other") == "configmap:app-config:other"


def test_empty_namespace_passed_as_none(make_client):
    client = make_client({"a": "b"})
    build_property_source(client, "app-config", "")
    assert client.calls == [("app-config", None)]


def test_idempotent(make_client):
    client = make_client({
        "application.yml": PROFILED_YAML,
        "application.properties": "p=1",
        "literal": "v",
    })
    builder = PropertySourceBuilder()
    first = builder.build(client, "app-config", profiles=["prod"])
    second = builder.build(client, "app-config", profiles=["prod"])
    assert first == second
    assert list(first.properties.items()) == list(second.properties.items())


def test_malformed_properties_raise(make_client):
    client = make_client({"application.properties": "bad=\\uZZZZ"})
    with pytest.raises(PropertiesParseError):
        build_property_source(client, "app-config")


def test_malformed_yaml_propagates(make_client):
    client = make_client({"application.yml": "a: b: c"})
    with pytest.raises(yaml.YAMLError):
        build_property_source(client, "app-config")


def test_result_is_read_only(make_client):
    source = build_property_source(make_client({"a": "b"}), "app-config")
    assert isinstance(source, NamedPropertyMap)
    with pytest.raises(TypeError):
        source.properties["a"] = "c"
    assert "a" in source
    assert source.property_names() == ["a"]
    assert list(source) == ["a"]


def test_extract_literal():
    assert extract(Literal("k", "v")) == {"k": "v"}


def test_extract_rejects_unknown_variant():
    with pytest.raises(TypeError):
        extract(object())


def test_single_profile_string(make_client):
    source = build_property_source(
        make_client({"application.yml": PROFILED_YAML}), "app-config", profiles="prod")
    assert source.get("server.port") == "443"
