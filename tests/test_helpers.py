from configmap2props.pacts.helpers import (
    get_filename_extension, strip_filename_extension, stringify,
)


def test_strip_extension():
    assert strip_filename_extension("application.yml") == "application"
    assert strip_filename_extension("application.dev.yml") == "application.dev"
    assert strip_filename_extension("application") == "application"


def test_dot_in_directory_is_not_an_extension():
    assert strip_filename_extension("conf.d/application") == "conf.d/application"
    assert get_filename_extension("conf.d/application") is None


def test_get_extension():
    assert get_filename_extension("application.yaml") == "yaml"
    assert get_filename_extension("application.") == ""
    assert get_filename_extension("application") is None


def test_stringify():
    assert stringify(None) == ""
    assert stringify(True) == "true"
    assert stringify(False) == "false"
    assert stringify(8080) == "8080"
    assert stringify(1.5) == "1.5"
    assert stringify("x") == "x"
