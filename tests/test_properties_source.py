import pytest

from configmap2props.core.properties_source import properties_to_map
from configmap2props.pacts.errors import PropertiesParseError


def test_simple_pairs():
    assert properties_to_map("application.properties", "foo.bar=1\nfoo.baz=2") == {
        "foo.bar": "1", "foo.baz": "2",
    }


def test_grammar():
    text = (
        "# comment\n"
        "! also a comment\n"
        "colon: value\n"
        "spaced = padded\n"
        "multi = one \\\n"
        "        two\n"
        "unicode = caf\\u00e9\n"
    )
    assert properties_to_map("application.properties", text) == {
        "colon": "value",
        "spaced": "padded",
        "multi": "one two",
        "unicode": "café",
    }


def test_duplicate_keys_last_wins():
    assert properties_to_map("application.properties", "a=1\na=2") == {"a": "2"}


def test_bad_unicode_escape_raises():
    with pytest.raises(PropertiesParseError) as excinfo:
        properties_to_map("application.properties", "broken = \\u12zz")
    assert excinfo.value.key == "application.properties"
    assert "not a valid properties payload" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)
