import pytest

from rclonecfg.errors import ParseError
from rclonecfg.ini_format import format_value, parse_ini, serialize_remotes


def test_single_remote():
    text = serialize_remotes({"mydrive": {"type": "drive", "token": "abc123"}})
    assert text == "[mydrive]\n  type = drive\n  token = abc123\n\n"


def test_no_remotes():
    assert serialize_remotes({}) == ""


def test_remote_without_options():
    assert serialize_remotes({"empty": {}}) == "[empty]\n\n"


def test_sections_follow_mapping_order():
    text = serialize_remotes({"b": {"type": "s3"}, "a": {"type": "drive"}})
    assert text.index("[b]") < text.index("[a]")


def test_serialize_is_deterministic():
    remotes = {"x": {"type": "sftp", "port": 22}, "y": {}}
    assert serialize_remotes(remotes) == serialize_remotes(remotes)


@pytest.mark.parametrize("value,expected", [
    ("drive", "drive"),
    (True, "true"),
    (False, "false"),
    (None, ""),
    (22, "22"),
    (1.5, "1.5"),
])
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_parse_inverts_serialize():
    remotes = {
        "mydrive": {"type": "drive", "token": '{"access_token":"a=b"}'},
        "box": {},
        "nas": {"type": "sftp", "port": 22, "use_insecure_cipher": False},
    }

    parsed = parse_ini(serialize_remotes(remotes))

    assert parsed == {
        "mydrive": {"type": "drive", "token": '{"access_token":"a=b"}'},
        "box": {},
        "nas": {"type": "sftp", "port": "22", "use_insecure_cipher": "false"},
    }
    assert list(parsed) == ["mydrive", "box", "nas"]


def test_parse_handwritten_config():
    text = (
        "# written by rclone config\n"
        "[remote]\n"
        "type = s3\n"
        "; region left blank\n"
        "region =\n"
        "\n"
        "[other]\n"
        "    type=local\n"
    )
    assert parse_ini(text) == {
        "remote": {"type": "s3", "region": ""},
        "other": {"type": "local"},
    }


def test_parse_crlf():
    assert parse_ini("[r]\r\n  type = drive\r\n\r\n") == {"r": {"type": "drive"}}


@pytest.mark.parametrize("text", [
    "type = drive\n",
    "[r]\njust words\n",
    "[r]\n = value\n",
    "[r]\n[r]\n",
])
def test_parse_rejects_malformed(text):
    with pytest.raises(ParseError):
        parse_ini(text)


@pytest.mark.parametrize("remotes", [
    {"r": {"note#": "x", "type": "drive"}},
    {"r": {"pass": " secret "}},
    {"r": {"token": "a = b = c"}},
    {"r": {"key": "=leading"}},
    {"r": {"blank": ""}},
    {"r": {"spaces": "   "}},
    {"r": {"hash": "# not a comment"}},
    {"r": {"bracket": "[looks like a header]"}},
    {" padded ": {"type": "local"}},
    {"": {"type": "local"}},
    {"r": {"k": "tab\tinside", "u": "café   sep"}},
])
def test_round_trip_edges(remotes):
    assert parse_ini(serialize_remotes(remotes)) == remotes


def test_parse_keeps_value_whitespace():
    assert parse_ini("[r]\n  pass =  two leading\n") == {"r": {"pass": " two leading"}}
