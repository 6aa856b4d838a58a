"""Tests for response decoding."""

import json
import xml.etree.ElementTree as ET

import phpserialize
import pytest

from mapmyfitness.decoder import decode
from mapmyfitness.exceptions import ConfigurationError, MalformedResponse
from mapmyfitness.models import ResponseFormat


def test_json_roundtrip():
    value = {"result": {"output": {"user": {"user_id": 42, "tags": ["run", "bike"]}}}}
    assert decode(json.dumps(value), "json") == value


def test_xml_roundtrip():
    root = ET.Element("result")
    user = ET.SubElement(root, "user", {"id": "42"})
    user.text = "runner"
    body = ET.tostring(root, encoding="unicode")

    decoded = decode(body, "xml")

    assert isinstance(decoded, ET.Element)
    assert ET.tostring(decoded, encoding="unicode") == body
    assert decoded.find("user").get("id") == "42"


def test_php_roundtrip():
    value = {"user_id": 42, "name": "runner", "stats": {"distance": 5.5}}
    body = phpserialize.dumps(value).decode("utf-8")
    assert decode(body, ResponseFormat.PHP) == value


def test_txt_passthrough():
    body = "user_id=42\nname=runner"
    assert decode(body, "txt") is body


@pytest.mark.parametrize("fmt,body", [
    ("json", "{not json"),
    ("json", ""),
    ("xml", "<result><user></result>"),
    ("xml", "plain text"),
    ("php", "x:not serialized"),
    ("php", 's:10:"short";'),
])
def test_malformed_bodies(fmt, body):
    with pytest.raises(MalformedResponse):
        decode(body, fmt)


def test_php_objects_are_rejected():
    body = 'O:8:"stdClass":1:{s:1:"a";i:1;}'
    with pytest.raises(MalformedResponse):
        decode(body, "php")


def test_unknown_format():
    with pytest.raises(ConfigurationError):
        decode("{}", "yaml")
