"""Unit tests for the stored header encoding."""

import json

import pytest

from hc.exceptions import ValidationError
from hc.services.store import deserialize_headers, serialize_headers


class TestSerializeHeaders:

    def test_none_encodes_as_empty_object(self):
        assert serialize_headers(None) == "{}"

    def test_empty_mapping_encodes_as_empty_object(self):
        assert serialize_headers({}) == "{}"

    def test_populated_mapping_is_json_object(self):
        encoded = serialize_headers({"Content-Type": "application/json", "X-Test": "true"})

        assert json.loads(encoded) == {"Content-Type": "application/json", "X-Test": "true"}


class TestDeserializeHeaders:

    @pytest.mark.parametrize("raw", ["", None, "{}"])
    def test_blank_values_decode_to_empty_mapping(self, raw):
        assert deserialize_headers(raw) == {}

    def test_object_decodes_to_mapping(self):
        assert deserialize_headers('{"Accept": "text/html"}') == {"Accept": "text/html"}

    @pytest.mark.parametrize("raw", ["{not json", "null", "[]", '"text"', '{"X-Count": 1}'])
    def test_invalid_values_raise_validation_error(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            deserialize_headers(raw)

        assert exc_info.value.message.startswith("failed to deserialize headers")
