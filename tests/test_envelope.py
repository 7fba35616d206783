"""Tests for vyos_api.envelope — descriptors and response parsing."""

from vyos_api.envelope import Endpoint, Envelope, Operation


class TestEndpoint:
    def test_values(self):
        assert [e.value for e in Endpoint] == [
            "configure", "retrieve", "config-file", "image", "show", "generate",
        ]

    def test_is_str(self):
        assert Endpoint.CONFIG_FILE == "config-file"


class TestOperation:
    def test_unset_fields_omitted(self):
        assert Operation(op="show", path=["date"]).as_payload() == {"op": "show", "path": ["date"]}

    def test_empty_value_kept(self):
        payload = Operation(op="comment", path=["system"], value="").as_payload()
        assert payload == {"op": "comment", "path": ["system"], "value": ""}

    def test_url_and_name(self):
        assert Operation(op="add", url="https://x/img.iso").as_payload() == {
            "op": "add", "url": "https://x/img.iso",
        }
        assert Operation(op="delete", name="1.4").as_payload() == {"op": "delete", "name": "1.4"}


class TestEnvelopeParse:
    def test_success(self):
        env = Envelope.parse({"success": True, "data": {"a": 1}, "error": None})
        assert env == Envelope(success=True, data={"a": 1}, error=None)

    def test_failure(self):
        env = Envelope.parse({"success": False, "data": None, "error": "boom"})
        assert env.success is False
        assert env.error == "boom"

    def test_missing_data_defaults_none(self):
        assert Envelope.parse({"success": True}).data is None

    def test_not_a_mapping(self):
        assert Envelope.parse("oops") is None
        assert Envelope.parse(None) is None

    def test_success_not_bool(self):
        assert Envelope.parse({"success": "yes", "data": 1}) is None
        assert Envelope.parse({"data": 1}) is None
