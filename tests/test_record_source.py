"""Tests for the record source loader."""

import json

import httpx
import pytest

from valuation_explorer.core.exceptions import RecordLoadError
from valuation_explorer.storage import record_source
from valuation_explorer.storage.record_source import load_records, parse_records


class TestParseRecords:
    """Tests for parse_records."""

    def test_coerces_and_preserves_order(self, raw_records):
        records = parse_records(raw_records)
        assert [r.investor for r in records] == [
            "Harbour Pension Fund",
            "Kestrel Opportunity Fund",
        ]
        assert records[0].low == 13.8
        assert records[0].discount_rate == 6.0
        assert records[0].why is None
        assert records[1].discount_rate is None

    def test_valuations_key_accepted(self, raw_records):
        records = parse_records({"valuations": raw_records})
        assert len(records) == 2

    def test_missing_required_field_fails_whole_set(self, raw_records):
        del raw_records[1]["base"]
        with pytest.raises(RecordLoadError) as exc_info:
            parse_records(raw_records, source="test")
        assert exc_info.value.record_index == 1
        assert exc_info.value.field == "base"

    def test_non_numeric_required_field(self, raw_records):
        raw_records[0]["high"] = "sixteen"
        with pytest.raises(RecordLoadError) as exc_info:
            parse_records(raw_records)
        assert exc_info.value.record_index == 0
        assert exc_info.value.field == "high"

    def test_range_order_violation(self, raw_records):
        raw_records[0]["base"] = 20
        with pytest.raises(RecordLoadError):
            parse_records(raw_records)

    def test_duplicate_investor(self, raw_records):
        raw_records[1]["investor"] = "harbour pension fund"
        with pytest.raises(RecordLoadError) as exc_info:
            parse_records(raw_records)
        assert exc_info.value.field == "investor"
        assert "Duplicate" in exc_info.value.message

    @pytest.mark.parametrize("document", [[], {}, "records", 42, None])
    def test_structural_failures(self, document):
        with pytest.raises(RecordLoadError):
            parse_records(document)

    def test_non_object_entry(self, raw_records):
        raw_records.append(["not", "an", "object"])
        with pytest.raises(RecordLoadError) as exc_info:
            parse_records(raw_records)
        assert exc_info.value.record_index == 2


class TestLoadRecords:
    """Tests for loading from files and URLs."""

    def test_load_json_file(self, records_file):
        records = load_records(records_file)
        assert len(records) == 2

    def test_load_yaml_file(self, tmp_path):
        path = tmp_path / "valuations.yaml"
        path.write_text(
            "valuations:\n"
            "  - investor: Meridian REIT\n"
            "    low: 13.2\n"
            "    base: 14.2\n"
            "    high: 15.5\n"
            "    discount_rate: 7.25\n",
            encoding="utf-8",
        )
        records = load_records(path)
        assert records[0].investor == "Meridian REIT"
        assert records[0].discount_rate == 7.25

    def test_load_bundled_dataset(self, data_file):
        records = load_records(data_file)
        assert len(records) == 5

    def test_missing_file(self, tmp_path):
        with pytest.raises(RecordLoadError, match="File not found"):
            load_records(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(RecordLoadError, match="Invalid JSON"):
            load_records(path)

    def test_invalid_encoding(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"investor": "Caf\xe9 Capital", "low": 1, "base": 2, "high": 3}]')
        with pytest.raises(RecordLoadError, match="Invalid encoding"):
            load_records(path)


class TestRemoteSource:
    """Tests for URL sources using a mock transport."""

    @pytest.fixture
    def mock_transport(self, monkeypatch):
        """Route httpx.Client through a handler supplied by the test."""
        handlers = {}
        real_client = httpx.Client

        def client_factory(*args, **kwargs):
            kwargs["transport"] = httpx.MockTransport(handlers["handler"])
            return real_client(*args, **kwargs)

        monkeypatch.setattr(record_source.httpx, "Client", client_factory)

        def install(handler):
            handlers["handler"] = handler

        return install

    def test_load_from_url(self, mock_transport, raw_records):
        mock_transport(lambda request: httpx.Response(200, json=raw_records))
        records = load_records("https://example.com/valuations.json")
        assert [r.investor for r in records][0] == "Harbour Pension Fund"

    def test_http_error_status(self, mock_transport):
        mock_transport(lambda request: httpx.Response(404))
        with pytest.raises(RecordLoadError, match="HTTP 404"):
            load_records("https://example.com/valuations.json")

    def test_connection_error(self, mock_transport):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        mock_transport(handler)
        with pytest.raises(RecordLoadError, match="Request failed"):
            load_records("https://example.com/valuations.json")

    def test_invalid_json_body(self, mock_transport):
        mock_transport(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(RecordLoadError, match="Invalid JSON"):
            load_records("https://example.com/valuations.json")

    def test_remote_payload_validated(self, mock_transport, raw_records):
        raw_records[0]["low"] = None
        mock_transport(lambda request: httpx.Response(200, content=json.dumps(raw_records)))
        with pytest.raises(RecordLoadError) as exc_info:
            load_records("https://example.com/valuations.json")
        assert exc_info.value.field == "low"
