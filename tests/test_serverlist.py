"""
Tests for the JSON server list loader
"""

import json

import pytest

from pymindustry import Address, ConfigValidationError, load_addresses


class TestLoadAddresses:
    """Test reading servers.json files"""

    def test_missing_file_is_empty(self, tmp_path):
        assert load_addresses(tmp_path / "servers.json") == []

    def test_loads_in_order_with_default_port(self, tmp_path):
        path = tmp_path / "servers.json"
        path.write_text(json.dumps([
            {"ip": "149.40.3.138", "port": 6004},
            {"ip": "exdustry.com"},
            {"ip": "10.0.0.1", "port": 6567},
        ]), encoding="utf-8")

        assert load_addresses(str(path)) == [
            Address("149.40.3.138", 6004),
            Address("exdustry.com", 6567),
            Address("10.0.0.1", 6567),
        ]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "servers.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigValidationError, match="not valid JSON"):
            load_addresses(path)

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "servers.json"
        path.write_text('{"ip": "1.2.3.4"}', encoding="utf-8")
        with pytest.raises(ConfigValidationError, match="JSON array"):
            load_addresses(path)

    def test_entry_without_ip(self, tmp_path):
        path = tmp_path / "servers.json"
        path.write_text('[{"ip": "1.2.3.4"}, {"port": 6567}]', encoding="utf-8")
        with pytest.raises(ConfigValidationError, match="entry 1"):
            load_addresses(path)

    def test_bad_port(self, tmp_path):
        path = tmp_path / "servers.json"
        path.write_text('[{"ip": "1.2.3.4", "port": 99999}]', encoding="utf-8")
        with pytest.raises(ConfigValidationError):
            load_addresses(path)
