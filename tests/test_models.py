"""
Tests for addresses, replies and query outcomes
"""

import pytest

from pymindustry import (
    Address, QueryOutcome, StatusReply, ErrorKind, GameMode, ConfigValidationError,
    QueryTimeoutError, TransportError, DecodeError, parse_address
)
from pymindustry.models import as_address


def make_reply(**overrides) -> StatusReply:
    fields = dict(
        host_name="Nucleus", map="groundZero", players=3, waves=10, game_version=146,
        version_type="7", game_mode=0, player_limit=50, description="test",
        mode_name="survival"
    )
    fields.update(overrides)
    return StatusReply(**fields)


class TestAddress:
    """Test address validation and identity"""

    def test_default_port(self):
        assert Address("play.example.com").port == 6567

    def test_identity_is_host_and_port(self):
        assert Address("1.2.3.4", 6567) == Address("1.2.3.4")
        assert Address("1.2.3.4", 6567) != Address("1.2.3.4", 6568)
        assert len({Address("1.2.3.4"), Address("1.2.3.4", 6567)}) == 1

    def test_str(self):
        assert str(Address("1.2.3.4", 6000)) == "1.2.3.4:6000"

    @pytest.mark.parametrize("port", [0, 65536, -1])
    def test_port_out_of_range(self, port):
        with pytest.raises(ConfigValidationError):
            Address("1.2.3.4", port)

    def test_empty_host(self):
        with pytest.raises(ConfigValidationError):
            Address("   ")

    def test_immutable(self):
        address = Address("1.2.3.4")
        with pytest.raises(AttributeError):
            address.port = 1


class TestParseAddress:
    """Test host[:port] parsing"""

    def test_ip_with_port(self):
        assert parse_address("149.40.3.138:6004") == Address("149.40.3.138", 6004)

    def test_domain_without_port(self):
        assert parse_address("  exdustry.com ") == Address("exdustry.com", 6567)

    @pytest.mark.parametrize("text", ["1.2.3.4:0", "1.2.3.4:70000", "1.2.3.4:abc"])
    def test_bad_port(self, text):
        with pytest.raises(ConfigValidationError, match="Invalid port number"):
            parse_address(text)

    @pytest.mark.parametrize("text", ["localhost", "bad_host.com", "-bad.com", "a b.com", ""])
    def test_bad_host(self, text):
        with pytest.raises(ConfigValidationError, match="Invalid IP or domain format"):
            parse_address(text)

    def test_as_address(self):
        address = Address("1.2.3.4")
        assert as_address(address) is address
        assert as_address("1.2.3.4:7000") == Address("1.2.3.4", 7000)
        assert as_address(("127.0.0.1", 7000)) == Address("127.0.0.1", 7000)
        with pytest.raises(TypeError):
            as_address(1234)


class TestStatusReply:
    """Test reply helpers"""

    def test_mode(self):
        assert make_reply(game_mode=3).mode is GameMode.PVP
        assert make_reply(game_mode=99).mode is None

    def test_to_dict_uses_api_names(self):
        assert make_reply().to_dict() == {
            "host": "Nucleus",
            "map": "groundZero",
            "players": 3,
            "waves": 10,
            "gameversion": 146,
            "vertype": "7",
            "gamemode": 0,
            "limit": 50,
            "desc": "test",
            "modename": "survival",
        }


class TestQueryOutcome:
    """Test the online/offline variant"""

    def test_online(self):
        outcome = QueryOutcome.online(Address("1.2.3.4"), make_reply())
        assert outcome.is_online
        assert outcome.reason is None
        assert outcome.raise_for_status() == make_reply()

    def test_offline(self):
        outcome = QueryOutcome.offline(Address("1.2.3.4"), ErrorKind.TIMEOUT, "no reply")
        assert not outcome.is_online
        assert outcome.reply is None
        assert outcome.reason is ErrorKind.TIMEOUT

    def test_exactly_one_variant(self):
        with pytest.raises(ValueError):
            QueryOutcome(Address("1.2.3.4"))
        with pytest.raises(ValueError):
            QueryOutcome(Address("1.2.3.4"), reply=make_reply(), reason=ErrorKind.TIMEOUT)

    def test_immutable(self):
        outcome = QueryOutcome.offline(Address("1.2.3.4"), ErrorKind.TIMEOUT)
        with pytest.raises(AttributeError):
            outcome.reason = ErrorKind.DECODE_ERROR

    @pytest.mark.parametrize("kind,exc_type", [
        (ErrorKind.TIMEOUT, QueryTimeoutError),
        (ErrorKind.TRANSPORT_ERROR, TransportError),
        (ErrorKind.DECODE_ERROR, DecodeError),
    ])
    def test_raise_for_status(self, kind, exc_type):
        outcome = QueryOutcome.offline(Address("1.2.3.4"), kind, "boom")
        with pytest.raises(exc_type, match="boom"):
            outcome.raise_for_status()

    def test_to_dict_online(self):
        data = QueryOutcome.online(Address("1.2.3.4", 6000), make_reply()).to_dict()
        assert data["ip"] == "1.2.3.4"
        assert data["port"] == 6000
        assert data["online"] is True
        assert data["info"]["host"] == "Nucleus"
        assert "error" not in data

    def test_to_dict_offline(self):
        data = QueryOutcome.offline(Address("1.2.3.4"), ErrorKind.TIMEOUT).to_dict()
        assert data == {"ip": "1.2.3.4", "port": 6567, "online": False, "error": "timeout"}
