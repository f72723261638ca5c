"""Server status data structures."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .protocol.constants import DEFAULT_PORT, ErrorKind, GameMode
from .protocol.errors import error_for
from .config.validation import validate_host, validate_port, parse_server_input


@dataclass(frozen=True)
class Address:
    """A game server endpoint, identified by its (host, port) pair."""

    host: str
    port: int = DEFAULT_PORT

    def __post_init__(self):
        object.__setattr__(self, "host", validate_host(self.host))
        validate_port(self.port)

    @classmethod
    def parse(cls, text: str, default_port: int = DEFAULT_PORT) -> "Address":
        """Parse ``host`` or ``host:port`` user input."""
        host, port = parse_server_input(text, default_port)
        return cls(host, port)

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


def parse_address(text: str, default_port: int = DEFAULT_PORT) -> Address:
    """Parse ``host`` or ``host:port`` into an Address."""
    return Address.parse(text, default_port)


@dataclass(frozen=True)
class StatusReply:
    """Decoded status reply of a game server."""

    host_name: str
    map: str
    players: int
    waves: int
    game_version: int
    version_type: str
    game_mode: int
    player_limit: int
    description: str
    mode_name: str

    @property
    def mode(self) -> Optional[GameMode]:
        """Game mode as an enum, or None for values this client doesn't know."""
        try:
            return GameMode(self.game_mode)
        except ValueError:
            return None

    def to_dict(self) -> Dict[str, Any]:
        """Render using the field names of the JSON status API."""
        return {
            "host": self.host_name,
            "map": self.map,
            "players": self.players,
            "waves": self.waves,
            "gameversion": self.game_version,
            "vertype": self.version_type,
            "gamemode": self.game_mode,
            "limit": self.player_limit,
            "desc": self.description,
            "modename": self.mode_name,
        }

    def __str__(self) -> str:
        limit = f"/{self.player_limit}" if self.player_limit > 0 else ""
        return f"{self.host_name} ({self.players}{limit} players) - {self.map}, wave {self.waves}"


@dataclass(frozen=True)
class QueryOutcome:
    """Result of one status query: either online with a reply or offline with a reason."""

    address: Address
    reply: Optional[StatusReply] = None
    reason: Optional[ErrorKind] = None
    detail: str = ""

    def __post_init__(self):
        if (self.reply is None) == (self.reason is None):
            raise ValueError("QueryOutcome needs exactly one of reply or reason")

    @classmethod
    def online(cls, address: Address, reply: StatusReply) -> "QueryOutcome":
        return cls(address=address, reply=reply)

    @classmethod
    def offline(cls, address: Address, reason: ErrorKind, detail: str = "") -> "QueryOutcome":
        return cls(address=address, reason=reason, detail=detail)

    @property
    def is_online(self) -> bool:
        return self.reply is not None

    def raise_for_status(self) -> StatusReply:
        """Return the reply, or raise the QueryError matching the offline reason."""
        if self.reply is not None:
            return self.reply
        raise error_for(self.reason, self.detail or self.reason.value)

    def to_dict(self) -> Dict[str, Any]:
        """Render like an entry of the JSON server list."""
        data: Dict[str, Any] = {
            "ip": self.address.host,
            "port": self.address.port,
            "online": self.is_online,
        }
        if self.reply is not None:
            data["info"] = self.reply.to_dict()
        else:
            data["error"] = self.detail or self.reason.value
        return data

    def __str__(self) -> str:
        if self.reply is not None:
            return f"{self.address} online: {self.reply}"
        return f"{self.address} offline ({self.reason.value})"


def as_address(value: Any, default_port: int = DEFAULT_PORT) -> Address:
    """Coerce an Address, ``"host[:port]"`` string or ``(host, port)`` pair."""
    if isinstance(value, Address):
        return value
    if isinstance(value, str):
        return Address.parse(value, default_port)
    if isinstance(value, tuple) and len(value) == 2:
        return Address(value[0], value[1])
    raise TypeError(f"Cannot interpret {value!r} as a server address")
