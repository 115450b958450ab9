"""A network endpoint in URI form: [scheme://]host[:port]."""

import re
from dataclasses import dataclass

from bitproto.errors import ParseError

_ENDPOINT = re.compile(
    r"((tcp|udp|http|https|inproc)://)?"
    r"(\[([0-9a-f:\.]+)\]|([^:]+))(:([0-9]{1,5}))?"
)
_MAX_PORT = 0xFFFF


@dataclass(frozen=True)
class Endpoint:
    """A {scheme, host, port} triple.

    An empty scheme and a zero port mean "not given" and are left out of the
    text form.
    """

    scheme: str = ""
    host: str = "localhost"
    port: int = 0

    def __post_init__(self):
        if not 0 <= self.port <= _MAX_PORT:
            raise ValueError(f"port out of range: {self.port}")

    @classmethod
    def parse(cls, uri):
        """Read an endpoint from text of the form [scheme://]host[:port]."""
        tokens = uri.split()
        token = tokens[0] if tokens else ""
        match = _ENDPOINT.fullmatch(token)
        if match is None:
            raise ParseError(token)

        port_text = match.group(7)
        port = int(port_text) if port_text else 0
        if port > _MAX_PORT:
            raise ParseError(token)
        return cls(match.group(2) or "", match.group(3), port)

    @classmethod
    def from_authority(cls, authority):
        """The endpoint named by an authority's text form."""
        return cls.parse(authority.to_string())

    def __bool__(self):
        return bool(self.scheme)

    def to_string(self):
        """The endpoint as text, omitting an empty scheme and a zero port."""
        text = f"{self.scheme}://{self.host}" if self.scheme else self.host
        return f"{text}:{self.port}" if self.port else text

    def __str__(self):
        return self.to_string()

    def to_local(self):
        """A copy with a wildcard host "*" replaced by "localhost"."""
        host = "localhost" if self.host == "*" else self.host
        return Endpoint(self.scheme, host, self.port)