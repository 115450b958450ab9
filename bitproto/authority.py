"""An {ip address, port} pair with its text form."""

import ipaddress
import re

from bitproto.errors import ParseError

_NULL_IP = ipaddress.IPv6Address(0)
_AUTHORITY = re.compile(
    r"(([0-9\.]+)|\[([0-9a-f:\.]+)\])(:([0-9]{1,5}))?"
)
_MAX_PORT = 0xFFFF


def _to_host_name(host):
    if ":" not in host or host.find("[") == 0:
        return host
    return f"[{host}]"


def _to_text(host, port):
    text = _to_host_name(host)
    return f"{text}:{port}" if port else text


def _parse(value):
    tokens = value.split()
    token = tokens[0] if tokens else ""
    match = _AUTHORITY.fullmatch(token)
    if match is None:
        raise ParseError(token)

    address = match.group(3) or "::ffff:" + match.group(2)
    try:
        ip = ipaddress.IPv6Address(address)
    except ValueError:
        raise ParseError(token) from None

    port_text = match.group(5)
    if not port_text:
        return ip, 0
    port = int(port_text)
    if port > _MAX_PORT:
        raise ParseError(token)
    return ip, port


class Authority:
    """An IPv4 or IPv6 address with an optional tcp port.

    Accepts ``[2001:db8::2]:port`` or ``1.2.240.1:port`` as one value, or a
    host (``[2001:db8::2]``, ``2001:db8::2`` or ``1.2.240.1``) and a port.
    """

    __slots__ = ("_ip", "_port")

    def __init__(self, value=None, port=None):
        self._ip = _NULL_IP
        self._port = 0
        if value is None:
            if port is not None:
                raise TypeError("a port requires a host")
            return
        if port is None:
            text = value
        else:
            if not 0 <= port <= _MAX_PORT:
                raise ValueError(f"port out of range: {port}")
            text = _to_text(value, port)
        self._ip, self._port = _parse(text)

    def __bool__(self):
        return self._port != 0

    @property
    def ip(self):
        """The address, IPv4 addresses held in mapped IPv6 form."""
        return self._ip

    @property
    def port(self):
        """The tcp port, zero when unset."""
        return self._port

    def to_hostname(self):
        """The host as ``1.2.240.1`` or ``[2001:db8::2]``."""
        mapped = self._ip.ipv4_mapped
        if mapped is not None:
            return str(mapped)
        return f"[{self._ip}]"

    def to_string(self):
        """The authority as text, omitting a zero port."""
        return _to_text(self.to_hostname(), self._port)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Authority({self.to_string()!r})"

    def __eq__(self, other):
        if not isinstance(other, Authority):
            return NotImplemented
        return self._ip == other._ip and self._port == other._port

    def __hash__(self):
        return hash(self.to_string())