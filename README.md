# bitproto

Configuration value types and small ZeroMQ helpers for protocol services.

## What is in the package

- **`Authority`** (`bitproto.authority`): an IP address and tcp port pair.
  It parses `1.2.240.1:8333`, `[2001:db8::2]:8333` or a bare host. It also
  takes a host (`[2001:db8::2]`, `2001:db8::2` or `1.2.240.1`) and a port as
  two arguments. IPv4 addresses are held as IPv4-mapped IPv6 addresses. The
  `ip` and `port` properties return the parts. `to_hostname()` gives
  `1.2.240.1` or `[2001:db8::2]`. `to_string()` leaves out a zero port. An
  authority is true when its port is non-zero.
- **`Endpoint`** (`bitproto.endpoint`): a frozen `[scheme://]host[:port]`
  value with the fields `scheme`, `host` and `port`. It is created with
  `Endpoint.parse(text)` or `Endpoint.from_authority(authority)`, or directly
  from its fields. By default the scheme is empty, the host is `localhost` and
  the port is 0. The scheme may be `tcp`, `udp`, `http`, `https` or `inproc`.
  `to_local()` returns a copy in which a `*` host becomes `localhost`. An
  endpoint is true when it has a scheme.
- **`Sodium`** (`bitproto.sodium`): a 32-byte key written as Z85 text. It is
  built from Z85 text, from 32 bytes, or with no argument, which gives the
  null key. The null key is false. `bytes(key)` returns the raw key.
  `to_string()` returns the Z85 text. The module also provides
  `z85_encode(data)` and `z85_decode(text)`.
- **`Certificate`** (`bitproto.certificate`): a CURVE key pair, available as
  the `public_key` and `private_key` properties.
  - With no argument, it generates a pair whose Z85 forms contain no `#`, so
    both keys can be stored in settings files.
  - With a null key, it generates a pair from the full key space.
  - With a private key, it derives the public key.

  The static methods `Certificate.create(setting)` and
  `Certificate.derive(private_key)` do this work directly, and return `None`
  on failure.
- **`Context`** (`bitproto.context`): a thread-safe holder of a `zmq.Context`
  that can be started and stopped repeatedly. It is started on construction
  unless `started=False` is passed. `handle()` returns the running
  `zmq.Context`, or `None` when it is stopped. Leaving a `with` block stops
  the context.
- **`Settings`** (`bitproto.settings`): a dataclass of protocol defaults. The
  defaults are:
  - send and receive high-water marks of 100
  - a 30-second handshake
  - a 1-second reconnect interval
  - a message size limit and ping, inactivity and send timeouts of 0
- **`ParseError`** (`bitproto.errors`): a `ValueError` raised when text cannot
  be read as an authority, endpoint or key. Its `value` attribute holds the
  rejected text.

## Installation

```
pip install bitproto
```

## Examples

```python
from bitproto.authority import Authority
from bitproto.certificate import Certificate
from bitproto.context import Context
from bitproto.endpoint import Endpoint
from bitproto.errors import ParseError
from bitproto.sodium import Sodium

authority = Authority("1.2.240.1:8333")
print(authority.port)            # 8333
print(authority.to_string())     # 1.2.240.1:8333
print(Authority("2001:db8::2", 8333))   # [2001:db8::2]:8333

endpoint = Endpoint.parse("tcp://*:9000")
print(endpoint.to_local())       # tcp://localhost:9000

certificate = Certificate()
key_text = certificate.public_key.to_string()   # 40 Z85 characters
assert Sodium(key_text) == certificate.public_key
assert Certificate.derive(certificate.private_key) == certificate.public_key

try:
    Authority("not an address")
except ParseError as error:
    print("rejected:", error.value)

with Context() as context:
    socket = context.handle().socket(zmq_socket_type := 8)  # zmq.PULL
    socket.close()
```

## What the package does not do

The package has no socket, message, poller or authenticator types, and it
provides no command-line tool or server. For messaging, use pyzmq directly
with the context returned by `Context.handle()`, and with keys from
`Certificate`.

## Running the tests

```
pip install -e ".[test]"
pytest
```