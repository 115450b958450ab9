"""Z85 (ZeroMQ base85) encoding and 32-byte curve key values."""

HASH_SIZE = 32

_ALPHABET = (
    "0123456789abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    ".-:+=^!/*?&<>()[]{}@%$#"
)
_DIGITS = {char: index for index, char in enumerate(_ALPHABET)}
_NULL_HASH = bytes(HASH_SIZE)


def z85_encode(data):
    """Encode bytes whose length is a multiple of four as Z85 text."""
    data = bytes(data)
    if len(data) % 4:
        raise ValueError("z85 input length must be a multiple of 4")
    chars = []
    for start in range(0, len(data), 4):
        value = int.from_bytes(data[start:start + 4], "big")
        group = []
        for _ in range(5):
            value, digit = divmod(value, 85)
            group.append(_ALPHABET[digit])
        chars.extend(reversed(group))
    return "".join(chars)


def z85_decode(text):
    """Decode Z85 text whose length is a multiple of five into bytes."""
    if len(text) % 5:
        raise ValueError("z85 text length must be a multiple of 5")
    out = bytearray()
    for start in range(0, len(text), 5):
        value = 0
        for char in text[start:start + 5]:
            digit = _DIGITS.get(char)
            if digit is None:
                raise ValueError(f"invalid z85 character: {char!r}")
            value = value * 85 + digit
        if value > 0xFFFFFFFF:
            raise ValueError("z85 group out of range")
        out += value.to_bytes(4, "big")
    return bytes(out)


class Sodium:
    """A 32-byte key that reads and writes as Z85 text."""

    __slots__ = ("_value",)

    def __init__(self, value=None):
        from bitproto.errors import ParseError

        if value is None:
            self._value = _NULL_HASH
        elif isinstance(value, Sodium):
            self._value = value._value
        elif isinstance(value, str):
            tokens = value.split()
            token = tokens[0] if tokens else ""
            try:
                decoded = z85_decode(token)
            except ValueError:
                raise ParseError(token) from None
            if len(decoded) != HASH_SIZE:
                raise ParseError(token)
            self._value = decoded
        else:
            data = bytes(value)
            if len(data) != HASH_SIZE:
                raise ValueError(f"key must be {HASH_SIZE} bytes")
            self._value = data

    def __bool__(self):
        return self._value != _NULL_HASH

    def __bytes__(self):
        return self._value

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Sodium({self.to_string()!r})"

    def __eq__(self, other):
        if not isinstance(other, Sodium):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(self._value)

    def to_string(self):
        """The key as Z85 text."""
        return z85_encode(self._value)