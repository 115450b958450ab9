"""Curve key pairs for authenticated sockets."""

import zmq

from bitproto.sodium import Sodium

_MAX_ATTEMPTS = 255


def _ok_setting(key):
    # Keys containing '#' cannot be written to settings files.
    return "#" not in key


class Certificate:
    """A curve public/private key pair.

    With no argument a key pair is generated whose Z85 forms contain no '#',
    so both keys can be stored in settings files. With a null key a pair is
    generated from the full key space. With a private key the public key is
    derived from it.
    """

    __slots__ = ("_public", "_private")

    def __init__(self, private_key=None):
        self._public = Sodium()
        self._private = Sodium()

        if private_key is None:
            keys = self.create(True)
        else:
            private_key = Sodium(private_key)
            if not private_key:
                keys = self.create(False)
            else:
                public = self.derive(private_key)
                keys = (public, private_key) if public is not None else None

        if keys is not None:
            self._public, self._private = keys

    @staticmethod
    def derive(private_key):
        """The public key of a private key, or None if it cannot be derived."""
        private_key = Sodium(private_key)
        if not private_key:
            return None
        try:
            public = zmq.curve_public(private_key.to_string().encode("ascii"))
        except zmq.ZMQError:
            return None
        public_key = Sodium(public.decode("ascii"))
        return public_key if public_key else None

    @staticmethod
    def create(setting):
        """A new (public, private) key pair, or None on failure.

        When ``setting`` is true, pairs are drawn until neither key's Z85
        form contains '#'.
        """
        for _ in range(_MAX_ATTEMPTS):
            try:
                public, private = zmq.curve_keypair()
            except zmq.ZMQError:
                return None
            public_text = public.decode("ascii")
            private_text = private.decode("ascii")
            if not setting or (
                _ok_setting(public_text) and _ok_setting(private_text)
            ):
                public_key = Sodium(public_text)
                if not public_key:
                    return None
                return public_key, Sodium(private_text)
        return None

    def __bool__(self):
        return bool(self._public)

    @property
    def public_key(self):
        """The public key, null if the certificate is invalid."""
        return self._public

    @property
    def private_key(self):
        """The private key, null if the certificate is invalid."""
        return self._private

    def __repr__(self):
        return f"Certificate(public_key={self._public.to_string()!r})"