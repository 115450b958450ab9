import zmq

from bitproto.certificate import Certificate
from bitproto.sodium import Sodium


def test_default_certificate_is_valid():
    certificate = Certificate()
    assert certificate
    assert certificate.public_key
    assert certificate.private_key
    assert len(bytes(certificate.public_key)) == 32
    assert len(bytes(certificate.private_key)) == 32


def test_default_certificate_is_settings_safe():
    for _ in range(20):
        certificate = Certificate()
        assert "#" not in certificate.public_key.to_string()
        assert "#" not in certificate.private_key.to_string()


def test_default_public_key_matches_private_key():
    certificate = Certificate()
    assert Certificate.derive(certificate.private_key) == certificate.public_key


def test_certificate_from_private_key_derives_same_public_key():
    original = Certificate()
    restored = Certificate(original.private_key)
    assert restored
    assert restored.private_key == original.private_key
    assert restored.public_key == original.public_key


def test_certificate_from_private_key_text():
    original = Certificate()
    restored = Certificate(original.private_key.to_string())
    assert restored.public_key == original.public_key


def test_certificate_from_null_key_generates_pair():
    certificate = Certificate(Sodium())
    assert certificate
    assert Certificate.derive(certificate.private_key) == certificate.public_key


def test_derive_null_key_is_none():
    assert Certificate.derive(Sodium()) is None


def test_derive_agrees_with_zmq():
    public, private = zmq.curve_keypair()
    derived = Certificate.derive(Sodium(private.decode("ascii")))
    assert derived == Sodium(public.decode("ascii"))


def test_create_returns_matching_pair():
    keys = Certificate.create(False)
    assert keys is not None
    public_key, private_key = keys
    assert Certificate.derive(private_key) == public_key


def test_create_for_setting_avoids_hash_character():
    public_key, private_key = Certificate.create(True)
    assert "#" not in public_key.to_string()
    assert "#" not in private_key.to_string()


def test_distinct_certificates_differ():
    certificates = [Certificate() for _ in range(5)]
    private_keys = {bytes(certificate.private_key) for certificate in certificates}
    public_keys = {bytes(certificate.public_key) for certificate in certificates}
    assert len(private_keys) == 5
    assert len(public_keys) == 5