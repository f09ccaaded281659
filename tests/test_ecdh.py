import hashlib
import io
import json
import urllib.error
from unittest import mock

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from miraicore.crypto.ecdh import ECDH, EncryptSession


def _server_pair():
    private = ec.generate_private_key(ec.SECP256R1())
    public = private.public_key().public_bytes(
        serialization.Encoding.X962, serialization.PublicFormat.UncompressedPoint
    )
    return private, public


def _server_share(private, client_public):
    remote = ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256R1(), client_public)
    return hashlib.md5(private.exchange(ec.ECDH(), remote)[:16]).digest()


def test_default_key_shape():
    session = ECDH()
    assert session.svr_public_key_ver == 1
    assert len(session.public_key) == 65
    assert session.public_key[0] == 4
    assert len(session.share_key) == 16


def test_share_key_agrees_with_server():
    private, public = _server_pair()
    session = ECDH(server_public_key=public)
    assert session.share_key == _server_share(private, session.public_key)


def test_invalid_server_key_raises():
    with pytest.raises(ValueError):
        ECDH(server_public_key=b"\x04" + bytes(10))


def test_fetch_pub_key_updates_state():
    private, public = _server_pair()
    document = {"PubKeyMeta": {"KeyVer": 7, "PubKey": public.hex()}}
    response = io.BytesIO(json.dumps(document).encode())
    session = ECDH()
    with mock.patch("urllib.request.urlopen", return_value=response):
        session.fetch_pub_key(10001)
    assert session.svr_public_key_ver == 7
    assert session.share_key == _server_share(private, session.public_key)


def test_fetch_pub_key_failure_keeps_state():
    session = ECDH()
    before = (session.svr_public_key_ver, session.public_key, session.share_key)
    with mock.patch("urllib.request.urlopen", side_effect=urllib.error.URLError("down")):
        session.fetch_pub_key(10001)
    assert (session.svr_public_key_ver, session.public_key, session.share_key) == before


def test_encrypt_session_holds_t133():
    assert EncryptSession(t133=b"\x01\x02").t133 == b"\x01\x02"
    assert EncryptSession().t133 == b""