"""P-256 key agreement used to protect the login exchange."""

import hashlib
import json
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Optional

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

SERVER_PUBLIC_KEY = bytes.fromhex(
    "04EBCA94D733E399B2DB96EACDD3F69A8BB0F74224E2B44E3357812211D2E62EFB"
    "C91BB553098E25E33A799ADC7F76FEB208DA7C6522CDB0719A305180CC54A82E"
)
_ROTATE_URL = "https://keyrotate.qq.com/rotate_key?cipher_suite_ver=305&uin="


@dataclass
class EncryptSession:
    t133: bytes = field(default=b"")


class ECDH:
    """Holds a fresh local key pair and the key shared with the server."""

    def __init__(self, server_public_key: Optional[bytes] = None, key_version: int = 1) -> None:
        self.svr_public_key_ver = key_version
        self.public_key = b""
        self.share_key = b""
        self._init(SERVER_PUBLIC_KEY if server_public_key is None else server_public_key)

    def _init(self, server_public_key: bytes) -> None:
        curve = ec.SECP256R1()
        remote = ec.EllipticCurvePublicKey.from_encoded_point(curve, server_public_key)
        local = ec.generate_private_key(curve)
        shared = local.exchange(ec.ECDH(), remote)
        self.share_key = hashlib.md5(shared[:16]).digest()
        self.public_key = local.public_key().public_bytes(
            serialization.Encoding.X962, serialization.PublicFormat.UncompressedPoint
        )

    def fetch_pub_key(self, uin: int) -> None:
        """Fetch the current server key; keep the old one if the request fails."""
        try:
            with urllib.request.urlopen(_ROTATE_URL + str(uin)) as response:
                document = json.load(response)
        except (urllib.error.URLError, OSError, ValueError):
            return
        meta = document.get("PubKeyMeta") or {}
        self.svr_public_key_ver = int(meta.get("KeyVer", 0)) & 0xFFFF
        self._init(bytes.fromhex(meta.get("PubKey", "")))