"""URL signing for client-ID (Maps for Work) credentials."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac

from .errors import MapsValidationError
from .query import QueryParams


def decode_signing_secret(secret: str) -> bytes:
    """Decode a urlsafe base64 signing secret."""

    try:
        return base64.urlsafe_b64decode(secret.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError, ValueError) as exc:
        raise MapsValidationError(
            "maps: signing secret is not valid urlsafe base64",
            fields=("signing_secret",),
        ) from exc


def generate_signature(key: bytes, message: str) -> str:
    digest = hmac.new(key, message.encode("utf-8"), hashlib.sha1).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii")


def sign_query(path: str, client_id: str, key: bytes, params: QueryParams) -> str:
    """Return the encoded query with ``client`` added and ``signature`` appended.

    An empty ``client_id`` signs the query as-is, which is how API-key requests
    to signature-accepting endpoints are signed.
    """

    signed = params.copy()
    if client_id:
        signed.set("client", client_id)
    encoded = signed.encode()
    signature = generate_signature(key, f"{path}?{encoded}")
    return f"{encoded}&signature={signature}"


__all__ = [
    "decode_signing_secret",
    "generate_signature",
    "sign_query",
]
