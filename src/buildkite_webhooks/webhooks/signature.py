"""Buildkite webhook signature verification.

Buildkite signs each delivery with HMAC-SHA256 over ``<timestamp>.<body>``
using the notification service's token, and sends the result as
``X-Buildkite-Signature: timestamp=<unix seconds>,signature=<hex digest>``.
See: https://buildkite.com/docs/apis/webhooks#webhook-signature
"""

import binascii
import hashlib
import hmac
import logging
import time

from fastapi import Request

from buildkite_webhooks.errors.exceptions import (
    MalformedSignatureError,
    MissingSignatureError,
    NonHexSignatureError,
    SignatureExpiredError,
    SignatureMismatchError,
)

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Buildkite-Signature"


def _as_bytes(secret_key: bytes | str) -> bytes:
    if isinstance(secret_key, str):
        return secret_key.encode("utf-8")
    return secret_key


def _split_pair(part: str, key: str, header_value: str) -> str:
    pieces = part.split("=")
    if len(pieces) != 2 or pieces[0] != key:
        raise MalformedSignatureError(details={"header": header_value})
    return pieces[1]


def parse_signature_header(header_value: str) -> tuple[str, str]:
    """Split ``timestamp=<int>,signature=<hex>`` into its two values."""
    parts = header_value.split(",")
    if len(parts) != 2:
        raise MalformedSignatureError(details={"header": header_value})

    timestamp = _split_pair(parts[0], "timestamp", header_value)
    signature = _split_pair(parts[1], "signature", header_value)

    if not (timestamp.isascii() and timestamp.isdigit()):
        raise MalformedSignatureError(details={"header": header_value})
    try:
        int(timestamp)
    except ValueError:
        # past the interpreter's int conversion digit limit
        raise MalformedSignatureError(details={"header": header_value}) from None
    return timestamp, signature


def compute_signature(timestamp: str | int, body: bytes, secret_key: bytes | str) -> str:
    """Compute the hex HMAC-SHA256 Buildkite expects for ``body`` at ``timestamp``."""
    message = f"{timestamp}.".encode("ascii") + body
    return hmac.new(_as_bytes(secret_key), message, hashlib.sha256).hexdigest()


def build_signature_header(
    body: bytes, secret_key: bytes | str, timestamp: int | None = None
) -> str:
    """Build an ``X-Buildkite-Signature`` value for ``body``, signed now by default."""
    if timestamp is None:
        timestamp = int(time.time())
    signature = compute_signature(timestamp, body, secret_key)
    return f"timestamp={timestamp},signature={signature}"


def validate_signature(
    body: bytes,
    signature_header: str | None,
    secret_key: bytes | str,
    *,
    max_age: int | None = None,
    now: float | None = None,
) -> bytes:
    """Check ``signature_header`` against ``body`` and return the body unchanged.

    Args:
        body: Raw request body, exactly as received.
        signature_header: Value of the X-Buildkite-Signature header, or None.
        secret_key: Webhook token configured on the Buildkite notification service.
        max_age: Optional replay window in seconds. Disabled when None.
        now: Unix time used for the replay window (defaults to ``time.time()``).

    Raises:
        MissingSignatureError: header absent or empty.
        MalformedSignatureError: header is not ``timestamp=<int>,signature=<hex>``.
        NonHexSignatureError: signature part is not valid hex.
        SignatureExpiredError: timestamp outside ``max_age``.
        SignatureMismatchError: HMAC does not match.
    """
    if not signature_header:
        raise MissingSignatureError()

    timestamp, signature = parse_signature_header(signature_header)

    try:
        supplied_mac = binascii.unhexlify(signature)
    except (binascii.Error, ValueError) as exc:
        raise NonHexSignatureError(signature) from exc

    if max_age is not None:
        current = time.time() if now is None else now
        if abs(current - int(timestamp)) > max_age:
            raise SignatureExpiredError(int(timestamp), max_age)

    expected_mac = bytes.fromhex(compute_signature(timestamp, body, secret_key))
    if not hmac.compare_digest(expected_mac, supplied_mac):
        raise SignatureMismatchError()

    logger.debug("Buildkite signature verified (timestamp=%s)", timestamp)
    return body


async def validate_payload(
    request: Request, secret_key: bytes | str, *, max_age: int | None = None
) -> bytes:
    """Read the request body once and verify its Buildkite signature.

    Returns the raw body; parse it with ``parse_webhook`` instead of reading
    the request again.
    """
    body = await request.body()
    return validate_signature(
        body,
        request.headers.get(SIGNATURE_HEADER),
        secret_key,
        max_age=max_age,
    )
