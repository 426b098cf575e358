"""Custom exception classes for Buildkite webhook handling."""


class WebhookError(Exception):
    """Base exception for webhook validation and parsing."""

    def __init__(self, code: str, message: str, details=None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)


class MissingSignatureError(WebhookError):
    """The X-Buildkite-Signature header is absent."""

    def __init__(self, message: str = "missing signature"):
        super().__init__("MISSING_SIGNATURE", message, status_code=401)


class MalformedSignatureError(WebhookError):
    """The signature header does not match ``timestamp=<int>,signature=<hex>``."""

    def __init__(self, message: str = "malformed signature header", details=None):
        super().__init__("MALFORMED_SIGNATURE", message, details, status_code=400)


class NonHexSignatureError(MalformedSignatureError):
    """The signature part of the header is not a hex string."""

    def __init__(self, signature: str):
        super().__init__("signature is not a hex string", details={"signature": signature})


class SignatureExpiredError(WebhookError):
    """Signature timestamp falls outside the accepted replay window."""

    def __init__(self, timestamp: int, max_age: int):
        super().__init__(
            "SIGNATURE_EXPIRED",
            "signature timestamp outside tolerance",
            {"timestamp": timestamp, "max_age": max_age},
            status_code=401,
        )


class SignatureMismatchError(WebhookError):
    """Computed HMAC does not match the one supplied by the sender."""

    def __init__(self):
        super().__init__("SIGNATURE_MISMATCH", "payload signature check failed", status_code=401)


class UnknownEventTypeError(WebhookError):
    """X-Buildkite-Event names an event with no registered model."""

    def __init__(self, event_type: str):
        self.event_type = event_type
        super().__init__(
            "UNKNOWN_EVENT_TYPE",
            f"unknown X-Buildkite-Event in message: {event_type}",
            status_code=400,
        )


class WebhookConfigurationError(WebhookError):
    """Receiver is missing configuration it needs, e.g. the signing secret."""

    def __init__(self, message: str):
        super().__init__("CONFIGURATION_ERROR", message, status_code=500)
