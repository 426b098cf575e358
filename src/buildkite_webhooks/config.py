"""Receiver configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Token shown on the Buildkite notification service settings page
    secret: str = ""

    # Reject signatures older than this many seconds (None disables the check)
    signature_max_age: int | None = None

    # Logging
    log_level: str = "info"
    json_logs: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "BUILDKITE_WEBHOOK_",
    }

    @property
    def secret_key(self) -> bytes:
        """Return the signing secret as bytes for HMAC."""
        return self.secret.encode("utf-8")


settings = Settings()
