"""Loader state machine settings."""

from pydantic import Field, field_validator

from i4n.configuration.base import I4nSettings


class LoaderSettings(I4nSettings):
    """Settings for asynchronous translation loading.

    Environment Variables:
        I4N_READY_POLL_INTERVAL_MS: Interval between readiness checks made by
            Translator.await_ready() (default: 50ms)

    Example:
        ```python
        from i4n.configuration import settings

        interval = settings.loader.ready_poll_interval_ms
        ```
    """

    ready_poll_interval_ms: int = Field(
        default=50,
        alias="I4N_READY_POLL_INTERVAL_MS",
        description="Polling interval used while waiting for translations (ms)",
    )

    @field_validator("ready_poll_interval_ms")
    @classmethod
    def validate_poll_interval(cls, v: int) -> int:
        """Reject non-positive polling intervals."""
        if v <= 0:
            raise ValueError("I4N_READY_POLL_INTERVAL_MS must be greater than 0")
        return v
