"""Anonymous display identity domain service."""

import hashlib
import hmac
from collections.abc import Callable
from datetime import datetime, timezone

from ratings.config import AnonymitySettings
from ratings.domain.value import CallerId, DisplayId

from .base import Service


class DisplayIdentityService(Service):
    """Derives the rotating public token stored alongside a vote.

    The token is a pure function of (secret, caller, rotation window), so no
    shared state is needed: the same caller gets the same token within a
    window and a fresh one after it rolls over.
    """

    PREFIX = "anon-"

    def __init__(
        self,
        anonymity_settings: AnonymitySettings,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize display identity service.

        Args:
            anonymity_settings: Secret and rotation window
            clock: Source of "now" (defaults to UTC wall clock)
        """
        self.anonymity_settings = anonymity_settings
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def _window(self) -> int:
        seconds = max(self.anonymity_settings.rotation_hours, 1) * 3600
        return int(self.clock().timestamp() // seconds)

    def next_display_identity(self, caller_id: CallerId) -> DisplayId:
        """Return the display token for a caller in the current window.

        Args:
            caller_id: Durable caller identity

        Returns:
            Display identity token
        """
        message = f"{caller_id}:{self._window()}".encode("utf-8")
        digest = hmac.new(
            self.anonymity_settings.secret.encode("utf-8"),
            message,
            hashlib.sha256,
        ).hexdigest()
        return DisplayId(f"{self.PREFIX}{digest[:16]}")
