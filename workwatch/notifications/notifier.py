"""Notification system for WorkWatch."""

import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import requests

from workwatch.notifications.payloads import clock_in_payload, clock_out_payload
from workwatch.utils.duration import verbose_duration
from workwatch.utils.logger import setup_logger

logger = setup_logger(__name__)


class Notifier(ABC):
    """Abstract base class for clock-in/clock-out notifiers."""

    @abstractmethod
    def clock_in(self, username: str):
        """Announce the start of a session.

        Args:
            username: Person clocking in
        """
        pass

    @abstractmethod
    def clock_out(self, username: str, elapsed: int, logs: List[str]):
        """Announce the end of a session.

        Args:
            username: Person clocking out
            elapsed: Session length in seconds
            logs: Session log entries in order
        """
        pass


class WebhookNotifier(Notifier):
    """Posts Discord-style embeds to a webhook without waiting for the result.

    Each message is built up front from copies of the caller's data and then
    posted from its own daemon thread, which is never joined. Delivery
    failures are logged and dropped.
    """

    def __init__(
        self,
        webhook_url: str,
        bot_name: str = 'WorkWatch',
        session: Optional[requests.Session] = None,
        timeout: float = 10.0
    ):
        """Initialize webhook notifier.

        Args:
            webhook_url: Destination; empty disables posting
            bot_name: Name the webhook posts under
            session: HTTP session to post with; by default each post opens its own
            timeout: Per-request timeout in seconds
        """
        self.webhook_url = webhook_url
        self.bot_name = bot_name
        self.session = session
        self.timeout = timeout

    def clock_in(self, username: str):
        if not self.webhook_url:
            return
        self.dispatch(clock_in_payload(self.bot_name, username))

    def clock_out(self, username: str, elapsed: int, logs: List[str]):
        if not self.webhook_url:
            return
        payload = clock_out_payload(
            self.bot_name, username, verbose_duration(elapsed), list(logs)
        )
        self.dispatch(payload)

    def dispatch(self, payload: Dict[str, Any]) -> Optional[threading.Thread]:
        """Start posting ``payload`` in the background.

        Returns:
            The started thread, or None when no destination is configured
        """
        if not self.webhook_url:
            return None

        thread = threading.Thread(
            target=self.post,
            args=(self.webhook_url, payload),
            name='workwatch-webhook',
            daemon=True
        )
        thread.start()
        return thread

    def post(self, url: str, payload: Dict[str, Any]) -> bool:
        """Post one payload.

        Returns:
            True if the webhook accepted it
        """
        try:
            poster = self.session or requests
            response = poster.post(url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"Webhook delivery failed: {e}")
            return False

        logger.debug(f"Webhook delivered ({response.status_code})")
        return True


class NullNotifier(Notifier):
    """Notifier that does nothing (no webhook configured)."""

    def clock_in(self, username: str):
        pass

    def clock_out(self, username: str, elapsed: int, logs: List[str]):
        pass


def create_notifier(config) -> Notifier:
    """Factory function to create appropriate notifier.

    Args:
        config: WorkWatch configuration

    Returns:
        WebhookNotifier when a webhook URL is configured, NullNotifier otherwise
    """
    url = config.webhook_url
    if not url:
        return NullNotifier()

    return WebhookNotifier(
        url,
        bot_name=config.bot_name,
        timeout=config.webhook_timeout
    )
