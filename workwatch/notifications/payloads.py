"""Webhook payload builders for clock-in and clock-out messages."""

from datetime import datetime
from typing import Any, Dict, List, Optional

EMBED_COLOR = 0x00ff88
NO_LOGS_MESSAGE = "No logs to display."


def _stamp(now: Optional[datetime]) -> str:
    """Date and time lines, e.g. ``Date: 10/17/2026`` / ``Time: 09:00:00 (UTC+0200)``."""
    if now is None:
        now = datetime.now().astimezone()
    date = now.strftime('%m/%d/%Y')
    time = now.strftime('%H:%M:%S (UTC%z)')
    return f"\nDate: {date}\nTime: {time}"


def _payload(bot_name: str, title: str, description: str) -> Dict[str, Any]:
    return {
        'username': bot_name,
        'embeds': [
            {
                'title': title,
                'description': description,
                'color': EMBED_COLOR,
            }
        ],
    }


def clock_in_payload(
    bot_name: str,
    username: str,
    now: Optional[datetime] = None
) -> Dict[str, Any]:
    """Build the clock-in message.

    Args:
        bot_name: Name the webhook posts under
        username: Person clocking in
        now: Timestamp to report, local time if omitted
    """
    return _payload(bot_name, f"{username} has clocked in!", _stamp(now))


def clock_out_payload(
    bot_name: str,
    username: str,
    total_time: str,
    logs: List[str],
    now: Optional[datetime] = None
) -> Dict[str, Any]:
    """Build the clock-out message with the session total and its logs.

    Args:
        bot_name: Name the webhook posts under
        username: Person clocking out
        total_time: Verbose elapsed time, e.g. ``1 Hours, 2 Minutes, 5 Seconds``
        logs: Session log entries in order
        now: Timestamp to report, local time if omitted
    """
    description = f"{_stamp(now)}\n\nTotal Logged Time: {total_time}\n\n"
    if logs:
        description += "Logs:\n" + "\n".join(logs)
    else:
        description += NO_LOGS_MESSAGE

    return _payload(bot_name, f"{username} has clocked out!", description)
