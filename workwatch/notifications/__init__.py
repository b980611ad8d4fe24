"""Notification package for WorkWatch."""

from workwatch.notifications.notifier import Notifier, WebhookNotifier, NullNotifier, create_notifier

__all__ = ['Notifier', 'WebhookNotifier', 'NullNotifier', 'create_notifier']
