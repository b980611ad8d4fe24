"""Session state: the log store and the text prompt."""

from workwatch.session.logs import SessionLogs
from workwatch.session.prompt import Prompt, PromptState

__all__ = ['SessionLogs', 'Prompt', 'PromptState']
