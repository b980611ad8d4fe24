"""CLI commands for WorkWatch."""

from workwatch.app import WorkWatchApp
from workwatch.config import get_config
from workwatch.notifications import create_notifier
from workwatch.tui import run_tui
from workwatch.utils.logger import ROOT_LOGGER, setup_logger


def run_command(config_path: str | None = None, log_level: str | None = None):
    """Start the interactive tracker.

    Configuration warnings are printed before the terminal UI takes over;
    from then on WorkWatch logs to a file in its data directory.

    Args:
        config_path: Optional path to a workwatch.toml
        log_level: Overrides the configured log level
    """
    config = get_config(config_path)

    username = config.username
    notifier = create_notifier(config)

    log_file = config.data_dir / 'workwatch.log'
    setup_logger(ROOT_LOGGER, level=log_level or config.log_level, log_file=log_file)

    app = WorkWatchApp(username, notifier)
    run_tui(app, poll_seconds=config.poll_seconds)
