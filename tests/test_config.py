"""Tests for configuration loading."""

import logging

import pytest

from workwatch.config import DEFAULT_POLL_SECONDS, DEFAULT_USERNAME, Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv('WORKWATCH_USERNAME', raising=False)
    monkeypatch.delenv('WORKWATCH_WEBHOOK', raising=False)


@pytest.fixture
def missing(tmp_path):
    return str(tmp_path / 'missing.toml')


class TestConfig:

    def test_defaults_when_file_missing(self, missing):
        config = Config(missing)
        assert config.bot_name == 'WorkWatch'
        assert config.poll_seconds == 1.0
        assert config.log_level == 'INFO'

    def test_missing_username_warns(self, missing, caplog):
        config = Config(missing)
        with caplog.at_level(logging.WARNING, logger='workwatch'):
            assert config.username == DEFAULT_USERNAME
        assert 'WORKWATCH_USERNAME' in caplog.text
        assert len(config.warnings) == 1

    def test_missing_webhook_warns(self, missing, caplog):
        config = Config(missing)
        with caplog.at_level(logging.WARNING, logger='workwatch'):
            assert config.webhook_url == ''
        assert 'WORKWATCH_WEBHOOK' in caplog.text

    def test_warnings_not_repeated(self, missing):
        config = Config(missing)
        config.username
        config.username
        assert len(config.warnings) == 1

    def test_environment(self, missing, monkeypatch):
        monkeypatch.setenv('WORKWATCH_USERNAME', 'Ada')
        monkeypatch.setenv('WORKWATCH_WEBHOOK', 'https://hook.example')
        config = Config(missing)
        assert config.username == 'Ada'
        assert config.webhook_url == 'https://hook.example'
        assert config.warnings == []

    def test_file_values(self, tmp_path):
        path = tmp_path / 'workwatch.toml'
        path.write_text(
            '[general]\n'
            'username = "Grace"\n'
            '[webhook]\n'
            'url = "https://file.example"\n'
            'bot_name = "Clock"\n'
            '[timer]\n'
            'poll_seconds = 0.5\n'
        )
        config = Config(str(path))
        assert config.username == 'Grace'
        assert config.webhook_url == 'https://file.example'
        assert config.bot_name == 'Clock'
        assert config.poll_seconds == 0.5
        # Sections missing from the file keep their defaults
        assert config.webhook_timeout == 10.0

    @pytest.mark.parametrize('poll', ['0', '0.0004', '-2', '"soon"'])
    def test_invalid_poll_interval_falls_back(self, tmp_path, caplog, poll):
        path = tmp_path / 'workwatch.toml'
        path.write_text(f'[timer]\npoll_seconds = {poll}\n')
        config = Config(str(path))
        with caplog.at_level(logging.WARNING, logger='workwatch'):
            assert config.poll_seconds == DEFAULT_POLL_SECONDS
        assert 'poll_seconds' in caplog.text
        assert len(config.warnings) == 1

    def test_short_poll_interval_kept(self, tmp_path):
        path = tmp_path / 'workwatch.toml'
        path.write_text('[timer]\npoll_seconds = 0.001\n')
        config = Config(str(path))
        assert config.poll_seconds == 0.001
        assert config.warnings == []

    def test_environment_beats_file(self, tmp_path, monkeypatch):
        path = tmp_path / 'workwatch.toml'
        path.write_text('[general]\nusername = "Grace"\n')
        monkeypatch.setenv('WORKWATCH_USERNAME', 'Ada')
        assert Config(str(path)).username == 'Ada'

    def test_broken_file_falls_back(self, tmp_path):
        path = tmp_path / 'workwatch.toml'
        path.write_text('[general\nusername = ')
        config = Config(str(path))
        assert config.bot_name == 'WorkWatch'

    def test_data_dir_created(self, tmp_path):
        path = tmp_path / 'workwatch.toml'
        data_dir = tmp_path / 'data'
        path.write_text(f'[general]\ndata_dir = "{data_dir.as_posix()}"\n')
        assert Config(str(path)).data_dir == data_dir
        assert data_dir.is_dir()

    def test_env_config_path(self, tmp_path, monkeypatch):
        path = tmp_path / 'custom.toml'
        path.write_text('[webhook]\nbot_name = "Env"\n')
        monkeypatch.setenv('WORKWATCH_CONFIG', str(path))
        assert Config().bot_name == 'Env'
