"""Unit tests for Logfire settings resolution."""

import pytest

from colloquy.config import ObservabilitySettings, Settings
from colloquy.util.observability import should_send


def settings_with(**observability) -> Settings:
    return Settings(observability=ObservabilitySettings(**observability), _env_file=None)


class TestShouldSend:
    """Tests for should_send."""

    def test_console_only_without_token(self):
        assert should_send(settings_with()) is False

    def test_token_enables_sending(self):
        assert should_send(settings_with(logfire_token="pylf_v1_token")) is True

    @pytest.mark.parametrize("explicit", [True, False])
    def test_explicit_setting_wins(self, explicit):
        settings = settings_with(logfire_token="pylf_v1_token", send_to_logfire=explicit)

        assert should_send(settings) is explicit
