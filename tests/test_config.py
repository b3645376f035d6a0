# =============================================================================
# tests/test_config.py - Settings and Logging Tests
# =============================================================================

import logging

from user_directory.app.core.config import Settings
from user_directory.app.core.logging_config import setup_logging


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.host == "0.0.0.0"
        assert isinstance(settings.port, int)

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="https://a.example, https://b.example ,")
        assert settings.cors_origins_list == ["https://a.example", "https://b.example"]

    def test_empty_cors_origins_is_open(self):
        assert Settings(cors_origins=" ").cors_origins_list == ["*"]


class TestSetupLogging:

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging("WARNING")
        count = len(logging.getLogger().handlers)
        setup_logging("DEBUG")
        assert len(logging.getLogger().handlers) == count
        assert logging.getLogger().level == logging.DEBUG
        setup_logging("WARNING")
