#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the runtime configuration."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from vernam.config import VernamRuntimeConfig, parse_log_level
from vernam.config.defaults import DEFAULT_KEY_FILE, DEFAULT_LOG_LEVEL


class TestParseLogLevel:
    """Test log level normalization."""

    @pytest.mark.parametrize("value", ["debug", " Info ", "WARNING", "trace"])
    def test_normalizes(self, value: str) -> None:
        assert parse_log_level(value) == value.strip().upper()

    def test_rejects_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level: loud"):
            parse_log_level("loud")


class TestVernamRuntimeConfig:
    """Test runtime configuration loading."""

    def test_defaults(self) -> None:
        config = VernamRuntimeConfig()
        assert config.log_level == DEFAULT_LOG_LEVEL
        assert config.key_file == DEFAULT_KEY_FILE

    @patch.dict(os.environ, {"VERNAM_LOG_LEVEL": "debug", "VERNAM_KEY_FILE": "/etc/vernam/key.json"})
    def test_from_env(self) -> None:
        config = VernamRuntimeConfig.from_env()
        assert config.log_level == "DEBUG"
        assert config.key_file == "/etc/vernam/key.json"

    def test_from_env_without_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("VERNAM_LOG_LEVEL", raising=False)
        monkeypatch.delenv("VERNAM_KEY_FILE", raising=False)
        config = VernamRuntimeConfig.from_env()
        assert config.log_level == DEFAULT_LOG_LEVEL
        assert config.key_file == DEFAULT_KEY_FILE


# 🌶️📦🔚
