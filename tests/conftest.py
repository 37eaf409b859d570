#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for vernam tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
import json
from pathlib import Path
from typing import Any

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from vernam.key import VernKey


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def abcd_key() -> VernKey:
    """Four-symbol alphabet with key ``AB`` (fold value 1)."""
    return VernKey(alphabet=["A", "B", "C", "D"], key="AB")


@pytest.fixture
def key_file_factory(tmp_path: Path) -> Callable[[Any], Path]:
    """Factory to write key files for testing."""

    def _create_key_file(content: Any) -> Path:
        key_path = tmp_path / "key.json"
        if isinstance(content, str):
            key_path.write_text(content, encoding="utf-8")
        else:
            key_path.write_text(json.dumps(content), encoding="utf-8")
        return key_path

    return _create_key_file


@pytest.fixture
def abcd_key_file(key_file_factory: Callable[[Any], Path]) -> Path:
    """Key file matching :func:`abcd_key`."""
    return key_file_factory({"alphabet": ["A", "B", "C", "D"], "key": "AB"})


# 🌶️📦🔚
