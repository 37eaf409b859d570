#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for vernam configuration."""

from __future__ import annotations

# =================================
# Key file defaults
# =================================
DEFAULT_KEY_FILE = "key.json"
KEY_FIELD_ALPHABET = "alphabet"
KEY_FIELD_KEY = "key"

# =================================
# Stream defaults
# =================================
LINE_TERMINATOR = "\n"

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# 🌶️📦🔚
