#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""vernam configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from vernam.config.runtime import VernamRuntimeConfig, parse_log_level

__all__ = [
    "VernamRuntimeConfig",
    "parse_log_level",
]

# 🌶️📦🔚
