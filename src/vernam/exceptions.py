#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for vernam."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class VernamError(FoundationError):
    """Base exception for all vernam errors."""

    pass


class KeyLoadError(VernamError):
    """Raised when the key file is missing, unreadable or malformed."""

    pass


class KeyValidationError(VernamError):
    """Raised when a loaded key record fails validation."""

    pass


class KeyOutOfAlphabetError(KeyValidationError):
    """Raised when a key symbol is not part of the alphabet."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"key member '{symbol}' is out of the alphabet")


class DuplicateAlphabetSymbolError(KeyValidationError):
    """Raised when the alphabet lists the same symbol more than once."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"alphabet symbol '{symbol}' appears more than once")


class UnsupportedAlphabetSizeError(KeyValidationError):
    """Raised when the alphabet length is not a power of two."""

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"alphabet size {size} is not a power of two")


class SymbolNotInAlphabetError(VernamError):
    """Raised when an input symbol cannot be found in the alphabet."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"letter '{symbol}' is out of alphabet")


# 🌶️📦🔚
