#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Index-space XOR cipher over user-defined alphabets."""

from __future__ import annotations

from provide.foundation.utils import get_version

from vernam.cipher import decode_text, encode_text, load_validated_key
from vernam.exceptions import (
    DuplicateAlphabetSymbolError,
    KeyLoadError,
    KeyOutOfAlphabetError,
    KeyValidationError,
    SymbolNotInAlphabetError,
    UnsupportedAlphabetSizeError,
    VernamError,
)
from vernam.key import VernKey, load_key
from vernam.stream import decode_stream, encode_stream
from vernam.transform import KeyStream, decode_line, encode_line

__version__ = get_version("vernam", caller_file=__file__)

__all__ = [
    "DuplicateAlphabetSymbolError",
    "KeyLoadError",
    "KeyOutOfAlphabetError",
    "KeyStream",
    "KeyValidationError",
    "SymbolNotInAlphabetError",
    "UnsupportedAlphabetSizeError",
    "VernKey",
    "VernamError",
    "__version__",
    "decode_line",
    "decode_stream",
    "decode_text",
    "encode_line",
    "encode_stream",
    "encode_text",
    "load_key",
    "load_validated_key",
]

# 🌶️📦🔚
