#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Public API for the vernam cipher."""

from __future__ import annotations

import io
from pathlib import Path

from vernam.key import VernKey, load_key
from vernam.stream import decode_stream, encode_stream


def load_validated_key(key_file: Path) -> VernKey:
    """Load a key file and validate it.

    Args:
        key_file: Path to a JSON file with ``alphabet`` and ``key`` fields

    Returns:
        The validated key record

    Raises:
        KeyLoadError: If the key file cannot be read or parsed
        KeyValidationError: If the key does not fit the alphabet

    Example:
        ```python
        from pathlib import Path
        from vernam import encode_text, load_validated_key

        vern_key = load_validated_key(Path("key.json"))
        print(encode_text("CAB", vern_key))
        ```
    """
    vern_key = load_key(key_file)
    vern_key.validate()
    return vern_key


def encode_text(text: str, vern_key: VernKey) -> str:
    """Encode ``text`` line by line; every output line ends with a newline."""
    writer = io.StringIO()
    encode_stream(io.StringIO(text), writer, vern_key)
    return writer.getvalue()


def decode_text(text: str, vern_key: VernKey) -> str:
    """Decode ``text`` line by line; every output line ends with a newline."""
    writer = io.StringIO()
    decode_stream(io.StringIO(text), writer, vern_key)
    return writer.getvalue()


# 🌶️📦🔚
