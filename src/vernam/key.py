#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Alphabet and key model for the index-space XOR cipher."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from attrs import define, field
from provide.foundation import logger
from provide.foundation.errors import FoundationError
from provide.foundation.file.formats import read_json

from vernam.config.defaults import KEY_FIELD_ALPHABET, KEY_FIELD_KEY
from vernam.exceptions import (
    DuplicateAlphabetSymbolError,
    KeyLoadError,
    KeyOutOfAlphabetError,
    SymbolNotInAlphabetError,
    UnsupportedAlphabetSizeError,
)


def _is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


@define(frozen=True)
class VernKey:
    """An ordered alphabet paired with the key drawn from it.

    The record is immutable. It is not validated on construction; call
    :meth:`validate` once before handing it to the transform engine.
    """

    alphabet: tuple[str, ...] = field(converter=tuple)
    key: str

    def validate(self) -> None:
        """Check the key and alphabet are usable together.

        Raises:
            DuplicateAlphabetSymbolError: the alphabet repeats a symbol
            UnsupportedAlphabetSizeError: the alphabet length is not a power of two
            KeyOutOfAlphabetError: a key symbol is missing from the alphabet
        """
        seen: set[str] = set()
        for symbol in self.alphabet:
            if symbol in seen:
                raise DuplicateAlphabetSymbolError(symbol)
            seen.add(symbol)

        # XOR of two indices only stays inside [0, size) when size is 2**n
        if not _is_power_of_two(len(self.alphabet)):
            raise UnsupportedAlphabetSizeError(len(self.alphabet))

        for key_symbol in self.key:
            if key_symbol not in seen:
                raise KeyOutOfAlphabetError(key_symbol)

        logger.debug("Key validated", alphabet_size=len(self.alphabet), key_length=len(self.key))

    def symbol_to_index(self, symbol: str) -> int:
        """Return the alphabet position of ``symbol``."""
        for index, letter in enumerate(self.alphabet):
            if letter == symbol:
                return index
        raise SymbolNotInAlphabetError(symbol)

    def index_to_symbol(self, index: int) -> str:
        """Return the symbol at ``index``.

        Indices come from the transform engine and are always in range for a
        validated key; anything else is a programming error.
        """
        assert 0 <= index < len(self.alphabet), f"alphabet index {index} out of range"
        return self.alphabet[index]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> VernKey:
        """Build a key record from a decoded key file.

        Only the first character of each alphabet entry is used. Fields other
        than ``alphabet`` and ``key`` are ignored.
        """
        if not isinstance(data, Mapping):
            raise KeyLoadError("key file must contain a JSON object")

        alphabet = data.get(KEY_FIELD_ALPHABET)
        if not isinstance(alphabet, list):
            raise KeyLoadError(f"'{KEY_FIELD_ALPHABET}' must be a list of strings")

        symbols = []
        for position, entry in enumerate(alphabet):
            if not isinstance(entry, str) or not entry:
                raise KeyLoadError(f"alphabet entry {position} must be a non-empty string")
            symbols.append(entry[0])

        key = data.get(KEY_FIELD_KEY)
        if not isinstance(key, str) or not key:
            raise KeyLoadError(f"'{KEY_FIELD_KEY}' must be a non-empty string")

        return cls(alphabet=symbols, key=key)


def load_key(key_file: Path) -> VernKey:
    """Read a key record from a JSON key file.

    The returned record is not validated.

    Raises:
        KeyLoadError: the file is missing, unreadable or malformed
    """
    key_path = Path(key_file)
    logger.debug("Loading key file", path=str(key_path))

    if not key_path.exists():
        raise KeyLoadError(f"key file '{key_path}' does not exist")
    if not key_path.is_file():
        raise KeyLoadError(f"key file '{key_path}' is not a regular file")

    try:
        data = read_json(key_path)
    except (OSError, ValueError, FoundationError) as e:
        raise KeyLoadError(f"cannot read key file '{key_path}': {e}") from e

    vern_key = VernKey.from_mapping(data)
    logger.debug("Key file loaded", path=str(key_path), alphabet_size=len(vern_key.alphabet))
    return vern_key


# 🌶️📦🔚
