#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Index-space XOR transform driven by a validated key."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from attrs import define

from vernam.key import VernKey


def xor_fold(value: int, offsets: Sequence[int]) -> int:
    """
    XOR every offset into value, left to right.

    Args:
        value: Alphabet index of an input symbol
        offsets: Alphabet indices of the key symbols

    Returns:
        Folded alphabet index
    """
    for offset in offsets:
        value ^= offset
    return value


@define(frozen=True)
class KeyStream:
    """Offset sequence derived once from a key and applied to every symbol."""

    vern_key: VernKey
    index_key: tuple[int, ...]

    @classmethod
    def from_key(cls, vern_key: VernKey, reverse: bool = False) -> KeyStream:
        """Build the offset sequence for ``vern_key``.

        Decoding uses the reversed sequence. The fold is commutative so the
        output is the same either way.
        """
        index_key = [vern_key.symbol_to_index(symbol) for symbol in vern_key.key]
        if reverse:
            index_key.reverse()
        return cls(vern_key=vern_key, index_key=tuple(index_key))

    def apply_keystream(self, symbol: str) -> str:
        """Transform a single symbol."""
        index = self.vern_key.symbol_to_index(symbol)
        return self.vern_key.index_to_symbol(xor_fold(index, self.index_key))

    def transform(self, line: Iterable[str]) -> Iterator[str]:
        """Yield transformed symbols for ``line`` one at a time.

        Symbols already yielded stay yielded if a later symbol is rejected.
        """
        for symbol in line:
            yield self.apply_keystream(symbol)


def encode_line(line: Iterable[str], vern_key: VernKey) -> str:
    """Encode one line of symbols."""
    return "".join(KeyStream.from_key(vern_key).transform(line))


def decode_line(line: Iterable[str], vern_key: VernKey) -> str:
    """Decode one line of symbols.

    Since XOR is its own inverse, this is the same fold as encoding.
    """
    return "".join(KeyStream.from_key(vern_key, reverse=True).transform(line))


# 🌶️📦🔚
