#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Line-oriented stream driver for the cipher."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

from provide.foundation import logger

from vernam.config.defaults import LINE_TERMINATOR
from vernam.key import VernKey
from vernam.transform import KeyStream


def iter_symbols(reader: TextIO) -> Iterator[str]:
    """Yield the symbols of ``reader`` one character at a time."""
    while True:
        symbol = reader.read(1)
        if not symbol:
            return
        yield symbol


def iter_lines(reader: TextIO) -> Iterator[Iterator[str]]:
    """Split ``reader`` into lines of symbols without the terminator.

    Each yielded line must be consumed before asking for the next one.
    End of input with no pending symbols ends the iteration.
    """
    symbols = iter_symbols(reader)
    while True:
        first = next(symbols, None)
        if first is None:
            return
        yield _line_from(first, symbols)


def _line_from(first: str, symbols: Iterator[str]) -> Iterator[str]:
    symbol: str | None = first
    while symbol is not None and symbol != LINE_TERMINATOR:
        yield symbol
        symbol = next(symbols, None)


def process_stream(reader: TextIO, writer: TextIO, keystream: KeyStream) -> int:
    """Transform every line of ``reader`` into ``writer``.

    Output is flushed after each line. When a symbol is rejected, whatever
    was already written for that line is flushed before the error
    propagates.

    Returns:
        Number of lines written
    """
    lines = 0
    for line in iter_lines(reader):
        try:
            for symbol in keystream.transform(line):
                writer.write(symbol)
        finally:
            writer.flush()
        writer.write(LINE_TERMINATOR)
        writer.flush()
        lines += 1

    logger.debug("Stream processed", lines=lines)
    return lines


def encode_stream(reader: TextIO, writer: TextIO, vern_key: VernKey) -> int:
    """Encode ``reader`` line by line into ``writer``."""
    return process_stream(reader, writer, KeyStream.from_key(vern_key))


def decode_stream(reader: TextIO, writer: TextIO, vern_key: VernKey) -> int:
    """Decode ``reader`` line by line into ``writer``."""
    return process_stream(reader, writer, KeyStream.from_key(vern_key, reverse=True))


# 🌶️📦🔚
