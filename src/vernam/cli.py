#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""vernam command-line interface entrypoint."""

from __future__ import annotations

from pathlib import Path
import sys

from attrs import evolve
import click
from provide.foundation import TelemetryConfig, get_hub
from provide.foundation.console import perr
from provide.foundation.utils import get_version

from vernam.config import VernamRuntimeConfig
from vernam.console import get_command_logger
from vernam.exceptions import VernamError
from vernam.key import load_key
from vernam.stream import decode_stream, encode_stream

__version__ = get_version("vernam", caller_file=__file__)


def _initialize_foundation(runtime_config: VernamRuntimeConfig) -> None:
    """Initialize Foundation logging with vernam-specific settings."""
    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name="vernam",
        logging=evolve(
            base_telemetry.logging,
            default_level=runtime_config.log_level,  # type: ignore[arg-type]
        ),
    )
    # Replace any earlier auto-initialization, which keeps its own level otherwise
    get_hub().initialize_foundation(telemetry_config, force=True)


@click.command("vernam", context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="vernam",
    message="%(prog)s version %(version)s",
)
@click.option(
    "--key",
    "key_file",
    type=click.Path(path_type=Path),
    default=None,
    help="Key file (default: $VERNAM_KEY_FILE or key.json).",
)
@click.option(
    "--decode",
    is_flag=True,
    help="Decode standard input instead of encoding it.",
)
def cli(key_file: Path | None, decode: bool) -> None:
    """Index-space XOR cipher over standard input.

    Each line read from standard input is transformed with the alphabet and
    key from the key file and written to standard output.

    Configure logging via environment variables:
    - VERNAM_LOG_LEVEL: Set log level (trace, debug, info, warning, error)
    - VERNAM_KEY_FILE: Key file used when --key is not given
    """
    try:
        runtime_config = VernamRuntimeConfig.from_env()
    except ValueError as e:
        perr(f"Invalid configuration: {e}")
        raise click.Abort() from e

    _initialize_foundation(runtime_config)
    log = get_command_logger("cipher")

    if key_file is None:
        key_file = Path(runtime_config.key_file)

    mode = "decode" if decode else "encode"
    log.debug("Cipher started", key_file=str(key_file), mode=mode)

    try:
        vern_key = load_key(key_file)
        vern_key.validate()

        if decode:
            lines = decode_stream(sys.stdin, sys.stdout, vern_key)
        else:
            lines = encode_stream(sys.stdin, sys.stdout, vern_key)
    except VernamError as e:
        log.error("Cipher failed", error=str(e), key_file=str(key_file), mode=mode)
        perr(str(e))
        raise click.Abort() from e

    log.info("Cipher finished", lines=lines, mode=mode)


main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚
