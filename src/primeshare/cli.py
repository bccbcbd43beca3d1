"""Command line interface for splitting and combining secrets."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, TextIO, Tuple

import click

from primeshare import audit
from primeshare import policy as policy_module
from primeshare.combine import combine
from primeshare.encoding import decode_shares, encode_shares
from primeshare.errors import SecretSharingError
from primeshare.split import split

_logger = logging.getLogger(__name__)


def _audit(event: str, **details: object) -> None:
    if policy_module.policy.audit:
        audit.record_event(event, details=details)


@click.group()
@click.option("--log-level", default=None, help="Override PRIMESHARE_LOG_LEVEL.")
def main(log_level: Optional[str]) -> None:
    """Threshold secret sharing over GF(257)."""

    level = (log_level or policy_module.policy.log_level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))


@main.command("split")
@click.option(
    "-n",
    "--shares",
    "total_shares",
    type=int,
    default=lambda: policy_module.policy.default_shares,
    show_default="PRIMESHARE_DEFAULT_SHARES or 5",
)
@click.option(
    "-k",
    "--threshold",
    type=int,
    default=lambda: policy_module.policy.default_threshold,
    show_default="PRIMESHARE_DEFAULT_THRESHOLD or 3",
)
@click.option(
    "--secret-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read the secret from a file instead of prompting.",
)
def split_command(total_shares: int, threshold: int, secret_file: Optional[Path]) -> None:
    """Split a secret and print one encoded share per line."""

    if secret_file is not None:
        secret = secret_file.read_bytes()
    else:
        secret = click.prompt("Secret", hide_input=True).encode("utf-8")

    try:
        shares = split(secret, total_shares, threshold)
    except SecretSharingError as exc:
        raise click.ClickException(str(exc)) from exc

    _audit(
        "shares.split",
        total_shares=total_shares,
        threshold=threshold,
        secret_length=len(secret),
    )
    for line in encode_shares(shares):
        click.echo(line)


def _read_lines(stream: TextIO) -> list[str]:
    return [line.strip() for line in stream if line.strip()]


@main.command("combine")
@click.option("-k", "--threshold", type=int, required=True)
@click.option(
    "--input",
    "input_file",
    type=click.File("r"),
    default=None,
    help="File with one encoded share per line.",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the secret to a file instead of stdout.",
)
@click.argument("encoded", nargs=-1)
def combine_command(
    threshold: int,
    input_file: Optional[TextIO],
    output: Optional[Path],
    encoded: Tuple[str, ...],
) -> None:
    """Recover a secret from encoded shares (arguments, --input or stdin)."""

    lines = list(encoded)
    if input_file is not None:
        lines.extend(_read_lines(input_file))
    if not lines:
        lines = _read_lines(click.get_text_stream("stdin"))

    try:
        secret = combine(decode_shares(lines), threshold)
    except SecretSharingError as exc:
        _logger.debug("Combine failed: %s", exc)
        _audit("shares.combine_failed", threshold=threshold, supplied=len(lines), error=type(exc).__name__)
        raise click.ClickException(str(exc)) from exc

    _audit("shares.combined", threshold=threshold, supplied=len(lines), secret_length=len(secret))
    if output is not None:
        output.write_bytes(secret)
    else:
        click.get_binary_stream("stdout").write(secret)


if __name__ == "__main__":
    main()
