"""Password generator CLI with interactive prompts, strength ratings and clipboard copy.

By default the `generate` command asks for every setting interactively; pass
`--cli-mode` to take the values from options (or `PASSGEN_*` environment
variables) instead.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Tuple

import typer

from common.cli_helpers import LOG_LEVELS, setup_logging
from common.clipboard_helpers import copy_to_clipboard
from common.exceptions import ClipboardError, InvalidRequest
from password_generator import (
    CharacterClassPolicy,
    GenerationRequest,
    RandomSource,
    SeededRandomSource,
    SystemRandomSource,
    generate as generate_password,
)
from password_strength import StrengthLabel, score

app = typer.Typer(help="Generate random passwords and rate their strength.")
logger = logging.getLogger(__name__)

RULE = "-" * 40
MIN_INTERACTIVE_LENGTH = 4


def styled_label(label: StrengthLabel) -> str:
    return typer.style(label.description, fg=label.color.replace(" ", "_"))


def prompt_policy(default: CharacterClassPolicy, err: bool) -> CharacterClassPolicy:
    """Ask for a password type until the answer names one."""
    choices = [p.value for p in CharacterClassPolicy]
    while True:
        value = typer.prompt(
            f"Select password type ({', '.join(choices)})",
            default=default.value,
            err=err,
        )
        if value in choices:
            return CharacterClassPolicy(value)
        typer.echo("Invalid selection, please try again.", err=True)


def prompt_int(text: str, default: int, minimum: int, error: str, err: bool) -> int:
    """Ask for an integer until it is at least `minimum`."""
    while True:
        value = typer.prompt(text, default=default, type=int, err=err)
        if value >= minimum:
            return value
        typer.echo(error, err=True)


def prompt_settings(
    length: int,
    policy: CharacterClassPolicy,
    count: int,
    complex_: bool,
    copy: bool,
    err: bool = False,
) -> Tuple[int, CharacterClassPolicy, int, bool, bool]:
    """Ask for each setting, offering the current values as defaults.

    With `err` set the prompts go to stderr, leaving stdout for output.
    """
    policy = prompt_policy(policy, err)
    length = prompt_int(
        "Enter password length",
        max(length, MIN_INTERACTIVE_LENGTH),
        MIN_INTERACTIVE_LENGTH,
        f"Length must be at least {MIN_INTERACTIVE_LENGTH} characters",
        err,
    )
    count = prompt_int(
        "How many passwords to generate?",
        max(count, 1),
        1,
        "Must generate at least 1 password",
        err,
    )
    complex_ = typer.confirm(
        "Enable password complexity requirements?", default=complex_, err=err
    )
    copy = typer.confirm(
        "Copy the last generated password to clipboard?", default=copy, err=err
    )
    return length, policy, count, complex_, copy


def print_settings(request: GenerationRequest, count: int, copy: bool) -> None:
    typer.echo("\nPassword Generation Settings:")
    typer.echo(f"Type: {request.policy.value}")
    typer.echo(f"Length: {request.length}")
    typer.echo(f"Count: {count}")
    typer.echo(f"Complex: {request.enforce_coverage}")
    typer.echo(f"Copy to clipboard: {copy}")
    typer.echo(RULE)


def copy_last(password: str, quiet: bool = False) -> None:
    try:
        copy_to_clipboard(password)
    except ClipboardError as ex:
        logger.debug(f"Clipboard copy failed: {ex}")
        typer.secho(f"Failed to copy to clipboard: {ex}", fg="red", err=True)
        typer.echo(f"You can manually copy this password: {password}", err=True)
        return
    typer.secho("Last password copied to clipboard!", fg="green", err=quiet)
    typer.echo(f"Password in clipboard: {password}", err=quiet)


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="PASSGEN_LOG_LEVEL",
        help=f"Logging verbosity ({', '.join(LOG_LEVELS)})",
        case_sensitive=False,
    ),
) -> None:
    """Global options for the CLI."""
    setup_logging(log_level)


@app.command()
def generate(
    length: int = typer.Option(
        12, "--length", "-l", envvar="PASSGEN_LENGTH", help="Length of the password"
    ),
    password_type: CharacterClassPolicy = typer.Option(
        CharacterClassPolicy.STANDARD,
        "--password-type",
        "-p",
        envvar="PASSGEN_PASSWORD_TYPE",
        help="Type of password to generate",
    ),
    count: int = typer.Option(
        1, "--count", "-n", min=1, envvar="PASSGEN_COUNT", help="Number of passwords"
    ),
    complex_: bool = typer.Option(
        True,
        "--complex/--no-complex",
        "-c/-N",
        help="Ensure at least one character from each required category",
    ),
    copy: bool = typer.Option(
        False, "--copy", help="Copy the last generated password to clipboard"
    ),
    cli_mode: bool = typer.Option(
        False, "--cli-mode", "-C", help="Use options instead of interactive prompts"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Random seed for reproducible (insecure) output"
    ),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON array"),
) -> None:
    """Generate passwords and show the strength of each."""
    if not cli_mode:
        length, password_type, count, complex_, copy = prompt_settings(
            length, password_type, count, complex_, copy, err=as_json
        )

    request = GenerationRequest(
        length=length, policy=password_type, enforce_coverage=complex_
    )

    rng: RandomSource
    if seed is not None:
        logger.warning("Seeded output is reproducible; do not use it for real secrets")
        rng = SeededRandomSource(seed)
    else:
        rng = SystemRandomSource()

    try:
        passwords = [generate_password(request, rng) for _ in range(count)]
    except InvalidRequest as ex:
        logger.error(str(ex))
        raise typer.Exit(code=2)

    if as_json:
        records: List[Dict[str, Any]] = []
        for pw in passwords:
            rating = score(pw)
            records.append(
                {
                    "password": pw,
                    "strength": rating.label.description,
                    "score": rating.score,
                }
            )
        typer.echo(json.dumps(records, indent=2))
    else:
        print_settings(request, count, copy)
        for i, pw in enumerate(passwords, start=1):
            rating = score(pw)
            typer.echo(f"Password {i}: {pw}")
            typer.echo(f"Strength: {styled_label(rating.label)}")
            typer.echo(RULE)

    if copy and passwords:
        copy_last(passwords[-1], quiet=as_json)


@app.command()
def check(
    password: str = typer.Argument(..., help="Password to rate"),
) -> None:
    """Rate the strength of an existing password."""
    rating = score(password)
    typer.echo(f"Strength: {styled_label(rating.label)} ({rating.score}/9)")


if __name__ == "__main__":
    app()
