"""password-tool entrypoint for hashing and checking stored password records."""

from __future__ import annotations

import typer

from derived_key_passwords.application.services.password_codec import PasswordCodec
from derived_key_passwords.application.services.password_upgrade_service import (
    PasswordCheckOutcome,
    PasswordUpgradeService,
)
from derived_key_passwords.application.services.scheme_registry import UnknownPasswordSchemeError
from derived_key_passwords.config.settings import load_settings
from derived_key_passwords.infrastructure.logging import configure_logging
from derived_key_passwords.infrastructure.security.scheme_factory import build_password_codec

app = typer.Typer(
    name="password-tool",
    help="Hash and verify derived-key password records",
    add_completion=False,
)

_SCHEME_OPTION = typer.Option(
    None,
    "--scheme",
    "-s",
    help="Scheme name; defaults to PASSWORD_SCHEME",
)
_STDIN_OPTION = typer.Option(
    False,
    "--password-stdin",
    help="Read the password from the first line of stdin",
)


def _build_codec(scheme: str | None) -> PasswordCodec:
    try:
        return build_password_codec(load_settings(), scheme_name=scheme)
    except UnknownPasswordSchemeError as exc:
        raise typer.BadParameter(str(exc), param_hint="--scheme") from exc


def _read_password(*, from_stdin: bool, confirm: bool) -> str:
    if from_stdin:
        return typer.get_text_stream("stdin").readline().rstrip("\r\n")
    return typer.prompt("Password", hide_input=True, confirmation_prompt=confirm)


@app.callback()
def main() -> None:
    """Configure logging from settings before running a command."""

    configure_logging(level=load_settings().log_level)


@app.command("hash")
def hash_command(
    scheme: str | None = _SCHEME_OPTION,
    password_stdin: bool = _STDIN_OPTION,
) -> None:
    """Hash a password and print the record to store."""

    codec = _build_codec(scheme)
    password = _read_password(from_stdin=password_stdin, confirm=True)
    typer.echo(codec.hash_password(password))


@app.command("verify")
def verify_command(
    record: str = typer.Argument(..., help="Stored password record"),
    scheme: str | None = _SCHEME_OPTION,
    password_stdin: bool = _STDIN_OPTION,
    rehash: bool = typer.Option(
        False,
        "--rehash",
        help="Print an upgraded record when parameters are stale",
    ),
) -> None:
    """Check a password against a record; exit 1 when it does not match."""

    codec = _build_codec(scheme)
    password = _read_password(from_stdin=password_stdin, confirm=False)
    if not rehash:
        if not codec.verify_password(password=password, password_hash=record):
            typer.echo("password rejected")
            raise typer.Exit(code=1)
        typer.echo("password accepted")
        return

    result = PasswordUpgradeService(password_hasher=codec).check(
        password=password,
        password_hash=record,
    )
    if not result.accepted:
        typer.echo("password rejected")
        raise typer.Exit(code=1)

    typer.echo("password accepted")
    if result.outcome is PasswordCheckOutcome.ACCEPTED_REHASHED:
        typer.echo(result.password_hash)


@app.command("needs-rehash")
def needs_rehash_command(
    record: str = typer.Argument(..., help="Stored password record"),
    scheme: str | None = _SCHEME_OPTION,
) -> None:
    """Exit 0 when a record should be rehashed, 1 when it is current."""

    codec = _build_codec(scheme)
    if codec.needs_rehash(record):
        typer.echo("stale")
        return
    typer.echo("current")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
