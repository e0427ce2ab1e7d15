from __future__ import annotations

import json
from dataclasses import dataclass
from typing import NoReturn

import click

from mediatypes.config import ConfigError, MediaTypesConfig
from mediatypes.content_type import parse_content_type
from mediatypes.core.errors import MediaTypesError
from mediatypes.grammar import Grammar
from mediatypes.parsing import parse_media_type
from mediatypes.validation import is_media_type

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@dataclass
class Data:
    config: MediaTypesConfig
    grammar: Grammar

    __slots__ = ("config", "grammar")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--config-file",
    "config_file",
    help="The path to `mediatypes.toml` file to use for configuration",
    metavar="PATH",
    type=str,
)
@click.version_option(package_name="mediatypes")
@click.pass_context
def mediatypes(ctx: click.Context, config_file: str | None) -> None:
    """Validate, parse and compare RFC 6838 media types."""
    try:
        if config_file is not None:
            config = MediaTypesConfig.from_path(config_file)
        else:
            config = MediaTypesConfig.discover()
    except FileNotFoundError:
        click.secho(f"Failed to load configuration file from {config_file}", fg="red", bold=True)
        click.echo("\nThe configuration file does not exist")
        ctx.exit(1)
    except OSError as exc:
        click.secho(f"Failed to load configuration file from {config_file}", fg="red", bold=True)
        click.echo(f"\nThe configuration file cannot be read: {exc.strerror or exc}")
        ctx.exit(1)
    except ConfigError as exc:
        click.secho(
            f"Failed to load configuration file{f' from {config_file}' if config_file else ''}",
            fg="red",
            bold=True,
        )
        click.echo(f"\nThe loaded configuration is incorrect\n\n{exc}")
        ctx.exit(1)
    ctx.obj = Data(config=config, grammar=config.grammar)


def _fail(error: MediaTypesError) -> NoReturn:
    click.secho(str(error), fg="red", err=True)
    raise click.exceptions.Exit(1)


@mediatypes.command(short_help="Check that values are media types")
@click.argument("values", nargs=-1, required=True)
@click.pass_obj
def check(data: Data, values: tuple[str, ...]) -> None:
    """Exit with a non-zero code if any of VALUES is not a media type."""
    rejected = [value for value in values if not is_media_type(value, grammar=data.grammar)]
    for value in rejected:
        click.secho(f"Not a media type: `{value}`", fg="red")
    if rejected:
        raise click.exceptions.Exit(1)


@mediatypes.command(short_help="Print the parts of a media type as JSON")
@click.argument("value")
@click.pass_obj
def parse(data: Data, value: str) -> None:
    parts = parse_media_type(value, on_error=_fail, grammar=data.grammar)
    click.echo(json.dumps(parts.to_dict(), indent=2))


@mediatypes.command("content-type", short_help="Print a media type without its parameters")
@click.argument("value")
@click.pass_obj
def content_type(data: Data, value: str) -> None:
    click.echo(parse_content_type(value, on_error=_fail, grammar=data.grammar))


@mediatypes.command(short_help="Compare content types, ignoring parameters")
@click.argument("value")
@click.argument("expected", nargs=-1, required=True)
@click.pass_obj
def match(data: Data, value: str, expected: tuple[str, ...]) -> None:
    """Exit with a non-zero code unless VALUE has the same content type as one of EXPECTED."""
    # Not `matches_content_type`: `MediaType` always uses the default grammar, the configured one may differ
    content_type = parse_content_type(value, on_error=_fail, grammar=data.grammar)
    for candidate in expected:
        if parse_content_type(candidate, on_error=_fail, grammar=data.grammar) == content_type:
            click.echo(candidate)
            return
    raise click.exceptions.Exit(1)
