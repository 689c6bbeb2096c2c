"""Command-line interface for stabver."""

from pathlib import Path
from typing import Annotated

import typer

from ..exceptions import VersionError
from ..types import Intent
from ..version import Version
from ._helpers import (
    console,
    print_candidates,
    print_error,
    print_success,
    version_table,
)
from .config import ConfigError, load_config, resolve_version

app = typer.Typer(help="Plan releases along the alpha, beta, rc, stable progression")

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to config file (stabver.toml or pyproject.toml)",
    ),
]

VersionArgument = Annotated[
    str | None,
    typer.Argument(help="Version to start from (default: configured version)"),
]


@app.command()
def show(
    version: VersionArgument = None,
    config: ConfigOption = None,
) -> None:
    """Show the fields of a version."""
    try:
        cfg = load_config(config)
        current = resolve_version(cfg, version)

        console.print(version_table(current, f"Version {cfg.format(current)}"))

    except (ConfigError, VersionError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def candidates(
    version: VersionArgument = None,
    config: ConfigOption = None,
) -> None:
    """List the versions that may follow a version."""
    try:
        cfg = load_config(config)
        current = resolve_version(cfg, version)

        console.print(
            f"[bold]Next versions for {cfg.format(current)}:[/bold]", highlight=False
        )
        print_candidates(current.next_candidates(), cfg.tag_prefix)

    except (ConfigError, VersionError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def increase(
    intent: Annotated[Intent, typer.Argument(help="Release intent")],
    version: VersionArgument = None,
    config: ConfigOption = None,
) -> None:
    """Print the version produced by applying a release intent.

    Examples:
        # Next beta of the configured version
        stabver increase beta

        # Promote a release candidate
        stabver increase stable 2.0.0-RC1
    """
    try:
        cfg = load_config(config)
        current = resolve_version(cfg, version)

        console.print(cfg.format(current.increase(intent)), highlight=False)

    except (ConfigError, VersionError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def check(
    proposed: Annotated[str, typer.Argument(help="Proposed next version")],
    from_version: Annotated[
        str | None,
        typer.Option(
            ..., "--from", "-f", help="Current version (default: configured version)"
        ),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Check that a proposed version is a valid next release."""
    try:
        cfg = load_config(config)
        current = resolve_version(cfg, from_version)
        target = Version.parse(proposed)

        if current.is_candidate(target):
            print_success(
                f"{cfg.format(target)} is a valid next version for "
                f"{cfg.format(current)}"
            )
            raise typer.Exit(0)

        print_error(
            f"{cfg.format(target)} is not a valid next version for "
            f"{cfg.format(current)}"
        )
        console.print("\n[bold]Expected one of:[/bold]")
        print_candidates(current.next_candidates(), cfg.tag_prefix)
        raise typer.Exit(1)

    except (ConfigError, VersionError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def compare(
    first: Annotated[str, typer.Argument(help="First version")],
    second: Annotated[str, typer.Argument(help="Second version")],
) -> None:
    """Compare two versions."""
    try:
        a = Version.parse(first)
        b = Version.parse(second)
    except VersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if a == b:
        operator = "="
    elif a < b:
        operator = "<"
    else:
        operator = ">"

    console.print(f"{a} {operator} {b}", highlight=False)


if __name__ == "__main__":
    app()
