"""
deployer-kit — CLI entrypoint.

Usage:
    deployer-kit <pathToContract> [-o output] [-n name]
    deployer-kit src/Vault.sol
    deployer-kit src/Tokens.sol -n Token -o script/deployers
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from deployer_kit import __version__
from deployer_kit.core.observability.logging_config import resolve_level, setup_logging

DOCS_URL = "https://github.com/0xPolygon/deployer-kit"


class GenerateCommand(click.Command):
    """click command whose usage errors exit with status 1 instead of 2."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def _require_value(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    """Reject flag values that look like another flag (``-o -n``)."""
    if value is not None and value.startswith("-"):
        hint = "the path to a directory" if param.name == "output_dir" else "the name of the contract"
        raise click.BadParameter(f"requires {hint}, got '{value}'", ctx=ctx, param=param)
    return value


@click.command(
    cls=GenerateCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=f"Documentation can be found at {DOCS_URL}",
)
@click.version_option(__version__, "-v", "--version", prog_name="deployer-kit")
@click.argument("source_path", required=False, metavar="PATH_TO_CONTRACT")
@click.option(
    "-o",
    "--output",
    "output_dir",
    default=None,
    callback=_require_value,
    help="Output directory (default: script/deployers).",
)
@click.option(
    "-n",
    "--name",
    "contract_name",
    default=None,
    callback=_require_value,
    help="Name of the contract in case it differs from the file name "
    "(default: name of the contract file).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to deployer-kit.yml (default: auto-detect).",
)
@click.option("--no-build", is_flag=True, help="Skip the build step; use existing artifacts.")
@click.option("--no-format", is_flag=True, help="Skip formatting the generated file.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--verbose", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(
    ctx: click.Context,
    source_path: str | None,
    output_dir: str | None,
    contract_name: str | None,
    config_path: str | None,
    no_build: bool,
    no_format: bool,
    as_json: bool,
    verbose: bool,
    quiet: bool,
    debug: bool,
) -> None:
    """Generate a Foundry deployer script for a compiled contract.

    Reads the contract's ABI from the build output, wires its constructor
    and initialize arguments, and writes <Contract>Deployer.s.sol.
    """
    if source_path is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    setup_logging(level=resolve_level(debug=debug, verbose=verbose, quiet=quiet))

    from deployer_kit.core.config.loader import ConfigError, load_config
    from deployer_kit.core.models.request import GenerationRequest
    from deployer_kit.core.use_cases.generate import run_generate

    try:
        config = load_config(Path(config_path) if config_path else None)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    request = GenerationRequest(
        source_path=source_path,
        output_dir=output_dir,
        contract_name=contract_name,
    )
    result = run_generate(request, config, build=not no_build, fmt=not no_format)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if not result.ok:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    for warning in result.warnings:
        click.secho(f"⚠️  {warning}", fg="yellow", err=True)

    if not quiet:
        click.secho(f"✅ generated {result.output_path}", fg="green")


if __name__ == "__main__":
    cli()
