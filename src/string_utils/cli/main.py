"""
Command-line interface for string_utils.
"""
import logging
from pathlib import Path
from typing import Optional

import click

from ..core.config import Config
from ..core.exceptions import StringUtilsError
from ..utils.normalize import normalize as normalize_text
from ..utils.normalize import validate as validate_text
from ..utils import transforms
from ..utils.reveal import reveal as reveal_text
from .table_command import execute_table_command

CASE_STYLES = {
    "camel": transforms.to_camel_case,
    "pascal": transforms.to_pascal_case,
    "snake": transforms.to_snake_case,
    "kebab": transforms.to_kebab_case,
    "title": transforms.to_title_case,
    "words": transforms.capitalize_words,
}


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, verbose, debug):
    """String normalization, validation and table rendering tools."""
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Store config in context
    try:
        config = Config.from_dotenv()
        config.validate()
        ctx.obj["config"] = config
    except (StringUtilsError, ValueError) as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)

    # Configure logging; command-line flags win over the environment
    if debug or verbose:
        logging.basicConfig(
            level=logging.DEBUG if debug else logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    else:
        config.setup_logging()


@cli.command()
@click.argument("text")
@click.option("--strict", is_flag=True, help="Keep letters and digits only")
@click.option(
    "--strip-escapes", is_flag=True, help="Remove terminal color/cursor codes"
)
def normalize(text, strict, strip_escapes):
    """Print the normalized form of TEXT."""
    click.echo(normalize_text(text, strict=strict, strip_escapes=strip_escapes))


@cli.command()
@click.argument("text")
@click.pass_context
def validate(ctx, text):
    """Exit with status 1 unless TEXT is a meaningful string."""
    if validate_text(text):
        click.echo("valid")
    else:
        click.echo("invalid", err=True)
        ctx.exit(1)


@cli.command()
@click.argument("text")
def slugify(text):
    """Turn TEXT into a URL-friendly slug."""
    click.echo(transforms.slugify(text))


@cli.command()
@click.argument("text")
@click.option(
    "--to",
    "style",
    required=True,
    type=click.Choice(sorted(CASE_STYLES)),
    help="Target case style",
)
def case(text, style):
    """Convert TEXT to another case style."""
    click.echo(CASE_STYLES[style](text))


@cli.command()
@click.argument("text")
@click.argument("length", type=click.IntRange(0, None))
@click.option(
    "--preserve-words", is_flag=True, help="Do not cut words in half"
)
def truncate(text, length, preserve_words):
    """Shorten TEXT to LENGTH characters, adding "..." when cut."""
    click.echo(transforms.truncate(text, length, preserve_words))


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
def table(source):
    """Render a JSON array of records (from SOURCE or stdin) as a table."""
    execute_table_command(source)


@cli.command()
@click.argument("text")
@click.option(
    "--delay",
    "-d",
    default=None,
    type=click.IntRange(0, None),
    help="Delay per character in milliseconds",
)
@click.pass_context
def reveal(ctx, text, delay: Optional[int]):
    """Print TEXT one character at a time."""
    config = ctx.obj["config"]
    reveal_text(text, config.reveal_delay_ms if delay is None else delay)


@cli.command()
@click.pass_context
def config_info(ctx):
    """Display configuration information."""
    config = ctx.obj["config"]

    click.echo("⚙️  Configuration:")
    click.echo(f"  Log level: {config.log_level}")
    click.echo(f"  Reveal delay: {config.reveal_delay_ms} ms")
    click.echo(f"  Debug: {'✅ On' if config.debug else '❌ Off'}")

    # Check for .env file
    env_file = Path(".env")
    if env_file.exists():
        click.echo("  Environment file: ✅ Found (.env)")
    else:
        click.echo("  Environment file: ❌ Not found (.env)")


if __name__ == "__main__":
    cli()
