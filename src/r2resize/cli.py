"""r2resize CLI interface.

Commands:
- list: Show the available components
- render: Render a component to a standalone preview page or a fragment
- check: Verify that every theme file the components need is present
- init: Initialize r2resize configuration

Global options:
- --config: Path to configuration file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: JSON log lines
- --version: Show version and exit
"""

import json
from pathlib import Path
from typing import Annotated, Any

import typer
import yaml

from r2resize import __version__
from r2resize.config import create_default_config, get_config, load_config, set_config
from r2resize.errors import R2ResizeError
from r2resize.registry import get_registry
from r2resize.templates.renderer import get_renderer
from r2resize.themes.loader import get_theme_loader
from r2resize.utils.logging import configure_from_cli, get_logger

# Create Typer app
app = typer.Typer(
    name="r2resize",
    help="Resizable, split and expandable HTML containers",
    add_completion=False,
    no_args_is_help=True,
)

_logger = get_logger()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"r2resize {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output with timestamps",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress info messages (warnings and errors only)",
        ),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option(
            "--ci",
            help="Enable CI mode with JSON output",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """r2resize - resizable, split and expandable HTML containers.

    Render components to preview pages and check the bundled themes.
    """
    # Configure logging based on CLI flags
    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)

    # Load configuration and make it active for the components
    try:
        loaded = load_config(config_path=config)
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except (ValueError, yaml.YAMLError) as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(1)

    if loaded.config_path:
        _logger.debug(f"Loaded config from: {loaded.config_path}")
    set_config(loaded)


# =============================================================================
# list command
# =============================================================================


@app.command("list")
def list_components(
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output results as JSON",
        ),
    ] = False,
) -> None:
    """List the available components."""
    specs = get_registry().specs()

    if json_output:
        typer.echo(json.dumps([spec.to_dict() for spec in specs], indent=2))
        return

    width = max(len(spec.name) for spec in specs)
    for spec in specs:
        typer.echo(f"  {spec.name.ljust(width)}  [{spec.kind}] {spec.description}")


# =============================================================================
# render command
# =============================================================================


def parse_assignment(assignment: str) -> tuple[str, Any]:
    """Parse a KEY=VALUE option, reading VALUE as a YAML scalar.

    Examples:
        >>> parse_assignment("border_width_px=3")
        ('border_width_px', 3)
        >>> parse_assignment("bg_color=#ff0000")
        ('bg_color', '#ff0000')
    """
    key, sep, raw = assignment.partition("=")
    key = key.strip().replace("-", "_").replace(".", "_")
    if not sep or not key:
        raise typer.BadParameter(f"Expected KEY=VALUE, got: {assignment}", param_hint="--set")

    # "#" starts a YAML comment, so colors stay strings
    if raw.lstrip().startswith("#"):
        return key, raw.strip()
    try:
        value = yaml.safe_load(raw) if raw.strip() else None
    except yaml.YAMLError:
        value = raw
    # Numbers that do not print back as typed ("3.10", "010") stay strings
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if str(value) != raw.strip():
            value = raw.strip()
    return key, value


def parse_item(raw: str) -> dict[str, Any]:
    """Parse a card item given as a JSON (or YAML flow) mapping."""
    try:
        item = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise typer.BadParameter(f"Invalid item: {e}", param_hint="--item") from e
    if not isinstance(item, dict):
        raise typer.BadParameter(f"Item must be a mapping, got: {raw}", param_hint="--item")
    return item


def _positional_args(
    kind: str,
    name: str,
    content: list[str],
    items: list[str],
    ids: list[str],
) -> tuple[Any, ...]:
    """Build a component's positional arguments from the CLI values."""
    if kind == "split":
        if len(content) != 2:
            raise typer.BadParameter(
                f"{name} needs exactly two --content values (left and right)",
                param_hint="--content",
            )
        return tuple(content)
    if kind == "content":
        return tuple(content)
    if kind == "items":
        return tuple(parse_item(raw) for raw in items)
    if kind == "ids":
        return (ids,)

    if content or items or ids:
        _logger.warning(f"{name} takes no content; ignoring --content/--item/--id")
    return ()


@app.command()
def render(
    component: Annotated[
        str,
        typer.Argument(help="Component name (see `r2resize list`)"),
    ],
    content: Annotated[
        list[str] | None,
        typer.Option(
            "--content",
            help="Content text (repeat for several blocks or left/right panels)",
        ),
    ] = None,
    item: Annotated[
        list[str] | None,
        typer.Option(
            "--item",
            help='Card item as JSON, e.g. \'{"title": "A", "bg": "a.jpg"}\'',
        ),
    ] = None,
    image_id: Annotated[
        list[str] | None,
        typer.Option(
            "--id",
            help="Image container id (expand_image)",
        ),
    ] = None,
    assignments: Annotated[
        list[str] | None,
        typer.Option(
            "--set",
            "-s",
            help="Component option as KEY=VALUE (repeatable)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file path (default: stdout)",
        ),
    ] = None,
    save: Annotated[
        bool,
        typer.Option(
            "--save",
            help="Write to the configured output path",
        ),
    ] = False,
    fragment: Annotated[
        bool,
        typer.Option(
            "--fragment",
            help="Emit the component markup only, without a page around it",
        ),
    ] = False,
    title: Annotated[
        str | None,
        typer.Option(
            "--title",
            help="Preview page title (overrides config)",
        ),
    ] = None,
) -> None:
    """Render a component.

    Writes a standalone preview page (or the bare fragment with --fragment)
    to --output, to the configured output path with --save, or to stdout.
    """
    registry = get_registry()

    try:
        spec = registry.get(component)
    except R2ResizeError as e:
        _logger.error(str(e))
        raise typer.Exit(1)

    options = dict(parse_assignment(a) for a in assignments or [])
    args = _positional_args(spec.kind, spec.name, content or [], item or [], image_id or [])

    try:
        markup = registry.render(spec.name, *args, **options)
    except TypeError as e:
        _logger.error(f"Invalid options for {spec.name}: {e}")
        raise typer.Exit(1)
    except (R2ResizeError, ValueError) as e:
        _logger.error(str(e))
        raise typer.Exit(1)

    if output is None and save:
        output = Path(get_config().output.path)

    renderer = get_renderer()
    if output is not None:
        if fragment:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(str(markup), encoding="utf-8")
        else:
            renderer.render_to_file(output, markup, title=title)
        _logger.info(f"Rendered {spec.name} to {output}")
        return

    typer.echo(str(markup if fragment else renderer.render_page(markup, title=title)))


# =============================================================================
# check command
# =============================================================================


@app.command()
def check(
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output results as JSON",
        ),
    ] = False,
) -> None:
    """Verify the theme files used by the components.

    Exit codes:
        0: All theme files found
        1: One or more theme files missing
    """
    registry = get_registry()
    loader = get_theme_loader()

    results = []
    for theme in registry.required_themes():
        used_by = [spec.name for spec in registry.specs() if theme in spec.themes]
        results.append({"theme": theme, "available": loader.exists(theme), "used_by": used_by})

    missing = [r for r in results if not r["available"]]
    success = not missing

    if json_output:
        payload = {
            "success": success,
            "directory": str(loader.directory),
            "themes": results,
        }
        typer.echo(json.dumps(payload, indent=2))
    else:
        typer.echo(f"\nTheme directory: {loader.directory}\n")
        for r in results:
            status = "ok" if r["available"] else "MISSING"
            typer.echo(f"  [{status}] {r['theme']} ({', '.join(r['used_by'])})")
        typer.echo()
        if success:
            typer.echo("All theme files found")
        else:
            typer.echo(f"{len(missing)} theme file(s) missing")

    if not success:
        raise typer.Exit(1)


# =============================================================================
# init command
# =============================================================================


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite existing config",
        ),
    ] = False,
) -> None:
    """Initialize r2resize configuration.

    Creates .r2resize/config.yaml with the default settings.
    """
    config_dir = Path(".r2resize")
    config_file = config_dir / "config.yaml"

    if config_file.exists() and not force:
        _logger.error(f"Config already exists: {config_file}")
        _logger.info("Use --force to overwrite")
        raise typer.Exit(1)

    config_dir.mkdir(exist_ok=True)
    config_file.write_text(create_default_config(), encoding="utf-8")
    _logger.info(f"Created config: {config_file}")

    typer.echo("r2resize configuration initialized")
    typer.echo(f"   Config: {config_file}")


if __name__ == "__main__":
    app()
