"""
CLI entry point for Twig.

Modified: 2026-10-19
"""

import sys
import click
import yaml
from pathlib import Path
from twig import __version__
from twig.config.settings import Settings, configure_logging, get_config_dir
from twig.core.dispatch import build_keymap
from twig.core.exceptions import TwigError


config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to config file (default: ~/.config/twig/config.yaml)",
)


def _load_settings(config_path: Path) -> Settings:
    try:
        return Settings.load(config_path)
    except TwigError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """Twig - a terminal outliner."""
    pass


@cli.command()
@config_option
def tui(config_path: Path):
    """Launch the outline editor."""
    settings = _load_settings(config_path)
    try:
        import asyncio
        from twig.tui.app import run_app

        configure_logging(settings.logging)

        # Run the TUI
        asyncio.run(run_app(settings=settings))
    except KeyboardInterrupt:
        click.echo("\nGoodbye!")
    except TwigError as e:
        click.echo(f"✗ TUI error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"✗ TUI error: {e}", err=True)
        import traceback
        traceback.print_exc()
        sys.exit(1)


@cli.command()
@config_option
def keys(config_path: Path):
    """Show the active keybindings."""
    from twig.tui.keybindings import KeybindingRegistry

    settings = _load_settings(config_path)
    try:
        registry = KeybindingRegistry(build_keymap(settings.keys.bindings))
    except TwigError as e:
        click.echo(f"✗ Invalid key bindings: {e}", err=True)
        sys.exit(1)

    click.echo(registry.format_help_text())


@cli.command()
@config_option
def config(config_path: Path):
    """Show the effective configuration."""
    settings = _load_settings(config_path)

    click.echo(f"Twig v{__version__}")
    click.echo(f"Config Dir: {config_path.parent if config_path else get_config_dir()}")
    click.echo("")
    click.echo(yaml.safe_dump(settings.to_dict(), sort_keys=False, allow_unicode=True).rstrip())


if __name__ == "__main__":
    cli()
