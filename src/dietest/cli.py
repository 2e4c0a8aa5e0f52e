from __future__ import annotations

import importlib
import os
import sys
from pathlib import Path
from typing import Callable

import typer

from dietest.config import SuiteConfig, UnexpectedErrorPolicy

app = typer.Typer(name="dietest", help="Run registered test series")


def _resolve_target(target: str) -> Callable:
    """Import ``module:function`` and return the function."""
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"target must look like 'module:function', got '{target}'")

    # console scripts do not put the working directory on sys.path
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    module = importlib.import_module(module_name)
    try:
        func = getattr(module, attr)
    except AttributeError:
        raise ValueError(f"module '{module_name}' has no attribute '{attr}'") from None
    if not callable(func):
        raise ValueError(f"'{target}' is not callable")
    return func


def _run_series(
    register: Callable,
    config: SuiteConfig,
    debug_log: Path | None,
    verbose: bool,
) -> None:
    from dietest.framework import Framework
    from dietest.verbose import setup_logger

    logger = setup_logger(debug_log, verbose=verbose)
    framework = Framework.from_config(config, logger=logger)
    register(framework)

    framework.display_greetings()
    framework.run()
    framework.display_summary()

    if not framework.all_passed:
        raise typer.Exit(1)


@app.command()
def run(
    target: str = typer.Argument(
        help="Registration function as module:function; it receives the Framework"
    ),
    config: str | None = typer.Option(None, help="Path to suite YAML config"),
    name: str | None = typer.Option(None, help="Series name (overrides config)"),
    purpose: str | None = typer.Option(None, help="Series purpose (overrides config)"),
    unexpected_errors: UnexpectedErrorPolicy | None = typer.Option(
        None,
        "--unexpected-errors",
        help="raise: abort on errors a test does not expect; fail: count them as failures",
    ),
    debug_log: str | None = typer.Option(None, help="Write debug log to this file"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Register a series through TARGET, run it and print the summary."""
    import yaml
    from pydantic import ValidationError

    from dietest.config import load_config

    values: dict = {}
    if config is not None:
        config_path = Path(config)
        if not config_path.exists():
            typer.echo(f"Error: config file not found: {config}", err=True)
            raise typer.Exit(1)
        try:
            values = load_config(config_path).model_dump()
        except (ValueError, ValidationError, yaml.YAMLError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    overrides = {
        "name": name,
        "purpose": purpose,
        "unexpected_errors": unexpected_errors,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    values.setdefault("name", target)

    try:
        suite_config = SuiteConfig(**values)
        register = _resolve_target(target)
    except (ImportError, ValueError, ValidationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    _run_series(
        register,
        suite_config,
        Path(debug_log) if debug_log else None,
        verbose,
    )


@app.command()
def demo(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Run the built-in "hello kitty" series."""
    from dietest import demo as demo_series

    config = SuiteConfig(name=demo_series.NAME, purpose=demo_series.PURPOSE)
    _run_series(demo_series.register, config, None, verbose)
