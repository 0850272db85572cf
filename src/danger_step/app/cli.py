from __future__ import annotations

import json

import typer
from pydantic import ValidationError

from .cli_formatter import format_config_report, format_input_error
from .config import AppConfig
from .main import create_container
from ..core.domain.exceptions import InstallError, StepError

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _load_config(log_level: str | None) -> AppConfig:
    try:
        config = AppConfig()
    except ValidationError as e:
        typer.echo(format_input_error(e), err=True)
        raise typer.Exit(code=1)

    if log_level:
        runtime = config.runtime.model_copy(update={"log_level": log_level.upper()})
        config = config.model_copy(update={"runtime": runtime})
    return config


@app.command()
def run(
    log_level: str = typer.Option(None, "--log-level", help="Log level (overrides DANGER_STEP_LOG_LEVEL)", case_sensitive=False),
):
    """Install Bundler and project gems, then run `bundle exec danger`."""
    config = _load_config(log_level)
    container, inputs = create_container(config)
    logger = container.logger()

    try:
        uc = container.run_step_uc()
        uc.execute(inputs=inputs)
    except InstallError as e:
        if e.spawn_failed:
            logger.error(f"Could not start installer: {e}")
        else:
            logger.error(str(e))
            if e.output:
                logger.error(e.output)
        raise typer.Exit(code=1)
    except StepError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)
    finally:
        container.shutdown_resources()


@app.command(name="show-config")
def show_config(
    json_output: bool = typer.Option(False, "--json", help="Output result as JSON"),
):
    """Show parsed step inputs (secrets masked) and the variables they export."""
    config = _load_config(None)
    container, inputs = create_container(config)

    try:
        report = container.show_config_uc().execute(inputs=inputs)
    finally:
        container.shutdown_resources()

    if json_output:
        typer.echo(json.dumps(report, ensure_ascii=False, indent=2))
    else:
        typer.echo(format_config_report(report))

    if report["error"]:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
