"""CLI entrypoint for estate-watch: typer app with `run` and `config` commands."""

import logging
import sys
from pathlib import Path
from typing import TextIO

import structlog
import typer

from estate_watch.agency.infrastructure.reporter import StructlogIntermediaryReporter
from estate_watch.buyer.infrastructure.reporter import StructlogCustomerReporter
from estate_watch.config.domain.scenario import ScenarioConfig
from estate_watch.config.infrastructure.reporter import StructlogConfigReporter
from estate_watch.config.infrastructure.yaml_loader import YamlConfigLoader
from estate_watch.core.errors import EstateWatchError
from estate_watch.listing.infrastructure.reporter import StructlogRealEstateReporter
from estate_watch.scenario.application.runner import ScenarioRunner
from estate_watch.scenario.domain.result import ScenarioResult
from estate_watch.scenario.infrastructure.registry import ObserverReporters
from estate_watch.scenario.infrastructure.reporter import StructlogScenarioReporter

app = typer.Typer(add_completion=False)


def _configure_structlog(
    log_format: str, verbose: bool, file: TextIO | None = None
) -> None:
    """Configure structlog based on the requested format and verbosity."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=file),
    )


def _load_config(config_path: Path | None) -> ScenarioConfig:
    if config_path is None:
        return ScenarioConfig()
    loader = YamlConfigLoader(reporter=StructlogConfigReporter())
    return loader.load(path=config_path)


def _print_summary(result: ScenarioResult) -> None:
    typer.echo("")
    typer.echo(f"Scenario: {result.name}")
    typer.echo(f"  Observers: {', '.join(result.observer_types)}")
    typer.echo(f"  Notification rounds: {result.notification_rounds}")
    typer.echo(f"  Finished: {result.finished}")
    for idx, customer in enumerate(result.customers):
        typer.echo(
            f"  Customer {idx}: {customer.state.value},"
            f" balance {customer.balance} after {customer.withdrawals} withdrawals"
        )


@app.command()
def run(
    config_path: Path | None = typer.Argument(
        None, help="Path to scenario config YAML (defaults to the built-in demo)"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Include debug-level events"
    ),
) -> None:
    """Run a scenario: register observers and write the `finished` flag."""
    _configure_structlog(log_format=log_format, verbose=verbose)
    try:
        scenario_config = _load_config(config_path=config_path)
        runner = ScenarioRunner(
            config=scenario_config,
            real_estate_reporter=StructlogRealEstateReporter(),
            observer_reporters=ObserverReporters(
                intermediary=StructlogIntermediaryReporter(),
                customer=StructlogCustomerReporter(),
            ),
            reporter=StructlogScenarioReporter(),
        )
        result = runner.run()

        if log_format != "json":
            _print_summary(result=result)

    except KeyboardInterrupt:
        typer.echo("Scenario interrupted.")
        sys.exit(1)
    except EstateWatchError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


@app.command()
def config(
    config_path: Path | None = typer.Argument(
        None, help="Path to scenario config YAML (defaults to the built-in demo)"
    ),
) -> None:
    """Print the resolved scenario config as JSON."""
    _configure_structlog(log_format="json", verbose=False, file=sys.stderr)
    try:
        resolved = _load_config(config_path=config_path)
    except EstateWatchError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc
    typer.echo(resolved.model_dump_json(indent=2))


if __name__ == "__main__":
    app()
