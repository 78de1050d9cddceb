import logging

import click

from .collector import COORDINATOR, STRATEGIES
from .errors import CommunicationFailure, SerializationOverflow, UsageError
from .planner import plan
from .runner import EXECUTORS, Report, run_local, run_worker
from .verify import verify_fractional_digits


def _echo_report(report: Report, verify: bool):
    click.echo("=== BBP parallel pi ===")
    click.echo(f"workers: {report.workers}")
    click.echo(f"digits: {report.digits}")
    click.echo(f"terms: {report.terms}")
    click.echo(f"precision: {report.bits} bits")
    click.echo("")
    click.echo(report.text)
    click.echo("")
    click.echo(f"elapsed: {report.elapsed:.3f} s")
    if verify:
        ok, position = verify_fractional_digits(report.text)
        if not ok:
            raise click.ClickException(f"verification failed at decimal {position}")
        click.echo(f"verified: {position} decimals")


def _usage_error(endpoint, message: str):
    if endpoint is None or endpoint.rank == COORDINATOR:
        raise click.UsageError(message)
    raise SystemExit(2)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("digits", default=100, required=False, type=int)
@click.option("--workers", default=1, show_default=True, type=int, help="Group size, local transport only; under MPI the launcher sets it.")
@click.option("--transport", type=click.Choice(["local", "mpi"], case_sensitive=False), default="local", show_default=True)
@click.option("--executor", type=click.Choice(list(EXECUTORS), case_sensitive=False), default="process", show_default=True, help="Local transport only.")
@click.option("--strategy", type=click.Choice(list(STRATEGIES), case_sensitive=False), default="auto", show_default=True)
@click.option("--verify/--no-verify", default=False, show_default=True)
@click.option("-v", "--verbose", is_flag=True)
def main(digits: int, workers: int, transport: str, executor: str, strategy: str, verify: bool, verbose: bool):
    """Compute DIGITS decimals of pi with the BBP series."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(process)d %(name)s %(levelname)s %(message)s",
    )
    transport = transport.lower().strip()
    endpoint = None
    if transport == "mpi":
        from .mpi import world_endpoint

        endpoint = world_endpoint()
    try:
        plan(digits)
    except UsageError as exc:
        _usage_error(endpoint, str(exc))
    if endpoint is None and workers < 1:
        _usage_error(endpoint, "--workers must be >= 1")
    if endpoint is not None and workers != 1:
        _usage_error(endpoint, "--workers applies to the local transport only")
    try:
        if endpoint is None:
            report = run_local(digits, workers=workers, executor=executor, strategy=strategy)
        else:
            report = run_worker(endpoint, digits, strategy=strategy)
    except (CommunicationFailure, SerializationOverflow) as exc:
        if endpoint is not None:
            click.echo(f"Error: rank {endpoint.rank}: {exc}", err=True)
            endpoint.abort()
        raise click.ClickException(str(exc))
    if report is not None:
        _echo_report(report, verify)
