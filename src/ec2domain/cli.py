from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any

import typer

from ec2domain import __version__
from ec2domain.errors import EC2DomainError
from ec2domain.loader import load_document
from ec2domain.log import configure_logging
from ec2domain.models import AttachmentStatus, Reservation
from ec2domain.ordering import NULL_POLICIES, NullPolicy, sort_attachments, sort_reservations
from ec2domain.parsing import parse_attachments, parse_reservations
from ec2domain.settings import RuntimeSettings
from ec2domain.utils.output import OUTPUT_FORMATS, OutputFormat, emit

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, add_completion=False, help="Compute API snapshot tools")
attachments_app = typer.Typer(no_args_is_help=True, help="Volume attachment snapshots")
reservations_app = typer.Typer(no_args_is_help=True, help="Reservation snapshots")
status_app = typer.Typer(no_args_is_help=True, help="Attachment status vocabulary")

app.add_typer(attachments_app, name="attachments")
app.add_typer(reservations_app, name="reservations")
app.add_typer(status_app, name="status")


class CLIState:
    def __init__(
        self,
        *,
        region: str | None,
        output: OutputFormat,
        null_timestamps: NullPolicy,
    ) -> None:
        self.region = region
        self.output = output
        self.null_timestamps = null_timestamps


def _state(ctx: typer.Context) -> CLIState:
    obj = ctx.obj
    if not isinstance(obj, CLIState):
        raise typer.BadParameter("CLI context was not initialized")
    return obj


def _output_format(value: str) -> OutputFormat:
    for candidate in OUTPUT_FORMATS:
        if candidate == value:
            return candidate
    raise typer.BadParameter(f"output must be one of {', '.join(OUTPUT_FORMATS)}, got: {value}")


def _null_policy(value: str) -> NullPolicy:
    for candidate in NULL_POLICIES:
        if candidate == value:
            return candidate
    raise typer.BadParameter(f"nulls must be one of {', '.join(NULL_POLICIES)}, got: {value}")


def _log_level(value: str) -> str:
    level = value.upper()
    if level not in logging.getLevelNamesMapping():
        raise typer.BadParameter(f"unknown log level: {value}")
    return level


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ec2domain {__version__}")
        raise typer.Exit()


def _reservation_row(reservation: Reservation) -> dict[str, Any]:
    return {
        "reservation_id": reservation.reservation_id,
        "region": str(reservation.region),
        "owner_id": reservation.owner_id,
        "requester_id": reservation.requester_id,
        "group_ids": sorted(reservation.group_ids),
        "instances": sorted(str(instance.instance_id) for instance in reservation.instances),
    }


@app.callback()
def main(
    ctx: typer.Context,
    region: Annotated[str | None, typer.Option("--region", "-r", help="Region the documents were captured in")] = None,
    output: Annotated[str | None, typer.Option("--output", "-o", help="Output format: json, yaml or table")] = None,
    log_level: Annotated[str | None, typer.Option("--log-level", help="Logging level")] = None,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = None,
) -> None:
    _ = version
    settings = RuntimeSettings()
    configure_logging(_log_level(log_level or settings.log_level))
    ctx.obj = CLIState(
        region=region or settings.default_region,
        output=_output_format(output or settings.output),
        null_timestamps=settings.null_timestamps,
    )


@attachments_app.command("list")
def attachments_list(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Decoded describe-volumes response (json/yaml/toml)")],
    nulls: Annotated[
        str | None,
        typer.Option("--nulls", help="Placement of attachments without attach time: error, first or last"),
    ] = None,
) -> None:
    state = _state(ctx)
    policy = _null_policy(nulls or state.null_timestamps)
    attachments = parse_attachments(load_document(path), region=state.region)
    ordered = sort_attachments(attachments, nulls=policy)
    logger.info("listing %d attachments from %s", len(ordered), path)
    emit(ordered, output=state.output, title="Attachments")


@reservations_app.command("list")
def reservations_list(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Decoded describe-instances response (json/yaml/toml)")],
) -> None:
    state = _state(ctx)
    reservations = sort_reservations(parse_reservations(load_document(path), region=state.region))
    logger.info("listing %d reservations from %s", len(reservations), path)
    if state.output == "table":
        emit([_reservation_row(item) for item in reservations], output="table", title="Reservations")
        return
    emit(reservations, output=state.output)


@status_app.command("parse")
def status_parse(
    ctx: typer.Context,
    token: Annotated[str, typer.Argument(help="Status token, any case")],
) -> None:
    state = _state(ctx)
    status = AttachmentStatus.from_token(token)
    emit({"name": status.name, "token": status.to_token()}, output=state.output)


def run() -> None:
    try:
        app()
    except EC2DomainError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    run()
