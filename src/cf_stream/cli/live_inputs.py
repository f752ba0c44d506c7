"""Typer CLI commands for Stream live inputs."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Annotated, Any, TypeVar

import httpx
import typer
from rich.table import Table

from cf_stream.api.models.live_input import RecordingConfig, RecordingMode
from cf_stream.cli.utils import console, exit_api_error, exit_error, run_async

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from pydantic import BaseModel

    from cf_stream.api.client import StreamClient
    from cf_stream.api.models.live_input import LiveInput, LiveInputListItem
    from cf_stream.api.models.video import Video

app = typer.Typer(help="Live input commands.")

T = TypeVar("T")

AccountIdOption = Annotated[
    str,
    typer.Option(
        "--account-id",
        "-a",
        envvar="CLOUDFLARE_ACCOUNT_ID",
        help="Account ID (defaults to CLOUDFLARE_ACCOUNT_ID).",
        show_default=False,
    ),
]
LiveInputIdArgument = Annotated[str, typer.Argument(help="Live input UID.")]
JsonOption = Annotated[bool, typer.Option("--json", help="Output as JSON.")]
CreatorOption = Annotated[
    str | None, typer.Option("--creator", help="Default creator for recorded videos.")
]
DeleteAfterDaysOption = Annotated[
    int | None,
    typer.Option("--delete-after-days", help="Delete recordings after this many days."),
]
MetaOption = Annotated[
    str | None, typer.Option("--meta", help='Metadata as a JSON object, e.g. \'{"name": "x"}\'.')
]
ModeOption = Annotated[
    RecordingMode | None, typer.Option("--recording-mode", help="Recording mode.")
]
SignedUrlsOption = Annotated[
    bool | None,
    typer.Option(
        "--require-signed-urls/--no-require-signed-urls",
        help="Require signed URLs for recordings.",
        show_default=False,
    ),
]
AllowedOriginOption = Annotated[
    list[str] | None,
    typer.Option("--allowed-origin", help="Allowed playback origin (repeatable)."),
]
TimeoutOption = Annotated[
    int | None,
    typer.Option("--timeout-seconds", help="Seconds to wait before ending a recording."),
]
LowLatencyOption = Annotated[
    bool | None,
    typer.Option(
        "--prefer-low-latency/--no-prefer-low-latency",
        help="Prefer low-latency playback.",
        show_default=False,
    ),
]


def _run(operation: Callable[[StreamClient], Awaitable[T]]) -> T:
    """Open a client from the environment, run `operation`, map errors to exit codes."""
    from cf_stream.api.client import StreamClient
    from cf_stream.api.exceptions import CloudflareAPIError, CloudflareError

    async def _go() -> T:
        try:
            client = StreamClient.from_env()
        except ValueError as e:
            exit_error(e)

        async with client:
            try:
                return await operation(client)
            except CloudflareAPIError as e:
                exit_api_error(e)
            except CloudflareError as e:
                exit_error(e)
            except httpx.HTTPError as e:
                exit_error(e)

    return run_async(_go())


def _echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2, default=str))


def _dump(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def _parse_meta(meta: str | None) -> dict[str, Any] | None:
    if meta is None:
        return None
    try:
        parsed = json.loads(meta)
    except json.JSONDecodeError:
        exit_error(ValueError(f"--meta is not valid JSON: {meta}"))
    if not isinstance(parsed, dict):
        exit_error(ValueError("--meta must be a JSON object"))
    return parsed


def _recording_from_options(
    mode: RecordingMode | None,
    require_signed_urls: bool | None,
    allowed_origins: list[str] | None,
    timeout_seconds: int | None,
) -> RecordingConfig | None:
    if (
        mode is None
        and require_signed_urls is None
        and not allowed_origins
        and timeout_seconds is None
    ):
        return None
    return RecordingConfig(
        mode=mode,
        require_signed_urls=require_signed_urls,
        allowed_origins=allowed_origins or None,
        timeout_seconds=timeout_seconds,
    )


def _render_live_input(live_input: LiveInput) -> None:
    table = Table(title=f"Live Input: {live_input.uid or '-'}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    if live_input.status is not None and live_input.status.current is not None:
        table.add_row("State", live_input.status.current.state or "-")
    else:
        table.add_row("State", "idle")
    if live_input.rtmps is not None:
        table.add_row("RTMPS URL", live_input.rtmps.url or "")
        table.add_row("RTMPS Key", live_input.rtmps.stream_key or "")
    if live_input.srt is not None:
        table.add_row("SRT URL", live_input.srt.url or "")
        table.add_row("SRT Stream ID", live_input.srt.stream_id or "")
    if live_input.web_rtc is not None:
        table.add_row("WebRTC URL", live_input.web_rtc.url or "")
    if live_input.web_rtc_playback is not None:
        table.add_row("WebRTC Playback", live_input.web_rtc_playback.url or "")
    if live_input.recording is not None and live_input.recording.mode is not None:
        mode = live_input.recording.mode
        table.add_row("Recording", mode.value if isinstance(mode, RecordingMode) else mode)
    if live_input.delete_recording_after_days is not None:
        table.add_row("Delete After (days)", str(live_input.delete_recording_after_days))
    table.add_row("Low Latency", "yes" if live_input.prefer_low_latency else "no")
    if live_input.default_creator:
        table.add_row("Creator", live_input.default_creator)
    if live_input.meta:
        table.add_row("Meta", json.dumps(live_input.meta, default=str))
    if live_input.created is not None:
        table.add_row("Created", live_input.created.isoformat())
    if live_input.modified is not None:
        table.add_row("Modified", live_input.modified.isoformat())

    console.print(table)


@app.command("list")
def live_inputs_list(
    account_id: AccountIdOption = "",
    include_counts: Annotated[
        bool, typer.Option("--include-counts", help="Ask the API to include counts.")
    ] = False,
    output_json: JsonOption = False,
) -> None:
    """List live inputs."""
    from cf_stream.api.models.live_input import ListLiveInputsParameters

    params = ListLiveInputsParameters(account_id=account_id, include_counts=include_counts)
    items: list[LiveInputListItem] = _run(lambda client: client.list_live_inputs(params))

    if output_json:
        _echo_json([_dump(item) for item in items])
        return

    if not items:
        console.print("[yellow]No live inputs found.[/yellow]")
        return

    table = Table(title="Live Inputs")
    table.add_column("UID", style="cyan")
    table.add_column("Name")
    table.add_column("Created")
    table.add_column("Delete After (days)", justify="right")
    for item in items:
        name = (item.meta or {}).get("name", "")
        table.add_row(
            item.uid or "",
            str(name),
            item.created.isoformat() if item.created else "",
            str(item.delete_recording_after_days)
            if item.delete_recording_after_days is not None
            else "",
        )
    console.print(table)


@app.command("get")
def live_inputs_get(
    live_input_id: LiveInputIdArgument,
    account_id: AccountIdOption = "",
    output_json: JsonOption = False,
) -> None:
    """Get a live input by UID."""
    from cf_stream.api.models.live_input import LiveInputParameters

    params = LiveInputParameters(account_id=account_id, live_input_id=live_input_id)
    live_input: LiveInput = _run(lambda client: client.get_live_input(params))

    if output_json:
        _echo_json(_dump(live_input))
        return
    _render_live_input(live_input)


@app.command("create")
def live_inputs_create(
    account_id: AccountIdOption = "",
    creator: CreatorOption = None,
    delete_after_days: DeleteAfterDaysOption = None,
    meta: MetaOption = None,
    recording_mode: ModeOption = None,
    require_signed_urls: SignedUrlsOption = None,
    allowed_origin: AllowedOriginOption = None,
    timeout_seconds: TimeoutOption = None,
    prefer_low_latency: LowLatencyOption = None,
    output_json: JsonOption = False,
) -> None:
    """Create a live input."""
    from cf_stream.api.models.live_input import CreateLiveInputParameters

    params = CreateLiveInputParameters(
        account_id=account_id,
        default_creator=creator,
        delete_recording_after_days=delete_after_days,
        meta=_parse_meta(meta),
        recording=_recording_from_options(
            recording_mode, require_signed_urls, allowed_origin, timeout_seconds
        ),
        prefer_low_latency=prefer_low_latency,
    )
    live_input: LiveInput = _run(lambda client: client.create_live_input(params))

    if output_json:
        _echo_json(_dump(live_input))
        return
    _render_live_input(live_input)


@app.command("update")
def live_inputs_update(
    live_input_id: LiveInputIdArgument,
    account_id: AccountIdOption = "",
    creator: CreatorOption = None,
    delete_after_days: DeleteAfterDaysOption = None,
    meta: MetaOption = None,
    recording_mode: ModeOption = None,
    require_signed_urls: SignedUrlsOption = None,
    allowed_origin: AllowedOriginOption = None,
    timeout_seconds: TimeoutOption = None,
    prefer_low_latency: LowLatencyOption = None,
    output_json: JsonOption = False,
) -> None:
    """Update a live input."""
    from cf_stream.api.models.live_input import UpdateLiveInputParameters

    params = UpdateLiveInputParameters(
        account_id=account_id,
        live_input_id=live_input_id,
        default_creator=creator,
        delete_recording_after_days=delete_after_days,
        meta=_parse_meta(meta),
        recording=_recording_from_options(
            recording_mode, require_signed_urls, allowed_origin, timeout_seconds
        ),
        prefer_low_latency=prefer_low_latency,
    )
    live_input: LiveInput = _run(lambda client: client.update_live_input(params))

    if output_json:
        _echo_json(_dump(live_input))
        return
    _render_live_input(live_input)


@app.command("delete")
def live_inputs_delete(
    live_input_id: LiveInputIdArgument,
    account_id: AccountIdOption = "",
) -> None:
    """Delete a live input."""
    from cf_stream.api.models.live_input import LiveInputParameters

    params = LiveInputParameters(account_id=account_id, live_input_id=live_input_id)
    _run(lambda client: client.delete_live_input(params))
    console.print(f"[green]✓[/green] Deleted live input {live_input_id}")


@app.command("videos")
def live_inputs_videos(
    live_input_id: LiveInputIdArgument,
    account_id: AccountIdOption = "",
    output_json: JsonOption = False,
) -> None:
    """List videos recorded from a live input."""
    from cf_stream.api.models.live_input import LiveInputParameters

    params = LiveInputParameters(account_id=account_id, live_input_id=live_input_id)
    videos: list[Video] = _run(lambda client: client.list_live_input_videos(params))

    if output_json:
        _echo_json([_dump(video) for video in videos])
        return

    if not videos:
        console.print("[yellow]No videos found.[/yellow]")
        return

    table = Table(title=f"Videos: {live_input_id}")
    table.add_column("UID", style="cyan")
    table.add_column("State")
    table.add_column("Ready")
    table.add_column("Duration (s)", justify="right")
    table.add_column("Created")
    for video in videos:
        table.add_row(
            video.uid or "",
            (video.status.state or "") if video.status is not None else "",
            "yes" if video.ready_to_stream else "no",
            f"{video.duration:.1f}" if video.duration is not None else "",
            video.created.isoformat() if video.created else "",
        )
    console.print(table)
