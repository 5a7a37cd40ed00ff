from __future__ import annotations

from pathlib import Path

import msgspec
import typer

from .config import CONFIG_NAME, ConfigError, GameConfig, format_config, load_config, save_config
from .paths import default_runtime_dir
from .sim import PlayerSnapshot, encode_snapshots, load_script, simulate
from .sprite import FRAME_HEIGHT, FRAME_WIDTH

app = typer.Typer(add_completion=False)


def _load_config_or_exit(path: Path) -> GameConfig:
    try:
        return load_config(path)
    except ConfigError as exc:
        typer.echo(f"invalid config: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _apply_overrides(config: GameConfig, **overrides: object) -> GameConfig:
    values = {name: getattr(config, name) for name in config.__struct_fields__}
    values.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return GameConfig(**values)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _format_snapshot(snapshot: PlayerSnapshot) -> str:
    pos = snapshot.position
    vel = snapshot.velocity
    return (
        f"{snapshot.tick:04d}  pos=({pos.x:8.3f}, {pos.y:8.3f})  "
        f"vel=({vel.x:6.3f}, {vel.y:6.3f})  "
        f"facing={snapshot.facing.value:5s}  frame={snapshot.frame}"
    )


@app.command("run")
def cmd_run(
    config_path: Path = typer.Option(Path(CONFIG_NAME), "--config", help="path to bardo.json"),
    width: int | None = typer.Option(None, help="window width (default: config)"),
    height: int | None = typer.Option(None, help="window height (default: config)"),
    fps: int | None = typer.Option(None, help="target fps (default: config)"),
    tick_rate: int | None = typer.Option(None, "--tick-rate", help="simulation ticks per second (default: config)"),
    sprite: Path | None = typer.Option(None, help="spritesheet png (default: config)"),
    base_dir: Path = typer.Option(
        default_runtime_dir(),
        "--base-dir",
        help="base path for runtime files (default: per-user OS data dir; override with BARDO_RUNTIME_DIR)",
    ),
    debug_log_enabled: bool = typer.Option(False, "--debug-log", help="write an event trace under base-dir/logs"),
) -> None:
    """Open the game window."""
    from .debug_log import close_debug_log, init_debug_log
    from .raylib_app import run_game

    config = _load_config_or_exit(config_path)
    config = _apply_overrides(
        config,
        width=width,
        height=height,
        fps=fps,
        tick_rate=tick_rate,
        sprite_path=str(sprite) if sprite is not None else None,
    )
    if debug_log_enabled:
        log_path = init_debug_log(
            base_dir=base_dir,
            width=config.width,
            height=config.height,
            tick_rate=config.tick_rate,
            sprite_path=config.sprite_path,
        )
        typer.echo(f"debug log: {log_path}")
    try:
        run_game(config, base_dir=config_path.parent)
    except (FileNotFoundError, RuntimeError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    finally:
        close_debug_log()


@app.command("simulate")
def cmd_simulate(
    script: Path = typer.Argument(..., help="JSON list of {tick, direction, pressed} key transitions"),
    ticks: int = typer.Option(40, min=0, help="number of ticks to simulate"),
    as_json: bool = typer.Option(False, "--json", help="print JSON"),
) -> None:
    """Run the player state machine headlessly from a key script."""
    if not script.is_file():
        typer.echo(f"script not found: {script}", err=True)
        raise typer.Exit(code=1)
    try:
        events = load_script(script)
    except msgspec.DecodeError as exc:
        typer.echo(f"invalid script: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    snapshots = simulate(events, ticks)
    if as_json:
        typer.echo(encode_snapshots(snapshots).decode("utf-8"))
        return
    for snapshot in snapshots:
        typer.echo(_format_snapshot(snapshot))


@app.command("sheet")
def cmd_sheet(
    out: Path = typer.Argument(Path("assets") / "bardo.png", help="output png path"),
    frame_width: int = typer.Option(FRAME_WIDTH, min=1, help="frame width in pixels"),
    frame_height: int = typer.Option(FRAME_HEIGHT, min=1, help="frame height in pixels"),
) -> None:
    """Write a placeholder 3x4 walk-cycle spritesheet."""
    from .assets import write_placeholder_sheet
    from .sprite import SpriteSheet

    sheet = SpriteSheet(frame_width=float(frame_width), frame_height=float(frame_height))
    path = write_placeholder_sheet(out, sheet)
    typer.echo(f"wrote {path}")


@app.command("config")
def cmd_config(
    path: Path = typer.Argument(Path(CONFIG_NAME), help="path to bardo.json"),
    write: bool = typer.Option(False, "--write", help="write the effective configuration back to path"),
) -> None:
    """Print the effective configuration."""
    config = _load_config_or_exit(path)
    if write:
        save_config(config, path)
    source = path if path.is_file() else "defaults"
    typer.echo(f"path: {source}")
    typer.echo(format_config(config))


def main(argv: list[str] | None = None) -> None:
    app(prog_name="bardo", args=argv)


if __name__ == "__main__":
    main()
