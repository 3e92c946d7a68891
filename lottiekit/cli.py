"""CLI interface."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from lottiekit.animation.presets import ANIMATION_PRESETS, UnknownPresetError, apply_preset
from lottiekit.canvas.registry import ObjectKind, SceneObject, SceneRegistry, Style
from lottiekit.lottie.serializer import ExportOptions, export_animation, to_json
from lottiekit.lottie.validator import format_validation_errors, validate_animation
from lottiekit.services.keyframe_store import KeyframeStore
from lottiekit.utils.config import settings

app = typer.Typer(add_completion=False)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")):
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def validate(file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Lottie JSON file.")):
    """Validate a Lottie JSON file."""
    try:
        document = json.loads(file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        typer.echo(f"Invalid JSON: {exc}", err=True)
        raise typer.Exit(code=2)
    result = validate_animation(document)
    if result.valid:
        typer.echo("valid")
        return
    typer.echo(format_validation_errors(result.errors), err=True)
    raise typer.Exit(code=1)


@app.command()
def presets():
    """List the animation preset catalog."""
    for preset in ANIMATION_PRESETS.values():
        typer.echo(f"{preset.name:<16} {preset.category:<8} {preset.description}")


@app.command()
def demo(
    preset: str = typer.Argument("fade-in"),
    kind: ObjectKind = typer.Option(ObjectKind.RECT, "--kind"),
    fill: Optional[str] = typer.Option("#3366ff", "--fill"),
    start_frame: int = typer.Option(0, "--start"),
    duration: int = typer.Option(30, "--duration"),
    name: str = typer.Option(settings.default_name, "--name"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON here instead of stdout."),
):
    """Export a one-object scene animated with a preset."""
    registry = SceneRegistry()
    obj = registry.register(SceneObject(id="obj_demo", kind=kind, style=Style(fill=fill)))
    store = KeyframeStore()
    try:
        keyframes = apply_preset(preset, obj.id, start_frame=start_frame, duration=duration)
    except UnknownPresetError as exc:
        raise typer.BadParameter(str(exc))
    store.set_duration(max(store.duration, start_frame + duration))
    for keyframe in keyframes:
        store.add_keyframe(keyframe)

    result = export_animation(store, registry, ExportOptions(name=name))
    if not result.success:
        typer.echo(result.error, err=True)
        raise typer.Exit(code=1)
    if result.validation_message:
        typer.echo(result.validation_message, err=True)
    if output is None:
        typer.echo(to_json(result.document))
        return
    output.write_text(to_json(result.document), encoding="utf-8")
    typer.echo(f"Wrote {output}")


if __name__ == "__main__":
    app()
