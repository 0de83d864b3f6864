"""
Storyboard Prompts - CLI

Command-line front end for the prompt engine.

Usage:
    storyboard-prompts master "A chef plating dessert" --style cinematic
    storyboard-prompts analyze "A person"
    storyboard-prompts scenes scenes.json --character mara.json -o out.json
"""

import json
from pathlib import Path
from typing import Any, Optional

import typer
from rich.table import Table

from core.config import get_defaults
from core.logging import get_console
from prompting.catalogs import get_prompt_template
from prompting.master_prompt import build_master_prompt, build_negative_prompt, enhance_existing_prompt
from prompting.scene_sequencer import build_character_consistent_scenes

console = get_console()

app = typer.Typer(
    name="storyboard-prompts",
    help="Compose engineered text-to-image prompts for storyboards",
    add_completion=False,
)


def _load_json(path: Path) -> Any:
    """Load a JSON file or exit with an error message."""
    if not path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON in {path}: {e}[/red]")
        raise typer.Exit(1)


# ============================================================================
# Commands
# ============================================================================


@app.command()
def master(
    scene: str = typer.Argument(..., help="Scene description"),
    content_type: Optional[str] = typer.Option(None, "--type", "-t", help="storyboard, character or scene"),
    style: Optional[str] = typer.Option(None, "--style", "-s", help="Visual style"),
    lighting: Optional[str] = typer.Option(None, "--lighting", "-l", help="Lighting preset"),
    camera: Optional[str] = typer.Option(None, "--camera", "-c", help="Camera angle"),
    character: Optional[str] = typer.Option(None, "--character", help="Character reference text"),
    force_character: bool = typer.Option(False, "--force-character", help="Lock character identity"),
) -> None:
    """
    Build a master prompt and its negative prompt.
    """
    defaults = get_defaults()
    resolved_type = content_type or defaults["content_type"]

    prompt = build_master_prompt(
        base_prompt=scene,
        content_type=resolved_type,
        visual_style=style or defaults["visual_style"],
        lighting=lighting or defaults["lighting"],
        camera_angle=camera or defaults["camera_angle"],
        priority=defaults["priority"],
        character_ref=character or "",
        force_character_inclusion=force_character,
    )
    negative = build_negative_prompt(resolved_type, has_character=bool(character))

    console.print("[bold cyan]Prompt:[/bold cyan]")
    console.print(prompt, markup=False, soft_wrap=True)
    console.print("\n[bold cyan]Negative:[/bold cyan]")
    console.print(negative, markup=False, soft_wrap=True)


@app.command()
def negative(
    content_type: str = typer.Option("storyboard", "--type", "-t", help="storyboard, character or scene"),
    character: bool = typer.Option(False, "--character/--no-character", help="Add identity terms"),
) -> None:
    """
    Build a negative prompt.
    """
    console.print(build_negative_prompt(content_type, has_character=character), markup=False, soft_wrap=True)


@app.command()
def analyze(
    prompt: str = typer.Argument(..., help="Existing prompt to analyze"),
    content_type: str = typer.Option("storyboard", "--type", "-t", help="storyboard, character or scene"),
    style: str = typer.Option("realistic", "--style", "-s", help="Visual style"),
    character: bool = typer.Option(False, "--character", help="Prompt features a character"),
    logo: bool = typer.Option(False, "--logo", help="Prompt needs a logo"),
) -> None:
    """
    Analyze an existing prompt and show its enhanced version.
    """
    result = enhance_existing_prompt(prompt, {
        "content_type": content_type,
        "visual_style": style,
        "has_character": character,
        "needs_logo": logo,
    })

    table = Table(title="Prompt Analysis")
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Confidence", f"{result.confidence:.2f}")
    for improvement in result.improvements:
        table.add_row("Suggestion", improvement)
    console.print(table)

    console.print("\n[bold cyan]Enhanced:[/bold cyan]")
    console.print(result.enhanced, markup=False, soft_wrap=True)
    console.print("\n[bold cyan]Negative:[/bold cyan]")
    console.print(result.negative, markup=False, soft_wrap=True)


@app.command()
def scenes(
    scenes_path: Path = typer.Argument(..., help="JSON file with a list of scenes"),
    character_path: Path = typer.Option(..., "--character", "-c", help="JSON file with the character"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output JSON path"),
) -> None:
    """
    Enhance every scene of a storyboard for one character.
    """
    scene_list = _load_json(scenes_path)
    if not isinstance(scene_list, list):
        console.print(f"[red]Expected a list of scenes in {scenes_path}[/red]")
        raise typer.Exit(1)

    character = _load_json(character_path)
    defaults = get_defaults()
    options = {key: defaults[key] for key in ("visual_style", "color_theme", "lighting", "camera_angle")}

    enhanced = build_character_consistent_scenes(scene_list, character, options)

    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        with open(out, "w", encoding="utf-8") as f:
            json.dump(enhanced, f, ensure_ascii=False, indent=2)
        console.print(f"[green]OK[/green] Wrote {len(enhanced)} scenes to {out}")
        return

    console.print(json.dumps(enhanced, ensure_ascii=False, indent=2), markup=False, soft_wrap=True)


@app.command()
def template(
    scenario: str = typer.Argument("news_story", help="Scenario name"),
) -> None:
    """
    Show a scenario prompt template.
    """
    result = get_prompt_template(scenario)
    console.print("[bold]Structure:[/bold]")
    console.print(result.structure, markup=False, soft_wrap=True)
    console.print("\n[bold]Example:[/bold]")
    console.print(result.example, markup=False, soft_wrap=True)


# ============================================================================
# Entry Point
# ============================================================================


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
