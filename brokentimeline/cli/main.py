"""CLI interface for the broken-timeline story composer"""

import logging
import yaml
from pathlib import Path
from typing import Optional
import click
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.markup import escape

from brokentimeline.models import StoryInputs, ComposedStory, LAYER_DISPLAY
from brokentimeline.composer import StoryDraft
from brokentimeline.api import build_inputs
from brokentimeline.export import StoryExporter, FORMATS


console = Console()
err_console = Console(stderr=True)

# Answer that sets a field to the empty string
CLEAR_MARKER = "-"


def load_config() -> dict:
    """Load configuration from config.yaml"""
    config_path = Path(__file__).parent.parent.parent / "config" / "config.yaml"
    if not config_path.exists():
        console.print(f"[yellow]Warning: Config file not found at {config_path}[/yellow]")
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def configure_logging(config: dict) -> None:
    """Configure root logging from the ``logging`` section of config"""
    level = (config.get("logging") or {}).get("level", "WARNING")
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def render_story(story: ComposedStory) -> None:
    """Print one panel per segment followed by the full text"""
    console.print(Panel(
        "[bold]Gerador de Histórias · Linha do tempo quebrada[/bold]",
        subtitle=escape(story.inputs.title),
        border_style="green"
    ))

    for segment in story.segments:
        display = LAYER_DISPLAY[segment.layer]
        console.print(Panel(
            escape(segment.body),
            title=f"[bold]{escape(segment.title)}[/bold]",
            subtitle=display.label,
            border_style=display.color
        ))

    console.print()
    console.print(Panel(escape(story.full_text), title="Texto íntegro", border_style="white"))


def ask_field(draft: StoryDraft, name: str) -> None:
    """
    Prompt for one field and store the answer

    Enter keeps the current value; CLEAR_MARKER empties the field.
    """
    value = Prompt.ask(
        f"[bold]{StoryInputs.field_label(name)}[/bold] [dim]('{CLEAR_MARKER}' para limpar)[/dim]",
        default=getattr(draft.inputs, name),
        console=console
    )
    draft.set_field(name, "" if value.strip() == CLEAR_MARKER else value)


def collect_story_inputs(draft: StoryDraft) -> None:
    """Prompt for every field, keeping the current value as default"""
    console.print(Panel(
        "[bold]Brief do caos[/bold]\n"
        "Mude nomes, cenário e ponto de ruptura emocional.",
        border_style="green"
    ))
    for name in StoryInputs.field_names():
        ask_field(draft, name)


def edit_loop(draft: StoryDraft) -> None:
    """Change one field at a time, re-rendering after each edit"""
    names = StoryInputs.field_names()
    while True:
        console.print("\n[bold]Campos:[/bold]")
        for i, name in enumerate(names, 1):
            console.print(f"  {i}. {StoryInputs.field_label(name)}: {escape(getattr(draft.inputs, name))}")

        choice = Prompt.ask(
            "\n[bold]Campo para alterar (número ou nome, Enter para concluir)[/bold]",
            default="",
            console=console
        )
        if not choice:
            return

        # Parse field choice
        try:
            idx = int(choice) - 1
            name = names[idx] if 0 <= idx < len(names) else None
        except ValueError:
            name = choice if choice in names else None

        if name is None:
            console.print(f"[yellow]Campo desconhecido: {escape(choice)}[/yellow]")
            continue

        ask_field(draft, name)
        render_story(draft.compose())


@click.command()
@click.option("--title", type=str, help="Story title")
@click.option("--protagonist", type=str, help="Main character")
@click.option("--confidant", type=str, help="Character the protagonist trusts")
@click.option("--ambiguous-figure", type=str, help="Figure who may be guide or threat")
@click.option("--setting", type=str, help="Sacred setting")
@click.option("--chaos-trigger", type=str, help="Event that breaks the order")
@click.option("--spiritual-symbol", type=str, help="Object carrying the spiritual weight")
@click.option("--hidden-guilt", type=str, help="What the protagonist never confessed")
@click.option(
    "--interactive", "-i",
    is_flag=True,
    help="Prompt for every field and edit the story before finishing"
)
@click.option(
    "--output",
    type=click.Path(path_type=Path),
    help="Write the story to this file"
)
@click.option(
    "--format", "fmt",
    type=click.Choice(FORMATS, case_sensitive=False),
    help="Export format for --output"
)
@click.option("--copy", "copy_story", is_flag=True, help="Copy the full text to the clipboard")
@click.option("--json", "as_json", is_flag=True, help="Print the composed story as JSON")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to config file"
)
def main(
    title: Optional[str],
    protagonist: Optional[str],
    confidant: Optional[str],
    ambiguous_figure: Optional[str],
    setting: Optional[str],
    chaos_trigger: Optional[str],
    spiritual_symbol: Optional[str],
    hidden_guilt: Optional[str],
    interactive: bool,
    output: Optional[Path],
    fmt: Optional[str],
    copy_story: bool,
    as_json: bool,
    config: Optional[Path]
):
    """Broken-timeline story composer"""

    # Load config
    if config:
        with open(config, "r", encoding="utf-8") as f:
            app_config = yaml.safe_load(f) or {}
    else:
        app_config = load_config()
    configure_logging(app_config)

    overrides = {
        "title": title,
        "protagonist": protagonist,
        "confidant": confidant,
        "ambiguous_figure": ambiguous_figure,
        "setting": setting,
        "chaos_trigger": chaos_trigger,
        "spiritual_symbol": spiritual_symbol,
        "hidden_guilt": hidden_guilt,
    }
    try:
        draft = StoryDraft(build_inputs(app_config, overrides))
    except ValueError as e:
        raise click.ClickException(f"Invalid story inputs: {e}")

    if interactive:
        collect_story_inputs(draft)
        render_story(draft.compose())
        edit_loop(draft)

    story = draft.compose()
    # Keep stdout a single JSON document
    status = err_console if as_json else console

    if as_json:
        click.echo(story.model_dump_json(indent=2))
    elif not interactive:
        render_story(story)

    if output:
        export_config = app_config.get("export") or {}
        export_format = (fmt or export_config.get("format", "text")).lower()
        try:
            StoryExporter().export_to_file(story, output, export_format)
        except (OSError, ValueError) as e:
            raise click.ClickException(f"Failed to export story: {e}")
        status.print(f"Saved to: [cyan]{escape(str(output))}[/cyan]")

    if copy_story:
        if draft.copy_to_clipboard():
            status.print("[green]Copiado ✓[/green]")
        else:
            status.print("[yellow]Não foi possível copiar a história[/yellow]")


if __name__ == "__main__":
    main()
