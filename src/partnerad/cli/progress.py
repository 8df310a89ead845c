"""
Rich progress displays for CLI operations.

All output goes to stderr to preserve stdout for machine-readable output
(the saved image path).
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from partnerad.core.models import GenerationMode

# Console for stderr output (preserves stdout for machine output)
console = Console(stderr=True)

_MODE_NAMES = {
    GenerationMode.TEXT: "Creativity",
    GenerationMode.PRODUCT: "Product Boost",
}


@contextmanager
def generation_progress(
    mode: GenerationMode,
    model: str | None = None,
    image_count: int = 0,
) -> Iterator[None]:
    """
    Display a spinner while the ad is being generated.

    Args:
        mode: Generation mode of the request
        model: The image model being used
        image_count: Number of images sent with the prompt
    """
    progress = Progress(
        SpinnerColumn(spinner_name="dots"),
        TextColumn("[green]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )

    desc_parts = [f"Generating ad ({_MODE_NAMES[GenerationMode(mode)]})"]
    if model:
        model_display = model if len(model) <= 40 else f"{model[:37]}..."
        desc_parts.append(f"[dim]{model_display}[/dim]")
    if image_count:
        noun = "image" if image_count == 1 else "images"
        desc_parts.append(f"• [dim cyan]{image_count} {noun}[/dim cyan]")

    with progress:
        task = progress.add_task(" ".join(desc_parts), total=None)
        yield
        progress.update(task, completed=True)


def print_success_result(
    output_path: Path,
    generation_time: float,
    model_used: str,
    mode: GenerationMode,
    prompt_used: str,
    location_type: str | None = None,
    image_count: int = 0,
) -> None:
    """
    Print a panel with the saved path and generation details.

    Args:
        output_path: Path where the ad was saved
        generation_time: Time taken to generate (seconds)
        model_used: The model that generated the image
        mode: Generation mode of the request
        prompt_used: The partner's own text (may be empty in Product Boost)
        location_type: Business type, in Creativity mode
        image_count: Number of images sent with the prompt
    """
    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan", justify="right", vertical="top")
    table.add_column(style="white")

    table.add_row("Saved to", f"[bold green]{output_path}[/bold green]")
    table.add_row("Model", model_used)
    table.add_row("Time", f"{generation_time:.1f}s")
    table.add_row("Mode", _MODE_NAMES[GenerationMode(mode)])
    if location_type:
        table.add_row("Business", location_type)
    if image_count:
        table.add_row("Images", str(image_count))
    if prompt_used:
        table.add_row("Prompt", f"[dim]{prompt_used}[/dim]")

    panel = Panel(
        table,
        title="[bold green]✓ Ad Generated[/bold green]",
        border_style="green",
        padding=(1, 2),
    )

    console.print()
    console.print(panel)


def print_info(message: str) -> None:
    """Print an info message in cyan."""
    console.print(f"[cyan]ℹ[/cyan] {message}")


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(f"[red]✗[/red] {message}")
