"""Console rendering of guide results with rich."""

from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from foldline.functional.transforms import filter_elements
from foldline.guide.examples import GuideResult, by_section

__all__ = ["build_table", "render_guide", "count_mismatches"]


def count_mismatches(results: List[GuideResult]) -> int:
    return len(filter_elements(results, lambda result: not result.matches))


def build_table(results: List[GuideResult]) -> Table:
    """Build a table with one row per result, grouped by section.

    Args:
        results: Evaluated guide examples, in guide order.

    Returns:
        A rich Table with section, example, expression, result and status
        columns. A section boundary is drawn between groups.
    """
    table = Table(title="Map, Filter, Reduce", show_lines=False)
    table.add_column("Section", style="bold cyan")
    table.add_column("Example")
    table.add_column("Expression", style="dim")
    table.add_column("Result")
    table.add_column("", justify="center")

    for section, section_results in by_section(results).items():
        for position, result in enumerate(section_results):
            table.add_row(
                section if position == 0 else "",
                result.example.title,
                Text(result.example.expression),
                Text(repr(result.actual)),
                "[green]ok[/green]" if result.matches else "[red]mismatch[/red]",
                end_section=position == len(section_results) - 1,
            )

    return table


def render_guide(
    results: List[GuideResult], console: Optional[Console] = None
) -> None:
    """Print the guide table to ``console`` (stdout by default)."""
    console = console or Console()
    console.print(build_table(results))
