"""Report rendering for distributor permission results.

ReportRenderer produces output in three formats:
- Plain text in the ``NAME Permissions:`` block layout (log friendly)
- Rich-formatted tables (for CLI use)
- JSON (for programmatic consumption)

Example
-------
::

    renderer = ReportRenderer()
    print(renderer.render_text(report))
"""
from __future__ import annotations

import io
import json

from rich.console import Console
from rich.table import Table

from distributor_permissions.evaluation.aggregator import Report

OUTPUT_FORMATS: tuple[str, ...] = ("text", "table", "json")


class ReportRenderer:
    """Renders a :class:`Report` in multiple output formats.

    Blocks are always emitted in report order, which is the distributor
    submission order.
    """

    def render(self, report: Report, output_format: str = "text") -> str:
        """Dispatch to the renderer for ``output_format``.

        Raises
        ------
        ValueError
            If ``output_format`` is not one of ``text``, ``table``, ``json``.
        """
        match output_format:
            case "text":
                return self.render_text(report)
            case "table":
                return self.render_table(report)
            case "json":
                return self.render_json(report)
            case _:
                raise ValueError(
                    f"Unknown output format {output_format!r}. "
                    f"Known formats: {list(OUTPUT_FORMATS)}."
                )

    # ------------------------------------------------------------------
    # Plain text rendering
    # ------------------------------------------------------------------

    def render_text(self, report: Report) -> str:
        """Render one ``NAME Permissions:`` block per distributor.

        Each decision line reads ``city, province, country: true|false``
        and blocks are separated by a blank line.
        """
        blocks: list[str] = []
        for block in report:
            lines = [f"{block.distributor_name} Permissions:"]
            for result in block:
                city, province, country = result.location
                decision = "true" if result.allowed else "false"
                lines.append(f"{city}, {province}, {country}: {decision}")
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks)

    # ------------------------------------------------------------------
    # Rich rendering
    # ------------------------------------------------------------------

    def render_table(self, report: Report) -> str:
        """Render one Rich table per distributor.

        Returns
        -------
        str
            Rich console output captured to a string.
        """
        output_buffer = io.StringIO()
        console = Console(file=output_buffer, highlight=False, width=120)

        if not len(report):
            console.print("[dim]No distributors evaluated.[/dim]")
            return output_buffer.getvalue()

        for block in report:
            table = Table(
                "City",
                "Province",
                "Country",
                "Allowed",
                title=(
                    f"{block.distributor_name} "
                    f"({block.allowed_count}/{len(block)} allowed)"
                ),
                show_header=True,
                header_style="bold cyan",
            )
            for result in block:
                city, province, country = result.location
                verdict = "[green]yes[/green]" if result.allowed else "[red]no[/red]"
                table.add_row(city, province, country, verdict)
            console.print(table)

        return output_buffer.getvalue()

    # ------------------------------------------------------------------
    # JSON rendering
    # ------------------------------------------------------------------

    def render_json(self, report: Report) -> str:
        """Render the report as an indented JSON document."""
        return json.dumps(report.to_dict(), indent=2)
