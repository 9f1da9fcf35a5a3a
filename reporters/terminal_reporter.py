"""
reporters/terminal_reporter.py
Rich-powered terminal output: annotated venue table with ranking badges,
CORE grade distribution, JSON export.
"""

import json
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.rule import Rule
from rich import box
from rich.padding import Padding

from rankers.distribution import CORE_GRADES, UNRANKED, RankingDistribution
from rankers.resolution_policy import Accepted


CORE_COLORS = {"A*": "bold white on green4", "A": "bold white on green3", "B": "bold black on yellow",
               "C": "bold white on grey50"}
SJR_COLORS = {"Q1": "bold white on dodger_blue3", "Q2": "bold white on steel_blue1",
              "Q3": "black on light_sky_blue1", "Q4": "black on light_cyan1"}
JCR_COLORS = {"Q1": "bold white on dark_orange3", "Q2": "bold white on orange3",
              "Q3": "black on light_salmon1", "Q4": "black on navajo_white1"}
H5_COLOR = "bold white on purple4"
DISTRIBUTION_COLORS = {"A*": "green4", "A": "green3", "B": "yellow", "C": "grey50", UNRANKED: "grey85"}
DISTRIBUTION_BAR_WIDTH = 40


def ranking_badges(entry) -> Text:
    """CORE / SJR / JCR / h5 badges for one ranking entry."""
    badges = Text()

    def add(label: str, style: str):
        if badges:
            badges.append(" ")
        badges.append(f" {label} ", style=style)

    if entry.core in CORE_COLORS:
        add(entry.core, CORE_COLORS[entry.core])
    if entry.sjr in SJR_COLORS:
        add(f"SJR {entry.sjr}", SJR_COLORS[entry.sjr])
    if entry.jcr in JCR_COLORS:
        add(f"JCR {entry.jcr}", JCR_COLORS[entry.jcr])
    if entry.h5:
        add(f"h5: {entry.h5}", H5_COLOR)
    return badges


def distribution_bar(dist: RankingDistribution, width: int = DISTRIBUTION_BAR_WIDTH) -> Text:
    """Stacked bar, one segment per grade, proportional to its share."""
    bar = Text()
    for grade in (*CORE_GRADES, UNRANKED):
        count = dist.counts[grade]
        if not count:
            continue
        cells = max(1, round(dist.percentage(grade) / 100 * width))
        bar.append("█" * cells, style=DISTRIBUTION_COLORS[grade])
    return bar


class TerminalReporter:
    def __init__(self, console: Console):
        self.console = console

    def render(self, results: list, top_n: Optional[int] = None):
        display = results[:top_n] if top_n else results
        self._render_results(display)
        self.console.print()
        self._render_distribution(RankingDistribution.from_outcomes(r.outcome for r in results))

    # ── Results ───────────────────────────────────────────────────────────────

    def _render_results(self, results: list):
        table = Table(
            title="VENUE RANKINGS",
            box=box.HEAVY_HEAD,
            border_style="cyan",
            header_style="bold white on dark_blue",
            show_lines=True,
            padding=(0, 1),
        )
        table.add_column("#", style="bold", width=4, justify="center")
        table.add_column("Detected venue", min_width=30)
        table.add_column("…", width=3, justify="center")
        table.add_column("Matched", min_width=24)
        table.add_column("Ranking", min_width=18)
        table.add_column("Match", width=20)

        for r in results:
            venue = Text(r.venue or "—", style="white" if r.venue else "dim")
            truncated = Text("✓" if r.is_truncated else "", style="yellow")

            if isinstance(r.outcome, Accepted):
                entry = r.outcome.entry
                matched = Text(entry.full_name or entry.key, style="bold white")
                matched.append(f"\n{entry.key} · {entry.venue_type.value}", style="dim")
                badges = ranking_badges(entry)
                match = Text(r.outcome.tier.value, style="cyan")
                if r.outcome.venue and r.outcome.venue != r.venue:
                    match.append("\nvia citation", style="dim cyan")
            else:
                matched = Text("—", style="dim")
                badges = Text("Not ranked", style="dim italic")
                match = Text(r.outcome.reason, style="dim")

            table.add_row(str(r.index), venue, truncated, matched, badges, match)

        self.console.print(table)
        self.console.print(
            "[dim]CORE: [green4]A*[/green4] > [green3]A[/green3] > [yellow]B[/yellow] > "
            "[grey50]C[/grey50]  | SJR / JCR quartiles Q1 (best) … Q4  | …: truncated by Scholar[/dim]"
        )

    # ── Distribution ──────────────────────────────────────────────────────────

    def _render_distribution(self, dist: RankingDistribution):
        if dist.total == 0:
            return

        self.console.print(Rule("[bold]CORE Ranking Distribution[/bold]", style="dim"))
        self.console.print(Padding(distribution_bar(dist), (1, 4, 0, 4)))

        table = Table(box=box.SIMPLE, show_header=False, padding=(0, 3))
        table.add_column("Grade", style="dim")
        table.add_column("Count", style="bold white", justify="right")
        table.add_column("Share", justify="right")
        for grade in (*CORE_GRADES, UNRANKED):
            count = dist.counts[grade]
            table.add_row(
                Text(grade, style=DISTRIBUTION_COLORS[grade]),
                str(count),
                f"[dim]{dist.percentage(grade):.0f}%[/dim]",
            )
        table.add_row("Ranked", f"{dist.ranked_total} / {dist.total}", "")
        self.console.print(Padding(table, (1, 4)))

    # ── JSON Export ───────────────────────────────────────────────────────────

    def export_json(self, results: list, path: str):
        output = {
            "results": [r.to_dict() for r in results],
            "distribution": RankingDistribution.from_outcomes(r.outcome for r in results).to_dict(),
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(output, f, indent=2, ensure_ascii=False, default=str)
