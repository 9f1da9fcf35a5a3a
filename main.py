#!/usr/bin/env python3
"""
VenueRank - Venue quality rankings for Google Scholar result lines.
Usage: python main.py --input results.txt
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from analyzers.citation_extractor import CitationStrategy
from analyzers.venue_annotator import LineFormat, VenueAnnotator
from config import Config
from reporters.terminal_reporter import TerminalReporter
from utils.venue_data import load_ranking_index

console = Console()


def print_banner():
    banner = Text()
    banner.append("  V E N U E R A N K\n", style="bold cyan")
    banner.append("  CORE · SJR · JCR · h5 rankings for bibliographic lines", style="dim white")
    console.print(Panel(banner, border_style="cyan", padding=(0, 2)))


def parse_args(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(
        description="VenueRank — venue rankings for Scholar result lines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input: one bibliographic line per row, optionally followed by a TAB and the
citation popup text used as fallback (the MLA italic span, or the MLA HTML
with --mla).

Examples:
  python main.py --input results.txt
  python main.py --input profile.txt --format profile-row
  python main.py --input results.txt --data my_rankings.json --export out.json
  cat results.txt | python main.py --input -
        """
    )
    parser.add_argument("--input", "-i", required=True,
                        help="File with one bibliographic line per row, or - for stdin")
    parser.add_argument("--format", "-f", default=LineFormat.AUTHOR_LINE.value,
                        choices=[f.value for f in LineFormat],
                        help="Line format: search-result author line or profile venue row")
    parser.add_argument("--data", "-d", default=None,
                        help="Ranking payload JSON (default: bundled data or $VENUERANK_DATA)")
    parser.add_argument("--mla", action="store_true",
                        help="Citation column holds MLA HTML instead of plain italic text")
    parser.add_argument("--top", "-t", type=int, default=None,
                        help="Show only the first N lines")
    parser.add_argument("--export", "-e", default=None,
                        help="Export results to JSON file")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show per-line matching details")
    return parser.parse_args(argv)


def read_lines(source: str) -> list[str]:
    if source == "-":
        return sys.stdin.read().splitlines()
    path = Path(source)
    if not path.is_file():
        console.print(f"[red]✗ Input file not found: {source}[/red]")
        sys.exit(1)
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]✗ Could not read {source}: {e}[/red]")
        sys.exit(1)


def main(argv: Optional[list] = None):
    print_banner()
    args = parse_args(argv)
    config = Config()

    try:
        config.validate()
    except ValueError as e:
        console.print(f"[red]✗ Invalid configuration: {e}[/red]")
        sys.exit(1)

    index = load_ranking_index(Path(args.data) if args.data else config.rankings_path,
                               verbose=args.verbose)
    if not index.is_available:
        console.print("[yellow]⚠ Rankings unavailable — every venue will be reported as not ranked[/yellow]")

    lines = read_lines(args.input)

    annotator = VenueAnnotator(
        index,
        line_format=LineFormat(args.format),
        strategy=CitationStrategy.MLA_HTML if args.mla else CitationStrategy.ITALIC_TEXT,
        config=config,
        verbose=args.verbose,
    )
    results = annotator.annotate_all(lines)
    if not results:
        sys.exit(1)

    reporter = TerminalReporter(console)
    reporter.render(results, top_n=args.top)

    if args.export:
        reporter.export_json(results, args.export)
        console.print(f"\n[bold green]✓[/bold green] Results exported to [cyan]{args.export}[/cyan]")


if __name__ == "__main__":
    main()
