"""
analyzers/venue_annotator.py
Annotates bibliographic lines with venue rankings.

Pipeline per line:
  1. Extract a venue candidate (author-line or profile-row format)
  2. Match it against the ranking index (alias → conference → journal)
  3. Truncated and unmatched → unique prefix lookup
  4. Still unresolved → citation popup text, if the caller supplied one
  5. Otherwise → not ranked
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn

from analyzers.citation_extractor import CitationStrategy
from analyzers.venue_extractor import (
    VenueCandidate,
    detect_row_truncation,
    extract_candidate_from_author_line,
    extract_from_profile_row,
)
from config import Config
from rankers.resolution_policy import Accepted, NotRanked, Outcome, resolve_venue
from rankers.venue_matcher import MatchTier, VenueMatcher
from utils.venue_data import RankingIndex

console = Console(stderr=True)


class LineFormat(str, Enum):
    AUTHOR_LINE = "author-line"
    PROFILE_ROW = "profile-row"


@dataclass
class AnnotatedLine:
    raw: str
    citation_text: Optional[str]
    venue: Optional[str]          # Venue detected from the line itself
    is_truncated: bool
    outcome: Outcome
    index: int = 0

    @property
    def is_ranked(self) -> bool:
        return isinstance(self.outcome, Accepted)

    def to_dict(self) -> dict:
        record = {
            "index": self.index,
            "raw": self.raw,
            "venue": self.venue,
            "truncated": self.is_truncated,
            "status": type(self.outcome).__name__,
        }
        if isinstance(self.outcome, Accepted):
            record["tier"] = self.outcome.tier.value
            record["matched_venue"] = self.outcome.venue
            record["ranking"] = self.outcome.entry.to_dict()
        else:
            record["reason"] = self.outcome.reason
        return record


def parse_input_line(line: str) -> tuple[str, Optional[str]]:
    """'<line>' or '<line>\\t<citation text>'"""
    raw, _, citation = line.rstrip("\r\n").partition("\t")
    return raw.strip(), (citation.strip() or None)


class VenueAnnotator:
    def __init__(
        self,
        index: RankingIndex,
        line_format: LineFormat = LineFormat.AUTHOR_LINE,
        strategy: CitationStrategy = CitationStrategy.ITALIC_TEXT,
        config: Optional[Config] = None,
        verbose: bool = False,
    ):
        self.config = config or Config()
        self.matcher = VenueMatcher(index, self.config)
        self.line_format = LineFormat(line_format)
        self.strategy = CitationStrategy(strategy)
        self.verbose = verbose
        self._stats = {"total": 0, "ranked": 0, "prefix": 0, "fallback": 0, "not_ranked": 0}

    def extract(self, raw: str) -> tuple[Optional[VenueCandidate], bool]:
        if self.line_format == LineFormat.PROFILE_ROW:
            return extract_from_profile_row(raw), detect_row_truncation(raw)
        return extract_candidate_from_author_line(raw, self.config)

    def annotate(self, raw: str, citation_text: Optional[str] = None, index: int = 0) -> AnnotatedLine:
        candidate, truncated = self.extract(raw)
        outcome = resolve_venue(
            candidate, self.matcher, citation_text, self.strategy, verbose=self.verbose
        )
        self._count(candidate, outcome)
        return AnnotatedLine(
            raw=raw,
            citation_text=citation_text,
            venue=candidate.text if candidate else None,
            is_truncated=truncated,
            outcome=outcome,
            index=index,
        )

    def annotate_all(self, lines: list[str]) -> list[AnnotatedLine]:
        """Annotate tab-separated input lines; blank lines are skipped."""
        entries = [parse_input_line(line) for line in lines]
        entries = [(raw, cite) for raw, cite in entries if raw]
        if not entries:
            console.print("[yellow]⚠ No bibliographic lines to annotate[/yellow]\n")
            return []

        results = []
        with Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]Resolving venues[/bold blue]"),
            BarColumn(),
            TaskProgressColumn(),
            TextColumn("{task.description}"),
            console=console,
            transient=True,
            disable=self.verbose,
        ) as progress:
            task = progress.add_task("", total=len(entries))
            for i, (raw, cite) in enumerate(entries, start=1):
                progress.update(task, description=f"[dim]{raw[:50]}[/dim]")
                results.append(self.annotate(raw, cite, index=i))
                progress.advance(task)

        s = self._stats
        coverage = (s["ranked"] / max(s["total"], 1)) * 100
        console.print(
            f"[green]✓[/green] Resolved [bold]{s['total']}[/bold] lines "
            f"([cyan]{coverage:.0f}%[/cyan] ranked)\n"
            f"[dim]  Ranked={s['ranked']} | Prefix={s['prefix']} | "
            f"Citation fallback={s['fallback']} | Not ranked={s['not_ranked']}[/dim]\n"
        )
        return results

    def _count(self, candidate: Optional[VenueCandidate], outcome: Outcome):
        self._stats["total"] += 1
        if isinstance(outcome, NotRanked):
            self._stats["not_ranked"] += 1
            return
        self._stats["ranked"] += 1
        if outcome.tier == MatchTier.PREFIX_UNIQUE:
            self._stats["prefix"] += 1
        if candidate is None or outcome.venue != candidate.text:
            self._stats["fallback"] += 1

    def get_stats(self) -> dict:
        return dict(self._stats)
