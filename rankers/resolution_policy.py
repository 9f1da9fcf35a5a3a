"""
rankers/resolution_policy.py
Turns extraction + matching results into an outcome for the presentation layer.

  Accepted(entry)   show the ranking
  NeedsFallback     not enough information yet, try the citation popup text
  NotRanked         both extractors and the matcher were exhausted

decide() only distinguishes "can answer now" from "try harder". The final
NotRanked verdict comes from resolve_venue(), the caller-side two-step flow.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from rich.console import Console

from analyzers.citation_extractor import CitationStrategy, extract_citation_venue
from analyzers.venue_extractor import VenueCandidate
from rankers.venue_matcher import MatchTier, VenueMatcher
from utils.venue_data import RankingEntry

console = Console(stderr=True)


@dataclass(frozen=True)
class Accepted:
    entry: RankingEntry
    tier: MatchTier
    venue: str = ""


@dataclass(frozen=True)
class NeedsFallback:
    reason: str
    venue: Optional[str] = None
    candidates: tuple = field(default_factory=tuple)  # ambiguous prefix matches, if any


@dataclass(frozen=True)
class NotRanked:
    reason: str
    venue: Optional[str] = None


Outcome = Union[Accepted, NeedsFallback, NotRanked]


def decide(candidate: Optional[VenueCandidate], matcher: VenueMatcher) -> Outcome:
    if candidate is None or not candidate.text:
        return NeedsFallback("no venue extracted")

    result = matcher.resolve(candidate.text)
    if result is not None:
        return Accepted(result.entry, result.tier, candidate.text)

    if not candidate.is_truncated:
        return NeedsFallback("no match", candidate.text)

    prefixes = matcher.find_prefix_matches(candidate.text)
    if len(prefixes) == 1:
        return Accepted(prefixes[0], MatchTier.PREFIX_UNIQUE, candidate.text)
    if prefixes:
        return NeedsFallback("ambiguous truncated venue", candidate.text, tuple(prefixes))
    return NeedsFallback("unknown truncated venue", candidate.text)


def resolve_venue(
    candidate: Optional[VenueCandidate],
    matcher: VenueMatcher,
    citation_text: Optional[str] = None,
    strategy: CitationStrategy = CitationStrategy.ITALIC_TEXT,
    verbose: bool = False,
) -> Outcome:
    """
    Line extractor first, citation text second. Returns NotRanked only after
    both were tried.
    """
    outcome = decide(candidate, matcher)
    if verbose:
        detected = candidate.text if candidate else None
        console.print(f"[dim]  Detected: {detected!r} → {_describe(outcome)}[/dim]")
    if not isinstance(outcome, NeedsFallback):
        return outcome

    citation_venue = extract_citation_venue(citation_text, strategy)
    if citation_venue is None:
        return NotRanked(outcome.reason, outcome.venue)

    # Citation popups carry the full, untruncated venue name
    fallback = decide(VenueCandidate(citation_venue, is_truncated=False), matcher)
    if verbose:
        console.print(f"[dim]  Citation fallback: {citation_venue!r} → {_describe(fallback)}[/dim]")
    if isinstance(fallback, Accepted):
        return fallback
    return NotRanked("no match for citation venue", citation_venue)


def _describe(outcome: Outcome) -> str:
    if isinstance(outcome, Accepted):
        return f"accepted {outcome.entry.key} ({outcome.tier.value})"
    if isinstance(outcome, NeedsFallback):
        return f"fallback: {outcome.reason}"
    return f"not ranked: {outcome.reason}"
