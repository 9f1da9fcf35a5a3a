"""
analyzers/venue_extractor.py
Reduces raw bibliographic text to a candidate venue string.

Two input formats:
  author line  — "<authors> - <venue>, <year> - <publisher-or-domain>"
                 (search result rows; separator may be -, – or —)
  profile row  — "<venue> <volume> (<issue>), <pages>, <year>"
                 (author profile rows; no author segment)

Every cleanup step is a named CleanupRule; the two pipelines below are
ordered tuples of rules. Order matters: the prefix rules at the end assume
year, volume and comma noise was already removed from the tail.
"""

import re
from dataclasses import dataclass
from typing import Optional

from config import Config

_config = Config()

ELLIPSIS = "…"

_SEPARATOR = re.compile(r"\s+[-–—]\s+")
_BARE_YEAR = re.compile(r"^\d{4}$")
_TRUNCATION_MARKER = re.compile(r"…|\.{3}")


def _written_ordinals() -> list[str]:
    """First .. Forty-Fifth"""
    units = ["First", "Second", "Third", "Fourth", "Fifth", "Sixth", "Seventh", "Eighth", "Ninth"]
    ordinals = units + [
        "Tenth", "Eleventh", "Twelfth", "Thirteenth", "Fourteenth", "Fifteenth",
        "Sixteenth", "Seventeenth", "Eighteenth", "Nineteenth", "Twentieth",
    ]
    for tens, next_tens in (("Twenty", "Thirtieth"), ("Thirty", "Fortieth")):
        ordinals += [f"{tens}-{u}" for u in units] + [next_tens]
    ordinals += [f"Forty-{u}" for u in units[:5]]
    return ordinals


@dataclass(frozen=True)
class VenueCandidate:
    text: str
    is_truncated: bool = False


@dataclass(frozen=True)
class CleanupRule:
    """One regex rewrite. Calling the rule removes the first match and trims."""

    name: str
    pattern: re.Pattern

    def __call__(self, text: str) -> str:
        return self.pattern.sub("", text, count=1).strip()


def _rule(name: str, pattern: str, flags: int = 0) -> CleanupRule:
    return CleanupRule(name, re.compile(pattern, flags))


# ── Rules ─────────────────────────────────────────────────────────────────────

strip_leading_ellipsis = _rule("leading_ellipsis", r"^…\s*")
strip_trailing_ellipsis = _rule("trailing_ellipsis", r"\s*….*$")
strip_year_clause = _rule("year_clause", r",\s*\d{4}.*$")
strip_trailing_year = _rule("trailing_year", r"(?:^|\s+)\d{4}$")
strip_volume_issue = _rule("volume_issue", r"\s+\d+\s*\(\d+\).*$")
# Profile rows also carry labelled issues: "12 (Suppl 1)"
strip_profile_volume_issue = _rule("profile_volume_issue", r"\s+\d+\s*\([^)]*\).*$")
strip_page_range = _rule("page_range", r",?\s*\d+-\d+\s*$")
strip_trailing_comma = _rule("trailing_comma", r",\s*$")
# A bare "Proceedings of the" left by a truncation strips to ""
strip_proceedings = _rule("proceedings", r"^Proceedings\s+of(?:\s+the)?(?:\s+|$)", re.IGNORECASE)
# Only when an ordinal follows: "IEEE 16th ..." but not "IEEE Transactions on ..."
strip_organization = _rule(
    "organization",
    r"^(?:ACM/IEEE|IEEE/ACM|ACM|IEEE)\s+(?=\d+(?:st|nd|rd|th)\b)",
    re.IGNORECASE,
)
strip_numeric_ordinal = _rule("numeric_ordinal", r"^\d+(?:st|nd|rd|th)(?:\s+|$)", re.IGNORECASE)
strip_written_ordinal = _rule(
    "written_ordinal",
    r"^(?:" + "|".join(_written_ordinals()) + r")(?:\s+|$)",
    re.IGNORECASE,
)
strip_ellipsis_marker = _rule("ellipsis_marker", r"\s*(?:…|\.{3,})+\s*$")

AUTHOR_LINE_RULES = (
    strip_leading_ellipsis,
    strip_trailing_ellipsis,
    strip_year_clause,
    strip_trailing_year,
    strip_volume_issue,
    strip_page_range,
    strip_trailing_comma,
    strip_proceedings,
    strip_organization,
    strip_numeric_ordinal,
    strip_written_ordinal,
)

PROFILE_ROW_RULES = (
    strip_year_clause,
    strip_trailing_year,
    strip_profile_volume_issue,
    strip_trailing_comma,
    strip_proceedings,
    strip_organization,
    strip_numeric_ordinal,
    strip_written_ordinal,
    strip_ellipsis_marker,
)


def apply_rules(text: str, rules=AUTHOR_LINE_RULES) -> str:
    """Run text through an ordered rule pipeline."""
    text = text.strip()
    for rule in rules:
        text = rule(text)
    return text


# ── Author line ───────────────────────────────────────────────────────────────

def detect_truncation(text: Optional[str]) -> bool:
    """True when the raw text carries Scholar's ellipsis glyph."""
    return bool(text) and ELLIPSIS in text


def split_author_line(text: str) -> list[str]:
    return _SEPARATOR.split(text)


def is_publisher_part(part: str, config: Optional[Config] = None) -> bool:
    """Year, publisher domain or publisher name: never a venue."""
    cfg = config or _config
    if _BARE_YEAR.match(part):
        return True
    if any(fragment in part for fragment in cfg.publisher_domain_fragments):
        return True
    lower = part.lower()
    return any(lower == publisher for publisher in cfg.known_publishers)


def extract_venue_from_author_line(text: Optional[str], config: Optional[Config] = None) -> Optional[str]:
    """Cleaned venue string from an author line, or None."""
    if not text:
        return None
    cfg = config or _config

    parts = split_author_line(text)
    if len(parts) < 2:
        return None

    # parts[0] is the author list
    for part in parts[1:]:
        part = part.strip()
        if is_publisher_part(part, cfg):
            continue
        venue = apply_rules(part, AUTHOR_LINE_RULES)
        if len(venue) >= cfg.venue_min_length:
            return venue
    return None


def extract_candidate_from_author_line(
    text: Optional[str], config: Optional[Config] = None
) -> tuple[Optional[VenueCandidate], bool]:
    """
    Returns (candidate, is_truncated). The truncation flag is reported even
    when no venue could be extracted.
    """
    truncated = detect_truncation(text)
    venue = extract_venue_from_author_line(text, config)
    if venue is None:
        return None, truncated
    return VenueCandidate(venue, truncated), truncated


def extract_from_author_line(text: Optional[str], config: Optional[Config] = None) -> Optional[VenueCandidate]:
    candidate, _ = extract_candidate_from_author_line(text, config)
    return candidate


# ── Profile row ───────────────────────────────────────────────────────────────

def detect_row_truncation(text: Optional[str]) -> bool:
    """Profile rows mark cuts with the ellipsis glyph or three dots."""
    return bool(text) and bool(_TRUNCATION_MARKER.search(text))


def extract_from_profile_row(text: Optional[str]) -> Optional[VenueCandidate]:
    if not text:
        return None
    venue = apply_rules(text, PROFILE_ROW_RULES)
    if not venue:
        return None
    return VenueCandidate(venue, detect_row_truncation(text))
