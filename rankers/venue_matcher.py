"""
rankers/venue_matcher.py
Resolves a candidate venue string against the RankingIndex.

Passes, first match wins:
  1. aliases      (full-name aliases only, acronyms are skipped)
  2. conferences  (by full name)
  3. journals     (by full name)
Within a pass, entries are tried in index insertion order. There is no
"best match" scoring; the order above is the tie-breaker.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from config import Config
from utils.text import normalize
from utils.venue_data import RankingEntry, RankingIndex


class MatchTier(str, Enum):
    EXACT = "exact"
    ALIAS = "alias"
    SUBSTRING_FORWARD = "substring"             # detected text contains the full name
    SUBSTRING_TRUNCATED = "substring-truncated" # full name contains the (cut) detected text
    PREFIX_UNIQUE = "prefix"                    # only index entry starting with a truncated name


@dataclass(frozen=True)
class MatchResult:
    entry: RankingEntry
    tier: MatchTier


def full_name_match(
    detected: str,
    target: str,
    exact_match_only: bool = False,
    min_target_length: int = 10,
    min_truncated_length: int = 25,
) -> Optional[MatchTier]:
    """
    Compare two normalized names. Returns the tier that fired, or None.

    Substring matching is only attempted for targets of at least
    `min_target_length` characters. The reverse direction (a Scholar-truncated
    detected name that is a piece of the target) additionally needs the
    detected text to be `min_truncated_length` long.
    """
    if not target:
        return None
    if detected == target:
        return MatchTier.EXACT
    if exact_match_only or len(target) < min_target_length:
        return None
    if target in detected:
        return MatchTier.SUBSTRING_FORWARD
    if len(detected) >= min_truncated_length and detected in target:
        return MatchTier.SUBSTRING_TRUNCATED
    return None


class VenueMatcher:
    """
    Tiered matcher over a frozen RankingIndex. Normalized names are computed
    once here; the index itself is never modified.
    """

    def __init__(self, index: RankingIndex, config: Optional[Config] = None):
        self.index = index
        self.cfg = config or Config()
        self._conferences = [(normalize(e.full_name), e) for e in index.conferences.values()]
        self._journals = [(normalize(e.full_name), e) for e in index.journals.values()]
        self._aliases = [(normalize(alias), key) for alias, key in index.aliases.items()]

    def _match(self, detected: str, target: str, exact_match_only: bool = False) -> Optional[MatchTier]:
        return full_name_match(
            detected,
            target,
            exact_match_only,
            min_target_length=self.cfg.full_name_min_length,
            min_truncated_length=self.cfg.truncated_min_length,
        )

    def resolve(self, venue: Optional[str]) -> Optional[MatchResult]:
        normalized = normalize(venue)
        if not normalized:
            return None

        for alias_norm, key in self._aliases:
            if len(alias_norm) < self.cfg.alias_min_length:
                continue
            if self._match(normalized, alias_norm):
                entry = self.index.lookup(key)
                if entry is not None:
                    return MatchResult(entry, MatchTier.ALIAS)

        for names in (self._conferences, self._journals):
            for name_norm, entry in names:
                tier = self._match(normalized, name_norm, entry.exact_match_only)
                if tier:
                    return MatchResult(entry, tier)

        return None

    def find_prefix_matches(self, venue: Optional[str]) -> list[RankingEntry]:
        """
        Entries whose normalized name starts with the (truncated) venue.
        Used only after resolve() failed on truncated text.
        """
        normalized = normalize(venue)
        if len(normalized) < self.cfg.prefix_min_length:
            return []

        found: dict[str, RankingEntry] = {}
        for names in (self._conferences, self._journals):
            for name_norm, entry in names:
                if name_norm.startswith(normalized):
                    found.setdefault(entry.key, entry)

        for alias_norm, key in self._aliases:
            if not alias_norm.startswith(normalized):
                continue
            entry = self.index.lookup(key)
            if entry is not None:
                found.setdefault(entry.key, entry)

        return list(found.values())
