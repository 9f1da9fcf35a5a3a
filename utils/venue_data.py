"""
utils/venue_data.py
Loads and indexes the bundled venue-ranking payload (conferences, journals,
aliases). The index is built once and is read-only afterwards.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from rich.console import Console

from config import Config

console = Console(stderr=True)


def _frozen() -> Mapping:
    return MappingProxyType({})


class VenueType(str, Enum):
    CONFERENCE = "conference"
    JOURNAL = "journal"


@dataclass(frozen=True)
class RankingEntry:
    key: str
    full_name: str
    venue_type: VenueType
    core: Optional[str] = None           # A*, A, B, C
    sjr: Optional[str] = None            # Q1..Q4
    jcr: Optional[str] = None            # Q1..Q4
    h5: Optional[int] = None
    impact_factor: Optional[float] = None
    exact_match_only: bool = False

    @classmethod
    def from_payload(cls, key: str, data: dict, venue_type: VenueType) -> "RankingEntry":
        """Build an entry from one payload record (camelCase field names)."""
        if not isinstance(data, dict):
            raise TypeError(f"ranking entry {key!r} is not an object")
        h5 = data.get("h5")
        impact = data.get("impactFactor", data.get("if"))
        return cls(
            key=str(key),
            full_name=str(data.get("fullName") or ""),
            venue_type=venue_type,
            core=data.get("core") or None,
            sjr=data.get("sjr") or None,
            jcr=data.get("jcr") or None,
            h5=int(h5) if h5 is not None else None,
            impact_factor=float(impact) if impact is not None else None,
            exact_match_only=_flag(key, data.get("exactMatchOnly", data.get("exactMatch"))),
        )

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "fullName": self.full_name,
            "type": self.venue_type.value,
            "core": self.core,
            "sjr": self.sjr,
            "jcr": self.jcr,
            "h5": self.h5,
            "impactFactor": self.impact_factor,
        }


def _flag(key, value) -> bool:
    # JSON booleans only, a "false" string is rejected
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"ranking entry {key!r}: exactMatchOnly must be true or false")
    return value


@dataclass(frozen=True)
class RankingIndex:
    """
    Ordered, read-only lookup over the ranking payload:
      conferences  key → RankingEntry
      journals     key → RankingEntry
      aliases      alias text → canonical key (present in either collection)

    Iteration follows payload insertion order; the matcher's first-match-wins
    tie-breaking depends on it.
    """

    conferences: Mapping[str, RankingEntry] = field(default_factory=_frozen)
    journals: Mapping[str, RankingEntry] = field(default_factory=_frozen)
    aliases: Mapping[str, str] = field(default_factory=_frozen)

    @classmethod
    def empty(cls) -> "RankingIndex":
        return cls()

    @classmethod
    def from_payload(cls, payload) -> "RankingIndex":
        """
        Build the index from a decoded payload. Anything that is not the
        expected shape yields the empty index rather than raising.
        """
        try:
            return cls._build(payload)
        except (TypeError, ValueError, AttributeError) as e:
            console.print(f"[yellow]⚠ Malformed ranking payload, rankings unavailable: {e}[/yellow]")
            return cls.empty()

    @classmethod
    def _build(cls, payload) -> "RankingIndex":
        if not isinstance(payload, dict):
            raise TypeError("payload is not an object")

        conferences = {
            str(key): RankingEntry.from_payload(key, data, VenueType.CONFERENCE)
            for key, data in _section(payload, "conferences").items()
        }
        journals = {
            str(key): RankingEntry.from_payload(key, data, VenueType.JOURNAL)
            for key, data in _section(payload, "journals").items()
        }
        aliases = {str(alias): str(canonical) for alias, canonical in _section(payload, "aliases").items()}

        return cls(
            conferences=MappingProxyType(conferences),
            journals=MappingProxyType(journals),
            aliases=MappingProxyType(aliases),
        )

    def lookup(self, key: str) -> Optional[RankingEntry]:
        """Resolve a canonical key, conferences first."""
        return self.conferences.get(key) or self.journals.get(key)

    @property
    def is_available(self) -> bool:
        return bool(self.conferences or self.journals or self.aliases)

    @property
    def total_venues(self) -> int:
        return len(self.conferences) + len(self.journals)

    @property
    def total_aliases(self) -> int:
        return len(self.aliases)


def _section(payload: dict, name: str) -> dict:
    section = payload.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise TypeError(f"{name!r} is not an object")
    return section


def load_ranking_index(path: Optional[Path] = None, verbose: bool = False) -> RankingIndex:
    """
    Read the ranking payload from disk and build the index.
    A missing or unreadable file gives the empty index.
    """
    path = Path(path) if path else Config().rankings_path
    if not path.exists():
        console.print(f"[yellow]⚠ Ranking data not found at {path}, rankings unavailable[/yellow]")
        return RankingIndex.empty()
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
        console.print(f"[yellow]⚠ Could not read ranking data {path}: {e}[/yellow]")
        return RankingIndex.empty()

    index = RankingIndex.from_payload(payload)
    if verbose:
        console.print(
            f"[dim]  Rankings: {len(index.conferences)} conferences, "
            f"{len(index.journals)} journals, {index.total_aliases} aliases loaded[/dim]"
        )
    return index
