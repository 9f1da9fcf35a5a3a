"""
config.py — VenueRank configuration
Edit this file or use environment variables to configure the tool.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field

# Load .env from project root (same directory as config.py)
from dotenv import load_dotenv
_env_path = Path(__file__).resolve().parent / ".env"
load_dotenv(_env_path)

_DEFAULT_RANKINGS = Path(__file__).resolve().parent / "data" / "venue_rankings.json"


@dataclass
class Config:
    # ── Ranking data (bundled) ─────────────────────────────────────────────────
    # JSON payload with "conferences", "journals" and "aliases" collections
    rankings_path: Path = field(default_factory=lambda: Path(
        os.environ.get("VENUERANK_DATA", str(_DEFAULT_RANKINGS))
    ))

    # ── Matching thresholds (normalized character counts) ─────────────────────
    alias_min_length: int = 10        # Aliases shorter than this are acronyms, never matched
    full_name_min_length: int = 10    # Below this only exact equality is allowed
    truncated_min_length: int = 25    # Detected text must be this long for reverse substring
    prefix_min_length: int = 15       # Truncated prefix lookup needs at least this much text

    # ── Extraction ─────────────────────────────────────────────────────────────
    venue_min_length: int = 3         # Shortest cleaned author-line part accepted as a venue
    citation_min_length: int = 3      # Citation text must be longer than this

    # Author-line parts equal to one of these are publishers, not venues
    known_publishers: list = field(default_factory=lambda: [
        "springer", "elsevier", "wiley", "acm", "ieee", "nature", "mdpi",
        "taylor & francis", "oxford", "cambridge", "mit press", "aaai", "arxiv",
    ])
    # Author-line parts containing one of these are publisher domains
    publisher_domain_fragments: list = field(default_factory=lambda: [
        ".com", ".org", ".edu", ".net", ".io", ".gov", ".ac.", ".co.",
    ])

    def validate(self):
        thresholds = {
            "alias_min_length": self.alias_min_length,
            "full_name_min_length": self.full_name_min_length,
            "truncated_min_length": self.truncated_min_length,
            "prefix_min_length": self.prefix_min_length,
            "venue_min_length": self.venue_min_length,
            "citation_min_length": self.citation_min_length,
        }
        bad = [name for name, value in thresholds.items() if value < 0]
        if bad:
            raise ValueError(
                f"Negative matching threshold(s): {', '.join(bad)}.\n"
                "Thresholds are character counts and must be >= 0."
            )
