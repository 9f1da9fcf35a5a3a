"""
analyzers/citation_extractor.py
Fallback venue extraction from a citation popup.

In MLA renders the venue is the italic span:
  Smith, John. "Paper title." <i>IEEE Transactions on Automatic Control</i> 42.3 (2017): 123-456.

The caller fetches the popup; this module only looks at the text it got.
"""

from enum import Enum
from typing import Optional

from bs4 import BeautifulSoup

from config import Config

_config = Config()


class CitationStrategy(str, Enum):
    ITALIC_TEXT = "italic-text"    # caller already isolated the <i> span text
    MLA_HTML = "mla-html"          # caller passes the raw MLA citation markup


def extract_from_citation_text(fragment: Optional[str], config: Optional[Config] = None) -> Optional[str]:
    """Trimmed italic-span text when it is longer than the minimum, else None."""
    if not fragment:
        return None
    cfg = config or _config
    text = fragment.strip()
    if len(text) > cfg.citation_min_length:
        return text
    return None


def extract_from_mla_html(html: Optional[str], config: Optional[Config] = None) -> Optional[str]:
    """First usable <i> span of an MLA citation render."""
    if not html:
        return None
    soup = BeautifulSoup(html, "html.parser")
    for italic in soup.find_all("i"):
        venue = extract_from_citation_text(italic.get_text(), config)
        if venue:
            return venue
    return None


def extract_citation_venue(
    source: Optional[str],
    strategy: CitationStrategy = CitationStrategy.ITALIC_TEXT,
    config: Optional[Config] = None,
) -> Optional[str]:
    if strategy == CitationStrategy.MLA_HTML:
        return extract_from_mla_html(source, config)
    return extract_from_citation_text(source, config)
