"""
analyzers/ — Venue extraction from raw bibliographic text.

  venue_extractor.py    — author-line and profile-row cleanup pipelines
  citation_extractor.py — citation popup (MLA italic span) fallback
  venue_annotator.py    — per-line extract → match → fallback pipeline
"""
