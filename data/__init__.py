"""
data/ — Bundled venue-ranking payload for VenueRank.

Files:
  venue_rankings.json — conferences and journals (CORE grade, SJR / JCR
                        quartiles, h5-index, impact factor) plus full-name
                        aliases mapped to a canonical key
"""
