"""
rankers/ — Venue matching against the ranking index and outcome policy.
"""
