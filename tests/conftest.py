"""
Shared fixtures: a small ranking payload whose insertion order matters.
"""

import copy

import pytest

from rankers.venue_matcher import VenueMatcher
from utils.venue_data import RankingIndex

PAYLOAD = {
    "conferences": {
        # Listed before kdd so that a plain full-name pass would pick it
        "icdm": {"fullName": "Data Mining", "core": "A"},
        "kdd": {"fullName": "ACM SIGKDD Conference on Knowledge Discovery and Data Mining", "core": "A*"},
        "iccps": {"fullName": "International Conference on Cyber-Physical Systems", "core": "A", "h5": 30},
        "icse": {"fullName": "International Conference on Software Engineering", "core": "A*"},
        "www": {"fullName": "The Web Conference", "core": "A*", "exactMatchOnly": True},
        "neurips": {"fullName": "Conference on Neural Information Processing Systems", "core": "A*"},
    },
    "journals": {
        "tpami": {
            "fullName": "IEEE Transactions on Pattern Analysis and Machine Intelligence",
            "core": "A*", "sjr": "Q1", "jcr": "Q1", "h5": 243, "impactFactor": 20.8,
        },
        "aij": {"fullName": "Artificial Intelligence", "core": "A*", "sjr": "Q1"},
        "nature": {"fullName": "Nature", "sjr": "Q1", "jcr": "Q1"},
    },
    "aliases": {
        "Knowledge Discovery and Data Mining": "kdd",
        "Neural Information Processing Systems": "neurips",
        "Unresolvable Venue Alias Name": "ghost",
        "AI": "aij",
    },
}


@pytest.fixture
def payload():
    return copy.deepcopy(PAYLOAD)


@pytest.fixture
def index(payload):
    return RankingIndex.from_payload(payload)


@pytest.fixture
def matcher(index):
    return VenueMatcher(index)
