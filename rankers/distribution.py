"""
rankers/distribution.py
CORE grade distribution over a list of resolved venues (author profile view).
"""

from dataclasses import dataclass, field

from rankers.resolution_policy import Accepted

CORE_GRADES = ("A*", "A", "B", "C")
UNRANKED = "Unranked"


@dataclass
class RankingDistribution:
    counts: dict = field(default_factory=lambda: {g: 0 for g in (*CORE_GRADES, UNRANKED)})
    total: int = 0

    @classmethod
    def from_outcomes(cls, outcomes) -> "RankingDistribution":
        dist = cls()
        for outcome in outcomes:
            dist.add(outcome)
        return dist

    def add(self, outcome):
        self.total += 1
        # Journals with only SJR/JCR quartiles have no CORE grade
        if isinstance(outcome, Accepted) and outcome.entry.core in CORE_GRADES:
            self.counts[outcome.entry.core] += 1
        else:
            self.counts[UNRANKED] += 1

    @property
    def ranked_total(self) -> int:
        return sum(self.counts[g] for g in CORE_GRADES)

    def percentage(self, grade: str) -> float:
        if not self.total:
            return 0.0
        return self.counts.get(grade, 0) / self.total * 100

    def to_dict(self) -> dict:
        return {**self.counts, "total": self.total}
