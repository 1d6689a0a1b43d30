# src/search/ranking.py
from typing import List, NamedTuple, Optional, Sequence

from src.models.team import TeamRecord

# Upper bound on rows handed back to a screen, for browse and search alike
MAX_RESULTS = 50

NUMBER_EXACT_SCORE = 100
NUMBER_PREFIX_SCORE = 50
NUMBER_CONTAINS_SCORE = 25
NAME_PREFIX_SCORE = 40
NAME_CONTAINS_SCORE = 15


class ScoredCandidate(NamedTuple):
    record: TeamRecord
    score: int


def score_team(record: TeamRecord, lowered_query: str) -> int:
    """Relevance of a single record for an already lower-cased query.

    Number and name contribute independently; within a field only the best
    tier counts (exact > prefix > substring). Missing fields never match.
    """
    number = str(record.team_number) if record.team_number is not None else ""
    name = record.team_name.lower() if record.team_name else ""

    score = 0

    if number:
        if number == lowered_query:
            score += NUMBER_EXACT_SCORE
        elif number.startswith(lowered_query):
            score += NUMBER_PREFIX_SCORE
        elif lowered_query in number:
            score += NUMBER_CONTAINS_SCORE

    if name:
        if name.startswith(lowered_query):
            score += NAME_PREFIX_SCORE
        elif lowered_query in name:
            score += NAME_CONTAINS_SCORE

    return score


def rank_teams(
    records: Optional[Sequence[TeamRecord]], query: str
) -> List[TeamRecord]:
    """Orders the records by relevance to ``query``.

    Args:
        records: The full roster, or None while it is still loading.
        query: Raw text from the search box.

    Returns:
        At most MAX_RESULTS records. A blank query returns the head of the
        roster unchanged; otherwise only matching records, best first, with
        ties kept in roster order.
    """
    if records is None:
        return []
    if not query.strip():
        return list(records[:MAX_RESULTS])

    lowered_query = query.lower()

    candidates = [
        ScoredCandidate(record, score_team(record, lowered_query))
        for record in records
    ]
    matches = [c for c in candidates if c.score > 0]
    # sorted() is stable, so equal scores keep their input order
    matches = sorted(matches, key=lambda c: c.score, reverse=True)

    return [c.record for c in matches[:MAX_RESULTS]]
