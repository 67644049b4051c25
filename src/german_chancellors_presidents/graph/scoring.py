"""Priority scoring for duplicate office-holder records.

The query service returns one row per combination of linked article and
party membership, so a person shows up several times. The score prefers
encyclopedia articles over other wiki families and party memberships that
were already active during the term of office.
"""

from datetime import date
from types import MappingProxyType

# Base score per article family (the part of the host name after "wiki")
FAMILY_PRIORITY = MappingProxyType(
    {
        "pedia": 1000,
        "quote": 600,
        "news": 500,
        "voyage": 200,
    }
)

# Party membership starting when or after the term ended does not describe
# the office holder's party while in office.
PARTY_MISMATCH_PENALTY = 10000


def priority(
    wiki_type: str | None,
    start_party_date: str | None,
    end_acting_date: str | None,
    today: date | None = None,
) -> int:
    """Compute the desirability score of one candidate record.

    Args:
        wiki_type: Article family such as "pedia" or "news"; unknown or
            missing families score 0.
        start_party_date: ISO-8601 start of the party membership, if any.
        end_acting_date: ISO-8601 end of the acting interval, if any.
        today: Reference date for the recency term (defaults to today).

    Returns:
        Integer score, higher is better.
    """
    score = FAMILY_PRIORITY.get(wiki_type or "", 0)

    if start_party_date and end_acting_date and start_party_date >= end_acting_date:
        score -= PARTY_MISMATCH_PENALTY

    if start_party_date and start_party_date[:4].isdigit():
        current_year = (today or date.today()).year
        score -= current_year - int(start_party_date[:4])

    return score
