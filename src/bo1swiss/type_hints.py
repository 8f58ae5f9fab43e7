"""Type hints used in Bo1 Swiss."""

from typing import List, Literal, Tuple

# Termination mode literals (for type hints)
TerminationKind = Literal["fixed_rounds", "single_undefeated"]

# Opaque competitor token
CompetitorId = str
# Competitor ids in ranked order, best first
RankedPool = List[CompetitorId]
# Two competitor ids, higher ranked first
MatchPairing = Tuple[CompetitorId, CompetitorId]
# All pairings for one round
RoundSchedule = List[MatchPairing]
