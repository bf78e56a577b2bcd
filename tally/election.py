"""Orchestrator: cast the same ballots under every voting system."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from tally.models import Ballot, Candidate, TallyError, VotingResult
from tally.voting import get_all_voting_systems
from tally.voting.base import VotingSystem

logger = logging.getLogger(__name__)


@dataclass
class ElectionResult:
    """Outcome of one set of ballots under every voting system."""
    rankings: list[list[Candidate]]
    results: list[VotingResult]

    @property
    def num_ballots(self) -> int:
        return len(self.rankings)

    def winners(self) -> dict[str, Candidate | None]:
        """Map each system name to its winner (None where the count failed)."""
        return {r.system_name: r.winner for r in self.results}

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "num_ballots": self.num_ballots,
            "results": [r.to_dict() for r in self.results],
        }


class ElectionError(ValueError):
    """Error in the input to an election."""
    pass


def run_election(
    rankings: Sequence[Sequence[Candidate]],
    systems: list[VotingSystem] | None = None,
) -> ElectionResult:
    """Cast every ranking as a ballot under each voting system.

    Each system gets its own freshly built ballots, since casting consumes
    preferences.

    Args:
        rankings: One ordered candidate list per voter, favourite first
        systems: Voting systems to run (default: all registered systems)

    Returns:
        ElectionResult with one VotingResult per system

    Raises:
        ElectionError: If no rankings are given
    """
    if not rankings:
        raise ElectionError("No ballots to count")

    if systems is None:
        systems = get_all_voting_systems()

    results = []
    for system in systems:
        rejected = 0
        for ranking in rankings:
            try:
                system.vote(Ballot.of(*ranking))
            except TallyError as e:
                # Skip the ballot and carry on with the rest
                logger.warning("%s rejected ballot %r: %s", system.name, list(ranking), e)
                rejected += 1

        try:
            result = system.calculate()
        except TallyError as e:
            # Include error in results rather than failing entirely
            logger.warning("%s could not pick a winner: %s", system.name, e)
            result = VotingResult(
                system_name=system.name,
                winner=None,
                details={"error": str(e)},
            )
        result.details["rejected_ballots"] = rejected
        results.append(result)

    return ElectionResult(rankings=[list(r) for r in rankings], results=results)
