"""First-past-the-post (plurality) voting system."""

import logging

from tally.models import Ballot, Candidate, VotingResult
from tally.voting import register_voting_system
from tally.voting.base import VotingSystem, most_votes, record_vote, single_leader

logger = logging.getLogger(__name__)


@register_voting_system
class FirstPastThePostSystem(VotingSystem):
    """First-past-the-post voting system.

    Only the first preference on each ballot counts. The candidate with the
    most first preferences wins; a shared maximum is reported as a tie.
    """

    key = "fptp"

    def __init__(self):
        self.votes: dict[Candidate, int] = {}

    @property
    def name(self) -> str:
        return "First Past the Post"

    @property
    def description(self) -> str:
        return "Most first-preference votes wins"

    def vote(self, ballot: Ballot) -> None:
        candidate = ballot.next_choice()
        record_vote(self.votes, candidate)
        logger.debug("First preference for %s", candidate)

    def calculate(self) -> VotingResult:
        winner = single_leader(most_votes(self.votes))
        logger.info("%s winner: %s", self.name, winner)
        return VotingResult(
            system_name=self.name,
            winner=winner,
            details={"votes": dict(self.votes)},
        )
