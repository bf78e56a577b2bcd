"""Approval voting system."""

import logging

from tally.models import Ballot, Candidate, ExhaustedBallotError, VotingResult
from tally.voting import register_voting_system
from tally.voting.base import NoCandidatesError, TieError, VotingSystem, record_vote

logger = logging.getLogger(__name__)


@register_voting_system
class ApprovalSystem(VotingSystem):
    """Approval voting system.

    Every candidate named on a ballot gets one approval, whatever its
    position. The candidate with the most approvals wins.

    A name listed twice on one ballot is approved twice.
    """

    key = "approval"

    def __init__(self):
        self.votes: dict[Candidate, int] = {}

    @property
    def name(self) -> str:
        return "Approval"

    @property
    def description(self) -> str:
        return "Every candidate on a ballot gets one vote; most approvals wins"

    def vote(self, ballot: Ballot) -> None:
        approved = 0
        while True:
            try:
                candidate = ballot.next_choice()
            except ExhaustedBallotError:
                break
            record_vote(self.votes, candidate)
            approved += 1
        logger.debug("Ballot approved %d candidate(s)", approved)

    def calculate(self) -> VotingResult:
        ranked = sorted(self.votes.items(), key=lambda item: item[1], reverse=True)
        if not ranked:
            raise NoCandidatesError("no candidates")

        winner, top = ranked[0]
        leaders = [c for c, count in ranked if count == top]
        if len(leaders) > 1:
            raise TieError(leaders)

        logger.info("%s winner: %s", self.name, winner)
        return VotingResult(
            system_name=self.name,
            winner=winner,
            details={"votes": dict(self.votes)},
        )
