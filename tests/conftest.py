"""Shared test helpers."""

from tally.models import Ballot, Candidate
from tally.voting.base import VotingSystem

ALLY = "Ally"
BOB = "Bob"
CHARLIE = "Charlie"


def make_ballots(rankings: list[list[Candidate]]) -> list[Ballot]:
    """Build one Ballot per ranking, favourite first."""
    return [Ballot.of(*ranking) for ranking in rankings]


def cast(system: VotingSystem, rankings: list[list[Candidate]]) -> VotingSystem:
    """Cast every ranking as a fresh ballot and return the system."""
    for ballot in make_ballots(rankings):
        system.vote(ballot)
    return system
