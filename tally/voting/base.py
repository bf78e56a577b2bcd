"""Abstract base class for voting systems."""

from abc import ABC, abstractmethod

from tally.models import Ballot, Candidate, TallyError, VotingResult


class NoCandidatesError(TallyError):
    """Raised when a winner is requested before any candidate got a vote."""
    pass


class TieError(TallyError):
    """Raised when two or more candidates share the winning count.

    Attributes:
        candidates: The tied leaders, sorted by name
    """

    def __init__(self, candidates: list[Candidate]):
        self.candidates = sorted(candidates)
        super().__init__(f"tie between {', '.join(self.candidates)}")


class VotingSystem(ABC):
    """Abstract base class for voting systems.

    A voting system is fed ballots one at a time through ``vote()`` and
    then asked for the outcome with ``winner()`` or, for the full count
    details, ``calculate()``. Systems are registered via the
    @register_voting_system decorator in tally/voting/__init__.py.
    """

    #: Short identifier used by get_voting_system()
    key: str = ""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this voting system."""
        pass

    @property
    def description(self) -> str:
        """Optional description of how this voting system works."""
        return ""

    @abstractmethod
    def vote(self, ballot: Ballot) -> None:
        """Cast a ballot, consuming as many of its preferences as needed.

        Raises:
            ExhaustedBallotError: If the system needs a preference the ballot
                no longer has. The tally is left unchanged.
        """
        pass

    @abstractmethod
    def calculate(self) -> VotingResult:
        """Count the ballots cast so far.

        Returns:
            VotingResult with the winner and calculation details

        Raises:
            NoCandidatesError: If no candidate has received a vote
            TieError: If the winning count is shared
        """
        pass

    def winner(self) -> Candidate | None:
        """Return the winning candidate."""
        return self.calculate().winner


def record_vote(votes: dict[Candidate, int], candidate: Candidate) -> None:
    votes[candidate] = votes.get(candidate, 0) + 1


def most_votes(votes: dict[Candidate, int]) -> list[Candidate]:
    """Return every candidate holding the highest count."""
    if not votes:
        return []
    top = max(votes.values())
    return [c for c, count in votes.items() if count == top]


def single_leader(leaders: list[Candidate]) -> Candidate:
    """Return the only leader, or raise if there are none or several."""
    if not leaders:
        raise NoCandidatesError("no candidates")
    if len(leaders) > 1:
        raise TieError(leaders)
    return leaders[0]
