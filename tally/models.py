"""Core data models for ballots and voting results."""

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Self

Candidate = str


class TallyError(ValueError):
    """Base class for errors raised while casting or counting ballots."""
    pass


class ExhaustedBallotError(TallyError):
    """Raised when a ballot has no preference left but one was required."""
    pass


@dataclass(eq=False)
class Ballot:
    """A single voter's ordered candidate preferences, highest first.

    Preferences are consumed front to back by ``next_choice()`` and never
    come back. Ballots compare and hash by identity so one ballot can be
    held by several tally buckets at once.

    Example:
        >>> ballot = Ballot.of("Ally", "Bob")
        >>> ballot.next_choice()
        'Ally'
        >>> ballot.remaining
        ('Bob',)
    """
    preferences: deque[Candidate] = field(default_factory=deque, init=False)

    @classmethod
    def of(cls, *candidates: Candidate) -> Self:
        """Build a ballot already holding the given preferences."""
        ballot = cls()
        ballot.vote(*candidates)
        return ballot

    def vote(self, *candidates: Candidate) -> None:
        """Append candidates, in order, after the current preferences."""
        self.preferences.extend(candidates)

    def next_choice(self) -> Candidate:
        """Remove and return the front-most remaining preference."""
        if not self.preferences:
            raise ExhaustedBallotError("no more candidates voted for")
        return self.preferences.popleft()

    @property
    def remaining(self) -> tuple[Candidate, ...]:
        return tuple(self.preferences)

    def __len__(self) -> int:
        return len(self.preferences)


@dataclass
class VotingResult:
    """Result from a voting system.

    Attributes:
        system_name: Human-readable name of the voting system
        winner: The winning candidate, or None if the count failed
        details: System-specific details for transparency/debugging
                 (e.g., vote totals, elimination rounds, error message)
    """
    system_name: str
    winner: Candidate | None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.winner is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "system_name": self.system_name,
            "winner": self.winner,
            "details": self.details,
        }
