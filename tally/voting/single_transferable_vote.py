"""Single transferable vote (single-winner, instant runoff) system."""

import logging
from collections.abc import Iterator

from tally.models import Ballot, Candidate, VotingResult
from tally.voting import register_voting_system
from tally.voting.base import NoCandidatesError, TieError, VotingSystem

logger = logging.getLogger(__name__)


# The count stops once this many candidates are left and the top one wins.
FINAL_ROUND_SIZE = 2


@register_voting_system
class SingleTransferableVoteSystem(VotingSystem):
    """Single transferable vote system.

    Each ballot is filed under its first preference. Counting then runs in
    rounds:
    1. Order candidates by the number of ballots they hold
    2. If two or fewer remain, the one holding the most ballots wins
    3. Otherwise, eliminate the candidate holding the fewest ballots
    4. Move each of its ballots to the ballot's next preference that has not
       been eliminated; a ballot with no such preference is exhausted and
       takes no further part
    5. Repeat

    Tiebreakers:
    - Elimination: among candidates sharing the fewest ballots, the one
      whose name sorts last is eliminated.
    - Winner: a shared top count in the final round raises TieError.

    Counting works on a private copy of the piles and reads later
    preferences without consuming them, so the cast ballots are left as they
    were and ``winner()`` can be asked more than once.
    """

    key = "stv"

    def __init__(self):
        self.votes: dict[Candidate, list[Ballot]] = {}

    @property
    def name(self) -> str:
        return "Single Transferable Vote"

    @property
    def description(self) -> str:
        return "Eliminate the weakest candidate and transfer their ballots until two remain"

    def vote(self, ballot: Ballot) -> None:
        candidate = ballot.next_choice()
        self.votes.setdefault(candidate, []).append(ballot)
        logger.debug("Ballot filed under %s", candidate)

    def calculate(self) -> VotingResult:
        piles = {c: list(ballots) for c, ballots in self.votes.items()}
        cursors: dict[Ballot, Iterator[Candidate]] = {}
        eliminated: set[Candidate] = set()
        rounds = []
        exhausted = 0

        round_num = 0
        while True:
            round_num += 1
            ordered = self._order(piles)
            round_info = {
                "round": round_num,
                "votes": {c: len(ballots) for c, ballots in ordered},
            }

            if len(ordered) <= FINAL_ROUND_SIZE:
                winner = self._final_winner(ordered)
                round_info["winner"] = winner
                rounds.append(round_info)
                break

            loser, loser_ballots = ordered[-1]
            del piles[loser]
            eliminated.add(loser)

            transfers: dict[Candidate, int] = {}
            for ballot in loser_ballots:
                cursor = cursors.setdefault(ballot, iter(ballot.remaining))
                target = self._next_continuing(cursor, eliminated)
                if target is None:
                    exhausted += 1
                    continue
                piles.setdefault(target, []).append(ballot)
                transfers[target] = transfers.get(target, 0) + 1

            logger.debug(
                "Round %d: eliminated %s (%d ballots), transfers %s",
                round_num, loser, len(loser_ballots), transfers,
            )
            round_info["eliminated"] = loser
            round_info["transfers"] = transfers
            round_info["exhausted"] = exhausted
            rounds.append(round_info)

        logger.info("%s winner: %s after %d round(s)", self.name, winner, round_num)
        return VotingResult(
            system_name=self.name,
            winner=winner,
            details={
                "rounds": rounds,
                "eliminated": [r["eliminated"] for r in rounds if "eliminated" in r],
                "exhausted_ballots": exhausted,
            },
        )

    @staticmethod
    def _order(piles: dict[Candidate, list[Ballot]]) -> list[tuple[Candidate, list[Ballot]]]:
        """Order piles by size, largest first, ties by candidate name."""
        return sorted(piles.items(), key=lambda item: (-len(item[1]), item[0]))

    @staticmethod
    def _final_winner(ordered: list[tuple[Candidate, list[Ballot]]]) -> Candidate:
        if not ordered:
            raise NoCandidatesError("no candidates")
        top = len(ordered[0][1])
        leaders = [c for c, ballots in ordered if len(ballots) == top]
        if len(leaders) > 1:
            raise TieError(leaders)
        return ordered[0][0]

    @staticmethod
    def _next_continuing(
        cursor: Iterator[Candidate], eliminated: set[Candidate]
    ) -> Candidate | None:
        """Advance a ballot's cursor to its next non-eliminated preference."""
        for candidate in cursor:
            if candidate not in eliminated:
                return candidate
        return None
