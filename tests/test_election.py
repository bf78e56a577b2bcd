"""Tests for the election orchestrator."""

from unittest.mock import MagicMock

import pytest

from tests.conftest import ALLY, BOB, CHARLIE
from tally.election import ElectionError, run_election
from tally.voting.base import NoCandidatesError
from tally.voting.first_past_the_post import FirstPastThePostSystem
from tally.voting.single_transferable_vote import SingleTransferableVoteSystem

FIVE_VOTERS = [
    [ALLY, BOB, CHARLIE],
    [ALLY, CHARLIE],
    [BOB, CHARLIE],
    [CHARLIE, BOB],
    [CHARLIE, BOB],
]


class TestRunElection:
    def test_all_systems(self):
        result = run_election(FIVE_VOTERS)
        assert result.num_ballots == 5
        assert result.winners() == {
            "First Past the Post": None,
            "Approval": CHARLIE,
            "Single Transferable Vote": CHARLIE,
        }

    def test_tie_reported_not_raised(self):
        """Ally and Charlie share the first preferences under FPTP."""
        result = run_election(FIVE_VOTERS)
        fptp = next(r for r in result.results if r.system_name == "First Past the Post")
        assert not fptp.succeeded
        assert fptp.details["error"] == "tie between Ally, Charlie"

    def test_rankings_are_not_consumed(self):
        rankings = [list(r) for r in FIVE_VOTERS]
        run_election(rankings)
        assert rankings == FIVE_VOTERS

    def test_chosen_systems(self):
        result = run_election(
            FIVE_VOTERS, systems=[SingleTransferableVoteSystem()]
        )
        assert [r.system_name for r in result.results] == ["Single Transferable Vote"]
        assert result.results[0].winner == CHARLIE

    def test_rejected_ballots_skipped(self):
        """An empty ballot is rejected by FPTP but approves nobody."""
        result = run_election([[ALLY], [ALLY, BOB], [BOB, ALLY], []])
        by_name = {r.system_name: r for r in result.results}
        assert by_name["First Past the Post"].details["rejected_ballots"] == 1
        assert by_name["Approval"].details["rejected_ballots"] == 0
        assert by_name["Single Transferable Vote"].details["rejected_ballots"] == 1
        assert by_name["First Past the Post"].winner == ALLY

    def test_no_ballots(self):
        with pytest.raises(ElectionError, match="No ballots"):
            run_election([])

    def test_failing_system_does_not_stop_others(self):
        broken = MagicMock()
        broken.name = "Broken"
        broken.calculate.side_effect = NoCandidatesError("no candidates")

        result = run_election(FIVE_VOTERS, systems=[broken, SingleTransferableVoteSystem()])

        assert result.winners() == {"Broken": None, "Single Transferable Vote": CHARLIE}
        assert result.results[0].details["error"] == "no candidates"
        assert broken.vote.call_count == 5

    def test_to_dict(self):
        result = run_election([[ALLY], [ALLY], [BOB]], systems=[FirstPastThePostSystem()])
        assert result.to_dict() == {
            "num_ballots": 3,
            "results": [{
                "system_name": "First Past the Post",
                "winner": ALLY,
                "details": {"votes": {ALLY: 2, BOB: 1}, "rejected_ballots": 0},
            }],
        }
