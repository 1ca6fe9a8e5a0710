"""Unit tests for ballot aggregation."""

from assembly_engine.domain.models.ballot import Ballot, BallotValue
from assembly_engine.domain.services.ballot_aggregator import aggregate_ballots


class TestAggregateBallots:
    """Tests for aggregate_ballots."""

    def test_counts_and_weights_per_value(self) -> None:
        """Ballots are summed by count and by member weight."""
        ballots = [
            Ballot("r1", "a", BallotValue.FOR),
            Ballot("r1", "b", BallotValue.FOR),
            Ballot("r1", "c", BallotValue.AGAINST),
            Ballot("r1", "d", BallotValue.ABSTAIN),
        ]

        aggregate = aggregate_ballots(ballots, weights={"a": 30, "b": 20, "c": 25})

        assert aggregate.counts[BallotValue.FOR] == 2
        assert aggregate.weights[BallotValue.FOR] == 50
        assert aggregate.weights[BallotValue.AGAINST] == 25
        assert aggregate.weights[BallotValue.ABSTAIN] == 1.0
        assert aggregate.ballot_count == 4

    def test_last_ballot_per_member_wins(self) -> None:
        """A member changing their vote is counted once, with the last value."""
        ballots = [
            Ballot("r1", "a", BallotValue.FOR),
            Ballot("r1", "a", BallotValue.AGAINST),
        ]

        aggregate = aggregate_ballots(ballots)

        assert aggregate.counts[BallotValue.FOR] == 0
        assert aggregate.counts[BallotValue.AGAINST] == 1

    def test_no_ballots(self) -> None:
        """Every value is present with zero figures."""
        aggregate = aggregate_ballots([])

        assert aggregate.ballot_count == 0
        assert set(aggregate.counts) == set(BallotValue)

    def test_to_tally_by_count_or_weight(self) -> None:
        """to_tally picks the unit and carries eligible/present totals."""
        ballots = [
            Ballot("r1", "a", BallotValue.FOR),
            Ballot("r1", "b", BallotValue.AGAINST),
        ]
        aggregate = aggregate_ballots(ballots, weights={"a": 3, "b": 1})

        by_weight = aggregate.to_tally(eligible=10, present=6)
        by_count = aggregate.to_tally(use_weights=False)

        assert (by_weight.for_, by_weight.against, by_weight.abstain) == (3, 1, 0)
        assert by_weight.eligible == 10
        assert by_weight.present == 6
        assert (by_count.for_, by_count.against) == (1, 1)
        assert by_count.eligible is None

    def test_ballots_of_other_motions_ignored(self) -> None:
        """With a motion id, ballots cast on other motions are not counted."""
        ballots = [
            Ballot("r1", "a", BallotValue.FOR),
            Ballot("r2", "b", BallotValue.AGAINST),
            Ballot("r2", "a", BallotValue.AGAINST),
        ]

        aggregate = aggregate_ballots(ballots, motion_id="r1")

        assert aggregate.counts[BallotValue.FOR] == 1
        assert aggregate.counts[BallotValue.AGAINST] == 0
        assert aggregate.ballot_count == 1
