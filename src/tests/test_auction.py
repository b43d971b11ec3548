"""Tests for the auction purse summarizer."""

import pytest

from errors import RecordError
from records.models import Player
from services.auction import summarize_auction


@pytest.fixture
def team():
    return {"name": "CSK", "purse": 9000}


class TestSummarizeAuction:
    """Tests for summarize_auction()."""

    def test_within_budget(self, team):
        summary = summarize_auction(
            team,
            [
                {"name": "Dhoni", "role": "wk", "price": 1200},
                {"name": "Jadeja", "role": "ar", "price": 1600},
            ],
        )

        assert summary.team_name == "CSK"
        assert summary.total_spent == 2800
        assert summary.remaining == 6200
        assert summary.player_count == 2
        assert summary.average_price == 1400
        assert summary.costliest_player == Player(name="Jadeja", role="ar", price=1600)
        assert summary.cheapest_player == Player(name="Dhoni", role="wk", price=1200)
        assert summary.by_role == {"wk": 1, "ar": 1}
        assert summary.is_over_budget is False

    def test_over_budget(self):
        summary = summarize_auction(
            {"name": "RCB", "purse": 500},
            [{"name": "Kohli", "role": "bat", "price": 1700}],
        )

        assert summary.remaining == -1200
        assert summary.is_over_budget is True

    def test_spending_exactly_the_purse_is_not_over_budget(self):
        summary = summarize_auction(
            {"name": "MI", "purse": 1000}, [{"name": "Rohit", "role": "bat", "price": 1000}]
        )

        assert summary.remaining == 0
        assert summary.is_over_budget is False

    def test_role_counts_ignore_unknown_roles(self, team):
        players = [
            {"name": "A", "role": "bowl", "price": 100},
            {"name": "B", "role": "bat", "price": 100},
            {"name": "C", "role": "coach", "price": 100},
            {"name": "D", "role": "bowl", "price": 100},
            {"name": "E", "price": 100},
        ]

        summary = summarize_auction(team, players)

        assert summary.by_role == {"bowl": 2, "bat": 1}
        assert list(summary.by_role) == ["bowl", "bat"]
        assert summary.player_count == 5

    def test_price_ties_keep_first_player(self, team):
        players = [
            {"name": "A", "role": "bat", "price": 500},
            {"name": "B", "role": "bat", "price": 900},
            {"name": "C", "role": "bat", "price": 900},
            {"name": "D", "role": "bat", "price": 500},
        ]

        summary = summarize_auction(team, players)

        assert summary.costliest_player.name == "B"
        assert summary.cheapest_player.name == "A"

    def test_average_rounds_half_up(self, team):
        players = [
            {"name": "A", "role": "bat", "price": 100},
            {"name": "B", "role": "bat", "price": 101},
        ]

        assert summarize_auction(team, players).average_price == 101

    def test_duplicate_names_allowed(self, team):
        players = [{"name": "Sharma", "role": "bat", "price": 10}] * 3

        assert summarize_auction(team, players).player_count == 3

    @pytest.mark.parametrize(
        "bad_team",
        [None, [], {"name": "CSK"}, {"purse": 0}, {"purse": -100}, {"purse": "9000"},
         {"purse": float("nan")}],
    )
    def test_invalid_team_returns_none(self, bad_team):
        assert summarize_auction(bad_team, [{"name": "A", "role": "bat", "price": 1}]) is None

    @pytest.mark.parametrize("players", [None, [], "Dhoni", {"name": "Dhoni"}])
    def test_invalid_players_returns_none(self, team, players):
        assert summarize_auction(team, players) is None

    def test_deterministic(self, team):
        """The same roster always gives an equal summary."""
        players = [
            {"name": "Dhoni", "role": "wk", "price": 1200},
            {"name": "Jadeja", "role": "ar", "price": 1600},
            {"name": "Unknown", "role": "coach", "price": 5},
        ]

        assert summarize_auction(team, players) == summarize_auction(team, players)

    def test_malformed_player_raises(self, team):
        with pytest.raises(RecordError):
            summarize_auction(team, [{"name": "Dhoni", "role": "wk"}])
