"""Auction Purse Summarizer

Business logic for summarizing what a team spent at a player auction.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from constants import PLAYER_ROLES
from core.logging import get_logger
from core.numeric import Number, round_half_up
from records.models import Player, Team
from records.parser import parse_players, parse_team

logger = get_logger(__name__)


@dataclass(frozen=True)
class AuctionSummary:
    """Spend summary for one team."""

    team_name: Optional[str]
    total_spent: Number
    remaining: Number
    player_count: int
    average_price: int
    costliest_player: Player
    cheapest_player: Player
    by_role: Dict[str, int] = field(default_factory=dict)
    is_over_budget: bool = False


def count_roles(players: List[Player]) -> Dict[str, int]:
    """Count players per known role, in order of first appearance.

    Roles outside ``PLAYER_ROLES`` are ignored.
    """
    counts: Dict[str, int] = {}
    for player in players:
        if player.role in PLAYER_ROLES:
            counts[player.role] = counts.get(player.role, 0) + 1
    return counts


def summarize_auction(team: Any, players: Any) -> Optional[AuctionSummary]:
    """Summarize a team's auction spend.

    Args:
        team: ``{"name": ..., "purse": ...}`` with a positive purse
        players: Non-empty list of ``{"name", "role", "price"}`` records

    Returns:
        AuctionSummary, or None if the team or player list is unusable

    Raises:
        RecordError: If a player entry is malformed
    """
    parsed_team = parse_team(team)
    if not parsed_team["ok"]:
        logger.debug("Rejected team: {}", parsed_team["error"])
        return None

    parsed_players = parse_players(players)
    if not parsed_players["ok"]:
        logger.debug("Rejected players: {}", parsed_players["error"])
        return None

    squad: Team = parsed_team["value"]
    roster: List[Player] = parsed_players["value"]

    total_spent = 0
    costliest, cheapest = roster[0], roster[0]
    for player in roster:
        total_spent += player.price
        if player.price > costliest.price:
            costliest = player
        if player.price < cheapest.price:
            cheapest = player

    summary = AuctionSummary(
        team_name=squad.name,
        total_spent=total_spent,
        remaining=squad.purse - total_spent,
        player_count=len(roster),
        average_price=round_half_up(total_spent / len(roster)),
        costliest_player=costliest,
        cheapest_player=cheapest,
        by_role=count_roles(roster),
        is_over_budget=total_spent > squad.purse,
    )

    if summary.is_over_budget:
        logger.debug(
            "Team {} is over budget by {}", summary.team_name, -summary.remaining
        )
    return summary
