"""Standings tables computed from volleyball match results.

Every tracked category gets its own table, rebuilt from scratch on each call.
Matches only carry the opponent's name, so the club's own row is keyed by the
``club_name`` supplied by the caller. Rows are keyed by exact team name: no
trimming, no case folding.
"""

from __future__ import annotations

import struct
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

import pandas as pd

__all__ = [
    "StandingRow",
    "team_key",
    "compute_standings",
    "rank_table",
    "standings_frame",
]

# Best-of-5: first to three sets.
SETS_TO_WIN = 3

STANDINGS_COLUMNS = ["rank", "team", "points", "played", "wins", "losses", "is_club"]


@dataclass
class StandingRow:
    team_id: int
    team_name: str
    played: int = 0
    wins: int = 0
    losses: int = 0
    points: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def team_key(name: str) -> int:
    """Stable 32-bit string hash of ``name`` (absolute value).

    Mirrors the classic ``h = 31*h + c`` rolling hash wrapped to a signed
    32-bit integer, with ``c`` running over UTF-16 code units so characters
    outside the BMP hash as their surrogate pair.
    """
    data = name.encode("utf-16-le", "surrogatepass")
    h = 0
    for (unit,) in struct.iter_unpack("<H", data):
        h = (h * 31 + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


def _result_of(match: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    result = match.get("result")
    if not result:
        return None
    return result


def _points_for(win_score: int, loss_score: int) -> tuple[int, int]:
    """Return ``(winner_points, loser_points)`` for a final set count.

    Only 3-0, 3-1 and 3-2 are scored; any other scoreline awards nothing.
    """
    if win_score == SETS_TO_WIN and loss_score in (0, 1):
        return 3, 0
    if win_score == SETS_TO_WIN and loss_score == 2:
        return 2, 1
    return 0, 0


def _table_for(matches: Iterable[Mapping[str, Any]], category: str, club_name: str) -> List[StandingRow]:
    rows: Dict[str, StandingRow] = {}

    def ensure(name: str) -> StandingRow:
        row = rows.get(name)
        if row is None:
            row = StandingRow(team_id=team_key(name), team_name=name)
            rows[name] = row
        return row

    for match in matches:
        if match.get("category") != category:
            continue
        result = _result_of(match)
        if result is None:
            continue

        our_score = result.get("our_score", 0)
        opp_score = result.get("opponent_score", 0)

        club = ensure(club_name)
        opponent = ensure(match.get("opponent", ""))
        club.played += 1
        opponent.played += 1

        # Equal scores fall through to the opponent; a tie is not a valid
        # volleyball result and is left unnormalised.
        if our_score > opp_score:
            winner, loser = club, opponent
            win_score, loss_score = our_score, opp_score
        else:
            winner, loser = opponent, club
            win_score, loss_score = opp_score, our_score

        winner.wins += 1
        loser.losses += 1

        win_pts, loss_pts = _points_for(win_score, loss_score)
        winner.points += win_pts
        loser.points += loss_pts

    # sorted() is stable: equal points keep first-seen order.
    return sorted(rows.values(), key=lambda r: r.points, reverse=True)


def compute_standings(
    matches: Iterable[Mapping[str, Any]],
    tracked_categories: Iterable[str],
    club_name: str,
) -> Dict[str, List[StandingRow]]:
    """Build one points-ordered table per tracked category.

    ``matches`` are match rows (``category``, ``opponent`` and an optional
    ``result`` with ``our_score``/``opponent_score``). Matches without a
    result are ignored. Every tracked category is present in the output, even
    when it has no completed matches.
    """
    match_list = list(matches)
    standings: Dict[str, List[StandingRow]] = {}
    for category in tracked_categories:
        if category in standings:
            continue
        standings[category] = _table_for(match_list, category, club_name)
    return standings


def rank_table(rows: Iterable[StandingRow]) -> List[StandingRow]:
    """Order rows for display: points desc, then wins desc."""
    return sorted(rows, key=lambda r: (-r.points, -r.wins))


def standings_frame(rows: Iterable[StandingRow], club_name: str) -> pd.DataFrame:
    """Return the ranked presentation table for one category."""
    ranked = rank_table(rows)
    records = [
        {
            "rank": idx,
            "team": row.team_name,
            "points": row.points,
            "played": row.played,
            "wins": row.wins,
            "losses": row.losses,
            "is_club": row.team_name == club_name,
        }
        for idx, row in enumerate(ranked, start=1)
    ]
    return pd.DataFrame(records, columns=STANDINGS_COLUMNS)
