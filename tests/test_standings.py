import pytest

from app.standings import (
    STANDINGS_COLUMNS,
    StandingRow,
    compute_standings,
    rank_table,
    standings_frame,
    team_key,
)

CLUB = "Mouloudia Tiznit"


def _match(category, opponent, ours=None, theirs=None):
    row = {"category": category, "opponent": opponent}
    if ours is not None:
        row["result"] = {"our_score": ours, "opponent_score": theirs}
    return row


def _by_name(rows):
    return {r.team_name: r for r in rows}


def test_straight_win_gives_three_points():
    tables = compute_standings([_match("U18 Garçons", "Wydad", 3, 0)], ["U18 Garçons"], CLUB)
    rows = tables["U18 Garçons"]
    assert [r.team_name for r in rows] == [CLUB, "Wydad"]
    club, opp = rows
    assert (club.played, club.wins, club.losses, club.points) == (1, 1, 0, 3)
    assert (opp.played, opp.wins, opp.losses, opp.points) == (1, 0, 1, 0)


def test_three_one_scores_like_three_nil():
    rows = _by_name(compute_standings([_match("Dames", "AS FAR", 1, 3)], ["Dames"], CLUB)["Dames"])
    assert rows["AS FAR"].points == 3
    assert rows[CLUB].points == 0
    assert rows[CLUB].losses == 1


def test_five_set_match_splits_points():
    rows = _by_name(compute_standings([_match("Dames", "OCS", 2, 3)], ["Dames"], CLUB)["Dames"])
    assert rows["OCS"].points == 2
    assert rows[CLUB].points == 1
    assert rows["OCS"].wins == 1 and rows[CLUB].losses == 1


def test_unscored_scoreline_counts_result_without_points():
    rows = _by_name(compute_standings([_match("Dames", "OCS", 2, 0)], ["Dames"], CLUB)["Dames"])
    assert rows[CLUB].wins == 1
    assert rows[CLUB].points == 0
    assert rows["OCS"].points == 0


def test_tie_is_credited_to_opponent():
    rows = _by_name(compute_standings([_match("Dames", "OCS", 2, 2)], ["Dames"], CLUB)["Dames"])
    assert rows["OCS"].wins == 1
    assert rows[CLUB].losses == 1
    assert rows["OCS"].points == 0


def test_matches_without_result_are_ignored():
    tables = compute_standings([_match("Dames", "OCS")], ["Dames"], CLUB)
    assert tables == {"Dames": []}


def test_dames_table_end_to_end():
    matches = [_match("Dames", "AS FAR", 3, 0), _match("Dames", "OCS", 2, 3)]
    rows = compute_standings(matches, ["Dames"], CLUB)["Dames"]
    assert [(r.team_name, r.played, r.wins, r.losses, r.points) for r in rows] == [
        (CLUB, 2, 1, 1, 4),
        ("OCS", 1, 1, 0, 2),
        ("AS FAR", 1, 0, 1, 0),
    ]


def test_unplayed_match_does_not_change_populated_table():
    played = [_match("Dames", "AS FAR", 3, 0), _match("Dames", "OCS", 2, 3)]
    before = compute_standings(played, ["Dames"], CLUB)
    after = compute_standings([*played, _match("Dames", "Nouveau Club")], ["Dames"], CLUB)
    assert after == before


def test_only_tracked_categories_are_computed():
    matches = [_match("Senior", "Atlas Lions VC", 3, 0), _match("Dames", "OCS", 3, 1)]
    tables = compute_standings(matches, ["Dames", "U16 Filles"], CLUB)
    assert set(tables) == {"Dames", "U16 Filles"}
    assert tables["U16 Filles"] == []
    assert {r.team_name for r in tables["Dames"]} == {CLUB, "OCS"}


def test_empty_tracked_set_gives_empty_mapping():
    assert compute_standings([_match("Dames", "OCS", 3, 0)], [], CLUB) == {}


def test_played_equals_wins_plus_losses():
    matches = [
        _match("Senior", "A", 3, 0),
        _match("Senior", "B", 2, 3),
        _match("Senior", "A", 3, 2),
        _match("Senior", "C", 0, 3),
        _match("Senior", "B", 1, 1),
    ]
    rows = compute_standings(matches, ["Senior"], CLUB)["Senior"]
    for row in rows:
        assert row.played == row.wins + row.losses
    assert _by_name(rows)[CLUB].played == 5


def test_every_opponent_gets_exactly_one_row():
    matches = [_match("Senior", "A", 3, 0), _match("Senior", "A", 0, 3), _match("Senior", "B", 3, 2)]
    rows = compute_standings(matches, ["Senior"], CLUB)["Senior"]
    names = [r.team_name for r in rows]
    assert sorted(names) == sorted({CLUB, "A", "B"})
    assert len(names) == len(set(names))


def test_names_are_exact_and_case_sensitive():
    matches = [_match("Senior", "Agadir", 3, 0), _match("Senior", "agadir ", 3, 0)]
    rows = compute_standings(matches, ["Senior"], CLUB)["Senior"]
    assert {r.team_name for r in rows} == {CLUB, "Agadir", "agadir "}


def test_opponent_named_like_club_merges_rows():
    rows = compute_standings([_match("Senior", CLUB, 3, 1)], ["Senior"], CLUB)["Senior"]
    assert len(rows) == 1
    row = rows[0]
    assert (row.played, row.wins, row.losses, row.points) == (2, 1, 1, 3)


def test_sort_is_stable_on_equal_points():
    matches = [_match("Senior", "Zeta", 0, 3), _match("Senior", "Alpha", 0, 3)]
    rows = compute_standings(matches, ["Senior"], CLUB)["Senior"]
    assert [r.team_name for r in rows] == ["Zeta", "Alpha", CLUB]


def test_malformed_scores_do_not_raise():
    matches = [_match("Senior", "A", -1, 7), _match("Senior", "B", 5, 0)]
    rows = _by_name(compute_standings(matches, ["Senior"], CLUB)["Senior"])
    assert rows["A"].wins == 1 and rows["A"].points == 0
    assert rows["B"].losses == 1
    assert rows[CLUB].points == 0


def test_compute_is_pure():
    matches = [_match("Dames", "OCS", 2, 3), _match("Dames", "AS FAR", 3, 0)]
    first = compute_standings(matches, ["Dames"], CLUB)
    second = compute_standings(matches, ["Dames"], CLUB)
    assert first == second
    assert matches[0]["result"] == {"our_score": 2, "opponent_score": 3}


def test_team_key_is_stable_32_bit_hash():
    assert team_key("") == 0
    assert team_key("a") == 97
    assert team_key("ab") == 97 * 31 + 98
    assert team_key(CLUB) == team_key(CLUB)
    assert 0 <= team_key("a much longer team name that overflows") < 2**31 + 1


def test_team_key_hashes_utf16_code_units():
    # U+1F3D0 is the surrogate pair D83C DFD0
    assert team_key("\U0001F3D0") == 0xD83C * 31 + 0xDFD0
    assert team_key("é") == 0xE9


def test_rank_table_breaks_ties_on_wins():
    rows = [
        StandingRow(team_id=1, team_name="A", played=2, wins=1, losses=1, points=3),
        StandingRow(team_id=2, team_name="B", played=2, wins=2, losses=0, points=3),
        StandingRow(team_id=3, team_name="C", played=1, wins=1, losses=0, points=4),
    ]
    assert [r.team_name for r in rank_table(rows)] == ["C", "B", "A"]


def test_standings_frame_marks_club_row():
    matches = [_match("Dames", "OCS", 2, 3), _match("Dames", "AS FAR", 3, 0)]
    rows = compute_standings(matches, ["Dames"], CLUB)["Dames"]
    df = standings_frame(rows, CLUB)
    assert list(df.columns) == STANDINGS_COLUMNS
    assert df["rank"].tolist() == [1, 2, 3]
    club_rows = df[df["is_club"]]
    assert club_rows["team"].tolist() == [CLUB]
    assert int(club_rows["points"].iloc[0]) == 4


def test_standings_frame_empty():
    df = standings_frame([], CLUB)
    assert df.empty
    assert list(df.columns) == STANDINGS_COLUMNS


@pytest.mark.parametrize(
    "ours,theirs,club_pts,opp_pts",
    [(3, 0, 3, 0), (3, 1, 3, 0), (3, 2, 2, 1), (0, 3, 0, 3), (1, 3, 0, 3), (2, 3, 1, 2)],
)
def test_points_table(ours, theirs, club_pts, opp_pts):
    rows = _by_name(compute_standings([_match("Senior", "X", ours, theirs)], ["Senior"], CLUB)["Senior"])
    assert rows[CLUB].points == club_pts
    assert rows["X"].points == opp_pts
