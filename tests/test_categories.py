from datetime import date

import pytest

from app.categories import UNCATEGORIZED, birth_year, category_for_dob, clean_rule, known_categories

RULES = [
    {"name": "U16 Garçons", "start_year": 2010, "end_year": 2011},
    {"name": "U16 Filles", "start_year": 2010, "end_year": 2011},
    {"name": "Senior", "start_year": 1900, "end_year": 2004},
]


def test_first_matching_rule_wins():
    assert category_for_dob("2010-06-01", RULES) == "U16 Garçons"


def test_bounds_are_inclusive():
    assert category_for_dob("2011-12-31", RULES) == "U16 Garçons"
    assert category_for_dob("2004-01-01", RULES) == "Senior"


def test_no_rule_matches():
    assert category_for_dob("2007-03-03", RULES) == UNCATEGORIZED


def test_missing_inputs_are_uncategorized():
    assert category_for_dob("", RULES) == UNCATEGORIZED
    assert category_for_dob(None, RULES) == UNCATEGORIZED
    assert category_for_dob("2010-01-01", []) == UNCATEGORIZED
    assert category_for_dob("not a date", RULES) == UNCATEGORIZED


def test_birth_year_accepts_dates_and_timestamps():
    assert birth_year(date(2009, 5, 1)) == 2009
    assert birth_year("2009-05-01T10:00:00+00:00") == 2009
    assert birth_year("garbage") is None


def test_clean_rule_coerces_years():
    assert clean_rule({"name": "U20", "start_year": "2005", "end_year": 2007}) == {
        "name": "U20",
        "start_year": 2005,
        "end_year": 2007,
    }


@pytest.mark.parametrize(
    "rule",
    [
        {"name": "", "start_year": 2000, "end_year": 2001},
        {"name": "  ", "start_year": 2000, "end_year": 2001},
        {"name": "X", "start_year": "abc", "end_year": 2001},
        {"name": "X", "start_year": 2000},
        {"name": "X", "start_year": 2005, "end_year": 2001},
    ],
)
def test_clean_rule_rejects_bad_rules(rule):
    with pytest.raises(ValueError):
        clean_rule(rule)


def test_known_categories_union_sorted():
    teams = [{"category": "Dames"}, {"category": "Senior"}, {"category": None}]
    assert known_categories(teams, RULES) == ["Dames", "Senior", "U16 Filles", "U16 Garçons"]
