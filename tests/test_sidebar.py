from app.ui.sidebar import _build_profile_html, compute_initials


def test_compute_initials():
    assert compute_initials("Karim Ait Hamou") == "KA"
    assert compute_initials("yasmine") == "Y"
    assert compute_initials("  ") == ""
    assert compute_initials("Élodie Ñúñez", max_len=3) == "ÉÑ"


def test_profile_card_escapes_name():
    html = _build_profile_html({"name": "<b>Bad</b>", "role": "player"})
    assert "&lt;b&gt;Bad&lt;/b&gt;" in html
    assert "player" in html


def test_profile_card_falls_back_to_email():
    html = _build_profile_html({"email": "admin@club.ma", "role": "admin"})
    assert "admin@club.ma" in html
