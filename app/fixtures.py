"""Seed data used to populate a fresh :class:`app.club_store.ClubStore`."""

from __future__ import annotations

import copy
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from app.categories import category_for_dob

CATEGORY_RULES: List[Dict[str, Any]] = [
    {"name": "U16 Garçons", "start_year": 2010, "end_year": 2011},
    {"name": "U16 Filles", "start_year": 2010, "end_year": 2011},
    {"name": "U18 Garçons", "start_year": 2008, "end_year": 2009},
    {"name": "U18 Filles", "start_year": 2008, "end_year": 2009},
    {"name": "U20", "start_year": 2005, "end_year": 2007},
    {"name": "Senior", "start_year": 1900, "end_year": 2004},
    {"name": "Dames", "start_year": 1900, "end_year": 2004},
]

TEAMS: List[Dict[str, Any]] = [
    {"id": 1, "name": "AS FAR", "category": "Dames", "logo": "", "photo_url": ""},
    {"id": 2, "name": "OCS", "category": "Dames", "logo": "", "photo_url": ""},
    {"id": 3, "name": "Noor Marrakech", "category": "U20", "logo": "", "photo_url": ""},
    {"id": 4, "name": "Raja Casablanca", "category": "U20", "logo": "", "photo_url": ""},
    {"id": 5, "name": "Wydad Casablanca", "category": "U18 Garçons", "logo": "", "photo_url": ""},
    {"id": 6, "name": "Atlas Lions VC", "category": "Senior", "logo": "", "photo_url": ""},
    {"id": 7, "name": "Agadir Volley", "category": "Senior", "logo": "", "photo_url": ""},
    {"id": 8, "name": "Tiznit Titans", "category": "U16 Garçons", "logo": "", "photo_url": ""},
    {"id": 9, "name": "Filles d'Agadir", "category": "U18 Filles", "logo": "", "photo_url": ""},
    {"id": 10, "name": "Jeunes Talents", "category": "U16 Filles", "logo": "", "photo_url": ""},
]

GENERAL_SETTINGS: Dict[str, Any] = {
    "club_name": "Mouloudia Tiznit",
    "logo_url": "",
    "is_maintenance_mode": False,
    "social_links": {
        "facebook": "https://facebook.com",
        "twitter": "https://twitter.com",
        "instagram": "https://instagram.com",
    },
    "enabled_standings_categories": ["Dames", "U18 Garçons", "U18 Filles", "U16 Garçons", "U16 Filles"],
}

HOME_PAGE_CONTENT: Dict[str, Any] = {
    "title": "MOULOUDIA TIZNIT",
    "subtitle": "Pride of Tiznit Volleyball",
    "cta_team": "Meet the Team",
    "cta_schedule": "View Schedule",
    "hero_image_url": "https://picsum.photos/seed/hero/1200/400",
}

CLUB_INFO: Dict[str, str] = {
    "history": (
        "Founded with passion, Mouloudia Tiznit Volleyball Club has been a cornerstone "
        "of the local sports community for decades."
    ),
    "mission": (
        "Promote volleyball in the Tiznit region, develop young talent and compete "
        "at the highest level with integrity."
    ),
}

STAFF: List[Dict[str, Any]] = [
    {"id": 1, "name": "Rachid Benali", "position": "Head Coach", "bio": "Twenty years on the bench.", "image_url": ""},
    {"id": 2, "name": "Fatima Zahra", "position": "Assistant Coach", "bio": "Former national team player.", "image_url": ""},
    {"id": 3, "name": "Hassan Alami", "position": "Club President", "bio": "", "image_url": ""},
]

SPONSORS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Tiznit Telecom", "image_url": "", "website_url": "#", "tier": "Platinum"},
    {"id": 2, "name": "Banque Populaire Tiznit", "image_url": "", "website_url": "#", "tier": "Platinum"},
    {"id": 3, "name": "Souss-Massa Region", "image_url": "", "website_url": "#", "tier": "Gold"},
    {"id": 4, "name": "Café des Sports", "image_url": "", "website_url": "#", "tier": "Silver"},
]

_SIZES = [{"value": s, "label": s} for s in ("S", "M", "L", "XL")]

PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Home Jersey 2024/25",
        "description": "Official home jersey. Lightweight, breathable fabric.",
        "price": 450,
        "images": ["https://picsum.photos/seed/jersey1/500/500"],
        "category": "Jerseys",
        "stock": 50,
        "variants": [
            {"name": "Size", "type": "button", "options": _SIZES},
            {
                "name": "Color",
                "type": "color",
                "options": [{"value": "#16a34a", "label": "Green"}, {"value": "#f8fafc", "label": "White"}],
            },
        ],
    },
    {
        "id": 2,
        "name": "Club Scarf",
        "description": "Supporter scarf in club colours.",
        "price": 150,
        "images": ["https://picsum.photos/seed/scarf/500/500"],
        "category": "Accessories",
        "stock": 100,
        "variants": [{"name": "Style", "type": "button", "options": [{"value": "Classic", "label": "Classic"}]}],
    },
    {
        "id": 3,
        "name": "Official Volleyball",
        "description": "Match ball with the club crest.",
        "price": 300,
        "images": ["https://picsum.photos/seed/ball/500/500"],
        "category": "Equipment",
        "stock": 0,
        "variants": [{"name": "Size", "type": "button", "options": [{"value": "Size 5", "label": "Size 5"}]}],
    },
    {
        "id": 4,
        "name": "Training Hoodie",
        "description": "Fleece-lined hoodie for training or casual wear.",
        "price": 550,
        "images": ["https://picsum.photos/seed/hoodie/500/500"],
        "category": "Apparel",
        "stock": 25,
        "variants": [{"name": "Size", "type": "dropdown", "options": _SIZES[1:]}],
    },
]


def _iso(dt: datetime) -> str:
    return dt.isoformat()


def _player(pid: int, name: str, sex: str, year: int, team: Optional[str], **extra: Any) -> Dict[str, Any]:
    dob = f"{year}-01-01"
    row = {
        "id": pid,
        "name": name,
        "sex": sex,
        "email": f"{name.lower().replace(' ', '.').replace('-', '')}@example.com",
        "dob": dob,
        "phone": f"555-01{pid:02d}",
        "status": "assigned" if team else "pending",
        "category": category_for_dob(dob, CATEGORY_RULES),
        "team": team,
        "documents": {"id_card": "id_card.pdf", "parental_auth": None, "medical_cert": "medical.pdf"},
        "notifications": [],
        "is_verified": True,
        "auth_provider": "email",
        "position": "Outside Hitter",
        "number": pid,
        "image_url": "",
        "height": "",
        "bio": "",
        "stats": {"matches_played": 0, "points": 0, "blocks": 0, "aces": 0},
    }
    row.update(extra)
    return row


def seed_data(now: Optional[datetime] = None) -> Dict[str, Any]:
    """Return a fresh deep copy of the demo club, with match dates relative to ``now``."""
    now = now or datetime.now(timezone.utc)

    def days(n: int) -> str:
        return _iso(now + timedelta(days=n))

    players = [
        _player(1, "Karim Ait Hamou", "Male", 2003, "Senior", position="Setter", number=10),
        _player(2, "Yasmine El-Ghazi", "Female", 2004, "Dames", number=7),
        _player(3, "Amine Boussouf", "Male", 2002, "Senior", position="Middle Blocker", number=12),
        _player(4, "Mahdia Ziyech", "Female", 2005, "U20", position="Libero", number=1),
        _player(5, "Bilal Benkassou", "Male", 2008, "U18 Garçons", position="Opposite Hitter", number=5),
        _player(6, "Samira Laghrissi", "Female", 2009, None, is_verified=False),
    ]

    matches = [
        {"id": 1, "opponent": "Atlas Lions VC", "category": "Senior", "date": days(-14),
         "location": "Tiznit Arena", "is_home": True, "result": {"our_score": 3, "opponent_score": 0}},
        {"id": 2, "opponent": "Agadir Volley", "category": "Senior", "date": days(-7),
         "location": "Agadir Sports Hall", "is_home": False, "result": {"our_score": 3, "opponent_score": 2}},
        {"id": 3, "opponent": "AS FAR", "category": "Dames", "date": days(-10),
         "location": "Tiznit Arena", "is_home": True, "result": {"our_score": 3, "opponent_score": 0}},
        {"id": 4, "opponent": "OCS", "category": "Dames", "date": days(-3),
         "location": "OCS Hall", "is_home": False, "result": {"our_score": 2, "opponent_score": 3}},
        {"id": 5, "opponent": "Noor Marrakech", "category": "U20", "date": days(7),
         "location": "Tiznit Arena", "is_home": True},
        {"id": 6, "opponent": "Wydad Casablanca", "category": "U18 Garçons", "date": days(28),
         "location": "Mohammed V Complex", "is_home": False},
        {"id": 7, "opponent": "Tiznit Titans", "category": "U16 Garçons", "date": days(10),
         "location": "Tiznit Arena", "is_home": True},
        {"id": 8, "opponent": "Filles d'Agadir", "category": "U18 Filles", "date": days(12),
         "location": "Agadir Hall", "is_home": False},
    ]

    news = [
        {"id": 1, "title": "Season opener: a 3-0 win", "date": days(-14),
         "summary": "A decisive win over Atlas Lions VC.",
         "content": "The home crowd at Tiznit Arena saw a commanding 3-0 victory.",
         "image_url": "https://picsum.photos/seed/n1/600/400"},
        {"id": 2, "title": "New youth training programme", "date": days(-20),
         "summary": "Weekly sessions for young players in the Souss-Massa region.",
         "content": "The club launches weekly sessions with coaching from club staff.",
         "image_url": "https://picsum.photos/seed/n3/600/400"},
    ]

    orders = [
        {
            "id": 1,
            "customer": {"name": "Ahmed Hassan", "email": "ahmed@example.com", "phone": "555-1234",
                         "address": "123 Main St", "city": "Tiznit", "postal_code": "85000"},
            "items": [
                {"product_id": 1, "name": "Home Jersey 2024/25", "price": 450, "quantity": 1,
                 "selected_variants": {"Size": "L", "Color": "#16a34a"}},
                {"product_id": 2, "name": "Club Scarf", "price": 150, "quantity": 2,
                 "selected_variants": {"Style": "Classic"}},
            ],
            "total": 750,
            "status": "Pending",
            "date": days(-2),
        },
    ]

    data = {
        "players": players,
        "news": news,
        "matches": matches,
        "sponsors": SPONSORS,
        "category_rules": CATEGORY_RULES,
        "teams": TEAMS,
        "staff": STAFF,
        "products": PRODUCTS,
        "orders": orders,
        "general_settings": GENERAL_SETTINGS,
        "home_page_content": HOME_PAGE_CONTENT,
        "club_info": CLUB_INFO,
        "admin_activity": [],
        "tracked_categories": list(GENERAL_SETTINGS["enabled_standings_categories"]),
        "live_match_id": None,
    }
    return copy.deepcopy(data)


__all__ = ["seed_data", "CATEGORY_RULES"]
