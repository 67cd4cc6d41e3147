# db_tables.py: Supabase table names for the club snapshot
PLAYERS        = "players"
NEWS           = "news"
MATCHES        = "matches"
SPONSORS       = "sponsors"
TEAMS          = "teams"
STAFF          = "staff"
PRODUCTS       = "products"
ORDERS         = "orders"
ADMIN_ACTIVITY = "admin_activity"
KV             = "kv"           # whole sections stored under one key each

RECORD_TABLES = {
    "players": PLAYERS,
    "news": NEWS,
    "matches": MATCHES,
    "sponsors": SPONSORS,
    "teams": TEAMS,
    "staff": STAFF,
    "products": PRODUCTS,
    "orders": ORDERS,
    "admin_activity": ADMIN_ACTIVITY,
}

KV_KEYS = (
    "general_settings",
    "home_page_content",
    "club_info",
    "category_rules",
    "tracked_categories",
    "live_match_id",
)
