"""
Positional layout of the YES portal pages.

The portal exposes no ids or classes worth selecting on, so both pages are read
by element position. Every position the parsers depend on lives here so that a
portal layout change is a one-place edit.
"""

# --- Listing table (cells of each <tr>, header row excluded) ---

LISTING_COLUMNS = {
    "id": 0,
    "date": 1,
    "title": 2,
    "work_study": 3,
    "on_campus": 4,
    "hiring_period": 5,
    "hours_per_week": 6,
}
LISTING_MIN_CELLS = max(LISTING_COLUMNS.values()) + 1

# Header rows at the top of the listing table
LISTING_HEADER_ROWS = 1

# --- Detail page (<p> elements, zero-based) ---

DETAIL_PARAGRAPHS = {
    "description": 1,
    "hourly_pay_rate": 2,
    "on_bus_route": 5,
    "how_to_apply": 8,
    "website": 9,
    "contact": 10,
    "contact_email": 11,
    "contact_phone": 12,
    "street_address": 13,
    "city": 14,
    "state": 15,
    "department_info": 17,
}
DETAIL_MIN_PARAGRAPHS = max(DETAIL_PARAGRAPHS.values()) + 1

# Placeholder text the portal shows instead of leaving a field empty
OPTIONAL_SENTINELS = {
    "website": "No web site provided",
    "contact_phone": "No phone number provided",
    "street_address": "No address provided",
    "city": "No city provided",
    "department_info": "---",
}

# Every paragraph opens with a label and an icon before the value
PARAGRAPH_PREFIX_NODES = 2

# Attribute Cloudflare puts on protected email links
CF_EMAIL_ATTR = "data-cfemail"
