"""
Instafilter — Filter Registry
Maps human-readable filter labels to a filter kind plus fixed parameters,
and applies named filters to a RasterBuffer in order.
Every filter is a function: (buffer: RasterBuffer, **params) -> None
"""

import logging
from enum import Enum

from filters.channel import blue_filter, red_filter, green_filter
from filters.brightness import brightness
from filters.dots import dots, DOT_MODES


class UnknownFilterError(ValueError):
    """Raised when a filter label is not in the catalog."""
    pass


class FilterKind(Enum):
    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    BRIGHTNESS = "brightness"
    DOTS = "dots"


TRANSFORMS = {
    FilterKind.BLUE: blue_filter,
    FilterKind.RED: red_filter,
    FilterKind.GREEN: green_filter,
    FilterKind.BRIGHTNESS: brightness,
    FilterKind.DOTS: dots,
}

# Catalog: label -> kind, fixed params, category, description.
# Labels are lowercase; lookups lowercase the requested name first.
FILTERS = {
    # === PATTERN ===
    "dark dots": {
        "kind": FilterKind.DOTS,
        "category": "pattern",
        "params": {"mode": "dark"},
        "description": "Opaque black dot on every even row and column",
    },
    "light dots": {
        "kind": FilterKind.DOTS,
        "category": "pattern",
        "params": {"mode": "light"},
        "description": "Transparent hole on every even row and column",
    },

    # === COLOR ===
    "blue 50%": {
        "kind": FilterKind.BLUE,
        "category": "color",
        "params": {"intensity": 2},
        "description": "Moderate blue emphasis",
    },
    "blue 100%": {
        "kind": FilterKind.BLUE,
        "category": "color",
        "params": {"intensity": 5},
        "description": "Strong blue emphasis",
    },
    "green 50%": {
        "kind": FilterKind.GREEN,
        "category": "color",
        "params": {"intensity": 2},
        "description": "Moderate green emphasis",
    },
    "green 100%": {
        "kind": FilterKind.GREEN,
        "category": "color",
        "params": {"intensity": 5},
        "description": "Strong green emphasis",
    },
    "red 50%": {
        "kind": FilterKind.RED,
        "category": "color",
        "params": {"intensity": 2},
        "description": "Moderate red emphasis",
    },
    "red 100%": {
        "kind": FilterKind.RED,
        "category": "color",
        "params": {"intensity": 5},
        "description": "Strong red emphasis",
    },

    # === TONE ===
    "brightness 50%": {
        "kind": FilterKind.BRIGHTNESS,
        "category": "tone",
        "params": {"percentage": 50},
        "description": "Halve the brightness of every pixel",
    },
    "brightness 150%": {
        "kind": FilterKind.BRIGHTNESS,
        "category": "tone",
        "params": {"percentage": 150},
        "description": "Raise the brightness of every pixel by half",
    },
}

CATEGORIES = {
    "color": "COLOR",
    "tone": "TONE",
    "pattern": "PATTERN",
}

MAX_QUERY_LEN = 200


def _check_catalog():
    for label, entry in FILTERS.items():
        if label != label.lower():
            raise RuntimeError(f"Filter label '{label}' must be lowercase")
        if entry["kind"] not in TRANSFORMS:
            raise RuntimeError(f"No transform registered for {entry['kind']}")
        if entry["kind"] is FilterKind.DOTS and entry["params"]["mode"] not in DOT_MODES:
            raise RuntimeError(f"Filter '{label}' uses unknown dot mode {entry['params']['mode']!r}")


_check_catalog()


def normalize_name(name: str) -> str:
    return name.lower()


def resolve_filter(name: str):
    """Look up a filter label. Returns (fn, params).

    Raises UnknownFilterError if the label isn't in the catalog.
    """
    key = normalize_name(name)
    if key not in FILTERS:
        available = ", ".join(sorted(FILTERS.keys()))
        raise UnknownFilterError(f"Unknown filter: {key}. Available: {available}")
    entry = FILTERS[key]
    return TRANSFORMS[entry["kind"]], entry["params"].copy()


def list_filters(category: str = None) -> list[dict]:
    """List catalog entries, optionally only those in one category."""
    results = []
    for name, entry in FILTERS.items():
        if category and entry["category"] != category:
            continue
        results.append(_describe(name, entry))
    return results


def list_categories() -> list[str]:
    """Return ordered list of category keys."""
    return list(CATEGORIES.keys())


def search_filters(query: str, max_query_len: int = MAX_QUERY_LEN) -> list[dict]:
    """Search filters by label or description substring."""
    if len(query) > max_query_len:
        raise ValueError(f"Search query too long (max {max_query_len} chars)")
    query_lower = query.lower()
    return [
        _describe(name, entry)
        for name, entry in FILTERS.items()
        if query_lower in name or query_lower in entry["description"].lower()
    ]


def _describe(name: str, entry: dict) -> dict:
    return {
        "name": name,
        "kind": entry["kind"].value,
        "description": entry["description"],
        "params": dict(entry["params"]),
        "category": entry["category"],
    }


def apply_filter(buffer, name: str) -> None:
    """Apply one named filter to buffer in place.

    Raises UnknownFilterError for labels outside the catalog.
    """
    fn, params = resolve_filter(name)
    fn(buffer, **params)


def run_filters(buffer, names) -> list[str]:
    """Apply named filters in order. Each filter sees the previous one's output.

    Unrecognized names are logged, collected and skipped; the rest of the
    list still runs.

    Returns:
        Warning messages for the names that were skipped, in order.
    """
    warnings = []
    for name in names:
        try:
            fn, params = resolve_filter(name)
        except UnknownFilterError:
            message = f"This filter '{normalize_name(name)}' is an invalid choice"
            logging.warning(message)
            warnings.append(message)
            continue
        fn(buffer, **params)
    return warnings
