"""Canonicalization of free text before classification."""

import re

# canonical token -> surface variants, applied in this order
SYNONYMS: dict[str, tuple[str, ...]] = {
    "last": ("previous", "past"),
    "this": ("current", "present"),
    "next": ("forward", "future"),
    "second": ("seconds", "secs"),
    "minute": ("minutes", "mins"),
    "hour": ("hours",),
    "day": ("days",),
    "month": ("months",),
    "year": ("years",),
    "week": ("weeks",),
    "quarter": ("quarters",),
}

# Tokens are runs of letters/digits; "-" and "_" separate them like spaces
_SUBSTITUTIONS: list[tuple[re.Pattern[str], str]] = [
    (
        re.compile(r"(?<![a-z0-9])(?:" + "|".join(variants) + r")(?![a-z0-9])"),
        canonical,
    )
    for canonical, variants in SYNONYMS.items()
]


def normalize(text: str) -> str:
    """Lower-case ``text`` and rewrite synonyms to their canonical tokens.

    Only whole tokens are rewritten: ``"past 3 days"`` becomes
    ``"last 3 day"`` and ``"past_week"`` becomes ``"last_week"``, but
    ``"mondays"`` is left alone.
    """
    result = text.lower()
    for pattern, canonical in _SUBSTITUTIONS:
        result = pattern.sub(canonical, result)
    return result
