import re
from typing import Iterable


def prettify_name(name: str) -> str:
    """Turn a repo slug into a display title: "hotel-reservations_ml" -> "Hotel Reservations Ml"."""
    spaced = re.sub(r"[-_]", " ", name or "")
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), spaced)


def dedupe_preserving_order(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for v in values:
        if v in seen:
            continue
        seen.add(v)
        out.append(v)
    return out
