"""Turn a RawRecord into the EnrichedRecord shown on a project card.

Field precedence, highest first:
- description: override rule, repo description, README summary, placeholder
- tags: override rule, topics, language, DEFAULT_TAG
- image_url: "always" override image, README image, "fill" override image
- title: override rule, prettified repo name
- categories: override rule, DEFAULT_CATEGORY
"""
from logging import getLogger
from typing import Any, Iterable, Optional

from models import EnrichedRecord, OverrideRule, RawRecord
from overrides import DEFAULT_CATEGORY, DEFAULT_TAG, OVERRIDE_RULES, PLACEHOLDER_DESCRIPTION
from readme import extract_readme_summary, find_image_reference, resolve_image_reference, shorten_summary
from utils import prettify_name

logger = getLogger(__name__)


def _seed_tags(raw: RawRecord) -> tuple[str, ...]:
    topics = [t for t in raw.topics if t]
    if topics:
        return tuple(topics)
    if raw.language:
        return (raw.language,)
    return (DEFAULT_TAG,)


def apply_rule(fields: dict[str, Any], rule: OverrideRule) -> None:
    """Merge one rule into `fields` in place."""
    fields.update(rule.always.provided())
    for key, value in rule.fill.provided().items():
        if not fields.get(key):
            fields[key] = value


def _readme_media(raw: RawRecord) -> tuple[Optional[str], Optional[str]]:
    """Return (image_url, summary) derived from the README, if any."""
    if not raw.readme:
        return None, None
    image_url = None
    ref = find_image_reference(raw.readme)
    if ref:
        image_url = resolve_image_reference(ref, raw.id, raw.default_branch)
    return image_url, extract_readme_summary(raw.readme)


def enrich(raw: RawRecord, rules: Iterable[OverrideRule] = OVERRIDE_RULES) -> EnrichedRecord:
    """Build the display record for one repository. Pure; never raises for a valid RawRecord."""
    image_url, summary = _readme_media(raw)
    fields: dict[str, Any] = {
        "title": None,
        "description": (raw.description or "").strip() or None,
        "tags": _seed_tags(raw),
        "categories": None,
        "image_url": image_url,
    }

    matched = []
    name = raw.name.lower()
    for rule in rules:
        if rule.matches(name):
            apply_rule(fields, rule)
            matched.append(rule.key)
    if len(matched) > 1:
        logger.debug("[enrich] %s matched several rules %s, last one wins", raw.name, matched)

    if not fields["description"] and summary:
        fields["description"] = shorten_summary(summary)
    if not fields["description"]:
        fields["description"] = PLACEHOLDER_DESCRIPTION

    return EnrichedRecord(
        name=raw.name,
        title=fields["title"] or prettify_name(raw.name),
        description=fields["description"],
        tags=tuple(fields["tags"]) or (DEFAULT_TAG,),
        image_url=fields["image_url"],
        source_url=raw.html_url,
        categories=tuple(fields["categories"] or (DEFAULT_CATEGORY,)),
    )
