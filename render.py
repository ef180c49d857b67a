"""Display description for the gallery page.

`render_gallery` is pure: it only reads the records it is given. The HTML
template turns each filter into a link carrying `?filter=<key>`, which is how
a selection gets back to the catalog.
"""
from typing import Any, Optional, Sequence

from gallery import ALL_FILTER
from models import EnrichedRecord

ALL_FILTER_LABEL = "All Projects"


def _card(record: EnrichedRecord) -> dict[str, Any]:
    return {
        "name": record.name,
        "title": record.title,
        "description": record.description,
        "tags": list(record.tags),
        "image_url": record.image_url,
        "source_url": record.source_url,
        "categories": list(record.categories),
    }


def render_gallery(
    visible: Sequence[EnrichedRecord],
    filters: Sequence[str],
    active_filter: Optional[str] = ALL_FILTER,
) -> dict[str, Any]:
    active = active_filter or ALL_FILTER
    buttons = [{"key": ALL_FILTER, "label": ALL_FILTER_LABEL, "active": active == ALL_FILTER}]
    buttons.extend({"key": f, "label": f, "active": active == f} for f in filters)
    return {
        "active_filter": active,
        "filters": buttons,
        "projects": [_card(r) for r in visible],
        "empty_message": None if visible else f'No projects found for "{active}".',
    }


GALLERY_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Projects</title>
</head>
<body>
  <nav class="filter-controls">
    {% for f in view.filters %}
    <a class="filter-btn{% if f.active %} active{% endif %}" href="?filter={{ f.key | urlencode }}" data-filter="{{ f.key }}">{{ f.label }}</a>
    {% endfor %}
  </nav>
  <section id="projects-grid" class="project-grid">
    {% if view.empty_message %}
    <p class="empty">{{ view.empty_message }}</p>
    {% endif %}
    {% for p in view.projects %}
    <a href="{{ p.source_url }}" target="_blank" class="project-card">
      <div class="project-thumb"{% if p.image_url %} style="background-image:url('{{ p.image_url }}');"{% endif %}></div>
      <div class="project-info">
        <h3>{{ p.title }}</h3>
        <p>{{ p.description }}</p>
        <div class="project-topics">
          {% for tag in p.tags %}<span class="lang-tag">{{ tag }}</span>{% endfor %}
        </div>
      </div>
    </a>
    {% endfor %}
  </section>
</body>
</html>
"""
