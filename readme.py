"""README heuristics: first image reference and a short descriptive paragraph.

Neither function is a markdown parser. Only image syntax and blank-line
paragraph boundaries are recognised.
"""
import re
from typing import Optional
from urllib.parse import urlparse

RAW_CONTENT_HOST = "https://raw.githubusercontent.com"
HOSTING_DOMAINS = {"github.com", "www.github.com"}

IMAGE_PATTERN = re.compile(r"!\[[^\]]*]\((.*?)\)")
# Optional markdown image title: ![alt](path "title")
IMAGE_TITLE_PATTERN = re.compile(r"\s+[\"'][^\"']*[\"']\s*$")
PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
SENTENCE_BREAK = re.compile(r"(?<=[.!?])\s+")

SKIP_PREFIXES = ("#", "![", "<", "```")
SKIP_MARKERS = ("badge", "shields.io")
MIN_SUMMARY_LENGTH = 40
MAX_SUMMARY_SENTENCES = 3


def _is_absolute(url: str) -> bool:
    return url.startswith("http://") or url.startswith("https://")


def resolve_image_reference(raw_path: str, repo_id: str, default_branch: str | None = "main") -> str:
    """Resolve a README image path to a URL that serves the image bytes.

    Args:
        raw_path: Literal target captured from ![alt](...)
        repo_id: Owning repository, "owner/repo"
        default_branch: Branch used for relative paths (falls back to "main")

    Returns:
        Absolute URL. Never raises; odd input gives a best-effort URL.
    """
    clean = (raw_path or "").strip()
    if clean.startswith("<") and clean.endswith(">"):
        clean = clean[1:-1].strip()

    if clean.startswith("//"):
        clean = f"https:{clean}"

    if _is_absolute(clean):
        parsed = urlparse(clean)
        # github.com/<owner>/<repo>/blob/<branch>/<path> is an HTML page, not the file
        if parsed.netloc.lower() in HOSTING_DOMAINS and "/blob/" in parsed.path:
            url = RAW_CONTENT_HOST + parsed.path.replace("/blob/", "/", 1)
            return f"{url}?{parsed.query}" if parsed.query else url
        return clean

    if clean.startswith("./"):
        clean = clean[2:]
    elif clean.startswith("/"):
        clean = clean[1:]
    branch = (default_branch or "").strip() or "main"
    return f"{RAW_CONTENT_HOST}/{repo_id}/{branch}/{clean}"


def find_image_reference(markdown: str | None) -> Optional[str]:
    """Return the target of the first markdown image, or None."""
    if not markdown:
        return None
    m = IMAGE_PATTERN.search(markdown)
    if not m:
        return None
    target = IMAGE_TITLE_PATTERN.sub("", m.group(1)).strip()
    return target or None


def _is_structural(paragraph: str) -> bool:
    if paragraph.startswith(SKIP_PREFIXES):
        return True
    lowered = paragraph.lower()
    return any(marker in lowered for marker in SKIP_MARKERS)


def extract_readme_summary(markdown: str | None) -> Optional[str]:
    """Pick the first prose paragraph of a README.

    Headings, images, HTML, code fences and badge lines are skipped, as is
    anything of MIN_SUMMARY_LENGTH characters or fewer.
    """
    if not markdown:
        return None
    for candidate in PARAGRAPH_BREAK.split(markdown):
        paragraph = candidate.strip()
        if not paragraph or _is_structural(paragraph):
            continue
        if len(paragraph) > MIN_SUMMARY_LENGTH:
            return paragraph
    return None


def shorten_summary(summary: str, max_sentences: int = MAX_SUMMARY_SENTENCES) -> str:
    """Collapse whitespace and keep at most the first `max_sentences` sentences."""
    cleaned = re.sub(r"\s+", " ", summary or "").strip()
    sentences = [s for s in SENTENCE_BREAK.split(cleaned) if s]
    return " ".join(sentences[:max_sentences])
