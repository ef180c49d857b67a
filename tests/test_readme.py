"""Tests for README image resolution and summary extraction."""

import pytest

from readme import (
    extract_readme_summary,
    find_image_reference,
    resolve_image_reference,
    shorten_summary,
)


class TestResolveImageReference:
    """Test resolve_image_reference."""

    def test_blob_link_rewritten_to_raw(self) -> None:
        url = resolve_image_reference(
            "https://github.com/acme/widget/blob/main/img.png", "acme/widget", "main"
        )
        assert url == "https://raw.githubusercontent.com/acme/widget/main/img.png"

    def test_http_blob_link_rewritten_to_https_raw(self) -> None:
        url = resolve_image_reference(
            "http://github.com/acme/widget/blob/dev/a/b.jpg", "acme/widget", "main"
        )
        assert url == "https://raw.githubusercontent.com/acme/widget/dev/a/b.jpg"

    def test_dot_slash_relative_path(self) -> None:
        url = resolve_image_reference("./assets/cover.png", "acme/widget", "develop")
        assert url == "https://raw.githubusercontent.com/acme/widget/develop/assets/cover.png"

    def test_leading_slash_relative_path(self) -> None:
        url = resolve_image_reference("/cover.png", "acme/widget", "main")
        assert url == "https://raw.githubusercontent.com/acme/widget/main/cover.png"

    def test_bare_relative_path(self) -> None:
        url = resolve_image_reference("img/x.png", "acme/widget", "main")
        assert url == "https://raw.githubusercontent.com/acme/widget/main/img/x.png"

    def test_missing_branch_defaults_to_main(self) -> None:
        url = resolve_image_reference("x.png", "acme/widget", None)
        assert url == "https://raw.githubusercontent.com/acme/widget/main/x.png"

    def test_angle_brackets_and_whitespace_stripped(self) -> None:
        url = resolve_image_reference("  <./my image.png>  ", "acme/widget", "main")
        assert url == "https://raw.githubusercontent.com/acme/widget/main/my image.png"

    def test_other_absolute_url_unchanged(self) -> None:
        src = "https://images.example.com/blob/photo.png"
        assert resolve_image_reference(src, "acme/widget", "main") == src

    def test_github_non_blob_url_unchanged(self) -> None:
        src = "https://github.com/acme/widget/raw/main/img.png"
        assert resolve_image_reference(src, "acme/widget", "main") == src

    def test_protocol_relative_url_gets_https(self) -> None:
        url = resolve_image_reference("//cdn.example.com/a.png", "acme/widget", "main")
        assert url == "https://cdn.example.com/a.png"

    @pytest.mark.parametrize("junk", ["", "   ", "<>", "(((", "https://"])
    def test_never_raises(self, junk: str) -> None:
        assert isinstance(resolve_image_reference(junk, "acme/widget", "main"), str)


class TestFindImageReference:
    """Test find_image_reference."""

    def test_returns_first_image_target(self) -> None:
        md = "intro\n\n![one](a.png)\n\n![two](b.png)"
        assert find_image_reference(md) == "a.png"

    def test_drops_markdown_title(self) -> None:
        assert find_image_reference('![x](docs/a.png "A title")') == "docs/a.png"

    def test_no_image(self) -> None:
        assert find_image_reference("just [a link](x.html)") is None

    def test_empty_input(self) -> None:
        assert find_image_reference(None) is None
        assert find_image_reference("") is None


class TestExtractReadmeSummary:
    """Test extract_readme_summary."""

    def test_skips_heading_and_image(self) -> None:
        para = "This is a sufficiently long descriptive paragraph about the project purpose and scope."
        md = f"# Title\n\n![badge](url)\n\n{para}"
        assert extract_readme_summary(md) == para

    def test_trims_returned_paragraph(self) -> None:
        para = "A paragraph that is comfortably longer than forty characters in total."
        assert extract_readme_summary(f"\n\n   {para}   \n\n") == para

    def test_none_when_only_structure_and_short_lines(self) -> None:
        md = "# Heading\n\n![img](a.png)\n\nShort line here.\n\n## Usage\n\nAlso short."
        assert extract_readme_summary(md) is None

    def test_exactly_forty_chars_is_too_short(self) -> None:
        forty = "x" * 40
        assert extract_readme_summary(forty) is None
        assert extract_readme_summary(forty + "y") == forty + "y"

    def test_skips_html_code_and_badges(self) -> None:
        para = "The real description of this project, which is long enough to qualify."
        md = "\n\n".join(
            [
                '<p align="center"><img src="logo.png"></p>',
                "```python\nprint('a very long line of code that would otherwise qualify')\n```",
                "Build status: see the BADGE row for the full continuous integration state",
                "[![x](https://img.shields.io/pypi/v/widget)](https://pypi.org/project/widget) more",
                para,
            ]
        )
        assert extract_readme_summary(md) == para

    def test_blank_lines_with_whitespace_split_paragraphs(self) -> None:
        first = "First paragraph that is long enough to be chosen as the summary text."
        md = f"# T\n   \n{first}\n \t \nSecond paragraph also long enough to qualify as a summary."
        assert extract_readme_summary(md) == first

    def test_empty_input(self) -> None:
        assert extract_readme_summary(None) is None
        assert extract_readme_summary("") is None


class TestShortenSummary:
    """Test shorten_summary."""

    def test_keeps_first_three_sentences(self) -> None:
        text = "One is here. Two is here! Three is here? Four is dropped."
        assert shorten_summary(text) == "One is here. Two is here! Three is here?"

    def test_collapses_whitespace(self) -> None:
        assert shorten_summary("Line one\ncontinues.\n\nNext   one.") == "Line one continues. Next one."

    def test_no_terminal_punctuation_kept_whole(self) -> None:
        assert shorten_summary("A summary without a full stop") == "A summary without a full stop"

    def test_version_numbers_do_not_split(self) -> None:
        assert shorten_summary("Uses v1.2 of the API. Second. Third. Fourth.") == (
            "Uses v1.2 of the API. Second. Third."
        )
