import pytest

from netcanvas.crawler_form import (
    CrawlerForm,
    CrawlerFormErrors,
    normalize_seed_url,
    parse_text_edit_input,
)


def test_parse_empty_html_gives_nothing():
    assert parse_text_edit_input("") == []


def test_parse_paragraphs():
    assert parse_text_edit_input("<html><body><p>a</p><p>b</p></body></html>") == ["a", "b"]


def test_parse_ignores_paragraph_attributes():
    html = '<p style="margin:0px;">example.com</p>'
    assert parse_text_edit_input(html) == ["example.com"]


def test_parse_removes_wildcards():
    assert parse_text_edit_input("<p>*.example.com</p>") == [".example.com"]


def test_parse_removes_line_breaks():
    assert parse_text_edit_input("<p><br /></p>") == [""]


def test_parse_space_clears_everything():
    assert parse_text_edit_input("<p>a</p><p>b c</p>") == []


def test_parse_unclosed_paragraph_takes_rest():
    assert parse_text_edit_input("<p>abc") == ["abc"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("www.example.com", "http://www.example.com/"),
        ("  http://example.com  ", "http://example.com/"),
        ("https://example.com/page", "https://example.com/page"),
        ("example.com?q=1", "http://example.com/?q=1"),
    ],
)
def test_normalize_seed_url(text, expected):
    assert normalize_seed_url(text) == expected


def test_normalize_is_idempotent():
    once = normalize_seed_url("www.example.com/path")
    assert normalize_seed_url(once) == once


def test_valid_form_enables_ok():
    form = CrawlerForm(seed_url_text="www.example.com")
    errors = form.check_errors()
    assert errors == CrawlerFormErrors()
    assert form.ok_enabled is True
    assert form.seed_url == "http://www.example.com/"
    assert form.url_patterns_included == []


def test_form_starts_disabled():
    form = CrawlerForm()
    assert form.ok_enabled is False
    assert form.enabled["ext_links_crawl"] is False


def test_empty_seed_is_an_error():
    form = CrawlerForm(seed_url_text="")
    errors = form.check_errors()
    assert errors.url is True
    assert form.ok_enabled is False


def test_host_without_dot_is_an_error():
    form = CrawlerForm(seed_url_text="localhost")
    assert form.check_errors().url is True


def test_no_internal_or_external_links_is_an_error():
    form = CrawlerForm(seed_url_text="www.example.com", int_links=False, ext_links_allowed=False)
    errors = form.check_errors()
    assert errors.checkboxes is True
    assert form.ok_enabled is False
    assert not any(form.enabled.values())


def test_external_links_enable_their_options():
    form = CrawlerForm(seed_url_text="www.example.com", int_links=False, ext_links_allowed=True)
    form.check_errors()
    assert form.enabled["ext_links_crawl"] is True
    assert form.enabled["social_links"] is True
    assert form.enabled["child_links"] is False
    assert form.ok_enabled is True


def test_included_pattern_with_space_is_an_error():
    form = CrawlerForm(seed_url_text="www.example.com", patterns_included_text="a b")
    errors = form.check_errors()
    assert errors.patterns_included is True
    assert form.ok_enabled is False


def test_patterns_are_collected_per_line():
    form = CrawlerForm(
        seed_url_text="www.example.com",
        patterns_included_text="example.com/blog\nexample.com/news",
        patterns_excluded_text="foo\nbar",
    )
    form.check_errors()
    assert form.url_patterns_included == ["example.com/blog", "example.com/news"]
    assert form.url_patterns_excluded == ["foo", "bar"]


def test_user_choices_reach_listener():
    received = []
    form = CrawlerForm(seed_url_text="www.example.com", on_choices=received.append)
    form.check_errors()
    choices = form.user_choices()
    assert received == [choices]
    assert choices.seed_url == "http://www.example.com/"
    assert choices.int_links is True
    assert choices.child_links is True
    assert choices.parent_links is False
    assert choices.delayed_requests is True
    assert choices.link_classes == ()
    assert choices.max_urls_to_crawl == form.max_urls_to_crawl