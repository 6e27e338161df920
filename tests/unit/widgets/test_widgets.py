"""Unit tests for HTML widgets — AttributeMap, LinkPager, LinkSorter."""

from __future__ import annotations

import pytest
from markupsafe import Markup

from mp_gridview.application.pagination import PageState, PaginationLinkBuilder
from mp_gridview.application.sorting import SortLinkBuilder, SortState
from mp_gridview.config.validation import ConfigurationError
from mp_gridview.testing.fakes import RecordingUrlGenerator
from mp_gridview.widgets import AttributeMap, LinkPager, LinkSorter, a, tag, void_tag


# ---------------------------------------------------------------------------
# AttributeMap / tag helpers
# ---------------------------------------------------------------------------


class TestAttributeMap:
    def test_later_values_override(self) -> None:
        merged = AttributeMap({"id": "a", "title": "x"}).merge({"id": "b"})
        assert merged["id"] == "b"
        assert merged["title"] == "x"

    def test_class_concatenates(self) -> None:
        merged = AttributeMap({"class": "btn"}).merge({"class": "btn-primary"}, {"class": ["active", "btn"]})
        assert merged["class"] == ["btn", "btn-primary", "active"]

    def test_with_class_skips_empty(self) -> None:
        assert AttributeMap().with_class("", "x")["class"] == ["x"]

    def test_merge_does_not_mutate(self) -> None:
        base = AttributeMap({"class": "a"})
        base.merge({"class": "b"})
        assert base["class"] == ["a"]

    def test_render(self) -> None:
        attrs = AttributeMap({"class": "a b", "hidden": True, "disabled": False, "title": None, "data-page": 2})
        assert attrs.render() == ' class="a b" hidden data-page="2"'

    def test_render_escapes_values(self) -> None:
        assert AttributeMap({"title": '"x" & <y>'}).render() == ' title="&#34;x&#34; &amp; &lt;y&gt;"'

    def test_empty_render(self) -> None:
        assert AttributeMap().render() == ""

    def test_kwargs(self) -> None:
        assert dict(AttributeMap(rel="next")) == {"rel": "next"}


class TestTags:
    def test_tag_escapes_content(self) -> None:
        assert tag("li", "<b>") == "<li>&lt;b&gt;</li>"

    def test_tag_keeps_markup(self) -> None:
        assert tag("li", Markup("<b>x</b>")) == "<li><b>x</b></li>"

    def test_anchor_href_first(self) -> None:
        assert a("Go", "/x?a=1&b=2", {"class": "link"}) == '<a href="/x?a=1&amp;b=2" class="link">Go</a>'

    def test_void_tag(self) -> None:
        assert void_tag("link", {"rel": "next", "href": "/p"}) == '<link rel="next" href="/p">'


# ---------------------------------------------------------------------------
# LinkPager
# ---------------------------------------------------------------------------


class TestLinkPager:
    @pytest.fixture()
    def pager(self, url_generator: RecordingUrlGenerator) -> LinkPager:
        return LinkPager(PaginationLinkBuilder(url_generator, route="p"))

    def test_render(self, pager: LinkPager) -> None:
        html = pager.render(PageState(current_page=1, total_count=20))
        assert html == (
            '<nav aria-label="Pagination">\n'
            '<ul class="pagination justify-content-center mt-4">\n'
            '<li class="page-item disabled"><a href="/p?page=1&amp;pagesize=10" class="page-link" '
            'data-page="1" aria-disabled="true" tabindex="-1">Previous</a></li>\n'
            '<li class="page-item active"><a href="/p?page=1&amp;pagesize=10" class="page-link" '
            'data-page="1">1</a></li>\n'
            '<li class="page-item"><a href="/p?page=2&amp;pagesize=10" class="page-link" '
            'data-page="2">2</a></li>\n'
            '<li class="page-item"><a href="/p?page=2&amp;pagesize=10" class="page-link" '
            'data-page="2">Next Page</a></li>\n'
            "</ul>\n"
            "</nav>"
        )

    def test_single_page_renders_nothing(self, pager: LinkPager) -> None:
        assert pager.render(PageState(total_count=5)) == ""

    def test_passthrough_in_links(self, pager: LinkPager) -> None:
        html = pager.render(PageState(current_page=2, total_count=30), passthrough={"q": "abc"})
        assert "/p?page=3&amp;pagesize=10&amp;q=abc" in html

    def test_custom_css(self, url_generator: RecordingUrlGenerator) -> None:
        pager = LinkPager(
            PaginationLinkBuilder(url_generator, route="p", prev_page_label="", next_page_label=""),
            ul_attributes={"class": "pages"},
            link_attributes={},
            active_page_css_class="current",
        )
        html = pager.render(PageState(current_page=2, total_count=20))
        assert '<ul class="pages">' in html
        assert '<li class="page-item current"><a href="/p?page=2&amp;pagesize=10" data-page="2">2</a></li>' in html

    def test_label_is_escaped(self, url_generator: RecordingUrlGenerator) -> None:
        pager = LinkPager(PaginationLinkBuilder(url_generator, route="p", prev_page_label="<prev>"))
        assert "&lt;prev&gt;" in pager.render(PageState(current_page=2, total_count=20))

    def test_edge_buttons_use_their_own_classes(self, url_generator: RecordingUrlGenerator) -> None:
        pager = LinkPager(
            PaginationLinkBuilder(url_generator, route="p", first_page_label="«", last_page_label="»"),
            link_attributes={},
            first_page_css_class="page-first",
            prev_page_css_class="page-prev",
            next_page_css_class="page-next",
            last_page_css_class="",
        )
        items = pager.render(PageState(current_page=2, total_count=30)).splitlines()[2:-2]
        assert [item.split(">", 1)[0] for item in items] == [
            '<li class="page-first"',
            '<li class="page-prev"',
            '<li class="page-item"',
            '<li class="page-item active"',
            '<li class="page-item"',
            '<li class="page-next"',
            '<li class="page-item"',
        ]

    def test_page_attribute_name(self, url_generator: RecordingUrlGenerator) -> None:
        pager = LinkPager(PaginationLinkBuilder(url_generator, route="p"), page_attribute="data-target-page")
        html = pager.render(PageState(current_page=2, total_count=30))
        assert 'data-target-page="3"' in html
        assert "data-page=" not in html

    def test_page_attribute_omitted(self, url_generator: RecordingUrlGenerator) -> None:
        pager = LinkPager(PaginationLinkBuilder(url_generator, route="p"), page_attribute=None)
        assert "data-" not in pager.render(PageState(current_page=2, total_count=30))

    def test_render_link_tags(self, pager: LinkPager) -> None:
        tags = pager.render_link_tags(PageState(current_page=2, total_count=30))
        assert tags.splitlines() == [
            '<link rel="self" href="/p?page=2&amp;pagesize=10">',
            '<link rel="first" href="/p?page=1&amp;pagesize=10">',
            '<link rel="last" href="/p?page=3&amp;pagesize=10">',
            '<link rel="prev" href="/p?page=1&amp;pagesize=10">',
            '<link rel="next" href="/p?page=3&amp;pagesize=10">',
        ]


# ---------------------------------------------------------------------------
# LinkSorter
# ---------------------------------------------------------------------------


class TestLinkSorter:
    @pytest.fixture()
    def sorter(self, url_generator: RecordingUrlGenerator) -> LinkSorter:
        return LinkSorter(SortLinkBuilder(url_generator, route="p"))

    def test_render(self, sorter: LinkSorter) -> None:
        state = SortState(attributes=["age", "name"]).with_param("age")
        assert sorter.render(state, PageState()) == (
            '<ul class="sorter">\n'
            '<li><a href="/p?page=1&amp;pagesize=10&amp;sort=-age" data-sort="-age" class="asc">Age</a></li>\n'
            '<li><a href="/p?page=1&amp;pagesize=10&amp;sort=name" data-sort="name">Name</a></li>\n'
            "</ul>"
        )

    def test_selected_attributes_only(self, url_generator: RecordingUrlGenerator) -> None:
        sorter = LinkSorter(SortLinkBuilder(url_generator, route="p"), attributes=["name"])
        html = sorter.render(SortState(attributes=["age", "name"]), PageState())
        assert "Name" in html
        assert "Age" not in html

    def test_page_state_kept(self, sorter: LinkSorter) -> None:
        html = sorter.render(SortState(attributes=["age"]), PageState(current_page=4, total_count=100))
        assert "/p?page=4&amp;pagesize=10&amp;sort=age" in html

    def test_custom_page_size_survives_sort_click(self, sorter: LinkSorter) -> None:
        page_state = PageState(page_size=50, page_size_param="per-page", total_count=500)
        html = sorter.render(SortState(attributes=["age"]), page_state, passthrough={"q": "x"})
        assert "/p?page=1&amp;per-page=50&amp;q=x&amp;sort=age" in html

    def test_unregistered_attribute_raises(self, url_generator: RecordingUrlGenerator) -> None:
        sorter = LinkSorter(SortLinkBuilder(url_generator, route="p"), attributes=["xyz"])
        with pytest.raises(ConfigurationError):
            sorter.render(SortState(attributes=["age"]), PageState())
