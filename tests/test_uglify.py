"""End-to-end tests for HTMLUglify."""

import re

import html_uglify
from html_uglify import HTMLUglify, process, uglify
from html_uglify.lookup import CLASS, ID
from html_uglify.markup import parse_html


def selectors(css):
    return [s.strip() for s in re.findall(r"([^{}]+?)\s*\{[^{}]*\}", css)]


PAGE = (
    "<style>.foo { color: red; } #baz { color: blue; }</style>"
    '<div class="foo bar" id="baz"></div>'
)


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


class TestStyleAndMarkupAgree:
    def test_style_and_markup_consistent(self):
        soup = parse_html(process(PAGE))
        css = soup.style.string
        assert selectors(css) == [".a", "#a"]
        assert soup.div["class"] == "a b"
        assert soup.div["id"] == "a"
        assert "foo" not in str(soup)

    def test_style_class_equals_first_markup_class(self):
        soup = parse_html(process(PAGE))
        first_class = soup.div["class"].split()[0]
        assert selectors(soup.style.string)[0] == "." + first_class


class TestWhitelist:
    def test_whitelisted_id_kept(self):
        soup = parse_html(process(PAGE, whitelist=["#baz"]))
        assert soup.div["id"] == "baz"
        assert selectors(soup.style.string) == [".a", "#baz"]
        assert soup.div["class"] == "a b"

    def test_whitelisted_names_never_generated(self):
        tree, lookups = HTMLUglify([".a", "#a"]).rewrite(parse_html(PAGE))
        assert "a" not in lookups.mapping(CLASS).values()
        assert "a" not in lookups.mapping(ID).values()
        assert tree.div["class"] == "b c"
        assert tree.div["id"] == "b"

    def test_whitelisted_original_not_in_table(self):
        html = '<div class="foo a bar"></div>'
        tree, lookups = HTMLUglify([".a"]).rewrite(parse_html(html))
        assert tree.div["class"] == "b a c"
        assert "a" not in lookups.mapping(CLASS)


class TestUseElement:
    def test_use_reuses_symbol_pointer(self):
        html = (
            '<svg><symbol id="icon-1"></symbol><use href="#icon-1"></use></svg>'
            '<a href="#icon-1">x</a>'
        )
        soup = parse_html(process(html))
        assert soup.symbol["id"] == "a"
        assert soup.use["href"] == "#a"
        assert soup.a["href"] == "#icon-1"


class TestMediaQueries:
    def test_media_and_top_level_rules_match(self):
        html = (
            "<style>@media (min-width: 768px) { .foo { color: red } } "
            ".foo { color: blue }</style><div class=\"foo\"></div>"
        )
        soup = parse_html(process(html))
        css = soup.style.string
        assert css.startswith("@media (min-width: 768px) {")
        assert selectors(css) == [".a", ".a"]
        assert soup.div["class"] == "a"


class TestModernSelectors:
    def test_is_rule_kept_next_to_changed_rule(self):
        html = (
            "<style>.foo { color: red } .bar:is(.x, .y) { color: blue }</style>"
            '<p class="foo bar x"></p>'
        )
        assert process(html) == (
            "<style>.a { color: red } .b:is(.c, .d) { color: blue }</style>"
            '<p class="a b c"></p>'
        )

    def test_has_rule_matches_markup(self):
        html = '<style>.card:has(> img) { padding: 0 }</style><div class="card"><img/></div>'
        soup = parse_html(process(html))
        assert soup.style.string == ".a:has(> img) { padding: 0 }"
        assert soup.div["class"] == "a"

    def test_where_rule_matches_markup(self):
        html = '<style>:where(#main) .foo { margin: 0px }</style><main id="main"><p class="foo"></p></main>'
        soup = parse_html(process(html))
        assert soup.style.string == ":where(#a) .a { margin: 0px }"
        assert soup.main["id"] == "a"
        assert soup.p["class"] == "a"


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestRunIsolation:
    def test_repeated_runs_are_identical(self):
        ug = HTMLUglify()
        assert ug.process_html(PAGE) == ug.process_html(PAGE)

    def test_runs_do_not_share_tables(self):
        ug = HTMLUglify()
        _, first = ug.rewrite(parse_html('<div class="one"></div>'))
        _, second = ug.rewrite(parse_html('<div class="two"></div>'))
        assert first.mapping(CLASS) == {"one": "a"}
        assert second.mapping(CLASS) == {"two": "a"}


class TestInjective:
    def test_distinct_names_get_distinct_pointers(self):
        html = '<div class="one two three four five"></div><p class="two six"></p>'
        _, lookups = HTMLUglify().rewrite(parse_html(html))
        pointers = list(lookups.mapping(CLASS).values())
        assert len(pointers) == 6
        assert len(set(pointers)) == len(pointers)


class TestPublicApi:
    def test_plugin_form(self):
        run = uglify(["#baz"])
        tree = run(parse_html(PAGE))
        assert tree.div["id"] == "baz"

    def test_process_returns_tree(self):
        tree = parse_html(PAGE)
        assert HTMLUglify().process(tree) is tree

    def test_version(self):
        assert HTMLUglify().version == html_uglify.__version__

    def test_no_style_element(self):
        assert process('<p class="x">hi</p>') == '<p class="a">hi</p>'
