"""Formatting of selectors."""

import pytest

from cssfmt import format, minify


def _selector(selector_text):
    output = format(selector_text + " {}")
    assert output.endswith(" {}")
    return output[: -len(" {}")]


class TestCase:
    def test_type_selectors_lowercased(self):
        assert _selector("A, DIV") == "a,\ndiv"

    def test_class_and_id_keep_case(self):
        assert _selector("a.Foo#Bar") == "a.Foo#Bar"

    def test_pseudo_names_lowercased(self):
        assert _selector("a:HOVER") == "a:hover"


class TestCombinators:
    def test_spacing(self):
        assert _selector("test>my~first+selector   .with   .nesting") == (
            "test > my ~ first + selector .with .nesting"
        )

    def test_newlines_collapse_to_descendant(self):
        assert _selector("a.b\n .c .d\n   .e .f") == "a.b .c .d .e .f"

    def test_universal(self):
        assert _selector(".article-content ol li>*") == ".article-content ol li > *"

    def test_nesting_selector(self):
        assert format("& a {}\nb & c {}") == "& a {}\n\nb & c {}"

    def test_minified(self):
        assert minify("a > b ~ c + d e {}") == "a>b~c+d e{}"


class TestPseudoElements:
    @pytest.mark.parametrize(
        "selector, expected",
        [
            ("a::Before", "a::before"),
            ("b:Before", "b::before"),
            ("c:After", "c::after"),
            ("d:First-line", "d::first-line"),
            ("e:first-letter", "e::first-letter"),
            ("f::highlight(Name)", "f::highlight(Name)"),
            ("g::foo-bar", "g::foo-bar"),
        ],
    )
    def test_pseudo_elements(self, selector, expected):
        assert _selector(selector) == expected


class TestPseudoArguments:
    def test_selector_list_inline(self):
        assert _selector("a:is(\n  a,\n  b,\n  c\n)") == "a:is(a, b, c)"

    def test_nested_pseudo(self):
        assert _selector("a:not(:is(.a,.b))") == "a:not(:is(.a, .b))"

    def test_relative_selector_argument(self):
        assert _selector("a:has(>img)") == "a:has(> img)"

    def test_where_with_combinator(self):
        assert _selector(":where(a+b)") == ":where(a + b)"

    def test_unknown_arguments_verbatim(self):
        assert _selector(":unknown(kjsa.asddk,asd)") == ":unknown(kjsa.asddk,asd)"

    def test_lang(self):
        assert _selector('p:lang("nl","de")') == 'p:lang("nl","de")'

    def test_empty_parentheses_kept(self):
        assert _selector("li:nth-child()") == "li:nth-child()"

    def test_minified_list(self):
        assert minify("a:is(b, c){}") == "a:is(b,c){}"


class TestNth:
    @pytest.mark.parametrize(
        "nth, expected",
        [
            ("2n+1", "2n + 1"),
            ("-n+3", "-1n + 3"),
            ("n+2", "1n + 2"),
            ("3n-2", "3n -2"),
            ("0n+1", "0n + 1"),
            ("2n", "2n"),
            ("+3n - 2", "3n -2"),
            ("1", "1"),
            ("odd", "odd"),
            ("EVEN", "EVEN"),
            ("-n+3 of li.important", "-1n + 3 of li.important"),
            ("1 of li", "1 of li"),
        ],
    )
    def test_nth_child(self, nth, expected):
        assert _selector(f"li:nth-child({nth})") == f"li:nth-child({expected})"

    def test_minified(self):
        assert minify("li:nth-child(2n + 1){}") == "li:nth-child(2n+1){}"
        assert minify("li:nth-child(3n-2){}") == "li:nth-child(3n-2){}"

    def test_nested_in_has(self):
        assert _selector("ul:has(:nth-child(1 of li))") == "ul:has(:nth-child(1 of li))"


class TestAttributes:
    @pytest.mark.parametrize(
        "selector, expected",
        [
            ("[title=foo]", '[title="foo"]'),
            ("[title='foo']", '[title="foo"]'),
            ('[title="foo"]', '[title="foo"]'),
            ("[title=foo i]", '[title="foo" i]'),
            ('[title="baz"S]', '[title="baz" s]'),
            ("[class]", "[class]"),
            ("x[foo] y[foo=1]", 'x[foo] y[foo="1"]'),
            ("Z[FOO^='meh']", 'z[foo^="meh"]'),
            ("[a|=en]", '[a|="en"]'),
            ("[a *= b]", '[a*="b"]'),
        ],
    )
    def test_attributes(self, selector, expected):
        assert _selector(selector) == expected

    def test_quote_in_single_quoted_value(self):
        assert _selector("[title='a\"b']") == '[title="a\\"b"]'

    def test_comment_inside_is_verbatim(self):
        assert _selector("[a/* x */=b]") == "[a/* x */=b]"
