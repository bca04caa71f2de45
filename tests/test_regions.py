"""Tests for balanced delimiter matching."""

import pytest

from astroschema.regions import balanced_region, find_balanced_end


class TestFindBalancedEnd:
    """Test find_balanced_end."""

    def test_simple_braces(self):
        assert find_balanced_end("{a}", 0) == 3

    def test_nested_parens(self):
        text = "defineCollection({ schema: z.object({ a: z.string() }) })"
        start = text.index("(")
        assert find_balanced_end(text, start) == len(text)

    def test_start_in_middle(self):
        text = "x = (a, (b)) + c"
        assert text[: find_balanced_end(text, 4)] == "x = (a, (b))"

    def test_counts_only_same_kind(self):
        assert find_balanced_end("({)", 0) == 3

    def test_unbalanced_returns_none(self):
        assert find_balanced_end("{ a: { b }", 0) is None

    def test_not_an_opener_returns_none(self):
        assert find_balanced_end("abc", 1) is None

    def test_out_of_range_returns_none(self):
        assert find_balanced_end("{}", 5) is None
        assert find_balanced_end("{}", -1) is None

    def test_square_brackets(self):
        text = "z.enum(['a', ['b']])"
        start = text.index("[")
        assert text[start : find_balanced_end(text, start)] == "['a', ['b']]"

    @pytest.mark.parametrize(
        "text",
        [
            "{}",
            "{{}}",
            "{a{b}c{d{e}}}",
            "(z.string().min(1))",
            "((()())())",
        ],
    )
    def test_no_shorter_prefix_is_balanced(self, text):
        open_ch, close_ch = text[0], text[-1]
        end = find_balanced_end(text, 0)
        region = text[:end]
        assert region.count(open_ch) == region.count(close_ch)
        for i in range(1, len(region)):
            prefix = region[:i]
            assert prefix.count(open_ch) != prefix.count(close_ch)


class TestBalancedRegion:
    """Test balanced_region."""

    def test_returns_region_text(self):
        text = "schema: z.object({ title: z.string() }), next"
        start = text.index("{")
        assert balanced_region(text, start) == "{ title: z.string() }"

    def test_unbalanced(self):
        assert balanced_region("( never", 0) is None


class TestQuotedDelimiters:
    """Test find_balanced_end with quote tracking."""

    def test_paren_inside_quotes_skipped(self):
        text = "('a)b')"
        assert find_balanced_end(text, 0) == 4
        assert find_balanced_end(text, 0, quotes=True) == len(text)

    def test_escaped_quote(self):
        text = r"['it\'s', ']']"
        assert find_balanced_end(text, 0, quotes=True) == len(text)

    def test_unterminated_quote(self):
        assert find_balanced_end("(/it's/)", 0, quotes=True) is None
