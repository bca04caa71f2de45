"""Tests for comment stripping."""

from textwrap import dedent

from astroschema.comments import strip_comments


class TestLineComments:
    """Test // comment removal."""

    def test_removes_trailing_comment_keeps_newline(self):
        source = "title: z.string(), // the title\nnext"
        assert strip_comments(source) == "title: z.string(), \nnext"

    def test_full_line_comment(self):
        source = "a\n// gone\nb"
        assert strip_comments(source) == "a\n\nb"

    def test_comment_at_end_of_input(self):
        assert strip_comments("x = 1 // no newline") == "x = 1 "

    def test_line_count_preserved(self):
        source = dedent(
            """\
            const a = 1; // one
            // two
            const b = 2;
            """
        )
        assert strip_comments(source).count("\n") == source.count("\n")


class TestBlockComments:
    """Test /* */ comment removal."""

    def test_inline_block(self):
        assert strip_comments("a /* b */ c") == "a  c"

    def test_multiline_block_with_nested_line_comment(self):
        source = "x\n/* start\n // inner\n end */y"
        assert strip_comments(source) == "x\ny"

    def test_unterminated_block_consumes_rest(self):
        assert strip_comments("keep /* never closed\nmore") == "keep "


class TestStringLiterals:
    """Test that quoted strings are left alone."""

    def test_double_slash_in_string(self):
        source = "url: z.string().default('https://example.com')"
        assert strip_comments(source) == source

    def test_block_markers_in_string(self):
        source = 'pattern: "/* not a comment */"'
        assert strip_comments(source) == source

    def test_escaped_quote_does_not_end_string(self):
        source = r"""s = 'it\'s // still a string' // comment"""
        assert strip_comments(source) == r"""s = 'it\'s // still a string' """

    def test_glob_pattern_string(self):
        source = "pattern: '**/[^_]*.{md,mdx}', // files"
        assert strip_comments(source) == "pattern: '**/[^_]*.{md,mdx}', "


class TestIdempotence:
    """strip(strip(x)) == strip(x)."""

    def test_idempotent_on_fixture(self, enhanced_config):
        once = strip_comments(enhanced_config)
        assert strip_comments(once) == once

    def test_idempotent_on_mixed_source(self):
        source = dedent(
            """\
            // header
            const a = "//"; /* b */
            const c = '/* d */'; // e
            """
        )
        once = strip_comments(source)
        assert strip_comments(once) == once
        assert "header" not in once
        assert '"//"' in once
        assert "'/* d */'" in once

    def test_no_comments_is_identity(self):
        source = "export const collections = { blog, docs };"
        assert strip_comments(source) == source
