"""Tests for collection definition splitting."""

from textwrap import dedent

import pytest

from astroschema.comments import strip_comments
from astroschema.locator import InlineBlock, ListBlock, locate_collections_block
from astroschema.splitter import (
    CollectionDefinition,
    filter_existing,
    find_definition,
    schema_body,
    split_collection_definitions,
)

LIST_SOURCE = dedent(
    """\
    const blog = defineCollection({
      schema: z.object({
        title: z.string(),
      }),
    });

    const docs = defineCollection({
      schema: z.object({ version: z.string() }),
    });

    export const collections = { blog, docs };
    """
)

INLINE_SOURCE = dedent(
    """\
    export default defineConfig({
      collections: {
        blog: defineCollection({
          schema: z.object({ title: z.string() }),
        }),
        'release-notes': defineCollection({
          schema: z.object({ version: z.string() }),
        }),
      },
    });
    """
)


class TestFindDefinition:
    """Test locating a top-level definition by name."""

    def test_const_declaration(self):
        block = find_definition(LIST_SOURCE, "docs")
        assert block is not None
        assert block.startswith("const docs = defineCollection(")
        assert block.endswith(")")
        assert "version: z.string()" in block
        assert "title" not in block

    def test_missing_name(self):
        assert find_definition(LIST_SOURCE, "notes") is None

    def test_name_prefix_does_not_match(self):
        source = "const blogPosts = defineCollection({});"
        assert find_definition(source, "blog") is None

    def test_unbalanced_definition(self):
        source = "const blog = defineCollection({ schema: z.object({"
        assert find_definition(source, "blog") is None

    def test_custom_builder(self):
        source = "const blog = makeCollection({ a: 1 });"
        assert find_definition(source, "blog", builder="makeCollection") == (
            "const blog = makeCollection({ a: 1 })"
        )


class TestSplitListStyle:
    """Test splitting list-style blocks."""

    def test_names_and_blocks(self):
        block = locate_collections_block(LIST_SOURCE)
        assert isinstance(block, ListBlock)

        defs = split_collection_definitions(block, LIST_SOURCE)
        assert [d.name for d in defs] == ["blog", "docs"]
        assert all(d.block is not None for d in defs)
        assert "title: z.string()" in defs[0].block

    def test_listed_name_without_definition(self):
        source = LIST_SOURCE.replace("{ blog, docs }", "{ blog, docs, notes }")
        block = locate_collections_block(source)
        defs = split_collection_definitions(block, source)
        assert defs[-1] == CollectionDefinition("notes", None)

    def test_duplicate_names_keep_first(self):
        source = LIST_SOURCE.replace("{ blog, docs }", "{ blog, docs, blog }")
        block = locate_collections_block(source)
        defs = split_collection_definitions(block, source)
        assert [d.name for d in defs] == ["blog", "docs"]


class TestSplitInlineStyle:
    """Test splitting inline-style blocks."""

    def test_names_and_blocks(self):
        block = locate_collections_block(INLINE_SOURCE)
        assert isinstance(block, InlineBlock)

        defs = split_collection_definitions(block, INLINE_SOURCE)
        assert [d.name for d in defs] == ["blog", "release-notes"]
        assert defs[0].block.startswith("blog: defineCollection(")
        assert "version" not in defs[0].block
        assert "version: z.string()" in defs[1].block

    def test_inline_block_ignores_full_source(self):
        # a top-level const with the same name must not be used
        source = (
            "const blog = defineCollection({ other: 1 });\n" + INLINE_SOURCE
        )
        block = locate_collections_block(source)
        defs = split_collection_definitions(block, source)
        assert "other" not in defs[0].block


class TestFilterExisting:
    """Test directory existence filtering."""

    def test_keeps_only_existing_directories(self, tmp_path):
        (tmp_path / "blog").mkdir()
        (tmp_path / "docs").write_text("not a directory")
        defs = [
            CollectionDefinition("blog", "..."),
            CollectionDefinition("docs", "..."),
            CollectionDefinition("notes", None),
        ]
        kept = filter_existing(defs, tmp_path)
        assert [d.name for d in kept] == ["blog"]

    def test_missing_content_dir(self, tmp_path):
        defs = [CollectionDefinition("blog", "...")]
        assert filter_existing(defs, tmp_path / "nope") == []


class TestSchemaBody:
    """Test z.object body extraction."""

    def test_object_body(self):
        block = find_definition(LIST_SOURCE, "blog")
        assert schema_body(block) == "title: z.string(),"

    def test_function_schema(self):
        block = dedent(
            """\
            const articles = defineCollection({
              schema: ({ image }) =>
                z.object({
                  title: z.string(),
                  cover: image().optional(),
                }),
            })"""
        )
        body = schema_body(block)
        assert body.startswith("title: z.string(),")
        assert body.endswith("cover: image().optional(),")

    def test_nested_object_kept_whole(self):
        block = (
            "defineCollection({ schema: z.object({"
            " author: z.object({ name: z.string() }), }) })"
        )
        assert schema_body(block) == (
            "author: z.object({ name: z.string() }),"
        )

    @pytest.mark.parametrize(
        "block",
        [
            "defineCollection({ loader: glob({}) })",
            "defineCollection({ schema: z.object({ title: z.string() )",
        ],
    )
    def test_no_body(self, block):
        assert schema_body(block) is None

    def test_fixture_blocks(self, enhanced_config):
        clean = strip_comments(enhanced_config)
        block = locate_collections_block(clean)
        defs = split_collection_definitions(block, clean)
        bodies = {d.name: schema_body(d.block) for d in defs}
        assert bodies["notes"] == "title: z.string(),"
        assert "trailing comment" not in bodies["docs"]
