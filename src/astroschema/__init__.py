"""Content collection schema extraction for Astro projects."""

from astroschema.classifier import (
    FieldClassifier,
    classify_field,
    classify_type,
)
from astroschema.comments import strip_comments
from astroschema.errors import (
    AstroSchemaError,
    ConfigReadError,
    ProjectScanError,
)
from astroschema.fields import split_schema_fields
from astroschema.locator import (
    CollectionsBlock,
    InlineBlock,
    ListBlock,
    locate_collections_block,
)
from astroschema.models import (
    Collection,
    Constraints,
    FieldKind,
    FieldType,
    SchemaField,
)
from astroschema.parser import (
    extract_schema,
    find_config_file,
    parse_astro_config,
    parse_collections_from_content,
)
from astroschema.project import (
    scan_collection_files,
    scan_content_directories,
    scan_project,
)
from astroschema.regions import balanced_region, find_balanced_end
from astroschema.serializer import serialize_schema
from astroschema.splitter import (
    CollectionDefinition,
    schema_body,
    split_collection_definitions,
)

__all__ = [
    "AstroSchemaError",
    "Collection",
    "CollectionDefinition",
    "CollectionsBlock",
    "ConfigReadError",
    "Constraints",
    "FieldClassifier",
    "FieldKind",
    "FieldType",
    "InlineBlock",
    "ListBlock",
    "ProjectScanError",
    "SchemaField",
    "balanced_region",
    "classify_field",
    "classify_type",
    "extract_schema",
    "find_balanced_end",
    "find_config_file",
    "locate_collections_block",
    "parse_astro_config",
    "parse_collections_from_content",
    "scan_collection_files",
    "scan_content_directories",
    "scan_project",
    "schema_body",
    "serialize_schema",
    "split_collection_definitions",
    "split_schema_fields",
    "strip_comments",
]
