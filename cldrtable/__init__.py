from .generator.errors import (
    CldrTableError,
    MalformedAnnotationsError,
    MissingAnnotationsError,
)
from .generator.generate import (
    AnnotationDocument,
    AnnotationRecord,
    CodepointDiagnostic,
    GenerationReport,
    build_table,
    format_name,
    generate,
    load_annotations,
    parse_document,
    render_table,
    rust_string_literal,
    sanitize_name,
    write_table,
)

__all__ = [
    "generate",
    "load_annotations",
    "parse_document",
    "sanitize_name",
    "format_name",
    "rust_string_literal",
    "render_table",
    "build_table",
    "write_table",
    "AnnotationDocument",
    "AnnotationRecord",
    "CodepointDiagnostic",
    "GenerationReport",
    "CldrTableError",
    "MissingAnnotationsError",
    "MalformedAnnotationsError",
]
