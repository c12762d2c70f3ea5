# cldrtable/generator/generate.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Literal, Set, Tuple, Union

from .errors import MalformedAnnotationsError, MissingAnnotationsError
from .mappings import (
    MAX_SUPPORTED_CODEPOINT,
    MIN_SUPPORTED_CODEPOINT,
    NAME_TRANSLATE_TABLE,
    RUST_ESCAPES,
)

__all__ = [
    "AnnotationRecord",
    "AnnotationDocument",
    "CodepointDiagnostic",
    "GenerationReport",
    "NameFormat",
    "load_annotations",
    "parse_document",
    "sanitize_name",
    "find_unsupported_codepoints",
    "rust_string_literal",
    "format_name",
    "render_table",
    "build_table",
    "write_table",
    "generate",
]

logger = logging.getLogger(__name__)

NameFormat = Literal["sanitized", "raw"]
PathLike = Union[str, Path]

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

JSON_FILENAME = "annotations.json"
DOWNLOAD_URL = (
    "https://raw.githubusercontent.com/unicode-org/cldr-json/master/cldr-json/"
    "cldr-annotations-full/annotations/en/annotations.json"
)

# One target per name format
DEFAULT_OUTPUTS: Dict[str, Path] = {
    "sanitized": Path("src") / "commands" / "cldr_annotations.rs",
    "raw": Path("src") / "cldr_annotations.rs",
}

TABLE_NAME = "CLDR_ANNOTATIONS"
TABLE_TYPE = "(&'static str, &'static str)"


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AnnotationRecord:
    key: str
    display_name: str


@dataclass(frozen=True)
class AnnotationDocument:
    """
    Parsed CLDR annotations, records kept in source order.
    """

    cldr_version: str
    records: List[AnnotationRecord]


@dataclass
class CodepointDiagnostic:
    """
    One unsupported codepoint found in a sanitized name.

    :param codepoint: The offending codepoint.
    :param text: The sanitized name it was found in.
    :param index: Codepoint offset of the offender inside ``text``.
    """

    codepoint: int
    text: str
    index: int

    def format(self) -> str:
        return "\n".join(
            [
                f"WARNING: Unicode codepoint {self.codepoint} is not currently supported by Enso:",
                f"  {self.text}",
                f"  {' ' * self.index}^",
                "",
            ]
        )


@dataclass
class GenerationReport:
    """
    Execution report for one generation run.

    ``warned_codepoints`` is the accumulator that keeps each unsupported
    codepoint to a single diagnostic per run.
    """

    name_format: NameFormat = "sanitized"
    cldr_version: str = ""
    entry_count: int = 0
    output_path: Path | None = None
    warned_codepoints: Set[int] = field(default_factory=set)
    diagnostics: List[CodepointDiagnostic] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Loading & parsing
# ---------------------------------------------------------------------------


def load_annotations(path: PathLike = JSON_FILENAME) -> Any:
    """
    Read and decode the annotations JSON file.

    :param path: Location of ``annotations.json``.
    :returns: The decoded JSON value.
    :raises MissingAnnotationsError: if the file does not exist.
    :raises MalformedAnnotationsError: if the content is not valid UTF-8 JSON.
    """
    in_path = Path(path)
    if not in_path.is_file():
        raise MissingAnnotationsError(in_path)

    try:
        text = in_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedAnnotationsError(f"'{in_path}' is not valid UTF-8: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedAnnotationsError(f"Could not parse JSON from '{in_path}': {e}") from e


def _lookup(data: Any, path: Tuple[str, ...]) -> Any:
    node = data
    for i, part in enumerate(path):
        if not isinstance(node, dict) or part not in node:
            dotted = ".".join(path[: i + 1])
            raise MalformedAnnotationsError(f"Missing field '{dotted}' in annotations data.")
        node = node[part]
    return node


def _has_surrogate(s: str) -> bool:
    return any(0xD800 <= ord(ch) <= 0xDFFF for ch in s)


def parse_document(data: Any) -> AnnotationDocument:
    """
    Extract the CLDR version and the ordered annotation records.

    Dict insertion order (i.e. the order of the JSON object) is preserved;
    nothing is sorted. Unpaired surrogates (accepted by ``json``) are
    rejected since the table could not be encoded.
    """
    version = _lookup(data, ("annotations", "identity", "version", "_cldrVersion"))
    if isinstance(version, bool) or not isinstance(version, (str, int, float)) or (
        isinstance(version, str) and _has_surrogate(version)
    ):
        raise MalformedAnnotationsError(
            f"Field 'annotations.identity.version._cldrVersion' must be a string, got {version!r}."
        )

    entries = _lookup(data, ("annotations", "annotations"))
    if not isinstance(entries, dict):
        raise MalformedAnnotationsError("Field 'annotations.annotations' must be an object.")

    records: List[AnnotationRecord] = []
    for key, item in entries.items():
        tts = item.get("tts") if isinstance(item, dict) else None
        if not isinstance(tts, list) or not tts or not isinstance(tts[0], str):
            raise MalformedAnnotationsError(
                f"Entry {key!r} has no usable 'tts' name in annotations data."
            )
        if _has_surrogate(key) or _has_surrogate(tts[0]):
            raise MalformedAnnotationsError(
                f"Entry {key!r} contains an unpaired surrogate and cannot be written as UTF-8."
            )
        records.append(AnnotationRecord(key=key, display_name=tts[0]))

    return AnnotationDocument(cldr_version=str(version), records=records)


# ---------------------------------------------------------------------------
# Name formatting
# ---------------------------------------------------------------------------


def sanitize_name(value: str) -> str:
    """
    Normalize a CLDR short name for use as a command name.

    Lowercases, then maps curly quotes to ASCII quotes and ``ñ`` to ``n``.
    Applying it twice gives the same result as applying it once.
    """
    return value.lower().translate(NAME_TRANSLATE_TABLE)


def find_unsupported_codepoints(
    value: str, warned: Set[int]
) -> List[CodepointDiagnostic]:
    """
    Report codepoints outside printable ASCII that were not seen before.

    ``warned`` is updated in place; each new diagnostic is also logged.

    :param value: A sanitized name.
    :param warned: Codepoints already reported in this run.
    :returns: Diagnostics for the codepoints reported by this call.
    """
    found: List[CodepointDiagnostic] = []
    for idx, ch in enumerate(value):
        cp = ord(ch)
        if MIN_SUPPORTED_CODEPOINT <= cp <= MAX_SUPPORTED_CODEPOINT:
            continue
        if cp in warned:
            continue
        warned.add(cp)
        diag = CodepointDiagnostic(codepoint=cp, text=value, index=idx)
        logger.warning(diag.format())
        found.append(diag)
    return found


def rust_string_literal(value: str) -> str:
    """
    Quote ``value`` as a Rust string literal.
    """
    out: List[str] = ['"']
    for ch in value:
        if ch in RUST_ESCAPES:
            out.append(RUST_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\u{{{ord(ch):x}}}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def format_name(
    value: str,
    name_format: NameFormat,
    report: GenerationReport,
) -> str:
    """
    Render a display name as the second tuple element of a table row.

    - ``"sanitized"``: sanitize, diagnose, then quote and escape.
    - ``"raw"``: legacy output, wrapped in double quotes with no escaping.
    """
    if name_format == "raw":
        return f'"{value}"'
    if name_format != "sanitized":
        raise ValueError(f"Unknown name format: {name_format!r}")

    name = sanitize_name(value)
    report.diagnostics.extend(find_unsupported_codepoints(name, report.warned_codepoints))
    return rust_string_literal(name)


# ---------------------------------------------------------------------------
# Serialization & output
# ---------------------------------------------------------------------------


def render_table(cldr_version: str, rows: Iterable[Tuple[str, str]]) -> str:
    """
    Build the Rust source for the constant table.

    :param cldr_version: Embedded in the header comment.
    :param rows: ``(key, rendered_name)`` pairs; ``rendered_name`` is already
                 a literal (see :func:`format_name`).
    """
    body = [f"  ({rust_string_literal(key)}, {name})," for key, name in rows]
    lines = [
        f"// This data was auto-generated from the Unicode CLDR version {cldr_version}.",
        "// Please do not edit it.",
        "",
        f"pub const {TABLE_NAME}: [{TABLE_TYPE}; {len(body)}] = [",
        *body,
        "];\n",
    ]
    return "\n".join(lines)


def build_table(
    document: AnnotationDocument,
    name_format: NameFormat,
    report: GenerationReport,
) -> str:
    rows = [
        (rec.key, format_name(rec.display_name, name_format, report))
        for rec in document.records
    ]
    report.cldr_version = document.cldr_version
    report.entry_count = len(rows)
    return render_table(document.cldr_version, rows)


def write_table(text: str, path: PathLike) -> Path:
    """
    Overwrite ``path`` with ``text`` encoded as UTF-8.

    The text is encoded before the file is opened, so an encoding failure
    leaves any previous file untouched.

    Parent directories are not created; ``OSError`` propagates.
    """
    data = text.encode("utf-8")
    out_path = Path(path)
    out_path.write_bytes(data)
    return out_path


# --- generate ---------------------------------------------------------


def generate(
    input_path: PathLike = JSON_FILENAME,
    output_path: PathLike | None = None,
    *,
    name_format: NameFormat = "sanitized",
) -> GenerationReport:
    """
    One-shot entrypoint: load, transform and write the annotations table.

    :param input_path: The CLDR ``annotations.json`` file.
    :param output_path: Target file; ``None`` selects the default for
                        ``name_format``.
    :param name_format: ``"sanitized"`` or legacy ``"raw"``.
    :returns: The run's :class:`GenerationReport`.
    """
    if name_format not in DEFAULT_OUTPUTS:
        raise ValueError(f"Unknown name format: {name_format!r}")
    if output_path is None:
        output_path = DEFAULT_OUTPUTS[name_format]

    report = GenerationReport(name_format=name_format)
    document = parse_document(load_annotations(input_path))
    text = build_table(document, name_format, report)
    report.output_path = write_table(text, output_path)
    return report
