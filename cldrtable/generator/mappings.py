# cldrtable mappings: command-name normalization for CLDR short names.

# 1→1 replacements applied after lowercasing
NAME_TRANSLATE_MAP = {
    # typographic quotes → ASCII
    "“": '"',
    "”": '"',
    "’": "'",
    # accented letters → plain
    "ñ": "n",
}

NAME_TRANSLATE_TABLE = str.maketrans(NAME_TRANSLATE_MAP)

# Printable ASCII range accepted in command names
MIN_SUPPORTED_CODEPOINT = 32
MAX_SUPPORTED_CODEPOINT = 126

# Rust string-literal escapes (anything else below 0x20 uses \u{..})
RUST_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}
