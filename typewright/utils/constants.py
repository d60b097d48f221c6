"""Constants shared across typewright."""


class Constants:
    """Fixed values used by the autocorrect engine and its host."""

    # Separator between the start and end glyph of a configured quote pair
    QUOTE_SEPARATOR = "…"

    # Characters that can be directly followed by a starting magic quote
    QUOTE_START_CHARS = " ([{-–—"

    PLAIN_DOUBLE_QUOTE = '"'
    PLAIN_SINGLE_QUOTE = "'"

    DEFAULT_PRIMARY_QUOTES = "“…”"
    DEFAULT_SECONDARY_QUOTES = "‘…’"

    # YAML frontmatter delimiters and horizontal rules are never autocorrected
    DELIMITER_LINES = frozenset({"---", "..."})

    DEFAULT_REPLACEMENTS = (
        ("--", "–"),
        ("---", "—"),
        ("...", "…"),
        ("-->", "→"),
        ("<--", "←"),
        ("->", "→"),
        ("<-", "←"),
        ("!=", "≠"),
        ("<=", "≤"),
        (">=", "≥"),
        ("+-", "±"),
        ("(c)", "©"),
        ("(r)", "®"),
        ("(tm)", "™"),
        ("1/2", "½"),
        ("1/4", "¼"),
        ("3/4", "¾"),
    )
