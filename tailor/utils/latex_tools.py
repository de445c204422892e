"""
LaTeX Tools

Escaping for text headed into generated LaTeX, and conversion of LaTeX resume
sources into the plain line-oriented text the intake extractors consume.

Self-contained module with no project dependencies.
"""

import re
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LaTeXPatterns:
    """
    LaTeX pattern templates for source-to-text conversion.
    """

    BEGIN_DOCUMENT: str = r"\begin{document}"
    END_DOCUMENT: str = r"\end{document}"

    # Unescaped % starts a comment that runs to end of line
    COMMENT: str = r"(?<!\\)%.*$"
    # \item, \item[--], \item[\faIcon]
    ITEM: str = r"\\item(?![a-zA-Z])(?:\[[^\]]*\])?\s*"
    # \begin{itemize}[leftmargin=*] and \end{itemize}
    ENVIRONMENT: str = r"\\(?:begin|end)\{[^}]*\}(?:\[[^\]]*\])?"
    SPACING_COMMANDS: str = r"\\[vh]space\*?\{[^}]*\}"
    LINE_BREAK: str = r"\\\\(?:\[[^\]]*\])?|\\newline\b|\\par\b"
    # Two adjacent brace groups, as in multi-argument macros (\cmd{a}{b})
    ADJACENT_ARGUMENTS: str = r"\}\s*\{"
    # \, \; \: \! and backslash-space
    SPACING_SYMBOLS: str = r"\\[,;:! ]"
    ANY_COMMAND_NO_BRACES: str = r"\\[a-zA-Z]+\*?"


# Escape order matters: backslash must be first to avoid double-escaping
LATEX_SPECIAL_CHARS = (
    ("\\", r"\textbackslash{}"),
    ("&", r"\&"),
    ("%", r"\%"),
    ("$", r"\$"),
    ("#", r"\#"),
    ("_", r"\_"),
    ("{", r"\{"),
    ("}", r"\}"),
    ("~", r"\textasciitilde{}"),
    ("^", r"\textasciicircum{}"),
)

_ESCAPE_PATTERN = re.compile("|".join(re.escape(char) for char, _ in LATEX_SPECIAL_CHARS))
_ESCAPE_MAP = dict(LATEX_SPECIAL_CHARS)

SECTIONING_COMMANDS = ("section*", "section", "subsection*", "subsection", "cvsection")

# Escaped specials survive command stripping via placeholders
_ESCAPED_PLACEHOLDERS = (
    (r"\textbackslash{}", "\x00BACKSLASH\x00", "\\"),
    (r"\&", "\x00AMP\x00", "&"),
    (r"\%", "\x00PCT\x00", "%"),
    (r"\$", "\x00DOLLAR\x00", "$"),
    (r"\#", "\x00HASH\x00", "#"),
    (r"\_", "\x00UNDERSCORE\x00", "_"),
    (r"\{", "\x00LBRACE\x00", "{"),
    (r"\}", "\x00RBRACE\x00", "}"),
)


def to_latex(plaintext_str: str) -> str:
    """
    Convert plaintext to LaTeX by escaping special characters.

    Escapes every character with syntactic meaning in LaTeX text mode. A single
    regex pass is used so replacement text is never escaped a second time.

    Conversions:
    - \\ -> \\textbackslash{}
    - & % $ # _ { } -> backslash-prefixed
    - ~ -> \\textasciitilde{}
    - ^ -> \\textasciicircum{}

    Example:
        >>> to_latex("AI & Machine Learning")
        'AI \\\\& Machine Learning'
        >>> to_latex("87% on-time delivery")
        '87\\\\% on-time delivery'
    """
    if not plaintext_str:
        return ""
    return _ESCAPE_PATTERN.sub(lambda match: _ESCAPE_MAP[match.group(0)], plaintext_str)


# Characters that break a \href target, as URL escapes or LaTeX escapes
URL_TARGET_ESCAPES = {
    "\\": "%5C",
    "{": "%7B",
    "}": "%7D",
    "^": "%5E",
    "%": r"\%",
    "#": r"\#",
}


def to_latex_url(url: str) -> str:
    """
    Make a URL safe to use as a \\href target.

    Example:
        >>> to_latex_url("https://example.com/a%20b#top")
        'https://example.com/a\\\\%20b\\\\#top'
    """
    return "".join(URL_TARGET_ESCAPES.get(char, char) for char in url or "")


def extract_balanced_delimiters(
    text: str,
    start_pos: int,
    open_char: str = "{",
    close_char: str = "}",
    escape_char: str = "\\",
) -> Tuple[str, int]:
    """
    Extract content between balanced delimiters, handling escaped characters.

    Assumes start_pos is just AFTER an opening delimiter.

    Returns:
        (content, end_pos) where end_pos is the position after the closing delimiter

    Raises:
        ValueError: If delimiters are unmatched

    Example:
        >>> extract_balanced_delimiters("foo {bar {nested} baz} qux", 5)
        ('bar {nested} baz', 22)
    """
    depth = 1
    pos = start_pos

    while pos < len(text) and depth > 0:
        if text[pos] == escape_char:
            pos += 2
            continue
        elif text[pos] == open_char:
            depth += 1
        elif text[pos] == close_char:
            depth -= 1
        pos += 1

    if depth != 0:
        raise ValueError(
            f"Unmatched {open_char}{close_char} delimiters starting at position {start_pos}"
        )

    return text[start_pos : pos - 1], pos


def replace_command(text: str, command: str, prefix: str = "", suffix: str = "") -> str:
    """
    Replace LaTeX command with optional prefix/suffix around content.

    Handles nested braces correctly using balanced delimiter matching.

    Examples:
        >>> replace_command("\\\\textbf{bold text}", "textbf")
        'bold text'
        >>> replace_command("\\\\section*{Experience}", "section*", "\\n", "\\n")
        '\\nExperience\\n'
    """
    result = text
    command_pattern = f"\\{command}{{"

    while True:
        pos = result.find(command_pattern)
        if pos == -1:
            break

        brace_pos = pos + len(command_pattern)

        try:
            content, end_pos = extract_balanced_delimiters(result, brace_pos)
        except ValueError:
            # Unmatched braces, skip this occurrence
            break

        result = result[:pos] + prefix + content + suffix + result[end_pos:]

    return result


def replace_href(text: str) -> str:
    """
    Replace \\href{url}{text} with "text url" so both survive as plaintext.

    Example:
        >>> replace_href("\\\\href{https://github.com/jdoe}{GitHub}")
        'GitHub https://github.com/jdoe'
    """
    result = text

    while True:
        pos = result.find(r"\href{")
        if pos == -1:
            break

        try:
            url, url_end = extract_balanced_delimiters(result, pos + len(r"\href{"))
            if url_end >= len(result) or result[url_end] != "{":
                break
            display_text, text_end = extract_balanced_delimiters(result, url_end + 1)
        except ValueError:
            break

        display_text = display_text.strip()
        replacement = f"{display_text} {url}" if display_text and display_text != url else url
        result = result[:pos] + replacement + result[text_end:]

    return result


def latex_to_text(latex_source: str) -> str:
    """
    Convert a LaTeX resume source into plain, line-oriented text.

    Only the document body is kept. Sectioning commands become standalone header
    lines, \\item becomes a "• " bullet line, line breaks become newlines,
    \\href keeps both its text and URL, and escaped specials are unescaped.
    Remaining commands are dropped while the text inside their braces is kept.

    Args:
        latex_source: Full .tex file content or a body fragment

    Returns:
        Plaintext with one logical line per output line

    Example:
        >>> latex_to_text("\\\\section*{Skills}\\nPython, C\\\\texttt{++}")
        'Skills\\n\\nPython, C++'
    """
    if not latex_source:
        return ""

    result = latex_source

    # Keep only the document body when a preamble is present
    begin = result.find(LaTeXPatterns.BEGIN_DOCUMENT)
    if begin != -1:
        result = result[begin + len(LaTeXPatterns.BEGIN_DOCUMENT) :]
        end = result.find(LaTeXPatterns.END_DOCUMENT)
        if end != -1:
            result = result[:end]

    result = re.sub(LaTeXPatterns.COMMENT, "", result, flags=re.MULTILINE)

    for latex, placeholder, _ in _ESCAPED_PLACEHOLDERS:
        result = result.replace(latex, placeholder)

    result = replace_href(result)
    result = replace_command(result, "url")

    for command in SECTIONING_COMMANDS:
        result = replace_command(result, command, "\n", "\n")

    result = re.sub(LaTeXPatterns.SPACING_COMMANDS, "", result)
    result = re.sub(LaTeXPatterns.ITEM, "\n• ", result)
    result = re.sub(LaTeXPatterns.ENVIRONMENT, "\n", result)
    result = re.sub(LaTeXPatterns.LINE_BREAK, "\n", result)
    result = re.sub(LaTeXPatterns.ADJACENT_ARGUMENTS, " | ", result)
    result = re.sub(LaTeXPatterns.SPACING_SYMBOLS, " ", result)
    result = re.sub(LaTeXPatterns.ANY_COMMAND_NO_BRACES, "", result)

    result = result.replace("{", "").replace("}", "").replace("$", "")
    result = result.replace("~", " ")

    for _, placeholder, plain in _ESCAPED_PLACEHOLDERS:
        result = result.replace(placeholder, plain)

    lines = [re.sub(r"[ \t]+", " ", line).strip() for line in result.split("\n")]
    text = "\n".join(lines)
    return re.sub(r"\n{3,}", "\n\n", text).strip()
