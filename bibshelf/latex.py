"""
LaTeX markup cleanup.

Converts the small subset of LaTeX that shows up in bibliography fields into
HTML-safe fragments. Rules run in a fixed order: math-mode super/subscripts
and macro-to-tag conversions need their braces, so they must run before the
generic brace stripping.
"""
import re
from typing import List, Optional, Tuple

_RULES: List[Tuple[re.Pattern, str]] = [
    # $^{X}$, $^X$, ^{X}
    (re.compile(r"\$\^\{?([^$}]+)\}?\$"), r"<sup>\1</sup>"),
    (re.compile(r"\^\{([^}]+)\}"), r"<sup>\1</sup>"),
    # $_{X}$, $_X$, _{X}
    (re.compile(r"\$_\{?([^$}]+)\}?\$"), r"<sub>\1</sub>"),
    (re.compile(r"_\{([^}]+)\}"), r"<sub>\1</sub>"),
    (re.compile(r"\\href\{[^}]*\}\{([^}]*)\}"), r"\1"),
    (re.compile(r"\\url\{([^}]*)\}"), r"\1"),
    (re.compile(r"\\(?:textit|emph)\{([^}]*)\}"), r"<em>\1</em>"),
    (re.compile(r"\\textbf\{([^}]*)\}"), r"<strong>\1</strong>"),
    (re.compile(r"\\&"), "&"),
    (re.compile(r"\\\\"), ""),
    (re.compile(r"[{}]"), ""),
    (re.compile(r"\$"), ""),
    (re.compile(r"\s+"), " "),
]


def _apply_rules(text: str) -> str:
    for pattern, replacement in _RULES:
        text = pattern.sub(replacement, text)
    return text.strip()


def clean_latex(text: Optional[str]) -> str:
    """
    Strip or convert LaTeX markup into display text.

    Rules are reapplied until the text stops changing: deleting braces or
    dollars can expose a new `\\&`.

    Examples:
        "H$_{2}$O" -> "H<sub>2</sub>O"
        "\\textit{Deep} {L}earning" -> "<em>Deep</em> Learning"
    """
    if not text:
        return ""
    cleaned = _apply_rules(text)
    while cleaned != text:
        text, cleaned = cleaned, _apply_rules(cleaned)
    return cleaned
