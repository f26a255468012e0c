"""Styled-span intermediate representation produced by the Markdown styler."""

from __future__ import annotations

from dataclasses import dataclass

ROLE_PLAIN = ""
ROLE_HEADING1 = "heading1"
ROLE_HEADING2 = "heading2"
ROLE_HEADING3 = "heading3"
ROLE_STRONG = "strong"
ROLE_EMPHASIS = "emphasis"
ROLE_CODE = "code"
ROLE_FENCE_LABEL = "fence_label"
ROLE_FENCE_DIVIDER = "fence_divider"


@dataclass(frozen=True)
class SpanStyle:
    """Rendering attributes of one span; ``role`` lets serializers pick colors."""

    bold: bool = False
    underline: bool = False
    italic: bool = False
    dim: bool = False
    role: str = ROLE_PLAIN

    @property
    def is_plain(self) -> bool:
        return not (self.bold or self.underline or self.italic or self.dim or self.role)


PLAIN = SpanStyle()


@dataclass(frozen=True)
class StyledSpan:
    """A contiguous run of text tagged with one style."""

    text: str
    style: SpanStyle = PLAIN


StyledLine = tuple[StyledSpan, ...]


def line_text(line: StyledLine) -> str:
    """Return the unstyled text of ``line``."""
    return "".join(span.text for span in line)
