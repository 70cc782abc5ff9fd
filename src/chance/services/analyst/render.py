"""Rendering of analyst commentary.

The analyst replies in loose Markdown. Each line is classified on its own:

    ### Title         heading      ("###" removed)
    ## Title / **X**  subheading   ("**" and the first "##" removed)
    - item           bullet       (first "- " removed)
    1. item          numbered     (kept verbatim)
    anything else    text
"""

from dataclasses import dataclass
from typing import Literal

from rich.console import Group
from rich.text import Text

BlockKind = Literal["heading", "subheading", "bullet", "numbered", "text"]


@dataclass(frozen=True)
class AnalysisBlock:
    """One classified line of analyst output."""

    kind: BlockKind
    text: str


def classify_line(line: str) -> AnalysisBlock:
    if line.startswith("###"):
        return AnalysisBlock("heading", line.replace("###", "", 1))
    if line.startswith("**") or line.startswith("##"):
        return AnalysisBlock("subheading", line.replace("**", "").replace("##", "", 1))
    if line.startswith("- "):
        return AnalysisBlock("bullet", line.replace("- ", "", 1))
    if line.startswith("1. "):
        return AnalysisBlock("numbered", line)
    return AnalysisBlock("text", line)


def parse_analysis(text: str) -> list[AnalysisBlock]:
    """Split analyst output into classified blocks, one per line."""
    return [classify_line(line) for line in text.split("\n")]


_STYLES: dict[BlockKind, str] = {
    "heading": "bold yellow",
    "subheading": "bold",
    "bullet": "white",
    "numbered": "white",
    "text": "dim",
}


def render_analysis(blocks: list[AnalysisBlock]) -> Group:
    """Build a rich renderable for classified blocks."""
    lines: list[Text] = []
    for block in blocks:
        if block.kind == "heading":
            lines.append(Text(""))
        content = f"  • {block.text}" if block.kind == "bullet" else block.text
        lines.append(Text(content, style=_STYLES[block.kind]))
    return Group(*lines)
