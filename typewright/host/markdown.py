"""Lightweight Markdown syntax tree for the reference host.

Only the node kinds that matter for autocorrect are recognised: fenced and
indented code blocks, thematic breaks, HTML comments and code spans.
Everything else resolves to "Document".
"""

from dataclasses import dataclass
import re

from typewright.core import SyntaxTree

FENCE_OPEN_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")
FENCE_CLOSE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})[ \t]*$")
HORIZONTAL_RULE_RE = re.compile(r"^ {0,3}([-*_])(?:[ \t]*\1){2,}[ \t]*$")
INDENTED_CODE_RE = re.compile(r"^(?: {4}|\t)")
LIST_ITEM_RE = re.compile(r"^ {0,3}(?:[-+*]|\d{1,9}[.)])(?:[ \t]|$)")

ROOT_KIND = "Document"


@dataclass(frozen=True)
class SyntaxNode:
    """A typed span of the document.

    open_ended marks nodes that are cut off by the end of the document (an
    unclosed fence or comment); they also contain the final position.
    """

    kind: str
    start: int
    end: int
    open_ended: bool = False

    def contains(self, position: int, side: int = 0) -> bool:
        lower = self.start <= position if side > 0 else self.start < position
        upper = self.end >= position if side < 0 else self.end > position
        return lower and (upper or (self.open_ended and self.end == position))


def _split_lines(text: str) -> list[tuple[int, str]]:
    """Split text into (start offset, line text) pairs."""
    lines = []
    offset = 0
    for line in text.split("\n"):
        lines.append((offset, line))
        offset += len(line) + 1
    return lines


class MarkdownSyntaxTree(SyntaxTree):
    """Node spans computed from Markdown source."""

    def __init__(self, text: str):
        self.text = text
        self.nodes: list[SyntaxNode] = []
        self._block_spans: list[tuple[int, int]] = []
        self._parse_blocks()
        self._parse_inline()

    def _block_end(self, line_start: int, line: str) -> tuple[int, bool]:
        """End offset of a block whose last line is given, including its line break."""
        end = line_start + len(line)
        if end < len(self.text):
            return end + 1, False
        return end, True

    def _add_block(self, node: SyntaxNode) -> None:
        self.nodes.append(node)
        self._block_spans.append((node.start, node.end))

    def _parse_blocks(self) -> None:
        lines = _split_lines(self.text)
        index = 0
        previous_blank = True
        # Indented lines inside a list continue the item rather than start code
        in_list = False
        while index < len(lines):
            line_start, line = lines[index]

            fence = FENCE_OPEN_RE.match(line)
            if fence:
                index = self._parse_fence(lines, index, fence.group(1))
                previous_blank = False
                in_list = False
                continue

            if previous_blank and not in_list and line.strip() and INDENTED_CODE_RE.match(line):
                last = index
                while last + 1 < len(lines):
                    _, next_line = lines[last + 1]
                    if not next_line.strip() or not INDENTED_CODE_RE.match(next_line):
                        break
                    last += 1
                last_start, last_line = lines[last]
                end, open_ended = self._block_end(last_start, last_line)
                self._add_block(SyntaxNode("CodeBlock", line_start, end, open_ended))
                index = last + 1
                previous_blank = False
                continue

            if HORIZONTAL_RULE_RE.match(line):
                self.nodes.append(SyntaxNode("HorizontalRule", line_start, line_start + len(line)))
                in_list = False
            elif LIST_ITEM_RE.match(line):
                in_list = True
            elif line.strip() and not INDENTED_CODE_RE.match(line):
                in_list = False

            previous_blank = not line.strip()
            index += 1

    def _parse_fence(self, lines: list[tuple[int, str]], index: int, marker: str) -> int:
        """Record a fenced code block opening at lines[index]; return the next line index."""
        block_start = lines[index][0]
        for close_index in range(index + 1, len(lines)):
            close_start, close_line = lines[close_index]
            closing = FENCE_CLOSE_RE.match(close_line)
            if closing and closing.group(1)[0] == marker[0] and len(closing.group(1)) >= len(marker):
                end, open_ended = self._block_end(close_start, close_line)
                self._add_block(SyntaxNode("FencedCode", block_start, end, open_ended))
                if close_index > index + 1:
                    content_start = lines[index + 1][0]
                    self.nodes.append(SyntaxNode("CodeText", content_start, close_start - 1))
                return close_index + 1

        # Unclosed fences run to the end of the document
        self._add_block(SyntaxNode("FencedCode", block_start, len(self.text), True))
        if index + 1 < len(lines):
            self.nodes.append(SyntaxNode("CodeText", lines[index + 1][0], len(self.text), True))
        return len(lines)

    def _segments(self) -> list[tuple[int, int]]:
        """Text ranges outside code blocks."""
        segments = []
        cursor = 0
        for start, end in sorted(self._block_spans):
            if start > cursor:
                segments.append((cursor, start))
            cursor = max(cursor, end)
        if cursor < len(self.text):
            segments.append((cursor, len(self.text)))
        return segments

    def _parse_inline(self) -> None:
        for seg_start, seg_end in self._segments():
            open_ended = seg_end == len(self.text)
            i = seg_start
            while i < seg_end:
                if self.text.startswith("<!--", i):
                    close = self.text.find("-->", i + 4, seg_end)
                    if close == -1:
                        self.nodes.append(SyntaxNode("CommentBlock", i, seg_end, open_ended))
                        break
                    self.nodes.append(SyntaxNode("CommentBlock", i, close + 3))
                    i = close + 3
                    continue

                if self.text[i] == "`":
                    run = i
                    while run < seg_end and self.text[run] == "`":
                        run += 1
                    ticks = run - i
                    closing = re.compile(rf"(?<!`){'`' * ticks}(?!`)").search(self.text, run, seg_end)
                    # Code spans do not cross paragraph breaks
                    if closing and "\n\n" not in self.text[run : closing.start()]:
                        self.nodes.append(SyntaxNode("InlineCode", i, closing.end()))
                        i = closing.end()
                    else:
                        i = run
                    continue

                i += 1

    def node_at(self, position: int, side: int = 0) -> SyntaxNode | None:
        """Return the innermost node containing position, if any."""
        best: SyntaxNode | None = None
        for node in self.nodes:
            if not node.contains(position, side):
                continue
            if best is None or node.end - node.start <= best.end - best.start:
                best = node
        return best

    def resolve(self, position: int, side: int = 0) -> str:
        node = self.node_at(position, side)
        return node.kind if node is not None else ROOT_KIND
