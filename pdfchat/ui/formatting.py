"""Message formatting and per-message render isolation for the chat view."""

import html
import logging
import re
from collections.abc import Callable
from itertools import cycle
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

FALLBACK_TEXT = "⚠️ Could not display this message."

ACCENT_CLASSES = (
    "bg-blue-600 hover:bg-blue-700",
    "bg-green-600 hover:bg-green-700",
    "bg-pink-600 hover:bg-pink-700",
    "bg-indigo-600 hover:bg-indigo-700",
)

_CODE_BLOCK = re.compile(r"```(\w*)\n?([\s\S]*?)```")
_INLINE_CODE = re.compile(r"`([^`]+)`")
_BOLD = re.compile(r"\*\*(.+?)\*\*|__(.+?)__")
_ITALIC = re.compile(r"\*([^*\n]+)\*|(?<!\w)_([^_\n]+)_(?!\w)")
_LINK = re.compile(r"""\[([^\]]+)\]\((https?://(?:(?!&quot;|&#x27;)[^)\s"'<>])+)\)""")
_HEADING = re.compile(r"^(#{1,6})\s+(.+)$")
_UNORDERED_ITEM = re.compile(r"^[-*]\s+")
_ORDERED_ITEM = re.compile(r"^\d+\.\s+")


def _wrap_list_items(lines: list[str], item: re.Pattern[str], tag: str, css: str) -> list[str]:
    result: list[str] = []
    in_list = False
    for line in lines:
        stripped = line.strip()
        if item.match(stripped):
            if not in_list:
                result.append(f'<{tag} class="{css}">')
                in_list = True
            result.append(f"<li>{item.sub('', stripped)}</li>")
            continue
        if in_list:
            result.append(f"</{tag}>")
            in_list = False
        result.append(line)
    if in_list:
        result.append(f"</{tag}>")
    return result


def _heading(line: str) -> str:
    match = _HEADING.match(line.strip())
    if not match:
        return line
    level = len(match.group(1))
    size = {1: "text-lg", 2: "text-base"}.get(level, "text-sm")
    return f'<div class="{size} font-semibold my-1">{match.group(2)}</div>'


def markdown_to_html(text: str) -> str:
    """Convert markdown to HTML for chat display.

    Supports code blocks, inline code, headings, bold, italic, http(s) links
    and both list styles. Input is HTML-escaped first, quotes included, so raw
    tags or attribute fragments in a completion are shown as text.
    """
    text = html.escape(text)

    # Code is pulled out first so its contents are not formatted
    blocks: list[str] = []

    def stash(fragment: str) -> str:
        blocks.append(fragment)
        return f"\x00{len(blocks) - 1}\x00"

    text = _CODE_BLOCK.sub(
        lambda m: stash(
            '<pre class="bg-gray-800 text-gray-100 rounded-lg p-3 my-2 overflow-x-auto '
            f'text-xs"><code>{m.group(2)}</code></pre>'
        ),
        text,
    )
    text = _INLINE_CODE.sub(
        lambda m: stash(
            '<code class="bg-gray-200 text-pink-600 px-1.5 py-0.5 rounded text-xs">'
            f"{m.group(1)}</code>"
        ),
        text,
    )

    text = _BOLD.sub(lambda m: f"<strong>{m.group(1) or m.group(2)}</strong>", text)
    text = _ITALIC.sub(lambda m: f"<em>{m.group(1) or m.group(2)}</em>", text)
    text = _LINK.sub(
        r'<a href="\2" class="text-blue-600 underline" target="_blank">\1</a>',
        text,
    )

    lines = [_heading(line) for line in text.split("\n")]
    lines = _wrap_list_items(
        lines, _UNORDERED_ITEM, "ul", "list-disc list-inside my-2 space-y-1"
    )
    lines = _wrap_list_items(
        lines, _ORDERED_ITEM, "ol", "list-decimal list-inside my-2 space-y-1"
    )
    text = "<br>".join(lines)

    return re.sub(r"\x00(\d+)\x00", lambda m: blocks[int(m.group(1))], text)


def user_text_to_html(text: str) -> str:
    """Escape user input and keep its line breaks."""
    return html.escape(text).replace("\n", "<br>")


def render_isolated(
    item: T,
    render: Callable[[T], None],
    fallback: Callable[[T, Exception], None],
) -> bool:
    """Render one item, falling back if rendering raises.

    A failure in one message must not take the rest of the list down with it.

    Returns:
        True if ``render`` succeeded.
    """
    try:
        render(item)
    except Exception as e:
        logger.exception("Failed to render message")
        fallback(item, e)
        return False
    return True


class AccentCycle:
    """Cycles the send button's accent colour. Decorative only."""

    def __init__(self, classes: tuple[str, ...] = ACCENT_CLASSES) -> None:
        self._classes = classes
        self._cycle = cycle(classes)
        self.current = next(self._cycle)

    def advance(self) -> tuple[str, str]:
        """Move to the next colour; returns ``(previous, current)``."""
        previous, self.current = self.current, next(self._cycle)
        return previous, self.current
