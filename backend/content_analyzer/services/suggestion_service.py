"""
Heuristic writing suggestions for extracted post text.
Every check runs independently; the output keeps check order, not severity.
"""

import re
from dataclasses import dataclass
from typing import Callable

SHORT_POST_CHARS = 80

HASHTAG_OR_MENTION = re.compile(r"[#@]")
CALL_TO_ACTION = re.compile(r"call to action|link|visit|learn more|subscribe|follow", re.IGNORECASE)


@dataclass(frozen=True)
class SuggestionCheck:
    name: str
    applies: Callable[[str], bool]
    message: str


SUGGESTION_CHECKS: tuple[SuggestionCheck, ...] = (
    SuggestionCheck(
        name="hashtags",
        applies=lambda text: not HASHTAG_OR_MENTION.search(text),
        message="Consider adding relevant hashtags and mentions.",
    ),
    SuggestionCheck(
        name="length",
        applies=lambda text: len(text) < SHORT_POST_CHARS,
        message="Post is short. Try adding context or a hook in the opening line.",
    ),
    SuggestionCheck(
        name="call_to_action",
        applies=lambda text: not CALL_TO_ACTION.search(text),
        message="Add a clear call-to-action (e.g., link, 'learn more', 'follow').",
    ),
    SuggestionCheck(
        name="line_breaks",
        applies=lambda text: "\n" not in text,
        message="Break long text into short lines for readability.",
    ),
)


def generate_suggestions(text: str) -> list[str]:
    text = text or ""
    return [check.message for check in SUGGESTION_CHECKS if check.applies(text)]
