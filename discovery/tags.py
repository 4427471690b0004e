"""Tag parsing for user-supplied record tags."""

import re
from typing import List

DEFAULT_MAX_LENGTH = 64

_WORD_PATTERN = re.compile(r'"[^"]*"|[^ ]+')


class Tags:
    """Splits tag strings entered by users into individual tags."""

    def __init__(self, max_length: int = DEFAULT_MAX_LENGTH) -> None:
        self.max_length = max_length

    def parse(self, tags: str) -> List[str]:
        """
        Parse a user-entered tag string.

        Tags are separated by spaces; a double-quoted phrase is one tag.
        Each tag is truncated to ``max_length`` characters, and empty or
        repeated tags are dropped while keeping first-seen order.
        """
        result: List[str] = []
        for word in _WORD_PATTERN.findall(tags.strip()):
            tag = word.strip('"').strip()[: self.max_length]
            if tag and tag not in result:
                result.append(tag)
        return result
