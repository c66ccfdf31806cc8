"""Inline bold/italic markup."""

import re

# the span stops at line terminators, so "**" on either side of a "\r" stays literal
_SPAN = r"([^\r\n\u2028\u2029]*?)"

bold_re = re.compile(r"\*\*" + _SPAN + r"\*\*")
italic_re = re.compile(r"__" + _SPAN + r"__")


def apply_emphasis(text: str) -> str:
    """
    Rewrites **bold** as <strong> and __italic__ as <i> across the whole line.
    Bold is resolved first. Unpaired markers are left as they are.
    """
    text = bold_re.sub(r"<strong>\1</strong>", text)
    text = italic_re.sub(r"<i>\1</i>", text)
    return text
