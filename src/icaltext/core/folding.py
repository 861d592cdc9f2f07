"""Content line folding and unfolding - pure functions, no I/O."""

from enum import Enum

from .errors import ParseError

CRLF = "\r\n"
FOLD_LENGTH = 75
FOLD_INDENT = " "
WSP = (" ", "\t")


class ParseMode(Enum):
    """How forgiving the parser is about malformed input."""

    STRICT = "strict"  # Reject anything that deviates from the grammar
    LOOSE = "loose"  # Recover from the few known deviations


def _physical_lines(text: str, mode: ParseMode) -> list[str]:
    """Split text on line breaks, honouring the mode's accepted break styles."""
    if mode is ParseMode.LOOSE:
        return text.replace(CRLF, "\n").replace("\r", "\n").split("\n")

    lines = text.split(CRLF)
    for line in lines:
        if "\n" in line or "\r" in line:
            raise ParseError("Line break must be CRLF", text)
    return lines


def _join_continuations(lines: list[str], mode: ParseMode, text: str) -> list[str]:
    """Merge continuation lines onto the logical line they belong to."""
    logical: list[str] = []
    for line in lines:
        if not logical:
            logical.append(line)
        elif line[:1] in WSP:
            logical[-1] += line[1:]
        elif mode is ParseMode.STRICT:
            raise ParseError("Continuation line must begin with whitespace", text)
        else:
            logical[-1] += line
    return logical


def unfold(text: str, mode: ParseMode = ParseMode.LOOSE) -> str:
    """
    Merge the physical lines of one content line into a single string.

    Every line break followed by a space or tab is removed together with
    that one whitespace character. A trailing line terminator is dropped.

    Args:
        text: One or more physical lines
        mode: STRICT only accepts CRLF breaks followed by whitespace;
            LOOSE accepts any break style and joins bare continuations as-is

    Returns:
        The logical content line

    Raises:
        ParseError: On a malformed fold under STRICT
    """
    for terminator in (CRLF, "\n", "\r"):
        if text.endswith(terminator):
            text = text[: -len(terminator)]
            break

    return "".join(_join_continuations(_physical_lines(text, mode), mode, text))


def fold(text: str) -> str:
    """
    Split a logical line into physical lines of at most FOLD_LENGTH characters.

    Continuation lines start with a single space, which counts toward the limit.
    """
    if len(text) <= FOLD_LENGTH:
        return text

    segments = [text[:FOLD_LENGTH]]
    step = FOLD_LENGTH - len(FOLD_INDENT)
    for start in range(FOLD_LENGTH, len(text), step):
        segments.append(FOLD_INDENT + text[start : start + step])
    return CRLF.join(segments)


def split_content_lines(text: str, mode: ParseMode = ParseMode.LOOSE) -> list[str]:
    """
    Split an iCalendar stream into unfolded logical content lines.

    Unlike unfold(), a line without leading whitespace starts a new content
    line here. Blank lines are skipped.

    Raises:
        ParseError: Under STRICT, on a break style other than CRLF
    """
    logical: list[str] = []
    for line in _physical_lines(text, mode):
        if line[:1] in WSP and logical:
            logical[-1] += line[1:]
        elif line:
            logical.append(line)
    return logical
