"""Quick-add parser for focusdeck.

Turns one line of free-form text into a structured ParsedTask draft:

    "Ship report #launch !P1 ^M @tomorrow ops"

Each field is extracted by a pure step that takes the residual title and
returns (value, new_residual). Steps run in a fixed order and each removes
only the FIRST match of its pattern. Unrecognized text stays in the title.
This module never raises on user input.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Tuple

from focusdeck.config import EngineConfig, LabelMatchMode, resolve_config
from focusdeck.models.constants import DUE_HOUR, DUE_MINUTE, FRIDAY, LABEL_KEYWORDS
from focusdeck.models.parsed_task import ParsedTask

logger = logging.getLogger(__name__)


_PROJECT_RE = re.compile(r"#(\w+)")
_PRIORITY_RE = re.compile(r"!P([0-3])")
# XS and XL must be tried before S / L so "^XS" is never read as "^X" + "S".
_EFFORT_RE = re.compile(r"\^(XS|XL|S|M|L)")
_DUE_RE = re.compile(
    r"@(today|tomorrow|EOW|\d{4}-\d{2}-\d{2}(?:\s+\d{2}:\d{2}-\d{2}:\d{2})?)",
    re.ASCII,
)
_DATE_TOKEN_RE = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})(?:\s+(?P<start>\d{2}:\d{2})-(?P<end>\d{2}:\d{2}))?",
    re.ASCII,
)
_WHITESPACE_RE = re.compile(r"\s+")


def _strip_first(pattern: re.Pattern, text: str) -> Tuple[Optional[re.Match], str]:
    m = pattern.search(text)
    if not m:
        return None, text
    return m, text[: m.start()] + text[m.end():]


def extract_project(text: str) -> Tuple[Optional[str], str]:
    """Extract the first `#project` token."""
    m, rest = _strip_first(_PROJECT_RE, text)
    return (m.group(1) if m else None), rest


def extract_priority(text: str) -> Tuple[Optional[str], str]:
    """Extract the first `!P0`..`!P3` token. `!P4` and up stay literal."""
    m, rest = _strip_first(_PRIORITY_RE, text)
    return (f"P{m.group(1)}" if m else None), rest


def extract_effort(text: str) -> Tuple[Optional[str], str]:
    """Extract the first `^XS|^S|^M|^L|^XL` token."""
    m, rest = _strip_first(_EFFORT_RE, text)
    return (m.group(1) if m else None), rest


def _js_weekday(day: date) -> int:
    """Weekday numbered Sunday = 0 ... Saturday = 6."""
    return (day.weekday() + 1) % 7


def resolve_due_token(token: str, now: datetime) -> Optional[datetime]:
    """Resolve the body of an `@` token to a due datetime.

    Relative tokens and bare dates resolve to 23:59 local time. A date with a
    time range resolves to the range start; the end time is validated but
    dropped. Returns None for dates that do not exist on the calendar.
    """
    today = now.date()
    due_time = time(DUE_HOUR, DUE_MINUTE)

    if token == "today":
        day = today
    elif token == "tomorrow":
        day = today + timedelta(days=1)
    elif token == "EOW":
        day = today + timedelta(days=(FRIDAY - _js_weekday(today)) % 7)
    else:
        m = _DATE_TOKEN_RE.fullmatch(token)
        if not m:
            return None
        try:
            day = date.fromisoformat(m.group("date"))
            if m.group("start"):
                due_time = time.fromisoformat(m.group("start"))
                time.fromisoformat(m.group("end"))
        except ValueError:
            logger.debug(f"Ignoring invalid due date token: {token!r}")
            return None

    return datetime.combine(day, due_time, tzinfo=now.tzinfo)


def extract_due_date(text: str, now: datetime) -> Tuple[Optional[datetime], str]:
    """Extract the first `@today|@tomorrow|@EOW|@YYYY-MM-DD[ HH:MM-HH:MM]` token.

    The token is removed from the title even when the date itself is invalid.
    """
    m, rest = _strip_first(_DUE_RE, text)
    if not m:
        return None, text
    return resolve_due_token(m.group(1), now), rest


def _label_pattern(keyword: str, mode: LabelMatchMode) -> re.Pattern:
    if mode == LabelMatchMode.WORD:
        return re.compile(rf"\b{re.escape(keyword)}\b", re.I)
    return re.compile(re.escape(keyword), re.I)


def extract_labels(
    text: str,
    mode: LabelMatchMode = LabelMatchMode.SUBSTRING,
) -> Tuple[Optional[List[str]], str]:
    """Extract label keywords.

    Keywords are tested in LABEL_KEYWORDS order, which is also the output
    order. Every occurrence of a matched keyword is removed. In substring mode
    "opscenter" matches "ops" and leaves "center" behind.
    """
    labels: List[str] = []
    for keyword in LABEL_KEYWORDS:
        pattern = _label_pattern(keyword, mode)
        if pattern.search(text):
            labels.append(keyword)
            text = pattern.sub("", text)
    return (labels or None), text


def normalize_title(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def parse_quick_add(
    text: Optional[str],
    *,
    now: Optional[datetime] = None,
    config: Optional[EngineConfig] = None,
) -> ParsedTask:
    """Parse quick-add text into a ParsedTask.

    Args:
        text: Raw user input (None is treated as empty)
        now: Reference time for relative dates (defaults to local now)
        config: Engine configuration (defaults to environment)

    Returns:
        ParsedTask; fields with no matching token are None
    """
    cfg = resolve_config(config)
    now = now or datetime.now()
    rest = (text or "").strip()

    project_name, rest = extract_project(rest)
    priority, rest = extract_priority(rest)
    effort, rest = extract_effort(rest)
    due_date, rest = extract_due_date(rest, now)
    labels, rest = extract_labels(rest, cfg.label_match)

    parsed = ParsedTask(
        title=normalize_title(rest),
        project_name=project_name,
        priority=priority,
        effort=effort,
        due_date=due_date,
        labels=labels,
    )
    logger.debug(f"Parsed quick-add {text!r} -> {parsed}")
    return parsed


def format_parsed_task(parsed: ParsedTask) -> str:
    """Render a ParsedTask back to quick-add syntax.

    Lossy: the due date is written as YYYY-MM-DD, so the time of day and any
    time range are dropped. Re-parsing the output yields 23:59 on that date.
    """
    parts = [parsed.title]
    if parsed.project_name:
        parts.append(f"#{parsed.project_name}")
    if parsed.priority:
        parts.append(f"!{parsed.priority}")
    if parsed.effort:
        parts.append(f"^{parsed.effort}")
    if parsed.due_date:
        parts.append(f"@{parsed.due_date.date().isoformat()}")
    if parsed.labels:
        parts.extend(parsed.labels)
    return " ".join(parts)
