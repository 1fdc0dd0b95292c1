import io
import logging
import os
import re
from typing import Iterable, List, Optional, Sequence, Tuple, Union, IO

from .config import ScheduleConfig, resolve
from .events import EventLog, emit
from .models import InputWarning, Student

logger = logging.getLogger(__name__)

TextOrPath = Union[str, os.PathLike, IO]
StudentLike = Union[Student, Tuple[str, Sequence[str]]]

# Tried in order, first match wins.
STUDENT_LINE_PATTERNS = [
    re.compile(r'^(\w+):\s*(.+)$'),       # S1: Math, Physics
    re.compile(r'^(\w+),\s*(.+)$'),       # S1,Math,Physics
    re.compile(r'^([^,]+),\s*(.+)$'),     # Jane Doe,Math,Physics
]

_COURSE_SPLIT = re.compile(r'[,\n\r]+')
_HEADER_SUFFIX = r's?(?:[\s_-]*(?:names?|ids?|list|codes?))?'
_STUDENT_HEADER_TOKENS = {'id', 'name', 'names'}


def _open_text(src: TextOrPath):
    """Return a text-mode file handle and a flag indicating whether to close it.

    Accepts a filesystem path, a text IO object, or a BytesIO buffer.
    """
    if isinstance(src, (str, os.PathLike)):
        f = open(src, 'r', encoding='utf-8', newline='')
        return f, True
    if isinstance(src, io.BytesIO):
        src.seek(0)
        f = io.TextIOWrapper(src, encoding='utf-8', newline='')
        return f, True
    if hasattr(src, 'read'):
        if hasattr(src, 'seek'):
            src.seek(0)
        return src, False
    raise TypeError("Unsupported input type; expected path or file-like object")


def read_text(src: TextOrPath) -> str:
    f, should_close = _open_text(src)
    try:
        return f.read()
    finally:
        if should_close:
            f.close()


def _warn(warnings: Optional[List[InputWarning]], kind: str, message: str,
          line: Optional[int] = None, course: Optional[str] = None) -> None:
    logger.warning(message)
    if warnings is not None:
        warnings.append(InputWarning(kind=kind, message=message, line=line, course=course))


def clean_token(token: str) -> str:
    """Trim whitespace and any wrapping quote characters."""
    return token.strip().strip('\'"').strip()


def split_courses(raw: str, config: ScheduleConfig) -> List[str]:
    courses = []
    for tok in raw.split(','):
        name = clean_token(tok)
        if not name:
            continue
        courses.append(config.canonical_course(name))
    return courses


def _is_student_header(line: str, config: ScheduleConfig) -> bool:
    if ':' in line:
        return False
    first = clean_token(line.split(',', 1)[0]).lower()
    compact = re.sub(r'[\s_-]+', '', first)
    keyword = config.student_header_keyword.lower()
    if compact in _STUDENT_HEADER_TOKENS:
        return True
    return re.fullmatch(re.escape(keyword) + _HEADER_SUFFIX, first) is not None


def _is_course_header(token: str, config: ScheduleConfig) -> bool:
    prefix = re.escape(config.course_header_prefix.lower())
    return re.fullmatch(prefix + _HEADER_SUFFIX, token.lower()) is not None


def parse_student_data(text: str, config: Optional[ScheduleConfig] = None,
                       warnings: Optional[List[InputWarning]] = None,
                       events: Optional[EventLog] = None) -> List[Student]:
    """Parse enrollment text, one student per line.

    Lines that match no pattern or carry no courses are skipped and reported
    through ``warnings``; ``line`` on each warning is the 1-based line number
    in ``text``.
    """
    config = resolve(config)
    students: List[Student] = []
    if not text or not text.strip():
        return students

    seen_content = False
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        if not seen_content:
            seen_content = True
            if _is_student_header(line, config):
                emit(events, 'parse', None, f"skipped header line {lineno}")
                continue

        match = None
        for pattern in STUDENT_LINE_PATTERNS:
            match = pattern.match(line)
            if match:
                break
        if not match:
            _warn(warnings, 'malformed_line',
                  f"Could not parse line {lineno}: {line!r}", line=lineno)
            continue

        sid = clean_token(match.group(1))
        courses = split_courses(match.group(2), config)
        if not sid or not courses:
            _warn(warnings, 'empty_courses',
                  f"Line {lineno} has no courses: {line!r}", line=lineno)
            continue
        students.append(Student(id=sid, courses=courses))
        emit(events, 'parse', None, f"student {sid}: [{', '.join(courses)}]")

    _check_duplicate_ids(students, warnings)
    logger.info("Parsed %d students", len(students))
    return students


def parse_course_list(text: str, config: Optional[ScheduleConfig] = None,
                      warnings: Optional[List[InputWarning]] = None) -> List[str]:
    """Split a course list on commas and newlines (not spaces) and de-duplicate."""
    config = resolve(config)
    if not text or not text.strip():
        return []
    tokens = [clean_token(t) for t in _COURSE_SPLIT.split(text)]
    tokens = [t for t in tokens if t]
    if tokens and _is_course_header(tokens[0], config):
        tokens = tokens[1:]
    return normalize_course_names(tokens, config=config, warnings=warnings)


def normalize_course_names(names: Iterable[str], config: Optional[ScheduleConfig] = None,
                           warnings: Optional[List[InputWarning]] = None) -> List[str]:
    config = resolve(config)
    courses: List[str] = []
    seen = set()
    for raw in names:
        if raw is None:
            continue
        name = clean_token(str(raw))
        if not name:
            continue
        name = config.canonical_course(name)
        if name in seen:
            _warn(warnings, 'duplicate_course',
                  f"Course {name!r} listed more than once", course=name)
            continue
        seen.add(name)
        courses.append(name)
    logger.info("Parsed %d courses", len(courses))
    return courses


def normalize_students(records: Iterable[StudentLike], config: Optional[ScheduleConfig] = None,
                       warnings: Optional[List[InputWarning]] = None) -> List[Student]:
    """Accept ``Student`` objects or ``(id, courses)`` pairs and clean them up."""
    config = resolve(config)
    students: List[Student] = []
    for idx, rec in enumerate(records, start=1):
        if isinstance(rec, Student):
            sid, raw_courses = rec.id, rec.courses
        else:
            sid, raw_courses = rec
        sid = clean_token(str(sid)) if sid is not None else ''
        if isinstance(raw_courses, str):
            # a single comma-separated cell, as on a text line
            courses = split_courses(raw_courses, config)
        else:
            courses = []
            for c in raw_courses or []:
                name = clean_token(str(c))
                if name:
                    courses.append(config.canonical_course(name))
        if not sid or not courses:
            _warn(warnings, 'empty_courses',
                  f"Record {idx} has no id or no courses", line=idx)
            continue
        students.append(Student(id=sid, courses=courses))
    _check_duplicate_ids(students, warnings)
    return students


def _check_duplicate_ids(students: List[Student], warnings: Optional[List[InputWarning]]) -> None:
    seen = set()
    for s in students:
        if s.id in seen:
            _warn(warnings, 'duplicate_student', f"Student id {s.id!r} appears more than once")
        seen.add(s.id)


def load_enrollments(src: TextOrPath, config: Optional[ScheduleConfig] = None,
                     warnings: Optional[List[InputWarning]] = None) -> List[Student]:
    return parse_student_data(read_text(src), config=config, warnings=warnings)


def load_course_list(src: TextOrPath, config: Optional[ScheduleConfig] = None,
                     warnings: Optional[List[InputWarning]] = None) -> List[str]:
    return parse_course_list(read_text(src), config=config, warnings=warnings)
