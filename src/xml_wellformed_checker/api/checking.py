"""Public checking API.

Two entry points cover the common cases: ``check_lines`` for text already in
memory and ``check_file`` for documents on disk.
"""

import io
import time
from pathlib import Path
from typing import Iterable, Optional, Union

from xml_wellformed_checker.checker import WellFormednessChecker
from xml_wellformed_checker.shared import CheckerConfig, CheckResult, get_logger

from .source import read_lines

MS_PER_SECOND = 1000


def check_lines(
    lines: Iterable[str],
    correlation_id: Optional[str] = None,
    source: Optional[str] = None
) -> CheckResult:
    """Check a document given as a sequence of lines.

    Lines are used as given; strip them first if leading whitespace should
    not matter.

    Examples:
        >>> result = check_lines(["<root>", "<item/>", "</root>"])
        >>> result.is_well_formed
        True
        >>> check_lines(["<a>", "<b>"]).render_lines()
        ['[Line 2] Tag <b> was never closed.', '[Line 2] Tag <a> was never closed.']
    """
    return WellFormednessChecker(correlation_id).check(lines, source=source)


def check_text(text: str, correlation_id: Optional[str] = None) -> CheckResult:
    """Check a document held in a single string.

    Lines break on ``\\n``, ``\\r`` and ``\\r\\n`` only, the same as reading the
    text from a file with ``check_file``.
    """
    with io.StringIO(text, newline=None) as handle:
        lines = [line.strip() for line in handle]
    return check_lines(lines, correlation_id=correlation_id)


def check_file(
    file_path: Union[str, Path],
    config: Optional[CheckerConfig] = None
) -> CheckResult:
    """Read a file and check it.

    Raises:
        LineSourceError: The file could not be read; nothing was checked
    """
    config = config or CheckerConfig()
    logger = get_logger(__name__, config.correlation_id, "check_file")
    start_time = time.time()

    lines = read_lines(file_path, config.encoding, config.correlation_id)
    result = check_lines(lines, config.correlation_id, source=str(file_path))

    logger.info(
        "Checked document",
        extra={
            "file_path": str(file_path),
            "well_formed": result.is_well_formed,
            "diagnostic_count": result.error_count,
            "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
        },
    )
    return result
