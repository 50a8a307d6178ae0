"""Line source: reading a document into trimmed lines.

The whole file is read before checking begins. Any failure to obtain the
lines is raised as ``LineSourceError`` so the caller never runs the checker
on a partial document.
"""

from pathlib import Path
from typing import List, Optional, Union

from xml_wellformed_checker.shared import LineSourceError, get_logger


def read_lines(
    file_path: Union[str, Path],
    encoding: str = "utf-8",
    correlation_id: Optional[str] = None
) -> List[str]:
    """Read a file and return its lines stripped of surrounding whitespace.

    Args:
        file_path: Path to the document
        encoding: Text encoding used to decode the file
        correlation_id: Optional correlation ID for document tracking

    Returns:
        One entry per physical line, in file order

    Raises:
        LineSourceError: The file is missing, is not a regular file, cannot
            be opened, or cannot be decoded with ``encoding``
    """
    logger = get_logger(__name__, correlation_id, "line_source")
    path_obj = Path(file_path)

    if not path_obj.exists():
        error_message = f"File not found: {path_obj}"
    elif not path_obj.is_file():
        error_message = f"Path is not a file: {path_obj}"
    else:
        error_message = None

    if error_message:
        logger.error(error_message, extra={"file_path": str(path_obj)})
        raise LineSourceError(error_message, path=path_obj)

    try:
        with path_obj.open("r", encoding=encoding) as handle:
            lines = [line.strip() for line in handle]
    except (OSError, UnicodeDecodeError, LookupError) as e:
        logger.exception(
            "Failed to read file",
            extra={"file_path": str(path_obj), "encoding": encoding},
        )
        raise LineSourceError(f"Couldn't read file {path_obj}: {e}", path=path_obj) from e

    logger.info(
        "Read document lines",
        extra={"file_path": str(path_obj), "line_count": len(lines)},
    )
    return lines
