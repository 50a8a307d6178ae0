"""Single-pass well-formedness checker.

The checker walks the document line by line, feeds each tag token through a
small state machine and records a diagnostic for every structural problem it
meets. It never stops early and never raises for malformed markup.

State machine:
    Before the first opening tag the document has no root. The first opening
    tag becomes the root. After that, an opening tag seen while no element is
    open starts an additional root element. Closing tags pop the innermost
    open element whether or not the names agree.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from xml_wellformed_checker.containers import Stack
from xml_wellformed_checker.shared import (
    CheckerStateError,
    CheckResult,
    Diagnostic,
    DiagnosticKind,
    get_logger,
)
from xml_wellformed_checker.tokenization import (
    TagKind,
    classify_tag,
    closing_tag_name,
    extract_tag_name,
    extract_tags,
)

MISSING_ROOT_LINE = 1

UNMATCHED_CLOSING_MESSAGE = "Closing tag </{name}> has no matching opening tag"
# No space before "is": downstream consumers match this text exactly.
MISMATCHED_MESSAGE = "Tag <{opened}>is closed by </{closing}>"
MULTIPLE_ROOTS_MESSAGE = "Multiple root elements detected: <{root}> and <{name}>."
UNCLOSED_MESSAGE = "Tag <{name}> was never closed."
MISSING_ROOT_MESSAGE = "No root element found in document."


@dataclass
class CheckerState:
    """Mutable state for one document."""

    has_root: bool = False
    root_name: Optional[str] = None
    root_count: int = 0
    current_line: int = 0
    diagnostics: List[Diagnostic] = field(default_factory=list)
    stack: Stack = field(default_factory=Stack)


class WellFormednessChecker:
    """Streaming checker for the tag structure of one document at a time.

    Lines are fed in order with ``feed_line``; ``finish`` drains the stack,
    checks for a root element and returns the result. ``check`` does all of
    this for a complete sequence of lines and can be called repeatedly.
    """

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "checker")
        self.state = CheckerState()
        self._finished = False

    def reset(self) -> None:
        """Discard all state and start a new document."""
        self.state = CheckerState()
        self._finished = False

    def feed_line(self, line: str) -> None:
        """Process every tag on the next line of the document."""
        if self._finished:
            raise CheckerStateError("Checker already finished; call reset() first")
        self.state.current_line += 1
        for tag in extract_tags(line):
            self._process_tag(tag)

    def _process_tag(self, tag: str) -> None:
        kind = classify_tag(tag)
        if kind is TagKind.CLOSING:
            self._close_element(closing_tag_name(tag))
        elif kind is TagKind.OPENING:
            self._open_element(extract_tag_name(tag))

    def _close_element(self, name: str) -> None:
        state = self.state
        if state.stack.is_empty():
            self._report(
                DiagnosticKind.UNMATCHED_CLOSING_TAG,
                UNMATCHED_CLOSING_MESSAGE.format(name=name),
            )
            return

        opened = state.stack.pop()
        if opened != name:
            self._report(
                DiagnosticKind.MISMATCHED_TAG_NAMES,
                MISMATCHED_MESSAGE.format(opened=opened, closing=name),
            )

    def _open_element(self, name: str) -> None:
        state = self.state
        if not state.has_root:
            state.has_root = True
            state.root_name = name
            state.root_count = 1
        elif state.stack.is_empty():
            state.root_count += 1
            self._report(
                DiagnosticKind.MULTIPLE_ROOT_ELEMENTS,
                MULTIPLE_ROOTS_MESSAGE.format(root=state.root_name, name=name),
            )
        state.stack.push(name)

    def _report(
        self, kind: DiagnosticKind, message: str, line: Optional[int] = None
    ) -> None:
        diagnostic = Diagnostic(
            line=self.state.current_line if line is None else line,
            message=message,
            kind=kind,
        )
        self.state.diagnostics.append(diagnostic)
        self.logger.debug(
            "Diagnostic recorded",
            extra={"line": diagnostic.line, "kind": kind.name},
        )

    def finish(self, source: Optional[str] = None) -> CheckResult:
        """Finalize the document and return its result.

        Elements still open are reported innermost first at the last line
        processed. A document without any opening tag gets a single
        missing-root diagnostic at line 1.
        """
        if self._finished:
            raise CheckerStateError("Checker already finished; call reset() first")
        self._finished = True
        state = self.state

        while not state.stack.is_empty():
            self._report(
                DiagnosticKind.UNCLOSED_TAG_AT_EOF,
                UNCLOSED_MESSAGE.format(name=state.stack.pop()),
            )

        if not state.has_root:
            self._report(
                DiagnosticKind.MISSING_ROOT_ELEMENT,
                MISSING_ROOT_MESSAGE,
                line=MISSING_ROOT_LINE,
            )

        self.logger.debug(
            "Document check finished",
            extra={
                "lines_processed": state.current_line,
                "diagnostic_count": len(state.diagnostics),
                "root_count": state.root_count,
            },
        )
        return CheckResult(
            diagnostics=list(state.diagnostics),
            lines_processed=state.current_line,
            root_name=state.root_name,
            root_count=state.root_count,
            source=source,
        )

    def check(self, lines: Iterable[str], source: Optional[str] = None) -> CheckResult:
        """Check a complete document with fresh state."""
        self.reset()
        for line in lines:
            self.feed_line(line)
        return self.finish(source)


def check_document(lines: Iterable[str]) -> List[Tuple[int, str]]:
    """Check a sequence of lines and return ``(line, message)`` pairs.

    Examples:
        >>> check_document(["<a>", "</b>"])
        [(2, 'Tag <a>is closed by </b>')]
        >>> check_document([])
        [(1, 'No root element found in document.')]
    """
    return WellFormednessChecker().check(lines).as_tuples()
