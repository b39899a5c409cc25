"""Line-oriented batch processing of observation records."""

import sys
from typing import Dict, Iterable, Optional, TextIO

from .errors import OutOfOrderError, ParseError
from .logging import get_logger
from .output import format_row, table_header
from .parsing import parse_observation
from .structured_output import StructuredOutputWriter
from .window import RollingWindow

logger = get_logger(__name__)


class WindowRunner:
    """Feeds records into a rolling window and prints its state after each one."""

    def __init__(
        self,
        window: RollingWindow,
        out: TextIO = None,
        err: TextIO = None,
        structured_writer: Optional[StructuredOutputWriter] = None,
    ):
        """
        Initialize runner.

        Args:
            window: Rolling window receiving the observations
            out: Stream for the table (default: stdout)
            err: Stream for per-line errors (default: stderr)
            structured_writer: Optional JSONL snapshot writer
        """
        self.window = window
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self._structured_writer = structured_writer

    def process_line(self, line: str, line_number: int) -> bool:
        """
        Parse one record, put it into the window and print the new state.

        A rejected line leaves the window exactly as it was.

        Args:
            line: Raw input line
            line_number: 1-based line number, used in error messages

        Returns:
            True if the line was accepted, False otherwise
        """
        try:
            observation = parse_observation(line)
            self.window.put(observation.timestamp, observation.value)
        except (ParseError, OutOfOrderError) as e:
            print(f"Error on line {line_number}: {e}", file=self.err)
            logger.warning("Rejected line %d: %s", line_number, e)
            return False

        print(format_row(self.window), file=self.out)
        if self._structured_writer:
            self._structured_writer.record_snapshot(line_number, self.window)
        return True

    def run_lines(self, lines: Iterable[str]) -> Dict[str, int]:
        """
        Process records one by one.

        Args:
            lines: Iterable of raw input lines

        Returns:
            Dictionary with processed, rejected and lines counts
        """
        for header_line in table_header():
            print(header_line, file=self.out)

        processed = 0
        rejected = 0
        line_number = 0
        for line_number, line in enumerate(lines, start=1):
            if self.process_line(line, line_number):
                processed += 1
            else:
                rejected += 1

        summary = {"processed": processed, "rejected": rejected, "lines": line_number}
        logger.info(
            "Processed %d line(s): %d accepted, %d rejected, %d in window",
            line_number, processed, rejected, self.window.count
        )
        return summary

    def run_file(self, path: str) -> Dict[str, int]:
        """
        Stream a file through the window without loading it into memory.

        Args:
            path: Path to the input file

        Returns:
            Same summary as run_lines

        Raises:
            OSError: If the file cannot be opened or read
        """
        logger.info("Reading observations from %s (tau=%s)", path, self.window.tau)
        with open(path, "r", encoding="utf-8") as f:
            return self.run_lines(f)
