"""ICS file adapter - reads and writes iCalendar text files."""

import logging
from collections.abc import Iterable
from pathlib import Path

from icaltext.config import Config
from icaltext.core.date import Date
from icaltext.core.errors import ICalError
from icaltext.core.folding import CRLF, split_content_lines
from icaltext.core.property import Property
from icaltext.ports.serializable import SerializableProperty

logger = logging.getLogger(__name__)


class IcsFileReader:
    """
    iCalendar file reader.

    Turns each content line into a Property, or a Date for the property
    names listed in the config. No calendar structure is built: BEGIN/END
    lines come back as ordinary properties.
    """

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self._date_names = {name.upper() for name in self.config.date_properties}

    def read(self, path: Path | str) -> list[Property | Date]:
        """Read and parse every content line of an .ics file."""
        path = Path(path).expanduser()
        logger.debug(f"Reading {path}")
        with path.open(encoding="utf-8", newline="") as f:
            return self.read_text(f.read())

    def read_text(self, text: str) -> list[Property | Date]:
        """
        Parse every content line of iCalendar text.

        Raises:
            ParseError: On malformed text, unless skip_invalid is set
            BogusDataError: On out-of-range dates, unless skip_invalid is set
        """
        mode = self.config.parse_mode
        properties: list[Property | Date] = []

        for line in split_content_lines(text, mode):
            try:
                properties.append(self.parse_line(line))
            except ICalError as e:
                if not self.config.skip_invalid:
                    raise
                logger.warning(f"Skipping invalid line {line!r}: {e}")

        logger.debug(f"Parsed {len(properties)} properties")
        return properties

    def parse_line(self, line: str) -> Property | Date:
        """Parse one logical content line."""
        mode = self.config.parse_mode
        prop = Property.parse(line, mode)
        if prop.name in self._date_names:
            return Date.parse(line, mode)
        return prop


class IcsFileWriter:
    """Serializes properties as CRLF-terminated, folded content lines."""

    def render(self, properties: Iterable[SerializableProperty]) -> str:
        return "".join(prop.to_text() + CRLF for prop in properties)

    def write(self, path: Path | str, properties: Iterable[SerializableProperty]) -> None:
        path = Path(path).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps CRLF as written
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(self.render(properties))
        logger.debug(f"Wrote {path}")
