"""Line-oriented flat file holding one inventory item per line.

Format: ``name,price,quantity,expiration_date`` with no header, no escaping
and no version tag. Expiration dates are written as ISO dates; ISO date-times
are accepted on read and truncated to the date.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path

from ..errors import PersistenceError, ValidationError
from ..models import Item

logger = logging.getLogger(__name__)

_FIELD_COUNT = 4

# Date-time stamps written by older versions of the inventory file.
_LEGACY_DATE_FORMATS = (
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y",
)


def format_record(item: Item) -> str:
    """Render an item as a single line (without the trailing newline)."""
    return (
        f"{item.name},{item.price},{item.quantity},"
        f"{item.expiration_date.isoformat()}"
    )


def parse_date(text: str) -> date:
    """Parse ``YYYY-MM-DD``, an ISO date-time or a legacy ``M/d/yyyy`` stamp.

    Only the date is kept.
    """
    text = text.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    for fmt in _LEGACY_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValidationError(f"Invalid expiration date: {text!r}")


def parse_record(line: str) -> Item:
    """Parse one line into an Item.

    Raises:
        ValidationError: If the line does not hold exactly four valid fields.
    """
    parts = line.rstrip("\r\n").split(",")
    if len(parts) != _FIELD_COUNT:
        raise ValidationError(
            f"Expected {_FIELD_COUNT} fields, got {len(parts)}: {line!r}"
        )
    name, price, quantity, expiration = parts
    return Item.create(name, price, quantity, parse_date(expiration))


def read_records(path: str | Path) -> list[Item]:
    """Read every well-formed line of the file.

    Blank lines are ignored. Lines that are not valid UTF-8 or do not parse
    are skipped with a warning.

    Raises:
        PersistenceError: If the file cannot be read.
    """
    path = Path(path).expanduser()
    try:
        raw_lines = path.read_bytes().splitlines()
    except OSError as e:
        raise PersistenceError(f"Error loading inventory from {path}: {e}") from e

    items: list[Item] = []
    for lineno, raw in enumerate(raw_lines, start=1):
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning("Skipping %s line %d: not valid UTF-8 (%s)", path, lineno, e)
            continue
        if not line.strip():
            continue
        try:
            items.append(parse_record(line))
        except ValidationError as e:
            logger.warning("Skipping %s line %d: %s", path, lineno, e)
    return items


def write_records(path: str | Path, items: list[Item]) -> None:
    """Write all items, replacing the file's previous contents.

    Raises:
        PersistenceError: If the file cannot be written.
    """
    path = Path(path).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            for item in items:
                f.write(format_record(item) + "\n")
    except OSError as e:
        raise PersistenceError(f"Error saving inventory to {path}: {e}") from e
