"""
Reading and writing card files.

A card file holds one record per line, as written by export::

    {"capital of France":"Paris":0},
    {"dog":"a domestic animal":3},

Reading is permissive: quotes around the term and definition are optional
(either ``"`` or ``'``), the mistake count may be missing (it then counts
as 0), several records may share a line, and text around the records is
skipped. A file without any record simply yields no cards. Inside quotes,
a backslash escapes a quote or another backslash.

Spreadsheets (.xlsx, .xls, .ods) can be imported too. Their first column
is the term, the second the definition and an optional third one the
mistake count; the first row is taken as a header.
"""

from pathlib import Path
from typing import Callable, Iterable, List, Optional

import pandas as pd

from . import Card, CardStore
from .logging_util import setup_logger

logger = setup_logger(__name__)

QUOTES = '"\''
SPREADSHEET_SUFFIXES = ('.xlsx', '.xls', '.ods')


class CardFileError(Exception):
    """A card file exists but could not be read."""


def _is_term_char(ch: str) -> bool:
    return ch.isalnum() or ch == '_'


def _is_definition_char(ch: str) -> bool:
    return ch.isalnum() or ch in '_- \t'


def _escape(value: str) -> str:
    return value.replace('\\', '\\\\').replace('"', '\\"')


class _RecordReader:
    """Cursor over a single line of a card file."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return '' if self.at_end() else self.text[self.pos]

    def skip_spaces(self):
        while not self.at_end() and self.text[self.pos].isspace():
            self.pos += 1

    def take(self, ch: str) -> bool:
        if self.peek() == ch:
            self.pos += 1
            return True
        return False

    def read_while(self, accept: Callable[[str], bool]) -> str:
        start = self.pos
        while not self.at_end() and accept(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]

    def read_quoted(self) -> Optional[str]:
        """Read a field up to its closing quote.

        A backslash before a quote or another backslash escapes it; any other
        backslash is kept as is.
        """
        quote = self.text[self.pos]
        chars = []
        pos = self.pos + 1
        while pos < len(self.text):
            ch = self.text[pos]
            if ch == '\\' and pos + 1 < len(self.text) and self.text[pos + 1] in QUOTES + '\\':
                chars.append(self.text[pos + 1])
                pos += 2
                continue
            if ch == quote:
                self.pos = pos + 1
                return ''.join(chars)
            chars.append(ch)
            pos += 1
        return None

    def read_field(self, accept: Callable[[str], bool]) -> Optional[str]:
        """Read a quoted field, or an unquoted run of accepted characters."""
        quote = self.peek()
        if quote and quote in QUOTES:
            return self.read_quoted()
        return self.read_while(accept).strip()

    def read_record(self) -> Optional[Card]:
        """Read one record starting at the cursor; None if there is none.

        Whatever follows the record is left unread.
        """
        self.skip_spaces()
        self.take('{')
        self.skip_spaces()

        term = self.read_field(_is_term_char)
        if not term:
            return None
        self.skip_spaces()
        if not self.take(':'):
            return None
        self.skip_spaces()

        definition = self.read_field(_is_definition_char)
        if definition is None:
            return None
        self.skip_spaces()

        mistakes = 0
        if self.take(':'):
            self.skip_spaces()
            digits = self.read_while(str.isdigit)
            if digits:
                mistakes = int(digits)

        self.skip_spaces()
        if self.take('}'):
            self.skip_spaces()
            self.take(',')
        return Card(term, definition, mistakes)

    def next_opening(self, start: int) -> bool:
        """Move to the next '{' after start. False if there is none."""
        found = self.text.find('{', start + 1)
        if found < 0:
            self.pos = len(self.text)
            return False
        self.pos = found
        return True


def parse_line(line: str) -> List[Card]:
    """Parse every record found on one line of a card file.

    Text that is not part of a record is skipped up to the next '{'.
    """
    reader = _RecordReader(line)
    cards = []
    while True:
        reader.skip_spaces()
        if reader.at_end():
            break
        start = reader.pos
        card = reader.read_record()
        if card is not None:
            cards.append(card)
            continue
        if not reader.next_opening(start):
            break
    return cards


def parse_record(line: str) -> Optional[Card]:
    """Parse the first record of a line. Returns None if there is none."""
    cards = parse_line(line)
    return cards[0] if cards else None


def loads(text: str) -> List[Card]:
    """Parse the contents of a card file."""
    cards = []
    for number, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        found = parse_line(line)
        if not found:
            logger.debug(f"Skipping line {number}: {line!r}")
        cards.extend(found)
    return cards


def format_card(card: Card) -> str:
    return f'{{"{_escape(card.term)}":"{_escape(card.definition)}":{card.mistakes}}},\n'


def dumps(cards: Iterable[Card]) -> str:
    return ''.join(format_card(card) for card in cards)


def read_spreadsheet(path: Path) -> List[Card]:
    """Load cards from the first sheet of a spreadsheet"""
    if not path.exists():
        raise FileNotFoundError(str(path))
    try:
        df = pd.read_excel(path)
    except (ValueError, ImportError) as e:
        raise CardFileError(f"cannot read spreadsheet {path}: {e}") from e

    cards = []
    if len(df.columns) < 2:
        return cards

    for _, row in df.iterrows():
        term, definition = row.iloc[0], row.iloc[1]
        if pd.isna(term) or pd.isna(definition):
            continue
        term, definition = str(term).strip(), str(definition).strip()
        if not term:
            continue

        mistakes = 0
        if len(row) > 2 and not pd.isna(row.iloc[2]):
            try:
                mistakes = max(int(row.iloc[2]), 0)
            except (TypeError, ValueError):
                logger.warning(f"Ignoring mistake count {row.iloc[2]!r} of {term!r}")
        cards.append(Card(term, definition, mistakes))
    return cards


def read_cards(path) -> List[Card]:
    """Read the cards stored at path, by file type.

    Raises FileNotFoundError if there is no such file.
    """
    path = Path(path)
    if path.suffix.lower() in SPREADSHEET_SUFFIXES:
        return read_spreadsheet(path)
    return loads(path.read_text(encoding='utf-8', errors='replace'))


def import_cards(store: CardStore, path) -> int:
    """Upsert every card found at path into the store. Returns how many were read."""
    cards = read_cards(path)
    for card in cards:
        store.upsert(card.term, card.definition, card.mistakes)
    logger.info(f"Imported {len(cards)} cards from {path}")
    return len(cards)


def export_cards(store: CardStore, path) -> int:
    """Write every card of the store to path, replacing the file. Returns the count."""
    Path(path).write_text(dumps(store), encoding='utf-8')
    logger.info(f"Exported {len(store)} cards to {path}")
    return len(store)
