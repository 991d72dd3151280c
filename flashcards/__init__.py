import random
from typing import Iterator, List, Optional
from dataclasses import dataclass

from .logging_util import setup_logger

logger = setup_logger(__name__)


@dataclass
class Card:
    """A term/definition pair with the number of wrong answers given for it."""
    term: str
    definition: str
    mistakes: int = 0

    def __str__(self):
        return f'{self.term}: {self.definition} ({self.mistakes} mistakes)'


def card_key(card: Card) -> str:
    """Lookup key of a card. Cards are unique by term within a store."""
    return card.term


class CardStore:
    """Ordered collection of cards, unique by term, in insertion order."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.cards: List[Card] = []
        self.rng = rng or random.Random()

    def __len__(self):
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __bool__(self):
        return bool(self.cards)

    def get(self, term: str) -> Optional[Card]:
        """Get a card by term"""
        for card in self.cards:
            if card_key(card) == term:
                return card
        return None

    def upsert(self, term: str, definition: str, mistakes: int = 0):
        """Append a new card, or replace the definition of the card with this term.

        The mistake count of an existing card is kept as is.
        """
        existing = self.get(term)
        if existing is not None:
            logger.debug(f"Replacing definition of {term!r}: {existing.definition!r} -> {definition!r}")
            existing.definition = definition
            return
        self.cards.append(Card(term, definition, mistakes))
        logger.debug(f"Added card {term!r}")

    def remove(self, term: str):
        """Remove the card with this term; does nothing if there is none."""
        card = self.get(term)
        if card is not None:
            self.cards.remove(card)
            logger.debug(f"Removed card {term!r}")

    def exists_by_term(self, term: str) -> bool:
        return self.get(term) is not None

    def find_term_by_definition(self, definition: str) -> Optional[str]:
        for card in self.cards:
            if card.definition == definition:
                return card_key(card)
        return None

    def exists_by_definition(self, definition: str) -> bool:
        return self.find_term_by_definition(definition) is not None

    def matches(self, term: str, definition: str) -> bool:
        """True if a card with exactly this term and this definition exists"""
        card = self.get(term)
        return card is not None and card.definition == definition

    def hardest(self) -> List[Card]:
        """Cards sharing the highest nonzero mistake count, in store order."""
        if not self.cards:
            return []
        top = max(card.mistakes for card in self.cards)
        if top == 0:
            return []
        return [card for card in self.cards if card.mistakes == top]

    def reset_all_mistakes(self):
        for card in self.cards:
            card.mistakes = 0
        logger.debug(f"Reset mistakes on {len(self.cards)} cards")

    def pick_random(self) -> Card:
        """Pick a card uniformly at random. The store must not be empty."""
        if not self.cards:
            raise IndexError("cannot pick a card from an empty store")
        return self.rng.choice(self.cards)
