from . import CardStore
from .console import Console
from .logging_util import setup_logger

logger = setup_logger(__name__)


class FlashcardEditor:
    """Interactive editing of the card store: adding, removing and statistics"""

    def __init__(self, store: CardStore, console: Console):
        self.store = store
        self.console = console

    def add_card(self):
        """Ask for a new term and its definition; both must be unused."""
        term = self.console.ask("The card:")
        if self.store.exists_by_term(term):
            self.console.say(f'The card "{term}" already exists.')
            return

        definition = self.console.ask("The definition of the card:")
        if self.store.exists_by_definition(definition):
            self.console.say(f'The definition "{definition}" already exists.')
            return

        self.store.upsert(term, definition)
        self.console.say(f'The pair ("{term}":"{definition}") has been added')

    def remove_card(self):
        term = self.console.ask("Which card?")
        if self.store.exists_by_term(term):
            self.store.remove(term)
            self.console.say("The card has been removed.")
        else:
            self.console.say(f'Can\'t remove "{term}": there is no such card.')

    def show_hardest(self):
        """Report the card(s) with the most wrong answers."""
        hardest = self.store.hardest()
        if not hardest:
            self.console.say("There are no cards with errors.")
        elif len(hardest) == 1:
            card = hardest[0]
            self.console.say(f'The hardest card is "{card.term}". '
                             f'You have {card.mistakes} errors answering it')
        else:
            terms = ', '.join(f'"{card.term}"' for card in hardest)
            self.console.say(f'The hardest cards are {terms}. '
                             f'You have {hardest[0].mistakes} errors answering them.')

    def reset_stats(self):
        self.store.reset_all_mistakes()
        self.console.say("Card statistics have been reset.")
        logger.info("Card statistics reset")
