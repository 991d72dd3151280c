"""
Quiz over the card store: asks for definitions of random cards.
"""

from typing import Dict

from . import Card, CardStore
from .console import Console
from .logging_util import setup_logger

logger = setup_logger(__name__)


class InvalidCountError(ValueError):
    """The number of questions given by the user is not an integer."""

    def __init__(self, value: str):
        super().__init__(f"not a number of questions: {value!r}")
        self.value = value


class FlashcardQuiz:
    """Interactive quiz that counts wrong answers on each card."""

    def __init__(self, store: CardStore, console: Console):
        self.store = store
        self.console = console
        self.stats: Dict[str, int] = {
            'attempted': 0,
            'correct': 0,
            'wrong': 0
        }

    def run(self):
        """Ask how many questions to pose, then pose them one by one.

        Raises InvalidCountError if the answer is not an integer; no
        question is asked in that case.
        """
        if not self.store:
            self.console.say("There are no cards")
            return

        answer = self.console.ask("How many times to ask?")
        try:
            times = int(answer.strip())
        except ValueError:
            raise InvalidCountError(answer) from None

        for _ in range(times):
            card = self.store.pick_random()
            result = self._ask_question(card)
            self.stats['attempted'] += 1
            self.stats[result] += 1

        logger.info(f"Quiz finished: {self.stats['correct']}/{self.stats['attempted']} correct")

    def _ask_question(self, card: Card) -> str:
        """Ask for the definition of one card. Returns 'correct' or 'wrong'."""
        answer = self.console.ask(f'Print the definition of "{card.term}":')
        return self._check_answer(answer, card)

    def _check_answer(self, answer: str, card: Card) -> str:
        if self.store.matches(card.term, answer):
            self.console.say("Correct!")
            return 'correct'

        other_term = self.store.find_term_by_definition(answer)
        if other_term is not None:
            self.console.say(f'Wrong. The right answer is "{card.definition}", '
                             f'but your definition is correct for "{other_term}".')
        else:
            self.console.say(f'Wrong. The right answer is "{card.definition}".')
        card.mistakes += 1
        logger.debug(f"Wrong answer for {card.term!r}, mistakes now {card.mistakes}")
        return 'wrong'
