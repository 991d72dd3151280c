"""
Command loop of the flashcard program.

The session reads one command per line and runs the matching action until
the user types ``exit``. Every prompt, message and answer is mirrored into
the session transcript, which the ``log`` command saves to a file.
"""

import sys
from enum import Enum
from typing import Callable, Dict, List, Optional

from . import CardStore
from .card_file import CardFileError, export_cards, import_cards
from .config import SessionConfig, parse_args
from .console import Console
from .edit import FlashcardEditor
from .logging_util import set_level, setup_logger
from .quiz import FlashcardQuiz, InvalidCountError

logger = setup_logger(__name__)


class Command(Enum):
    ADD = 'add'
    REMOVE = 'remove'
    IMPORT = 'import'
    EXPORT = 'export'
    ASK = 'ask'
    EXIT = 'exit'
    LOG = 'log'
    HARDEST = 'hardest card'
    RESET = 'reset stats'


MENU_PROMPT = f"Input the action ({', '.join(c.value for c in Command)}):"


class FlashcardSession:
    """Owns the card store and the transcript for one run of the program."""

    def __init__(self, config: Optional[SessionConfig] = None,
                 store: Optional[CardStore] = None,
                 console: Optional[Console] = None):
        self.config = config or SessionConfig()
        self.store = store if store is not None else CardStore()
        self.console = console or Console()
        self.editor = FlashcardEditor(self.store, self.console)
        self.finished = False

        self.actions: Dict[Command, Callable[[], None]] = {
            Command.ADD: self.editor.add_card,
            Command.REMOVE: self.editor.remove_card,
            Command.IMPORT: self.import_action,
            Command.EXPORT: self.export_action,
            Command.ASK: self.ask_action,
            Command.EXIT: self.exit_action,
            Command.LOG: self.log_action,
            Command.HARDEST: self.editor.show_hardest,
            Command.RESET: self.editor.reset_stats,
        }

    def start(self):
        """Load the startup import file, if one was configured."""
        if self.config.import_path:
            count = self._import(self.config.import_path)
            if count is not None:
                self.console.say(f"{count} cards have been loaded.")

    def run(self):
        """Process commands until exit (or end of input)."""
        while not self.finished:
            try:
                line = self.console.ask(MENU_PROMPT)
            except EOFError:
                logger.info("End of input, exiting")
                self.exit_action()
                break
            self.dispatch(line)

    def dispatch(self, line: str) -> bool:
        """Run the action named by line. Returns False for unknown commands."""
        try:
            command = Command(line)
        except ValueError:
            logger.debug(f"Ignoring unknown command {line!r}")
            return False

        try:
            self.actions[command]()
        except EOFError:
            logger.info(f"End of input during {command.value!r}")
            self.exit_action()
        return True

    def _import(self, path: str) -> Optional[int]:
        """Import cards from path; reports failures and returns None for them."""
        try:
            return import_cards(self.store, path)
        except FileNotFoundError:
            logger.warning(f"Card file {path} not found")
            self.console.say("File not found.")
            return 0
        except (OSError, CardFileError) as e:
            self._report_file_error(path, e)
            return None

    def _export(self, path: str) -> Optional[int]:
        try:
            return export_cards(self.store, path)
        except OSError as e:
            self._report_file_error(path, e)
            return None

    def _report_file_error(self, path: str, error: Exception):
        reason = getattr(error, 'strerror', None) or str(error)
        logger.warning(f"File operation on {path} failed: {error}")
        self.console.say(f'Could not access file "{path}": {reason}')

    def import_action(self):
        count = self._import(self.console.ask("File name:"))
        if count:
            self.console.say(f"{count} cards have been loaded.")

    def export_action(self):
        count = self._export(self.console.ask("File name:"))
        if count is not None:
            self.console.say(f"{count} cards have been saved.")

    def ask_action(self):
        quiz = FlashcardQuiz(self.store, self.console)
        try:
            quiz.run()
        except InvalidCountError as e:
            logger.warning(str(e))
            self.console.say(f'Invalid number: "{e.value}".')

    def log_action(self):
        path = self.console.ask("File name:")
        try:
            self.console.transcript.save(path)
        except OSError as e:
            self._report_file_error(path, e)
            return
        self.console.say("The log has been saved.")

    def exit_action(self):
        self.finished = True
        self.console.say("Bye bye!")
        if self.config.export_path:
            count = self._export(self.config.export_path)
            if count is not None:
                self.console.say(f"{count} cards have been saved.")


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_args(argv)
    set_level(config.log_level)
    logger.debug(f"Starting session with {config.to_dict()}")

    session = FlashcardSession(config)
    session.start()
    session.run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
