import argparse
import logging
from dataclasses import dataclass
from typing import List, Optional

from .logging_util import default_level


@dataclass
class SessionConfig:
    """Startup settings of a flashcard session"""
    import_path: Optional[str] = None  # Loaded before the first command
    export_path: Optional[str] = None  # Written on exit
    log_level: int = logging.WARNING

    def to_dict(self) -> dict:
        return {
            'import_path': self.import_path,
            'export_path': self.export_path,
            'log_level': logging.getLevelName(self.log_level)
        }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='flashcards',
        description='Learn term/definition flashcards in the terminal.'
    )
    parser.add_argument('-import', '--import', dest='import_path', metavar='FILE',
                        help='load cards from FILE at startup')
    parser.add_argument('-export', '--export', dest='export_path', metavar='FILE',
                        help='save cards to FILE on exit')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log debug messages to stderr')
    return parser


def parse_args(argv: Optional[List[str]] = None) -> SessionConfig:
    """Build the session config from command line arguments.

    Unrecognised arguments are ignored.
    """
    args, _ = build_parser().parse_known_args(argv)
    level = logging.DEBUG if args.verbose else default_level()
    return SessionConfig(
        import_path=args.import_path or None,
        export_path=args.export_path or None,
        log_level=level
    )
