"""
Console I/O for the interactive session, mirrored into a transcript.
"""

from pathlib import Path
from typing import Callable, List, Optional


class Transcript:
    """Chronological record of every line printed to and read from the user."""

    def __init__(self):
        self.lines: List[str] = []

    def record(self, line: str):
        self.lines.append(str(line))

    def text(self) -> str:
        return ''.join(f'{line}\n' for line in self.lines)

    def save(self, path: str):
        """Write the transcript so far to a file, replacing its contents."""
        Path(path).write_text(self.text(), encoding='utf-8')


class Console:
    """Prints messages and reads answers, recording both in the transcript."""

    def __init__(self, transcript: Optional[Transcript] = None,
                 input_func: Callable[[], str] = input,
                 output_func: Callable[[str], None] = print):
        self.transcript = transcript if transcript is not None else Transcript()
        self._input = input_func
        self._output = output_func

    def say(self, message: str):
        self._output(message)
        self.transcript.record(message)

    def ask(self, prompt: str) -> str:
        """Print a prompt and read one line as the answer.

        Raises EOFError when input is exhausted.
        """
        self.say(prompt)
        answer = self._input()
        self.transcript.record(answer)
        return answer
