import sys
from typing import Optional

from corefunctions.color_convert import (
    ColorFormatError,
    ColorRangeError,
    Direction,
    convert,
    parse_triple,
)
from corefunctions.messages import DEFAULT_MESSAGES


class ColorShell:
    def __init__(self, input_stream=None, output_stream=None, messages=None, once=False):
        """
        Interactive menu for converting colors

        Args:
            input_stream: Text stream read line by line (defaults to stdin)
            output_stream: Text stream for menu and results (defaults to stdout)
            messages (dict): Message table, see corefunctions.messages
            once (bool): Stop after a single choice/convert cycle
        """
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout
        self.messages = messages if messages is not None else DEFAULT_MESSAGES["en"]
        self.once = once

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def close(self):
        """Release the input stream"""
        if not self.input_stream.closed:
            self.input_stream.close()

    def _print(self, text=""):
        print(text, file=self.output_stream, flush=True)

    def _read_line(self, prompt) -> Optional[str]:
        """Prompt and read one line, None at end of input"""
        self.output_stream.write(prompt)
        self.output_stream.flush()
        line = self.input_stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def show_menu(self):
        m = self.messages
        self._print(m["title"])
        self._print(m["menu_rgb_to_mcf"])
        self._print(m["menu_mcf_to_rgb"])
        self._print(m["exit_hint"])

    def parse_choice(self, line) -> Optional[Direction]:
        try:
            return Direction(line.strip())
        except ValueError:
            return None

    def convert_line(self, direction: Direction, line: str) -> str:
        """Turn one line of color input into the text to show the user"""
        prefix = "rgb" if direction is Direction.RGB_TO_MCF else "mcf"
        try:
            result = convert(direction, parse_triple(line))
        except ColorFormatError:
            return self.messages[f"{prefix}_format_error"]
        except ColorRangeError:
            return self.messages[f"{prefix}_range_error"]

        if direction is Direction.RGB_TO_MCF:
            return self.messages["mcf_result"].format(*result)
        return self.messages["rgb_result"].format(*result)

    def step(self) -> bool:
        """
        Run one menu cycle

        Returns:
            bool: False once the input stream is exhausted
        """
        self.show_menu()
        line = self._read_line(self.messages["choice_prompt"])
        if line is None:
            return False

        direction = self.parse_choice(line)
        if direction is None:
            self._print(self.messages["invalid_choice"])
            return True

        prompt_key = "rgb_prompt" if direction is Direction.RGB_TO_MCF else "mcf_prompt"
        line = self._read_line(self.messages[prompt_key])
        if line is None:
            return False
        self._print(self.convert_line(direction, line))
        return True

    def run(self):
        """Loop over menu cycles until input ends (or after one cycle in once mode)"""
        while self.step():
            if self.once:
                break
