import os
import sys

import pytest

# Make src importable
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

# Fixed width per character so label placement is predictable
CHAR_WIDTH = 6.0


class RecordingSurface:
    """Drawing surface that records every call as a tuple."""

    def __init__(self):
        self.calls = []

    def clear(self, width, height):
        self.calls.append(("clear", width, height))

    def set_stroke_style(self, color):
        self.calls.append(("stroke_style", color))

    def set_fill_style(self, color):
        self.calls.append(("fill_style", color))

    def begin_path(self):
        self.calls.append(("begin_path",))

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y))

    def close_path(self):
        self.calls.append(("close_path",))

    def arc(self, x, y, radius, start_angle, end_angle):
        self.calls.append(("arc", x, y, radius, start_angle, end_angle))

    def stroke(self):
        self.calls.append(("stroke",))

    def fill(self):
        self.calls.append(("fill",))

    def fill_text(self, text, x, y):
        self.calls.append(("fill_text", text, x, y))

    def measure_text(self, text):
        return CHAR_WIDTH * len(text)

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def surface():
    return RecordingSurface()
