"""Test fixtures for the Turing machine emulator test suite."""
import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from simulator.transition_table import load_table


@pytest.fixture
def unary_increment_table():
    """Scenario A table: append a 1 to a unary number."""
    return load_table([
        ("0", "1", "1", "r", "0"),
        ("0", "_", "1", "*", "halt"),
    ])


@pytest.fixture
def console_buffer():
    """A rich console writing into a StringIO, returned with its buffer."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None, force_terminal=False)
    return console, buffer


@pytest.fixture
def scripted_commands():
    """Build a debug command reader that replays the given inputs, then hits EOF."""
    def build(*commands):
        pending = list(commands)

        def read_command(prompt=""):
            if not pending:
                raise EOFError
            return pending.pop(0)

        return read_command

    return build


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path as a string."""
    def write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return write
