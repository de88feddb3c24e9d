from simulator.tape import Tape
from simulator.transition_table import load_table


def parse_table_records(text):
    """
    Split table source text into (line_number, fields) records.

    Blank lines are skipped. Reading stops at the first line that does not hold
    exactly five fields; returns (records, stopped_at) where stopped_at is that
    line number, or None if the whole source was read.
    """
    records = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        fields = tuple(line.split())
        if not fields:
            continue
        if len(fields) != 5:
            return records, line_number
        records.append((line_number, fields))
    return records, None


def read_table(table_path):
    """Load a transition table file. Returns (TransitionTable, stopped_at)."""
    with open(table_path, "r", encoding="utf-8") as f:
        records, stopped_at = parse_table_records(f.read())
    return load_table(records, numbered=True), stopped_at


def read_tape(input_path, blank="_", max_cells=None):
    with open(input_path, "r", encoding="utf-8", newline="") as f:
        symbols = f.read()
    return Tape.initialize(symbols, blank=blank, max_cells=max_cells)
