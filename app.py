# app.py

import argparse
import sys

from rich.console import Console
from rich.markup import escape

from config.config_loader import default_config, load_config
from logger.logger import JSONLogger
from simulator.debugger import DebugStepper, ReleaseStepper
from simulator.errors import ConfigError, SimulationError, TuringMachineError, UsageError
from simulator.turing_machine import TuringMachine
from tools.table_loader import read_table, read_tape

console = Console()

MODES = {
    "release": "release",
    "r": "release",
    "debug": "debug",
    "d": "debug"
}

# === Argument Parsing ===
class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad invocations as UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)

def build_parser():
    parser = UsageArgumentParser(
        prog="tm-emulator",
        description="Single-tape Turing machine emulator"
    )
    parser.add_argument("table", help="File with the machine's transition table")
    parser.add_argument("input", help="File with the initial tape contents")
    parser.add_argument("mode", choices=sorted(MODES), help="release (print only the answer) or debug (step interactively)")
    parser.add_argument("--config", help="Path to a runtime_config.json overriding the defaults")
    parser.add_argument("--max_steps", type=int, help="Give up after this many steps (0 = never)")
    parser.add_argument("--verbose", action="store_true", help="Print the loaded configuration")
    return parser

def parse_args(argv=None):
    args = build_parser().parse_args(argv)
    args.mode = MODES[args.mode]
    if args.max_steps is not None and args.max_steps < 0:
        raise UsageError("--max_steps must not be negative")
    return args

# === Utilities ===
def load_runtime_config(args, console):
    if args.config:
        config = load_config(args.config, console=console if args.verbose else None)
    else:
        config = default_config(console=console if args.verbose else None)
    if args.max_steps is not None:
        config["max_steps"] = args.max_steps
    return config

def report_error(console, message):
    console.print(f"[red]Error! {escape(str(message))}[/red]")

def print_tape(console, text):
    # Verbatim: no wrapping, markup or emoji codes
    console.out(text, highlight=False)

# === Simulation ===
def simulate(args, config, console, read_command=None):
    """Load the table and tape, run the machine and print the answer. Returns the exit code."""
    run_logger = None
    if config["log_runs"]:
        run_logger = JSONLogger(config["output_directory"], config["log_file_prefix"])

    try:
        table, stopped_at = read_table(args.table)
        tape = read_tape(args.input, blank=config["blank_symbol"], max_cells=config["max_tape_cells"])
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Invalid input file(s): {escape(str(e))}[/red]")
        return 1
    except TuringMachineError as e:
        report_error(console, e)
        if run_logger is not None:
            run_logger.log_run(args.table, args.input, args.mode, error=e)
        return 1

    if stopped_at is not None:
        console.print(f"[yellow]Warning: stopped at malformed line {stopped_at}, {len(table)} rule(s) loaded.[/yellow]")

    machine = TuringMachine(
        table,
        tape,
        start_state=config["start_state"],
        halt_state=config["halt_state"],
        max_steps=config["max_steps"]
    )

    if args.mode == "debug":
        stepper = DebugStepper(console=console, read_command=read_command, show_head=config["show_head"])
    else:
        stepper = ReleaseStepper()

    try:
        answer = machine.run(stepper)
    except SimulationError as e:
        report_error(console, e)
        if run_logger is not None:
            run_logger.log_run(args.table, args.input, args.mode, machine=machine, error=e)
        return 1

    print_tape(console, answer)
    if run_logger is not None:
        run_logger.log_run(args.table, args.input, args.mode, machine=machine, final_tape=answer)
    return 0

def main(argv=None, console=console, read_command=None):
    try:
        args = parse_args(argv)
    except UsageError as e:
        console.print(build_parser().format_usage().rstrip(), markup=False, highlight=False)
        report_error(console, e)
        return 2

    try:
        config = load_runtime_config(args, console)
    except (ConfigError, FileNotFoundError) as e:
        report_error(console, e)
        return 1

    return simulate(args, config, console, read_command=read_command)

if __name__ == "__main__":
    sys.exit(main())
