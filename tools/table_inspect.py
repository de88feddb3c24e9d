import argparse

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from simulator.tape import WILDCARD
from tools.table_loader import read_table

console = Console()

MOVE_NAMES = {
    "l": "Left",
    "r": "Right",
    "*": "Stay"
}

def build_rule_table(transitions, title="Transition Table"):
    """Rules in lookup order: states sorted by name, concrete symbols before the wildcard."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Line", justify="right")
    table.add_column("State")
    table.add_column("Read", justify="center")
    table.add_column("Write", justify="center")
    table.add_column("Move", justify="center")
    table.add_column("Next State")

    for rule in transitions.rules:
        read = "any" if rule.in_symbol == WILDCARD else rule.in_symbol
        write = "keep" if rule.out_symbol == WILDCARD else rule.out_symbol
        next_state = "same" if rule.next_state_name == WILDCARD else rule.next_state_name
        table.add_row(str(rule.line), escape(rule.state_name), escape(read), escape(write), MOVE_NAMES[rule.move.value], escape(next_state))
    return table

def unreachable_states(transitions, start_state="0"):
    """States with rules that no rule ever transitions into."""
    targets = {start_state}
    for rule in transitions.rules:
        if rule.next_state_name != WILDCARD:
            targets.add(rule.next_state_name)
    return [state for state in transitions.states if state not in targets]

def main():
    parser = argparse.ArgumentParser(description="Turing Machine Transition Table Inspector")
    parser.add_argument("--table", required=True, help="Transition table file to inspect")
    parser.add_argument("--start_state", default="0", help="Initial state name (default: 0)")
    parser.add_argument("--halt_state", default="halt", help="Halting state name (default: halt)")
    args = parser.parse_args()

    transitions, stopped_at = read_table(args.table)
    if stopped_at is not None:
        console.print(f"[yellow]Stopped reading at malformed line {stopped_at}.[/yellow]")

    console.print(build_rule_table(transitions))
    console.print(f"[INFO] {len(transitions)} rule(s) across {len(transitions.states)} state(s)", markup=False)

    if args.start_state not in transitions:
        console.print(f"[red]No rules for start state '{args.start_state}'.[/red]")
    halt_reachable = any(rule.next_state_name == args.halt_state for rule in transitions.rules)
    if not halt_reachable:
        console.print(f"[yellow]No rule transitions into '{args.halt_state}'; the machine can never halt.[/yellow]")
    for state in unreachable_states(transitions, args.start_state):
        console.print(f"[yellow]State '{state}' is never entered.[/yellow]")

if __name__ == "__main__":
    main()
