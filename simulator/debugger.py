from enum import Enum

from rich.console import Console

GREETING = (
    "[bold cyan]Hello in debug mode![/bold cyan]\n"
    "Press [bold]'n'[/bold] to go to the next step\n"
    "Press [bold]'c'[/bold] to run the program until the end\n"
)
HINT = "[yellow]Please enter 'n' (next step) or 'c' (go to the end)[/yellow]"


class DebugCommand(Enum):
    NEXT_STEP = "n"
    UNTIL_END = "c"


class ReleaseStepper:
    """Runs silently to completion."""

    def on_start(self, machine):
        pass

    def after_step(self, machine, rule):
        pass


class DebugStepper:
    """
    Interactive stepping: renders the tape before the first step and after each
    single step, printing the rule just applied, then blocks for the next command.
    """

    def __init__(self, console=None, read_command=None, show_head=False):
        self.console = console or Console()
        self.read_command = read_command or self.console.input
        self.show_head = show_head
        self.command = None

    def scan_command(self):
        while True:
            try:
                value = self.read_command("> ")
            except EOFError:
                # Nobody left to answer, finish the run
                return DebugCommand.UNTIL_END

            value = value.strip().lower()
            if value == DebugCommand.NEXT_STEP.value:
                return DebugCommand.NEXT_STEP
            if value == DebugCommand.UNTIL_END.value:
                return DebugCommand.UNTIL_END
            if value:
                self.console.print(HINT)

    def show_tape(self, machine):
        self.console.out(machine.tape.render(), highlight=False)
        if self.show_head:
            self.console.out(machine.tape.visualize(), highlight=False)

    def on_start(self, machine):
        self.console.print(GREETING)
        self.show_tape(machine)
        self.command = self.scan_command()

    def after_step(self, machine, rule):
        if self.command is not DebugCommand.NEXT_STEP:
            return
        self.show_tape(machine)
        self.console.out(f"Last executed state: {rule.describe()}", highlight=False)
        self.command = self.scan_command()
