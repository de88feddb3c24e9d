from enum import Enum

from simulator.debugger import DebugStepper, ReleaseStepper
from simulator.errors import AllocationError, NoMatchingRule, StepLimitExceeded, TapeExhausted
from simulator.tape import WILDCARD

START_STATE = "0"
HALT_STATE = "halt"


class RunStatus(Enum):
    RUNNING = "running"
    HALTED = "halted"
    FAILED = "failed"


class TuringMachine:
    def __init__(self, table, tape, start_state=START_STATE, halt_state=HALT_STATE, max_steps=0):
        self.table = table
        self.tape = tape
        self.start_state = start_state
        self.halt_state = halt_state
        self.max_steps = max_steps
        self.reset()

    def reset(self):
        self.current_state = self.start_state
        self.current_symbol = self.tape.read()
        self.steps = 0
        self.status = RunStatus.RUNNING
        self.last_rule = None

    @property
    def halted(self):
        return self.current_state == self.halt_state

    def find_rule(self, state_name, symbol):
        return self.table.find(state_name, symbol)

    def _fail(self, error):
        self.status = RunStatus.FAILED
        raise error

    def step(self):
        """Apply one transition and return the rule that was used."""
        rule = self.find_rule(self.current_state, self.current_symbol)
        if rule is None:
            self._fail(NoMatchingRule(self.current_state, self.current_symbol))

        self.tape.write(rule.out_symbol)
        try:
            self.tape.move(rule.move)
        except AllocationError as e:
            self.status = RunStatus.FAILED
            raise TapeExhausted(len(self.tape)) from e

        if rule.next_state_name != WILDCARD:
            self.current_state = rule.next_state_name
        self.current_symbol = self.tape.read()
        self.steps += 1
        self.last_rule = rule
        return rule

    def run(self, stepper=None):
        """
        Step until the halting state, calling `stepper` around each step.
        Returns the final tape rendering.
        """
        self.reset()
        if stepper is not None:
            stepper.on_start(self)

        while not self.halted:
            if self.max_steps and self.steps >= self.max_steps:
                self._fail(StepLimitExceeded(self.steps))

            rule = self.step()

            if stepper is not None:
                stepper.after_step(self, rule)

        self.status = RunStatus.HALTED
        return self.tape.render()


def run(table, tape, interactive=False, console=None, read_command=None, show_head=False, **machine_options):
    """Run `table` over `tape`; interactive mode single-steps through the debugger."""
    if interactive:
        stepper = DebugStepper(console=console, read_command=read_command, show_head=show_head)
    else:
        stepper = ReleaseStepper()

    machine = TuringMachine(table, tape, **machine_options)
    return machine.run(stepper)
