class TuringMachineError(Exception):
    """Base class for everything the emulator reports to the operator."""


class UsageError(TuringMachineError):
    pass


class ConfigError(TuringMachineError, ValueError):
    pass


# === Table loading ===
class TableError(TuringMachineError):
    pass


class InvalidMoveSymbol(TableError):
    def __init__(self, line, move):
        self.line = line
        self.move = move
        super().__init__(f"Line {line}: moving symbols are only 'l', 'r' and '*', got '{move}'")


class MalformedRecord(TableError):
    def __init__(self, line, reason):
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line}: {reason}")


# === Tape ===
class AllocationError(TuringMachineError):
    pass


# === Simulation ===
class SimulationError(TuringMachineError):
    pass


class NoMatchingRule(SimulationError):
    def __init__(self, state_name, symbol):
        self.state_name = state_name
        self.symbol = symbol
        super().__init__(f"There is no state {state_name} with symbol {symbol}")


class TapeExhausted(SimulationError):
    def __init__(self, cells):
        self.cells = cells
        super().__init__(
            f"Allocation failure after {cells:,} cells! "
            "Most likely the Turing machine went into an infinite loop!"
        )


class StepLimitExceeded(SimulationError):
    def __init__(self, steps):
        self.steps = steps
        super().__init__(f"Machine did not halt within {steps:,} steps")
