from dataclasses import dataclass, field

from simulator.errors import InvalidMoveSymbol, MalformedRecord
from simulator.tape import WILDCARD, Move


@dataclass(frozen=True)
class Rule:
    state_name: str
    in_symbol: str
    out_symbol: str
    move: Move
    next_state_name: str
    line: int = 0

    def describe(self):
        return f"{self.state_name} {self.in_symbol} {self.out_symbol} {self.move.value} {self.next_state_name}"


@dataclass
class RuleGroup:
    """All rules of one state: exact symbol matches first, then the wildcard fallback."""
    exact: dict = field(default_factory=dict)
    wildcard: Rule = None

    def add(self, rule):
        # First record for a given (state, symbol) wins
        if rule.in_symbol == WILDCARD:
            if self.wildcard is None:
                self.wildcard = rule
        else:
            self.exact.setdefault(rule.in_symbol, rule)

    def match(self, symbol):
        rule = self.exact.get(symbol)
        if rule is not None:
            return rule
        return self.wildcard

    def ordered(self):
        rules = list(self.exact.values())
        if self.wildcard is not None:
            rules.append(self.wildcard)
        return rules


class TransitionTable:
    def __init__(self, rules=()):
        self._groups = {}
        for rule in rules:
            self.add(rule)

    def add(self, rule):
        self._groups.setdefault(rule.state_name, RuleGroup()).add(rule)

    def find(self, state_name, symbol):
        group = self._groups.get(state_name)
        if group is None:
            return None
        return group.match(symbol)

    @property
    def states(self):
        return sorted(self._groups)

    @property
    def rules(self):
        """Effective rules, sorted by state name with concrete symbols before the wildcard."""
        ordered = []
        for state_name in self.states:
            ordered.extend(self._groups[state_name].ordered())
        return ordered

    def __len__(self):
        return sum(len(group.ordered()) for group in self._groups.values())

    def __contains__(self, state_name):
        return state_name in self._groups


def parse_rule(record, line=0):
    """Turn a raw (state, in, out, move, next) record into a Rule."""
    if len(record) != 5:
        raise MalformedRecord(line, f"expected 5 fields, got {len(record)}")

    state_name, in_symbol, out_symbol, move_symbol, next_state_name = record

    move = Move.parse(move_symbol)
    if move is None:
        raise InvalidMoveSymbol(line, move_symbol)

    for name, symbol in (("input", in_symbol), ("output", out_symbol)):
        if len(symbol) != 1:
            raise MalformedRecord(line, f"{name} symbol must be a single character, got '{symbol}'")

    return Rule(state_name, in_symbol, out_symbol, move, next_state_name, line)


def load_table(records, numbered=False):
    """
    Build a TransitionTable from raw records.

    records: iterable of 5-tuples, or with numbered=True of (line_number, 5-tuple)
    pairs as produced by tools.table_loader. Loading aborts on the first invalid record.
    """
    if not numbered:
        records = enumerate(records, start=1)

    rules = []
    for line, record in records:
        rules.append(parse_rule(record, line))
    return TransitionTable(rules)


def find_rule(table, state_name, symbol):
    return table.find(state_name, symbol)
