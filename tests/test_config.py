"""Tests for runtime configuration and the run logger."""
import json

import pytest

from config.config_loader import DEFAULT_CONFIG, default_config, load_config, validate_config
from logger.logger import JSONLogger
from simulator.errors import ConfigError, NoMatchingRule
from simulator.tape import Tape
from simulator.turing_machine import TuringMachine


class TestConfigLoader:
    """Tests for load_config and validate_config."""

    def test_defaults_valid(self):
        """Test the built-in defaults pass validation."""
        config = default_config()
        assert config["halt_state"] == "halt"
        assert config["max_steps"] == 0

    def test_overrides_merged(self, write_file):
        """Test file values override defaults and the rest are kept."""
        path = write_file("config.json", json.dumps({"halt_state": "STOP", "max_steps": 10}))
        config = load_config(path)
        assert config["halt_state"] == "STOP"
        assert config["max_steps"] == 10
        assert config["blank_symbol"] == DEFAULT_CONFIG["blank_symbol"]

    def test_missing_file(self, tmp_path):
        """Test a missing config file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.json"))

    def test_invalid_json(self, write_file):
        """Test unparsable JSON is a ConfigError."""
        with pytest.raises(ConfigError):
            load_config(write_file("config.json", "{not json"))

    def test_unknown_key(self, write_file):
        """Test unknown keys are rejected."""
        with pytest.raises(ConfigError):
            load_config(write_file("config.json", json.dumps({"tape_size": 512})))

    @pytest.mark.parametrize("key,value", [
        ("max_steps", "10"),
        ("max_steps", True),
        ("max_steps", -1),
        ("max_tape_cells", -5),
        ("blank_symbol", "__"),
        ("blank_symbol", "*"),
        ("halt_state", ""),
        ("start_state", "a b"),
        ("show_head", "yes"),
    ])
    def test_invalid_values(self, key, value):
        """Test wrongly typed or out-of-range values are rejected."""
        config = DEFAULT_CONFIG.copy()
        config[key] = value
        with pytest.raises(ConfigError):
            validate_config(config)

    def test_missing_key(self):
        """Test a config missing a key fails validation."""
        config = DEFAULT_CONFIG.copy()
        del config["halt_state"]
        with pytest.raises(ConfigError):
            validate_config(config)

    def test_summary_printed(self, write_file, console_buffer):
        """Test the loaded values are echoed when a console is given."""
        console, buffer = console_buffer
        load_config(write_file("config.json", "{}"), console=console)
        assert "halt_state: halt" in buffer.getvalue()

    def test_shipped_config_loads(self):
        """Test the sample runtime_config.json is valid."""
        from pathlib import Path
        path = Path(__file__).parent.parent / "config" / "runtime_config.json"
        assert load_config(str(path)) == DEFAULT_CONFIG


class TestJSONLogger:
    """Tests for JSONL run logs."""

    def test_log_successful_run(self, tmp_path, unary_increment_table):
        """Test a halted run is written to the main log only."""
        logger = JSONLogger(str(tmp_path), "runs_")
        machine = TuringMachine(unary_increment_table, Tape.initialize("1"))
        answer = machine.run()
        entry = logger.log_run("table.txt", "input.txt", "release", machine=machine, final_tape=answer)

        lines = (tmp_path / f"runs_{logger.today}.jsonl").read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[0]) == entry
        assert entry["final_state"] == "halt"
        assert not (tmp_path / f"failed_{logger.today}.jsonl").exists()

    def test_log_failed_run(self, tmp_path):
        """Test a failed run is written to both logs."""
        logger = JSONLogger(str(tmp_path), "runs_")
        error = NoMatchingRule("0", "x")
        entry = logger.log_run("table.txt", "input.txt", "debug", error=error)
        assert entry["status"] == "failed"
        assert entry["steps"] == 0
        assert (tmp_path / f"failed_{logger.today}.jsonl").exists()

    def test_entries_appended(self, tmp_path):
        """Test successive entries append to the same file."""
        logger = JSONLogger(str(tmp_path / "nested"), "runs_")
        logger.log({"n": 1})
        logger.log({"n": 2})
        lines = (tmp_path / "nested" / f"runs_{logger.today}.jsonl").read_text(encoding="utf-8").splitlines()
        assert [json.loads(line)["n"] for line in lines] == [1, 2]
