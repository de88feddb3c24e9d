import json
import os
from datetime import datetime, timezone

class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="tm_emulator_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def log(self, entry: dict):
        """Log a single entry to the main run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_run(self, table_path, input_path, mode, machine=None, final_tape=None, error=None):
        """Log the outcome of one simulation; failures also go to the failed-runs log."""
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "table": str(table_path),
            "input": str(input_path),
            "mode": mode,
            "status": machine.status.value if machine is not None else "failed",
            "steps": machine.steps if machine is not None else 0,
            "final_state": machine.current_state if machine is not None else None,
            "final_tape": final_tape,
            "error": str(error) if error is not None else None
        }
        self.log(entry)
        if error is not None:
            self.log_failed([entry])
        return entry

    def log_failed(self, entries: list):
        """Log entries for runs that ended in an error."""
        filename = f"failed_{self.today}.jsonl"
        self._log_to_file(filename, entries)
