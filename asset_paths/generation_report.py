"""JSON report describing one generator run."""

import json
import time
from typing import Any

from asset_paths.resolution_result import ResolutionResult


class GenerationReport:
    """Collects resolved accessors and diagnostics and writes them as JSON."""

    def __init__(self, config_hash: str, type_name: str) -> None:
        """Initialize an empty report for the given configuration."""
        self.config_hash = config_hash
        self.type_name = type_name
        self.result = ResolutionResult()
        self.start_time = time.time()

    def add_result(self, result: ResolutionResult) -> None:
        """Record the accessors and diagnostics of a resolution."""
        self.result.accessors.extend(result.accessors)
        self.result.diagnostics.extend(result.diagnostics)

    def generate_report(self, path: str) -> None:
        """Write the report to ``path``."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "type_name": self.type_name,
                "total_accessors": len(self.result.accessors),
                "total_diagnostics": len(self.result.diagnostics),
            },
            "accessors": [
                {
                    "name": a.name,
                    "path": a.path,
                    "source_path": a.source_path,
                    "level": a.level,
                }
                for a in self.result.accessors
            ],
            "diagnostics": [
                {
                    "code": d.code,
                    "path": d.path,
                    "identifier": d.identifier,
                    "message": d.message,
                }
                for d in self.result.diagnostics
            ],
            "stats": self._compute_stats(),
        }

        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)

    def _compute_stats(self) -> dict[str, Any]:
        level_counts: dict[str, int] = {}
        for a in self.result.accessors:
            key = str(a.level)
            level_counts[key] = level_counts.get(key, 0) + 1
        code_counts: dict[str, int] = {}
        for d in self.result.diagnostics:
            code_counts[d.code] = code_counts.get(d.code, 0) + 1
        return {"level_counts": level_counts, "diagnostic_counts": code_counts}
