import os
from dataclasses import dataclass
from datetime import datetime, timedelta

from docsim.globals import REPORT_TITLE, TIMESTAMP_FORMAT
from docsim.similarity import SimilarityResult


class ReportWriteError(OSError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot write report to {path}: {reason}")
        self.path = path


@dataclass
class ComparisonReport:
    source_path: str
    target_path: str
    started_at: datetime
    finished_at: datetime
    result: SimilarityResult

    @property
    def duration_ms(self) -> int:
        return (self.finished_at - self.started_at) // timedelta(milliseconds=1)

    def render(self, appended: bool = False) -> str:
        lines = []
        # a report added to an existing file gets its own banner
        if appended:
            lines += ["", "=" * 40, REPORT_TITLE, "=" * 40, ""]
        lines += [
            f"Analysis time: {self.started_at.strftime(TIMESTAMP_FORMAT)} - "
            f"{self.finished_at.strftime(TIMESTAMP_FORMAT)}",
            f"Duration: {self.duration_ms} ms",
            f"Source document: {self.source_path}",
            f"Target document: {self.target_path}",
            f"Difference score: {self.result.difference_score}",
            f"Similarity: {self.result.percentage}",
            f"Verdict: {self.result.verdict.label}",
            "-" * 40,
        ]
        return "\n".join(lines) + "\n"

    def write(self, path: str) -> None:
        # append to path, creating parent directories as needed
        try:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            appended = os.path.exists(path)
            with open(path, "a", encoding="utf-8") as f:
                f.write(self.render(appended))
        except OSError as e:
            raise ReportWriteError(path, e.strerror or str(e)) from e

    def summary(self, output_path: str) -> str:
        return (
            f"Analysis complete, results saved to: {output_path}\n"
            f"Similarity: {self.result.percentage}\n"
            f"Processing time: {self.duration_ms} ms"
        )
