import json
from pathlib import Path

from src.config.logger_config import logger
from src.docsync.application.contracts import SyncReportRecord
from src.docsync.application.ports import ReportSinkPort
from src.docsync.infrastructure.atomic_file import atomic_write_text


class JsonReportSink(ReportSinkPort):
    def __init__(self, report_path: str | Path) -> None:
        self.report_path = Path(report_path)

    def write_report(self, report: SyncReportRecord) -> None:
        atomic_write_text(
            self.report_path,
            json.dumps(report.to_dict(), ensure_ascii=False, indent=2) + "\n",
        )
        logger.info("Sync report written: report_path={}", str(self.report_path))
