"""Output sinks for analyses and rendered reports."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from estate_matcher.models.enums import ReportFormat
from estate_matcher.reports.report import ReportData, generate_csv_report, generate_html_report
from estate_matcher.reports.serialization import to_dict

logger = logging.getLogger(__name__)


class ReportFileSink:
    """Write reports and analysis batches to files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize report file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write report files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._written: list[Path] = []

    def write_report(self, data: ReportData, report_format: ReportFormat = ReportFormat.HTML) -> Path:
        """Render one client/property report and write it to disk.

        Returns
        -------
        Path
            The file written, named ``<client>_<property>.<ext>``.
        """
        stem = f"{_slug(data.client.name or data.client.client_id)}_{_slug(data.property.property_id)}"
        file_path = self.output_dir / f"{stem}.{report_format.value}"

        if report_format == ReportFormat.CSV:
            content = generate_csv_report(data)
        elif report_format == ReportFormat.HTML:
            content = generate_html_report(data)
        else:
            payload = {
                "generated_date": data.generated_date,
                "client": to_dict(data.client),
                "property": to_dict(data.property),
                "analysis": to_dict(data.analysis),
            }
            content = self._dumps(payload)

        file_path.write_text(content, encoding="utf-8")
        self._written.append(file_path)
        logger.info("Wrote %s report to %s", report_format.value, file_path)
        return file_path

    def write_batch(self, entity_type: str, records: list[Any]) -> Path:
        """Write a batch of records (analyses, properties, ...) to a JSON file."""
        file_path = self.output_dir / f"{entity_type}.json"
        data = [to_dict(record) for record in records]
        file_path.write_text(self._dumps(data), encoding="utf-8")
        self._written.append(file_path)
        logger.info("Wrote %d %s records to %s", len(records), entity_type, file_path)
        return file_path

    @property
    def written(self) -> list[Path]:
        return list(self._written)

    def close(self) -> None:
        """Log summary."""
        logger.info("Report files written to %s: %d", self.output_dir, len(self._written))

    def _dumps(self, data: Any) -> str:
        if self.pretty:
            return json.dumps(data, indent=2, ensure_ascii=False, default=str)
        return json.dumps(data, ensure_ascii=False, default=str)


class ConsoleSink:
    """Output records to console (stdout) for debugging."""

    def __init__(self, pretty: bool = True, max_records: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum records to print per batch (None for all).
        """
        self.pretty = pretty
        self.max_records = max_records
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records to console."""
        print(f"\n{'='*60}")
        print(f"Entity: {entity_type} ({len(records)} records)")
        print("=" * 60)

        display_records = records[: self.max_records] if self.max_records else records

        for record in display_records:
            data = to_dict(record)
            if self.pretty:
                print(json.dumps(data, indent=2, ensure_ascii=False, default=str))
            else:
                print(json.dumps(data, ensure_ascii=False, default=str))

        if self.max_records and len(records) > self.max_records:
            print(f"... and {len(records) - self.max_records} more records")

        self._counts[entity_type] = self._counts.get(entity_type, 0) + len(records)

    def close(self) -> None:
        """Print summary and close."""
        print(f"\n{'='*60}")
        print("Console Sink Summary")
        print("=" * 60)
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")


def _slug(text: str) -> str:
    """File-name-safe lower-case token."""
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return slug or "unnamed"
