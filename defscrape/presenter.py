"""Turns extraction results into printable text"""

import json
from typing import Iterable, List

from defscrape.matcher import Record
from defscrape.pipeline import ExtractionResult


def format_records(records: Iterable[Record]) -> str:
    """One ``field: value`` line per field, a blank line after each record."""
    lines: List[str] = []
    for record in records:
        for field_name, value in record.items():
            lines.append(f"{field_name}: {value}")
        lines.append("")
    return "\n".join(lines) + ("\n" if lines else "")


def format_text(results: Iterable[ExtractionResult]) -> str:
    parts = []
    for result in results:
        if result.success:
            header = f"# {result.url or 'input'} ({len(result.records)} records, {result.size} bytes)"
            parts.append(f"{header}\n{format_records(result.records)}")
        else:
            parts.append(f"# {result.url}: error: {result.error}\n")
    return "\n".join(parts)


def format_json(results: Iterable[ExtractionResult]) -> str:
    return json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2)


def total(records: Iterable[Record], field_name: str) -> int:
    """Sum an integer field across records, e.g. prices run through ``pence``.

    Missing or non-numeric values count as 0.
    """
    amount = 0
    for record in records:
        try:
            amount += int(record.get(field_name, "0"))
        except ValueError:
            continue
    return amount
