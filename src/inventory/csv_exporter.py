"""
Collection CSV Exporter

Exports the visible product records of a collection tab to a CSV file
that opens cleanly in Excel.

Format:
- Header row with the configured columns
- Text fields quoted, embedded quotes doubled
- Price amount and available units unquoted
- CRLF line endings
- UTF-8 with byte-order mark (Excel otherwise guesses the code page)
"""

import csv
import io
import logging
import os
from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, List, Optional, Sequence

from ..common.text_utils import safe_filename
from ..models import ProductRecord, StockFilter

logger = logging.getLogger(__name__)

EMPTY_EXPORT_NOTICE = "No products to export"

BOM = "\ufeff"

# Column name -> value extractor. Strings are quoted on output, numbers are not.
COLUMN_VALUES: Dict[str, Callable[[ProductRecord], object]] = {
    'Product Name': lambda record: record.title,
    'Weight': lambda record: record.weight_display,
    'Price': lambda record: record.price.amount,
    'Currency': lambda record: record.price.currency_code,
    'Barcode': lambda record: record.barcode,
    'Available Units': lambda record: record.available_units,
    'Product ID': lambda record: record.id,
    'Image URL': lambda record: record.image or '',
}

DEFAULT_COLUMNS = ['Product Name', 'Weight', 'Price', 'Currency', 'Barcode', 'Available Units']


def export_filename(collection_title: str, stock_filter: StockFilter, day: Optional[date] = None) -> str:
    """
    Build the download name ``<CollectionTitle>_<InStock|SoldOut>_<YYYY-MM-DD>.csv``.

    Args:
        collection_title: Collection title ("Products" if empty)
        stock_filter: Tab being exported
        day: Export date (defaults to today)
    """
    day = day or date.today()
    return f"{safe_filename(collection_title)}_{stock_filter.label}_{day.isoformat()}.csv"


@dataclass
class ExportResult:
    """Outcome of an export: CSV bytes, or a notice when there was nothing to export."""
    content: Optional[bytes]
    row_count: int = 0
    filename: str = ""
    notice: str = ""

    @property
    def ok(self) -> bool:
        return self.content is not None

    def write(self, directory: str) -> str:
        """
        Write the CSV into ``directory``.

        Returns:
            Path of the written file

        Raises:
            ValueError: If the export produced no file
        """
        if not self.ok:
            raise ValueError(self.notice or EMPTY_EXPORT_NOTICE)
        if not self.filename:
            raise ValueError("Export has no file name")

        os.makedirs(directory or '.', exist_ok=True)
        path = os.path.join(directory or '.', self.filename)
        with open(path, 'wb') as f:
            f.write(self.content)
        return path


class CollectionCSVExporter:
    """
    Serializes product records to CSV bytes.

    Usage:
        exporter = CollectionCSVExporter()
        result = exporter.export(records, filename="Summer_InStock_2025-06-01.csv")
        if result.ok:
            result.write("output/exports")
        else:
            print(result.notice)
    """

    def __init__(self, columns: Optional[Sequence[str]] = None, include_bom: bool = True):
        """
        Args:
            columns: Ordered column names (defaults to DEFAULT_COLUMNS)
            include_bom: Prepend a UTF-8 byte-order mark

        Raises:
            ValueError: If a column is unknown or the list is empty
        """
        columns = list(columns) if columns is not None else list(DEFAULT_COLUMNS)
        if not columns:
            raise ValueError("At least one export column is required")
        unknown = [column for column in columns if column not in COLUMN_VALUES]
        if unknown:
            raise ValueError(f"Unknown export columns: {', '.join(unknown)}")

        self.fieldnames = columns
        self.include_bom = include_bom

    def record_to_row(self, record: ProductRecord) -> List[object]:
        return [COLUMN_VALUES[column](record) for column in self.fieldnames]

    def to_text(self, records: Sequence[ProductRecord]) -> str:
        """Render header and rows as CSV text (no BOM)."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator='\r\n')
        writer.writerow(self.fieldnames)
        for record in records:
            writer.writerow(self.record_to_row(record))
        return buffer.getvalue()

    def export(self, records: Sequence[ProductRecord], filename: str = "") -> ExportResult:
        """
        Export records in their given order.

        Args:
            records: Records to export
            filename: Name to attach to the result

        Returns:
            ExportResult with the CSV bytes, or with a notice and no content
            when ``records`` is empty
        """
        records = list(records)
        if not records:
            logger.info("Nothing to export")
            return ExportResult(content=None, filename=filename, notice=EMPTY_EXPORT_NOTICE)

        text = self.to_text(records)
        if self.include_bom:
            text = BOM + text

        logger.info("Exported %d products", len(records))
        return ExportResult(
            content=text.encode('utf-8'),
            row_count=len(records),
            filename=filename,
        )
