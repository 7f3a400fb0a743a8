"""Inventory CSV — pure rendering of the inventory export document.

Invariants:
    - Header row is exactly INVENTORY_CSV_HEADER, unquoted
    - String cells are quoted, numeric cells are not
    - Available column = quantity - allocated
    - Zero rows -> header line only
"""

import csv
import io
from dataclasses import dataclass

INVENTORY_CSV_HEADER = (
    "SKU", "Name", "Category", "Warehouse", "Zone", "Bin",
    "Quantity", "Allocated", "Available",
)

INVENTORY_CSV_FILENAME = "inventory-report.csv"


@dataclass(frozen=True)
class InventoryCsvRow:
    sku: str
    name: str
    category: str
    warehouse: str
    zone: str
    bin_code: str
    quantity: int
    allocated: int

    def cells(self) -> list:
        return [
            self.sku, self.name, self.category, self.warehouse, self.zone,
            self.bin_code, self.quantity, self.allocated,
            self.quantity - self.allocated,
        ]


def render_inventory_csv(rows: list[InventoryCsvRow]) -> str:
    """Render rows to a CSV document with a trailing newline per line."""
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="\n").writerow(INVENTORY_CSV_HEADER)
    writer = csv.writer(
        buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n",
    )
    for row in rows:
        writer.writerow(row.cells())
    return buffer.getvalue()
