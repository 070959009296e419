"""Console and tabular views of accepted inventory and rejections."""
from __future__ import annotations

from typing import Sequence

import pandas as pd

from car_inventory.domain.models import InventoryRecord, RejectionRecord

RULE = "-" * 40
INVENTORY_COLUMNS = ["ID", "Model", "Quantity", "Price"]


def _inventory_row(car_id: str, model: str, quantity: str, price: str) -> str:
    return f"{car_id:<12}{model:<15}{quantity:>8}{price:>12}"


def render_inventory_table(records: Sequence[InventoryRecord]) -> str:
    if not records:
        return "No valid records to display"
    lines = [
        "",
        "Car Inventory:",
        RULE,
        _inventory_row("ID", "Model", "Qty", "Price"),
        RULE,
    ]
    for record in records:
        lines.append(_inventory_row(record.id, record.model, str(record.quantity), f"{record.price:.2f}"))
    lines.append(RULE)
    return "\n".join(lines)


def render_rejection_log(lines: Sequence[str] | None) -> str:
    if lines is None:
        return "No invalid records found or error file missing"
    if not lines:
        return "No invalid records found"
    return "\n".join(["", "Invalid Records: ", RULE, *lines, RULE])


def records_to_dataframe(records: Sequence[InventoryRecord]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "ID": r.id,
                "Model": r.model,
                "Quantity": r.quantity,
                "Price": f"{r.price:.2f}",
            }
            for r in records
        ],
        columns=INVENTORY_COLUMNS,
    )


def rejections_to_dataframe(rejections: Sequence[RejectionRecord]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"record": item.text, "reasons": item.reason_text} for item in rejections],
        columns=["record", "reasons"],
    )
