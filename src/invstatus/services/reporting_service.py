from __future__ import annotations

import logging
from datetime import datetime

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.table import Table, TableStyleInfo

from invstatus.domain.activity_messages import format_activity_message
from invstatus.domain.stock import format_stock_rolls

log = logging.getLogger(__name__)


class ReportingService:
    def __init__(self, inventory_service, notification_service):
        self.inventory = inventory_service
        self.notifications = notification_service

    def export_status_report_excel(self, path: str) -> None:
        wb = Workbook()

        def number(cell):
            cell.number_format = "#,##0.00"

        def bold_row(ws, r):
            for c in ws[r]:
                c.font = Font(bold=True)

        def set_widths(ws, widths: dict[str, int]):
            for col, w in widths.items():
                ws.column_dimensions[col].width = w

        def add_table(ws, name: str, start_row: int, start_col: int, end_row: int, end_col: int):
            ref = f"{get_column_letter(start_col)}{start_row}:{get_column_letter(end_col)}{end_row}"
            tab = Table(displayName=name, ref=ref)
            tab.tableStyleInfo = TableStyleInfo(
                name="TableStyleMedium9",
                showRowStripes=True,
                showColumnStripes=False,
            )
            ws.add_table(tab)

        products = self.inventory.product_statuses()
        materials = self.inventory.material_health()
        product_summary = self.inventory.product_summary()
        material_summary = self.inventory.material_summary()
        sections = self.notifications.notification_sections()
        activity = self.notifications.activity_sections()

        # -------- 1) Summary --------
        ws = wb.active
        ws.title = "Summary"
        ws["A1"] = "Inventory Status"
        ws["A1"].font = Font(bold=True, size=14)

        ws["A3"] = "Generated"
        ws["B3"] = datetime.now().isoformat(sep=" ", timespec="seconds")

        rows = [
            ("Total products", product_summary["total"]),
            ("Products low on stock", product_summary["low_stock"]),
            ("Products out of stock", product_summary["out_of_stock"]),
            ("Total materials", material_summary["total"]),
            ("Materials low on stock", material_summary["low_stock"]),
            ("Materials out of stock", material_summary["out_of_stock"]),
            ("Materials overstocked", material_summary["overstock"]),
            ("Unread notifications", sum(s.unread_count for s in sections)),
        ]
        for i, (label, val) in enumerate(rows):
            r = 5 + i
            ws[f"A{r}"] = label
            ws[f"B{r}"] = int(val)

        set_widths(ws, {"A": 28, "B": 22})

        # -------- 2) Products --------
        ws2 = wb.create_sheet("Products")
        ws2.append(["Product ID", "Name", "Current Stock", "Min Stock Level", "Stock", "Status"])
        bold_row(ws2, 1)
        for p, status in products:
            ws2.append([
                p.id, p.name,
                float(p.current_stock), float(p.min_stock_level),
                format_stock_rolls(p.current_stock), status.value,
            ])
            number(ws2[f"C{ws2.max_row}"])
            number(ws2[f"D{ws2.max_row}"])

        ws2.freeze_panes = "A2"
        set_widths(ws2, {"A": 14, "B": 34, "C": 14, "D": 16, "E": 14, "F": 14})
        if ws2.max_row >= 2:
            add_table(ws2, "ProductStatus", 1, 1, ws2.max_row, 6)

        # -------- 3) Materials --------
        ws3 = wb.create_sheet("Materials")
        ws3.append([
            "Material ID", "Name", "Unit",
            "Current Stock", "Min Threshold", "Reorder Point", "Max Capacity",
            "Severity", "Message",
        ])
        bold_row(ws3, 1)
        for m, health in materials:
            ws3.append([
                m.id, m.name, m.unit,
                float(m.current_stock), float(m.min_threshold),
                float(m.reorder_point), float(m.max_capacity),
                health.severity.value, health.message,
            ])
            for col in "DEFG":
                number(ws3[f"{col}{ws3.max_row}"])

        ws3.freeze_panes = "A2"
        set_widths(ws3, {
            "A": 14, "B": 30, "C": 8,
            "D": 14, "E": 14, "F": 14, "G": 14,
            "H": 10, "I": 40,
        })
        if ws3.max_row >= 2:
            add_table(ws3, "MaterialHealth", 1, 1, ws3.max_row, 9)

        # -------- 4) Notifications / Activity --------
        headers = ["Section", "Notification ID", "Type", "Module", "Status", "Title", "Created At"]
        widths = {"A": 22, "B": 16, "C": 18, "D": 14, "E": 10, "F": 40, "G": 22}

        wsn = wb.create_sheet("Notifications")
        wsn.append(headers)
        bold_row(wsn, 1)
        for section in sections:
            for n in section.notifications:
                wsn.append([section.title, n.id, n.type, n.module, n.status, n.title, n.created_at])
        wsn.freeze_panes = "A2"
        set_widths(wsn, widths)
        if wsn.max_row >= 2:
            add_table(wsn, "NotificationSections", 1, 1, wsn.max_row, len(headers))

        wsa = wb.create_sheet("Activity")
        wsa.append(headers + ["Message"])
        bold_row(wsa, 1)
        for section in activity:
            for n in section.notifications:
                wsa.append([
                    section.title, n.id, n.type, n.module, n.status, n.title, n.created_at,
                    format_activity_message(n),
                ])
        wsa.freeze_panes = "A2"
        set_widths(wsa, {**widths, "H": 60})
        if wsa.max_row >= 2:
            add_table(wsa, "ActivitySections", 1, 1, wsa.max_row, len(headers) + 1)

        wb.save(path)
        log.info("status_report_exported path=%s products=%s materials=%s", path, len(products), len(materials))
