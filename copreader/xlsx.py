"""Utilities for exporting a library to Excel workbooks."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from openpyxl import Workbook  # type: ignore[import-untyped]
from openpyxl.styles import Alignment  # type: ignore[import-untyped]
from openpyxl.utils import get_column_letter  # type: ignore[import-untyped]
from openpyxl.worksheet.table import (  # type: ignore[import-untyped]
    Table,
    TableStyleInfo,
)

from copreader.parser.library import Library

Row = Dict[str, Any]
Sheets = Dict[str, List[Row]]

# Text longer than this is wrapped in a wide column.
LONG_TEXT = 50


def _flatten(library: Library) -> Sheets:
    """Flatten the library tree into one row list per node kind.

    Args:
        library: Parsed library.

    Returns:
        Mapping of sheet names to rows. Sheets without rows are dropped.
    """

    sheets: Sheets = {
        "Category": [],
        "Book": [],
        "Section": [],
        "Part": [],
        "Paragraph": [],
    }

    for cat_pos, category in enumerate(library.categories):
        sheets["Category"].append(
            {
                "category_id": category.category_id,
                "title": category.title,
                "position": cat_pos,
                "books": len(category.books),
            }
        )
        for book_pos, book in enumerate(category.books):
            sheets["Book"].append(
                {
                    "book_id": book.book_id,
                    "title": book.title,
                    "category_id": book.category_id,
                    "position": book_pos,
                    "sections": len(book.sections),
                }
            )
            for sec_pos, section in enumerate(book.sections):
                sheets["Section"].append(
                    {
                        "section_id": section.section_id,
                        "title": section.title,
                        "book_id": section.book_id,
                        "position": sec_pos,
                        "parts": len(section.parts),
                    }
                )
                for part_pos, part in enumerate(section.parts):
                    sheets["Part"].append(
                        {
                            "part_id": part.part_id,
                            "section_id": part.section_id,
                            "part_type": part.part_type,
                            "position": part_pos,
                            "languages": ",".join(
                                lang.value for lang in part.content
                            ),
                        }
                    )
                    for lang, paragraphs in part.content.items():
                        for par_pos, text in enumerate(paragraphs):
                            sheets["Paragraph"].append(
                                {
                                    "part_id": part.part_id,
                                    "language": lang.value,
                                    "position": par_pos,
                                    "text": text,
                                }
                            )

    return {name: rows for name, rows in sheets.items() if rows}


def write_workbook(library: Library, path: Path) -> None:
    """Write the library into an Excel workbook.

    Each node kind gets its own sheet holding a styled table named after
    the sheet.

    Args:
        library: Parsed library.
        path: Destination file path for the workbook.
    """

    data = _flatten(library)

    workbook = Workbook()

    # Remove the default sheet created by openpyxl when present.
    default_sheet = workbook.active
    if default_sheet is not None:
        workbook.remove(default_sheet)

    # An empty library still produces a valid workbook.
    if not data:
        workbook.create_sheet(title="Category").append(
            ["category_id", "title", "position", "books"]
        )

    for sheet_name, rows in data.items():
        ws = workbook.create_sheet(title=sheet_name)

        headers = list(rows[0].keys())
        ws.append(headers)

        long_text_columns: set[int] = set()
        for row in rows:
            values: List[Any] = []
            for idx, header in enumerate(headers):
                cell_value = row.get(header)
                if isinstance(cell_value, str) and len(cell_value) > LONG_TEXT:
                    long_text_columns.add(idx)
                values.append(cell_value)
            ws.append(values)

            # openpyxl treats any string starting with "=" as a formula.
            for cell in ws[ws.max_row]:
                if isinstance(cell.value, str) and cell.value.startswith("="):
                    cell.data_type = "s"

        for col_idx in long_text_columns:
            for col_cells in ws.iter_cols(
                min_col=col_idx + 1,
                max_col=col_idx + 1,
                min_row=1,
                max_row=ws.max_row,
            ):
                for cell in col_cells:
                    cell.alignment = Alignment(wrapText=True)

        for idx, header in enumerate(headers):
            col_letter = get_column_letter(idx + 1)
            if idx in long_text_columns:
                ws.column_dimensions[col_letter].width = 100
            elif header.endswith("_id") or header == "title":
                ws.column_dimensions[col_letter].width = 40
            else:
                ws.column_dimensions[col_letter].width = 12

        end_column = get_column_letter(len(headers))
        end_row = len(rows) + 1
        table = Table(displayName=sheet_name, ref=f"A1:{end_column}{end_row}")

        style = TableStyleInfo(name="TableStyleMedium9", showRowStripes=True)
        table.tableStyleInfo = style

        ws.add_table(table)

    workbook.save(path)
