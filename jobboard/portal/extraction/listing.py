"""
Listing table parsing.
Turns the portal's search results table into ListingRecords, one per row.
"""

import logging
from datetime import date, datetime
from typing import List, Optional

from jobboard.core.document import CommentNode, Element, TextNode
from jobboard.core.errors import MalformedRowError
from jobboard.core.models import ListingRecord, WorkStudyStatus
from jobboard.portal.config import LISTING_DATE_FORMAT
from jobboard.portal.layout import (
    LISTING_COLUMNS,
    LISTING_HEADER_ROWS,
    LISTING_MIN_CELLS,
)
from jobboard.portal.utils import parse_hours

logger = logging.getLogger(__name__)


def _read_id(cell: Element, row_index: int) -> str:
    # The id cell holds the number followed by a marker element; only the
    # leading node is the id.
    node = cell.first_child
    if isinstance(node, (TextNode, CommentNode)):
        text = node.text
    elif node is not None:
        text = node.text_content()
    else:
        text = ""

    job_id = text.strip()
    if not job_id:
        raise MalformedRowError("missing job id", row_index)
    return job_id


def _read_date(text: str) -> Optional[date]:
    try:
        return datetime.strptime(text, LISTING_DATE_FORMAT).date()
    except ValueError:
        return None


def _read_work_study(text: str) -> WorkStudyStatus:
    if text.startswith("E"):
        return WorkStudyStatus.EITHER
    if text.startswith(("W", "Y")):
        return WorkStudyStatus.YES
    return WorkStudyStatus.NO


def parse_row(cells: List[Element], row_index: int) -> ListingRecord:
    """
    Build a ListingRecord from the cells of one listing row.
    Raises MalformedRowError when the row is too short or has no id. An
    unreadable date or hours value only leaves that field as None.
    """
    if len(cells) < LISTING_MIN_CELLS:
        raise MalformedRowError(
            f"expected {LISTING_MIN_CELLS} cells, found {len(cells)}", row_index
        )

    def cell_text(field: str) -> str:
        return cells[LISTING_COLUMNS[field]].inner_text()

    job_id = _read_id(cells[LISTING_COLUMNS["id"]], row_index)

    date_str = cell_text("date")
    posted = _read_date(date_str)
    if posted is None:
        logger.warning(f"Job {job_id}: unparseable posting date {date_str!r}")

    on_campus_str = cell_text("on_campus")
    hours_str = cell_text("hours_per_week")
    hours = parse_hours(hours_str)
    if hours is None:
        logger.warning(f"Job {job_id}: unparseable hours per week {hours_str!r}")

    return ListingRecord(
        id=job_id,
        title=cell_text("title"),
        date=posted,
        work_study=_read_work_study(cell_text("work_study")),
        # "On campus" vs "Off campus"
        on_campus=on_campus_str[1:2] == "n",
        hiring_period=cell_text("hiring_period"),
        hours_per_week=hours,
    )


def parse_table(document: Element) -> List[ListingRecord]:
    """
    Parse every data row of the listing table, in document order.

    Any malformed row aborts the whole parse: a row that cannot be read most
    likely means the table layout changed, so no partial listing is returned.
    """
    rows = document.find_all("tr")[LISTING_HEADER_ROWS:]

    records: List[ListingRecord] = []
    for index, row in enumerate(rows, start=1):
        records.append(parse_row(row.element_children, index))

    logger.info(f"Parsed {len(records)} listing rows")
    return records
