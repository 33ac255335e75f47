"""
Detail page parsing.
Reads a posting's detail page by paragraph position into a DetailRecord.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from jobboard.core.document import Element
from jobboard.core.errors import ParagraphCountError, PayRateError
from jobboard.core.models import DetailRecord
from jobboard.portal.extraction.text import extract_text
from jobboard.portal.layout import (
    DETAIL_MIN_PARAGRAPHS,
    DETAIL_PARAGRAPHS,
    OPTIONAL_SENTINELS,
)
from jobboard.portal.utils import normalize_city, parse_leading_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetailOptions:
    """
    Portal quirks that are handled differently depending on the consumer.
    """

    normalize_city: bool = True
    decode_emails: bool = True


def _optional(field: str, text: str) -> Optional[str]:
    """Map the portal's placeholder text for `field` to None."""
    if text == OPTIONAL_SENTINELS.get(field):
        return None
    return text


def _parse_pay_rate(text: str) -> int:
    # "$15.00" -> 15
    rate = parse_leading_int(text[1:])
    if rate is None:
        raise PayRateError(text)
    return rate


def parse_details(
    document: Element, options: Optional[DetailOptions] = None
) -> DetailRecord:
    """
    Parse one detail page.

    Raises ParagraphCountError if the page is shorter than the paragraph table
    expects, and PayRateError if the pay rate is not a number.
    """
    options = options or DetailOptions()

    paragraphs: List[Element] = document.find_all("p")
    if len(paragraphs) < DETAIL_MIN_PARAGRAPHS:
        raise ParagraphCountError(len(paragraphs), DETAIL_MIN_PARAGRAPHS)

    texts: Dict[str, str] = {
        field: extract_text(paragraphs[index], decode_emails=options.decode_emails)
        for field, index in DETAIL_PARAGRAPHS.items()
    }

    city = _optional("city", texts["city"])
    if city is not None and options.normalize_city:
        city = normalize_city(city)

    return DetailRecord(
        description=texts["description"],
        hourly_pay_rate=_parse_pay_rate(texts["hourly_pay_rate"]),
        on_bus_route=texts["on_bus_route"].startswith("O"),
        how_to_apply=texts["how_to_apply"],
        website=_optional("website", texts["website"]),
        contact=texts["contact"],
        contact_email=texts["contact_email"],
        contact_phone=_optional("contact_phone", texts["contact_phone"]),
        street_address=_optional("street_address", texts["street_address"]),
        city=city,
        state=texts["state"],
        department_info=_optional("department_info", texts["department_info"]),
    )
