"""Test batching, joining and failure policy of the aggregator"""

import os
import sys
from datetime import date
from typing import Dict, List

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from jobboard.config.settings import settings
from jobboard.core.aggregator import chunk, fetch_details, load_job_postings
from jobboard.core.errors import GatewayError, MalformedRowError, UpstreamLayoutError
from jobboard.core.models import JobPosting, WorkStudyStatus
from jobboard.gateways.base import JobBoardGateway
from portal_pages import detail_page, listing_page, listing_row


class FakeGateway(JobBoardGateway):
    """In-memory gateway recording every detail batch it is asked for."""

    def __init__(self, listing_html: str = "", pages: Dict[str, str] = None):
        super().__init__(context=None)
        self.listing_html = listing_html
        self.pages = pages or {}
        self.batches: List[List[str]] = []

    async def fetch_listing(self) -> str:
        return self.listing_html

    async def fetch_details(self, job_ids: List[str]) -> Dict[str, str]:
        self.batches.append(list(job_ids))
        return {job_id: self.pages[job_id] for job_id in job_ids if job_id in self.pages}


def test_chunk():
    assert chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert chunk([], 40) == []
    with pytest.raises(ValueError):
        chunk([1], 0)


@pytest.mark.asyncio
async def test_85_ids_make_three_batches():
    job_ids = [str(i) for i in range(85)]
    gateway = FakeGateway(pages={job_id: detail_page() for job_id in job_ids})

    details = await fetch_details(gateway, job_ids)

    assert sorted(len(b) for b in gateway.batches) == [5, 40, 40]
    assert sorted(sum(gateway.batches, [])) == sorted(job_ids)
    assert set(details) == set(job_ids)


@pytest.mark.asyncio
async def test_only_matched_listings_are_emitted():
    gateway = FakeGateway(
        listing_html=listing_page([listing_row("1"), listing_row("2")]),
        pages={"1": detail_page()},
    )

    postings = await load_job_postings(gateway)

    assert [p.id for p in postings] == ["1"]
    posting = postings[0]
    assert isinstance(posting, JobPosting)
    assert posting.title == "Library Aide"
    assert posting.date == date(2024, 1, 15)
    assert posting.work_study == WorkStudyStatus.YES
    assert posting.contact_email == "jsmith@library.umass.edu"
    assert posting.city == "Amherst"


@pytest.mark.asyncio
async def test_listing_order_is_kept():
    ids = ["7", "3", "9", "1"]
    gateway = FakeGateway(
        listing_html=listing_page([listing_row(i) for i in ids]),
        pages={i: detail_page() for i in ids},
    )

    postings = await load_job_postings(gateway, batch_size=3)

    assert [p.id for p in postings] == ids
    assert len(gateway.batches) == 2


@pytest.mark.asyncio
async def test_unparseable_detail_drops_only_that_posting():
    gateway = FakeGateway(
        listing_html=listing_page([listing_row("1"), listing_row("2"), listing_row("3")]),
        pages={
            "1": detail_page(),
            "2": detail_page({2: "$TBD"}),
            "3": detail_page(),
        },
    )

    postings = await load_job_postings(gateway)

    assert [p.id for p in postings] == ["1", "3"]


@pytest.mark.asyncio
async def test_every_detail_failing_is_a_layout_error():
    gateway = FakeGateway(
        listing_html=listing_page([listing_row("1"), listing_row("2")]),
        pages={"1": detail_page(count=10), "2": detail_page(count=10)},
    )

    with pytest.raises(UpstreamLayoutError) as exc:
        await load_job_postings(gateway)
    assert exc.value.failed == 2


@pytest.mark.asyncio
async def test_no_details_fetched_is_not_a_layout_error():
    gateway = FakeGateway(listing_html=listing_page([listing_row("1")]), pages={})
    assert await load_job_postings(gateway) == []


@pytest.mark.asyncio
async def test_malformed_row_aborts_run():
    gateway = FakeGateway(
        listing_html=listing_page([listing_row("1"), listing_row("")]),
        pages={"1": detail_page()},
    )

    with pytest.raises(MalformedRowError):
        await load_job_postings(gateway)
    assert gateway.batches == []


@pytest.mark.asyncio
async def test_gateway_errors_propagate():
    class FailingGateway(FakeGateway):
        async def fetch_details(self, job_ids):
            raise GatewayError("https://proxy.example/", "Unexpected response", status=502)

    gateway = FailingGateway(listing_html=listing_page([listing_row("1")]))

    with pytest.raises(GatewayError):
        await load_job_postings(gateway)


@pytest.mark.asyncio
async def test_posting_serialization():
    gateway = FakeGateway(
        listing_html=listing_page([listing_row("1", hours="12")]),
        pages={"1": detail_page({9: "No web site provided", 17: "---"})},
    )

    posting = (await load_job_postings(gateway))[0]
    data = posting.to_dict()

    assert data["id"] == "1"
    assert data["date"] == "2024-01-15"
    assert data["workStudy"] == "Yes"
    assert data["hoursPerWeek"] == 12
    assert data["hourlyPayRate"] == 15
    assert data["contactEmail"] == "jsmith@library.umass.edu"
    assert "website" not in data
    assert "departmentInfo" not in data


@pytest.mark.asyncio
async def test_default_batch_size_follows_settings(monkeypatch):
    monkeypatch.setattr(settings, "DETAIL_BATCH_SIZE", 2)
    job_ids = ["1", "2", "3"]
    gateway = FakeGateway(pages={job_id: detail_page() for job_id in job_ids})

    await fetch_details(gateway, job_ids)

    assert sorted(len(b) for b in gateway.batches) == [1, 2]


@pytest.mark.asyncio
async def test_undated_posting_is_kept_without_date():
    gateway = FakeGateway(
        listing_html=listing_page([listing_row("1"), listing_row("2", date="TBD")]),
        pages={"1": detail_page(), "2": detail_page()},
    )

    postings = await load_job_postings(gateway)

    assert [p.id for p in postings] == ["1", "2"]
    assert postings[1].date is None
    assert "date" not in postings[1].to_dict()
