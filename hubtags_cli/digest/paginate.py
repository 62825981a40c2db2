"""Walk the paginated tag listing."""

from __future__ import annotations

import logging

from hubtags_cli.digest.normalize import extract_records, has_next, parse_page
from hubtags_cli.digest.records import TagRecord
from hubtags_cli.registry.client import HubClient

logger = logging.getLogger(__name__)


def fetch_records(
    client: HubClient,
    organization: str,
    image: str,
    max_pages: int = 0,
) -> list[TagRecord]:
    """Fetch every page of tags and collect their records.

    Pages are requested in order starting at 1, each at most once. The walk
    stops at the first page whose ``next`` is null, or after *max_pages*
    pages when *max_pages* is not 0.

    Args:
        client: Client used to fetch pages.
        organization: Image namespace.
        image: Image name.
        max_pages: Page cap, 0 for no cap.

    Returns:
        Records from all visited pages, in page order.
    """
    records: list[TagRecord] = []
    page_number = 1

    while True:
        body = client.fetch_tag_page(organization, image, page_number)
        page = parse_page(body)
        records.extend(extract_records(page["results"]))

        if not has_next(page):
            break
        if max_pages and page_number >= max_pages:
            logger.info("Page limit of %d reached", max_pages)
            break
        page_number += 1

    logger.debug(
        "Collected %d records from %d page(s)", len(records), page_number
    )
    return records
