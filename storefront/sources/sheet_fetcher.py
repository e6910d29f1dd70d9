# storefront/sources/sheet_fetcher.py

"""Download published spreadsheet CSVs and parse them into row dicts."""

import asyncio
import csv
import io
import logging

from curl_cffi import requests as curl_requests

from storefront.config.settings import Settings

Row = dict[str, str | None]


class SheetFetchError(Exception):
    """Raised when a sheet cannot be downloaded or parsed."""


def is_blank_row(row: Row) -> bool:
    """Return True when every cell is empty, None or whitespace."""
    for value in row.values():
        if value is None:
            continue
        # csv.DictReader collects overflow cells in a list
        cells = value if isinstance(value, list) else [value]
        if any(str(cell).strip() for cell in cells):
            return False
    return True


def parse_csv(text: str) -> list[Row]:
    """Parse CSV text into records keyed by the header row.

    Blank rows are dropped.  Cells beyond the header width are
    discarded.
    """
    try:
        reader = csv.DictReader(io.StringIO(text))
        rows: list[Row] = []
        for raw in reader:
            if is_blank_row(raw):
                continue
            rows.append(
                {k: v for k, v in raw.items() if k is not None}
            )
    except csv.Error as exc:
        raise SheetFetchError(f"Malformed CSV: {exc}") from exc
    return rows


class SheetFetcher:
    """Fetches a tabular resource over HTTP, one attempt per call."""

    def __init__(self) -> None:
        self.logger = logging.getLogger("storefront.sources")
        self.settings = Settings()
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )

    def _download(self, url: str) -> str:
        """Blocking GET returning the decoded body."""
        try:
            resp = self.session.get(
                url,
                headers=self.settings.DEFAULT_HEADERS,
                timeout=self.settings.REQUEST_TIMEOUT,
            )
        except Exception as exc:
            raise SheetFetchError(
                f"Request to {url} failed: {exc}"
            ) from exc

        if resp.status_code != 200:
            raise SheetFetchError(
                f"HTTP {resp.status_code} from {url}"
            )

        content_type = str(
            resp.headers.get("content-type", "") or ""
        ).lower()
        if "text/html" in content_type:
            # Private or unpublished sheets answer with a sign-in page
            raise SheetFetchError(
                f"Expected CSV from {url}, got HTML "
                "(is the sheet published to the web?)"
            )

        return resp.content.decode("utf-8-sig", errors="replace")

    async def fetch_rows(self, url: str) -> list[Row]:
        """Download *url* and return its non-blank CSV records.

        Raises ``SheetFetchError`` on network, HTTP or parse failure.
        """
        self.logger.debug("Fetching sheet %s", url)
        text = await asyncio.to_thread(self._download, url)
        rows = parse_csv(text)
        self.logger.info("Fetched %d rows from %s", len(rows), url)
        return rows
