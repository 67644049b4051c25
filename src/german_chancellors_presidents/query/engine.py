"""Historic events aggregation.

Combines the two independent event streams: rows of the bundled CSV file
and office holders fetched live from Wikidata. The streams are only
concatenated, never matched against each other.
"""

import csv
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date

from german_chancellors_presidents.config import Config
from german_chancellors_presidents.graph.dedup import deduplicate
from german_chancellors_presidents.graph.records import OFFICES, OfficeDescriptor
from german_chancellors_presidents.i18n import short_language
from german_chancellors_presidents.output.dates import MalformedDateError
from german_chancellors_presidents.output.timeline import format_office_holder, format_static_row
from german_chancellors_presidents.query.client import QueryServiceError, WikidataClient
from german_chancellors_presidents.query.sparql import build_query
from german_chancellors_presidents.static.loader import load_static_rows

logger = logging.getLogger(__name__)


class HistoricEventsAggregator:
    """Produces the event records handed to the host.

    Every failure below the aggregator is contained: an office whose query
    fails contributes nothing, a record with a broken date is skipped, and
    the host always receives a (possibly partial) list.
    """

    def __init__(
        self,
        config: Config,
        client: WikidataClient | None = None,
        today: date | None = None,
        offices: tuple[OfficeDescriptor, ...] = OFFICES,
    ):
        self.config = config
        self.client = client or WikidataClient(config)
        self.today = today
        self.offices = offices

    def historic_events_all(self, language_tag: str) -> list[str]:
        """All events of the enabled streams, static rows first.

        Args:
            language_tag: Language of the viewer, e.g. "de" or "en-GB".

        Returns:
            Event record strings.
        """
        events: list[str] = []
        if self.config.use_static_dataset:
            events.extend(self.static_events(language_tag))
        if self.config.use_live_query:
            events.extend(self.live_events(language_tag))
        return events

    def static_events(self, language_tag: str) -> list[str]:
        """Event records for the rows of the static dataset."""
        try:
            rows = load_static_rows(self.config.static_dataset_path)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            logger.warning(f"Static dataset unavailable: {e}")
            return []
        return [
            format_static_row(row, language_tag, self.config.static_wikipedia_language)
            for row in rows
        ]

    def live_events(self, language_tag: str) -> list[str]:
        """Event records for the office holders of all tracked offices.

        Offices are queried in parallel when ``query_workers`` > 1; the
        result keeps the fixed office order either way.
        """
        language = short_language(language_tag)
        workers = max(1, min(self.config.query_workers, len(self.offices)))

        if workers == 1:
            per_office = [self.office_events(office, language) for office in self.offices]
        else:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                per_office = list(
                    pool.map(lambda office: self.office_events(office, language), self.offices)
                )

        return [event for events in per_office for event in events]

    def office_events(self, office: OfficeDescriptor, language: str) -> list[str]:
        """Query, deduplicate and format the holders of a single office."""
        try:
            records = self.client.run(build_query(office, language))
        except QueryServiceError as e:
            logger.warning(f"Skipping {office.label}: {e}")
            return []

        events = []
        for record in deduplicate(records, today=self.today):
            try:
                events.append(format_office_holder(record, office, language))
            except MalformedDateError as e:
                logger.warning(f"Skipping {record.label} ({office.label}): {e}")

        logger.info(f"{office.label}: {len(events)} events from {len(records)} rows")
        return events

    def close(self):
        """Release the query client."""
        self.client.close()
