"""Wikidata query service client.

Runs a SPARQL query against the public endpoint and decodes the
``results.bindings`` rows into office-holder records.
"""

import logging

import requests

from german_chancellors_presidents.config import Config
from german_chancellors_presidents.graph.records import OfficeHolderRecord

logger = logging.getLogger(__name__)


class QueryServiceError(RuntimeError):
    """The query service failed, timed out or returned an unusable body."""


class WikidataClient:
    """Blocking client for the Wikidata SPARQL endpoint.

    One HTTP GET per query, no retries. The session carries the
    User-Agent header the query service requires from bots.
    """

    def __init__(self, config: Config, session: requests.Session | None = None):
        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "User-Agent": config.user_agent,
                "Accept": "application/sparql-results+json",
            }
        )

    def run(self, query: str) -> list[OfficeHolderRecord]:
        """Execute a query and decode its result rows.

        Args:
            query: SPARQL query text.

        Returns:
            One record per result row that has an office holder label.

        Raises:
            QueryServiceError: On connection failure, timeout, non-success
                status or a body that is not a SPARQL JSON result.
        """
        try:
            response = self.session.get(
                self.config.sparql_endpoint,
                params={"query": query, "format": "json"},
                timeout=self.config.query_timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise QueryServiceError(f"Wikidata query failed: {e}") from e

        try:
            bindings = response.json()["results"]["bindings"]
        except (ValueError, KeyError, TypeError) as e:
            raise QueryServiceError(f"Malformed response from query service: {e}") from e
        if not isinstance(bindings, list):
            raise QueryServiceError("Malformed response from query service: bindings is not a list")

        records = []
        for binding in bindings:
            if not isinstance(binding, dict):
                continue
            record = OfficeHolderRecord.from_binding(binding)
            if record is not None:
                records.append(record)

        logger.info(f"Query returned {len(bindings)} rows, {len(records)} usable")
        return records

    def close(self):
        """Close the HTTP session."""
        self.session.close()
