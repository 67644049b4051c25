"""SPARQL query construction for office holders.

One query per office. The office item is linked to each holder by an
officeholder statement whose qualifiers carry the acting interval.
"""

import logging

from german_chancellors_presidents.graph.records import OfficeDescriptor

logger = logging.getLogger(__name__)

QUERY_TEMPLATE = """\
SELECT ?officeHolderLabel ?startActingDate ?endActingDate ?birthDate ?deathDate
       ?partyShortLabel ?startPartyDate ?article
WHERE {{
  wd:{entity_id} p:{linking_property} ?statement .
  ?statement ps:{linking_property} ?officeHolder .
  OPTIONAL {{ ?statement pq:P580 ?startActingDate . }}
  OPTIONAL {{ ?statement pq:P582 ?endActingDate . }}
  OPTIONAL {{ ?officeHolder wdt:P569 ?birthDate . }}
  OPTIONAL {{ ?officeHolder wdt:P570 ?deathDate . }}
  OPTIONAL {{
    ?officeHolder p:P102 ?partyStatement .
    ?partyStatement ps:P102 ?party .
    OPTIONAL {{ ?partyStatement pq:P580 ?startPartyDate . }}
    OPTIONAL {{
      ?party wdt:P1813 ?partyShortLabel .
      FILTER(LANG(?partyShortLabel) = "de")
    }}
  }}
  OPTIONAL {{
    ?articleLocal schema:about ?officeHolder ;
                  schema:inLanguage "{language}" .
  }}
  OPTIONAL {{
    ?articleEnglish schema:about ?officeHolder ;
                    schema:inLanguage "en" .
  }}
  BIND(COALESCE(?articleLocal, ?articleEnglish) AS ?article)
  SERVICE wikibase:label {{ bd:serviceParam wikibase:language "{language},en". }}
}}
ORDER BY DESC(?officeHolderLabel) DESC(?startPartyDate)
"""


def build_query(office: OfficeDescriptor, language: str) -> str:
    """Build the office-holder query for one office.

    Args:
        office: Office to query.
        language: Two-letter code of the preferred article language; English
            articles are used where none exists in this language.

    Returns:
        SPARQL query text.
    """
    query = QUERY_TEMPLATE.format(
        entity_id=office.entity_id,
        linking_property=office.linking_property,
        language=language,
    )
    logger.debug(f"Built query for {office.entity_id} ({language})")
    return query
