"""Central configuration for the German chancellors and presidents events."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env file from project root
load_dotenv()

RESOURCES_DIR = Path(__file__).parent / "resources"


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


class Config(BaseModel):
    """All configuration for the historic events provider.

    The two stream flags mirror the checkboxes of the host's control panel
    and are both off until the administrator switches a stream on.
    """

    # Input streams
    use_static_dataset: bool = Field(default_factory=lambda: _env_flag("GCP_USE_STATIC"))
    use_live_query: bool = Field(default_factory=lambda: _env_flag("GCP_USE_LIVE"))

    # Static dataset
    static_dataset_path: Path = RESOURCES_DIR / "GermanChancellorsPresidents.csv"
    static_wikipedia_language: str = "de"

    # Wikidata query service
    sparql_endpoint: str = Field(
        default=os.getenv("GCP_SPARQL_ENDPOINT", "https://query.wikidata.org/sparql")
    )
    query_timeout: float = 15.0
    query_workers: int = 3
    user_agent: str = (
        "german-chancellors-presidents/2.2.1.0 "
        "(https://github.com/hartenthaler/german-chancellors-presidents/)"
    )

    # Latest-version check
    cache_dir: Path = Path(os.getenv("GCP_CACHE_DIR", "data/cache"))
    version_cache_ttl: int = 86400
    version_check_timeout: float = 3.0
