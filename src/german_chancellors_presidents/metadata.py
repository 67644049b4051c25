"""Module metadata and the latest-release lookup on GitHub."""

import json
import logging
import re
import time

import requests

from german_chancellors_presidents import __version__
from german_chancellors_presidents.config import Config

logger = logging.getLogger(__name__)

CUSTOM_TITLE = "German Chancellors Presidents 🇩🇪"
CUSTOM_MODULE = "german-chancellors-presidents"
CUSTOM_AUTHOR = "Hermann Hartenthaler"
CUSTOM_VERSION = __version__

GITHUB_USER = "hartenthaler"
GITHUB_REPO = f"{GITHUB_USER}/{CUSTOM_MODULE}"
GITHUB_API_LATEST_VERSION = f"https://api.github.com/repos/{GITHUB_REPO}/releases/latest"
CUSTOM_WEBSITE = f"https://github.com/{GITHUB_REPO}/"
CUSTOM_LAST = (
    f"https://raw.githubusercontent.com/{GITHUB_USER}/{CUSTOM_MODULE}/master/latest-version.txt"
)

DESCRIPTION = "Historical facts (in German) - Chancellors and Presidents of Germany (since 1949)"

_TAG_NAME_RE = re.compile(r'"tag_name"\s*:\s*"v(\d+\.\d+\.\d+(?:\.\d+)?)"')

_CACHE_FILE = f"{CUSTOM_MODULE}-latest-version.json"


def fetch_latest_version(config: Config) -> str:
    """Ask GitHub for the tag of the latest release.

    Falls back to the installed version when GitHub is unreachable or the
    response carries no version tag.
    """
    try:
        response = requests.get(
            GITHUB_API_LATEST_VERSION,
            timeout=config.version_check_timeout,
            headers={"User-Agent": config.user_agent},
        )
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.warning(f"Latest version check failed: {e}")
        return CUSTOM_VERSION

    match = _TAG_NAME_RE.search(response.text)
    if not match:
        logger.debug("No release tag in GitHub response")
        return CUSTOM_VERSION
    return match.group(1)


def latest_version(config: Config, now: float | None = None) -> str:
    """Latest released version, cached on disk for ``version_cache_ttl`` seconds.

    Args:
        config: Application configuration (cache location, TTL, timeout).
        now: Current UNIX time, for tests.

    Returns:
        Version string such as "2.2.1.0".
    """
    now = time.time() if now is None else now
    path = config.cache_dir / _CACHE_FILE

    if path.exists():
        try:
            cached = json.loads(path.read_text())
            if now - cached["fetched_at"] < config.version_cache_ttl:
                return cached["version"]
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            logger.debug(f"Ignoring unreadable version cache {path}: {e}")

    version = fetch_latest_version(config)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"version": version, "fetched_at": now}, indent=2))
    return version
