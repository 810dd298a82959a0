"""
File-based cache for scraped profiles and their analyses.

Keys follow one scheme per record type:
  "portfolio_<url>"           -> serialized PortfolioProfile
  "portfolio_analysis_<url>"  -> serialized PortfolioAnalysis

There is no TTL and no eviction: entries live until the next scrape of the
same URL overwrites them or the cache is cleared explicitly. Writes are
last-writer-wins with no locking.
"""

import hashlib
import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .logger import get_module_logger
from .schemas import PortfolioAnalysis, PortfolioProfile

logger = get_module_logger("profile_cache")

PROFILE_PREFIX = "portfolio_"
ANALYSIS_PREFIX = "portfolio_analysis_"


def profile_key(url: str) -> str:
    return f"{PROFILE_PREFIX}{url}"


def analysis_key(url: str) -> str:
    return f"{ANALYSIS_PREFIX}{url}"


class ProfileCache:
    """
    JSON key-value store, one file per key.

    Constructed once by the caller and injected into the scraper; nothing in
    the package keeps a global instance.
    """

    def __init__(self, cache_dir: Optional[str] = None):
        """
        Initialize the cache.

        Args:
            cache_dir: Directory to store cache files.
                      Defaults to ./portfolio_cache/
        """
        if cache_dir is None:
            cache_dir = Path.cwd() / "portfolio_cache"

        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"Profile cache initialized at: {self.cache_dir}")

    def _path_for(self, key: str) -> Path:
        """
        File path for a key.

        URLs are not filesystem-safe, so the readable part is sanitized and a
        short hash of the full key keeps distinct URLs apart.
        """
        safe_name = "".join(c if c.isalnum() or c in "-_." else "_" for c in key)[:80]
        digest = hashlib.md5(key.encode("utf-8")).hexdigest()[:12]
        return self.cache_dir / f"{safe_name}-{digest}.json"

    # --- Raw key-value access ---

    def get(self, key: str) -> Optional[dict]:
        """Stored value for ``key``, or None on a miss or unreadable file."""
        cache_file = self._path_for(key)

        if not cache_file.exists():
            logger.debug(f"Cache miss for key: {key}")
            return None

        try:
            data = json.loads(cache_file.read_text(encoding="utf-8"))
            logger.info(f"Cache hit for key: {key}")
            return data["value"]
        except (OSError, ValueError, KeyError) as e:
            logger.warning(f"Failed to load cache entry {key}: {e}")
            return None

    def put(self, key: str, value: dict) -> Path:
        """Store ``value`` under ``key``, replacing any previous entry."""
        cache_file = self._path_for(key)

        cache_data = {
            "key": key,
            "created_at": datetime.now().isoformat(),
            "value": value
        }

        cache_file.write_text(json.dumps(cache_data, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info(f"Cached {key} -> {cache_file}")
        return cache_file

    def exists(self, key: str) -> bool:
        return self._path_for(key).exists()

    def delete(self, key: str) -> bool:
        cache_file = self._path_for(key)

        if cache_file.exists():
            cache_file.unlink()
            logger.info(f"Deleted cache entry: {key}")
            return True
        return False

    def clear(self) -> int:
        """Clear all cache entries. Returns count of deleted files."""
        count = 0
        for cache_file in self.cache_dir.glob("*.json"):
            cache_file.unlink()
            count += 1
        logger.info(f"Cleared {count} cache entries")
        return count

    def list_cached(self) -> list[dict]:
        """List all cache entries (key, timestamp, file)."""
        entries = []
        for cache_file in sorted(self.cache_dir.glob("*.json")):
            try:
                data = json.loads(cache_file.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                logger.warning(f"Skipping unreadable cache file {cache_file.name}: {e}")
                continue
            entries.append({
                "key": data.get("key"),
                "created_at": data.get("created_at"),
                "file": str(cache_file)
            })
        return entries

    # --- Typed access ---

    def put_profile(self, url: str, profile: PortfolioProfile) -> Path:
        return self.put(profile_key(url), profile.model_dump(mode="json", by_alias=True))

    def put_analysis(self, url: str, analysis: PortfolioAnalysis) -> Path:
        return self.put(analysis_key(url), analysis.model_dump(mode="json", by_alias=True))

    def get_profile(self, url: str) -> Optional[PortfolioProfile]:
        data = self.get(profile_key(url))
        if data is None:
            return None
        try:
            return PortfolioProfile.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Discarding invalid cached profile for {url}: {e}")
            return None

    def get_analysis(self, url: str) -> Optional[PortfolioAnalysis]:
        data = self.get(analysis_key(url))
        if data is None:
            return None
        try:
            return PortfolioAnalysis.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Discarding invalid cached analysis for {url}: {e}")
            return None
