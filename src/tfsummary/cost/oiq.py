"""OpenInfraQuote (oiq) cost provider: price sheet cache plus subprocess pricing."""

import gzip
import json
import os
import shutil
import subprocess
import tempfile
import time
import zlib
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence
import requests
from .base import CostProvider
from ..ingest.models import CanonicalRecord
from ..utils.errors import CostProviderError
from ..utils.logging import get_logger

logger = get_logger("cost.oiq")

DEFAULT_PRICES_URL = "https://oiq.terrateam.io/prices.csv.gz"
DEFAULT_SEARCH_PATHS = ["/opt/homebrew/bin/oiq", "/usr/local/bin/oiq"]

INSTALL_HINT = (
    "oiq (OpenInfraQuote) not found. Install it:\n"
    "  macOS:  brew tap terrateamio/openinfraquote && brew install openinfraquote\n"
    "  Linux:  See https://github.com/terrateamio/openinfraquote"
)


class PriceSheetCache:
    """Local copy of the OpenInfraQuote price sheet with time-based staleness."""

    def __init__(
        self,
        cache_dir: str = "~/.tfsummary",
        url: str = DEFAULT_PRICES_URL,
        max_age_hours: float = 24,
        download_timeout: float = 60
    ):
        """
        Initialize the cache.

        Args:
            cache_dir: Directory holding prices.csv (~ is expanded)
            url: Gzipped CSV price sheet URL
            max_age_hours: Age after which the sheet is re-downloaded
            download_timeout: Seconds to wait for the download
        """
        self.cache_dir = Path(os.path.expanduser(str(cache_dir)))
        self.url = url
        self.max_age_seconds = float(max_age_hours) * 3600
        self.download_timeout = download_timeout

    @property
    def path(self) -> Path:
        return self.cache_dir / "prices.csv"

    def is_stale(self) -> bool:
        """True when the sheet is missing or older than max age."""
        if not self.path.exists():
            return True
        age = time.time() - self.path.stat().st_mtime
        return age > self.max_age_seconds

    def download(self) -> Path:
        """
        Download and decompress the price sheet, replacing the cached copy atomically.

        Raises:
            CostProviderError: If the download or decompression fails
        """
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CostProviderError(f"Cannot create price cache directory {self.cache_dir}: {e}")
        logger.info(f"Downloading price sheet from {self.url}")

        try:
            response = requests.get(self.url, stream=True, timeout=self.download_timeout)
        except requests.exceptions.RequestException as e:
            raise CostProviderError(f"Failed to download prices: {e}")

        try:
            if response.status_code != 200:
                raise CostProviderError(f"Failed to download prices: HTTP {response.status_code}")

            try:
                fd, tmp_name = tempfile.mkstemp(dir=self.cache_dir, prefix="prices-", suffix=".csv.tmp")
            except OSError as e:
                raise CostProviderError(f"Failed to store price sheet: {e}")
            try:
                with os.fdopen(fd, 'wb') as out, gzip.GzipFile(fileobj=response.raw) as gz:
                    shutil.copyfileobj(gz, out)
                os.replace(tmp_name, self.path)
            except (OSError, EOFError, zlib.error) as e:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise CostProviderError(f"Failed to store price sheet: {e}")
        finally:
            response.close()

        logger.info(f"Price sheet saved to {self.path}")
        return self.path

    def ensure_fresh(self, force: bool = False) -> Path:
        """
        Return a usable price sheet, downloading it when stale.

        A failed download falls back to a stale cached copy when one exists.

        Raises:
            CostProviderError: If no price sheet is available at all
        """
        if not force and not self.is_stale():
            return self.path

        try:
            return self.download()
        except CostProviderError as e:
            if not self.path.exists():
                raise CostProviderError(f"Cannot download prices and no cached copy exists: {e}")
            logger.warning(f"Using stale price sheet at {self.path}: {e}")
            return self.path


class OpenInfraQuoteProvider(CostProvider):
    """
    Cost provider backed by the OpenInfraQuote CLI.

    Runs `oiq match` against the cached price sheet and then `oiq price`
    for the region, returning oiq's JSON output.
    """

    name = "oiq"

    def __init__(
        self,
        cache: Optional[PriceSheetCache] = None,
        binary: Optional[str] = None,
        search_paths: Optional[List[str]] = None,
        timeout: float = 30
    ):
        self.cache = cache or PriceSheetCache()
        self.binary = binary
        self.search_paths = search_paths if search_paths is not None else list(DEFAULT_SEARCH_PATHS)
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "OpenInfraQuoteProvider":
        """Build the provider from the cost section of the config."""
        cost = config.get("cost", {})
        oiq = cost.get("oiq", {})
        prices = cost.get("prices", {})
        cache = PriceSheetCache(
            cache_dir=prices.get("cache_dir", "~/.tfsummary"),
            url=prices.get("url", DEFAULT_PRICES_URL),
            max_age_hours=prices.get("max_age_hours", 24),
            download_timeout=prices.get("download_timeout_seconds", 60),
        )
        return cls(
            cache=cache,
            binary=oiq.get("binary"),
            search_paths=oiq.get("search_paths"),
            timeout=oiq.get("timeout_seconds", 30),
        )

    def find_binary(self) -> Optional[str]:
        """Locate oiq: configured binary, then PATH, then well-known install paths."""
        if self.binary:
            return self.binary if Path(self.binary).exists() or shutil.which(self.binary) else None

        found = shutil.which("oiq")
        if found:
            return found

        for candidate in self.search_paths:
            if Path(candidate).exists():
                return candidate
        return None

    def is_available(self) -> bool:
        return self.find_binary() is not None

    def _run(self, args: List[str], step: str) -> str:
        try:
            result = subprocess.run(
                args,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=True
            )
        except subprocess.TimeoutExpired:
            raise CostProviderError(f"oiq {step} timed out after {self.timeout}s")
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip() or f"exit code {e.returncode}"
            raise CostProviderError(f"oiq {step} failed: {detail}")
        except OSError as e:
            raise CostProviderError(f"Could not run oiq {step}: {e}")
        return result.stdout

    def estimate(
        self,
        records: Sequence[CanonicalRecord],
        plan_data: Dict[str, Any],
        region: str
    ) -> Any:
        prices_csv = self.cache.ensure_fresh()

        oiq_bin = self.find_binary()
        if not oiq_bin:
            raise CostProviderError(INSTALL_HINT)

        try:
            with tempfile.TemporaryDirectory(prefix="tfsummary-") as tmp_dir:
                plan_path = Path(tmp_dir) / "plan.json"
                match_path = Path(tmp_dir) / "match.json"
                plan_path.write_text(json.dumps(plan_data), encoding='utf-8')

                self._run(
                    [oiq_bin, "match", "--pricesheet", str(prices_csv), "--output", str(match_path), str(plan_path)],
                    "match"
                )
                output = self._run(
                    [oiq_bin, "price", "--input", str(match_path), "--region", region, "--format", "json"],
                    "price"
                )
        except OSError as e:
            raise CostProviderError(f"Could not prepare oiq working files: {e}")

        try:
            cost_data = json.loads(output)
        except json.JSONDecodeError as e:
            raise CostProviderError(f"oiq price returned invalid JSON: {e}")

        logger.debug(f"oiq priced {len(cost_data.get('resources', [])) if isinstance(cost_data, dict) else 0} item(s)")
        return cost_data
