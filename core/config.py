#!/usr/bin/env python3
"""
Centralized Configuration Management for Oxford Lookup
Manages the target site, request pacing, HTTP headers and logging settings
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class LookupConfig:
    """Centralized configuration for the dictionary lookup system"""

    # Scraped site
    OXFORD = {
        'base_url': 'https://www.oxfordlearnersdictionaries.com',
        'brand_name': 'Oxford',
        'entry_path': '/definition/english/',
        'search_path': '/search/english/',
        'max_homograph_variants': 8,
        'request_delay_seconds': 1.0,   # politeness pause between batch lines
        'timeout_seconds': 30.0,
    }

    # Browser-like headers to reduce the chance of bot blocking
    HTTP_HEADERS = {
        'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
        'Accept-Language': 'en-US,en;q=0.5',
        'Accept-Encoding': 'gzip, deflate',
        'Connection': 'keep-alive',
        'Upgrade-Insecure-Requests': '1',
    }

    # Batch runner
    BATCH = {
        'max_successes': 50,
        'store_path': None,
    }

    # Logging Configuration
    LOGGING = {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    }

    # Env-var overrides ----------------------------------------------------------
    @classmethod
    def get_base_url(cls) -> str:
        return (os.getenv('OXFORD_BASE_URL') or cls.OXFORD['base_url']).rstrip('/')

    @classmethod
    def get_request_delay(cls) -> float:
        return _float_from_env('OXFORD_REQUEST_DELAY', cls.OXFORD['request_delay_seconds'])

    @classmethod
    def get_timeout(cls) -> float:
        return _float_from_env('OXFORD_TIMEOUT', cls.OXFORD['timeout_seconds'])

    @classmethod
    def get_max_variants(cls) -> int:
        env = os.getenv('OXFORD_MAX_VARIANTS')
        if env:
            try:
                return int(env)
            except ValueError:
                logger.warning(f"Ignoring invalid OXFORD_MAX_VARIANTS={env!r}")
        return int(cls.OXFORD['max_homograph_variants'])

    @classmethod
    def get_store_path(cls) -> Optional[Path]:
        env = os.getenv('OXFORD_STORE_PATH') or cls.BATCH.get('store_path')
        return Path(env) if env else None

    @classmethod
    def get_log_level(cls) -> str:
        return (os.getenv('LOG_LEVEL') or cls.LOGGING['level']).upper()


def _float_from_env(name: str, default: float) -> float:
    env = os.getenv(name)
    if env:
        try:
            return float(env)
        except ValueError:
            logger.warning(f"Ignoring invalid {name}={env!r}")
    return float(default)


@dataclass
class ScraperSettings:
    """Scraper settings with validation"""
    base_url: str = LookupConfig.OXFORD['base_url']
    brand_name: str = LookupConfig.OXFORD['brand_name']
    request_delay: float = LookupConfig.OXFORD['request_delay_seconds']
    timeout: float = LookupConfig.OXFORD['timeout_seconds']
    max_homograph_variants: int = LookupConfig.OXFORD['max_homograph_variants']
    max_successes: int = LookupConfig.BATCH['max_successes']
    headers: Dict[str, str] = field(default_factory=lambda: dict(LookupConfig.HTTP_HEADERS))

    def __post_init__(self):
        """Validate configuration after initialization"""
        if not self.base_url or not self.base_url.startswith(('http://', 'https://')):
            raise ValueError("Base URL must be an absolute http(s) URL")
        self.base_url = self.base_url.rstrip('/')
        if self.request_delay < 0:
            raise ValueError("Request delay cannot be negative")
        if self.timeout <= 0:
            raise ValueError("Timeout must be positive")
        if self.max_homograph_variants < 1:
            raise ValueError("At least one homograph variant must be probed")
        if self.max_successes < 1:
            raise ValueError("Batch success cap must be positive")

    @property
    def entry_base(self) -> str:
        return f"{self.base_url}{LookupConfig.OXFORD['entry_path']}"

    @property
    def search_base(self) -> str:
        return f"{self.base_url}{LookupConfig.OXFORD['search_path']}"


def get_scraper_settings() -> ScraperSettings:
    """Build scraper settings from LookupConfig and environment overrides"""
    return ScraperSettings(
        base_url=LookupConfig.get_base_url(),
        request_delay=LookupConfig.get_request_delay(),
        timeout=LookupConfig.get_timeout(),
        max_homograph_variants=LookupConfig.get_max_variants(),
    )


def setup_logging(level: Optional[str] = None):
    """Configure root logging the same way for every entry point"""
    logging.basicConfig(
        level=(level or LookupConfig.get_log_level()).upper(),
        format=LookupConfig.LOGGING['format'],
    )
