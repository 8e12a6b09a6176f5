#!/usr/bin/env python3
"""
Batch Result Stores
Injected into the batch runner; populated after each run, read by the caller
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from .models import LookupResult

logger = logging.getLogger(__name__)


class ResultStore:
    """Interface for persisting the latest batch result"""

    def save(self, result: LookupResult):
        raise NotImplementedError

    def load(self) -> Optional[LookupResult]:
        raise NotImplementedError


class InMemoryResultStore(ResultStore):
    def __init__(self):
        self.result: Optional[LookupResult] = None
        self.saves = 0

    def save(self, result: LookupResult):
        self.result = result
        self.saves += 1

    def load(self) -> Optional[LookupResult]:
        return self.result


class JsonFileResultStore(ResultStore):
    """Keeps the last batch result in a JSON file ({"success", "notFound"})"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def save(self, result: LookupResult):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)
        logger.info(f"Saved {len(result.successes)} entries and "
                    f"{len(result.not_found)} misses to {self.path}")

    def load(self) -> Optional[LookupResult]:
        if not self.path.exists():
            return None
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                return LookupResult.from_dict(json.load(f))
        except (OSError, ValueError, KeyError) as e:
            logger.warning(f"Failed to load batch results from {self.path}: {e}")
            return None
