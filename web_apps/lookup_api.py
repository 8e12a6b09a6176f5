#!/usr/bin/env python3
"""
FastAPI Oxford Lookup Service
Single-word lookups over HTTP: {"word", "hint"?} -> {"success", "notFound"}
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from core.config import setup_logging
from core.dictionary_lookup import DictionaryLookup
from core.exceptions import MalformedInputError

logger = logging.getLogger(__name__)

app = FastAPI(title="Oxford Lookup", description="Resolve words to Oxford Learner's Dictionary entries")


class LookupRequest(BaseModel):
    word: Optional[str] = None
    hint: Optional[str] = None


def get_lookup() -> DictionaryLookup:
    """One lookup per request so sessions and fetch counters are never shared"""
    return DictionaryLookup()


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/api/oxford")
def oxford_lookup(payload: LookupRequest, lookup: DictionaryLookup = Depends(get_lookup)):
    """Look up one word, trying homograph pages, the bare entry and search"""
    if not payload.word or not payload.word.strip():
        raise HTTPException(status_code=400, detail="Missing required field: word")

    logger.info(f"Oxford lookup request: word={payload.word!r}, hint={payload.hint or 'none'}")
    try:
        return lookup.lookup_payload(payload.word.strip(), payload.hint)
    except MalformedInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Oxford lookup failed for {payload.word!r}")
        return JSONResponse(status_code=500, content={
            "error": "Failed to lookup word",
            "details": str(e),
            "success": [],
            "notFound": [payload.word],
        })


if __name__ == "__main__":
    import uvicorn

    setup_logging()
    uvicorn.run(app, host="0.0.0.0", port=8000)
