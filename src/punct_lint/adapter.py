# SPDX-License-Identifier: Apache-2.0
"""
HTTP adapter for the punctuation scanner.

Lets editors and CI bots check or fix a document body without touching the
filesystem.

Run with: uvicorn punct_lint.adapter:app --host 127.0.0.1 --port 8000

Configuration via environment variables:
    PUNCT_LINT_BIND_HOST - Host to bind to (default: "127.0.0.1")
    PUNCT_LINT_PORT      - Port to bind to (default: 8000)
"""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from pydantic import BaseModel, Field

from punct_lint import __version__
from punct_lint.linter import Coordinate
from punct_lint.punctuation_table import rules_to_dicts
from punct_lint.scanner import apply_fixes, count_by_rule, has_violations, locate_matches

logger = logging.getLogger(__name__)

# ============================================================================
# Configuration from environment
# ============================================================================

# Host binding — default to loopback; set to 0.0.0.0 explicitly if needed
PUNCT_LINT_BIND_HOST = os.environ.get("PUNCT_LINT_BIND_HOST", "127.0.0.1")
PUNCT_LINT_PORT = int(os.environ.get("PUNCT_LINT_PORT", "8000"))

# ============================================================================
# Application setup
# ============================================================================

app = FastAPI(
    title="Punctuation Lint",
    description="Report or fix full-width punctuation in text",
    version=__version__,
)


# ============================================================================
# Request / response models
# ============================================================================


class ContentRequest(BaseModel):
    content: str


class CheckResponse(BaseModel):
    has_violations: bool
    count: int
    by_rule: dict[str, int] = Field(default_factory=dict)
    coordinates: list[Coordinate] = Field(default_factory=list)


class FixResponse(BaseModel):
    content: str
    changed: bool
    fixed_count: int


# ============================================================================
# Routes
# ============================================================================


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/api/info")
async def api_info():
    """Version and the active substitution table."""
    return {"name": "punct-lint", "version": __version__, "rules": rules_to_dicts()}


@app.post("/v1/check", response_model=CheckResponse)
async def check_content(req: ContentRequest) -> CheckResponse:
    if not has_violations(req.content):
        return CheckResponse(has_violations=False, count=0)
    coordinates = [
        Coordinate(line=c.line, column=c.column, char=c.char)
        for c in locate_matches(req.content)
    ]
    by_rule = {name: n for name, n in count_by_rule(req.content).items() if n}
    return CheckResponse(
        has_violations=True,
        count=len(coordinates),
        by_rule=by_rule,
        coordinates=coordinates,
    )


@app.post("/v1/fix", response_model=FixResponse)
async def fix_content(req: ContentRequest) -> FixResponse:
    if not has_violations(req.content):
        return FixResponse(content=req.content, changed=False, fixed_count=0)
    fixed_count = len(locate_matches(req.content))
    fixed = apply_fixes(req.content)
    logger.debug("Fixed %d match(es) in request body", fixed_count)
    return FixResponse(content=fixed, changed=fixed != req.content, fixed_count=fixed_count)


# ============================================================================
# Server Entry Point
# ============================================================================


def main() -> None:
    """Run the adapter server."""
    import uvicorn

    uvicorn.run(
        "punct_lint.adapter:app",
        host=PUNCT_LINT_BIND_HOST,
        port=PUNCT_LINT_PORT,
    )


if __name__ == "__main__":
    main()
