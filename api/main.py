"""
PowerScore API — Main Application

POST /validate        — Score one power statement
POST /validate/batch  — Score several statements concurrently
POST /prompts/clean   — Strip preamble and fences from an LLM response
POST /prompts/{kind}  — Build a scoring, critique or rewrite prompt
GET  /lexicon         — Rule-table introspection
GET  /health          — Health check
"""

from __future__ import annotations

import asyncio
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Path as PathParam
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from powerscore.config import Calibration, settings
from powerscore.lexicons import DEFAULT_LEXICON
from powerscore.logging import setup_logging, get_logger
from powerscore.prompts import (
    clean_ai_response,
    generate_critique_prompt,
    generate_rewrite_prompt,
    generate_scoring_prompt,
)
from powerscore.schemas.validate import (
    CleanRequest,
    CleanResponse,
    HealthResponse,
    PromptRequest,
    PromptResponse,
    ValidateBatchRequest,
    ValidateBatchResponse,
    ValidateRequest,
    ValidationResponse,
)
from powerscore.slop import SLOP_RULES
from powerscore.validator import (
    ValidationResult,
    empty_result,
    get_score_color,
    get_score_label,
    resolve_calibration,
    validate_power_statement,
)

logger = get_logger("api")


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and resolve the default profile on startup."""
    setup_logging()
    profile = settings.calibration
    logger.info("PowerScore API starting", extra={"calibration": profile.name})
    yield
    logger.info("PowerScore API shutting down")


app = FastAPI(
    title="PowerScore API",
    description="Deterministic quality scoring for power statements",
    version=f"{settings.VERSION} (ruleset {settings.RULESET_VERSION})",
    lifespan=lifespan,
)

# CORS: set POWERSCORE_CORS_ORIGINS in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    allow_credentials=False,
)


# ============================================================
# GLOBAL ERROR HANDLER
# ============================================================

@app.exception_handler(Exception)
async def global_error_handler(request: Request, exc: Exception):
    """Catch unhandled exceptions and return a structured error without internals."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={"error": str(exc), "path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error. The statement could not be scored."},
    )


# ============================================================
# HELPERS
# ============================================================

def _profile(name: str | None) -> Calibration:
    """Resolve a calibration name, mapping unknown names to HTTP 400."""
    try:
        return resolve_calibration(name)
    except ValueError as e:
        raise HTTPException(400, str(e))


def _render(result: ValidationResult, profile: Calibration) -> dict:
    data = result.to_dict()
    data["color"] = get_score_color(result.total_score)
    data["label"] = get_score_label(result.total_score)
    data["calibration"] = profile.name
    return data


def _validate(item: ValidateRequest, profile: Calibration) -> ValidationResult:
    return validate_power_statement(
        item.text,
        strict=item.strict,
        calibration=profile,
        detect_slop=item.detect_slop,
    )


# ============================================================
# ROUTES
# ============================================================

@app.post("/validate", response_model=ValidationResponse)
async def validate(request: ValidateRequest):
    """Score a single power statement."""
    profile = _profile(request.calibration)
    start = time.time()

    result = _validate(request, profile)

    duration = int((time.time() - start) * 1000)
    logger.info(
        f"Validation complete: score={result.total_score}",
        extra={
            "total_score": result.total_score,
            "calibration": profile.name,
            "word_count": len(request.text.split()),
            "duration_ms": duration,
        },
    )
    return _render(result, profile)


@app.post("/validate/batch", response_model=ValidateBatchResponse)
async def validate_batch(request: ValidateBatchRequest):
    """Score multiple statements concurrently."""
    profiles = [_profile(item.calibration) for item in request.items]

    results = await asyncio.gather(
        *[
            asyncio.to_thread(_validate, item, profile)
            for item, profile in zip(request.items, profiles)
        ],
        return_exceptions=True,
    )

    rendered = []
    for result, profile in zip(results, profiles):
        if isinstance(result, ValidationResult):
            rendered.append(_render(result, profile))
        else:
            logger.warning(
                "Batch item failed",
                extra={"error": str(result), "error_type": type(result).__name__},
            )
            rendered.append(_render(empty_result(), profile))

    logger.info(
        f"Batch complete: {len(rendered)} scored",
        extra={"items": len(request.items)},
    )
    return {"results": rendered, "total": len(request.items)}


@app.post("/prompts/clean", response_model=CleanResponse)
async def clean_prompt_response(request: CleanRequest):
    """Strip a pasted LLM response down to its content."""
    return {"cleaned": clean_ai_response(request.response)}


@app.post("/prompts/{kind}", response_model=PromptResponse)
async def build_prompt(
    request: PromptRequest,
    kind: str = PathParam(..., pattern="^(scoring|critique|rewrite)$"),
):
    """Build a copy/paste prompt for an external LLM."""
    profile = _profile(request.calibration)

    if kind == "scoring":
        prompt = generate_scoring_prompt(request.text, calibration=profile)
    else:
        if request.result is None:
            result = validate_power_statement(request.text, calibration=profile)
        else:
            result = request.result.model_dump(exclude_none=True)
        if kind == "critique":
            prompt = generate_critique_prompt(request.text, result, calibration=profile)
        else:
            prompt = generate_rewrite_prompt(request.text, result, calibration=profile)

    logger.info(f"Prompt built: {kind}", extra={"kind": kind, "calibration": profile.name})
    return {"kind": kind, "prompt": prompt}


@app.get("/lexicon")
async def get_lexicon():
    """Return the active rule tables."""
    def _rules(rules):
        return [
            {"name": r.name, "pattern": r.pattern, "kind": r.kind, "weight": r.weight}
            for r in rules
        ]

    return {
        "ruleset_version": settings.RULESET_VERSION,
        "strong_verbs": len(DEFAULT_LEXICON.strong_verbs),
        "weak_verbs": len(DEFAULT_LEXICON.weak_verbs),
        "weak_openers": list(DEFAULT_LEXICON.weak_openers),
        "filler_rules": _rules(DEFAULT_LEXICON.filler_rules),
        "jargon_rules": _rules(DEFAULT_LEXICON.jargon_rules),
        "slop_rules": _rules(SLOP_RULES),
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check."""
    return {
        "status": "operational",
        "version": settings.VERSION,
        "ruleset_version": settings.RULESET_VERSION,
        "calibration": settings.calibration.name,
        "strict_mode": settings.STRICT_MODE,
        "slop_detection": settings.SLOP_DETECTION,
    }


# --- Security + Version Headers Middleware ---
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    """Add security and version headers to all responses."""
    response = await call_next(request)
    response.headers["X-PowerScore-Version"] = settings.VERSION
    response.headers["X-Ruleset-Version"] = settings.RULESET_VERSION
    response.headers["Strict-Transport-Security"] = "max-age=63072000; includeSubDomains; preload"
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


# --- Body Size Limit Middleware ---
_MAX_BODY_BYTES = 1_048_576  # 1 MB


@app.middleware("http")
async def enforce_body_size_limit(request: Request, call_next):
    """Reject requests exceeding 1MB, by Content-Length or by actual body size."""
    content_length = request.headers.get("content-length")
    if content_length:
        try:
            if int(content_length) > _MAX_BODY_BYTES:
                return JSONResponse(
                    status_code=413,
                    content={"detail": "Request body too large."},
                )
        except ValueError:
            pass  # Malformed content-length; let the framework handle it

    if request.method in ("POST", "PUT", "PATCH"):
        body = await request.body()
        if len(body) > _MAX_BODY_BYTES:
            return JSONResponse(
                status_code=413,
                content={"detail": "Request body too large."},
            )

    return await call_next(request)


# --- Request Logging Middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with method, path, status, duration."""
    path = request.url.path
    if path == "/health":
        return await call_next(request)

    start = time.time()
    response = await call_next(request)
    duration_ms = round((time.time() - start) * 1000, 1)

    logger.info(
        f"{request.method} {path} → {response.status_code} ({duration_ms}ms)",
        extra={
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response
