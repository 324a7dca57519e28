"""
FastAPI backend — REST API for the Prompt Optimizer.

Serves:
- POST /analyze           → Prompt quality analysis
- POST /classify          → Category classification
- POST /optimize          → Rewrite a prompt and store it in history
- GET  /history           → Stored optimizations (newest first) and usage
- GET  /history/overview  → History aggregates
- GET  /history/{id}      → A single stored optimization
- GET  /templates         → Starter prompt templates
- WS   /ws/analyze        → Debounced live analysis while typing
- GET  /health            → Health check
"""

import asyncio
import json
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from prompt_optimizer import PromptOptimizer, __version__, config, lexicon
from prompt_optimizer.exceptions import PromptOptimizerError
from prompt_optimizer.models import (
    AnalyzeRequest,
    ClassifyRequest,
    OptimizeRequest,
    PromptTemplate,
)
from prompt_optimizer.scheduling import AnalysisDebouncer, OptimizeGate
from history_reporter.reporter import HistoryReporter
from history_reporter.store import SqliteKeyValueStore

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)

# Shared instances
optimizer = PromptOptimizer()
reporter = HistoryReporter(store=SqliteKeyValueStore())
optimize_gate = OptimizeGate()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize services on startup."""
    await reporter.initialize()
    logger.info("Backend ready")
    yield
    logger.info("Backend shutting down")


app = FastAPI(
    title="Prompt Optimizer",
    version=__version__,
    lifespan=lifespan,
)

# CORS — allow frontend to call from any origin in dev
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PromptOptimizerError)
async def optimizer_error_handler(request: Request, exc: PromptOptimizerError):
    logger.warning("%s on %s: %s", exc.error_code, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# ── Analysis Endpoints ─────────────────────────────────────────


@app.post("/analyze")
async def analyze_prompt(request: AnalyzeRequest):
    """Score a prompt and list its weaknesses and missing elements."""
    record = optimizer.analyze(request.prompt, request.intent)
    return record.model_dump(mode="json")


@app.post("/classify")
async def classify_prompt(request: ClassifyRequest):
    """Assign a category label with confidence."""
    result = optimizer.classify(request.prompt)
    return {"category": result.category, "confidence": result.confidence}


@app.post("/optimize")
async def optimize_prompt(request: OptimizeRequest):
    """
    Rewrite a prompt and record it in history.
    Only one optimization may run per session at a time.
    """
    async with optimize_gate.hold(request.session_id):
        if config.OPTIMIZE_LATENCY_MS > 0:
            await asyncio.sleep(config.OPTIMIZE_LATENCY_MS / 1000)

        outcome = optimizer.optimize(
            request.prompt,
            intent=request.intent,
            platform=request.platform,
            tone=request.tone,
        )
        if not outcome.ok:
            raise HTTPException(status_code=400, detail=outcome.message)

        usage_count = await reporter.report(outcome.record)

    response = outcome.record.model_dump(mode="json")
    response["usage_count"] = usage_count
    return response


# ── History Endpoints ──────────────────────────────────────────


@app.get("/history")
async def get_history():
    """Stored optimizations, newest first, with the usage counter."""
    page = await reporter.get_page()
    return page.model_dump(mode="json")


@app.get("/history/overview")
async def get_history_overview():
    overview = await reporter.get_overview()
    return overview.model_dump(mode="json")


@app.get("/history/{record_id}")
async def get_history_record(record_id: str):
    """Load a stored optimization so the UI can show it again."""
    record = await reporter.get_record(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"No optimization with id {record_id}")
    return record.model_dump(mode="json")


# ── Templates ──────────────────────────────────────────────────


@app.get("/templates")
async def list_templates():
    return {
        "templates": [
            PromptTemplate(**t).model_dump() for t in lexicon.PROMPT_TEMPLATES
        ],
        "intents": [
            {"value": value, "label": label} for value, label in lexicon.INTENT_OPTIONS
        ],
    }


# ── Live analysis ──────────────────────────────────────────────


@app.websocket("/ws/analyze")
async def live_analysis(websocket: WebSocket):
    """
    Accepts {"prompt", "intent"} messages on every edit and answers with
    an analysis of the latest text once edits pause.
    """
    await websocket.accept()

    async def send_record(record):
        await websocket.send_json(record.model_dump(mode="json"))

    debouncer = AnalysisDebouncer(
        send_record, optimizer=optimizer, delay_ms=config.ANALYSIS_DEBOUNCE_MS
    )
    try:
        while True:
            try:
                payload = await websocket.receive_json()
                request = AnalyzeRequest.model_validate(payload)
            except (json.JSONDecodeError, ValidationError) as e:
                await websocket.send_json({"error": "INVALID_REQUEST", "message": str(e)})
                continue
            debouncer.submit(request.prompt, request.intent)
    except WebSocketDisconnect:
        logger.debug("Live analysis client disconnected")
    finally:
        debouncer.cancel()


# ── Health ─────────────────────────────────────────────────────


@app.get("/health")
async def health():
    return {"status": "healthy", "version": __version__}
