# levelgen/api.py
import logging
import os
import time
import uuid
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .export.level_writer import write_level
from .export.preview import render_preview_png, summarize_level, write_preview_html
from .service.generation import GenerationError, HttpGenerationService, ModelGenerationService
from .service.model_backend import ModelBackend
from .service.synthesis import LevelSynthesisService
from .utils.level_schema import LevelConfig
from .utils.settings import Settings, configure_logging

logger = logging.getLogger(__name__)

class PromptIn(BaseModel):
    prompt: str
    export: Optional[bool] = True

class QuickIn(BaseModel):
    tier: Optional[str] = "medium"
    export: Optional[bool] = True

def _export(level: LevelConfig, output_dir: str) -> dict:
    ts = time.strftime("%Y%m%d_%H%M%S")
    session_id = f"session_{ts}_{uuid.uuid4().hex[:6]}"
    outdir = os.path.join(output_dir, session_id)
    os.makedirs(outdir, exist_ok=True)

    t0 = time.time()
    level_path = write_level(level, outdir)
    png_path = render_preview_png(level, os.path.join(outdir, "preview.png"))
    html_path = write_preview_html(level, outdir)
    logger.info(f"[TIMER] export: {time.time()-t0:.2f}s  session={session_id}")
    return {
        "session": session_id,
        "outputs": {"level_json": level_path, "preview_png": png_path, "preview_html": html_path},
    }

def _result(level: LevelConfig, export: Optional[bool], output_dir: str) -> dict:
    out = {"session": None, "level": level.to_wire(), "summary": summarize_level(level), "outputs": None}
    if export:
        out.update(_export(level, output_dir))
    return out

def create_app(settings: Optional[Settings] = None,
               service: Optional[LevelSynthesisService] = None,
               backend: Optional[ModelBackend] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    backend = backend or ModelBackend(
        api_key=settings.api_key, model=settings.model,
        base_url=settings.model_base_url, timeout=settings.timeout,
    )
    if service is None:
        if settings.service_url:
            generator = HttpGenerationService(settings.service_url, timeout=settings.timeout)
        else:
            generator = ModelGenerationService(backend)
        service = LevelSynthesisService(generator, timeout=settings.timeout)

    app = FastAPI(title="Winter Courier Level Generator")
    app.state.settings = settings
    app.state.synthesis = service
    # the browser game calls in from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["POST", "GET", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.post("/generate-level")
    def generate_level(inp: PromptIn):
        # raw model text, the contract HttpGenerationService consumes
        try:
            text = backend.complete(inp.prompt)
        except GenerationError as e:
            return JSONResponse(status_code=500, content={"success": False, "error": str(e)})
        return {"success": True, "level": text}

    @app.post("/from_prompt")
    def from_prompt(inp: PromptIn):
        level = service.synthesize_from_prompt(inp.prompt)
        if level is None:
            raise HTTPException(status_code=409, detail="level generation already in progress")
        return _result(level, inp.export, settings.output_dir)

    @app.post("/quick")
    def quick(inp: QuickIn):
        level = service.synthesize_quick(inp.tier or "medium")
        return _result(level, inp.export, settings.output_dir)

    @app.get("/levels/current")
    def current_level():
        level = service.current.get()
        return {"level": level.to_wire() if level is not None else None}

    @app.delete("/levels/current")
    def clear_level():
        service.clear_custom_level()
        return {"cleared": True}

    return app

app = create_app()
