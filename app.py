#!/usr/bin/env python3
"""
Markdown Preview FastAPI App
Live HTML preview for line-oriented Markdown, with an editor UI and a JSON API.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, File, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel
import uvicorn

from services import (
    InputTooLargeError,
    MarkdownInputError,
    convert_markdown_to_html,
    decode_markdown_bytes,
    list_block_rules,
    load_settings,
    render_preview,
)

app = FastAPI(
    title="Markdown Preview API",
    description="Convert line-oriented Markdown to HTML fragments",
    version="1.0.0"
)

# Static and template setup
BASE_DIR = Path(__file__).parent
STATIC_DIR = BASE_DIR / "static"
TEMPLATES_DIR = BASE_DIR / "templates"

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Enable CORS so editors hosted elsewhere can call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class RenderRequest(BaseModel):
    markdown: Optional[str] = None


def _input_error_to_http(exc: MarkdownInputError) -> HTTPException:
    if isinstance(exc, InputTooLargeError):
        return HTTPException(status_code=413, detail=exc.message)
    return HTTPException(status_code=400, detail=exc.message)


@app.get("/", response_class=HTMLResponse)
async def root(request: Request):
    """Serve the editor UI."""
    return templates.TemplateResponse(request, "index.html", {"placeholder": load_settings().empty_placeholder})


@app.get("/rules")
async def get_rules():
    """List the block rules in the order they are tried."""
    return {"rules": list_block_rules()}


@app.post("/render")
async def render(payload: RenderRequest):
    """
    Render editor content to HTML.

    Empty content renders as the placeholder fragment.
    """
    try:
        html = render_preview(payload.markdown)
    except MarkdownInputError as exc:
        raise _input_error_to_http(exc) from exc
    return {"html": html}


@app.post("/convert")
async def convert_document(file: UploadFile = File(...)):
    """
    Convert an uploaded Markdown file to HTML.

    Args:
        file: UTF-8 Markdown file

    Returns:
        JSON response with the HTML fragment and block statistics
    """
    original_filename = file.filename or "uploaded.md"
    limit = load_settings().max_input_bytes

    if limit > 0 and file.size is not None and file.size > limit:
        raise HTTPException(
            status_code=413,
            detail=f"Markdown input is {file.size} bytes, limit is {limit}."
        )

    try:
        # never buffer more than one byte past the limit
        content = await file.read(limit + 1 if limit > 0 else -1)
    except Exception as exc:
        raise HTTPException(status_code=500, detail="Failed to read uploaded file") from exc

    try:
        if limit > 0 and len(content) > limit:
            raise InputTooLargeError(f"Markdown input exceeds the limit of {limit} bytes.")
        markdown = decode_markdown_bytes(content)
        outcome = convert_markdown_to_html(markdown, original_filename=original_filename)
    except MarkdownInputError as exc:
        raise _input_error_to_http(exc) from exc
    except Exception as exc:
        logger.exception("Unexpected error during conversion")
        raise HTTPException(status_code=500, detail="Unexpected error during conversion") from exc

    return JSONResponse(content={"success": True, **outcome.as_dict()})


if __name__ == "__main__":
    host = os.environ.get("HOST", "0.0.0.0")
    try:
        port = int(os.environ.get("PORT", "8000"))
    except ValueError:
        port = 8000

    logger.info("Starting Markdown Preview server on http://%s:%s", host, port)
    uvicorn.run(app, host=host, port=port)
