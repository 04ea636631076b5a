"""FastAPI web service for Markdown to inao conversion.

Endpoints::

    POST /convert       Upload a .md file and receive the .txt markup back.
    POST /convert/text  Send raw Markdown text, receive markup and warnings.
    GET  /health        Health check.
    GET  /presets       List available presets.

Run::

    uvicorn md2inao.server:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import warnings
from typing import Any
from urllib.parse import quote

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from md2inao import __version__
from md2inao.config import PRESETS
from md2inao.converter import Converter
from md2inao.exceptions import ConfigError, LineLengthWarning

app = FastAPI(
    title="md2inao",
    description="Markdown to inao markup conversion service",
    version=__version__,
)

INAO_MEDIA_TYPE = "text/plain; charset=utf-8"


def _content_disposition(filename: str) -> str:
    """Build Content-Disposition header, RFC 5987 for non-ASCII names."""
    try:
        filename.encode("ascii")
        return f'attachment; filename="{filename}"'
    except UnicodeEncodeError:
        encoded = quote(filename)
        return f"attachment; filename*=UTF-8''{encoded}"


def _convert(markdown_text: str, preset: str) -> tuple[str, list[LineLengthWarning]]:
    try:
        converter = Converter(preset=preset)
    except ConfigError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", LineLengthWarning)
        inao = converter.convert_text(markdown_text)
    too_wide = [w.message for w in caught if isinstance(w.message, LineLengthWarning)]
    return inao, too_wide


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@app.get("/presets")
async def list_presets() -> dict[str, list[str]]:
    """List available presets."""
    return {"presets": PRESETS}


@app.post("/convert")
async def convert_file(
    file: UploadFile = File(...),
    preset: str = Form("webdb"),
    encoding: str = Form("utf-8"),
) -> Response:
    """Upload a Markdown file and receive inao markup back.

    - **file**: Markdown file (.md)
    - **preset**: Preset name (webdb, book)
    - **encoding**: Source file encoding
    """
    raw = await file.read()
    try:
        md_text = raw.decode(encoding)
    except (LookupError, UnicodeDecodeError) as exc:
        raise HTTPException(status_code=400, detail=f"Cannot decode upload: {exc}") from exc

    inao, too_wide = _convert(md_text, preset)

    filename = (file.filename or "document.md").rsplit(".", 1)[0] + ".txt"

    return Response(
        content=inao.encode("utf-8"),
        media_type=INAO_MEDIA_TYPE,
        headers={
            "Content-Disposition": _content_disposition(filename),
            "X-Inao-Warnings": str(len(too_wide)),
        },
    )


@app.post("/convert/text")
async def convert_text(
    markdown: str = Form(...),
    preset: str = Form("webdb"),
) -> dict[str, Any]:
    """Send raw Markdown text and receive inao markup with width warnings.

    - **markdown**: Markdown source text
    - **preset**: Preset name
    """
    inao, too_wide = _convert(markdown, preset)
    return {
        "inao": inao,
        "warnings": [
            {"kind": w.kind, "width": w.width, "limit": w.limit} for w in too_wide
        ],
    }
