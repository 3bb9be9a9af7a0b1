from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import io
import logging
from pathlib import Path

import fitz
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from hearing_lists.errors import ArtifactGenerationError
from hearing_lists.rendering.view import ListView
from hearing_lists.settings import DEFAULT_PDF_MAX_SIZE_BYTES

LOGGER = logging.getLogger(__name__)

TEMPLATE_ROOT = Path(__file__).resolve().parents[1] / "templates"
PDF_TEMPLATE_NAME = "list_pdf.html.jinja"
DEFAULT_PAGE_FORMAT = "a4-l"
PAGE_MARGIN_POINTS = 36

PDF_CSS = """
* { font-family: sans-serif; }
h1 { font-size: 16px; }
h2 { font-size: 13px; margin-top: 10px; }
h3 { font-size: 11px; }
p { font-size: 9px; }
table { border-collapse: collapse; }
th { font-size: 8px; font-weight: bold; text-align: left; border: 1px solid #b1b4b6; padding: 2px; }
td { font-size: 8px; border: 1px solid #b1b4b6; padding: 2px; }
"""


@dataclass(frozen=True)
class PdfArtifact:
    content: bytes
    size_bytes: int
    exceeds_max_size: bool


@lru_cache(maxsize=1)
def _template_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEMPLATE_ROOT),
        autoescape=True,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_list_html(view: ListView) -> str:
    template = _template_environment().get_template(PDF_TEMPLATE_NAME)
    return template.render(view=view)


def html_to_pdf(html: str, *, page_format: str = DEFAULT_PAGE_FORMAT) -> bytes:
    try:
        mediabox = fitz.paper_rect(page_format)
    except Exception as exc:
        raise ArtifactGenerationError(f"Unknown PDF page format: {page_format!r}") from exc
    if mediabox.is_empty:
        raise ArtifactGenerationError(f"Unknown PDF page format: {page_format!r}")

    buffer = io.BytesIO()
    try:
        where = mediabox + (PAGE_MARGIN_POINTS, PAGE_MARGIN_POINTS, -PAGE_MARGIN_POINTS, -PAGE_MARGIN_POINTS)
        story = fitz.Story(html=html, user_css=PDF_CSS)
        writer = fitz.DocumentWriter(buffer)
        more = 1
        while more:
            device = writer.begin_page(mediabox)
            more, _ = story.place(where)
            story.draw(device)
            writer.end_page()
        writer.close()
    except Exception as exc:
        raise ArtifactGenerationError(f"PDF generation failed: {exc}") from exc

    payload = buffer.getvalue()
    if not payload.startswith(b"%PDF"):
        raise ArtifactGenerationError("PDF generation produced no PDF content")
    return payload


def generate_list_pdf(view: ListView, *, page_format: str = DEFAULT_PAGE_FORMAT) -> bytes:
    try:
        html = render_list_html(view)
        return html_to_pdf(html, page_format=page_format)
    except ArtifactGenerationError:
        LOGGER.exception("PDF generation failed for list type %s", view.list_type)
        raise
    except Exception as exc:
        LOGGER.exception("PDF template rendering failed for list type %s", view.list_type)
        raise ArtifactGenerationError(f"PDF template rendering failed: {exc}") from exc


def build_pdf_artifact(content: bytes, *, max_size_bytes: int = DEFAULT_PDF_MAX_SIZE_BYTES) -> PdfArtifact:
    size_bytes = len(content)
    return PdfArtifact(
        content=content,
        size_bytes=size_bytes,
        exceeds_max_size=size_bytes > max_size_bytes,
    )


__all__ = [
    "DEFAULT_PAGE_FORMAT",
    "PdfArtifact",
    "build_pdf_artifact",
    "generate_list_pdf",
    "html_to_pdf",
    "render_list_html",
]
