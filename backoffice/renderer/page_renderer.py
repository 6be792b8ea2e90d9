"""
HTML rendering of the gateway's results with Jinja2 templates.

Each ``render_*`` method takes the same result objects the JSON endpoints
return, so the UI and the API never disagree about what a page contains.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from jinja2 import Environment, FileSystemLoader, TemplateNotFound

from backoffice.core.exceptions import InternalError
from backoffice.renderer.cells import ValueKind, classify_value
from backoffice.renderer.formatting import format_bytes
from backoffice.renderer.tables import (
    PaginationBar,
    build_dashboard,
    build_search_table,
    build_table,
)
from backoffice.schemas.collections import DatabaseStats
from backoffice.schemas.common import PageRequest, PageResult
from backoffice.schemas.gridfs import FileDescriptor
from backoffice.schemas.search import SearchResult

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates" / "ui"


class RenderError(InternalError):
    """Raised when a UI template cannot be rendered."""


class PageRenderer:
    """Renders UI pages and fragments using a Jinja2 environment."""

    def __init__(self, templates_dir: Path = TEMPLATES_DIR):
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.jinja_env.filters["format_bytes"] = format_bytes
        self.jinja_env.globals["ValueKind"] = ValueKind
        self.jinja_env.globals["classify"] = classify_value

    def _render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Raises:
            RenderError: If the template is missing or fails to render
        """
        try:
            template = self.jinja_env.get_template(template_name)
            return template.render(**context)

        except TemplateNotFound as e:
            logger.error(f"Template not found: {template_name}")
            raise RenderError(f"Template not found: {template_name}") from e
        except Exception as e:
            logger.error(f"Failed to render template {template_name}: {str(e)}")
            raise RenderError(
                f"Failed to render template {template_name}: {str(e)}"
            ) from e

    def render_index(self) -> str:
        return self._render_template("index.html", {})

    def render_dashboard(self, stats: DatabaseStats, bucket_name: str) -> str:
        return self._render_template(
            "dashboard.html", {"dashboard": build_dashboard(stats, bucket_name)}
        )

    def render_collection(
        self, collection_name: str, result: PageResult, request: PageRequest
    ) -> str:
        table = build_table(result.data)
        return self._render_template(
            "collection.html",
            {
                "collection_name": collection_name,
                "table": table,
                "pagination": PaginationBar.from_metadata(result.pagination),
                "request": request,
                "sort_fields": ["_id"] + [c for c in table.columns if c != "_id"],
            },
        )

    def render_document(self, collection_name: str, document: Dict[str, Any]) -> str:
        return self._render_template(
            "document.html",
            {
                "collection_name": collection_name,
                "document_id": document.get("_id"),
                "document_json": json.dumps(document, indent=2, ensure_ascii=False),
            },
        )

    def render_search(self, result: SearchResult) -> str:
        sections = [
            {
                "collection": item.collection,
                "count": item.count,
                "error": item.error,
                "table": build_search_table(item.results),
            }
            for item in result.results
            if item.count > 0 or item.error
        ]
        return self._render_template(
            "search.html", {"query": result.query, "sections": sections}
        )

    def render_files(self, files: List[FileDescriptor], bucket_name: str) -> str:
        return self._render_template(
            "gridfs.html", {"files": files, "bucket_name": bucket_name}
        )
