from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from ..errors import GenerationNotImplemented

logger = logging.getLogger(__name__)

BUNDLED_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

TEMPLATE_EXTENSIONS: Dict[str, str] = {
    "react": "tsx",
    "vue": "vue",
    "svelte": "svelte",
}


class TemplateProvider:
    """Serves base component code from ``<root>/<framework>/<kind>.<ext>``.

    Plain stylesheets live under ``<root>/css/<kind>.css``. File contents are
    cached per provider, so one provider is meant to be built at startup and
    shared.
    """

    def __init__(self, root: str | Path | None = None) -> None:
        self.root = Path(root) if root else BUNDLED_TEMPLATES_DIR
        self._cache: Dict[Path, Optional[str]] = {}

    def template_path(self, kind: str, framework: str) -> Path | None:
        ext = TEMPLATE_EXTENSIONS.get(framework)
        if ext is None:
            return None
        return self.root / framework / f"{kind}.{ext}"

    def has_template(self, kind: str, framework: str) -> bool:
        path = self.template_path(kind, framework)
        return path is not None and path.is_file()

    def get_template(self, kind: str, framework: str) -> str:
        path = self.template_path(kind, framework)
        text = self._read(path) if path is not None else None
        if text is None:
            raise GenerationNotImplemented(kind, framework)
        return text

    def get_stylesheet(self, kind: str) -> str | None:
        return self._read(self.root / "css" / f"{kind}.css")

    def _read(self, path: Path) -> str | None:
        if path in self._cache:
            return self._cache[path]
        text: Optional[str] = None
        if path.is_file():
            text = path.read_text(encoding="utf-8")
            logger.debug("Loaded template %s", path)
        self._cache[path] = text
        return text
