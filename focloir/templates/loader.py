"""Template loader with a Jinja2-based layout.

Packaged templates live in ``focloir/templates/markdown``. A directory on
disk may be given instead; templates missing from it fall back to the
packaged ones.

Search order for templates: custom directory -> packaged markdown.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any


def _build_env(loaders: list[Any]) -> Any:
    from jinja2 import ChoiceLoader, Environment  # type: ignore

    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


@lru_cache(maxsize=8)
def _load_environment_cached(template_dir: str | None) -> Any:
    from jinja2 import FileSystemLoader, PackageLoader  # type: ignore

    loaders: list[Any] = []
    if template_dir:
        loaders.append(FileSystemLoader(template_dir))
    loaders.append(PackageLoader("focloir", "templates/markdown"))
    return _build_env(loaders)


def load_environment(template_dir: str | Path | None = None) -> Any:
    """Cached environment wrapper.

    Normalizes filesystem paths to absolute strings so the cache key is stable.

    Raises:
        FileNotFoundError: If ``template_dir`` is given but is not a directory.
    """
    if template_dir:
        p = Path(template_dir)
        if not p.is_dir():
            raise FileNotFoundError(f"Template directory not found: {template_dir}")
        return _load_environment_cached(str(p.resolve()))
    return _load_environment_cached(None)
