"""Fixture loading.

Fixtures are JSON documents addressed by a logical path relative to a
fixtures root, e.g. ``fixtures/caliperEventBasicModifiedExtended.json``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Union

from .compare import CompareMode, JsonCompareResult, assert_json_equals
from .config import load_config
from .exceptions import FixtureFormatError, FixtureNotFoundError
from .logging_config import get_logger

logger = get_logger(__name__)


def resolve_fixture(path: Union[str, Path], root: Optional[Union[str, Path]] = None) -> Path:
    """Resolve a logical fixture path beneath ``root``.

    ``root`` defaults to the configured ``fixtures_root``.

    Raises:
        FixtureNotFoundError: If the file is missing or lies outside the root
    """
    base = Path(root) if root is not None else load_config().fixtures_path
    base = base.resolve()
    full = (base / path).resolve()
    try:
        full.relative_to(base)
    except ValueError:
        raise FixtureNotFoundError(Path(path), reason=f"outside fixtures root {base}") from None
    if not full.is_file():
        raise FixtureNotFoundError(full)
    return full


def load_fixture(path: Union[str, Path], root: Optional[Union[str, Path]] = None) -> Any:
    """Read and parse a JSON fixture."""
    full = resolve_fixture(path, root)
    logger.debug("Loading fixture %s", full)
    try:
        return json.loads(full.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise FixtureFormatError(full, reason=str(e)) from e


def json_fixture(path: Union[str, Path], root: Optional[Union[str, Path]] = None) -> str:
    """Return a JSON fixture as normalized compact text."""
    return json.dumps(load_fixture(path, root), ensure_ascii=False, separators=(",", ":"))


def assert_fixture_matches(
    actual: Any,
    path: Union[str, Path],
    root: Optional[Union[str, Path]] = None,
    mode: Optional[CompareMode] = None,
) -> JsonCompareResult:
    """Compare ``actual`` JSON against a stored fixture.

    ``root`` and ``mode`` default to the configured ``fixtures_root`` and
    ``compare_mode``.

    Raises:
        JsonMismatchError: If the documents differ
    """
    config = load_config()
    if root is None:
        root = config.fixtures_path
    if mode is None:
        mode = CompareMode(config.compare_mode)
    return assert_json_equals(load_fixture(path, root), actual, mode)
