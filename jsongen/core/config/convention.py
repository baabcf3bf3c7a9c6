"""
Naming convention lookup — which suffix marks a generated file.

The generator's project config (``dart_json_gen.yaml`` or ``.yml``)
may declare ``generated_extension``. The nearest declaration above the
start path wins; without one the default suffix applies. The file is
matched line by line, not parsed as YAML, so a half-written or invalid
config still yields its suffix, and an unreadable one is skipped.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator, Sequence
from pathlib import Path

from jsongen.core.models.settings import GeneratorSettings

logger = logging.getLogger(__name__)

# The generator's conventional place for its config, next to the sources
CONFIG_SUBDIR = "config"


def _key_pattern(key: str) -> re.Pattern[str]:
    return re.compile(
        rf"""^[ \t]*{re.escape(key)}[ \t]*:[ \t]*["']?([^"'\r\n#]+)["']?""",
        re.MULTILINE,
    )


def read_declared_suffix(config_file: Path, key: str = "generated_extension") -> str | None:
    """Return the suffix declared in ``config_file``, or None.

    Unreadable files and files without the key both give None.
    """
    try:
        content = config_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Skipping unreadable config %s: %s", config_file, e)
        return None

    match = _key_pattern(key).search(content)
    if not match:
        return None
    value = match.group(1).strip()
    return value or None


def _candidates(directory: Path, filenames: Sequence[str]) -> Iterator[Path]:
    for name in filenames:
        yield directory / name
    for name in filenames:
        yield directory / CONFIG_SUBDIR / name


def _start_dir(start_path: Path) -> Path:
    try:
        return start_path.parent if start_path.is_file() else start_path
    except OSError:
        return start_path


def resolve_naming_convention(
    start_path: str | Path,
    settings: GeneratorSettings | None = None,
) -> str:
    """Find the artifact suffix that applies at ``start_path``.

    Walks from ``start_path`` (its directory, if it is a file) up to the
    filesystem root. At each directory the config files are checked
    first in the directory itself, then in its ``config/`` subdirectory.

    Never raises. Not cached: the tree may change between calls.
    """
    settings = settings or GeneratorSettings()
    current = _start_dir(Path(os.path.abspath(start_path)))

    while True:
        for candidate in _candidates(current, settings.config_filenames):
            try:
                if not candidate.is_file():
                    continue
            except OSError:
                continue
            suffix = read_declared_suffix(candidate, settings.config_key)
            if suffix:
                logger.debug("Naming convention %r from %s", suffix, candidate)
                return suffix

        parent = current.parent
        if parent == current:
            break  # reached root
        current = parent

    return settings.default_suffix
