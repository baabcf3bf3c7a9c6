"""
Artifact discovery — which files on disk the generator produced.

Artifacts are recognised purely by name: a file whose name ends with
the naming-convention suffix. Directories in the exclusion set are
never entered, and a directory that cannot be read is skipped, so a
scan always returns whatever it could enumerate.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from jsongen.core.models.outcome import ArtifactSet
from jsongen.core.models.settings import GeneratorSettings

logger = logging.getLogger(__name__)


class ArtifactScanner:
    """Find generated files for a directory tree or a single source file."""

    def __init__(self, settings: GeneratorSettings | None = None):
        self._settings = settings or GeneratorSettings()

    @property
    def excluded_dirs(self) -> frozenset[str]:
        return frozenset(self._settings.excluded_dirs)

    def scan(self, root_dir: str | Path, suffix: str) -> ArtifactSet:
        """Recursively collect files under ``root_dir`` ending in ``suffix``.

        Order is traversal order. Symlinks are not followed.
        """
        root = os.path.abspath(root_dir)
        found = list(self._walk(root, suffix, self.excluded_dirs))
        logger.debug("Found %d artifact(s) with suffix %r under %s", len(found), suffix, root)
        return ArtifactSet(paths=found, suffix=suffix, root=root)

    def _walk(self, directory: str, suffix: str, excluded: frozenset[str]) -> Iterable[str]:
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", directory, e)
            return

        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    if entry.name not in excluded:
                        yield from self._walk(entry.path, suffix, excluded)
                elif entry.is_file(follow_symlinks=False) and entry.name.endswith(suffix):
                    yield entry.path
            except OSError as e:
                logger.debug("Skipping %s: %s", entry.path, e)

    def artifact_path(self, source_file: str | Path, suffix: str) -> str | None:
        """Sibling artifact path for ``source_file``: ``x.dart`` -> ``x<suffix>``.

        None when the file does not carry the source extension.
        """
        source = os.path.abspath(source_file)
        ext = self._settings.source_extension
        if not source.endswith(ext):
            return None
        return source[: -len(ext)] + suffix

    def scan_file(self, source_file: str | Path, suffix: str) -> ArtifactSet:
        """The single artifact of ``source_file``, if it exists on disk."""
        source = os.path.abspath(source_file)
        artifact = self.artifact_path(source, suffix)
        paths = []
        if artifact and artifact != source and os.path.isfile(artifact):
            paths.append(artifact)
        return ArtifactSet(paths=paths, suffix=suffix, root=os.path.dirname(source))
