"""Static asset resolution for the study-guide site."""

import logging
from dataclasses import dataclass
from pathlib import Path

from studyhub.config import Settings

logger = logging.getLogger(__name__)

# Served with permissive cross-origin headers so guides embed in other sites
EMBEDDABLE_MEDIA_TYPES = {
    ".pdf": "application/pdf",
    ".json": "application/json",
}

CROSS_ORIGIN_HEADERS = {
    "Cross-Origin-Embedder-Policy": "unsafe-none",
    "Cross-Origin-Resource-Policy": "cross-origin",
}


def _safe_join(root: Path, relative: str) -> Path | None:
    """Join ``relative`` under ``root``, refusing paths that escape it."""
    root = root.resolve()
    candidate = (root / relative.lstrip("/")).resolve()
    if candidate != root and root not in candidate.parents:
        return None
    return candidate


@dataclass
class StaticSite:
    """Maps request paths onto files in the build and public directories."""

    build_dir: Path
    public_dir: Path
    subject_guides: list[str]

    @classmethod
    def from_settings(cls, settings: Settings) -> "StaticSite":
        return cls(
            build_dir=settings.build_path,
            public_dir=settings.public_path,
            subject_guides=list(settings.subject_guides),
        )

    @property
    def app_shell(self) -> Path:
        return self.build_dir / "index.html"

    def _roots_for(self, path: str) -> list[tuple[Path, str]]:
        first, _, rest = path.strip("/").partition("/")
        roots = []
        if first in self.subject_guides:
            roots.append((self.public_dir / first, rest))
        roots.append((self.build_dir, path))
        roots.append((self.public_dir, path))
        return roots

    def resolve(self, path: str) -> Path | None:
        """Find the file for a request path.

        Subject-guide prefixes are tried first, then the build directory,
        then the public directory. Directories resolve to their index.html.
        """
        for root, relative in self._roots_for(path):
            candidate = _safe_join(root, relative)
            if candidate is None:
                logger.warning(f"Rejected path outside static root: {path}")
                return None
            if candidate.is_dir():
                candidate = candidate / "index.html"
            if candidate.is_file():
                return candidate
        return None

    def resolve_or_shell(self, path: str) -> Path | None:
        """Resolve a path, falling back to the single-page app shell."""
        found = self.resolve(path)
        if found is not None:
            return found
        if self.app_shell.is_file():
            return self.app_shell
        return None


def headers_for(path: str | Path) -> tuple[str | None, dict[str, str]]:
    """Media type override and extra headers for a served file."""
    suffix = Path(path).suffix.lower()
    media_type = EMBEDDABLE_MEDIA_TYPES.get(suffix)
    if media_type is None:
        return None, {}
    return media_type, dict(CROSS_ORIGIN_HEADERS)
