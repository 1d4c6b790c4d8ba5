"""Site identity and filesystem layout for a build."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from regima.utils.env import env_str
from regima.utils.urls import get_site_base_url

DEFAULT_TITLE = "RégimA Zone"
DEFAULT_DESCRIPTION = "Advanced skincare solutions powered by cognitive architecture"

# Repository root: holds content/, templates/ and assets/
PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class SiteConfig:
    base_url: str = "https://regima.site"
    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION

    @classmethod
    def from_env(cls) -> "SiteConfig":
        return cls(
            base_url=get_site_base_url(),
            title=env_str("SITE_TITLE", DEFAULT_TITLE),
            description=env_str("SITE_DESCRIPTION", DEFAULT_DESCRIPTION),
        )


@dataclass(frozen=True)
class SitePaths:
    root: Path
    public_dir: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.public_dir is None:
            object.__setattr__(self, "public_dir", self.root / "public")

    @property
    def content_dir(self) -> Path:
        return self.root / "content"

    @property
    def pages_dir(self) -> Path:
        return self.content_dir / "pages"

    @property
    def templates_dir(self) -> Path:
        return self.root / "templates"

    @property
    def assets_dir(self) -> Path:
        return self.root / "assets"

    @classmethod
    def from_env(cls) -> "SitePaths":
        """Resolve SITE_ROOT / SITE_PUBLIC_DIR, defaulting to the repository root."""
        root = Path(os.getenv("SITE_ROOT") or PROJECT_ROOT).expanduser().resolve()
        public = os.getenv("SITE_PUBLIC_DIR")
        if public:
            return cls(root=root, public_dir=Path(public).expanduser().resolve())
        return cls(root=root)
