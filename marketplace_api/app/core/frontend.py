"""
Front-end build configuration.

The storefront and admin front-ends are built by a JavaScript bundler.
Its configuration is derived from the same ``Settings`` as the API so
that the dev server always proxies to the address the API is served
from.  ``FrontendBuildConfig.to_dict`` renders the shape the bundler
expects::

    {
        "server": {
            "port": 5000,
            "proxy": {"/api": {"target": "http://localhost:3000", "changeOrigin": true}}
        },
        "build": {"outDir": "dist"}
    }
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config import Settings


@dataclass(frozen=True)
class ProxyRule:
    """Forward requests under ``prefix`` to ``target``."""

    prefix: str
    target: str
    change_origin: bool = True

    def matches(self, path: str) -> bool:
        """True for the prefix itself and any path below it."""
        if path == self.prefix:
            return True
        return path.startswith(self.prefix.rstrip("/") + "/")

    def forward_url(self, path: str) -> str:
        return self.target.rstrip("/") + path


def _default_proxy() -> List[ProxyRule]:
    return [ProxyRule("/api", "http://localhost:3000")]


@dataclass
class FrontendBuildConfig:
    """Dev server and production build settings for the bundler."""

    port: int = 5000
    proxy: List[ProxyRule] = field(default_factory=_default_proxy)
    out_dir: str = "dist"

    def __post_init__(self) -> None:
        if not 1 <= self.port <= 65535:
            raise ValueError(f"Dev server port out of range: {self.port}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "FrontendBuildConfig":
        return cls(
            port=settings.frontend_port,
            proxy=[ProxyRule("/api", settings.frontend_proxy_target)],
            out_dir=settings.frontend_out_dir,
        )

    def resolve_proxy(self, path: str) -> Optional[str]:
        """Return the URL the dev server forwards ``path`` to, if any.

        The longest matching prefix wins.
        """
        matching = [rule for rule in self.proxy if rule.matches(path)]
        if not matching:
            return None
        rule = max(matching, key=lambda r: len(r.prefix))
        return rule.forward_url(path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "server": {
                "port": self.port,
                "proxy": {
                    rule.prefix: {"target": rule.target, "changeOrigin": rule.change_origin}
                    for rule in self.proxy
                },
            },
            "build": {"outDir": self.out_dir},
        }
