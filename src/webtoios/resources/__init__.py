"""Bundled Markdown guides served as MCP resources."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources


@dataclass(frozen=True)
class Guide:
    """A Markdown document shipped inside the package."""

    uri: str
    name: str
    description: str
    filename: str
    mime_type: str = "text/markdown"


GUIDES: dict[str, Guide] = {
    "implementation": Guide(
        uri="web-to-ios://guides/implementation",
        name="Implementation Guide",
        description=(
            "Complete guide for iOS migration implementation, including design "
            "principles, risk management, and quality checklist"
        ),
        filename="IMPLEMENTATION_GUIDE.md",
    ),
    "troubleshooting": Guide(
        uri="web-to-ios://guides/troubleshooting",
        name="Common Issues & Solutions",
        description=(
            "Troubleshooting guide for web-to-iOS conversion covering build errors, "
            "runtime issues, and framework-specific problems"
        ),
        filename="COMMON_ISSUES.md",
    ),
}


def guide_for_uri(uri: str) -> Guide:
    """Return the guide registered under *uri*."""
    for guide in GUIDES.values():
        if guide.uri == uri:
            return guide
    msg = f"Unknown resource: {uri}"
    raise ValueError(msg)


def load_guide(guide: Guide) -> str:
    """Read the guide's Markdown text from the package."""
    return resources.files(__name__).joinpath(guide.filename).read_text(encoding="utf-8")
