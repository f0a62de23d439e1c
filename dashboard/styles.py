"""
Category palette for the result badge and confidence bar.

Colors mirror the dashboard's dark theme: an 80% opaque badge background,
a near-white text tint of the same hue, and a left-to-right gradient for
the confidence bar.
"""
from pydantic import BaseModel, ConfigDict


class CategoryStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    bg: str
    text: str
    gradient: str


def _palette(c500: str, c400: str, c50: str, rgb: str) -> CategoryStyle:
    return CategoryStyle(
        bg=f"rgb({rgb} / 0.8)",
        text=c50,
        gradient=f"linear-gradient(to right, {c500}, {c400})",
    )


# Keys are lower-case; lookups lower-case the label first.
CATEGORY_STYLES: dict[str, CategoryStyle] = {
    "politics": _palette("#3b82f6", "#60a5fa", "#eff6ff", "59 130 246"),
    "sports": _palette("#22c55e", "#4ade80", "#f0fdf4", "34 197 94"),
    "local news": _palette("#a855f7", "#c084fc", "#faf5ff", "168 85 247"),
    "technology": _palette("#06b6d4", "#22d3ee", "#ecfeff", "6 182 212"),
    "entertainment": _palette("#ec4899", "#f472b6", "#fdf2f8", "236 72 153"),
    "business": _palette("#f59e0b", "#fbbf24", "#fffbeb", "245 158 11"),
    "health": _palette("#ef4444", "#f87171", "#fef2f2", "239 68 68"),
}

DEFAULT_STYLE = _palette("#64748b", "#94a3b8", "#f8fafc", "100 116 139")


def style_for(category: str | None) -> CategoryStyle:
    """Exact, case-insensitive palette lookup. Unknown or empty labels get the slate default."""
    return CATEGORY_STYLES.get((category or "").lower(), DEFAULT_STYLE)
