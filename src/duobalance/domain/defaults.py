"""Default categories, color palette and initial state."""

from duobalance.domain.entities import AppState, Category

COLOR_PALETTE = (
    "blue",
    "orange",
    "pink",
    "green",
    "purple",
    "gray",
)

DEFAULT_CATEGORIES = (
    Category(id="1", name="Supermercado", color="blue"),
    Category(id="2", name="Combustível", color="orange"),
    Category(id="3", name="Prendas", color="pink"),
    Category(id="4", name="Casa", color="green"),
    Category(id="5", name="Lazer", color="purple"),
    Category(id="6", name="Outros", color="gray"),
)


def palette_color(index: int) -> str:
    """Color for the category at ``index``, cycling through the palette."""
    return COLOR_PALETTE[index % len(COLOR_PALETTE)]


def initial_state() -> AppState:
    """State of a fresh or reset store: no expenses, default categories."""
    return AppState(categories=DEFAULT_CATEGORIES)
