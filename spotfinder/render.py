import io

import matplotlib
matplotlib.use("Agg")  # headless
import matplotlib.pyplot as plt

# Default overview centre (GTA) and half-span in degrees
OVERVIEW_CENTER = (43.7, -79.4)
OVERVIEW_SPAN = 0.9
FOCUS_SPAN = 0.08


def _png(fig) -> bytes:
    fig.tight_layout()
    buf = io.BytesIO()
    fig.savefig(buf, format="png", bbox_inches="tight")
    plt.close(fig)
    return buf.getvalue()


def _frame(ax, center, span):
    lat, lon = center
    ax.set_xlim(lon - span, lon + span)
    ax.set_ylim(lat - span, lat + span)
    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    ax.grid(True, alpha=0.3)


def render_markers(locations, focus=None) -> bytes:
    """PNG of every marker around the overview, or of the single `focus` marker."""
    fig, ax = plt.subplots(figsize=(8, 8))

    if focus is not None:
        _frame(ax, (focus.latitude, focus.longitude), FOCUS_SPAN)
        ax.scatter([focus.longitude], [focus.latitude], s=80, color="tab:red", zorder=3)
        ax.annotate(
            f"{focus.name}\n{focus.coords}",
            (focus.longitude, focus.latitude),
            textcoords="offset points",
            xytext=(0, 12),
            ha="center",
            bbox=dict(boxstyle="round", fc="white", alpha=0.9),
        )
        ax.set_title(focus.name)
        return _png(fig)

    if not locations:
        # Placeholder instead of an empty frame
        ax.axis("off")
        ax.text(0.5, 0.5, "No locations available", ha="center", va="center", fontsize=18)
        return _png(fig)

    _frame(ax, OVERVIEW_CENTER, OVERVIEW_SPAN)
    ax.scatter(
        [loc.longitude for loc in locations],
        [loc.latitude for loc in locations],
        s=18,
        color="tab:red",
    )
    for loc in locations:
        ax.annotate(loc.name, (loc.longitude, loc.latitude), fontsize=5, xytext=(2, 2), textcoords="offset points")
    ax.set_title(f"All locations • {len(locations)}")
    return _png(fig)
