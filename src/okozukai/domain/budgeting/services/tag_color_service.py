"""Round-robin colour assignment for new tags."""

TAG_COLOR_PALETTE: tuple[str, ...] = (
    "#6366f1",  # indigo
    "#f97316",  # orange
    "#10b981",  # emerald
    "#ec4899",  # pink
    "#3b82f6",  # blue
    "#f59e0b",  # amber
    "#14b8a6",  # teal
    "#a855f7",  # purple
    "#ef4444",  # red
    "#84cc16",  # lime
    "#06b6d4",  # cyan
    "#f472b6",  # light pink
)


class TagColorService:
    """Derives a tag colour from the number of tags that already exist.

    Two tags created concurrently may receive the same colour.
    """

    @staticmethod
    def color_for(existing_tag_count: int) -> str:
        return TAG_COLOR_PALETTE[existing_tag_count % len(TAG_COLOR_PALETTE)]
