"""Display utilities mixin for TUI - text width and padding."""

from wcwidth import wcwidth


class DisplayMixin:
    """Mixin providing text display utilities with proper Unicode width handling."""

    @staticmethod
    def _display_width(text: str) -> int:
        """Return visual width of text accounting for wide/narrow characters."""
        width = 0
        for ch in text:
            w = wcwidth(ch)
            if w is None:
                w = 0
            width += max(0, w)
        return width

    def _pad_display(self, text: str, width: int) -> str:
        """Pad with spaces to at least `width` visible cells; longer text is kept whole."""
        text_width = self._display_width(text)
        if text_width < width:
            return text + " " * (width - text_width)
        return text


__all__ = ["DisplayMixin"]
