"""Title bar builder for SpecDashboardTUI."""

from prompt_toolkit.formatted_text import FormattedText

from .tui_models import DashboardMode


def build_status_text(tui) -> FormattedText:
    state = tui.state
    if state.mode == DashboardMode.DETAIL:
        spec = state.current_spec()
        if spec is not None:
            return FormattedText([
                ("class:title", f" {spec.name}"),
                ("class:text", " - Implementation Plan"),
            ])
    return FormattedText([
        ("class:title", " tinyspec"),
        ("class:text", " dashboard"),
    ])


__all__ = ["build_status_text"]
