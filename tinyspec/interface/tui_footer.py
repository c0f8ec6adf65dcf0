"""Help line renderer for SpecDashboardTUI."""

from prompt_toolkit.formatted_text import FormattedText

from .tui_models import DashboardMode

LIST_HELP = " ↑↓/jk navigate  Enter detail  q quit"
DETAIL_HELP = " ↑↓/jk navigate  Enter toggle  Esc back  q quit"


def help_line(mode: DashboardMode) -> str:
    return DETAIL_HELP if mode == DashboardMode.DETAIL else LIST_HELP


def build_footer_text(tui) -> FormattedText:
    return FormattedText([("class:help", help_line(tui.state.mode))])


__all__ = ["LIST_HELP", "DETAIL_HELP", "help_line", "build_footer_text"]
