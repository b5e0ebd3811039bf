from abc import ABC, abstractmethod
from typing import Any, Optional

from rich.console import Console
from rich.theme import Theme

from digest_log.config import REPORT_THEME


class Reporter(ABC):
    """Base class for rendering results to the console"""
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(theme=Theme(REPORT_THEME))

    @abstractmethod
    def generate_report(self, analysis_result: Any) -> None:
        """Generate and display the report"""
        pass
