"""Rich console presentation of test results."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from testy.config import TestyConfig
from testy.i18n import DEFAULT_LANGUAGE, I18n
from testy.testing.runner import RunSummary
from testy.testing.test import Test, TestCallbacks
from testy.utils import pretty_print


class ConsoleUI:
    """Prints one line per finished test and a closing summary."""

    SUCCESSFUL_EXIT_CODE = 0
    FAILED_EXIT_CODE = 1

    def __init__(
        self,
        console: Console | None = None,
        language: str = DEFAULT_LANGUAGE,
        verbose: bool = False,
    ) -> None:
        self.console = console or Console()
        self.verbose = verbose
        self.use_language(language)

    @classmethod
    def from_config(cls, config: TestyConfig, console: Console | None = None) -> ConsoleUI:
        return cls(console=console, language=config.language, verbose=config.verbose)

    def use_language(self, language: str) -> None:
        self._i18n = I18n(language)

    def test_callbacks(self) -> TestCallbacks:
        return TestCallbacks(
            on_pending=self.display_pending_result,
            on_skipped=self.display_skipped_result,
            on_success=self.display_success_result,
            on_failure=self.display_failure_result,
            on_error=self.display_error_result,
        )

    # Result lines

    def display_pending_result(self, test: Test) -> None:
        reason = test.result.message if test.result and test.result.message else self._t("no_body")
        self._display_result(test, "yellow", self._t("pending"), reason)

    def display_skipped_result(self, test: Test) -> None:
        reason = test.result.message if test.result else None
        self._display_result(test, "grey50", self._t("skipped"), reason)

    def display_success_result(self, test: Test) -> None:
        self._display_result(test, "green", self._t("passed"))

    def display_failure_result(self, test: Test) -> None:
        self._display_result(test, "red", self._t("failed"), test.result.message if test.result else None)

    def display_error_result(self, test: Test) -> None:
        cause = test.result.cause if test.result else None
        detail = pretty_print(cause) if cause is not None else None
        self._display_result(test, "bold red", self._t("errored"), detail)

    # Run events

    def display_summary(self, summary: RunSummary) -> None:
        self.console.print()
        self.console.print(f"[bold]{self._t('summary')}[/bold]: {summary.total} {self._t('total')}")
        self.console.print(
            f"  [green]{summary.passed} {self._t('passed')}[/green], "
            f"[red]{summary.failed} {self._t('failed')}[/red], "
            f"[bold red]{summary.errors} {self._t('errored')}[/bold red], "
            f"[yellow]{summary.pending} {self._t('pending')}[/yellow], "
            f"[grey50]{summary.skipped} {self._t('skipped')}[/grey50]"
        )

    def exit_code(self, summary: RunSummary) -> int:
        return self.SUCCESSFUL_EXIT_CODE if summary.success else self.FAILED_EXIT_CODE

    def exit_with_code(self, summary: RunSummary) -> None:
        raise SystemExit(self.exit_code(summary))

    # Private

    def _display_result(self, test: Test, style: str, label: str, detail: str | None = None) -> None:
        self.console.print(f"[{style}]\\[{label}][/{style}] {escape(test.name)}")
        if detail and (self.verbose or test.is_failure() or test.is_error()):
            self.console.print(f"    {escape(detail)}")

    def _t(self, key: str) -> str:
        return self._i18n.translate(key)


__all__ = ["ConsoleUI"]
