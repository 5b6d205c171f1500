import io

import pytest
from rich.console import Console

from testy import ConsoleUI, Runner, TestyConfig, asserter
from testy.testing import RunSummary, Test, TestResult


def raise_error():
    raise RuntimeError("database unavailable")


def make_runner(callbacks=None, **config) -> Runner:
    return Runner(config=TestyConfig(**config), callbacks=callbacks)


def test_runner_counts_every_kind(recorder):
    runner = make_runner(recorder.callbacks())
    runner.add_test("passes", lambda: asserter.is_true(True))
    runner.add_test("fails", lambda: asserter.is_true(False))
    runner.add_test("errors", raise_error)
    runner.add_test("no body")
    runner.add_test("later", lambda: None, pending_reason="todo")
    runner.add_test("skipped", lambda: None, skip_reason="slow")

    summary = runner.run()

    assert (summary.total, summary.passed, summary.failed, summary.errors) == (6, 1, 1, 1)
    assert (summary.pending, summary.skipped) == (2, 1)
    assert not summary.success
    assert recorder.calls == [
        ("success", "passes"),
        ("failure", "fails"),
        ("error", "errors"),
        ("pending", "no body"),
        ("pending", "later"),
        ("skipped", "skipped"),
    ]


def test_skipped_and_pending_bodies_never_run():
    calls = []
    runner = make_runner()
    runner.add_test("later", lambda: calls.append("later"), pending_reason="todo")
    runner.add_test("skipped", lambda: calls.append("skipped"), skip_reason="slow")

    runner.run()

    assert calls == []


def test_runner_applies_fail_fast_from_config():
    executed = []

    def body():
        asserter.is_true(False)
        executed.append("after")

    runner = make_runner(fail_fast=True)
    test = runner.add_test("stops", body)
    runner.run()

    assert executed == []
    assert test.is_failure()


def test_runner_uses_configured_language():
    runner = make_runner(language="es")
    test = runner.add_test("falla", lambda: asserter.is_false(True))
    runner.run()

    assert test.result.message == "se esperaba que True sea falso"


def test_empty_run_is_successful():
    assert Runner().run().success


class TestConsoleUI:
    @pytest.fixture
    def output(self) -> io.StringIO:
        return io.StringIO()

    @pytest.fixture
    def ui(self, output) -> ConsoleUI:
        return ConsoleUI(console=Console(file=output, width=200))

    def test_prints_one_line_per_result(self, ui, output):
        runner = Runner(callbacks=ui.test_callbacks())
        runner.add_test("adds numbers", lambda: asserter.are_equal(1 + 1, 2))
        runner.add_test("compares strings", lambda: asserter.are_equal("a", "b"))
        runner.add_test("[weird] name", raise_error)
        runner.run()

        text = output.getvalue()
        assert "[passed] adds numbers" in text
        assert "[failed] compares strings" in text
        assert "expected 'a' to be equal to 'b'" in text
        assert "[errored] [weird] name" in text
        assert "RuntimeError('database unavailable')" in text

    def test_pending_reason_only_in_verbose_mode(self, output):
        quiet = ConsoleUI(console=Console(file=output, width=200))
        test = Test("pending test", None, quiet.test_callbacks())
        test.run()
        assert "no body defined" not in output.getvalue()

        verbose = ConsoleUI(console=Console(file=output, width=200), verbose=True)
        test = Test("pending test", None, verbose.test_callbacks())
        test.run()
        assert "no body defined" in output.getvalue()

    def test_summary_and_exit_codes(self, ui, output):
        passing = RunSummary()
        failing = RunSummary()
        test = Test("broken")
        test.set_result(TestResult.failure("nope"))
        failing.results.append(test)

        ui.display_summary(failing)

        assert "Summary: 1 total" in output.getvalue()
        assert ui.exit_code(passing) == ConsoleUI.SUCCESSFUL_EXIT_CODE
        assert ui.exit_code(failing) == ConsoleUI.FAILED_EXIT_CODE
        with pytest.raises(SystemExit) as excinfo:
            ui.exit_with_code(failing)
        assert excinfo.value.code == 1

    def test_use_language(self, ui, output):
        ui.use_language("es")
        Test("vacío", lambda: None, ui.test_callbacks()).run()

        assert "[pasó] vacío" in output.getvalue()

    def test_from_config(self, output):
        config = TestyConfig(language="es", verbose=True)
        ui = ConsoleUI.from_config(config, console=Console(file=output, width=200))
        Test("sin cuerpo", None, ui.test_callbacks()).run()

        assert ui.verbose
        assert "[pendiente] sin cuerpo" in output.getvalue()
        assert "sin cuerpo definido" in output.getvalue()
