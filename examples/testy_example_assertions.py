"""Demonstrates test bodies, the assertion catalogue and the console UI.

Run with ``python examples/testy_example_assertions.py``. The exit code is 1
because some of the tests below fail on purpose.
"""

import re

from testy import ConsoleUI, Runner, asserter, assert_that, fail, load_config, pending


def parse_port(value: str) -> int:
    port = int(value)
    if not 0 < port < 65536:
        raise ValueError(f"port out of range: {port}")
    return port


def collections_work():
    assert_that([3, 1, 2]).includes_exactly(1, 2, 3)
    assert_that({"host": "localhost"}).includes("host")
    asserter.is_not_empty("config")


def equality_with_custom_criteria():
    case_insensitive = lambda actual, expected: actual.lower() == expected.lower()
    asserter.are_equal("LOCALHOST", "localhost", case_insensitive)


def port_validation_raises():
    assert_that(lambda: parse_port("70000")).raises(re.compile("out of range"))
    assert_that(lambda: parse_port("8080")).does_not_raise_any_errors()


def rounding_is_not_tolerance():
    # Fails: 3.14159 rounds to 3.14 with two digits, which is not 3.1416.
    assert_that(3.14159).is_near_to(3.1416, 2)


def first_failure_wins():
    asserter.are_equal(parse_port("80"), 8080)  # reported
    asserter.is_true(False)  # ignored, the test already failed


def explicit_failure():
    fail.with_description("retry logic not implemented")


def waiting_on_upstream():
    pending.due_to("blocked by upstream API change")


def unexpected_error():
    parse_port("not a number")


def main() -> None:
    config = load_config()
    ui = ConsoleUI.from_config(config)
    runner = Runner(config=config, callbacks=ui.test_callbacks())

    runner.add_test("collections work", collections_work)
    runner.add_test("equality with custom criteria", equality_with_custom_criteria)
    runner.add_test("port validation raises", port_validation_raises)
    runner.add_test("rounding is not tolerance", rounding_is_not_tolerance)
    runner.add_test("first failure wins", first_failure_wins)
    runner.add_test("explicit failure", explicit_failure)
    runner.add_test("waiting on upstream", waiting_on_upstream)
    runner.add_test("unexpected error", unexpected_error)
    runner.add_test("not written yet")
    runner.add_test("slow integration", lambda: None, skip_reason="needs network")

    summary = runner.run()
    ui.display_summary(summary)
    ui.exit_with_code(summary)


if __name__ == "__main__":
    main()
