"""BDD step definitions for severity routing features."""

from dataclasses import dataclass

import pytest
from pytest_bdd import given, parsers, then, when

from logtree.adapters.config import parse_xml_string
from logtree.adapters.writers import MemoryWriter
from logtree.core import errors
from logtree.core.router import LevelRouter


@dataclass
class RoutingScenarioContext:
    """State shared between the steps of one scenario."""

    written: int = 0
    error: Exception | None = None


@pytest.fixture
def ctx() -> RoutingScenarioContext:
    """Fresh scenario context for each test."""
    return RoutingScenarioContext()


def _write_info(router: LevelRouter, ctx: RoutingScenarioContext, count: int) -> None:
    for _ in range(count):
        ctx.written += 1
        router.logger("info").print(f"record {ctx.written}")


# === Configuration Steps ===
@given("the active configuration:")
def step_active_configuration(router: LevelRouter, docstring: str) -> None:
    router.configure(parse_xml_string(docstring))


@when("the configuration is applied:")
def step_apply_configuration(
    router: LevelRouter, ctx: RoutingScenarioContext, docstring: str
) -> None:
    try:
        router.configure(parse_xml_string(docstring))
    except errors.LogConfigError as e:
        ctx.error = e


@then(parsers.parse("the configuration is rejected with {error_name}"))
def step_rejected(ctx: RoutingScenarioContext, error_name: str) -> None:
    assert isinstance(ctx.error, getattr(errors, error_name))


@then(parsers.parse('the error names the writer type "{name}"'))
def step_error_names_type(ctx: RoutingScenarioContext, name: str) -> None:
    assert isinstance(ctx.error, errors.UnknownWriterTypeError)
    assert ctx.error.name == name


@then("no severity is bound")
def step_nothing_bound(router: LevelRouter) -> None:
    assert router.bound() == ()


# === Writing Steps ===
@when(parsers.re(r"(?P<count>\d+) info records? (?:is|are) written"))
def step_write_info(router: LevelRouter, ctx: RoutingScenarioContext, count: str) -> None:
    _write_info(router, ctx, int(count))


@when("the router is flushed")
def step_flush(router: LevelRouter) -> None:
    router.flush()


# === Output Steps ===
@then(parsers.re(r"the sink has received (?P<count>\d+) payloads?"))
def step_sink_payloads(sink: MemoryWriter, count: str) -> None:
    assert len(sink.payloads) == int(count)


@then(parsers.parse("the last payload holds {count:d} records"))
def step_last_payload(sink: MemoryWriter, count: int) -> None:
    assert sink.payloads[-1].count(b"\n") == count


@then("info records still reach the sink")
def step_info_reaches_sink(
    router: LevelRouter, ctx: RoutingScenarioContext, sink: MemoryWriter
) -> None:
    before = len(sink.payloads)
    _write_info(router, ctx, 1)
    assert sink.payloads[before:] == [f"record {ctx.written}\n".encode()]


@then(parsers.parse("stdout shows {count:d} lines"))
def step_stdout_lines(capsys: pytest.CaptureFixture[str], count: int) -> None:
    assert capsys.readouterr().out.count("\n") == count
