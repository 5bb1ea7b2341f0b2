"""BDD step definitions for query log viewing."""

from dataclasses import dataclass
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, then, when

from dnsquerylog.adapters.sources.file import FileLogSource
from dnsquerylog.core.models import FilterCriteria, QueryResult
from dnsquerylog.core.query import query


@dataclass
class QueryScenarioContext:
    """Shared state between steps in a query log scenario."""

    path: Path
    result: QueryResult | None = None

    @property
    def source(self) -> FileLogSource:
        return FileLogSource(self.path, chunk_size=16)

    def append(self, line: str) -> None:
        with self.path.open("a", encoding="utf-8") as f:
            f.write(line + "\n")


@pytest.fixture
def ctx(tmp_path: Path) -> QueryScenarioContext:
    """Fresh scenario context for each test."""
    return QueryScenarioContext(path=tmp_path / "query.log")


# === Given ===
@given("a query log containing:")
def step_query_log(ctx: QueryScenarioContext, datatable: list[list[str]]) -> None:
    ctx.path.write_text("", encoding="utf-8")
    for row in datatable[1:]:
        ctx.append("\t".join(row))


@given(parsers.parse("a line with {n:d} fields is appended"))
def step_append_line(ctx: QueryScenarioContext, n: int) -> None:
    fields = ["t3", "c3", "extra.test", "A", "srv1", "7", "PASS"][:n]
    ctx.append("\t".join(fields))


@given("the query log is absent")
def step_log_absent(ctx: QueryScenarioContext) -> None:
    ctx.path.unlink()


# === When ===
@when(parsers.parse('I query with type "{query_type}"'))
def step_query_type(ctx: QueryScenarioContext, query_type: str) -> None:
    ctx.result = query(ctx.source, FilterCriteria.create(query_type=query_type))


@when(parsers.parse('I query with domain "{domain}"'))
def step_query_domain(ctx: QueryScenarioContext, domain: str) -> None:
    ctx.result = query(ctx.source, FilterCriteria.create(domain=domain))


@when(parsers.parse('I query with client "{client}"'))
def step_query_client(ctx: QueryScenarioContext, client: str) -> None:
    ctx.result = query(ctx.source, FilterCriteria.create(client=client))


@when(parsers.parse("I query with an entry cap of {n:d}"))
def step_query_cap(ctx: QueryScenarioContext, n: int) -> None:
    # Constructed directly: create() would raise the cap to the minimum
    ctx.result = query(ctx.source, FilterCriteria(max_entries=n))


@when("I query without filters")
def step_query_all(ctx: QueryScenarioContext) -> None:
    ctx.result = query(ctx.source)


@when("the log is cleared")
def step_clear(ctx: QueryScenarioContext) -> None:
    ctx.source.clear()


# === Then ===
@then(parsers.parse('the records have times "{times}"'))
def step_check_times(ctx: QueryScenarioContext, times: str) -> None:
    assert ctx.result is not None
    expected = [t.strip() for t in times.split(",")]
    assert [r.time for r in ctx.result.records] == expected


@then(parsers.parse('record {index:d} has status "{status}"'))
def step_check_status(ctx: QueryScenarioContext, index: int, status: str) -> None:
    assert ctx.result is not None
    assert ctx.result.records[index - 1].status == status


@then("no records are returned")
def step_check_empty(ctx: QueryScenarioContext) -> None:
    assert ctx.result is not None
    assert ctx.result.records == ()


@then("the log is reported as present")
def step_check_present(ctx: QueryScenarioContext) -> None:
    assert ctx.result is not None
    assert ctx.result.source_exists is True


@then("the log is reported as absent")
def step_check_absent(ctx: QueryScenarioContext) -> None:
    assert ctx.result is not None
    assert ctx.result.source_exists is False
