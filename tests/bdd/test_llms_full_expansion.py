"""Behaviour tests for the ``manual llms-full`` command.

The scenarios in ``llms_full_expansion.feature`` build a small documentation
project under ``tmp_path`` and run the command function directly. They check
the anchor-linked table of contents, the inlined bodies, and that a missing
page only produces a warning.

Usage
-----
Run ``pytest tests/bdd/test_llms_full_expansion.py -v`` after installing the
dev dependencies (``uv sync --group dev``).
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest
from pytest_bdd import given, scenarios, then, when

from raydi_manual import cli

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "llms_full_expansion.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a documentation project with an index linking two pages")
def given_project(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Write ``llms.txt``, a config, and two manual pages."""
    (tmp_path / "llms.txt").write_text(
        dedent(
            """\
            # Ray.Di

            ## Getting Started

            - [Installation](/manuals/1.0/en/Installation.md): setup
            - [Scopes](/manuals/1.0/en/Scopes.md): lifetimes
            """
        ),
        encoding="utf-8",
    )
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "manual.yaml").write_text(
        "llms:\n  sections: [Getting Started]\n", encoding="utf-8"
    )
    pages = tmp_path / "manuals" / "1.0" / "en"
    pages.mkdir(parents=True)
    (pages / "Installation.md").write_text(
        "---\ntitle: Installation\n---\nRun composer.\n", encoding="utf-8"
    )
    (pages / "Scopes.md").write_text(
        "---\ntitle: Scopes\n---\nSee [install](Installation.md).\n", encoding="utf-8"
    )
    scenario_state["root"] = tmp_path
    scenario_state["pages"] = pages


@given("one linked page is missing")
def given_missing_page(scenario_state: ScenarioState) -> None:
    """Remove the Installation page from the project."""
    pages = typ.cast("Path", scenario_state["pages"])
    (pages / "Installation.md").unlink()


@when("I run the llms-full command")
def when_run_llms_full(
    scenario_state: ScenarioState,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Invoke the command and capture its exit status and log."""
    monkeypatch.setattr(cli, "configure_logging", lambda: None)
    root = typ.cast("Path", scenario_state["root"])
    with caplog.at_level(logging.INFO, logger="raydi_manual"):
        try:
            cli.llms_full(root=root)
        except SystemExit as exc:
            scenario_state["exit_code"] = exc.code
        else:
            scenario_state["exit_code"] = 0
    scenario_state["log"] = caplog.text
    scenario_state["output"] = (root / "llms-full.txt").read_text(encoding="utf-8")


@then("the command succeeds")
def then_succeeds(scenario_state: ScenarioState) -> None:
    """Skips never change the exit status."""
    assert scenario_state["exit_code"] == 0, "expected exit status 0"


@then("the table of contents links to local anchors")
def then_toc_anchors(scenario_state: ScenarioState) -> None:
    """Each TOC entry points at the page anchor and keeps its description."""
    output = typ.cast("str", scenario_state["output"])
    assert "- [Installation](#installation): setup\n" in output
    assert "- [Scopes](#scopes): lifetimes\n" in output


@then("both page bodies follow the separator without front-matter")
def then_bodies_inlined(scenario_state: ScenarioState) -> None:
    """Bodies appear after the rule in link order, with links rewritten."""
    output = typ.cast("str", scenario_state["output"])
    _, _, body = output.partition("\n---\n")
    assert body == "\nRun composer.\n\nSee [install](#installation).\n", (
        f"unexpected body {body!r}"
    )
    assert "title:" not in output, "front-matter must not leak into the output"


@then("the missing page is reported in the log")
def then_missing_logged(scenario_state: ScenarioState) -> None:
    """The warning names the file that could not be found."""
    log = typ.cast("str", scenario_state["log"])
    assert "Installation.md" in log, "expected a warning naming the missing page"


@then("only the remaining page body is inlined")
def then_only_remaining(scenario_state: ScenarioState) -> None:
    """The TOC still lists the missing page but its body is absent."""
    output = typ.cast("str", scenario_state["output"])
    assert "- [Installation](#installation): setup\n" in output
    assert output.endswith("\n---\n\nSee [install](#installation).\n")
    assert "Run composer." not in output
