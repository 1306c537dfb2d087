"""Unit tests for the command-line interface."""

import io
from pathlib import Path

import pytest
import yaml

from osrole.application.dto.role_resource import RoleResource
from osrole.config import get_settings
from osrole.interfaces.cli.commands import build_parser, run_command
from osrole.main import build_use_cases, main

from tests.conftest import basic_role


@pytest.fixture
def use_cases(role_client_factory):
    return build_use_cases(role_client_factory)


@pytest.fixture
def roles_file(tmp_path: Path) -> Path:
    path = tmp_path / "roles.yaml"
    path.write_text(yaml.safe_dump({"roles": [basic_role("testrole")]}), encoding="utf-8")
    return path


async def _run(use_cases, *argv: str) -> tuple[int, str]:
    out = io.StringIO()
    code = await run_command(build_parser().parse_args(list(argv)), use_cases, out=out)
    return code, out.getvalue()


@pytest.mark.asyncio
async def test_plan_then_apply(use_cases, roles_file: Path, fake_client) -> None:
    code, output = await _run(use_cases, "plan", str(roles_file), "--detailed-exitcode")
    assert code == 2
    assert "+ create  testrole" in output
    assert fake_client.names() == set()

    code, output = await _run(use_cases, "apply", str(roles_file))
    assert code == 0
    assert "Plan: 1 to change, 0 unchanged." in output
    assert fake_client.names() == {"testrole"}

    code, output = await _run(use_cases, "plan", str(roles_file), "--detailed-exitcode")
    assert code == 0
    assert "no-op" in output


@pytest.mark.asyncio
async def test_show_and_import(use_cases, fake_client) -> None:
    fake_client.add_role(RoleResource.parse(basic_role("testrole")).to_role())

    code, output = await _run(use_cases, "show", "testrole")
    assert code == 0
    assert '"id": "testrole"' in output

    code, output = await _run(use_cases, "import", "testrole")
    assert code == 0
    imported = yaml.safe_load(output)["roles"][0]
    assert RoleResource.parse(imported) == RoleResource.parse(basic_role("testrole"))


@pytest.mark.asyncio
async def test_show_missing_role(use_cases) -> None:
    code, _ = await _run(use_cases, "show", "gone")
    assert code == 1


@pytest.mark.asyncio
async def test_import_missing_role_fails(use_cases, capsys) -> None:
    code, _ = await _run(use_cases, "import", "gone")
    assert code == 1
    assert "not found" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_destroy(use_cases, fake_client) -> None:
    fake_client.add_role(RoleResource.parse(basic_role("a")).to_role())
    code, output = await _run(use_cases, "destroy", "a", "never-existed")
    assert code == 0
    assert "- destroyed never-existed" in output
    assert fake_client.names() == set()


def test_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_main_reports_invalid_version_override(monkeypatch, capsys) -> None:
    monkeypatch.setenv("OPENSEARCH_VERSION", "opensearch:")
    get_settings.cache_clear()
    try:
        assert main(["show", "r"]) == 1
    finally:
        get_settings.cache_clear()
    assert "Invalid cluster version" in capsys.readouterr().err
