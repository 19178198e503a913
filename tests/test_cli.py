from __future__ import annotations

import json
from pathlib import Path

import pytest

from dataverse_gen.cli import main
from dataverse_gen.codegen import generate_from_schema
from dataverse_gen.codegen.languages.typescript import TEMPLATE_DIRECTORY


@pytest.fixture
def schema_file(tmp_path: Path, two_entity_schema) -> Path:
    schema = dict(two_entity_schema)
    schema["EnumTypes"] = [
        {
            "Name": "account_account_industrycode",
            "Members": [{"Name": "Accounting", "Value": 1}, {"Name": "Agriculture", "Value": 2}],
        }
    ]
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(schema), encoding="utf-8")
    return path


def _read_tree(root: Path) -> dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def test_generate_with_bundled_templates(tmp_path: Path, schema_file: Path) -> None:
    out = tmp_path / "out"

    exit_code = main(["generate", str(schema_file), "--output-root", str(out), "--quiet"])

    assert exit_code == 0
    assert sorted(_read_tree(out)) == [
        "entities/account.ts",
        "entities/contact.ts",
        "enums/account_account_industrycode.ts",
        "index.ts",
        "metadata.ts",
        "typings/attributeTypes.d.ts",
    ]
    for missing in ("actions", "functions", "complextypes"):
        assert not (out / missing).exists()

    index = (out / "index.ts").read_text(encoding="utf-8")
    assert 'export * from "./entities/account";' in index
    assert 'export * from "./enums/account_account_industrycode";' in index

    typings = (out / "typings" / "attributeTypes.d.ts").read_text(encoding="utf-8")
    assert 'from "./enums/account_account_industrycode"' in typings
    assert "../enums" not in typings

    account = (out / "entities" / "account.ts").read_text(encoding="utf-8")
    assert 'logicalName: "Account"' in account
    assert 'from "../enums/account_account_industrycode"' in account


def test_generation_is_idempotent(tmp_path: Path, schema_file: Path) -> None:
    out = tmp_path / "out"
    args = ["generate", str(schema_file), "--output-root", str(out), "--quiet"]

    assert main(args) == 0
    first = _read_tree(out)
    assert main(args) == 0

    assert _read_tree(out) == first


def test_no_index_and_custom_suffix(tmp_path: Path, schema_file: Path) -> None:
    out = tmp_path / "out"

    exit_code = main(
        [
            "generate",
            str(schema_file),
            "--output-root",
            str(out),
            "--file-suffix",
            ".gen.ts",
            "--no-index",
            "--quiet",
        ]
    )

    assert exit_code == 0
    assert (out / "entities" / "account.gen.ts").exists()
    assert (out / "metadata.gen.ts").exists()
    assert not (out / "index.gen.ts").exists()


def test_failed_render_leaves_error_text_and_exit_code(tmp_path: Path, schema_file: Path) -> None:
    templates = tmp_path / "templates"
    templates.mkdir()
    for template in TEMPLATE_DIRECTORY.glob("*.j2"):
        (templates / template.name).write_text(template.read_text(encoding="utf-8"), encoding="utf-8")
    (templates / "entity.ts.j2").write_text(
        "{% if Name == 'Account' %}{{ Name.nope.deeper }}{% endif %}// {{ Name }}",
        encoding="utf-8",
    )
    out = tmp_path / "out"

    exit_code = main(
        [
            "generate",
            str(schema_file),
            "--output-root",
            str(out),
            "--template-root",
            str(templates),
            "--quiet",
        ]
    )

    assert exit_code == 1
    assert "nope" in (out / "entities" / "account.ts").read_text(encoding="utf-8")
    assert (out / "entities" / "contact.ts").read_text(encoding="utf-8") == "// Contact"
    index = (out / "index.ts").read_text(encoding="utf-8")
    assert "entities/contact" in index
    assert "entities/account" not in index


def test_config_file_supplies_roots(tmp_path: Path, schema_file: Path) -> None:
    out = tmp_path / "from-config"
    config_path = tmp_path / "dataverse-gen.json"
    config_path.write_text(
        json.dumps({"output": {"templateRoot": str(TEMPLATE_DIRECTORY), "outputRoot": str(out)}}),
        encoding="utf-8",
    )

    assert main(["generate", str(schema_file), "--config", str(config_path), "--quiet"]) == 0
    assert (out / "entities" / "contact.ts").exists()


def test_missing_output_root_is_an_error(tmp_path: Path, schema_file: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert main(["generate", str(schema_file), "--quiet"]) == 1
    assert not (tmp_path / "entities").exists()


def test_missing_schema_file_is_an_error(tmp_path: Path) -> None:
    assert main(["generate", str(tmp_path / "nope.json"), "--output-root", str(tmp_path)]) == 1


def test_unknown_language_is_an_error(tmp_path: Path, schema_file: Path) -> None:
    args = ["generate", str(schema_file), "--output-root", str(tmp_path / "out"), "-l", "cobol"]

    assert main(args) == 1


def test_languages_command() -> None:
    assert main(["languages"]) == 0


def test_generate_from_schema_dict(tmp_path: Path, two_entity_schema) -> None:
    log: list[str] = []

    result = generate_from_schema(
        two_entity_schema,
        config={"output": {"templateRoot": str(TEMPLATE_DIRECTORY), "outputRoot": str(tmp_path)}},
        logger_callback=log.append,
    )

    assert result.file_names == ["entities/account.ts", "entities/contact.ts"]
    assert result.success
    assert "Skipping enums due to zero items" in log
