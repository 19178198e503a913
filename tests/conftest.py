from __future__ import annotations

from typing import Any

import pytest

from dataverse_gen.codegen.core.config import load_config, merge_options
from dataverse_gen.codegen.core.schema import SchemaModel
from dataverse_gen.codegen.languages.typescript import TypescriptGenerator

from helpers import ALL_TEMPLATES, FakeTemplateProvider, RecordingRenderer, RecordingWriter


@pytest.fixture
def two_entity_schema() -> dict[str, Any]:
    return {
        "EntityTypes": [
            {
                "Name": "Account",
                "SchemaName": "account",
                "EntitySetName": "accounts",
                "Properties": [
                    {"Name": "name", "TypescriptType": {"name": "string"}},
                    {
                        "Name": "industrycode",
                        "TypescriptType": {
                            "name": "account_account_industrycode",
                            "importLocation": "../enums/account_account_industrycode",
                        },
                    },
                ],
            },
            {
                "Name": "Contact",
                "SchemaName": "contact",
                "EntitySetName": "contacts",
                "Properties": [
                    {"Name": "fullname", "TypescriptType": {"name": "string"}},
                ],
            },
        ],
        "EnumTypes": [],
        "Actions": [],
        "Functions": [],
        "ComplexTypes": [],
    }


@pytest.fixture
def two_entity_model(two_entity_schema: dict[str, Any]) -> SchemaModel:
    return SchemaModel.from_dict(two_entity_schema)


@pytest.fixture
def options() -> dict[str, Any]:
    return {
        "output": {
            "templateRoot": "templates",
            "outputRoot": "out",
            "fileSuffix": ".ts",
        },
        "generateIndex": True,
    }


@pytest.fixture
def make_generator(options: dict[str, Any]):
    def _make(
        model: SchemaModel,
        templates: list[str] | None = None,
        renderer: RecordingRenderer | None = None,
        overrides: dict[str, Any] | None = None,
    ):
        names = ALL_TEMPLATES if templates is None else templates
        provider = FakeTemplateProvider({name: name for name in names})
        writer = RecordingWriter()
        renderer = renderer or RecordingRenderer()
        log: list[str] = []
        config = load_config(custom_config=merge_options(options, overrides))
        generator = TypescriptGenerator(
            model, writer, provider, config, logger_callback=log.append, renderer=renderer
        )
        return generator, writer, renderer, log

    return _make
