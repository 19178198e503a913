from __future__ import annotations

import pytest

from dataverse_gen.codegen.core.naming import (
    name_key,
    normalize_import_location,
    output_file_path,
    schema_name_key,
)
from dataverse_gen.codegen.core.schema import Action, EntityType, EnumType


@pytest.mark.parametrize(
    ("location", "expected"),
    [
        ("../enums/account_industrycode", "./enums/account_industrycode"),
        ("../../shared/types", "./../shared/types"),
        ("./enums/already_local", "./enums/already_local"),
        ("dataverse-ify", "dataverse-ify"),
        ("enums/../x", "enums/../x"),
        (None, None),
        ("", ""),
    ],
)
def test_normalize_import_location(location, expected) -> None:
    assert normalize_import_location(location) == expected


def test_output_file_path_joins_posix_style() -> None:
    assert output_file_path("entities", "account", ".ts") == "entities/account.ts"
    assert output_file_path(".", "metadata", ".ts") == "metadata.ts"
    assert output_file_path("enums", "statuscode", "") == "enums/statuscode"


def test_entities_use_schema_name_others_use_name() -> None:
    entity = EntityType.from_dict({"Name": "Account", "SchemaName": "account"})
    enum_type = EnumType.from_dict({"Name": "account_statuscode"})
    action = Action.from_dict({"Name": "WinOpportunity"})

    assert schema_name_key(entity) == "account"
    assert name_key(entity) == "Account"
    assert name_key(enum_type) == "account_statuscode"
    assert name_key(action) == "WinOpportunity"


def test_output_file_path_without_a_name() -> None:
    entity = EntityType.from_dict({"Name": "Account"})

    assert output_file_path("entities", schema_name_key(entity), ".ts") == "entities/.ts"
    assert output_file_path("entities", None, ".ts") == "entities/.ts"
