from __future__ import annotations

from typing import Any, Callable

ALL_TEMPLATES = [
    "allAttributeTypes.d.ts.j2",
    "entity.ts.j2",
    "enum.ts.j2",
    "action.ts.j2",
    "function.ts.j2",
    "complextype.ts.j2",
    "metadata.ts.j2",
    "index.ts.j2",
]


class FakeTemplateProvider:
    def __init__(self, templates: dict[str, str]) -> None:
        self.templates = templates
        self.lookups: list[str] = []

    def get_template(self, template_id: str) -> str | None:
        self.lookups.append(template_id)
        return self.templates.get(template_id)


class RecordingWriter:
    def __init__(self) -> None:
        self.folders: list[str] = []
        self.files: dict[str, str] = {}
        self.write_order: list[str] = []

    def create_sub_folder(self, path: str) -> None:
        self.folders.append(path)

    def write(self, path: str, content: str) -> None:
        self.files[path] = content
        self.write_order.append(path)


class RecordingRenderer:
    """Renders ``<template>|<Name>`` and keeps every context it was given."""

    def __init__(self, fail_when: Callable[[dict[str, Any]], str | None] | None = None) -> None:
        self.contexts: list[tuple[str, dict[str, Any]]] = []
        self.fail_when = fail_when

    def __call__(self, template: str, context: dict[str, Any]) -> str:
        self.contexts.append((template, context))
        if self.fail_when:
            message = self.fail_when(context)
            if message:
                raise ValueError(message)
        return f"{template}|{context.get('Name', '')}"

    def contexts_for(self, template: str) -> list[dict[str, Any]]:
        return [context for text, context in self.contexts if text == template]
