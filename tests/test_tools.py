"""Tests for tools module."""

import pytest
from treeview_mcp.tools.get_outline import get_outline, load_document
from treeview_mcp.tools.generate_skeleton import generate_skeleton
from treeview_mcp.tools.list_languages import list_languages


SERVICE_SOURCE = '''import { Injectable } from "core";

export class UserService {
    static readonly PAGE_SIZE = 20;
    private cache = {};

    constructor(api: string) {}

    find(id: number, active = true): User {
        return this.lookup(id);
    }

    private lookup(id: number): User {
        return null;
    }
}
'''


@pytest.mark.asyncio
async def test_get_outline_from_file(tmp_path):
    """Test outlining a file on disk."""
    source_file = tmp_path / "service.ts"
    source_file.write_text(SERVICE_SOURCE, encoding="utf-8")

    result = await get_outline(path=str(source_file))

    assert result["language"] == "typescript"
    outline = result["outline"]
    assert outline["strict"] is False
    assert "interfaces" not in outline
    assert outline["imports"][0]["name"] == "core: Injectable"

    service = outline["classes"][0]
    assert service["name"] == "UserService"
    assert [m["name"] for m in service["methods"]] == ["constructor", "find", "lookup"]
    assert "type" not in service["methods"][0]
    assert service["methods"][1]["position"]["start"] == {"line": 8, "character": 4}


@pytest.mark.asyncio
async def test_get_outline_inline_source():
    """Test outlining inline source."""
    result = await get_outline(source="const a = 1;", language="javascript")

    assert result["language"] == "javascript"
    assert result["outline"]["variables"][0]["name"] == "@a"


@pytest.mark.asyncio
async def test_get_outline_errors(tmp_path):
    """Test error payloads for unusable input."""
    assert "error" in await get_outline()
    assert "error" in await get_outline(path=str(tmp_path / "missing.ts"))

    other = tmp_path / "script.py"
    other.write_text("x = 1\n", encoding="utf-8")
    assert "Unsupported file type" in (await get_outline(path=str(other)))["error"]

    result = await get_outline(source="x", language="php")
    assert result["error"] == "Unsupported language: php"


def test_load_document_language_override(tmp_path):
    """Test an explicit language wins over the extension."""
    source_file = tmp_path / "script.js"
    source_file.write_text("let a;\n", encoding="utf-8")

    document = load_document(path=str(source_file), language="typescript")

    assert document.language_id == "typescript"


@pytest.mark.asyncio
async def test_generate_interface_skeleton():
    """Test generating an interface from a class."""
    result = await generate_skeleton(entity="UserService", name="UserRepository", source=SERVICE_SOURCE)

    assert result["file_name"] == "IUserRepository.ts"
    assert result["text"] == (
        "export interface UserRepository {\n"
        "    public static readonly PAGE_SIZE = 20;\n"
        "\n"
        "    public constructor(api: string);\n"
        "    public find(id: number, active: any = true): User;\n"
        "}\n"
    )
    assert result["edits"][0]["start"] == [0, 0]
    assert len(result["edits"]) == 6


@pytest.mark.asyncio
async def test_generate_class_skeleton():
    """Test generating a class with stub bodies."""
    result = await generate_skeleton(
        entity="UserService",
        name="FakeUserService",
        source=SERVICE_SOURCE,
        include_bodies=True,
        extension="js",
    )

    assert result["file_name"] == "FakeUserService.js"
    assert result["text"].startswith("export class FakeUserService {\n")
    assert result["text"].count('throw new Error("Not implemented");') == 2


@pytest.mark.asyncio
async def test_generate_skeleton_errors():
    """Test error payloads for unknown entities and extensions."""
    result = await generate_skeleton(entity="Missing", name="X", source=SERVICE_SOURCE)
    assert result["error"] == "Class or interface not found: Missing"

    result = await generate_skeleton(entity="UserService", name="X", source=SERVICE_SOURCE, include_bodies=True, extension="rb")
    assert result["error"] == "Unsupported extension: rb"


def test_list_languages():
    """Test listing supported languages."""
    result = list_languages()

    assert result["count"] == 4
    typescript = next(l for l in result["languages"] if l["language"] == "typescript")
    assert typescript["grammar"] == "typescript"
    assert ".ts" in typescript["extensions"]
