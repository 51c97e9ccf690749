"""MCP server for treeview-mcp."""

import asyncio
import json
import logging
import os

from mcp.server import Server
from mcp.types import Tool, TextContent

from .tools.get_outline import get_outline
from .tools.generate_skeleton import generate_skeleton
from .tools.list_languages import list_languages

logger = logging.getLogger(__name__)


# Create server
server = Server("treeview-mcp")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="get_outline",
            description="Get the outline of a TypeScript or JavaScript file: classes, interfaces, functions, variables and imports with positions.",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Path to the source file (supports ~ for home directory)"
                    },
                    "source": {
                        "type": "string",
                        "description": "Inline source text, used instead of path"
                    },
                    "language": {
                        "type": "string",
                        "description": "Editor language id; inferred from the file extension when omitted",
                        "enum": ["typescript", "typescriptreact", "javascript", "javascriptreact"]
                    }
                }
            }
        ),
        Tool(
            name="generate_skeleton",
            description="Generate an interface (or a class with stub bodies) exposing the public constants and methods of a class or interface found in a file.",
            inputSchema={
                "type": "object",
                "properties": {
                    "entity": {
                        "type": "string",
                        "description": "Name of the class or interface to copy members from"
                    },
                    "name": {
                        "type": "string",
                        "description": "Name of the generated class or interface"
                    },
                    "path": {
                        "type": "string",
                        "description": "Path to the source file holding the entity"
                    },
                    "source": {
                        "type": "string",
                        "description": "Inline source text, used instead of path"
                    },
                    "include_bodies": {
                        "type": "boolean",
                        "description": "Generate a class whose methods throw 'Not implemented' instead of an interface",
                        "default": False
                    },
                    "extension": {
                        "type": "string",
                        "description": "File extension for a generated class",
                        "enum": ["ts", "js"],
                        "default": "ts"
                    }
                },
                "required": ["entity", "name"]
            }
        ),
        Tool(
            name="list_languages",
            description="List supported languages and file extensions.",
            inputSchema={
                "type": "object",
                "properties": {}
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "get_outline":
            result = await get_outline(
                path=arguments.get("path"),
                source=arguments.get("source"),
                language=arguments.get("language"),
            )
        elif name == "generate_skeleton":
            result = await generate_skeleton(
                entity=arguments["entity"],
                name=arguments["name"],
                path=arguments.get("path"),
                source=arguments.get("source"),
                include_bodies=arguments.get("include_bodies", False),
                extension=arguments.get("extension", "ts"),
            )
        elif name == "list_languages":
            result = list_languages()
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        logger.exception("Tool %s failed", name)
        return [TextContent(type="text", text=json.dumps({"error": str(e)}, indent=2))]


async def run_server():
    """Run the MCP server."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Main entry point."""
    # stdout carries the MCP stream
    logging.basicConfig(
        level=os.environ.get("TREEVIEW_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
