"""MCP server that exposes the docspot function locator to LLM clients.

The tool returns the source text and existing documentation of the function
around a file position, which is what a client needs to write or update
that function's documentation.
"""

import json
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from docspot.config import load_locator_config
from docspot.locate import locate_function_in_file


# Initialize MCP server
app = Server("docspot")


@app.list_tools()
async def list_tools() -> list[Tool]:
    """Declare available tools."""
    return [
        Tool(
            name="docspot_locate",
            description=(
                "Find the function around a line of a source file and return its "
                "name, signature, body, line range and existing documentation block. "
                "Supports JavaScript, TypeScript, Python, Java, C#, C and C++, with a "
                "best-effort fallback for other languages."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Path to the source file",
                    },
                    "line": {
                        "type": "integer",
                        "minimum": 1,
                        "description": "Cursor line, 1-based as shown in an editor",
                    },
                    "language": {
                        "type": "string",
                        "description": (
                            "Language tag such as 'typescript' or 'python'. "
                            "Inferred from the file extension when omitted."
                        ),
                    },
                },
                "required": ["path", "line"],
            },
        ),
    ]


@app.call_tool()
async def call_tool(name: str, arguments: Any) -> list[TextContent]:
    """Handle tool calls by routing to the matching handler."""
    if name == "docspot_locate":
        return await _handle_locate(
            arguments["path"],
            arguments["line"],
            arguments.get("language"),
        )

    raise ValueError(f"Unknown tool: {name}")


async def _handle_locate(path: str, line: int, language: str | None = None) -> list[TextContent]:
    """Handle docspot_locate tool calls.

    Args:
        path: Source file path
        line: 1-based cursor line
        language: Optional language tag

    Returns:
        List containing a single TextContent with the JSON record or a message
    """
    try:
        if line < 1:
            raise ValueError("Line numbers start at 1")

        config = load_locator_config()
        record = locate_function_in_file(Path(path), line - 1, language, config)

        if record is None:
            return [
                TextContent(
                    type="text",
                    text=f"No function found at {path}:{line}",
                )
            ]

        return [
            TextContent(
                type="text",
                text=json.dumps(record.to_dict(), indent=2),
            )
        ]

    except (FileNotFoundError, ValueError) as e:
        return [
            TextContent(
                type="text",
                text=f"Error: {e}",
            )
        ]
    except Exception as e:
        return [
            TextContent(
                type="text",
                text=f"Unexpected error: {e}",
            )
        ]


async def main():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())


if __name__ == "__main__":
    import asyncio

    asyncio.run(main())
