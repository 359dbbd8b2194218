"""MCP server: exposes the shelter to LLM clients via stdio transport."""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from petfinder.config import Config
from petfinder.seed import seeded_shelter
from petfinder.session import no_results_message
from petfinder.shelter import Shelter

logger = logging.getLogger(__name__)


def _make_server(shelter: Shelter) -> Server:
    server = Server("petfinder")

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [
            Tool(
                name="list_available_pets",
                description="List every pet that is still available for adoption.",
                inputSchema={"type": "object", "properties": {}},
            ),
            Tool(
                name="search_pets",
                description=(
                    "Search available pets by type and/or breed. Matching is exact "
                    "and case-sensitive; omitted filters match anything."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        "type": {
                            "type": "string",
                            "description": "Pet type, e.g. 'dog' or 'cat'",
                        },
                        "breed": {
                            "type": "string",
                            "description": "Breed, e.g. 'Golden Retriever'",
                        },
                    },
                },
            ),
            Tool(
                name="adopt_pet",
                description=(
                    "Adopt an available pet by name (case-insensitive). "
                    "Adopted pets no longer show up in listings or searches."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        "name": {
                            "type": "string",
                            "description": "Name of the pet to adopt",
                        }
                    },
                    "required": ["name"],
                },
            ),
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        try:
            result = _dispatch(name, arguments or {}, shelter)
            return [TextContent(type="text", text=json.dumps(result, indent=2))]
        except Exception as exc:
            logger.debug("Tool %s failed: %s", name, exc)
            return [TextContent(type="text", text=json.dumps({"error": str(exc)}))]

    return server


def _dispatch(name: str, args: dict[str, Any], shelter: Shelter) -> Any:
    if name == "list_available_pets":
        return [p.to_dict() for p in shelter.list_available()]

    elif name == "search_pets":
        type_ = args.get("type") or None
        breed = args.get("breed") or None
        pets = shelter.search(type_, breed)
        if not pets:
            return {"pets": [], "message": no_results_message(type_, breed)}
        return {"pets": [p.to_dict() for p in pets]}

    elif name == "adopt_pet":
        pet_name = args.get("name") or ""
        return {"name": pet_name, "adopted": shelter.adopt(pet_name)}

    else:
        raise ValueError(f"Unknown tool: {name}")


async def run_server(config: Config | None = None) -> None:
    config = config or Config.load_from_cwd()
    shelter = seeded_shelter(adopt_all_matches=config.adopt_all_matches)
    server = _make_server(shelter)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
