"""
MCP Server — Exposes the Prompt Optimizer as discoverable tools
for agents and MCP-aware editors.

Tools:
- analyze_prompt: Score a prompt and list missing elements
- classify_prompt: Assign a category label
- optimize_prompt: Rewrite a prompt and store it in history
- get_optimization_history: Retrieve past optimizations
"""

import asyncio
import json
import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from prompt_optimizer import PromptOptimizer, config, lexicon
from history_reporter.reporter import HistoryReporter
from history_reporter.store import SqliteKeyValueStore

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Create MCP server
server = Server("prompt-optimizer")

# Shared instances
optimizer = PromptOptimizer()
reporter = HistoryReporter(store=SqliteKeyValueStore())

INTENT_SCHEMA = {
    "type": "string",
    "description": "Task intent: " + ", ".join(value for value, _ in lexicon.INTENT_OPTIONS),
    "default": lexicon.GENERAL_INTENT,
}


@server.list_tools()
async def list_tools() -> list[Tool]:
    """Advertise available tools to MCP clients."""
    return [
        Tool(
            name="analyze_prompt",
            description=(
                "Analyze a prompt with deterministic heuristics. Returns clarity, "
                "specificity, structure, and strength scores (1-10), a category, "
                "confidence, token estimate, weaknesses, and which of the six "
                "prompt elements (context, role, format, examples, constraints, "
                "output specification) are missing or present."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "prompt": {"type": "string", "description": "The prompt to analyze"},
                    "intent": INTENT_SCHEMA,
                },
                "required": ["prompt"],
            },
        ),
        Tool(
            name="classify_prompt",
            description="Classify a prompt into a task category with a confidence value.",
            inputSchema={
                "type": "object",
                "properties": {
                    "prompt": {"type": "string", "description": "The prompt to classify"},
                },
                "required": ["prompt"],
            },
        ),
        Tool(
            name="optimize_prompt",
            description=(
                "Rewrite a prompt to add what it is missing. Weak prompts get a full "
                "rewrite, middling ones targeted additions, strong ones are left "
                "mostly alone. Returns the rewritten prompt and a list of changes."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "prompt": {"type": "string", "description": "The prompt to optimize"},
                    "intent": INTENT_SCHEMA,
                    "platform": {
                        "type": "string",
                        "description": "Target AI platform",
                        "default": config.DEFAULT_PLATFORM,
                    },
                    "tone": {
                        "type": "integer",
                        "description": "0 = casual, 100 = technical",
                        "minimum": 0,
                        "maximum": 100,
                        "default": config.DEFAULT_TONE,
                    },
                },
                "required": ["prompt"],
            },
        ),
        Tool(
            name="get_optimization_history",
            description="Retrieve recent optimizations, newest first, and the usage count.",
            inputSchema={
                "type": "object",
                "properties": {
                    "limit": {
                        "type": "integer",
                        "description": "Max results to return (default: all stored)",
                    },
                },
            },
        ),
    ]


def _json_content(data) -> list[TextContent]:
    return [TextContent(type="text", text=json.dumps(data, indent=2, default=str))]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls from MCP clients."""

    if name == "analyze_prompt":
        record = optimizer.analyze(
            arguments.get("prompt", ""),
            arguments.get("intent", lexicon.GENERAL_INTENT),
        )
        return _json_content(record.model_dump(mode="json"))

    elif name == "classify_prompt":
        result = optimizer.classify(arguments.get("prompt", ""))
        return _json_content({"category": result.category, "confidence": result.confidence})

    elif name == "optimize_prompt":
        prompt = arguments.get("prompt", "")
        if not prompt or not prompt.strip():
            return [TextContent(type="text", text="Error: prompt is required")]

        try:
            tone = int(arguments.get("tone", config.DEFAULT_TONE))
            if not 0 <= tone <= 100:
                return [TextContent(type="text", text="Error: tone must be between 0 and 100")]

            outcome = optimizer.optimize(
                prompt,
                intent=arguments.get("intent", lexicon.GENERAL_INTENT),
                platform=arguments.get("platform", config.DEFAULT_PLATFORM),
                tone=tone,
            )
            if not outcome.ok:
                return [TextContent(type="text", text=f"Error: {outcome.message}")]

            await reporter.initialize()
            usage_count = await reporter.report(outcome.record)

            response = outcome.record.model_dump(mode="json")
            response["usage_count"] = usage_count
            return _json_content(response)

        except Exception as e:
            logger.error("optimize_prompt failed: %s", e, exc_info=True)
            return [TextContent(type="text", text=f"Error: {str(e)}")]

    elif name == "get_optimization_history":
        try:
            await reporter.initialize()
            page = await reporter.get_page()
            limit = arguments.get("limit")
            data = page.model_dump(mode="json")
            if limit is not None:
                data["results"] = data["results"][: int(limit)]
            return _json_content(data)

        except Exception as e:
            logger.error("get_optimization_history failed: %s", e, exc_info=True)
            return [TextContent(type="text", text=f"Error: {str(e)}")]

    return [TextContent(type="text", text=f"Unknown tool: {name}")]


async def main():
    """Run the MCP server over stdio."""
    await reporter.initialize()
    logger.info("MCP Server starting (stdio mode)")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


if __name__ == "__main__":
    asyncio.run(main())
