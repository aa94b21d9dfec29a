"""HTTP tool server for the File Manager.

Exposes every file organization tool as a JSON endpoint so agent runtimes
and chat frontends can call them.

Usage:
    python -m uvicorn file_manager.api:app --host 127.0.0.1 --port 8000

Or via CLI:
    python -m file_manager.cli serve
"""

import locale
import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .settings import settings
from .tools import FileManagerTools

# Configure logging
logging.basicConfig(
    level=settings.server.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

try:
    # Listing timestamps use the user's date format
    locale.setlocale(locale.LC_TIME, "")
except locale.Error as e:
    logger.warning(f"Locale konnte nicht gesetzt werden: {e}")

# FastAPI App
app = FastAPI(
    title="File Manager Tool Server",
    description="Organize Downloads and Documents: move, copy, list and unzip files",
    version="1.0.0",
)

# Lazy-loading, initialized on the first request
_tools: Optional[FileManagerTools] = None


def get_tools() -> FileManagerTools:
    """Lazy-load the tool registry."""
    global _tools
    if _tools is None:
        _tools = FileManagerTools()
    return _tools


def set_tools(tools: Optional[FileManagerTools]) -> None:
    """Replace the tool registry (tests use this to inject fake roots)."""
    global _tools
    _tools = tools


# ============================================================================
# Pydantic Models
# ============================================================================

class ToolCallRequest(BaseModel):
    """Arguments for a single tool call."""
    arguments: Dict[str, Union[str, int, float, None]] = Field(
        default_factory=dict,
        description="Flat mapping of argument names to values",
    )


class TextContent(BaseModel):
    """Text payload of a tool result."""
    type: str = "text"
    text: str


class ToolCallResponse(BaseModel):
    """Result of a tool call."""
    content: List[TextContent]
    isError: bool = False


class ToolInfo(BaseModel):
    """Tool description with its JSON input schema."""
    name: str
    description: str
    inputSchema: Dict[str, Any]


class ToolsResponse(BaseModel):
    """Tool catalog."""
    tools: List[ToolInfo]


# ============================================================================
# API Endpoints
# ============================================================================

@app.get("/")
async def root():
    """API root with basic information."""
    return {
        "name": "File Manager Tool Server",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
        "tools": "/v1/tools",
    }


@app.get("/health")
async def health():
    """Health check: are the configured root directories there?"""
    tools = get_tools()
    roots = {
        "downloads": tools.roots.downloads,
        "documents": tools.roots.documents,
    }

    health_status: Dict[str, Any] = {"status": "ok"}
    for name, path in roots.items():
        if path.is_dir():
            health_status[name] = str(path)
        else:
            health_status[name] = f"missing: {path}"
            health_status["status"] = "degraded"

    return health_status


@app.get("/v1/tools", response_model=ToolsResponse)
async def list_tools():
    """List all tools with their input schemas."""
    return ToolsResponse(tools=[ToolInfo(**tool) for tool in get_tools().list_tools()])


@app.post("/v1/tools/{name}", response_model=ToolCallResponse)
async def call_tool(name: str, request: Optional[ToolCallRequest] = None):
    """
    Call a tool by name.

    Tool failures are returned as results with ``isError`` set, like any
    tool-calling protocol expects. Only unknown tool names produce a 404.
    """
    tools = get_tools()
    arguments = request.arguments if request is not None else {}

    result = tools.call(name, arguments)
    if not tools.has_tool(name):
        return JSONResponse(status_code=404, content=result.to_content())

    return ToolCallResponse(**result.to_content())


# ============================================================================
# Server Entry Point
# ============================================================================

def run_server(host: Optional[str] = None, port: Optional[int] = None, reload: bool = False):
    """Start the API server."""
    import uvicorn
    host = host or settings.server.host
    port = port or settings.server.port
    logger.info(f"Starting File Manager Tool Server on {host}:{port}")
    logger.info(f"Downloads: {settings.roots.downloads}, Documents: {settings.roots.documents}")
    uvicorn.run("file_manager.api:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    run_server()
