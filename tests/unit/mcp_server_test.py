"""Tests for the MCP server tool definitions."""

from __future__ import annotations

from typing import Any

import pytest

from design_tree.core.compactor import InvalidNodeDataError
from design_tree.mcp.server import compact_screen, create_mcp_server, expand_nodes


class TestMcpServerCreation:
    def test_creates_server(self) -> None:
        server = create_mcp_server()
        assert server is not None
        assert server.name == "design-tree"


class TestTools:
    @pytest.mark.asyncio
    async def test_expand_nodes(self, canvas_with_section: dict[str, Any]) -> None:
        result = await expand_nodes({"0:1": canvas_with_section})
        assert [(item["kind"], item["id"]) for item in result] == [
            ("screen", "1:1"),
            ("screen", "2:2"),
            ("note", "1:2"),
            ("note", "2:3"),
        ]
        assert result[1]["section"] == "Checkout flow"

    @pytest.mark.asyncio
    async def test_compact_screen(self, login_screen: dict[str, Any]) -> None:
        result = await compact_screen(login_screen)
        assert result.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert "<Title>Welcome back</Title>" in result

    @pytest.mark.asyncio
    async def test_compact_screen_rejects_invalid_input(self) -> None:
        with pytest.raises(InvalidNodeDataError):
            await compact_screen(None)  # type: ignore[arg-type]
