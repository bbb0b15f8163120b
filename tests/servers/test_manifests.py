"""Tests for server manifests — ensure all servers have valid tool definitions.

These tests import each server's manifest and verify structural correctness:
tool names follow conventions, required fields are present, and parameter
types are valid.
"""

from __future__ import annotations

import importlib
import re

import pytest

from servers import PLATFORMS

VALID_PARAM_TYPES = {"string", "integer", "number", "boolean", "array", "object"}
TOOL_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")


def _all_manifests():
    return [
        (platform, importlib.import_module(f"servers.{platform}.manifest").MANIFEST)
        for platform in PLATFORMS
    ]


# ===================================================================
# Parametrized tests
# ===================================================================


@pytest.mark.parametrize("platform,manifest", _all_manifests(), ids=list(PLATFORMS))
class TestManifestStructure:
    """Structural validation for server manifests."""

    def test_module_name_matches_package(self, platform, manifest):
        assert manifest.module_name == platform

    def test_has_platform_and_description(self, platform, manifest):
        assert manifest.platform, f"{platform}: platform is empty"
        assert manifest.description, f"{platform}: description is empty"

    def test_has_tools(self, platform, manifest):
        assert len(manifest.tools) > 0, f"{platform}: no tools defined"

    def test_tool_names_are_snake_case(self, platform, manifest):
        """Tool names are plain identifiers, no module prefix."""
        for tool in manifest.tools:
            assert TOOL_NAME_PATTERN.match(tool.name), (
                f"{platform}: tool '{tool.name}' is not snake_case"
            )

    def test_tools_have_descriptions(self, platform, manifest):
        for tool in manifest.tools:
            assert tool.description, f"{platform}: tool '{tool.name}' has empty description"

    def test_parameter_types_are_valid(self, platform, manifest):
        for tool in manifest.tools:
            for param in tool.parameters:
                assert param.type in VALID_PARAM_TYPES, (
                    f"{platform}: tool '{tool.name}' param '{param.name}' "
                    f"has invalid type '{param.type}', expected one of "
                    f"{VALID_PARAM_TYPES}"
                )

    def test_parameters_have_descriptions(self, platform, manifest):
        for tool in manifest.tools:
            for param in tool.parameters:
                assert param.description, (
                    f"{platform}: tool '{tool.name}' param '{param.name}' has empty description"
                )

    def test_array_parameters_declare_items(self, platform, manifest):
        for tool in manifest.tools:
            for param in tool.parameters:
                if param.type == "array":
                    assert param.items, f"{platform}: tool '{tool.name}' param '{param.name}' has no items schema"

    def test_required_parameters_have_no_default(self, platform, manifest):
        for tool in manifest.tools:
            for param in tool.parameters:
                if param.required:
                    assert param.default is None, (
                        f"{platform}: required param '{tool.name}.{param.name}' declares a default"
                    )

    def test_no_duplicate_tool_names(self, platform, manifest):
        names = [t.name for t in manifest.tools]
        assert len(names) == len(set(names)), (
            f"{platform}: duplicate tool names found: "
            f"{[n for n in names if names.count(n) > 1]}"
        )

    def test_no_duplicate_parameter_names(self, platform, manifest):
        for tool in manifest.tools:
            param_names = [p.name for p in tool.parameters]
            assert len(param_names) == len(set(param_names)), (
                f"{platform}: tool '{tool.name}' has duplicate params: "
                f"{[n for n in param_names if param_names.count(n) > 1]}"
            )

    def test_input_schema_lists_required(self, platform, manifest):
        for tool in manifest.tools:
            schema = tool.input_schema()
            assert schema["type"] == "object"
            assert set(schema["required"]) <= set(schema["properties"])


def test_azure_devops_catalog():
    manifest = importlib.import_module("servers.azure_devops.manifest").MANIFEST
    assert manifest.tool_names == [
        "get_projects", "get_repositories", "create_repository", "search_repositories",
        "fork_repository", "get_branches", "create_branch", "update_branch", "get_commits",
        "get_file_content", "update_file_content", "create_or_update_file", "push_files",
        "create_pull_request", "get_issue", "add_issue_comment", "search_code",
        "search_work_items", "search_users",
    ]
