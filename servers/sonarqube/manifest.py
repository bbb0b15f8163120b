"""SonarQube server manifest — tool definitions."""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

_PROJECT_KEY = ToolParameter(name="project_key", type="string", description="The key of the SonarQube project.")
_PAGE = ToolParameter(name="page", type="integer", description="Page number (default 1).", required=False, default=1)
_PAGE_SIZE = ToolParameter(
    name="pageSize", type="integer", description="Page size (default 100, max 500).", required=False, default=100,
)


def _list(name: str, description: str, values: list[str] | None = None) -> ToolParameter:
    items: dict = {"type": "string"}
    if values:
        items["enum"] = values
    return ToolParameter(name=name, type="array", description=description, required=False, items=items)


MANIFEST = ModuleManifest(
    module_name="sonarqube",
    platform="SonarQube",
    description="SonarQube projects, issues, measures, quality gates, security hotspots and sources.",
    tools=[
        ToolDefinition(
            name="list_projects",
            description="List SonarQube projects.",
            parameters=[
                ToolParameter(name="query", type="string", description="Filter projects by name or key.", required=False),
                _PAGE,
                _PAGE_SIZE,
            ],
        ),
        ToolDefinition(
            name="get_issues",
            description="Search the issues of a project.",
            parameters=[
                _PROJECT_KEY,
                _list("severities", "Severities to include.", ["INFO", "MINOR", "MAJOR", "CRITICAL", "BLOCKER"]),
                _list("types", "Issue types to include.", ["CODE_SMELL", "BUG", "VULNERABILITY"]),
                _list("statuses", "Issue statuses to include.", ["OPEN", "CONFIRMED", "REOPENED", "RESOLVED", "CLOSED"]),
                _PAGE,
                _PAGE_SIZE,
            ],
        ),
        ToolDefinition(
            name="get_measures",
            description="Get metric measures for a component (project, directory or file).",
            parameters=[
                ToolParameter(name="component", type="string", description="Component key."),
                ToolParameter(
                    name="metric_keys", type="array",
                    description="Metric keys, e.g. ['coverage', 'bugs', 'code_smells'].",
                    items={"type": "string"},
                ),
            ],
        ),
        ToolDefinition(
            name="get_quality_gate_status",
            description="Get the quality gate status of a project.",
            parameters=[
                _PROJECT_KEY,
                ToolParameter(name="branch", type="string", description="Branch name.", required=False),
            ],
        ),
        ToolDefinition(
            name="get_hotspots",
            description="Search the security hotspots of a project.",
            parameters=[
                _PROJECT_KEY,
                ToolParameter(
                    name="status", type="string", description="Hotspot status.",
                    required=False, enum=["TO_REVIEW", "REVIEWED"],
                ),
                _PAGE,
                _PAGE_SIZE,
            ],
        ),
        ToolDefinition(
            name="list_metrics",
            description="List the metrics known to the SonarQube server.",
            parameters=[_PAGE, _PAGE_SIZE],
        ),
        ToolDefinition(
            name="get_system_health",
            description="Get the health status of the SonarQube server.",
            parameters=[],
        ),
        ToolDefinition(
            name="get_source",
            description="Get source code lines of a file with coverage and issue annotations.",
            parameters=[
                ToolParameter(name="key", type="string", description="File key."),
                ToolParameter(name="from_line", type="integer", description="First line to return.", required=False),
                ToolParameter(name="to_line", type="integer", description="Last line to return.", required=False),
            ],
        ),
    ],
)
