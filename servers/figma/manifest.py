"""Figma server manifest — tool definitions."""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

_FILE_KEY = ToolParameter(name="file_key", type="string", description="The key of the Figma file (from its URL).")
_TEAM_ID = ToolParameter(name="team_id", type="string", description="The ID of the Figma team.")
_NODE_IDS = ToolParameter(name="ids", type="string", description="Comma-separated list of node IDs.")
_PAGE_SIZE = ToolParameter(name="page_size", type="integer", description="Number of items per page.", required=False)

MANIFEST = ModuleManifest(
    module_name="figma",
    platform="Figma",
    description="Figma files, nodes, image renders, comments, team projects, components and styles.",
    tools=[
        ToolDefinition(
            name="get_me",
            description="Get the user associated with the access token.",
            parameters=[],
        ),
        # ---- Files ----
        ToolDefinition(
            name="get_file",
            description="Get a Figma file's document tree.",
            parameters=[
                _FILE_KEY,
                ToolParameter(name="depth", type="integer", description="How deep into the document tree to traverse.", required=False),
                ToolParameter(name="version", type="string", description="A specific version ID to fetch.", required=False),
            ],
        ),
        ToolDefinition(
            name="get_file_nodes",
            description="Get specific nodes from a Figma file.",
            parameters=[
                _FILE_KEY,
                _NODE_IDS,
                ToolParameter(name="depth", type="integer", description="How deep into each node's subtree to traverse.", required=False),
            ],
        ),
        ToolDefinition(
            name="get_images",
            description="Render nodes of a Figma file as images and return their URLs.",
            parameters=[
                _FILE_KEY,
                _NODE_IDS,
                ToolParameter(
                    name="format", type="string", description="Image format.",
                    required=False, enum=["jpg", "png", "svg", "pdf"],
                ),
                ToolParameter(name="scale", type="number", description="Image scale factor (0.01 to 4).", required=False),
            ],
        ),
        ToolDefinition(
            name="get_image_fills",
            description="Get download URLs for all image fills in a Figma file.",
            parameters=[_FILE_KEY],
        ),
        ToolDefinition(
            name="get_file_versions",
            description="Get the version history of a Figma file.",
            parameters=[_FILE_KEY],
        ),
        # ---- Comments ----
        ToolDefinition(
            name="get_comments",
            description="Get the comments on a Figma file.",
            parameters=[_FILE_KEY],
        ),
        ToolDefinition(
            name="post_comment",
            description="Post a comment on a Figma file.",
            parameters=[
                _FILE_KEY,
                ToolParameter(name="message", type="string", description="The comment text."),
                ToolParameter(name="node_id", type="string", description="Node to attach the comment to.", required=False),
            ],
        ),
        # ---- Teams & projects ----
        ToolDefinition(
            name="get_team_projects",
            description="List the projects of a Figma team.",
            parameters=[_TEAM_ID],
        ),
        ToolDefinition(
            name="get_project_files",
            description="List the files in a Figma project.",
            parameters=[ToolParameter(name="project_id", type="string", description="The ID of the Figma project.")],
        ),
        ToolDefinition(
            name="get_team_components",
            description="List the published components of a Figma team library.",
            parameters=[_TEAM_ID, _PAGE_SIZE],
        ),
        ToolDefinition(
            name="get_team_styles",
            description="List the published styles of a Figma team library.",
            parameters=[_TEAM_ID, _PAGE_SIZE],
        ),
    ],
)
