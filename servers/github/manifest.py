"""GitHub server manifest — tool definitions."""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

# Common parameters reused across tools
_OWNER = ToolParameter(name="owner", type="string", description="Repository owner (username or organization).")
_REPO = ToolParameter(name="repo", type="string", description="Repository name.")
_PAGE = ToolParameter(name="page", type="integer", description="Page number for pagination (default 1).", required=False, default=1)
_PER_PAGE = ToolParameter(
    name="perPage", type="integer", description="Number of results per page (default 30, max 100).",
    required=False, default=30,
)
_FILE = {
    "type": "object",
    "properties": {
        "path": {"type": "string"},
        "content": {"type": "string"},
    },
    "required": ["path", "content"],
}

MANIFEST = ModuleManifest(
    module_name="github",
    platform="GitHub",
    description="GitHub repositories, files, branches, issues, pull requests and search.",
    tools=[
        # ---- Repositories ----
        ToolDefinition(
            name="search_repositories",
            description="Search for GitHub repositories.",
            parameters=[
                ToolParameter(name="query", type="string", description="Search query (see GitHub search syntax)."),
                _PAGE,
                _PER_PAGE,
            ],
        ),
        ToolDefinition(
            name="get_repository",
            description="Get details of a repository.",
            parameters=[_OWNER, _REPO],
        ),
        ToolDefinition(
            name="create_repository",
            description="Create a new GitHub repository in your account.",
            parameters=[
                ToolParameter(name="name", type="string", description="Repository name."),
                ToolParameter(name="description", type="string", description="Repository description.", required=False),
                ToolParameter(name="private", type="boolean", description="Whether the repository should be private.", required=False),
                ToolParameter(name="autoInit", type="boolean", description="Initialize with README.md.", required=False),
            ],
        ),
        ToolDefinition(
            name="fork_repository",
            description="Fork a GitHub repository to your account or specified organization.",
            parameters=[
                _OWNER,
                _REPO,
                ToolParameter(
                    name="organization", type="string",
                    description="Optional: organization to fork to (defaults to your personal account).",
                    required=False,
                ),
            ],
        ),
        # ---- Files ----
        ToolDefinition(
            name="get_file_contents",
            description="Get the contents of a file or directory from a GitHub repository.",
            parameters=[
                _OWNER,
                _REPO,
                ToolParameter(name="path", type="string", description="Path to the file or directory."),
                ToolParameter(name="branch", type="string", description="Branch to get contents from.", required=False),
            ],
        ),
        ToolDefinition(
            name="create_or_update_file",
            description="Create or update a single file in a GitHub repository.",
            parameters=[
                _OWNER,
                _REPO,
                ToolParameter(name="path", type="string", description="Path where to create/update the file."),
                ToolParameter(name="content", type="string", description="Content of the file."),
                ToolParameter(name="message", type="string", description="Commit message."),
                ToolParameter(name="branch", type="string", description="Branch to create/update the file in."),
                ToolParameter(
                    name="sha", type="string",
                    description="SHA of the file being replaced (required when updating existing files).",
                    required=False,
                ),
            ],
        ),
        ToolDefinition(
            name="push_files",
            description="Push multiple files to a GitHub repository in a single commit.",
            parameters=[
                _OWNER,
                _REPO,
                ToolParameter(name="branch", type="string", description="Branch to push to (e.g. 'main')."),
                ToolParameter(name="files", type="array", description="Array of files to push.", items=_FILE),
                ToolParameter(name="message", type="string", description="Commit message."),
            ],
        ),
        # ---- Branches & commits ----
        ToolDefinition(
            name="create_branch",
            description="Create a new branch in a GitHub repository.",
            parameters=[
                _OWNER,
                _REPO,
                ToolParameter(name="branch", type="string", description="Name for the new branch."),
                ToolParameter(
                    name="from_branch", type="string",
                    description="Optional: source branch to create from (defaults to the repository's default branch).",
                    required=False,
                ),
            ],
        ),
        ToolDefinition(
            name="list_commits",
            description="Get a list of commits of a branch in a GitHub repository.",
            parameters=[
                _OWNER,
                _REPO,
                ToolParameter(name="sha", type="string", description="Branch name or commit SHA to list from.", required=False),
                _PAGE,
                _PER_PAGE,
            ],
        ),
        # ---- Issues ----
        ToolDefinition(
            name="list_issues",
            description="List issues in a GitHub repository with filtering options.",
            parameters=[
                _OWNER,
                _REPO,
                ToolParameter(
                    name="state", type="string", description="Issue state filter.",
                    required=False, enum=["open", "closed", "all"],
                ),
                ToolParameter(name="labels", type="array", description="Label names to filter by.", required=False, items={"type": "string"}),
                _PAGE,
                _PER_PAGE,
            ],
        ),
        ToolDefinition(
            name="get_issue",
            description="Get details of a specific issue in a GitHub repository.",
            parameters=[
                _OWNER,
                _REPO,
                ToolParameter(name="issue_number", type="integer", description="Issue number."),
            ],
        ),
        ToolDefinition(
            name="create_issue",
            description="Create a new issue in a GitHub repository.",
            parameters=[
                _OWNER,
                _REPO,
                ToolParameter(name="title", type="string", description="Issue title."),
                ToolParameter(name="body", type="string", description="Issue body.", required=False),
                ToolParameter(name="assignees", type="array", description="Usernames to assign.", required=False, items={"type": "string"}),
                ToolParameter(name="labels", type="array", description="Labels to apply.", required=False, items={"type": "string"}),
            ],
        ),
        ToolDefinition(
            name="add_issue_comment",
            description="Add a comment to an existing issue.",
            parameters=[
                _OWNER,
                _REPO,
                ToolParameter(name="issue_number", type="integer", description="Issue number."),
                ToolParameter(name="body", type="string", description="Comment text."),
            ],
        ),
        # ---- Pull requests ----
        ToolDefinition(
            name="create_pull_request",
            description="Create a new pull request in a GitHub repository.",
            parameters=[
                _OWNER,
                _REPO,
                ToolParameter(name="title", type="string", description="Pull request title."),
                ToolParameter(name="head", type="string", description="The name of the branch where your changes are implemented."),
                ToolParameter(name="base", type="string", description="The name of the branch you want the changes pulled into."),
                ToolParameter(name="body", type="string", description="Pull request body/description.", required=False),
                ToolParameter(name="draft", type="boolean", description="Whether to create the pull request as a draft.", required=False),
            ],
        ),
        # ---- Search ----
        ToolDefinition(
            name="search_code",
            description="Search for code across GitHub repositories.",
            parameters=[
                ToolParameter(name="q", type="string", description="Search query (see GitHub code search syntax)."),
                _PAGE,
                _PER_PAGE,
            ],
        ),
        ToolDefinition(
            name="search_issues",
            description="Search for issues and pull requests across GitHub repositories.",
            parameters=[
                ToolParameter(name="q", type="string", description="Search query (see GitHub issue search syntax)."),
                ToolParameter(
                    name="sort", type="string", description="Sort field.", required=False,
                    enum=["comments", "reactions", "created", "updated"],
                ),
                ToolParameter(name="order", type="string", description="Sort order.", required=False, enum=["asc", "desc"]),
                _PAGE,
                _PER_PAGE,
            ],
        ),
        ToolDefinition(
            name="search_users",
            description="Search for users on GitHub.",
            parameters=[
                ToolParameter(name="q", type="string", description="Search query (see GitHub user search syntax)."),
                _PAGE,
                _PER_PAGE,
            ],
        ),
    ],
)
