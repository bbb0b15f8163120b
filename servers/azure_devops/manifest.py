"""Azure DevOps server manifest — tool definitions.

Covers projects, Git repositories, branches, commits, files, pull requests,
work items and organisation users.
"""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

# Common parameters reused across tools
_PROJECT = ToolParameter(name="project_id", type="string", description="The ID or name of the project.")
_REPO = ToolParameter(name="repository_id", type="string", description="The ID or name of the repository.")
_TOP = ToolParameter(
    name="top", type="integer", description="Maximum number of results to return (default 100).",
    required=False, default=100,
)
_FILE = {
    "type": "object",
    "properties": {
        "path": {"type": "string", "description": "Path to the file"},
        "content": {"type": "string", "description": "Content of the file"},
    },
    "required": ["path", "content"],
}

MANIFEST = ModuleManifest(
    module_name="azure_devops",
    platform="Azure DevOps",
    description="Azure DevOps projects, Git repositories, branches, files, pull requests and work items.",
    tools=[
        # ---- Projects & repositories ----
        ToolDefinition(
            name="get_projects",
            description="Get a list of Azure DevOps projects.",
            parameters=[],
        ),
        ToolDefinition(
            name="get_repositories",
            description="Get a list of repositories for a project.",
            parameters=[_PROJECT],
        ),
        ToolDefinition(
            name="create_repository",
            description="Create a new repository.",
            parameters=[
                _PROJECT,
                ToolParameter(name="name", type="string", description="The name of the repository."),
                ToolParameter(name="description", type="string", description="The description of the repository.", required=False),
            ],
        ),
        ToolDefinition(
            name="search_repositories",
            description=(
                "Search repositories in a project by name or description. Azure DevOps has no repository "
                "search endpoint, so all repositories are listed and filtered (case-insensitive substring)."
            ),
            parameters=[
                _PROJECT,
                ToolParameter(name="query", type="string", description="Search query text."),
                ToolParameter(name="page", type="integer", description="Page number for pagination (default 1).", required=False, default=1),
                ToolParameter(name="perPage", type="integer", description="Number of results per page (default 30, max 100).", required=False, default=30),
            ],
        ),
        ToolDefinition(
            name="fork_repository",
            description="Fork a repository: create a new repository and import the source into it.",
            parameters=[
                _PROJECT,
                ToolParameter(name="repository_id", type="string", description="The ID of the repository to fork."),
                ToolParameter(name="name", type="string", description="The name for the new forked repository."),
                ToolParameter(
                    name="target_project_id", type="string",
                    description="Target project ID to fork to (defaults to the same project).", required=False,
                ),
            ],
        ),
        # ---- Branches & commits ----
        ToolDefinition(
            name="get_branches",
            description="Get a list of branches for a repository.",
            parameters=[_PROJECT, _REPO],
        ),
        ToolDefinition(
            name="create_branch",
            description="Create a new branch in a repository from the latest commit of a source branch.",
            parameters=[
                _PROJECT,
                _REPO,
                ToolParameter(name="branch", type="string", description="Name for the new branch."),
                ToolParameter(
                    name="from_branch", type="string",
                    description="Source branch to create from (defaults to the repository's default branch).",
                    required=False,
                ),
            ],
        ),
        ToolDefinition(
            name="update_branch",
            description="Update an existing branch to point to a new commit.",
            parameters=[
                _PROJECT,
                _REPO,
                ToolParameter(name="branch", type="string", description="Name of the branch to update."),
                ToolParameter(name="new_commit_id", type="string", description="The new commit ID to point the branch to."),
                ToolParameter(name="old_commit_id", type="string", description="The current commit ID of the branch."),
            ],
        ),
        ToolDefinition(
            name="get_commits",
            description="Get a list of commits for a branch.",
            parameters=[
                _PROJECT,
                _REPO,
                ToolParameter(name="branch", type="string", description="The branch to get commits from."),
            ],
        ),
        # ---- Files ----
        ToolDefinition(
            name="get_file_content",
            description="Get the content of a file.",
            parameters=[
                _PROJECT,
                _REPO,
                ToolParameter(name="file_path", type="string", description="The path to the file."),
                ToolParameter(name="branch", type="string", description="The branch to get the file from."),
            ],
        ),
        ToolDefinition(
            name="update_file_content",
            description="Update the content of a file.",
            parameters=[
                _PROJECT,
                _REPO,
                ToolParameter(name="file_path", type="string", description="The path to the file."),
                ToolParameter(name="branch", type="string", description="The branch to update the file in."),
                ToolParameter(name="content", type="string", description="The new content of the file."),
                ToolParameter(name="commit_message", type="string", description="The commit message."),
            ],
        ),
        ToolDefinition(
            name="create_or_update_file",
            description="Create a new file or update an existing file.",
            parameters=[
                _PROJECT,
                _REPO,
                ToolParameter(name="path", type="string", description="Path where to create/update the file."),
                ToolParameter(name="content", type="string", description="Content of the file."),
                ToolParameter(name="commit_message", type="string", description="Commit message."),
                ToolParameter(name="branch", type="string", description="Branch to create/update the file in."),
            ],
        ),
        ToolDefinition(
            name="push_files",
            description="Push multiple files to a repository in a single commit.",
            parameters=[
                _PROJECT,
                _REPO,
                ToolParameter(name="branch", type="string", description="Branch to push to."),
                ToolParameter(name="files", type="array", description="Files to push, each with path and content.", items=_FILE),
                ToolParameter(name="commit_message", type="string", description="Commit message."),
            ],
        ),
        # ---- Pull requests ----
        ToolDefinition(
            name="create_pull_request",
            description="Create a new pull request.",
            parameters=[
                _PROJECT,
                _REPO,
                ToolParameter(name="source_branch", type="string", description="The source branch."),
                ToolParameter(name="target_branch", type="string", description="The target branch."),
                ToolParameter(name="title", type="string", description="The title of the pull request."),
                ToolParameter(name="description", type="string", description="The description of the pull request.", required=False),
            ],
        ),
        # ---- Work items ----
        ToolDefinition(
            name="get_issue",
            description="Get a work item (issue, task, bug) by ID.",
            parameters=[
                _PROJECT,
                ToolParameter(name="issue_id", type="string", description="The ID of the work item."),
            ],
        ),
        ToolDefinition(
            name="add_issue_comment",
            description="Add a comment to an existing issue.",
            parameters=[
                _PROJECT,
                _REPO,
                ToolParameter(name="issue_id", type="string", description="The ID of the issue."),
                ToolParameter(name="comment", type="string", description="The comment to add."),
            ],
        ),
        # ---- Search ----
        ToolDefinition(
            name="search_code",
            description="Search for code in a repository.",
            parameters=[
                _PROJECT,
                _REPO,
                ToolParameter(name="search_text", type="string", description="The text to search for."),
                ToolParameter(name="file_path", type="string", description="Filter by file path.", required=False),
                _TOP,
            ],
        ),
        ToolDefinition(
            name="search_work_items",
            description="Search for work items (issues, tasks, bugs) in a project.",
            parameters=[
                _PROJECT,
                ToolParameter(name="query", type="string", description="Search query text (matched against titles)."),
                ToolParameter(name="state", type="string", description="Filter by work item state (e.g. 'Active', 'Closed').", required=False),
                ToolParameter(name="type", type="string", description="Filter by work item type (e.g. 'Bug', 'Task').", required=False),
                ToolParameter(name="assigned_to", type="string", description="Filter by assigned user.", required=False),
                _TOP,
            ],
        ),
        ToolDefinition(
            name="search_users",
            description="Search for users in the organization.",
            parameters=[
                ToolParameter(name="query", type="string", description="Search query text."),
                _TOP,
            ],
        ),
    ],
)
