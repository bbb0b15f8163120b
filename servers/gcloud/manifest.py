"""Google Cloud server manifest — tool definitions.

All tools operate on the project named by GOOGLE_CLOUD_PROJECT.
"""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

MANIFEST = ModuleManifest(
    module_name="gcloud",
    platform="Google Cloud",
    description="Google Cloud project details, Storage, Compute Engine, Cloud Run, Logging and enabled services.",
    tools=[
        ToolDefinition(
            name="get_project",
            description="Get details of the configured Google Cloud project.",
            parameters=[],
        ),
        ToolDefinition(
            name="list_buckets",
            description="List Cloud Storage buckets in the project.",
            parameters=[
                ToolParameter(name="prefix", type="string", description="Only buckets whose name starts with this prefix.", required=False),
            ],
        ),
        ToolDefinition(
            name="list_objects",
            description="List objects in a Cloud Storage bucket.",
            parameters=[
                ToolParameter(name="bucket", type="string", description="Bucket name."),
                ToolParameter(name="prefix", type="string", description="Only objects whose name starts with this prefix.", required=False),
                ToolParameter(name="max_results", type="integer", description="Maximum number of objects (default 100).", required=False, default=100),
            ],
        ),
        ToolDefinition(
            name="list_instances",
            description="List Compute Engine VM instances in a zone.",
            parameters=[
                ToolParameter(name="zone", type="string", description="Zone, e.g. 'us-central1-a'."),
            ],
        ),
        ToolDefinition(
            name="list_cloud_run_services",
            description="List Cloud Run services in a region.",
            parameters=[
                ToolParameter(name="region", type="string", description="Region, e.g. 'us-central1'."),
            ],
        ),
        ToolDefinition(
            name="list_log_entries",
            description="List recent Cloud Logging entries, newest first.",
            parameters=[
                ToolParameter(
                    name="filter", type="string",
                    description="Logging query, e.g. 'severity>=ERROR'.", required=False,
                ),
                ToolParameter(name="page_size", type="integer", description="Number of entries (default 50).", required=False, default=50),
            ],
        ),
        ToolDefinition(
            name="list_enabled_services",
            description="List the APIs and services enabled in the project.",
            parameters=[
                ToolParameter(name="page_size", type="integer", description="Number of services (default 100).", required=False, default=100),
            ],
        ),
    ],
)
