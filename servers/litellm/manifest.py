"""LiteLLM server manifest — tool definitions."""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

_MESSAGE = {
    "type": "object",
    "properties": {
        "role": {"type": "string", "enum": ["system", "user", "assistant"]},
        "content": {"type": "string"},
    },
    "required": ["role", "content"],
}

MANIFEST = ModuleManifest(
    module_name="litellm",
    platform="LiteLLM",
    description="LiteLLM proxy: models, chat completions, embeddings, health, virtual keys and spend logs.",
    tools=[
        # ---- Models ----
        ToolDefinition(
            name="list_models",
            description="List the models available through the proxy.",
            parameters=[],
        ),
        ToolDefinition(
            name="get_model_info",
            description="Get the proxy's model deployment details.",
            parameters=[],
        ),
        # ---- Inference ----
        ToolDefinition(
            name="chat_completion",
            description="Run a chat completion through the proxy.",
            parameters=[
                ToolParameter(name="model", type="string", description="Model name as configured on the proxy."),
                ToolParameter(name="messages", type="array", description="Conversation messages.", items=_MESSAGE),
                ToolParameter(name="temperature", type="number", description="Sampling temperature.", required=False),
                ToolParameter(name="max_tokens", type="integer", description="Maximum tokens to generate.", required=False),
            ],
        ),
        ToolDefinition(
            name="create_embedding",
            description="Create an embedding vector for a text.",
            parameters=[
                ToolParameter(name="model", type="string", description="Embedding model name."),
                ToolParameter(name="input", type="string", description="Text to embed."),
            ],
        ),
        # ---- Proxy management ----
        ToolDefinition(
            name="get_health",
            description="Check the health of the proxy's model deployments.",
            parameters=[],
        ),
        ToolDefinition(
            name="get_key_info",
            description="Get information about a virtual key (defaults to the key in use).",
            parameters=[
                ToolParameter(name="key", type="string", description="Virtual key to inspect.", required=False),
            ],
        ),
        ToolDefinition(
            name="generate_key",
            description="Generate a new virtual key.",
            parameters=[
                ToolParameter(name="models", type="array", description="Models the key may use.", required=False, items={"type": "string"}),
                ToolParameter(name="duration", type="string", description="Key lifetime, e.g. '30d'.", required=False),
                ToolParameter(name="max_budget", type="number", description="Maximum spend for the key.", required=False),
                ToolParameter(name="metadata", type="object", description="Arbitrary metadata to attach.", required=False),
            ],
        ),
        ToolDefinition(
            name="get_spend_logs",
            description="Get spend logs, optionally filtered by key, user and date range.",
            parameters=[
                ToolParameter(name="api_key", type="string", description="Filter by virtual key.", required=False),
                ToolParameter(name="user_id", type="string", description="Filter by user ID.", required=False),
                ToolParameter(name="start_date", type="string", description="Start date (YYYY-MM-DD).", required=False),
                ToolParameter(name="end_date", type="string", description="End date (YYYY-MM-DD).", required=False),
            ],
        ),
    ],
)
