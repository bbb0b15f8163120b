"""Platform MCP servers. Each subpackage wraps one platform's REST API."""

PLATFORMS = ("azure_devops", "github", "figma", "sonarqube", "gcloud", "litellm")
