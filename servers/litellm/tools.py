"""LiteLLM tool implementations."""

from __future__ import annotations

from servers.litellm.client import LiteLLMClient


class LiteLLMTools:
    """Tool implementations backed by a LiteLLMClient."""

    def __init__(self, client: LiteLLMClient):
        self.client = client

    # ---- Models ----

    async def list_models(self) -> dict:
        return await self.client.get("v1/models")

    async def get_model_info(self) -> dict:
        return await self.client.get("model/info")

    # ---- Inference ----

    async def chat_completion(
        self, model: str, messages: list,
        temperature: float | None = None, max_tokens: int | None = None,
    ) -> dict:
        payload: dict = {"model": model, "messages": messages}
        if temperature is not None:
            payload["temperature"] = temperature
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens
        return await self.client.post("v1/chat/completions", payload)

    async def create_embedding(self, model: str, input: str) -> dict:
        return await self.client.post("v1/embeddings", {"model": model, "input": input})

    # ---- Proxy management ----

    async def get_health(self) -> dict:
        return await self.client.get("health")

    async def get_key_info(self, key: str | None = None) -> dict:
        return await self.client.get("key/info", key=key)

    async def generate_key(
        self, models: list | None = None, duration: str | None = None,
        max_budget: float | None = None, metadata: dict | None = None,
    ) -> dict:
        payload = {
            k: v for k, v in {
                "models": models,
                "duration": duration,
                "max_budget": max_budget,
                "metadata": metadata,
            }.items() if v is not None
        }
        return await self.client.post("key/generate", payload)

    async def get_spend_logs(
        self, api_key: str | None = None, user_id: str | None = None,
        start_date: str | None = None, end_date: str | None = None,
    ):
        return await self.client.get(
            "spend/logs", api_key=api_key, user_id=user_id, start_date=start_date, end_date=end_date,
        )

    async def aclose(self) -> None:
        await self.client.aclose()
