"""Figma tool implementations."""

from __future__ import annotations

from servers.figma.client import FigmaClient


class FigmaTools:
    """Tool implementations backed by a FigmaClient."""

    def __init__(self, client: FigmaClient):
        self.client = client

    async def get_me(self) -> dict:
        return await self.client.get("me")

    # ---- Files ----

    async def get_file(self, file_key: str, depth: int | None = None, version: str | None = None) -> dict:
        return await self.client.get(f"files/{file_key}", depth=depth, version=version)

    async def get_file_nodes(self, file_key: str, ids: str, depth: int | None = None) -> dict:
        return await self.client.get(f"files/{file_key}/nodes", ids=ids, depth=depth)

    async def get_images(
        self, file_key: str, ids: str, format: str | None = None, scale: float | None = None,
    ) -> dict:
        return await self.client.get(f"images/{file_key}", ids=ids, format=format, scale=scale)

    async def get_image_fills(self, file_key: str) -> dict:
        return await self.client.get(f"files/{file_key}/images")

    async def get_file_versions(self, file_key: str) -> dict:
        return await self.client.get(f"files/{file_key}/versions")

    # ---- Comments ----

    async def get_comments(self, file_key: str) -> dict:
        return await self.client.get(f"files/{file_key}/comments")

    async def post_comment(self, file_key: str, message: str, node_id: str | None = None) -> dict:
        payload: dict = {"message": message}
        if node_id:
            payload["client_meta"] = {"node_id": node_id, "node_offset": {"x": 0, "y": 0}}
        return await self.client.post(f"files/{file_key}/comments", payload)

    # ---- Teams & projects ----

    async def get_team_projects(self, team_id: str) -> dict:
        return await self.client.get(f"teams/{team_id}/projects")

    async def get_project_files(self, project_id: str) -> dict:
        return await self.client.get(f"projects/{project_id}/files")

    async def get_team_components(self, team_id: str, page_size: int | None = None) -> dict:
        return await self.client.get(f"teams/{team_id}/components", page_size=page_size)

    async def get_team_styles(self, team_id: str, page_size: int | None = None) -> dict:
        return await self.client.get(f"teams/{team_id}/styles", page_size=page_size)

    async def aclose(self) -> None:
        await self.client.aclose()
