"""Google Cloud tool implementations (read-only inventory and logs)."""

from __future__ import annotations

from servers.gcloud.client import COMPUTE, LOGGING, RESOURCE_MANAGER, RUN, SERVICE_USAGE, STORAGE, GCloudClient
from shared.validation import clamp_int


class GCloudTools:
    """Tool implementations backed by a GCloudClient."""

    def __init__(self, client: GCloudClient):
        self.client = client

    @property
    def project(self) -> str:
        return self.client.project_id

    async def get_project(self) -> dict:
        return await self.client.get(f"{RESOURCE_MANAGER}/projects/{self.project}")

    # ---- Storage ----

    async def list_buckets(self, prefix: str | None = None) -> dict:
        return await self.client.get(f"{STORAGE}/b", project=self.project, prefix=prefix)

    async def list_objects(self, bucket: str, prefix: str | None = None, max_results: int = 100) -> dict:
        return await self.client.get(
            f"{STORAGE}/b/{bucket}/o",
            prefix=prefix,
            maxResults=clamp_int(max_results, 100, 1, 1000),
        )

    # ---- Compute & Cloud Run ----

    async def list_instances(self, zone: str) -> dict:
        return await self.client.get(f"{COMPUTE}/projects/{self.project}/zones/{zone}/instances")

    async def list_cloud_run_services(self, region: str) -> dict:
        return await self.client.get(f"{RUN}/projects/{self.project}/locations/{region}/services")

    # ---- Logging & services ----

    async def list_log_entries(self, filter: str | None = None, page_size: int = 50) -> dict:
        payload: dict = {
            "resourceNames": [f"projects/{self.project}"],
            "orderBy": "timestamp desc",
            "pageSize": clamp_int(page_size, 50, 1, 1000),
        }
        if filter:
            payload["filter"] = filter
        return await self.client.post(f"{LOGGING}/entries:list", payload)

    async def list_enabled_services(self, page_size: int = 100) -> dict:
        return await self.client.get(
            f"{SERVICE_USAGE}/projects/{self.project}/services",
            filter="state:ENABLED",
            pageSize=clamp_int(page_size, 100, 1, 200),
        )

    async def aclose(self) -> None:
        await self.client.aclose()
