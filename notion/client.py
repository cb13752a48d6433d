# notion/client.py
# Export capability: create a database page from HTML, appending blocks
# beyond the first request in fixed-size batches, in document order.

import os
import threading
from dataclasses import dataclass
from typing import List, Optional

import requests

from engine.block_emitter import html_to_blocks
from engine.config import EngineConfig
from engine.content_blocks import ContentBlock
from engine.errors import ParseFailure
from notion.errors import ConversionError, ExportError, MissingAPIKey, MissingDatabaseID
from utils.http_json import request_json
from utils.logger import log

NOTION_API_URL = "https://api.notion.com/v1"
NOTION_VERSION = "2022-06-28"
TIMEOUT_SEC = 30


@dataclass
class NotionConfig:
    api_key: str = ""
    database_id: str = ""

    @classmethod
    def from_env(cls) -> "NotionConfig":
        return cls(
            api_key=os.getenv("NOTION_API_KEY", ""),
            database_id=os.getenv("NOTION_DATABASE_ID", ""),
        )


def batch_blocks(blocks: List[ContentBlock], size: int) -> List[List[ContentBlock]]:
    return [blocks[i:i + size] for i in range(0, len(blocks), size)]


class NotionClient:
    def __init__(
            self,
            config: NotionConfig,
            engine_config: Optional[EngineConfig] = None,
            session: Optional[requests.Session] = None,
    ):
        if not config.api_key:
            raise MissingAPIKey("notion: API key is required")
        if not config.database_id:
            raise MissingDatabaseID("notion: database ID is required")

        self.database_id = config.database_id
        self.engine_config = engine_config or EngineConfig()

        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json",
            "Notion-Version": NOTION_VERSION,
        })

    # =========================================================
    # PUBLIC API
    # =========================================================
    def create_page(self, title: str, html: str, cancel: Optional[threading.Event] = None) -> str:
        """Returns the new page URL. Raises ConversionError / ExportError."""
        try:
            blocks = html_to_blocks(html, self.engine_config)
        except ParseFailure as e:
            raise ConversionError(f"notion: HTML conversion failed: {e}") from e

        return self.create_page_from_blocks(title, blocks, cancel)

    def create_page_from_blocks(
            self,
            title: str,
            blocks: List[ContentBlock],
            cancel: Optional[threading.Event] = None,
    ) -> str:
        size = self.engine_config.max_blocks_per_request
        initial, remaining = blocks[:size], blocks[size:]

        if _is_cancelled(cancel):
            raise ExportError("notion: cancelled before page creation")

        body = {
            "parent": {"database_id": self.database_id},
            "properties": {
                "Name": {"title": [{"text": {"content": title}}]},
            },
            "children": [b.to_notion() for b in initial],
        }

        log(f"NOTION: create page | title={title[:50]!r} | blocks={len(initial)}/{len(blocks)}")
        page = self._request("POST", "/pages", json=body)

        page_id = page.get("id") if isinstance(page, dict) else None
        if not page_id:
            raise ExportError("notion: API call failed: response has no page id")
        page_url = page.get("url")

        if remaining:
            self._append_blocks(page_id, page_url, remaining, cancel)

        log(f"NOTION: page ready | url={page_url}")
        return page_url

    # =========================================================
    # INTERNALS
    # =========================================================
    def _append_blocks(
            self,
            page_id: str,
            page_url: Optional[str],
            blocks: List[ContentBlock],
            cancel: Optional[threading.Event],
    ) -> None:
        batches = batch_blocks(blocks, self.engine_config.max_blocks_per_request)

        for done, batch in enumerate(batches):
            if _is_cancelled(cancel):
                raise ExportError(
                    f"page created but cancelled before appending remaining blocks ({done}/{len(batches)} batches)",
                    page_id=page_id,
                    page_url=page_url,
                    appended_batches=done,
                )

            log(f"NOTION: append batch {done + 1}/{len(batches)} | blocks={len(batch)}")
            try:
                self._request(
                    "PATCH",
                    f"/blocks/{page_id}/children",
                    json={"children": [b.to_notion() for b in batch]},
                )
            except ExportError as e:
                raise ExportError(
                    f"page created but failed to append remaining blocks: {e}",
                    page_id=page_id,
                    page_url=page_url,
                    appended_batches=done,
                ) from e

    def _request(self, method: str, path: str, **kwargs):
        return request_json(
            self.session,
            method,
            f"{NOTION_API_URL}{path}",
            error_cls=ExportError,
            label="notion:",
            timeout=TIMEOUT_SEC,
            **kwargs,
        )


def _is_cancelled(cancel: Optional[threading.Event]) -> bool:
    return cancel is not None and cancel.is_set()
