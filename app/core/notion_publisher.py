"""
Publish structured summaries as pages in a Notion workspace.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from notion_client import APIResponseError, Client

from app.config import config
from app.db.token_store import TokenStore
from app.models.schemas import NotionPublishTarget, NotionTokenRecord, SavedPage
from app.utils.error_handling import (
    AppError,
    DatabaseNotFoundError,
    FetchDatabasesError,
    MissingFieldsError,
    NoAccessTokenError,
    NoPagesError,
    SaveError,
    TokenExpiredError,
)
from app.utils.logger import logging

DATABASE_TITLE = "YouTube Video Summaries"
MAX_TEXT_LENGTH = 2000

TAG_PALETTE = [
    ("Education", "blue"),
    ("Technology", "green"),
    ("Business", "yellow"),
    ("Health", "red"),
    ("Science", "purple"),
    ("Entertainment", "pink"),
    ("Tutorial", "orange"),
    ("Review", "brown"),
    ("Analysis", "gray"),
]


def _rich_text(content: str, link: Optional[str] = None) -> List[Dict[str, Any]]:
    # Notion caps each text object at MAX_TEXT_LENGTH characters.
    pieces = [
        content[start:start + MAX_TEXT_LENGTH]
        for start in range(0, len(content), MAX_TEXT_LENGTH)
    ] or [""]
    rich_text = []
    for piece in pieces:
        text = {"content": piece}
        if link:
            text["link"] = {"url": link}
        rich_text.append({"type": "text", "text": text})
    return rich_text


def _block(block_type: str, content: str, link: Optional[str] = None) -> Dict[str, Any]:
    return {
        "object": "block",
        "type": block_type,
        block_type: {"rich_text": _rich_text(content, link)},
    }


def database_schema() -> Dict[str, Any]:
    """Properties for an auto-provisioned summaries database."""
    return {
        "Title": {"title": {}},
        "Video URL": {"url": {}},
        "Date": {"date": {}},
        "Tags": {
            "multi_select": {
                "options": [{"name": name, "color": color} for name, color in TAG_PALETTE]
            }
        },
    }


def page_properties(title: str, video_url: str, tags: List[str]) -> Dict[str, Any]:
    return {
        "title": {"title": [{"text": {"content": title}}]},
        "Video URL": {"url": video_url},
        "Date": {"date": {"start": datetime.now(timezone.utc).date().isoformat()}},
        "Tags": {"multi_select": [{"name": tag} for tag in tags]},
    }


def page_children(summary: str, video_url: str) -> List[Dict[str, Any]]:
    return [
        _block("heading_2", "Summary"),
        _block("paragraph", summary),
        _block("heading_2", "Original Video"),
        _block("paragraph", video_url, link=video_url),
    ]


def map_notion_error(error: Exception) -> AppError:
    code = getattr(error, "code", None)
    if code == "unauthorized":
        return TokenExpiredError(details=str(error))
    if code == "object_not_found":
        return DatabaseNotFoundError(details=str(error))
    return SaveError(details=str(error))


class NotionPublisher:
    """Class to handle writing summaries into Notion."""

    def __init__(self, store: TokenStore):
        self.store = store

    def get_token(self, bot_id: Optional[str] = None) -> NotionTokenRecord:
        """
        Look up the token for a bot ID.

        Without a bot ID the first stored token is used, which is only
        well-defined while a single workspace is connected.
        """
        record = self.store.lookup(bot_id)
        if record is None or not record.access_token:
            raise NoAccessTokenError()
        return record

    def client_for(self, record: NotionTokenRecord) -> Client:
        return Client(auth=record.access_token, notion_version=config.NOTION_API_VERSION)

    def resolve_target(self, notion: Client) -> NotionPublishTarget:
        """
        Reuse the first visible database, or create one under the first visible page.

        Raises:
            NoPagesError: if the workspace exposes neither databases nor pages
        """
        databases = notion.search(filter={"property": "object", "value": "database"})
        results = databases.get("results", [])
        if results:
            database_id = results[0]["id"]
            logging.info(f"Using existing database: {database_id}")
            return NotionPublishTarget(database_id=database_id)

        logging.info("No databases found, creating a new one...")
        pages = notion.search(filter={"property": "object", "value": "page"})
        page_results = pages.get("results", [])
        if not page_results:
            raise NoPagesError()

        parent_page = page_results[0]
        database = notion.databases.create(
            parent={"type": "page_id", "page_id": parent_page["id"]},
            title=_rich_text(DATABASE_TITLE),
            properties=database_schema(),
        )
        logging.info(f"Created new database: {database['id']}")
        return NotionPublishTarget(database_id=database["id"], created=True)

    def publish(
        self,
        title: Optional[str],
        summary: Optional[str],
        tags: Optional[List[str]],
        video_url: Optional[str],
        bot_id: Optional[str] = None,
    ) -> SavedPage:
        """
        Create a Notion page holding a summary.

        Args:
            title: Page title
            summary: Summary body text
            tags: Tag names; unknown tags become new multi-select options
            video_url: Original YouTube URL
            bot_id: Bot ID identifying the token to use

        Returns:
            SavedPage with the page URL and ID

        Raises:
            MissingFieldsError, NoAccessTokenError, NoPagesError,
            TokenExpiredError, DatabaseNotFoundError, SaveError
        """
        if not title or not summary or not video_url:
            raise MissingFieldsError("Title, summary, and video URL are required")

        record = self.get_token(bot_id)
        notion = self.client_for(record)

        try:
            target = self.resolve_target(notion)
            page = notion.pages.create(
                parent={"database_id": target.database_id},
                properties=page_properties(title, video_url, tags or []),
                children=page_children(summary, video_url),
            )
        except AppError:
            raise
        except APIResponseError as e:
            logging.error(f"Notion API error while saving: {e.code} {str(e)}")
            raise map_notion_error(e) from e
        except Exception as e:
            logging.error(f"Error saving to Notion: {str(e)}")
            raise SaveError(details=str(e)) from e

        logging.info(f"Summary saved to Notion page: {page['id']}")
        return SavedPage(notion_url=page["url"], page_id=page["id"])

    def list_databases(self, bot_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """List databases visible to the token as {id, title, url, created_time}."""
        record = self.get_token(bot_id)
        notion = self.client_for(record)

        try:
            response = notion.search(filter={"property": "object", "value": "database"})
        except Exception as e:
            logging.error(f"Error fetching Notion databases: {str(e)}")
            raise FetchDatabasesError(details=str(e)) from e

        databases = []
        for db in response.get("results", []):
            title = db.get("title") or []
            databases.append({
                "id": db["id"],
                "title": (title[0].get("plain_text") if title else None) or "Untitled Database",
                "url": db.get("url"),
                "created_time": db.get("created_time"),
            })
        return databases
