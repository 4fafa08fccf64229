"""Publisher posting notes to a remote ingest endpoint."""

import base64
import logging
import time
from typing import Dict, Optional, Union

import httpx

from vault_publisher.core import frontmatter as fm
from vault_publisher.core.eligibility import EligibilityFilter
from vault_publisher.core.models import NoteSnapshot, PublishResult
from vault_publisher.render.markdown import encode_uri_component
from vault_publisher.transforms.frontmatter import filename_to_title

logger = logging.getLogger(__name__)


def encode_content(text: str) -> str:
    """Percent-encode the UTF-8 text, then base64 the resulting ASCII."""
    return base64.b64encode(encode_uri_component(text).encode('ascii')).decode('ascii')


def build_payload(note: NoteSnapshot, now_ms: Optional[int] = None) -> Dict[str, Union[int, str]]:
    return {
        "id": now_ms if now_ms is not None else int(time.time() * 1000),
        "title": filename_to_title(note.filename),
        "content": encode_content(note.text),
    }


class Publisher:
    """Posts eligible notes as JSON to the publish endpoint.

    Only notes tagged ``#publish`` are sent. The response is logged, never
    checked, and transport errors propagate to the caller.
    """

    def __init__(
        self,
        endpoint: str,
        client: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        """Initialize Publisher.

        Args:
            endpoint: URL receiving the POST
            client: HTTP client to use; one is created if omitted
            timeout: Request timeout in seconds for the created client
        """
        self.endpoint = endpoint
        self.eligibility = EligibilityFilter(require_publish_tag=True)
        self._client = client or httpx.Client(timeout=timeout)

    def publish(self, note: NoteSnapshot) -> Optional[PublishResult]:
        """Publish a note.

        Args:
            note: Snapshot of the note to publish

        Returns:
            PublishResult, or None if the note is not eligible
        """
        frontmatter = fm.parse(note.text)
        if not self.eligibility.is_eligible(note.filename, frontmatter):
            return None

        payload = build_payload(note)
        response = self._client.post(
            self.endpoint,
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        logger.info("Published %s: HTTP %s", payload["title"], response.status_code)
        logger.debug("Publish response: %s", response.text)

        return PublishResult(note=note, payload=payload, status_code=response.status_code)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Publisher":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()
