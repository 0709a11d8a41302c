"""Fetch the library source text from a shared Google Doc."""

from __future__ import annotations

import logging

import requests  # type: ignore[import-untyped]

from copreader.errors import TransportError

logger = logging.getLogger(__name__)

EXPORT_URL = "https://docs.google.com/document/d/{doc_id}/export?format=txt"


def export_url(doc_id: str) -> str:
    return EXPORT_URL.format(doc_id=doc_id)


def fetch_remote_text(
    doc_id: str,
    session: requests.Session | None = None,
    timeout: float = 30,
) -> str:
    """Download the plain-text export of a publicly shared document.

    Args:
        doc_id: Identifier of the Google Doc.
        session: Optional session used instead of module level requests.
        timeout: Request timeout in seconds.

    Returns:
        The document text.

    Raises:
        TransportError: The id is empty, the request failed, the response
            status is not a success, or the service answered with an HTML
            page (documents that are not shared publicly redirect to a
            sign-in page).
    """

    doc_id = doc_id.strip()
    if not doc_id:
        raise TransportError("No document id provided")

    url = export_url(doc_id)
    getter = session.get if session is not None else requests.get

    logger.debug("Fetching %s", url)
    try:
        response = getter(url, timeout=timeout)
    except requests.RequestException as exc:
        raise TransportError(
            f"Failed to fetch document {doc_id}: {exc}", doc_id=doc_id
        ) from exc

    if not response.ok:
        raise TransportError(
            f"Failed to fetch document {doc_id}: {response.status_code} "
            f"{response.reason}. Ensure the document is shared publicly.",
            doc_id=doc_id,
            status_code=response.status_code,
        )

    content_type = response.headers.get("Content-Type", "")
    if "text/html" in content_type:
        raise TransportError(
            f"Document {doc_id} returned an HTML page instead of text. "
            "Ensure the document is shared publicly.",
            doc_id=doc_id,
            status_code=response.status_code,
        )

    # The export does not always declare a charset.
    response.encoding = "utf-8"
    return response.text
