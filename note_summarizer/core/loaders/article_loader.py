"""
Loader that turns a webpage into a document holding its main article text.
"""

from typing import Any, Dict, Iterator, Optional
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup
from langchain_core.document_loaders import BaseLoader
from langchain_core.documents import Document
from readability import Document as ReadableDocument

from note_summarizer.config import config
from note_summarizer.utils.logger import logging


def fetch_html(url: str) -> Optional[str]:
    """Fetch a page, returning None when the response is not HTML."""
    response = requests.get(
        url, timeout=config.REQUEST_TIMEOUT, headers={"User-Agent": config.USER_AGENT}
    )
    response.raise_for_status()
    content_type = response.headers.get("Content-Type", "")
    if content_type and "html" not in content_type:
        logging.info(f"Skipping non-HTML response ({content_type}) from {url}")
        return None
    return response.text


def _meta(soup: BeautifulSoup, *names: str) -> Optional[str]:
    for name in names:
        tag = soup.find("meta", attrs={"property": name}) or soup.find("meta", attrs={"name": name})
        if tag and tag.get("content"):
            return tag["content"].strip()
    return None


def extract_text(readable: ReadableDocument) -> str:
    """Plain text of the main content block of a page."""
    content_html = readable.summary(html_partial=True)
    soup = BeautifulSoup(content_html, "html.parser")
    return soup.get_text(" ", strip=True)


def extract_article(url: str) -> Optional[Dict[str, Any]]:
    """
    Extract the main article of a webpage.

    Args:
        url: Address of the page

    Returns:
        Dictionary with ``content`` (None when the page has no readable body)
        and the page's ``url``, ``title``, ``description``, ``author``,
        ``image``, ``published`` and ``source``; None for non-HTML responses
    """
    html = fetch_html(url)
    if html is None:
        return None

    soup = BeautifulSoup(html, "html.parser")
    readable = ReadableDocument(html)
    content = extract_text(readable)

    return {
        "url": url,
        "title": _meta(soup, "og:title") or readable.short_title() or None,
        "description": _meta(soup, "og:description", "description"),
        "author": _meta(soup, "author", "article:author"),
        "image": _meta(soup, "og:image"),
        "published": _meta(soup, "article:published_time", "date"),
        "source": urlparse(url).netloc or None,
        "content": content or None,
    }


class ArticleLoader(BaseLoader):
    """Load the main article of a webpage as a single document."""

    def __init__(self, url: str):
        self.url = url

    def lazy_load(self) -> Iterator[Document]:
        logging.info(f"Extracting article from {self.url}")
        article = extract_article(self.url)

        if not article:
            logging.info(f"No article found at {self.url}")
            return

        metadata = dict(article)
        content = metadata.pop("content", None)

        yield Document(page_content=content or "", metadata=metadata)
