"""
Loader that turns a YouTube video into a document holding its transcript.
"""

from typing import Any, Dict, Iterator

from langchain_core.document_loaders import BaseLoader
from langchain_core.documents import Document
from pytubefix import YouTube
from youtube_transcript_api import YouTubeTranscriptApi

from note_summarizer.config import config
from note_summarizer.models.schemas import VideoMetadata
from note_summarizer.utils.helpers import extract_video_id
from note_summarizer.utils.logger import logging

YOUTUBE_WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"


class YoutubeLoader(BaseLoader):
    """Load the transcript of a YouTube video as a single document."""

    def __init__(
        self,
        video_id: str,
        add_video_info: bool = False,
        language: str = config.TRANSCRIPT_LANGUAGE,
    ):
        """
        Args:
            video_id: The 11 character YouTube video ID
            add_video_info: Look up title, author and friends for the metadata
            language: Transcript language code
        """
        self.video_id = video_id
        self.add_video_info = add_video_info
        self.language = language

    @classmethod
    def from_youtube_url(cls, youtube_url: str, **kwargs: Any) -> "YoutubeLoader":
        """Build a loader from a YouTube URL."""
        video_id = extract_video_id(youtube_url)
        if video_id is None:
            raise ValueError(f"Could not find a YouTube video ID in: {youtube_url}")
        return cls(video_id, **kwargs)

    def get_video_info(self) -> Dict[str, Any]:
        """Video details to merge into the document metadata."""
        try:
            yt = YouTube(YOUTUBE_WATCH_URL_TEMPLATE.format(video_id=self.video_id))
            info = VideoMetadata(
                source=self.video_id,
                title=yt.title,
                description=yt.description,
                view_count=yt.views,
                thumbnail_url=yt.thumbnail_url,
                publish_date=yt.publish_date,
                length=yt.length,
                author=yt.author,
            )
        except Exception as e:
            logging.error(f"Error fetching video info for {self.video_id}: {str(e)}")
            raise

        return info.model_dump(exclude_none=True, exclude={"source"})

    def fetch_transcript(self) -> str:
        """Fetch the transcript and join its pieces into one text."""
        try:
            transcript = YouTubeTranscriptApi().fetch(self.video_id, languages=[self.language])
        except Exception as e:
            logging.error(f"Error fetching transcript for {self.video_id}: {str(e)}")
            raise

        return " ".join(snippet.text.strip() for snippet in transcript.snippets)

    def lazy_load(self) -> Iterator[Document]:
        metadata: Dict[str, Any] = VideoMetadata(source=self.video_id).model_dump(exclude_none=True)

        if self.add_video_info:
            metadata.update(self.get_video_info())

        logging.info(f"Fetching '{self.language}' transcript for {self.video_id}")
        combined = self.fetch_transcript()

        yield Document(page_content=combined, metadata=metadata)
