"""
Document loaders for webpages and YouTube videos.
"""

from note_summarizer.core.loaders.article_loader import ArticleLoader
from note_summarizer.core.loaders.youtube_loader import YoutubeLoader

__all__ = ["ArticleLoader", "YoutubeLoader"]
