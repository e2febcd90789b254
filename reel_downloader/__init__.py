"""
Reel downloader – a thin Flask proxy in front of the RapidAPI reels downloader.

  from reel_downloader import create_app
  app = create_app()          # reads RAPIDAPI_KEY from the environment
"""

from .web import create_app

__version__ = "0.1.0"
__all__ = ["create_app"]
