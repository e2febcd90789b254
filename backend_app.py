# backend_app.py (Flask): serves / (HTML form) and /api/reel (JSON)
# Resolves Instagram reel links to direct media URLs via RapidAPI.
# Install: pip install -e .
# Run:     RAPIDAPI_KEY=... python backend_app.py
# Optional: RAPIDAPI_HOST, LOG_LEVEL, HOST, PORT

from reel_downloader import create_app
from reel_downloader.config import Settings
from reel_downloader.logging_config import setup_logging

settings = Settings.from_env()
setup_logging(settings.log_level)
app = create_app(settings)

if __name__ == "__main__":
    app.run(host=settings.host, port=settings.port)
