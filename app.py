# app.py
"""
Thin entrypoint for the API.

Usage example:
    uvicorn app:app --reload
or
    python app.py          # binds HOST:PORT from the environment
"""

import uvicorn

from clientflow.config import get_settings
from clientflow.main import app  # re-export FastAPI instance

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
