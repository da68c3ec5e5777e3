# clientflow/static.py
"""
Serves the built front-end (a single-page app) from the same process.
"""

from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse

from clientflow.errors import NotFoundError


def mount_frontend(app: FastAPI, static_dir: Path) -> None:
    root = static_dir.resolve()
    index = root / "index.html"

    @app.get("/{full_path:path}", include_in_schema=False)
    def frontend(full_path: str) -> FileResponse:
        if full_path == "api" or full_path.startswith("api/"):
            raise NotFoundError("Not found")

        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file():
            if root not in candidate.parents:
                raise NotFoundError("Not found")
            return FileResponse(candidate)

        # Unknown paths are client-side routes
        return FileResponse(index)
