"""Static frontend serving with a single-page-app fallback."""

from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope


class SPAStaticFiles(StaticFiles):
    """Serve files from the bundle; unknown non-API paths get index.html."""

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            response = await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404:
                raise
            response = None

        if response is not None and response.status_code != 404:
            return response
        if path == "api" or path.startswith("api/"):
            raise HTTPException(status_code=404)
        return await super().get_response("index.html", scope)
