from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

_INDEX = "index.html"


class SPAStaticFiles(StaticFiles):
    """Serves the built dashboard; unknown non-API paths get index.html so
    client-side routes resolve."""

    def _fallback_allowed(self, path: str) -> bool:
        return not (path == "api" or path.startswith("api/"))

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            response = await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404 or not self._fallback_allowed(path):
                raise
            return await super().get_response(_INDEX, scope)
        if response.status_code == 404 and self._fallback_allowed(path):
            return await super().get_response(_INDEX, scope)
        return response
