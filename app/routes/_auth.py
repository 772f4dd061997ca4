from fastapi import HTTPException, Request, Security
from fastapi.security import APIKeyHeader

_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(
    request: Request, api_key: str = Security(_api_key_header)
) -> str:
    if not api_key or api_key != request.app.state.settings.api_key:
        raise HTTPException(401, "Unauthorized: Invalid or missing API key")
    return api_key
