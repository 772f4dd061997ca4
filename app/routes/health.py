from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health", tags=["Health"])
async def health(request: Request):
    return {
        "status": "healthy",
        "service": request.app.state.settings.app_name,
    }
