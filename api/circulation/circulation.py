from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from core.circulation import get_token_circulation
from utility.logger import logger

router = APIRouter(tags=["circulation"])

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/{path:path}", methods=ALL_METHODS)
async def circulation(request: Request, path: str):
    settings = request.app.state.settings
    try:
        result = await get_token_circulation(
            settings.MIRROR_NODE,
            settings.TOKEN_ID,
            settings.treasury_ids,
            session=request.app.state.session,
        )
    except Exception as e:
        logger.error(f"Circulation request failed: {str(e)}")
        return PlainTextResponse(str(e) or type(e).__name__, status_code=500)
    return JSONResponse(result.to_dict())
