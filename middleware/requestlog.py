from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from utility.logger import logger


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        client_ip = request.client.host if request.client else "unknown"
        logger.info(f"{request.method} request to {request.url.path} from IP: {client_ip}")
        response = await call_next(request)
        if response.status_code >= 400:
            logger.error(f"Error {response.status_code} on {request.method} request to {request.url.path} from IP: {client_ip}")
        return response
