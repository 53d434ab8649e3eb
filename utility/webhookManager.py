import httpx
from typing import Optional

from utility.logger import logger


async def send_startup_webhook(webhook_url: Optional[str], success: bool, message: str, details: list):
    if not webhook_url:
        return
    embed = {
        "title": "Startup Status",
        "description": f"Startup {'successful' if success else 'failed'}: {message}",
        "color": 3066993 if success else 15158332,
        "fields": [{"name": "Circulation", "value": "\n".join(details) or "-", "inline": False}]
    }
    content = {
        "embeds": [embed]
    }
    async with httpx.AsyncClient() as client:
        try:
            response = await client.post(webhook_url, json=content)
            response.raise_for_status()
            logger.info("Startup webhook sent successfully.")
        except httpx.HTTPStatusError as e:
            logger.error(f"Failed to send startup webhook: {e.response.text}")
        except httpx.HTTPError as e:
            logger.error(f"An error occurred while sending startup webhook: {str(e)}")
