import re
from typing import List, Optional

from pydantic_settings import BaseSettings

DEFAULT_MIRROR_NODE = "mainnet-public.mirrornode.hedera.com"


class Settings(BaseSettings):
    TOKEN_ID: str
    MIRROR_NODE: str = DEFAULT_MIRROR_NODE
    TREASURIES: str = ""
    PORT: int = 3000
    HOST: str = "0.0.0.0"
    STARTUP_WEBHOOK_URL: Optional[str] = None

    @property
    def treasury_ids(self) -> List[str]:
        # comma or space separated list
        value = self.TREASURIES.strip()
        return re.split(r"[, ]+", value) if value else []
