import json
import re
from typing import Final


class Helpers:
    TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"(token=)[^&]*", re.IGNORECASE)
    OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[+-]?\d{1,3}$")

    @staticmethod
    def redactToken(url: str) -> str:
        return Helpers.TOKEN_PATTERN.sub(r"\1<redacted>", url)

    @staticmethod
    async def parseJson(data: str) -> dict | None:
        try:
            parsed = json.loads(data)
        except (json.JSONDecodeError, TypeError):
            return None

        return parsed if isinstance(parsed, dict) else None

    @staticmethod
    def parseOffset(raw: object) -> int | None:
        text = str(raw).strip()
        if not Helpers.OFFSET_PATTERN.match(text):
            return None

        return int(text)
