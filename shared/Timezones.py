from typing import Final


class Timezones:
    DEFAULT_ZONES: Final[tuple[str, ...]] = (
        "Europe/Lisbon",
        "America/Fortaleza",
        "America/Detroit",
        "America/Chicago",
        "America/Denver",
        "America/Los_Angeles",
    )

    # Whole-hour UTC offsets in use worldwide (Baker Island .. Kiribati)
    MIN_OFFSET: Final[int] = -12
    MAX_OFFSET: Final[int] = 14

    @staticmethod
    def isValidOffset(offset: int) -> bool:
        return Timezones.MIN_OFFSET <= offset <= Timezones.MAX_OFFSET
