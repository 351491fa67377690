class ConversionError(ValueError):
    """Base class for chat export conversion failures."""


class UnidentifiedPlatformError(ConversionError):
    def __init__(self, message: str = "Platform couldn't be identified") -> None:
        super().__init__(message)


class UnsupportedPlatformError(ConversionError):
    def __init__(self, platform: object) -> None:
        super().__init__(f"Unsupported platform: {platform}")
        self.platform = platform


class InvalidTimezoneError(ConversionError):
    def __init__(self, timezone_name: str) -> None:
        super().__init__(f"Unknown timezone: {timezone_name}")
        self.timezone_name = timezone_name
