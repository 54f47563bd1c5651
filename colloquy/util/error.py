"""Startup errors raised outside the domain layer."""


class ConfigurationError(Exception):
    """Settings that would make the service unsafe or unable to start.

    Raised while loading ``Settings`` so the process refuses to boot
    instead of failing on the first request.
    """

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        self.reason = reason
        super().__init__(f"{setting}: {reason}")
