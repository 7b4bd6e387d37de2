class KeystrokeError(Exception):
    pass


class HelperLaunchError(KeystrokeError):
    """The scripting interpreter could not be started or did not finish."""


class PlatformUnavailableError(KeystrokeError):
    """No keystroke strategy exists for this platform."""
