class PayloadError(ValueError):
    """A client payload was missing, malformed or too large."""


class LoginError(ValueError):
    """A lottery login was refused (empty or duplicate name)."""


class DrawError(ValueError):
    """No candidate is left to draw."""
