class ConfigurationError(RuntimeError):
    """Raised when the price catalog or discount rules are inconsistent."""
    pass


class PriceNotFoundError(ConfigurationError):
    """Raised when a year, or a service in a given year, has no catalog price."""
    pass
