"""Exception types raised by the simulation and pricing engine."""


class StockSimError(Exception):
    """Base class for request-scoped engine failures."""


class InvalidParameterError(StockSimError, ValueError):
    """An input violates a numeric constraint (non-positive price, zero steps, ...)."""


class ConfigLookupError(StockSimError, LookupError):
    """No asset model configuration matches an identifier and no override was given."""
