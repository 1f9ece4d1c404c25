"""Exceptions raised by medoidkit."""


class ConfigurationError(ValueError):
    """Raised when input records cannot be turned into feature vectors.

    Covers a designated feature without a public read accessor and a feature
    value that cannot be converted to a real number. Raised before any
    clustering work starts, so no partial result exists.
    """
    pass
