class InvalidInputError(ValueError):
    """Raised when a path or tolerance cannot be simplified or encoded.

    Covers non-finite coordinates (NaN/Infinity) and negative or non-finite
    tolerances.
    """
    pass
