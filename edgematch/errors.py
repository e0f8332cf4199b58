class InvalidInputError(ValueError):
    """Raised when a curve computation is given input it cannot meaningfully
    process, such as too few control points or an empty path."""
