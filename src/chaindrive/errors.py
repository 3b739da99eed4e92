"""Error types raised by the chain-drive model."""


class ConfigurationError(ValueError):
    """Raised when a drive configuration cannot describe a valid drivetrain.

    Covers tooth counts below three, non-positive pitch or roller sizes, and
    sprocket layouts where one pitch circle encloses the other so that no
    common tangent exists. Always raised before any sprocket is built.
    """
