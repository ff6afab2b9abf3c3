"""Domain exceptions."""


class InvalidArgumentError(ValueError):
    """Raised when an operation receives an argument outside its contract.

    Used for non-positive cache capacities, both at construction and on
    resize. The operation is rejected; the caller must pick a valid value.
    """
