class DegenerateInputError(ValueError):
    pass


class InvalidTopologyError(ValueError):
    pass


class DegenerateFaceWarning(UserWarning):
    pass
