class GQLBuilderException(Exception):
    """
    Exception raised when building argument metadata
    """


class UnknownTypeError(GQLBuilderException):
    """
    Type identifier is not registered in the type map
    """


class MissingCapabilityError(TypeError):
    """
    Type system value does not implement requested capability
    """
