class DomainError(Exception):
    pass


class InvalidInputError(DomainError):
    pass


class NotFoundError(DomainError):
    pass


class EmptyCatalogError(DomainError):
    pass


class CatalogLoadError(DomainError):
    pass


class ConfigurationError(DomainError):
    pass
