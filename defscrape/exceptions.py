"""
defscrape exceptions
"""


class DefscrapeError(Exception):
    """Base exception for defscrape"""
    pass


class DefinitionError(DefscrapeError):
    """Definition could not be turned into a template"""
    pass


class TokenizationError(DefinitionError):
    """Definition source breaks the placeholder grammar"""

    def __init__(self, reason: str, position: int):
        self.reason = reason
        self.position = position
        super().__init__(f"{reason} at position {position}")


class TemplateValidationError(DefinitionError):
    """Token sequence has no usable closing boundary for a placeholder"""
    pass


class ReaderError(DefscrapeError):
    """Content could not be retrieved"""
    pass


class ConfigError(DefscrapeError):
    """Invalid configuration value"""
    pass
