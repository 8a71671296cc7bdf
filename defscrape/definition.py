"""
Definition Parser - builds a template once and applies it to content

Definitions are the reverse of templates: literal text (usually HTML) with
``{{name}}`` placeholders marking the values to pull out. The whole
definition is treated as a repeating block, so a page listing twenty
products yields twenty records.

Definition syntax:
  - Whitespace in literal text is not significant, on either side.
  - Text must otherwise match exactly; use ``{{_}}`` to skip over a span
    without recording it.
  - Variables are written ``{{variableName}}``, optionally followed by
    filters: ``{{variableName|filter1|filter2}}``.
  - Placeholders may not contain whitespace, and every placeholder must be
    followed by some literal text that marks where its value ends.
"""

from pathlib import Path
from typing import List, Optional, Union

from defscrape.diagnostics import get_logger
from defscrape.exceptions import DefinitionError
from defscrape.filters import FilterRegistry, default_registry
from defscrape.lexer import tokenize
from defscrape.matcher import Record, match
from defscrape.types import Template, TokenType

logger = get_logger(__name__)


class DefinitionParser:
    """Applies one definition to any number of content strings.

    Holds only the template and the filter registry, both immutable, so one
    instance can be shared between threads.
    """

    def __init__(self, template: Template, registry: Optional[FilterRegistry] = None):
        if template.is_error:
            raise DefinitionError("Template failed to tokenize")
        self.template = template
        self.registry = registry if registry is not None else default_registry()

        for name in self.registry.unknown(self.filter_names):
            logger.warning(f"Definition uses unknown filter '{name}', values will pass through unchanged")

    @classmethod
    def from_source(cls, source: str, registry: Optional[FilterRegistry] = None) -> "DefinitionParser":
        """Build a parser from definition text.

        Raises:
            TokenizationError: If a placeholder breaks the grammar
            TemplateValidationError: If a placeholder has no closing text
        """
        return cls(tokenize(source), registry)

    @classmethod
    def from_file(cls, path: Union[str, Path], registry: Optional[FilterRegistry] = None) -> "DefinitionParser":
        """Build a parser from a UTF-8 definition file."""
        path = Path(path)
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DefinitionError(f"Error opening definition file {path}: {e}") from e

        logger.debug(f"Loaded definition {path} ({len(source)} chars)")
        return cls.from_source(source, registry)

    @property
    def variables(self) -> List[str]:
        return self.template.variables()

    @property
    def filter_names(self) -> List[str]:
        return [t.literal for t in self.template if t.type is TokenType.FILTER]

    def parse(self, content: str) -> List[Record]:
        """Return every record the definition finds in ``content``."""
        return match(self.template, content, self.registry)

    def __call__(self, content: str) -> List[Record]:
        return self.parse(content)

    def __repr__(self) -> str:
        return f"DefinitionParser(variables={self.variables!r})"
