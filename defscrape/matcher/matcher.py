"""
Extraction Matcher - applies a Template to content

Single left-to-right pass over the content. Literal text is matched greedily
and never backtracked: when a literal does not match at the content cursor the
cursor slides forward one character and the same literal is tried again.
Reaching the EOF token completes a record and restarts the template from the
current content position, so repeated blocks are found one after another.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from defscrape.diagnostics import get_logger
from defscrape.exceptions import DefinitionError
from defscrape.filters import FilterRegistry, default_registry
from defscrape.matcher.whitespace import has_prefix_ignore_whitespace
from defscrape.types import DISCARD, Template, TokenType

logger = get_logger(__name__)

Record = Dict[str, str]


@dataclass
class _Capture:
    """A variable whose value is still being scanned."""
    name: str
    start: int
    token_index: int


@dataclass
class _MatchState:
    pos: int = 0
    token_index: int = 0
    record: Record = field(default_factory=dict)
    capture: Optional[_Capture] = None


def match(template: Template, content: str, registry: Optional[FilterRegistry] = None) -> List[Record]:
    """Extract every record ``template`` describes from ``content``.

    Args:
        template: Tokenized definition
        content: Text to scan, e.g. an HTML page
        registry: Filters available to placeholders, the baseline set if omitted

    Returns:
        Records in the order they appear in the content, empty if none match
    """
    if template.is_error:
        raise DefinitionError("Cannot match with a template that failed to tokenize")

    records: List[Record] = []
    if template.is_empty or not content:
        return records
    if not template.has_literal:
        # Nothing would ever consume content, every position would "match"
        logger.debug("Template has no literal text, nothing to match")
        return records

    registry = registry if registry is not None else default_registry()
    state = _MatchState()
    end = len(content)

    while True:
        token = template[state.token_index]

        if token.type is TokenType.TEXT:
            if state.pos >= end:
                break
            matched, consumed = has_prefix_ignore_whitespace(content, token.literal, state.pos)
            if not matched:
                state.pos += 1
                continue
            if state.capture is not None:
                _close_capture(template, content, registry, state)
            state.token_index += 1
            state.pos += consumed

        elif token.type is TokenType.VARIABLE:
            state.capture = _Capture(token.literal, state.pos, state.token_index)
            state.token_index += 1

        elif token.type in (TokenType.LEFT_DELIM, TokenType.PIPE, TokenType.FILTER, TokenType.RIGHT_DELIM):
            state.token_index += 1

        else:
            # EOF, or anything the matcher does not know: the template matched
            records.append(state.record)
            state.record = {}
            state.capture = None
            state.token_index = 0

    logger.debug(f"Matched {len(records)} records in {end} characters")
    return records


def _close_capture(template: Template, content: str, registry: FilterRegistry, state: _MatchState) -> None:
    capture = state.capture
    state.capture = None
    if capture.name == DISCARD:
        return
    value = content[capture.start:state.pos]
    state.record[capture.name] = registry.apply_chain(template.filters_for(capture.token_index), value)
