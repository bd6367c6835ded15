"""
Common Pydantic models used across all tools.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

# Deck, model, field and tag names and search queries are trimmed. Note
# content, templates, CSS and regex patterns are passed through verbatim.
Name = Annotated[str, StringConstraints(strip_whitespace=True)]


class BaseInput(BaseModel):
    """
    Base class for all tool input models.

    Fields are exposed to MCP clients in camelCase (``noteIds``,
    ``batchSize``); snake_case names are accepted as well.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )
