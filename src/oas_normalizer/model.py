"""Version-agnostic HTTP operation model.

Both the Swagger 2.0 and the OpenAPI 3.x translators convert their input
into these models, so downstream consumers never see version-specific shapes.
Dump with ``to_dict()``: keys come out camelCased and a field the translator
never set stays absent instead of turning into ``null``.

Fields copied from the source document are typed ``Any``: a wrong-typed
value in one description must not stop the rest of the document from
being normalized. Keys the translators build themselves are coerced to str.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Mapping keys used as names (status codes, media types, example names) may
# come out of YAML as ints.
Key = Annotated[str, BeforeValidator(str)]


class NormalizedModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=True)


class KeyedExample(NormalizedModel):
    """A named example. Example-object fields (summary, $ref, ...) ride along."""

    model_config = ConfigDict(extra="allow")

    key: Key
    value: Any = None
    summary: Any = None
    description: Any = None
    external_value: Any = None


class HttpEncoding(NormalizedModel):
    property_name: Key = Field(alias="property")
    media_type: Any = None
    style: Any = None
    explode: Any = None
    allow_reserved: Any = None


class MediaTypeContent(NormalizedModel):
    media_type: Key  # "" only for the bucket of examples matching no media type
    schema_: Any = Field(default=None, alias="schema")
    examples: list[KeyedExample] = Field(default_factory=list)
    encodings: list[HttpEncoding] = Field(default_factory=list)


class HttpParam(NormalizedModel):
    """A single parameter (header, query, cookie or path) or response header."""

    model_config = ConfigDict(extra="allow")

    name: Any = None
    style: Any = None
    schema_: Any = Field(default=None, alias="schema")
    examples: list[KeyedExample] = Field(default_factory=list)
    description: Any = None
    required: Any = None
    deprecated: Any = None
    explode: Any = None
    allow_empty_value: Any = None
    allow_reserved: Any = None


class NormalizedResponse(NormalizedModel):
    code: Key
    description: Any = None
    headers: list[HttpParam] = Field(default_factory=list)
    contents: list[MediaTypeContent] = Field(default_factory=list)


class NormalizedRequestBody(NormalizedModel):
    required: Any = None
    description: Any = None
    contents: list[MediaTypeContent] = Field(default_factory=list)


class NormalizedRequest(NormalizedModel):
    body: NormalizedRequestBody
    headers: list[HttpParam]
    query: list[HttpParam]
    cookie: list[HttpParam]
    path: list[HttpParam]


class HttpOperation(NormalizedModel):
    """A single operation with all its normalized metadata."""

    id: Any = None
    method: str  # get / post / put / delete / ...
    path: Key  # /pets/{petId}
    summary: Any = None
    description: Any = None
    deprecated: Any = None
    tags: list[Any] = Field(default_factory=list)
    request: NormalizedRequest
    responses: list[NormalizedResponse]
