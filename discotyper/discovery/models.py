"""Models of the Google Discovery REST description dialect.

Only the parts of the format that the generator reads are modelled
strictly; everything else is accepted and ignored so that new Discovery
fields never break loading.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class JsonSchema(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    id: Optional[str] = None
    type: Optional[str] = None
    field_ref: Optional[str] = Field(None, alias='$ref')
    description: Optional[str] = None
    default: Optional[Any] = None
    required: Optional[bool] = None
    format: Optional[str] = None
    pattern: Optional[str] = None
    minimum: Optional[str] = None
    maximum: Optional[str] = None
    enum: Optional[List[str]] = None
    enumDescriptions: Optional[List[str]] = None
    repeated: Optional[bool] = None
    location: Optional[str] = None
    readOnly: Optional[bool] = None
    deprecated: Optional[bool] = None
    items: Optional[JsonSchema] = None
    properties: Optional[Dict[str, JsonSchema]] = None
    additionalProperties: Optional[JsonSchema] = None

    def is_empty(self) -> bool:
        """True when the schema declares neither properties nor a value type."""
        return not self.properties and self.additionalProperties is None


class SchemaRef(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    field_ref: Optional[str] = Field(None, alias='$ref')
    parameterName: Optional[str] = None


class RestMethod(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: Optional[str] = None
    path: Optional[str] = None
    flatPath: Optional[str] = None
    httpMethod: Optional[str] = None
    description: Optional[str] = None
    parameters: Optional[Dict[str, JsonSchema]] = None
    parameterOrder: Optional[List[str]] = None
    request: Optional[SchemaRef] = None
    response: Optional[SchemaRef] = None
    scopes: Optional[List[str]] = None
    supportsMediaDownload: Optional[bool] = None
    supportsMediaUpload: Optional[bool] = None


class RestResource(BaseModel):
    model_config = ConfigDict(extra='ignore')

    methods: Optional[Dict[str, RestMethod]] = None
    resources: Optional[Dict[str, RestResource]] = None


class Scope(BaseModel):
    model_config = ConfigDict(extra='ignore')

    description: Optional[str] = None


class OAuth2(BaseModel):
    model_config = ConfigDict(extra='ignore')

    scopes: Optional[Dict[str, Scope]] = None


class Auth(BaseModel):
    model_config = ConfigDict(extra='ignore')

    oauth2: Optional[OAuth2] = None


class RestDescription(BaseModel):
    model_config = ConfigDict(extra='ignore')

    kind: Optional[str] = 'discovery#restDescription'
    discoveryVersion: Optional[str] = None
    id: Optional[str] = None
    name: str
    version: str
    revision: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    ownerDomain: Optional[str] = None
    ownerName: Optional[str] = None
    documentationLink: Optional[str] = None
    protocol: Optional[str] = None
    rootUrl: Optional[str] = None
    servicePath: Optional[str] = None
    baseUrl: Optional[str] = None
    batchPath: Optional[str] = None
    labels: Optional[List[str]] = None
    parameters: Optional[Dict[str, JsonSchema]] = None
    auth: Optional[Auth] = None
    schemas: Optional[Dict[str, JsonSchema]] = None
    methods: Optional[Dict[str, RestMethod]] = None
    resources: Optional[Dict[str, RestResource]] = None


class DirectoryItem(BaseModel):
    model_config = ConfigDict(extra='ignore')

    kind: Optional[str] = None
    id: Optional[str] = None
    name: str
    version: str
    title: Optional[str] = None
    description: Optional[str] = None
    discoveryRestUrl: str
    documentationLink: Optional[str] = None
    preferred: bool = False


class DirectoryList(BaseModel):
    model_config = ConfigDict(extra='ignore')

    kind: Optional[str] = 'discovery#directoryList'
    discoveryVersion: Optional[str] = None
    items: List[DirectoryItem] = Field(default_factory=list)


JsonSchema.model_rebuild()
RestResource.model_rebuild()
RestDescription.model_rebuild()
