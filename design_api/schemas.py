"""
Response models
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class Stats(BaseModel):
    components: int
    tokens: int
    total: int


class ServiceInfo(BaseModel):
    name: str
    version: str
    description: str
    endpoints: List[str]
    stats: Stats


class ComponentSummary(BaseModel):
    # title / description はレコードに無ければ出力しない（exclude_unset）
    name: str
    title: Optional[Any] = None
    description: Optional[Any] = None
    hasProps: bool
    hasExamples: bool


class TokensResponse(BaseModel):
    count: int
    tokens: Dict[str, Any]


class ComponentHit(BaseModel):
    type: Literal["component"]
    name: str
    title: Optional[Any] = None
    description: Optional[Any] = None
    matches: List[str]


class TokenHit(BaseModel):
    type: Literal["token"]
    name: str
    value: Any
    matches: List[str]


class SearchResponse(BaseModel):
    query: str
    count: int
    results: List[Annotated[Union[ComponentHit, TokenHit], Field(discriminator="type")]]
