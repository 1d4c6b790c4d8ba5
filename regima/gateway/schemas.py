"""Pydantic request models for the mock gateway endpoints."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    role: Optional[str] = None
    # plain text or OpenAI content parts
    content: Union[str, List[Any], None] = ""
    model_config = ConfigDict(extra="allow")


class ChatCompletionRequest(BaseModel):
    model: Optional[str] = None
    messages: List[ChatMessage] = Field(default_factory=list)
    model_config = ConfigDict(extra="allow")


class ConsultationRequest(BaseModel):
    skin_type: Optional[str] = Field(default=None, alias="skinType")
    concerns: Optional[Any] = None
    routine: Optional[str] = None
    goals: Optional[Any] = None
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class ImageAnalysisRequest(BaseModel):
    image_data: Optional[str] = Field(default=None, alias="imageData")
    analysis_type: Optional[str] = Field(default=None, alias="analysisType")
    model_config = ConfigDict(populate_by_name=True, extra="allow")


def describe_services(category: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Flatten a service category into the public listing shape."""
    return [
        {
            "name": name,
            "endpoint": service.endpoint,
            "description": service.description,
            "capabilities": service.capabilities,
        }
        for name, service in category.items()
    ]
