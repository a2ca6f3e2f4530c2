# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/4 15:36
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Gemini generateContent 请求与响应体
"""
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class Part(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str | None = None


class Content(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: Literal["user", "model"] | None = "user"
    parts: List[Part] = Field(default_factory=list)


class GenerateContentPayload(BaseModel):
    contents: List[Content]

    @classmethod
    def from_prompt(cls, prompt: str) -> "GenerateContentPayload":
        return cls(contents=[Content(role="user", parts=[Part(text=prompt)])])

    def dumps_params(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class Candidate(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    content: Content | None = None
    finish_reason: str | None = Field(default=None, alias="finishReason")


class PromptFeedback(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    block_reason: str | None = Field(default=None, alias="blockReason")


class GenerateContentResponse(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    candidates: List[Candidate] = Field(default_factory=list)
    prompt_feedback: PromptFeedback | None = Field(default=None, alias="promptFeedback")

    @property
    def text(self) -> str:
        """Concatenated text parts of the first candidate, empty when blocked or missing."""
        if not self.candidates or not self.candidates[0].content:
            return ""
        return "".join(part.text or "" for part in self.candidates[0].content.parts)
