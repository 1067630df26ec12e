from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class AnalysisResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    filename: str
    size: int
    source: Literal["pdf", "ocr"] = Field(alias="type")
    chars: int
    preview: str
    full_text: str = Field(alias="fullText")
    suggestions: list[str] = Field(default_factory=list)
