from pydantic import BaseModel, Field
from typing import Literal, Optional


class ModelOverride(BaseModel):
    generationModel: Optional[str] = None  # Upstream model override

    def model_override(self) -> Optional[str]:
        return self.generationModel or None


class TagRequest(ModelOverride):
    idea: str = Field(..., min_length=1)
    prompt: str = Field(..., min_length=1)
    modelName: Optional[str] = None  # Older clients send the override here

    def model_override(self) -> Optional[str]:
        return self.generationModel or self.modelName or None


class ProblemRequest(TagRequest):
    pass


class NegativeRequest(ModelOverride):
    prompt: str = Field(..., min_length=1)
    clean: Optional[bool] = False  # Normalize into a plain comma separated list


class TranslateRequest(ModelOverride):
    text: str = Field(..., min_length=1)


class IdeaRequest(ModelOverride):
    type: Optional[Literal["subject", "style", "quality"]] = None


class TagResponse(BaseModel):
    generatedTags: str


class ProblemResponse(BaseModel):
    predictedProblems: str


class NegativeResponse(BaseModel):
    generatedNegative: str


class TranslateResponse(BaseModel):
    translatedText: str


class IdeaResponse(BaseModel):
    idea: str
