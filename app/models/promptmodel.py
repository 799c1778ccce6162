from dataclasses import dataclass
from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, Literal, Optional

Mode = Literal["auto-pilot", "improve", "super-improve"]
OperatingMode = Literal["general", "no-names", "base64"]


class GenerationRequest(BaseModel):
    idea: str = Field(..., min_length=1)  # User's raw video idea
    parameters: Dict[str, Any]  # Open-ended, unknown keys are allowed
    mode: Mode
    operatingMode: Optional[OperatingMode] = "general"  # Post-processing policy
    generationModel: Optional[str] = None  # Upstream model override

    @field_validator("parameters")
    def model_name_is_text(cls, v):
        name = v.get("generationModel")
        if name is not None and not isinstance(name, str):
            raise ValueError("generationModel must be a string")
        return v

    def model_override(self) -> Optional[str]:
        return self.generationModel or self.parameters.get("generationModel") or None

    def operating_mode(self) -> str:
        return self.operatingMode or "general"


class GenerationResponse(BaseModel):
    generatedPrompt: str


@dataclass(frozen=True)
class Draft:
    """Output of the first model call, before redaction and transforms."""
    instruction: str
    text: str
    model_name: Optional[str] = None
