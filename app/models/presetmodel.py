from pydantic import BaseModel, Field

from models.assistmodel import ModelOverride


class PresetRequest(ModelOverride):
    idea: str = Field(..., min_length=1)


class AnimeRequest(ModelOverride):
    title: str = Field(..., min_length=1)


class CustomPreset(BaseModel):
    style: str = ""
    camera: str = ""
    lighting: str = ""
    cinematography: str = ""
    mood: str = ""
    effect: str = ""
    background: str = ""
    audio: str = ""
    details: str = ""
    negative: str = ""


class AnimeFill(BaseModel):
    studio: str = ""
    style: str = ""
    artist: str = ""
