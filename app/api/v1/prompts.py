from fastapi import APIRouter, Depends, Request
from typing import Optional
from models.promptmodel import GenerationRequest, GenerationResponse
from models.assistmodel import (
    IdeaRequest, IdeaResponse,
    NegativeRequest, NegativeResponse,
    ProblemRequest, ProblemResponse,
    TagRequest, TagResponse,
    TranslateRequest, TranslateResponse,
)
from models.presetmodel import AnimeFill, AnimeRequest, CustomPreset, PresetRequest
from services.prompt_service import PromptPipeline
from services.assist_service import AssistService
from services.preset_service import PresetService
from core.config import SERVICE_NAME

router = APIRouter(prefix="/api", tags=["Prompts"])


def get_pipeline(request: Request) -> PromptPipeline:
    return request.app.state.pipeline

def get_assist(request: Request) -> AssistService:
    return request.app.state.assist

def get_presets(request: Request) -> PresetService:
    return request.app.state.presets


@router.get("/health")
def health():
    return {"status": "ok", "service": SERVICE_NAME}


@router.post("/generate-prompt", response_model=GenerationResponse)
async def generate_prompt(payload: GenerationRequest, pipeline: PromptPipeline = Depends(get_pipeline)):
    generated = await pipeline.run(payload)
    return GenerationResponse(generatedPrompt=generated)


@router.post("/generate-tags", response_model=TagResponse)
async def generate_tags(payload: TagRequest, assist: AssistService = Depends(get_assist)):
    return TagResponse(generatedTags=await assist.generate_tags(payload))


@router.post("/predict-problems", response_model=ProblemResponse)
async def predict_problems(payload: ProblemRequest, assist: AssistService = Depends(get_assist)):
    return ProblemResponse(predictedProblems=await assist.predict_problems(payload))


@router.post("/generate-negative-prompt", response_model=NegativeResponse)
async def generate_negative_prompt(payload: NegativeRequest, assist: AssistService = Depends(get_assist)):
    return NegativeResponse(generatedNegative=await assist.generate_negative(payload))


@router.post("/translate", response_model=TranslateResponse)
async def translate(payload: TranslateRequest, assist: AssistService = Depends(get_assist)):
    return TranslateResponse(translatedText=await assist.translate(payload))


@router.post("/generate-ideas", response_model=IdeaResponse)
async def generate_ideas(payload: Optional[IdeaRequest] = None, assist: AssistService = Depends(get_assist)):
    return IdeaResponse(idea=await assist.generate_idea(payload or IdeaRequest()))


@router.post("/generate-custom-preset", response_model=CustomPreset)
async def generate_custom_preset(payload: PresetRequest, presets: PresetService = Depends(get_presets)):
    return await presets.custom_preset(payload)


@router.post("/anime-auto-fill", response_model=AnimeFill)
async def anime_auto_fill(payload: AnimeRequest, presets: PresetService = Depends(get_presets)):
    return await presets.anime_fill(payload)
