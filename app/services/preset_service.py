from models.presetmodel import AnimeFill, AnimeRequest, CustomPreset, PresetRequest
from functions.template_process import TemplateManager
from functions.json_process import JsonExtractor
import logging

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


class PresetService:
    def __init__(self, client):
        self.client = client

    async def custom_preset(self, request: PresetRequest) -> CustomPreset:
        instruction = TemplateManager.build_custom_preset(request.idea)
        content = await self.client.generate(instruction, request.model_override())
        preset = JsonExtractor.coerce(content, CustomPreset)
        logging.info(f"[PRESET] Custom preset built, style={preset.style!r}")
        return preset

    async def anime_fill(self, request: AnimeRequest) -> AnimeFill:
        instruction = TemplateManager.build_anime_fill(request.title)
        content = await self.client.generate(instruction, request.model_override())
        fill = JsonExtractor.coerce(content, AnimeFill)
        logging.info(f"[ANIME] {request.title!r} -> studio={fill.studio!r}")
        return fill
