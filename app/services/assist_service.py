from models.assistmodel import IdeaRequest, NegativeRequest, ProblemRequest, TagRequest, TranslateRequest
from functions.template_process import TemplateManager
from functions.text_process import TextPrecheck
import logging

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


class AssistService:
    """Single-call helpers around a finished prompt."""

    def __init__(self, client):
        self.client = client

    async def generate_tags(self, request: TagRequest) -> str:
        instruction = TemplateManager.build_tags(request.idea, request.prompt)
        text = await self.client.generate(instruction, request.model_override())
        tags = TextPrecheck.format_tags(text)
        logging.info(f"[TAGS] Generated {len(tags.split(', ')) if tags else 0} tags")
        return tags

    async def predict_problems(self, request: ProblemRequest) -> str:
        instruction = TemplateManager.build_problems(request.idea, request.prompt)
        text = await self.client.generate(instruction, request.model_override())
        return text.strip()

    async def generate_negative(self, request: NegativeRequest) -> str:
        instruction = TemplateManager.build_negative(request.prompt)
        text = await self.client.generate(instruction, request.model_override())
        if request.clean:
            return TextPrecheck.clean_negative(text)
        return text.strip()

    async def translate(self, request: TranslateRequest) -> str:
        instruction = TemplateManager.build_translation(request.text)
        text = await self.client.generate(instruction, request.model_override())
        return text.strip()

    async def generate_idea(self, request: IdeaRequest) -> str:
        instruction = TemplateManager.build_idea(request.type)
        logging.info(f"[IDEAS] type={request.type or 'general'}")
        text = await self.client.generate(instruction, request.model_override())
        return text.strip()
