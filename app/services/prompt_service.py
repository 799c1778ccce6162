from models.promptmodel import Draft, GenerationRequest
from functions.template_process import TemplateManager
from functions.text_process import Encoder, SuffixManager
import logging

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


class GenerationStage:
    """First model call: idea + parameters through the mode template."""

    def __init__(self, client):
        self.client = client

    async def run(self, request: GenerationRequest) -> Draft:
        instruction = TemplateManager.build_instruction(request.idea, request.parameters, request.mode)
        model_name = request.model_override()
        text = await self.client.generate(instruction, model_name)
        return Draft(instruction=instruction, text=text.strip(), model_name=model_name)


class RedactionStage:
    """Second model call: rewrite proper names into descriptions."""

    def __init__(self, client):
        self.client = client

    async def run(self, draft: Draft, exceptions=None) -> Draft:
        instruction = TemplateManager.build_redaction(draft.text, exceptions)
        text = await self.client.generate(instruction, draft.model_name)
        return Draft(instruction=instruction, text=text.strip(), model_name=draft.model_name)


class PromptPipeline:
    def __init__(self, client, generation: GenerationStage = None, redaction: RedactionStage = None):
        self.generation = generation or GenerationStage(client)
        self.redaction = redaction or RedactionStage(client)

    async def draft(self, request: GenerationRequest) -> Draft:
        return await self.generation.run(request)

    async def finish(self, draft: Draft, request: GenerationRequest) -> str:
        parameters = request.parameters
        operating_mode = request.operating_mode()

        if operating_mode == "no-names":
            exceptions = TemplateManager.parse_exceptions(parameters.get("nameExceptions"))
            logging.info(f"[PROMPT] Redacting names, exceptions={exceptions}")
            draft = await self.redaction.run(draft, exceptions)

        text = SuffixManager.apply(draft.text, parameters)

        if operating_mode == "base64":
            method = str(parameters.get("encodingMethod") or "base64").lower()
            if method not in Encoder.METHODS:
                logging.warning(f"[PROMPT] Unknown encodingMethod={method!r}, using base64")
                method = "base64"
            text = Encoder.encode(text, method)
        return text

    async def run(self, request: GenerationRequest) -> str:
        logging.info(f"[PROMPT] mode={request.mode}, operatingMode={request.operating_mode()}, model={request.model_override()}")
        draft = await self.draft(request)
        return await self.finish(draft, request)
