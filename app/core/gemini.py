import logging

import google.generativeai as genai

from core.errors import UpstreamError


class GeminiClient:
    """Thin call-and-await wrapper around the Gemini text model.

    One instance is built at startup and shared by every request. Each call
    sends one instruction and returns the model text; nothing is retried.
    """

    def __init__(self, api_key: str, default_model: str):
        genai.configure(api_key=api_key)
        self.default_model = default_model

    async def generate(self, instruction: str, model_name: str = None) -> str:
        name = model_name or self.default_model
        logging.info(f"[GEMINI] Sending instruction to {name}, length={len(instruction)}")
        try:
            model = genai.GenerativeModel(name)
            response = await model.generate_content_async(instruction)
        except Exception as e:
            raise UpstreamError(f"Gemini call failed: {e}", model_name=name) from e

        if not response.candidates:
            reason = getattr(response.prompt_feedback, "block_reason", None)
            raise UpstreamError(f"Gemini blocked the instruction: {reason}", model_name=name)

        try:
            text = response.text
        except ValueError as e:
            raise UpstreamError(f"Gemini returned no text: {e}", model_name=name) from e

        logging.info(f"[GEMINI] Response received from {name}, length={len(text)}")
        return text
