from core.errors import UpstreamError
from pydantic import BaseModel
from typing import Type, TypeVar
import json
import logging
import re

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

T = TypeVar("T", bound=BaseModel)


class JsonExtractor:
    @staticmethod
    def extract_object(content: str) -> dict:
        """Pull the first JSON object out of model text, tolerating code fences."""
        if "```json" in content:
            content = content.split("```json")[1].split("```")[0].strip()
        elif "```" in content:
            content = content.split("```")[1].strip()

        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            match = re.search(r"\{.*\}", content, re.DOTALL)
            if not match:
                raise UpstreamError("Model response contains no JSON object")
            try:
                data = json.loads(match.group(0))
            except json.JSONDecodeError as e:
                logging.error(f"[JSON] Decode error: {e}")
                raise UpstreamError("Invalid JSON response from model") from e

        if not isinstance(data, dict):
            raise UpstreamError("Model JSON is not an object")
        return data

    @staticmethod
    def coerce(content: str, schema: Type[T]) -> T:
        """Keep only the schema's keys and stringify the values."""
        data = JsonExtractor.extract_object(content)
        values = {}
        for key in schema.model_fields:
            value = data.get(key)
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                value = ", ".join(str(v) for v in value)
            values[key] = str(value).strip()
        missing = [key for key in schema.model_fields if key not in values]
        if missing:
            logging.warning(f"[JSON] {schema.__name__} missing keys from model: {missing}")
        return schema(**values)
