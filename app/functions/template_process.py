from core.promptcontrol import (
    PROMPT_AUTOPILOT,
    PROMPT_IMPROVE,
    PROMPT_SUPER_IMPROVE,
    PROMPT_NO_NAMES,
    PROMPT_NO_NAMES_EXCEPTIONS,
    PROMPT_TAGS,
    PROMPT_PROBLEMS,
    PROMPT_NEGATIVE,
    PROMPT_TRANSLATE,
    PROMPT_IDEAS,
    PROMPT_IDEA_DEFAULT,
    PROMPT_CUSTOM_PRESET,
    PROMPT_ANIME_FILL,
)
from typing import Any, Dict, Iterable, List, Optional, Union
import logging
import re

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

# Keys that steer the server, never described to the model
CONTROL_KEYS = {"generationModel", "nameExceptions", "encodingMethod"}

MODE_TEMPLATES = {
    "auto-pilot": PROMPT_AUTOPILOT,
    "improve": PROMPT_IMPROVE,
    "super-improve": PROMPT_SUPER_IMPROVE,
}

_PLACEHOLDER = re.compile(r"\[([A-Za-z_]+)\]")


def fill_template(template: str, **values: str) -> str:
    """Replace [Name] markers in one pass so user text is never re-scanned."""
    def _sub(match):
        key = match.group(1)
        return str(values[key]) if key in values else match.group(0)
    return _PLACEHOLDER.sub(_sub, template).strip()


class TemplateManager:
    @staticmethod
    def format_parameters(parameters: Dict[str, Any]) -> str:
        lines = []
        for key, value in parameters.items():
            if key in CONTROL_KEYS or not value:
                continue
            if isinstance(value, (list, tuple)):
                value = ", ".join(str(v) for v in value if v)
            lines.append(f"- {key}: {value}")
        return "\n".join(lines) if lines else "- none selected"

    @staticmethod
    def build_instruction(idea: str, parameters: Dict[str, Any], mode: str) -> str:
        template = MODE_TEMPLATES.get(mode)
        if template is None:
            raise ValueError(f"Unknown mode: {mode}")
        if mode == "auto-pilot":
            instruction = fill_template(template, Idea=idea)
        else:
            instruction = fill_template(
                template,
                Idea=idea,
                Parameters=TemplateManager.format_parameters(parameters or {}),
            )
        logging.info(f"[TEMPLATE] mode={mode}, instruction length={len(instruction)}")
        return instruction

    @staticmethod
    def parse_exceptions(raw: Union[str, Iterable[str], None]) -> List[str]:
        if not raw:
            return []
        if isinstance(raw, str):
            raw = raw.split(",")
        return [str(name).strip() for name in raw if str(name).strip()]

    @staticmethod
    def build_redaction(prompt: str, exceptions: Optional[List[str]] = None) -> str:
        keep = ""
        if exceptions:
            keep = fill_template(PROMPT_NO_NAMES_EXCEPTIONS, Names=", ".join(exceptions))
        return fill_template(PROMPT_NO_NAMES, Exceptions=keep, Prompt=prompt)

    @staticmethod
    def build_tags(idea: str, prompt: str) -> str:
        return fill_template(PROMPT_TAGS, Idea=idea, Prompt=prompt)

    @staticmethod
    def build_problems(idea: str, prompt: str) -> str:
        return fill_template(PROMPT_PROBLEMS, Idea=idea, Prompt=prompt)

    @staticmethod
    def build_negative(prompt: str) -> str:
        return fill_template(PROMPT_NEGATIVE, Prompt=prompt)

    @staticmethod
    def build_translation(text: str) -> str:
        return fill_template(PROMPT_TRANSLATE, Text=text)

    @staticmethod
    def build_idea(idea_type: Optional[str] = None) -> str:
        return PROMPT_IDEAS.get(idea_type, PROMPT_IDEA_DEFAULT)

    @staticmethod
    def build_custom_preset(idea: str) -> str:
        return fill_template(PROMPT_CUSTOM_PRESET, Idea=idea)

    @staticmethod
    def build_anime_fill(title: str) -> str:
        return fill_template(PROMPT_ANIME_FILL, Title=title)
