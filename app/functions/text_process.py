from core.promptcontrol import COMPLEXITY_HIGH, COMPLEXITY_MEDIUM, INTENSITY_CLAUSES
from typing import Any, Optional
from urllib.parse import quote, unquote
import base64
import codecs
import logging
import re

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


class TextPrecheck:
    @staticmethod
    def clean_content(text: str) -> str:
        """Strip markdown, quotes, bullets and headings, keep line breaks."""
        text = re.sub(r"^\s*#+\s*", "", text, flags=re.MULTILINE)
        text = re.sub(r"(Negative prompt:|Tags:|Translation:)", "", text, flags=re.IGNORECASE)
        text = re.sub(r"(\*\*|__|\*|`)", "", text)
        text = text.replace('"', "")
        text = re.sub(r"^(?:[-•]|\d+[.)])\s+", "", text, flags=re.MULTILINE)
        text = re.sub(r"\n{2,}", "\n", text)
        text = '\n'.join([line.strip() for line in text.split('\n')])
        text = re.sub(r"[ \t]+", " ", text)
        return text.strip()

    @staticmethod
    def split_terms(text: str) -> list:
        """Split a comma or newline separated list, lowercased and deduplicated."""
        seen = []
        for term in re.split(r"[,\n]", text):
            term = term.strip().strip(".").lower()
            if term and term not in seen:
                seen.append(term)
        return seen

    @staticmethod
    def clean_negative(text: str) -> str:
        return ", ".join(TextPrecheck.split_terms(TextPrecheck.clean_content(text)))

    @staticmethod
    def format_tags(text: str) -> str:
        tags = []
        for term in TextPrecheck.split_terms(TextPrecheck.clean_content(text)):
            tag = "#" + re.sub(r"[\s#]+", "", term)
            if tag != "#" and tag not in tags:
                tags.append(tag)
        return ", ".join(tags)


class SuffixManager:
    @staticmethod
    def parse_complexity(value: Any) -> Optional[float]:
        if value is None or isinstance(value, bool):
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            logging.warning(f"[POSTPROCESS] Ignoring non-numeric sceneComplexity={value!r}")
            return None

    @staticmethod
    def complexity_suffix(value: Any) -> str:
        level = SuffixManager.parse_complexity(value)
        if level is None:
            return ""
        if level > 7:
            return COMPLEXITY_HIGH
        if level > 5:
            return COMPLEXITY_MEDIUM
        return ""

    @staticmethod
    def intensity_suffix(value: Any) -> str:
        if not isinstance(value, str):
            return ""
        return INTENSITY_CLAUSES.get(value.strip().lower(), "")

    @staticmethod
    def apply(text: str, parameters: dict) -> str:
        text = text.rstrip()
        text += SuffixManager.complexity_suffix(parameters.get("sceneComplexity"))
        text += SuffixManager.intensity_suffix(parameters.get("intensityLevels"))
        return text


class Encoder:
    METHODS = ("base64", "rot13", "url")

    @staticmethod
    def encode(text: str, method: str = "base64") -> str:
        method = (method or "base64").lower()
        if method == "base64":
            return base64.b64encode(text.encode("utf-8")).decode("ascii")
        if method == "rot13":
            return codecs.encode(text, "rot_13")
        if method == "url":
            return quote(text, safe="")
        raise ValueError(f"Unknown encoding method: {method}")

    @staticmethod
    def decode(text: str, method: str = "base64") -> str:
        method = (method or "base64").lower()
        if method == "base64":
            return base64.b64decode(text.encode("ascii")).decode("utf-8")
        if method == "rot13":
            return codecs.decode(text, "rot_13")
        if method == "url":
            return unquote(text)
        raise ValueError(f"Unknown encoding method: {method}")
