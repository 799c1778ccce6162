import asyncio
import base64

import pytest

from core.errors import UpstreamError
from core.promptcontrol import COMPLEXITY_MEDIUM
from models.promptmodel import Draft, GenerationRequest
from services.prompt_service import GenerationStage, PromptPipeline, RedactionStage
from tests.fakes import FakeGemini


class FixedStage:
    def __init__(self, text):
        self.text = text
        self.seen = []

    async def run(self, request):
        self.seen.append(request)
        return Draft(instruction="stub", text=self.text, model_name=request.model_override())


class UpperRedaction:
    def __init__(self):
        self.seen = []

    async def run(self, draft, exceptions=None):
        self.seen.append((draft, exceptions))
        return Draft(instruction="redact", text=draft.text.upper(), model_name=draft.model_name)


def _request(**overrides):
    data = {"idea": "a knight in the rain", "parameters": {}, "mode": "improve"}
    data.update(overrides)
    return GenerationRequest(**data)


def test_general_mode_passes_draft_through():
    pipeline = PromptPipeline(None, generation=FixedStage("Rain on armor."), redaction=UpperRedaction())
    result = asyncio.run(pipeline.run(_request()))
    assert result == "Rain on armor."
    assert pipeline.redaction.seen == []


def test_no_names_runs_second_stage_with_exceptions():
    redaction = UpperRedaction()
    pipeline = PromptPipeline(None, generation=FixedStage("Arthur rides."), redaction=redaction)
    request = _request(operatingMode="no-names", parameters={"nameExceptions": "Arthur, Merlin"})
    result = asyncio.run(pipeline.run(request))
    assert result == "ARTHUR RIDES."
    draft, exceptions = redaction.seen[0]
    assert draft.text == "Arthur rides."
    assert exceptions == ["Arthur", "Merlin"]


def test_base64_encodes_after_suffixes():
    pipeline = PromptPipeline(None, generation=FixedStage("Rain on armor."))
    request = _request(operatingMode="base64", parameters={"sceneComplexity": 6})
    result = asyncio.run(pipeline.run(request))
    assert base64.b64decode(result).decode("utf-8") == "Rain on armor." + COMPLEXITY_MEDIUM


def test_unknown_encoding_method_falls_back_to_base64():
    pipeline = PromptPipeline(None, generation=FixedStage("Rain."))
    request = _request(operatingMode="base64", parameters={"encodingMethod": "hex"})
    assert asyncio.run(pipeline.run(request)) == base64.b64encode(b"Rain.").decode("ascii")


def test_rot13_encoding_method():
    pipeline = PromptPipeline(None, generation=FixedStage("Rain."))
    request = _request(operatingMode="base64", parameters={"encodingMethod": "rot13"})
    assert asyncio.run(pipeline.run(request)) == "Enva."


def test_generation_stage_sends_template_and_model():
    fake = FakeGemini(reply="  Knight.  ")
    draft = asyncio.run(GenerationStage(fake).run(_request(generationModel="gemini-1.5-pro")))
    assert draft.text == "Knight."
    assert draft.model_name == "gemini-1.5-pro"
    instruction, model_name = fake.calls[0]
    assert "Idea: a knight in the rain" in instruction
    assert model_name == "gemini-1.5-pro"


def test_redaction_stage_feeds_first_output_into_second_call():
    fake = FakeGemini(reply="A boy wizard.")
    draft = Draft(instruction="first", text="Harry Potter flies.", model_name="m")
    redacted = asyncio.run(RedactionStage(fake).run(draft, ["Hedwig"]))
    assert redacted.text == "A boy wizard."
    assert "Original prompt: Harry Potter flies." in fake.instructions[0]
    assert "Hedwig" in fake.instructions[0]
    assert fake.calls[0][1] == "m"


def test_second_stage_failure_discards_first_output():
    calls = []

    def reply(instruction):
        calls.append(instruction)
        if len(calls) == 2:
            raise UpstreamError("second call failed")
        return "first output"

    fake = FakeGemini(reply=reply)
    with pytest.raises(UpstreamError):
        asyncio.run(PromptPipeline(fake).run(_request(operatingMode="no-names")))
    assert len(calls) == 2
