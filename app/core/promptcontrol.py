PROMPT_AUTOPILOT = """
You are an expert prompt engineer for text-to-video generation models.
Take the user's idea and make every creative decision yourself: visual style, camera work, lighting, mood, motion, background and sound.

Strict formatting rules:
- Write one cohesive paragraph in English, between 80 and 150 words
- Describe only what is seen and heard, in the present tense
- Do not include headings, lists, quotation marks or commentary
- Begin directly with the first sentence of the prompt

Now I will provide the input:
Idea: [Idea]
"""

PROMPT_IMPROVE = """
You are an expert prompt engineer for text-to-video generation models.
Turn the user's idea into a detailed video generation prompt. Respect every parameter the user selected; where a parameter is missing, choose something that fits the idea.

Strict formatting rules:
- Write one cohesive paragraph in English, between 80 and 150 words
- Weave the parameters into natural descriptive language, never list them
- Do not include headings, lists, quotation marks or commentary
- Begin directly with the first sentence of the prompt

Now I will provide the input:
Idea: [Idea]
Parameters:
[Parameters]
"""

PROMPT_SUPER_IMPROVE = """
You are a senior cinematographer and prompt engineer for state of the art text-to-video models.
Expand the user's idea into a production-grade shot description. Treat every selected parameter as a hard constraint and enrich everything else with precise, filmic detail.

Cover, in this order:
1. Subject and action, with concrete physical detail
2. Setting and background, with time of day and weather
3. Camera: shot size, lens, movement and framing
4. Lighting: sources, direction, color temperature and contrast
5. Mood, color grade and visual style
6. Motion pacing, effects and ambient audio

Strict formatting rules:
- Write a single paragraph in English, between 150 and 250 words
- Never mention the numbered structure above, never use headings or lists
- Do not include quotation marks or commentary
- Begin directly with the first sentence of the prompt

Now I will provide the input:
Idea: [Idea]
Parameters:
[Parameters]
"""

PROMPT_NO_NAMES = """
Rewrite the following video prompt so that it contains no proper names of real or fictional people, characters, brands, franchises or trademarked places.
Replace each name with a vivid visual description of the same thing. For example, instead of "Harry Potter", write "a young wizard with round glasses and a lightning-shaped scar".
Keep everything else exactly as it is: length, structure, camera and lighting details.
[Exceptions]
Return only the rewritten prompt, without commentary.

Original prompt: [Prompt]
"""

PROMPT_NO_NAMES_EXCEPTIONS = "Keep these names unchanged: [Names]."

PROMPT_TAGS = """
You are a video content strategist.
Create 10 to 15 short tags that describe the video below: genre, subject, style, mood and audience.

Strict formatting rules:
- Return the tags on one line, separated by commas
- Each tag is one to three words, lowercase, without the # sign
- Do not include commentary

Idea: [Idea]
Prompt: [Prompt]
"""

PROMPT_PROBLEMS = """
You are a quality assurance specialist for AI video generation.
Read the idea and the prompt below and predict what is likely to go wrong when a text-to-video model renders it: anatomy and hands, text rendering, physics, temporal consistency, crowd scenes, fast motion, reflections, and anything specific to this prompt.

For each problem write one line in the form:
- Problem: short description. Fix: how to adjust the prompt.

List at most 7 problems, most likely first. Do not include any introduction.

Idea: [Idea]
Prompt: [Prompt]
"""

PROMPT_NEGATIVE = """
You are an expert in negative prompts for diffusion-based video models.
Write a negative prompt for the video prompt below: visual defects, unwanted styles and content that would contradict the prompt.

Strict formatting rules:
- Return a single line of comma separated terms
- Use between 15 and 30 terms
- Do not include commentary

Prompt: [Prompt]
"""

PROMPT_TRANSLATE = """
Translate the following text to English. Keep the meaning, tone and any technical film terms. Return only the translation.

Text: [Text]
"""

PROMPT_IDEAS = {
    "subject": "Suggest one unexpected and visually striking subject for a short AI-generated video. Answer with a single sentence, no introduction.",
    "style": "Suggest one distinctive visual style for a short AI-generated video, naming the art movement, medium or film look. Answer with a single short phrase, no introduction.",
    "quality": "Suggest one set of quality and rendering keywords that make an AI-generated video look premium. Answer with a single line of comma separated keywords, no introduction.",
}

PROMPT_IDEA_DEFAULT = "Generate a creative and interesting idea for a video. Answer with one or two sentences, no introduction."

PROMPT_CUSTOM_PRESET = """
You are a creative director building presets for a text-to-video prompt editor.
Design a complete preset for the idea below.

Return only a JSON object with exactly these keys, every value a short English phrase:
{
  "style": "cinematic photorealism",
  "camera": "slow dolly-in, 35mm lens",
  "lighting": "golden hour backlight",
  "cinematography": "shallow depth of field, anamorphic flares",
  "mood": "nostalgic and warm",
  "effect": "light film grain",
  "background": "quiet coastal village at dusk",
  "audio": "soft waves and distant gulls",
  "details": "wind moving through hair, dust in the light",
  "negative": "blurry, distorted faces, text, watermark"
}

Idea: [Idea]
"""

PROMPT_ANIME_FILL = """
You are an anime historian.
For the anime title below, identify the animation studio, describe its visual style in a short phrase, and name the character designer or key artist.

Return only a JSON object with exactly these keys:
{"studio": "...", "style": "...", "artist": "..."}

Title: [Title]
"""

COMPLEXITY_HIGH = ", an intricately detailed scene with many layered elements, dense background activity and rich textures"
COMPLEXITY_MEDIUM = ", a moderately detailed scene with several interacting elements"

INTENSITY_CLAUSES = {
    "low": ", with calm, gentle motion and a restrained atmosphere",
    "medium": ", with steady, natural motion and balanced energy",
    "high": ", with dynamic, energetic motion and heightened drama",
    "extreme": ", with explosive, relentless motion and overwhelming intensity",
}
