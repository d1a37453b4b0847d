"""Prompt builders for black-and-white photo analysis."""

BASE_PROMPT = (
    'As a "ChromaRestore AI Expert", analyze this historical black-and-white photograph. '
    "Your goal is to provide a comprehensive plan for digital reconstruction and colorization.\n\n"
    "Tasks:\n"
    "1. Scene Detection: Identify objects, textures, period, and geographical context. "
    "Analyze any text or notes.\n"
    "2. Color Palette: Create a set of colors (HEX) for accurate colorization based on "
    "historical research or the provided reference.\n"
    "3. Restoration Guide: List technical steps to repair damage, noise, or sharpness.\n"
    "4. Imagen Prompt: Generate a professional English technical prompt for "
    "Image-to-Image colorization."
)

REFERENCE_CLAUSE = (
    "There is a second image provided as a COLOR REFERENCE. "
    "Analyze its chromatic characteristics (skin tones, lighting, contrast) "
    "and suggest how to transfer these specific colors to the black-and-white photo."
)

RESPONSE_INSTRUCTIONS = (
    "Return the response strictly as a JSON object with the keys sceneDetection "
    "(description, objects, era, context, and textAnalysis only when text or notes are visible), "
    "colorPalette (hex, label, description), restorationGuide (step, action, details), "
    "and imagenPrompt."
)


def build_instruction_prompt(reference_present: bool) -> str:
    """Return the instruction block, adding the reference clause when needed."""
    sections = [BASE_PROMPT]
    if reference_present:
        sections.append(REFERENCE_CLAUSE)
    sections.append(RESPONSE_INSTRUCTIONS)
    return "\n\n".join(sections)
