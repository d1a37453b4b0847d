from models.analysis_models import HEX_COLOR_PATTERN
from services.openai.analysis_prompts import BASE_PROMPT, REFERENCE_CLAUSE, build_instruction_prompt
from services.openai.analysis_schema import ANALYSIS_RESPONSE_SCHEMA, build_response_format
from services.openai.request_builder import build_request


def _content(request):
    (message,) = request["input"]
    assert message["role"] == "user"
    return message["content"]


def test_primary_only_request_has_one_image_and_no_reference_clause(primary_image):
    request = build_request(primary_image, None, model="gpt-5")
    content = _content(request)

    assert [part["type"] for part in content] == ["input_image", "input_text"]
    assert content[0]["image_url"] == "data:image/png;base64,UFJJTUFSWQ=="
    assert BASE_PROMPT in content[1]["text"]
    assert REFERENCE_CLAUSE not in content[1]["text"]
    assert request["model"] == "gpt-5"


def test_reference_request_orders_images_and_adds_clause(primary_image, reference_image):
    content = _content(build_request(primary_image, reference_image))

    assert [part["type"] for part in content] == ["input_image", "input_image", "input_text"]
    assert content[0]["image_url"].endswith(primary_image.payload)
    assert content[1]["image_url"] == "data:image/jpeg;base64,UkVG"
    text = content[2]["text"]
    assert text.index(BASE_PROMPT) < text.index(REFERENCE_CLAUSE)


def test_build_request_is_deterministic(primary_image, reference_image):
    assert build_request(primary_image, reference_image) == build_request(primary_image, reference_image)


def test_instruction_prompt_names_all_four_tasks():
    prompt = build_instruction_prompt(reference_present=False)
    for task in ("Scene Detection", "Color Palette", "Restoration Guide", "Imagen Prompt"):
        assert task in prompt


def test_response_format_requests_named_json_schema(primary_image):
    request = build_request(primary_image)
    text_format = request["text"]["format"]
    assert text_format["type"] == "json_schema"
    assert text_format["name"] == "chroma_restore_analysis"
    assert text_format["schema"] is ANALYSIS_RESPONSE_SCHEMA
    assert build_response_format() == request["text"]


def test_schema_top_level_fields_are_required():
    schema = ANALYSIS_RESPONSE_SCHEMA
    assert schema["type"] == "object"
    assert schema["additionalProperties"] is False
    assert schema["required"] == ["sceneDetection", "colorPalette", "restorationGuide", "imagenPrompt"]
    assert schema["properties"]["imagenPrompt"]["type"] == "string"
    assert "$defs" not in schema


def test_schema_marks_only_text_analysis_optional():
    scene = ANALYSIS_RESPONSE_SCHEMA["properties"]["sceneDetection"]
    assert scene["type"] == "object"
    assert set(scene["properties"]) == {"description", "objects", "era", "context", "textAnalysis"}
    assert scene["required"] == ["description", "objects", "era", "context"]
    assert scene["properties"]["textAnalysis"]["type"] == "string"
    assert "anyOf" not in scene["properties"]["textAnalysis"]
    assert scene["properties"]["objects"] == {"items": {"type": "string"}, "type": "array"}


def test_schema_list_items_require_every_field():
    properties = ANALYSIS_RESPONSE_SCHEMA["properties"]
    swatch = properties["colorPalette"]["items"]
    step = properties["restorationGuide"]["items"]

    assert properties["colorPalette"]["type"] == "array"
    assert swatch["required"] == ["hex", "label", "description"]
    assert swatch["additionalProperties"] is False
    assert step["required"] == ["step", "action", "details"]
    assert all(prop["type"] == "string" for prop in step["properties"].values())


def test_schema_declares_hex_color_pattern():
    swatch = ANALYSIS_RESPONSE_SCHEMA["properties"]["colorPalette"]["items"]
    assert swatch["properties"]["hex"]["pattern"] == HEX_COLOR_PATTERN


def test_schema_closes_every_object():
    properties = ANALYSIS_RESPONSE_SCHEMA["properties"]
    objects = [
        ANALYSIS_RESPONSE_SCHEMA,
        properties["sceneDetection"],
        properties["colorPalette"]["items"],
        properties["restorationGuide"]["items"],
    ]
    assert all(obj["additionalProperties"] is False for obj in objects)
