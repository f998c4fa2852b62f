import pytest

from namestream.orchestration.agent_prompt_helpers.compose_texts import JSON_ONLY_INSTRUCTION
from namestream.orchestration.errors import BadRequest
from namestream.orchestration.prompt_builder import PromptBuilder
from namestream.preprocessing.culture_catalog import CultureCatalog


@pytest.fixture(scope="module")
def builder() -> PromptBuilder:
    return PromptBuilder(CultureCatalog())


@pytest.mark.parametrize(
    "name,culture",
    [
        ("Maria", "japanese"),
        ("Jean-Luc", "klingon"),
        ("Zoë", "some made-up style"),
        ("李小龙", "hindi"),
    ],
)
def test_prompt_contains_inputs_and_ends_with_json_only(builder, name, culture):
    prompt = builder.build(name, culture)

    assert name in prompt
    assert culture in prompt
    assert prompt.rstrip().endswith(JSON_ONLY_INSTRUCTION)


def test_name_is_trimmed(builder):
    prompt = builder.build("   Maria  ", "japanese")
    assert 'Given this name: "Maria",' in prompt


def test_four_steps_in_order(builder):
    prompt = builder.build("Maria", "japanese")
    positions = [prompt.index(f"{n}. ") for n in (1, 2, 3, 4)]
    assert positions == sorted(positions)


def test_known_culture_gets_guidelines(builder):
    prompt = builder.build("Maria", "japanese")
    assert "Formatting guidelines for japanese:" in prompt
    assert "Hepburn" in prompt


def test_alias_resolves_to_guidelines(builder):
    prompt = builder.build("Maria", "Mandarin")
    assert "Pinyin" in prompt


def test_unknown_culture_passes_through_without_guidelines(builder):
    prompt = builder.build("Maria", "martian poetry")
    assert "martian poetry" in prompt
    assert "Formatting guidelines" not in prompt


def test_builder_without_catalog_has_no_guidelines():
    prompt = PromptBuilder().build("Maria", "japanese")
    assert "Formatting guidelines" not in prompt
    assert "Maria" in prompt


def test_json_shape_lists_every_result_field(builder):
    prompt = builder.build("Maria", "japanese")
    for key in (
        "original_name",
        "name_meaning",
        "cultural_translation",
        "final_name",
        "native_script",
        "romanized",
        "pronunciation",
        "meaning_in_english",
    ):
        assert f'"{key}"' in prompt


@pytest.mark.parametrize("name", ["", "   ", None])
def test_empty_name_is_rejected(builder, name):
    with pytest.raises(BadRequest) as info:
        builder.build(name, "japanese")
    assert info.value.status_code == 400


@pytest.mark.parametrize("culture", ["", "  ", None])
def test_missing_culture_is_rejected(builder, culture):
    with pytest.raises(BadRequest):
        builder.build("Maria", culture)
