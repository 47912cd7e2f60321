"""Unit tests for profile loading and validation."""

import pytest
from omegaconf import OmegaConf

from folio.contexts.composition.defaults import DEFAULT_PROFILE_PATH
from folio.contexts.composition.exceptions import InvalidProfileError
from folio.contexts.composition.profile import load_profile, profile_from_dict


@pytest.fixture
def profile_dict():
    return OmegaConf.to_container(OmegaConf.load(DEFAULT_PROFILE_PATH), resolve=True)


@pytest.mark.unit
def test_load_packaged_profile():
    profile = load_profile()

    assert profile.name == "Gajanraj MOHANARAJ"
    assert profile.initials == "GM"
    assert profile.headline == "Consultant Cybersécurité & GRC"
    assert [stat.value for stat in profile.stats] == [3, 2, 10]
    assert profile.stats[2].suffix == "+"
    assert len(profile.about.items) == 4
    assert len(profile.skills.categories) == 4
    assert all(len(cat.skills) == 4 for cat in profile.skills.categories)
    assert len(profile.experience.entries) == 2
    assert len(profile.education.entries) == 3
    assert [item.title for item in profile.contact.items] == ["Email", "Localisation", "LinkedIn"]
    assert profile.source == DEFAULT_PROFILE_PATH


@pytest.mark.unit
def test_load_from_custom_path(tmp_path, profile_dict):
    profile_dict["name"] = "Ada Lovelace"
    del profile_dict["initials"]
    path = tmp_path / "ada.yaml"
    OmegaConf.save(OmegaConf.create(profile_dict), path)

    profile = load_profile(path)
    assert profile.name == "Ada Lovelace"
    assert profile.initials == "AL"


@pytest.mark.unit
def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_profile(tmp_path / "nope.yaml")


@pytest.mark.unit
def test_missing_required_field(profile_dict):
    del profile_dict["headline"]
    with pytest.raises(InvalidProfileError) as exc_info:
        profile_from_dict(profile_dict)
    assert exc_info.value.field == "headline"


@pytest.mark.unit
def test_missing_nested_field_reports_path(profile_dict):
    del profile_dict["experience"]["entries"][1]["organization"]
    with pytest.raises(InvalidProfileError) as exc_info:
        profile_from_dict(profile_dict)
    assert exc_info.value.field == "experience.entries[1].organization"


@pytest.mark.unit
@pytest.mark.parametrize("level", [150, -1, "high", True])
def test_invalid_skill_level(profile_dict, level):
    profile_dict["skills"]["categories"][0]["skills"][0]["level"] = level
    with pytest.raises(InvalidProfileError, match="Skill level"):
        profile_from_dict(profile_dict)


@pytest.mark.unit
def test_invalid_profile_error_is_value_error(profile_dict):
    profile_dict["stats"] = "three"
    with pytest.raises(ValueError):
        profile_from_dict(profile_dict)


@pytest.mark.unit
def test_boolean_stat_value_rejected(profile_dict):
    profile_dict["stats"][0]["value"] = True
    with pytest.raises(InvalidProfileError, match="Stat value"):
        profile_from_dict(profile_dict)


@pytest.mark.unit
@pytest.mark.parametrize(
    "section, key, field",
    [
        ("about", "items", "about"),
        ("contact", "items", "contact"),
        ("skills", "categories", "skills"),
        ("experience", "entries", "experience"),
    ],
)
def test_non_mapping_list_item_rejected(profile_dict, section, key, field):
    profile_dict[section][key] = ["just a string"]
    with pytest.raises(InvalidProfileError) as exc_info:
        profile_from_dict(profile_dict)
    assert exc_info.value.field.startswith(field)
