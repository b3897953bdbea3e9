"""
Unit tests for loading and validating the stage catalog.
"""
import copy
import json

import pytest

from docintel.schemas import StartupStage
from docintel.services.catalog import CatalogConfigError, StageCatalog, get_catalog, load_catalog
from docintel.utils.config import settings


def _raw_catalog():
    with open(settings.CATALOG_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


def test_packaged_catalog_loads(catalog):
    """The shipped catalog covers every canonical stage and the ten data-room folders."""
    assert catalog.stages == list(StartupStage)
    assert len(catalog.data_room_categories) == 10
    assert catalog.legal_category == "07_Legal"
    assert "pitch_deck" in {entry.id for entry in catalog.universal_mandatory}


def test_get_catalog_is_loaded_once():
    assert get_catalog() is get_catalog()


def test_stage_lists_respect_mandatory_flags(catalog):
    for stage in catalog.stages:
        assert all(entry.is_mandatory for entry in catalog.mandatory_for(stage))
        assert not any(entry.is_mandatory for entry in catalog.optional_for(stage))


def test_ids_are_unique_within_each_list(catalog):
    lists = [catalog.universal]
    for stage in catalog.stages:
        lists.extend([catalog.mandatory_for(stage), catalog.optional_for(stage)])
    for entries in lists:
        ids = [entry.id for entry in entries]
        assert len(ids) == len(set(ids))


def test_legal_entries_are_universal_legal_documents(catalog):
    legal = catalog.legal_entries
    assert legal
    assert all(entry.category == "07_Legal" for entry in legal)
    assert set(legal) <= set(catalog.universal)


def test_requirements_for_legacy_label(catalog):
    requirements = catalog.requirements_for("Ideation")
    assert requirements.stage == StartupStage.IDEA
    assert [e.id for e in requirements.mandatory] == [e.id for e in catalog.mandatory_for("Idea")]
    assert len(requirements.universal) == len(catalog.universal)


def test_catalog_lists_are_read_only(catalog):
    with pytest.raises(AttributeError):
        catalog.universal.append("anything")


def test_missing_stage_fails_at_load():
    raw = _raw_catalog()
    del raw["stages"]["Seed"]
    with pytest.raises(CatalogConfigError, match="Seed"):
        StageCatalog.from_dict(raw)


def test_unknown_stage_key_fails_at_load():
    raw = _raw_catalog()
    raw["stages"]["Series Z"] = {"mandatory": [], "optional": []}
    with pytest.raises(CatalogConfigError, match="Series Z"):
        StageCatalog.from_dict(raw)


def test_unknown_category_fails_at_load():
    raw = _raw_catalog()
    raw["universal"].append({"id": "mystery", "label": "Mystery", "category": "99_Nowhere"})
    with pytest.raises(CatalogConfigError, match="99_Nowhere"):
        StageCatalog.from_dict(raw)


def test_duplicate_id_fails_at_load():
    raw = _raw_catalog()
    raw["stages"]["MVP"]["mandatory"].append(copy.deepcopy(raw["stages"]["MVP"]["mandatory"][0]))
    with pytest.raises(CatalogConfigError, match="Duplicate"):
        StageCatalog.from_dict(raw)


def test_optional_entry_flagged_mandatory_fails_at_load():
    raw = _raw_catalog()
    raw["stages"]["Idea"]["optional"][0]["is_mandatory"] = True
    with pytest.raises(CatalogConfigError):
        StageCatalog.from_dict(raw)


def test_blank_label_fails_at_load():
    raw = _raw_catalog()
    raw["universal"][0]["label"] = "  "
    with pytest.raises(CatalogConfigError):
        StageCatalog.from_dict(raw)


def test_missing_required_key_fails_at_load():
    raw = _raw_catalog()
    del raw["data_room_categories"]
    with pytest.raises(CatalogConfigError, match="data_room_categories"):
        StageCatalog.from_dict(raw)


@pytest.mark.parametrize("categories", [None, "01_Founders", ["01_Founders", 7]])
def test_malformed_categories_fail_at_load(categories):
    with pytest.raises(CatalogConfigError, match="data_room_categories"):
        StageCatalog.from_dict({"data_room_categories": categories, "universal": [], "stages": {}})


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(CatalogConfigError):
        load_catalog(str(tmp_path / "missing.json"))


def test_load_catalog_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogConfigError):
        load_catalog(str(path))


def test_load_catalog_from_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(_raw_catalog()), encoding="utf-8")
    loaded = load_catalog(str(path))
    assert loaded.stages == list(StartupStage)
