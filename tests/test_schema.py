"""
Tests for the layout JSON schema and AtlasLayout persistence
"""
import json
import pytest
from pydantic import ValidationError
from atlaslayout import AtlasLayout, Handle, Rect, Vec2
from atlaslayout.exceptions import LayoutSerializationError
from atlaslayout.schema import LayoutDefinition


def _packed_layout():
    """Layout as an atlas builder would leave it"""
    layout = AtlasLayout.new_empty((64, 32))
    layout.add_texture(Rect((32, 0), (64, 32)))
    layout.add_texture(Rect((0, 0), (32, 16)))
    layout.add_texture(Rect((0, 16), (16, 32)))
    layout.texture_handles = {Handle(5): 0, Handle(2, 1): 2, Handle(9): 1}
    return layout


class TestLayoutDefinition:
    """Test schema validation"""

    def test_minimal_layout_validates(self):
        """Test that size alone is a valid layout"""
        definition = LayoutDefinition.model_validate({"size": [16, 16]})
        assert definition.textures == []
        assert definition.texture_handles is None
        assert definition.schema_version == "1.0"

    def test_inverted_rect_accepted(self):
        """Test that rects are stored without a min <= max check"""
        definition = LayoutDefinition.model_validate({
            "size": [16, 16],
            "textures": [{"min": [8, 0], "max": [4, 16]}],
        })
        assert definition.textures[0].min == [8.0, 0.0]
        assert definition.textures[0].max == [4.0, 16.0]

    def test_stale_handle_index_accepted(self):
        """Test that handle indices are not checked against the sections"""
        definition = LayoutDefinition.model_validate({
            "size": [16, 16],
            "textures": [{"min": [0, 0], "max": [16, 16]}],
            "texture_handles": [{"handle": {"index": 1}, "index": 3}],
        })
        assert definition.texture_handles[0].index == 3

    def test_duplicate_handle_rejected(self):
        """Test that a handle maps to at most one section"""
        with pytest.raises(ValidationError):
            LayoutDefinition.model_validate({
                "size": [16, 16],
                "textures": [
                    {"min": [0, 0], "max": [8, 16]},
                    {"min": [8, 0], "max": [16, 16]},
                ],
                "texture_handles": [
                    {"handle": {"index": 1}, "index": 0},
                    {"handle": {"index": 1}, "index": 1},
                ],
            })

    def test_extra_fields_forbidden(self):
        """Test that unknown keys are rejected"""
        with pytest.raises(ValidationError):
            LayoutDefinition.model_validate({"size": [16, 16], "frames": []})


class TestPersistence:
    """Test AtlasLayout to_dict / from_dict / save / load"""

    def test_grid_round_trip(self):
        """Test that a grid layout survives export and import"""
        layout = AtlasLayout.from_grid((16, 16), 3, 2, padding=(2, 2), offset=(1, 1))
        restored = AtlasLayout.from_dict(layout.to_dict())

        assert restored == layout
        assert restored.texture_handles is None

    def test_section_order_preserved(self):
        """Test that sections keep their indices through persistence"""
        layout = _packed_layout()
        data = layout.to_dict()

        assert [t["min"] for t in data["textures"]] == [[32.0, 0.0], [0.0, 0.0], [0.0, 16.0]]
        restored = AtlasLayout.from_dict(data)
        assert restored.textures == layout.textures

    def test_handles_round_trip(self):
        """Test that handle lookups still work after a round trip"""
        restored = AtlasLayout.from_dict(_packed_layout().to_dict())

        assert restored.get_texture_index(Handle(5)) == 0
        assert restored.get_texture_index(Handle(2, 1)) == 2
        assert restored.get_texture_index(Handle(9)) == 1
        assert restored.get_texture_index(Handle(2)) is None

    def test_empty_mapping_presence_preserved(self):
        """Test that an attached but empty mapping stays distinct from none"""
        layout = AtlasLayout.new_empty((8, 8))
        layout.texture_handles = {}

        data = layout.to_dict()
        assert data["texture_handles"] == []
        assert AtlasLayout.from_dict(data).texture_handles == {}

        layout.texture_handles = None
        assert layout.to_dict()["texture_handles"] is None

    def test_non_handle_token_cannot_be_persisted(self):
        """Test that arbitrary tokens raise on export"""
        layout = AtlasLayout.new_empty((8, 8))
        layout.add_texture(Rect((0, 0), (8, 8)))
        layout.texture_handles = {"hero.png": 0}

        with pytest.raises(LayoutSerializationError):
            layout.to_dict()

    def test_invalid_dict_raises(self):
        """Test that schema errors surface as LayoutSerializationError"""
        with pytest.raises(LayoutSerializationError):
            AtlasLayout.from_dict({"textures": []})

    def test_inverted_rect_round_trip(self):
        """Test that a hand-added rect with swapped corners is kept as given"""
        layout = AtlasLayout.new_empty((10, 10))
        layout.add_texture(Rect((8, 0), (4, 10)))

        restored = AtlasLayout.from_dict(layout.to_dict())
        assert restored == layout
        assert restored[0].min == Vec2(8, 0)
        assert restored[0].max == Vec2(4, 10)

    def test_negative_tile_grid_round_trip(self):
        """Test that a grid with a negative tile size survives persistence"""
        layout = AtlasLayout.from_grid((-16, -16), 2, 1)
        restored = AtlasLayout.from_dict(layout.to_dict())

        assert restored == layout
        assert restored[1] == Rect((-16, 0), (-32, -16))
        assert restored.size == Vec2(-32, -16)

    def test_stale_handle_index_round_trip(self):
        """Test that handle indices past the sections are stored as given"""
        layout = AtlasLayout.new_empty((10, 10))
        layout.texture_handles = {Handle(1): 3}

        restored = AtlasLayout.from_dict(layout.to_dict())
        assert restored == layout
        assert restored.get_texture_index(Handle(1)) == 3

    def test_save_and_load(self, tmp_path):
        """Test writing and reading a layout file"""
        path = tmp_path / "layout.json"
        layout = _packed_layout()
        layout.save(path)

        with open(path) as f:
            assert json.load(f)["size"] == [64.0, 32.0]

        assert AtlasLayout.load(path) == layout

    def test_load_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            AtlasLayout.load(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path):
        """Test that a non-JSON file raises LayoutSerializationError"""
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(LayoutSerializationError):
            AtlasLayout.load(path)
