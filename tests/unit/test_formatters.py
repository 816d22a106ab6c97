"""Tests for text formatters."""

from bookshelf.domain.value_objects import Configuration
from bookshelf.infrastructure import MaterialTableFormatter, SceneSummaryFormatter


class TestSceneSummaryFormatter:
    def test_summary_lists_parts_and_bounding_box(self, scene_generator) -> None:
        scene = scene_generator.generate(Configuration(lamps=True))
        output = SceneSummaryFormatter().format(scene)

        assert "SHELVING UNIT" in output
        assert "Gloss White" in output
        assert "4 x 3" in output
        assert "shelf" in output
        assert "lamp_fixture" in output
        assert "door" not in output
        assert "size 150.000 x 200.000 x 30.000" in output
        assert "WARNINGS" not in output
        scene.release()

    def test_summary_lists_warnings(self, scene_generator) -> None:
        scene = scene_generator.generate(Configuration())
        output = SceneSummaryFormatter().format(scene, ["rails will be clamped"])
        assert "WARNINGS" in output
        assert "rails will be clamped" in output
        scene.release()


class TestMaterialTableFormatter:
    def test_lists_presets_and_addon_materials(self) -> None:
        output = MaterialTableFormatter().format()
        assert "Gloss White" in output
        assert "#ffffff" in output
        assert "Matte Black" in output
        assert "#111111" in output
        assert "Handle Metal" in output
        assert "unlit" in output
