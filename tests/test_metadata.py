"""metadataモジュールのテスト。"""

from pathlib import Path

from pytoolkit_optional import metadata


class TestMetadata:
    def test_name_and_version(self) -> None:
        assert metadata.NAME == "pytoolkit-optional"
        assert metadata.VERSION != "unknown"

    def test_optional_dependencies_key_is_normalized(self) -> None:
        """optional-dependenciesがoptional_dependenciesとして参照できる。"""
        project = metadata.METADATA["project"]

        assert "pytest" in " ".join(project.get("optional_dependencies", {})["test"])

    def test_missing_version(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "sample"\n', encoding="utf-8")

        data = metadata.get_package_metadata(path)

        assert data["project"]["name"] == "sample"
        assert data["project"].get("version", "unknown") == "unknown"
