import tomllib
from pathlib import Path
from typing import cast

from typing_extensions import NotRequired, ReadOnly, Required, TypedDict

PYPROJECT_PATH = Path(__file__).parent.parent / "pyproject.toml"


class ProjectInfo(TypedDict):
    """[project]セクションのうち参照する項目の型定義"""

    name: ReadOnly[Required[str]]
    version: ReadOnly[NotRequired[str]]
    description: ReadOnly[NotRequired[str]]
    dependencies: ReadOnly[NotRequired[list[str]]]
    optional_dependencies: ReadOnly[NotRequired[dict[str, list[str]]]]


class PyProjectToml(TypedDict, total=False):
    """pyproject.toml全体の型定義

    https://peps.python.org/pep-0621/
    """

    project: ReadOnly[Required[ProjectInfo]]


def get_package_metadata(path: Path = PYPROJECT_PATH) -> PyProjectToml:
    """Return the package metadata."""
    with path.open("rb") as f:
        data = tomllib.load(f)
    project = data.get("project", {})
    if "optional-dependencies" in project:
        project["optional_dependencies"] = project.pop("optional-dependencies")
    return cast(PyProjectToml, data)


METADATA = get_package_metadata()
NAME = METADATA["project"]["name"]
VERSION = METADATA["project"].get("version", "unknown")
