import importlib.util
from pathlib import Path

import pytest

from infrastructure.config import LoaderKind, TagI18nConfig, load_tag_i18n_config
from infrastructure.constants import TAGS_FILE


def test_defaults_point_at_shipped_table() -> None:
    cfg = TagI18nConfig()
    assert cfg.tags_file == TAGS_FILE
    assert cfg.tags_file.parts[-2:] == ("i18n", "tags.json")
    assert cfg.loader is LoaderKind.AUTO
    assert cfg.script_url is None


def test_relative_tags_file_resolves_against_config_dir(tmp_path: Path) -> None:
    path = tmp_path / "configs" / "tag_i18n.yaml"
    path.parent.mkdir()
    path.write_text(
        "loader: HTTP\ntags_file: ../i18n/tags.json\nscript_url: ''\nbase_url: https://example.com/\n",
        encoding="utf-8",
    )

    cfg = load_tag_i18n_config(path)

    assert cfg.loader is LoaderKind.HTTP
    assert cfg.tags_file == path.parent / "../i18n/tags.json"
    assert cfg.script_url is None
    assert cfg.base_url == "https://example.com/"


def test_empty_yaml_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "tag_i18n.yaml"
    path.write_text("", encoding="utf-8")
    assert load_tag_i18n_config(path) == TagI18nConfig()


def test_missing_config_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_tag_i18n_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize("text", ["- a\n- b\n", "loader: ftp\n", "timeout_s: 0\n"])
def test_invalid_config_raises_value_error(tmp_path: Path, text: str) -> None:
    path = tmp_path / "tag_i18n.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ValueError):
        load_tag_i18n_config(path)


def test_shipped_table_is_found_through_package_path() -> None:
    spec = importlib.util.find_spec("i18n")
    assert spec is not None and spec.submodule_search_locations is not None

    locations = {Path(p).resolve() for p in spec.submodule_search_locations}
    assert TAGS_FILE.parent.resolve() in locations
    assert TAGS_FILE.is_file()


def test_pyproject_ships_the_tag_table() -> None:
    tomllib = pytest.importorskip("tomllib")
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    setuptools_cfg = tomllib.loads(pyproject.read_text(encoding="utf-8"))["tool"]["setuptools"]

    assert "i18n*" in setuptools_cfg["packages"]["find"]["include"]
    assert "*.json" in setuptools_cfg["package-data"]["i18n"]
