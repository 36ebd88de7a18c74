from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from doclink.config import ConfigurationError, MissingConfigurationError, load_config_file

if TYPE_CHECKING:
    from pathlib import Path


def test_load_config_file_reads_key_value_lines(tmp_path: Path) -> None:
    path = tmp_path / "doclink.conf"
    path.write_text(
        "# similarity setup\n"
        "\n"
        "similarity.measures = equality, token_overlap\n"
        "similarity.token_overlap.threshold=0.8\n"
        "similarity.token_overlap.threshold=0.75\n",
        encoding="utf-8",
    )

    values = load_config_file(path)

    assert values == {
        "similarity.measures": "equality, token_overlap",
        "similarity.token_overlap.threshold": "0.75",
    }


def test_load_config_file_rejects_lines_without_separator(tmp_path: Path) -> None:
    path = tmp_path / "doclink.conf"
    path.write_text("similarity.measures\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="line 1"):
        load_config_file(path)


def test_load_config_file_requires_existing_file(tmp_path: Path) -> None:
    with pytest.raises(MissingConfigurationError, match="absent.conf") as excinfo:
        load_config_file(tmp_path / "absent.conf")

    assert isinstance(excinfo.value, ConfigurationError)
