from __future__ import annotations

import json
import pathlib

import pytest


def _document(entries: dict, version="42") -> dict:
    return {
        "annotations": {
            "identity": {"version": {"_cldrVersion": version}},
            "annotations": {k: {"default": [v], "tts": [v]} for k, v in entries.items()},
        }
    }


@pytest.fixture
def write_annotations(tmp_path: pathlib.Path):
    def _write(entries: dict, version="42", name: str = "annotations.json") -> pathlib.Path:
        path = tmp_path / name
        path.write_text(
            json.dumps(_document(entries, version), ensure_ascii=False),
            encoding="utf-8",
        )
        return path

    return _write
