"""Tests for JSON utility functions."""

import json

from pytest import MonkeyPatch

from copreader import json_utils, parser


def test_json_dumps_without_orjson(monkeypatch: MonkeyPatch) -> None:
    """Serialize using standard json when orjson is absent."""

    monkeypatch.setattr(json_utils, "orjson", None)
    data = {"title": "باكر"}
    assert json_utils.json_dumps(data) == '{"title": "باكر"}'
    assert json_utils.json_dumps(data, indent=True) == (
        '{\n  "title": "باكر"\n}'
    )


def test_json_dumps_with_orjson(monkeypatch: MonkeyPatch) -> None:
    """Serialize using orjson when available."""

    class Fake:
        OPT_INDENT_2 = 1

        def __init__(self) -> None:
            self.options: list[int] = []

        def dumps(self, obj: object, option: int = 0) -> bytes:
            self.options.append(option)
            return b"{}"

    fake = Fake()
    monkeypatch.setattr(json_utils, "orjson", fake)
    assert json_utils.json_dumps({}) == "{}"
    assert json_utils.json_dumps({}, indent=True) == "{}"
    assert fake.options == [0, 1]


def test_json_loads_without_orjson(monkeypatch: MonkeyPatch) -> None:
    """Deserialize JSON using standard json when orjson is absent."""

    monkeypatch.setattr(json_utils, "orjson", None)
    data = {"a": 1}
    text = json.dumps(data)
    assert json_utils.json_loads(text) == data
    assert json_utils.json_loads(text.encode()) == data


def test_library_survives_json(monkeypatch: MonkeyPatch) -> None:
    """Round trip a parsed library the way the cache stores it."""

    monkeypatch.setattr(json_utils, "orjson", None)
    library = parser.parse("# C\n## B\n### S\n[COP]\nⲁⲙⲏⲛ")

    text = json_utils.json_dumps(library.to_dict())

    assert '"COP": ["ⲁⲙⲏⲛ"]' in text
    data = json_utils.json_loads(text)
    assert parser.Library.from_dict(data) == library  # type: ignore[arg-type]
