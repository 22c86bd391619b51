import json

import pytest

from tokenlist_colors.tokenlist import TokenListError, has_logo, load_tokenlist, write_tokenlist


def test_load_preserves_order(write_json):
    path = write_json({"name": "List", "tokens": [{"b": 1, "a": 2}], "version": {"major": 1}})
    data = load_tokenlist(str(path))
    assert list(data) == ["name", "tokens", "version"]
    assert list(data["tokens"][0]) == ["b", "a"]


def test_missing_file(tmp_path):
    with pytest.raises(TokenListError, match="not found"):
        load_tokenlist(str(tmp_path / "nope.json"))


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{\"tokens\": [", encoding="utf-8")
    with pytest.raises(TokenListError, match="not valid JSON"):
        load_tokenlist(str(path))


@pytest.mark.parametrize("doc", [[], {"name": "x"}, {"tokens": {"a": 1}}])
def test_wrong_shape(write_json, doc):
    with pytest.raises(TokenListError):
        load_tokenlist(str(write_json(doc)))


def test_custom_tokens_key(write_json):
    data = load_tokenlist(str(write_json({"assets": []})), tokens_key="assets")
    assert data["assets"] == []


def test_write_uses_four_space_indent_and_keeps_unicode(tmp_path):
    path = tmp_path / "out.json"
    data = {"z": "ünï", "tokens": [{"symbol": "A"}]}
    write_tokenlist(str(path), data)
    text = path.read_text(encoding="utf-8")
    assert text == json.dumps(data, indent=4, ensure_ascii=False)
    assert '\n    "tokens": [\n        {\n            "symbol": "A"' in text
    assert not (tmp_path / "out.json.tmp").exists()


@pytest.mark.parametrize(
    "token, expected",
    [
        ({"logoURI": "https://x/a.png"}, True),
        ({"logoURI": ""}, False),
        ({"logoURI": None}, False),
        ({"logoURI": 5}, False),
        ({"symbol": "A"}, False),
        ("not a token", False),
    ],
)
def test_has_logo(token, expected):
    assert has_logo(token, "logoURI") is expected
