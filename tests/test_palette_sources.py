# tests/test_palette_sources.py
"""Tests for the Sass and Tailwind source adapters (files on tmp_path, node subprocess faked)."""

from __future__ import annotations

import json
from importlib import import_module
from types import SimpleNamespace

import pytest

sass = import_module("color_palette_builder.palette.sources.sass")
tw = import_module("color_palette_builder.palette.sources.tailwind")
builder = import_module("color_palette_builder.palette.builder")
policy = import_module("color_palette_builder.palette.shades.policy")
types_mod = import_module("color_palette_builder.palette.types")
LC = import_module("color_palette_builder.utils.load_config")

ColorEntry = types_mod.ColorEntry

SCSS = """\
// brand colors
$brand: #525ddc;
$accent: $brand !default;

/* the palette map */
$colors: (
  'primary': $brand,
  "accent": $accent,
  shadow: rgba(0, 0, 0, .5),
  /* inline */ gray: #777,
  token: var(--site-bg),
) !default;

$spacing: (sm: 4px, md: 8px);
"""

TAILWIND = {
    "theme": {
        "colors": {
            "transparent": "transparent",
            "white": "#fff",
            "blue": {"500": "#4287f5", "900": "#001030"},
            "gray": {"DEFAULT": "#777", "100": "#f7f7f7"},
            "computed": 3,
        },
        "extend": {},
    }
}


# ---------- Fixtures ----------
@pytest.fixture
def scss_project(tmp_path):
    styles = tmp_path / "styles"
    styles.mkdir()
    (styles / "variables.scss").write_text(SCSS, encoding="utf-8")
    return tmp_path


@pytest.fixture
def tailwind_json(tmp_path):
    cfg = tmp_path / "tailwind.config.json"
    cfg.write_text(json.dumps(TAILWIND), encoding="utf-8")
    return cfg


# ---------- Sass: parser ----------
def test_parse_scss_variables_scalars_and_maps():
    decls = sass.parse_scss_variables(SCSS)
    assert decls["brand"] == "#525ddc"
    assert decls["accent"] == "$brand"
    assert list(decls["colors"]) == ["primary", "accent", "shadow", "gray", "token"]
    assert decls["colors"]["shadow"] == "rgba(0, 0, 0, .5)"
    assert decls["spacing"] == {"sm": "4px", "md": "8px"}


def test_strip_comments_keeps_urls_intact():
    text = "$a: url(http://x.test/a.png); // trailing\n/* block */$b: #fff;"
    out = sass.strip_comments(text)
    assert "http://x.test/a.png" in out
    assert "trailing" not in out and "block" not in out


def test_line_comment_right_after_code_is_stripped():
    text = '$colors: (a: #fff);// old: $colors: (zzz: red)\n$note: "a//b";'
    decls = sass.parse_scss_variables(text)
    assert decls["colors"] == {"a": "#fff"}
    assert decls["note"] == '"a//b"'


def test_strip_comments_ignores_markers_inside_strings_and_urls():
    text = "$bg: url(//cdn.test/x.png);$q: 'no /* comment */ here';/* gone */"
    assert sass.strip_comments(text) == "$bg: url(//cdn.test/x.png);$q: 'no /* comment */ here';"


# ---------- Sass: adapter ----------
def test_load_sass_colors_resolves_references(scss_project):
    out = sass.load_sass_colors("styles", ["variables.scss"], ["colors"], base_dir=scss_project)
    assert out == [
        ColorEntry(name="Primary", slug="primary", color="#525ddc"),
        ColorEntry(name="Accent", slug="accent", color="#525ddc"),
        ColorEntry(name="Shadow", slug="shadow", color="rgba(0, 0, 0, .5)"),
        ColorEntry(name="Gray", slug="gray", color="#777"),
        ColorEntry(name="Token", slug="token", color="var(--site-bg)"),
    ]


def test_load_sass_colors_accepts_dollar_prefix_and_string_args(scss_project):
    out = sass.load_sass_colors("styles", "variables.scss", "$colors", base_dir=scss_project)
    assert len(out) == 5


@pytest.mark.parametrize(
    "path,files,variables",
    [
        ("missing-dir", ["variables.scss"], ["colors"]),
        ("styles", ["nope.scss"], ["colors"]),
        ("styles", ["variables.scss"], ["palette"]),
        ("styles", ["variables.scss"], []),
        ("styles", None, ["colors"]),
    ],
)
def test_load_sass_colors_degrades_to_empty(scss_project, path, files, variables):
    assert sass.load_sass_colors(path, files, variables, base_dir=scss_project) == []


# ---------- Tailwind: config access ----------
def test_get_path_walks_nested_mappings():
    assert tw.get_path(TAILWIND, "theme.colors.white") == "#fff"
    assert tw.get_path(TAILWIND, "theme.nope.x", default={}) == {}
    assert tw.get_path("not a mapping", "theme") is None


def test_coerce_shade_table_drops_non_string_leaves():
    table = tw.coerce_shade_table(
        {"a": "#fff", "b": {"1": "#000", "2": 5}, "c": 3, "d": {"x": None}}
    )
    assert table == {"a": "#fff", "b": {"1": "#000"}}
    assert tw.coerce_shade_table(None) == {}


# ---------- Tailwind: JSON configs ----------
def test_load_tailwind_table_from_json(tailwind_json):
    table = tw.load_tailwind_table(tailwind_json.name, base_dir=tailwind_json.parent)
    assert list(table) == ["transparent", "white", "blue", "gray"]
    assert table["blue"] == {"500": "#4287f5", "900": "#001030"}


def test_load_tailwind_table_missing_config_is_empty(tmp_path):
    assert tw.load_tailwind_table("tailwind.config.js", base_dir=tmp_path) == {}


def test_load_tailwind_table_custom_path(tmp_path):
    cfg = tmp_path / "tw.json"
    cfg.write_text(json.dumps({"theme": {"textColor": {"ink": "#123"}}}), encoding="utf-8")
    assert tw.load_tailwind_table("tw.json", "textColor", base_dir=tmp_path) == {"ink": "#123"}


def test_load_tailwind_colors_applies_policy_and_blacklist(tailwind_json):
    out = tw.load_tailwind_colors(
        tailwind_json.name,
        policy=policy.SingleDefault(),
        blacklist=("transparent",),
        base_dir=tailwind_json.parent,
    )
    assert out == [
        ColorEntry(name="White", slug="white", color="#fff"),
        ColorEntry(name="Blue", slug="blue-500", color="#4287f5"),
        ColorEntry(name="Gray", slug="gray", color="#777"),
    ]


# ---------- Tailwind: JS configs via node ----------
def test_js_config_resolved_through_node(tmp_path, monkeypatch):
    cfg = tmp_path / "tailwind.config.js"
    cfg.write_text("module.exports = {}", encoding="utf-8")
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append((cmd, kwargs))
        return SimpleNamespace(returncode=0, stdout=json.dumps(TAILWIND), stderr="")

    monkeypatch.setattr(tw.shutil, "which", lambda name: "/usr/bin/node")
    monkeypatch.setattr(tw.subprocess, "run", fake_run)

    table = tw.load_tailwind_table("tailwind.config.js", base_dir=tmp_path)
    assert table["white"] == "#fff"
    cmd, kwargs = calls[0]
    assert cmd[0] == "/usr/bin/node" and cmd[-1] == str(cfg)
    assert kwargs["cwd"] == str(tmp_path)


def test_js_config_resolver_failure_raises(tmp_path, monkeypatch):
    (tmp_path / "tailwind.config.js").write_text("boom", encoding="utf-8")
    monkeypatch.setattr(tw.shutil, "which", lambda name: "/usr/bin/node")
    monkeypatch.setattr(
        tw.subprocess,
        "run",
        lambda cmd, **kw: SimpleNamespace(returncode=1, stdout="", stderr="Cannot find module 'tailwindcss'"),
    )
    with pytest.raises(LC.ConfigResolveError, match="tailwindcss"):
        tw.load_tailwind_table("tailwind.config.js", base_dir=tmp_path)


def test_js_config_without_node_raises(tmp_path, monkeypatch):
    (tmp_path / "tailwind.config.js").write_text("module.exports = {}", encoding="utf-8")
    monkeypatch.setattr(tw.shutil, "which", lambda name: None)
    with pytest.raises(LC.ConfigResolveError, match="node"):
        tw.load_tailwind_table("tailwind.config.js", base_dir=tmp_path)


def test_js_config_non_json_output_raises_parse_error(tmp_path, monkeypatch):
    (tmp_path / "tailwind.config.js").write_text("module.exports = {}", encoding="utf-8")
    monkeypatch.setattr(tw.shutil, "which", lambda name: "/usr/bin/node")
    monkeypatch.setattr(
        tw.subprocess, "run", lambda cmd, **kw: SimpleNamespace(returncode=0, stdout="warn: x", stderr="")
    )
    with pytest.raises(LC.ConfigParseError):
        tw.load_tailwind_table("tailwind.config.js", base_dir=tmp_path)


# ---------- non-ASCII keys ----------
def test_accented_sass_keys_survive_the_build(tmp_path):
    (tmp_path / "variables.scss").write_text("$colors: (café: #a52a2a, cafè: #00f);", encoding="utf-8")
    entries = sass.load_sass_colors(None, ["variables.scss"], ["colors"], base_dir=tmp_path)
    palette = builder.build_palette(entries)
    assert sorted(e.slug for e in palette) == ["cafè", "café"]
    assert {e.name for e in palette} == {"Café", "Cafè"}
