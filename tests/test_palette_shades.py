"""
Tests for palette/shades/ (naming.py, policy.py, resolver.py)

Covers:
- start_case() / title() naming rules
- policy_from_option() mapping of the `tailwind.shades` option
- resolve_shades() / resolve_shade_table()

Rules checked:
- blacklisted base names never emit
- a `default` shade key emits under every policy, slugged after the base name
- shade order follows the table, not the policy
"""

import importlib

import pytest

naming = importlib.import_module("color_palette_builder.palette.shades.naming")
policy = importlib.import_module("color_palette_builder.palette.shades.policy")
resolver = importlib.import_module("color_palette_builder.palette.shades.resolver")
types_mod = importlib.import_module("color_palette_builder.palette.types")
load_config = importlib.import_module("color_palette_builder.utils.load_config")

ColorEntry = types_mod.ColorEntry

BLUE = {"500": "#4287f5", "900": "#001030"}


# ---------- naming ----------
@pytest.mark.parametrize(
    "raw,expected",
    [
        ("blue", "Blue"),
        ("light-blue", "Light Blue"),
        ("lightBlue", "Light Blue"),
        ("random_gray", "Random Gray"),
        ("blue500", "Blue 500"),
        ("XMLColor", "Xml Color"),
        ("500", "500"),
        ("", ""),
    ],
)
def test_start_case(raw, expected):
    assert naming.start_case(raw) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("rouge-foncé", "Rouge Foncé"),
        ("grün", "Grün"),
        ("éclatBleu", "Éclat Bleu"),
        ("灰", "灰"),
        ("灰-500", "灰 500"),
        ("cafe\u0301", "Caf\u00e9"),  # decomposed accent
    ],
)
def test_start_case_keeps_non_ascii_letters(raw, expected):
    assert naming.start_case(raw) == expected


def test_accented_keys_keep_distinct_titles():
    assert naming.title("café") != naming.title("cafè")


def test_title_without_description():
    assert naming.title("light-blue") == "Light Blue"


def test_title_with_shade_description():
    assert naming.title("blue", "500") == "Blue (500)"
    assert naming.title("gray", "dark-shade") == "Gray (Dark Shade)"


def test_title_with_label_mapping():
    assert naming.title("blue", "900", {"900": "Dark"}) == "Dark Blue"
    assert naming.title("blue", "900", {"900": ""}) == "Blue"
    # unlabeled shade falls back to the parenthetical form
    assert naming.title("blue", "600", {"900": "Dark"}) == "Blue (600)"


# ---------- policy_from_option ----------
@pytest.mark.parametrize("raw", [False, None, "false", ""])
def test_policy_single_default(raw):
    assert policy.policy_from_option(raw) == policy.SingleDefault()


def test_policy_all_shades_suffixed_by_default():
    assert policy.policy_from_option(True) == policy.AllShades(suffixed=True)
    assert policy.policy_from_option("true", suffix=False) == policy.AllShades(suffixed=False)


def test_policy_explicit_list_coerces_keys():
    got = policy.policy_from_option([500, "700"])
    assert got == policy.ExplicitList(keys=("500", "700"), suffixed=True)


def test_policy_labeled_shades():
    got = policy.policy_from_option({"500": "Base", 900: "Dark"})
    assert isinstance(got, policy.LabeledShades)
    assert dict(got.labels) == {"500": "Base", "900": "Dark"}


def test_policy_rejects_other_shapes():
    with pytest.raises(load_config.ConfigTypeError):
        policy.policy_from_option(3)


# ---------- resolve_shades ----------
def test_explicit_list_uses_base_title_only():
    out = resolver.resolve_shades("blue", BLUE, policy.ExplicitList(keys=("500",)))
    assert out == [ColorEntry(name="Blue", slug="blue-500", color="#4287f5")]


def test_explicit_list_keeps_table_order():
    out = resolver.resolve_shades("blue", BLUE, policy.ExplicitList(keys=("900", "500"), suffixed=True))
    assert [e.slug for e in out] == ["blue-500", "blue-900"]
    assert [e.name for e in out] == ["Blue (500)", "Blue (900)"]


def test_single_default_picks_500():
    out = resolver.resolve_shades("blue", BLUE, policy.SingleDefault())
    assert out == [ColorEntry(name="Blue", slug="blue-500", color="#4287f5")]


def test_single_default_without_500_emits_nothing():
    assert resolver.resolve_shades("blue", {"100": "#eef"}, policy.SingleDefault()) == []


def test_policy_defaults_to_single_default():
    assert resolver.resolve_shades("blue", BLUE) == resolver.resolve_shades("blue", BLUE, policy.SingleDefault())


def test_all_shades_unsuffixed_and_suffixed():
    plain = resolver.resolve_shades("blue", BLUE, policy.AllShades())
    assert [e.name for e in plain] == ["Blue", "Blue"]
    assert [e.slug for e in plain] == ["blue-500", "blue-900"]

    suffixed = resolver.resolve_shades("blue", BLUE, policy.AllShades(suffixed=True))
    assert [e.name for e in suffixed] == ["Blue (500)", "Blue (900)"]


def test_labeled_shades_only_labeled_keys():
    out = resolver.resolve_shades("blue", BLUE, policy.LabeledShades(labels={"900": "Dark"}))
    assert out == [ColorEntry(name="Dark Blue", slug="blue-900", color="#001030")]


def test_plain_string_value():
    out = resolver.resolve_shades("white", "#fff", policy.AllShades(suffixed=True))
    assert out == [ColorEntry(name="White", slug="white", color="#fff")]


@pytest.mark.parametrize(
    "pol",
    [
        policy.SingleDefault(),
        policy.AllShades(),
        policy.AllShades(suffixed=True),
        policy.ExplicitList(keys=("50",)),
        policy.LabeledShades(labels={"50": "Pale"}),
    ],
)
def test_blacklist_wins_over_every_policy(pol):
    assert resolver.resolve_shades("blue", BLUE, pol, blacklist={"blue"}) == []
    assert resolver.resolve_shades("transparent", "transparent", pol, blacklist=("transparent",)) == []


# Literal behavior: `default` is emitted even when the policy does not name it.
@pytest.mark.parametrize(
    "pol",
    [
        policy.SingleDefault(),
        policy.AllShades(suffixed=True),
        policy.ExplicitList(keys=("50",)),
        policy.ExplicitList(keys=("900",)),
        policy.LabeledShades(labels={"50": "Pale"}),
    ],
)
def test_default_key_resolves_under_any_policy(pol):
    out = resolver.resolve_shades("blue", {"50": "#eef", "default": "#246"}, pol)
    assert ColorEntry(name="Blue", slug="blue", color="#246") in out
    assert all(e.slug != "blue-default" for e in out)


def test_default_key_case_insensitive_and_in_table_order():
    table = {"DEFAULT": "#777", "100": "#f7f7f7"}
    out = resolver.resolve_shades("gray", table, policy.AllShades(suffixed=True))
    assert out == [
        ColorEntry(name="Gray", slug="gray", color="#777"),
        ColorEntry(name="Gray (100)", slug="gray-100", color="#f7f7f7"),
    ]


def test_empty_base_name_and_unsupported_value_are_skipped():
    assert resolver.resolve_shades("", "#fff") == []
    assert resolver.resolve_shades("blue", 42) == []  # type: ignore[arg-type]


# ---------- resolve_shade_table ----------
def test_resolve_shade_table_flattens_in_order():
    table = {
        "transparent": "transparent",
        "white": "#fff",
        "blue": BLUE,
        "gray": {"DEFAULT": "#777", "500": "#555"},
    }
    out = resolver.resolve_shade_table(table, policy.SingleDefault(), blacklist=("transparent",))
    assert [e.slug for e in out] == ["white", "blue-500", "gray", "gray-500"]
