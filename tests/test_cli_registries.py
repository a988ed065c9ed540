from __future__ import annotations

import json

import pytest

from wp_block_cli.repositories import RegistrySet
from wp_block_cli.store import EditorStore


def test_type_list_ids(run_cli) -> None:
    result = run_cli("type", "list", "--format=ids")

    assert result.exit_code == 0
    assert result.stdout == "core/paragraph core/latest-posts core/archives my-plugin/card\n"


def test_type_list_default_fields_as_json(run_cli) -> None:
    result = run_cli("type", "list", "--namespace=core", "--format=json")

    rows = json.loads(result.stdout)
    assert [row["name"] for row in rows] == ["core/paragraph", "core/latest-posts", "core/archives"]
    assert list(rows[0]) == ["name", "title", "description", "category", "is_dynamic"]


def test_type_list_blank_namespace_matches_nothing(run_cli) -> None:
    result = run_cli("type", "list", "--namespace", " ", "--format=count")

    assert result.exit_code == 0
    assert result.stdout == "0\n"


@pytest.mark.parametrize(
    ("flag", "expected"),
    [
        ("--dynamic", "core/latest-posts core/archives\n"),
        ("--static", "core/paragraph my-plugin/card\n"),
    ],
)
def test_type_list_dynamic_static(run_cli, flag: str, expected: str) -> None:
    assert run_cli("type", "list", flag, "--format=ids").stdout == expected


def test_type_list_dynamic_and_static_are_exclusive(run_cli) -> None:
    result = run_cli("type", "list", "--dynamic", "--static")

    assert result.exit_code == 1
    assert result.stdout == ""
    assert result.stderr == "Error: --dynamic and --static are mutually exclusive.\n"


def test_count_matches_ids(run_cli) -> None:
    for argv in (("type", "list"), ("pattern", "list", "--category=featured"), ("binding", "list")):
        ids = run_cli(*argv, "--format=ids").stdout.split()
        count = run_cli(*argv, "--format=count").stdout
        assert count == f"{len(ids)}\n"


def test_type_get_shows_detail_fields(run_cli) -> None:
    result = run_cli("type", "get", "core/paragraph", "--format=json")

    data = json.loads(result.stdout)
    assert list(data)[:5] == ["name", "title", "description", "category", "is_dynamic"]
    assert data["supports"] == {"anchor": True, "color": {"link": True}}
    assert data["api_version"] == 3
    assert "allowed_blocks" not in data


def test_type_get_unknown(run_cli) -> None:
    result = run_cli("type", "get", "core/missing")

    assert result.exit_code == 1
    assert result.stderr == "Error: Block type 'core/missing' is not registered.\n"


def test_type_exists(run_cli) -> None:
    found = run_cli("type", "exists", "core/paragraph")
    missing = run_cli("type", "exists", "core/missing")

    assert found.exit_code == 0
    assert found.stdout == "Success: Block type 'core/paragraph' is registered.\n"
    assert missing.exit_code == 1
    assert missing.stdout == ""
    assert missing.stderr == ""


def test_pattern_list_filters(run_cli) -> None:
    assert run_cli("pattern", "list", "--category=featured", "--format=ids").stdout == "twentytwentyfour/hero\n"
    assert run_cli("pattern", "list", "--search=PLAN", "--format=ids").stdout == "my-plugin/pricing\n"
    assert run_cli("pattern", "list", "--search=banner", "--format=ids").stdout == "twentytwentyfour/hero\n"
    assert run_cli("pattern", "list", "--inserter", "--format=ids").stdout == (
        "twentytwentyfour/hero my-plugin/pricing\n"
    )
    assert run_cli("pattern", "list", "--category=missing", "--format=count").stdout == "0\n"


def test_pattern_get_uses_public_field_names(run_cli) -> None:
    result = run_cli("pattern", "get", "twentytwentyfour/hero", "--format=json")

    data = json.loads(result.stdout)
    assert data["blockTypes"] == ["core/cover"]
    assert data["viewportWidth"] == 1400
    assert data["inserter"] is True
    assert data["postTypes"] == []


def test_pattern_get_unknown(run_cli) -> None:
    result = run_cli("pattern", "get", "theme/none")

    assert result.stderr == "Error: Block pattern 'theme/none' is not registered.\n"


def test_pattern_category_list_and_get(run_cli) -> None:
    listing = run_cli("pattern-category", "list", "--format=csv")
    item = run_cli("pattern-category", "get", "footer", "--format=csv")
    missing = run_cli("pattern-category", "get", "nope")

    assert listing.stdout.splitlines() == [
        "name,label,description",
        "featured,Featured,Highlighted patterns.",
        "footer,Footers,",
        "banner,Banners,Full-width banners.",
    ]
    assert item.stdout == "Field,Value\nname,footer\nlabel,Footers\ndescription,\n"
    assert missing.stderr == "Error: Block pattern category 'nope' is not registered.\n"


def test_style_list_by_block(run_cli) -> None:
    result = run_cli("style", "list", "--block=core/button", "--format=json")

    assert json.loads(result.stdout) == [
        {"block_name": "core/button", "name": "fill", "label": "Fill", "is_default": True},
        {"block_name": "core/button", "name": "outline", "label": "Outline", "is_default": False},
    ]
    assert run_cli("style", "list", "--format=count").stdout == "3\n"
    assert run_cli("style", "list", "--block=core/missing", "--format=count").stdout == "0\n"


def test_style_list_has_no_ids_format(run_cli, capsys) -> None:
    result = run_cli("style", "list", "--format=ids")

    assert result.exit_code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_style_get(run_cli) -> None:
    result = run_cli("style", "get", "core/quote", "plain", "--format=json")
    missing = run_cli("style", "get", "core/quote", "fancy")

    assert json.loads(result.stdout) == {
        "block_name": "core/quote",
        "name": "plain",
        "label": "Plain",
        "is_default": False,
        "style_handle": "",
        "inline_style": ".is-style-plain{border:0}",
    }
    assert missing.stderr == "Error: Block style 'fancy' for block 'core/quote' is not registered.\n"


def test_binding_list_and_get(run_cli) -> None:
    ids = run_cli("binding", "list", "--format=ids")
    context = run_cli("binding", "get", "core/post-meta", "--field=uses_context")
    site_data = run_cli("binding", "get", "my-plugin/site-data", "--format=json")
    missing = run_cli("binding", "get", "core/none")

    assert ids.stdout == "core/post-meta core/pattern-overrides my-plugin/site-data\n"
    assert context.stdout == '["postId","postType"]\n'
    assert json.loads(site_data.stdout) == {"name": "my-plugin/site-data", "label": "Site Data", "uses_context": None}
    assert missing.stderr == "Error: Block binding source 'core/none' is not registered.\n"


def test_unknown_fields_render_empty(run_cli) -> None:
    result = run_cli("binding", "list", "--fields=name,bogus", "--format=csv")

    assert result.stdout.splitlines() == [
        "name,bogus",
        "core/post-meta,",
        "core/pattern-overrides,",
        "my-plugin/site-data,",
    ]


def test_field_prints_one_value_per_line(run_cli) -> None:
    result = run_cli("pattern-category", "list", "--field=label")

    assert result.stdout == "Featured\nFooters\nBanners\n"


def test_table_is_the_default_format(run_cli) -> None:
    lines = run_cli("pattern-category", "list").stdout.splitlines()

    assert lines[0].startswith("+")
    assert [cell.strip() for cell in lines[1].split("|")[1:-1]] == ["name", "label", "description"]


def test_old_hosts_are_rejected_per_family(run_cli, registries) -> None:
    store = EditorStore(registries=registries, wp_version="6.4")

    binding = run_cli("binding", "list", store=store)
    block_types = run_cli("type", "list", "--format=count", store=store)

    assert binding.exit_code == 1
    assert binding.stderr == "Error: Requires WordPress 6.5 or greater.\n"
    assert block_types.stdout == "4\n"


def test_empty_registries_are_not_an_error(run_cli) -> None:
    store = EditorStore(registries=RegistrySet())

    result = run_cli("pattern", "list", "--format=json", store=store)

    assert result.exit_code == 0
    assert result.stdout == "[]\n"
