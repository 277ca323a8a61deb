"""Tests for Markdown / JSON rendering."""

import json
from pathlib import Path

import pytest

from contextmap_cli.errors import RenderError
from contextmap_cli.renderer import display_path, file_tree, render
from contextmap_cli.resolver import canonical_path


def test_file_tree():
    tree = file_tree(["src/b.ts", "src/a/x.ts", "main.ts"])
    assert tree == "\n".join([
        ".",
        "├── main.ts",
        "└── src",
        "    ├── a",
        "    │   └── x.ts",
        "    └── b.ts",
    ])


def test_file_tree_empty():
    assert file_tree([]) == "."


def test_display_path(temp_dir: Path):
    inside = str(temp_dir / "src" / "a.ts")
    assert display_path(inside, str(temp_dir)) == "src/a.ts"
    assert display_path("/elsewhere/a.ts", str(temp_dir / "src")) == "/elsewhere/a.ts"


def test_render_json_sorted_absolute(make_tree):
    root = make_tree({"src/b.ts": "", "src/a.ts": ""})
    out = render([str(root / "src" / "b.ts"), str(root / "src" / ".." / "src" / "a.ts")], "json", base=str(root))
    assert json.loads(out) == [
        canonical_path(str(root / "src" / "a.ts")),
        canonical_path(str(root / "src" / "b.ts")),
    ]


def test_render_markdown(make_tree):
    root = make_tree({
        "src/a.ts": 'import { b } from "./b";\n',
        "src/b.jsx": "export const b = <div />;\n",
    })
    out = render([str(root / "src" / "b.jsx"), str(root / "src" / "a.ts")], "markdown", base=str(root))
    assert out == "\n".join([
        "```text",
        ".",
        "└── src",
        "    ├── a.ts",
        "    └── b.jsx",
        "```",
        "### src/a.ts",
        "",
        "```ts",
        'import { b } from "./b";',
        "```",
        "### src/b.jsx",
        "",
        "```jsx",
        "export const b = <div />;",
        "```",
    ])


def test_render_markdown_max_lines(make_tree):
    root = make_tree({"long.ts": "one\ntwo\nthree\nfour\n"})
    out = render([str(root / "long.ts")], "markdown", max_lines=2, base=str(root))
    assert "one\ntwo\n```" in out
    assert "three" not in out


def test_render_unknown_format():
    with pytest.raises(RenderError, match="yaml"):
        render([], "yaml")


def test_render_markdown_keeps_form_feeds(make_tree):
    root = make_tree({"ff.ts": "const x = 1;\x0c\nconst y = 2; z\n"})
    out = render([str(root / "ff.ts")], "markdown", base=str(root))
    assert out.endswith("```ts\nconst x = 1;\x0c\nconst y = 2; z\n```")


def test_render_markdown_max_lines_counts_newlines_only(make_tree):
    root = make_tree({"ff.ts": "one\x0ctwo\nthree\n"})
    out = render([str(root / "ff.ts")], "markdown", max_lines=1, base=str(root))
    assert out.endswith("```ts\none\x0ctwo\n```")
