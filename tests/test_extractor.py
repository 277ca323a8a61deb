"""Tests for relative import extraction."""

from contextmap_cli.extractor import extract_specifiers, is_relative


def test_import_and_require_forms():
    code = '''import { a } from "./a";
import b from '../lib/b';
import "./side-effect";
import type { T } from "./types";
export * from "./reexport";
export { x as y } from '../x';
const c = require("./c");
const d = require( '../d' );
'''
    assert extract_specifiers(code) == [
        "../d",
        "../lib/b",
        "../x",
        "./a",
        "./c",
        "./reexport",
        "./side-effect",
        "./types",
    ]


def test_bare_specifiers_are_dropped():
    code = 'import React from "react";\nconst fs = require("fs");\nimport { z } from "@scope/pkg";\n'
    assert extract_specifiers(code) == []


def test_multiple_constructs_on_one_line():
    code = 'import a from "./a"; import b from "./b"; const c = require("./c");'
    assert extract_specifiers(code) == ["./a", "./b", "./c"]


def test_duplicates_collapse():
    code = 'import a from "./a";\nimport { b } from "./a";\nrequire("./a");\n'
    assert extract_specifiers(code) == ["./a"]


def test_multiline_named_import():
    code = 'import {\n  one,\n  two,\n} from "./numbers";\n'
    assert extract_specifiers(code) == ["./numbers"]


def test_multiline_default_and_named_import():
    code = 'import React, {\n  useState,\n} from "./react-shim";\n'
    assert extract_specifiers(code) == ["./react-shim"]
    code = 'import $, {\n  ajax,\n} from "./jq";\n'
    assert extract_specifiers(code) == ["./jq"]


def test_dynamic_import():
    assert extract_specifiers('const m = await import("./lazy");') == ["./lazy"]


def test_export_without_from_is_not_an_import():
    assert extract_specifiers('export const path = "./not-a-module";') == []


def test_is_relative():
    assert is_relative("./a")
    assert is_relative("../a")
    assert is_relative(".")
    assert is_relative("..")
    assert not is_relative("react")
    assert not is_relative(".hidden")
    assert not is_relative("/abs/path")
