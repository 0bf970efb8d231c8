import json
import os
import sys
import textwrap

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import skill_tree


@pytest.fixture
def tree_file(tmp_path):
    (tmp_path / "extra.toml").write_text(
        textwrap.dedent(
            """
            [doc]
            columns = ["owner"]

            [[group]]
            name = "b"
            requires = ["a"]
            items = [{ label = "second" }]
            """
        ),
        encoding="utf-8",
    )
    root = tmp_path / "root.toml"
    root.write_text(
        textwrap.dedent(
            """
            [doc]
            columns = ["status"]
            include = ["extra.toml"]

            [[group]]
            name = "a"
            status = "Complete"
            items = [{ label = "first", status = "done" }]
            """
        ),
        encoding="utf-8",
    )
    return root


def test_summary_output(tree_file, capsys):
    assert skill_tree.main([str(tree_file)]) == 0
    out = capsys.readouterr().out
    assert "Groups: 2" in out
    assert "Clusters: 0" in out
    assert "Columns: status, owner" in out
    assert "a [Complete] 1 items requires: -" in out
    assert "b [-] 1 items requires: a" in out


def test_json_output_to_file(tree_file, tmp_path):
    output = tmp_path / "merged.json"
    assert skill_tree.main([str(tree_file), "--json", "-o", str(output)]) == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert [g["name"] for g in data["group"]] == ["a", "b"]
    assert data["doc"]["columns"] == ["status", "owner"]
    assert data["group"][0]["status"] == "Complete"


def test_missing_dependency_exits_with_error(tmp_path, capsys):
    root = tmp_path / "root.toml"
    root.write_text('[[group]]\nname = "b"\nrequires = ["a"]\nitems = []\n', encoding="utf-8")
    assert skill_tree.main([str(root)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "dependency on a group `a`" in captured.err


def test_missing_include_reports_context(tmp_path, capsys):
    root = tmp_path / "root.toml"
    root.write_text('[doc]\ninclude = ["gone.toml"]\n', encoding="utf-8")
    assert skill_tree.main([str(root)]) == 1
    err = capsys.readouterr().err
    assert f"loading skill tree from `{root}`" in err
    assert "caused by: cannot read" in err


def test_strict_names_flag(tmp_path, capsys):
    root = tmp_path / "root.toml"
    root.write_text(
        '[[group]]\nname = "a"\nitems = []\n\n[[group]]\nname = "a"\nitems = []\n',
        encoding="utf-8",
    )
    assert skill_tree.main([str(root)]) == 0
    assert skill_tree.main([str(root), "--strict-names"]) == 1
    assert "declared more than once" in capsys.readouterr().err


def test_version(capsys):
    assert skill_tree.main(["--version"]) == 0
    assert "skill-tree" in capsys.readouterr().out


def test_unwritable_output_exits_with_error(tree_file, tmp_path, capsys):
    output = tmp_path / "no-such-dir" / "merged.json"
    assert skill_tree.main([str(tree_file), "-o", str(output)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "cannot write" in captured.err
