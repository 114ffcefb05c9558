"""End-to-end tests for the find-project command line."""

import os
import sys

import pytest

from conftest import make_tree
from findproject import __version__
from findproject.cli import (
    EXIT_FAILURE,
    EXIT_FOUND,
    build_parser,
    main,
    strip_trailing_separators,
)


@pytest.fixture
def projects(root):
    make_tree(root, [
        "github.com/alice/webapp",
        "github.com/bob/vendor/libfoo",
        ".cache/secret",
    ])
    return root


def test_prints_match_on_stdout(projects, capsys):
    code = main(["webapp"], environ={"FP_FOLDER": str(projects)})
    out, err = capsys.readouterr()

    assert code == EXIT_FOUND
    assert out == f"{projects / 'github.com' / 'alice' / 'webapp'}\n"
    assert err == ""


def test_not_found_message(projects, capsys):
    code = main(["libfoo"], environ={"FP_FOLDER": str(projects)})
    out, err = capsys.readouterr()

    assert code == EXIT_FAILURE
    assert out == ""
    assert f'Folder "libfoo" not found inside {projects}' in err


def test_flags_passed_through(projects, capsys):
    environ = {"FP_FOLDER": str(projects)}

    assert main(["--include-vendor", "libfoo"], environ=environ) == EXIT_FOUND
    assert main(["--include-hidden", "--sort-alphabetically", "secret"],
                environ=environ) == EXIT_FOUND

    out, _ = capsys.readouterr()
    assert out.splitlines() == [
        str(projects / "github.com" / "bob" / "vendor" / "libfoo"),
        str(projects / ".cache" / "secret"),
    ]


def test_gopath_src_is_searched(tmp_path, capsys):
    gopath = tmp_path / "go"
    make_tree(gopath, ["src/example.com/tool"])
    other = make_tree(tmp_path / "other", ["tool"])

    code = main(["tool"], environ={"GOPATH": str(gopath), "FP_FOLDER": str(other)})
    out, _ = capsys.readouterr()

    assert code == EXIT_FOUND
    assert out.strip() == str((gopath / "src" / "example.com" / "tool").resolve())


def test_missing_configuration(capsys):
    code = main(["anything"], environ={})
    out, err = capsys.readouterr()

    assert code == EXIT_FAILURE
    assert out == ""
    assert "Please set the $FP_FOLDER environment variable" in err


def test_unresolvable_root(tmp_path, capsys):
    code = main(["anything"], environ={"FP_FOLDER": str(tmp_path / "missing")})
    _, err = capsys.readouterr()

    assert code == EXIT_FAILURE
    assert "Unable to get absolute path to $FP_FOLDER" in err


def test_root_is_a_file(tmp_path, capsys):
    target = tmp_path / "file.txt"
    target.write_text("x")

    code = main(["anything"], environ={"FP_FOLDER": str(target)})
    _, err = capsys.readouterr()

    assert code == EXIT_FAILURE
    assert "Unable to read directory" in err


def test_debug_trace_on_stderr(projects, capsys):
    code = main(["--sort-alphabetically", "webapp"],
                environ={"FP_FOLDER": str(projects), "FP_DEBUG": "1"})
    out, err = capsys.readouterr()

    assert code == EXIT_FOUND
    assert out.strip() == str(projects / "github.com" / "alice" / "webapp")
    lines = err.splitlines()
    assert lines[0] == f"Searching in: {projects / 'github.com'}"
    assert lines[-1] == f"Found: {projects / 'github.com' / 'alice' / 'webapp'}"


def test_no_trace_without_debug(projects, capsys):
    main(["webapp"], environ={"FP_FOLDER": str(projects)})
    _, err = capsys.readouterr()
    assert "Searching in:" not in err


def test_folder_name_required(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([], environ={})
    assert excinfo.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"], environ={})
    out, _ = capsys.readouterr()

    assert excinfo.value.code == 0
    assert __version__ in out


def test_parser_defaults():
    args = build_parser().parse_args(["proj"])
    assert args.folder_name == "proj"
    assert not args.include_vendor
    assert not args.include_hidden
    assert not args.sort_alphabetically


@pytest.mark.skipif(sys.platform in ("win32", "darwin"),
                    reason="filesystem rejects non-UTF-8 names")
def test_non_utf8_match_written_as_raw_bytes(root, capsysbinary):
    """A name that is not valid UTF-8 is printed byte for byte."""
    raw_root = os.fsencode(root)
    try:
        os.makedirs(raw_root + b"/\xffproj/target")
    except OSError:
        pytest.skip("cannot create non-UTF-8 directory names here")

    code = main(["target"], environ={"FP_FOLDER": str(root)})
    out, _ = capsysbinary.readouterr()

    assert code == EXIT_FOUND
    assert out == raw_root + b"/\xffproj/target\n"


def test_trailing_separator_ignored(projects, capsys):
    code = main(["webapp" + os.sep], environ={"FP_FOLDER": str(projects)})
    out, _ = capsys.readouterr()

    assert code == EXIT_FOUND
    assert out.strip() == str(projects / "github.com" / "alice" / "webapp")


def test_not_found_message_uses_stripped_name(projects, capsys):
    code = main(["nothing/"], environ={"FP_FOLDER": str(projects)})
    _, err = capsys.readouterr()

    assert code == EXIT_FAILURE
    assert 'Folder "nothing" not found' in err


@pytest.mark.parametrize("name,expected", [
    ("proj", "proj"),
    ("proj/", "proj"),
    ("proj//", "proj"),
    ("/", "/"),
])
def test_strip_trailing_separators(name, expected):
    assert strip_trailing_separators(name) == expected
