"""Unit tests for codefig.api.tag.extract_filetype."""

import pytest

from codefig.api.tag.extract_filetype import extract_filetype


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("example.rb", "rb"),
        ("a.py", "py"),
        ("/etc/systemd/system/hblock.timer", "timer"),
        ("My script run.sh", "sh"),
        ("archive.tar.gz", "gz"),
        ("v1.2.rb", "rb"),
        ("snake_case.file_ext", "file_ext"),
    ],
)
def test_trailing_extension(label, expected):
    assert extract_filetype(label) == expected


@pytest.mark.parametrize(
    "label",
    [
        "Makefile",
        "Example of altered hosts file",
        "example.rb is great",
        "example.rb)",
        "ends with dot.",
        ".bashrc",
        "",
        None,
    ],
)
def test_no_extension(label):
    assert extract_filetype(label) is None
