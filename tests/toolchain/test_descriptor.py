"""
Tests for clangkit.toolchain.descriptor module.
"""

import dataclasses
from pathlib import Path

import pytest

from clangkit.toolchain.descriptor import (
    LANGUAGE_C,
    LANGUAGE_CPP,
    LANGUAGE_OBJC,
    LANGUAGE_QUERIES,
    ToolchainDescriptor,
)
from clangkit.toolchain.version import ClangVersion


@pytest.fixture
def descriptor():
    return ToolchainDescriptor(
        executable_path=Path("/usr/bin/clang"),
        version=ClangVersion(18, 1, 8),
        search_paths={
            LANGUAGE_C: ("/usr/include",),
            LANGUAGE_CPP: ("/usr/include/c++/13", "/usr/include"),
            LANGUAGE_OBJC: ("/usr/include/c++/13", "/usr/include"),
        },
    )


class TestToolchainDescriptor:
    """Tests for ToolchainDescriptor dataclass."""

    def test_language_accessors(self, descriptor):
        """Test per-language convenience accessors."""
        assert descriptor.c_search_paths == ("/usr/include",)
        assert descriptor.cpp_search_paths == ("/usr/include/c++/13", "/usr/include")
        assert descriptor.objc_search_paths == descriptor.cpp_search_paths

    def test_missing_language_is_empty(self):
        """Test accessors for languages that were not queried."""
        tc = ToolchainDescriptor(executable_path=Path("/usr/bin/clang"))

        assert tc.version is None
        assert tc.c_search_paths == ()
        assert tc.objc_search_paths == ()

    def test_immutable(self, descriptor):
        """Test that fields cannot be reassigned."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            descriptor.executable_path = Path("/opt/clang")

    def test_search_paths_immutable(self, descriptor):
        """Test that search path lists cannot be changed after construction."""
        with pytest.raises(TypeError):
            descriptor.search_paths[LANGUAGE_C] = ("/elsewhere",)

        assert descriptor.c_search_paths == ("/usr/include",)

    def test_search_paths_copied(self):
        """Test that later changes to the source mapping are not seen."""
        source = {LANGUAGE_C: ["/usr/include"]}
        tc = ToolchainDescriptor(executable_path=Path("/usr/bin/clang"), search_paths=source)

        source[LANGUAGE_C].append("/opt/include")
        source[LANGUAGE_CPP] = ["/usr/include/c++/13"]

        assert tc.c_search_paths == ("/usr/include",)
        assert tc.cpp_search_paths == ()

    def test_hashable(self, descriptor):
        """Test that descriptors can be hashed and equal ones hash alike."""
        assert hash(descriptor) == hash(dataclasses.replace(descriptor))
        assert len({descriptor, dataclasses.replace(descriptor)}) == 1

    def test_equality(self, descriptor):
        """Test that descriptors compare by value."""
        other = dataclasses.replace(descriptor)
        assert other == descriptor
        assert other is not descriptor

    def test_str(self, descriptor):
        """Test string representation."""
        result = str(descriptor)
        assert "18.1.8" in result
        assert "clang" in result

    def test_str_unknown_version(self):
        """Test string representation without a version."""
        tc = ToolchainDescriptor(executable_path=Path("/usr/bin/clang"))
        assert "unknown version" in str(tc)

    def test_to_dict(self, descriptor):
        """Test converting to dictionary."""
        result = descriptor.to_dict()

        assert result["executable_path"] == str(Path("/usr/bin/clang"))
        assert result["version"] == "18.1.8"
        assert result["search_paths"]["c++"] == ["/usr/include/c++/13", "/usr/include"]


class TestLanguageQueries:
    """Tests for the language tag to query language table."""

    def test_languages(self):
        assert set(LANGUAGE_QUERIES) == {"c", "c++", "objective-c"}

    def test_objective_c_queried_as_cpp(self):
        assert LANGUAGE_QUERIES[LANGUAGE_OBJC] == "c++"
