from __future__ import annotations

import pytest

from hostinfo.utils.osdetect import OSFamily, classify, get_os, is_os

UNIX_LIKE = [
    OSFamily.LINUX,
    OSFamily.DARWIN,
    OSFamily.FREEBSD,
    OSFamily.HP_UX,
    OSFamily.AIX,
    OSFamily.SOLARIS,
]


class TestClassify:
    @pytest.mark.parametrize(
        "kernel, expected",
        [
            ("linux", OSFamily.LINUX),
            ("freebsd", OSFamily.FREEBSD),
            ("sunos", OSFamily.SOLARIS),
            ("solaris", OSFamily.SOLARIS),
            ("darwin", OSFamily.DARWIN),
            ("hp-ux", OSFamily.HP_UX),
            ("aix", OSFamily.AIX),
            ("unix", OSFamily.UNIX),
            ("win32", OSFamily.WINDOWS),
            ("windows", OSFamily.WINDOWS),
            ("cygwin_nt-10.0", OSFamily.WINDOWS),
            ("plan9", OSFamily.UNKNOWN),
            ("", OSFamily.UNKNOWN),
        ],
    )
    def test_kernel_names(self, kernel: str, expected: OSFamily) -> None:
        assert classify(kernel) is expected

    def test_raw_uname_casing_is_accepted(self) -> None:
        assert classify("Linux") is OSFamily.LINUX
        assert classify("Darwin\n") is OSFamily.DARWIN

    def test_exact_match_only_for_unix_families(self) -> None:
        assert classify("linuxish") is OSFamily.UNKNOWN
        assert classify("freebsd13") is OSFamily.UNKNOWN


class TestIsOS:
    @pytest.mark.parametrize("family", UNIX_LIKE)
    def test_every_unix_like_is_unix(self, family: OSFamily) -> None:
        assert is_os(family, OSFamily.UNIX)
        assert is_os(family, family)
        assert not is_os(OSFamily.UNIX, family)

    def test_linux_is_only_linux(self) -> None:
        for family in UNIX_LIKE:
            assert is_os(family, OSFamily.LINUX) is (family is OSFamily.LINUX)

    def test_windows_and_unix_are_disjoint(self) -> None:
        assert not is_os(OSFamily.WINDOWS, OSFamily.UNIX)
        assert not is_os(OSFamily.UNIX, OSFamily.WINDOWS)

    def test_no_candidates_is_false(self) -> None:
        for family in OSFamily:
            assert is_os(family) is False

    def test_any_candidate_matches(self) -> None:
        assert is_os(OSFamily.SOLARIS, OSFamily.FREEBSD, OSFamily.SOLARIS)
        assert not is_os(OSFamily.DARWIN, OSFamily.FREEBSD, OSFamily.SOLARIS)

    def test_unknown_matches_only_itself(self) -> None:
        assert is_os(OSFamily.UNKNOWN, OSFamily.UNKNOWN)
        assert not is_os(OSFamily.LINUX, OSFamily.UNKNOWN)
        assert not is_os(OSFamily.UNKNOWN, OSFamily.UNIX)

    def test_unix_bit_layout(self) -> None:
        bits = [family & ~OSFamily.UNIX for family in UNIX_LIKE]
        assert all(b for b in bits)
        assert len(set(bits)) == len(bits)
        assert OSFamily.WINDOWS & OSFamily.UNIX == 0


class TestGetOS:
    def test_marker_file_wins_over_kernel_name(self, fake_root) -> None:
        root = fake_root(linux=True)
        assert get_os("unix", root) is OSFamily.LINUX
        assert get_os("freebsd", root) is OSFamily.LINUX

    def test_kernel_name_without_marker(self, fake_root) -> None:
        root = fake_root(linux=False)
        assert get_os("freebsd", root) is OSFamily.FREEBSD
        assert get_os("plan9", root) is OSFamily.UNKNOWN

    def test_live_kernel_name_is_used_by_default(self, fake_root, monkeypatch) -> None:
        root = fake_root(linux=False)
        monkeypatch.setattr("hostinfo.probes.uname.system", lambda: "Darwin")
        assert get_os(root=root) is OSFamily.DARWIN
