"""Tests for nextroutes.cli — entry point, argument parsing, and the routes command."""

from collections.abc import Callable
from pathlib import Path

import pytest

from nextroutes.cli import build_parser, main

_APP = ["page.js", "(marketing)/about/page.js", "blog/[slug]/page.js"]


class TestCLIHelp:
    def test_help_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "--tree" in out
        assert "--replace" in out


class TestCLIArguments:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.tree is False
        assert args.host == "http://localhost:3000"
        assert args.dir is None
        assert args.force is None
        assert args.replace == []

    def test_short_host_flag(self) -> None:
        assert build_parser().parse_args(["-h", "https://example.com"]).host == "https://example.com"

    def test_force_is_case_insensitive(self) -> None:
        assert build_parser().parse_args(["-f", "APP"]).force == "app"

    def test_invalid_force(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["-f", "remix"])
        assert exc_info.value.code == 2

    def test_replacements_repeatable(self) -> None:
        args = build_parser().parse_args(["-r", "brand=github", "-r", "category=coding"])
        assert dict(args.replace) == {"brand": "github", "category": "coding"}

    def test_replacement_value_keeps_equals(self) -> None:
        args = build_parser().parse_args(["-r", "q=a=b"])
        assert args.replace == [("q", "a=b")]

    @pytest.mark.parametrize("bad", ["slug", "=github", "slug="])
    def test_malformed_replacement(self, bad: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["-r", bad])
        assert exc_info.value.code == 2


class TestCLIRoutes:
    def test_explicit_dir(
        self, make_tree: Callable[..., Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        app = make_tree(_APP, root="app")
        main(["-d", str(app), "-h", "http://x"])

        assert capsys.readouterr().out.splitlines() == [
            "http://x",
            "http://x/about",
            "http://x/blog/:slug",
        ]

    def test_tree_mode_with_replacement(
        self, make_tree: Callable[..., Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        app = make_tree(_APP, root="app")
        main(["-d", str(app), "-h", "http://x", "-t", "-r", "slug=hello"])

        out = capsys.readouterr().out
        assert "   └─ 📁 hello [http://x/blog/hello]" in out.splitlines()

    def test_auto_detect_prefers_src_app(
        self,
        make_tree: Callable[..., Path],
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        make_tree(["dash/page.tsx"], root="src/app")
        make_tree(["index.js", "legacy.js"], root="pages")
        monkeypatch.chdir(tmp_path)
        main(["-h", "http://x"])

        assert capsys.readouterr().out == "http://x/dash\n"

    def test_auto_detected_type_can_be_forced(
        self,
        make_tree: Callable[..., Path],
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        make_tree(["page.js"], root="app")
        monkeypatch.chdir(tmp_path)
        main(["-h", "http://x", "-f", "pages"])

        assert capsys.readouterr().out == "http://x/page\n"

    def test_no_directory_found(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Cannot find Next.js directory" in err
        assert "-d" in err

    def test_missing_dir(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["-d", str(tmp_path / "nope")])
        assert exc_info.value.code == 1
        assert "Specified path does not exist" in capsys.readouterr().err

    def test_dir_is_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        target = tmp_path / "app.js"
        target.write_text("")
        with pytest.raises(SystemExit) as exc_info:
            main(["-d", str(target)])
        assert exc_info.value.code == 1
        assert "not a directory" in capsys.readouterr().err

    def test_no_routes_exits_one(
        self, make_tree: Callable[..., Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        app = make_tree(["layout.tsx"], root="app")
        with pytest.raises(SystemExit) as exc_info:
            main(["-d", str(app)])
        assert exc_info.value.code == 1
        assert "Route structure not found" in capsys.readouterr().err

    def test_invalid_host(self, make_tree: Callable[..., Path], capsys: pytest.CaptureFixture[str]) -> None:
        app = make_tree(_APP, root="app")
        with pytest.raises(SystemExit) as exc_info:
            main(["-d", str(app), "-h", "/"])
        assert exc_info.value.code == 1
        assert "host" in capsys.readouterr().err
