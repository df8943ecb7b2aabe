from pathlib import Path

import pytest

from lyrics_finder import cli
from lyrics_finder.models import SearchQuery, SearchResult


def test_parse_args_with_title_and_artist() -> None:
    args = cli.parse_args(["--title", "Hier Encore", "--artist", "Charles Aznavour"])
    assert args.title == "Hier Encore"
    assert args.artist == "Charles Aznavour"


def test_parse_args_requires_a_song() -> None:
    with pytest.raises(SystemExit):
        cli.parse_args([])
    with pytest.raises(SystemExit):
        cli.parse_args(["--title", "Hier Encore", "--artist", "  "])


def test_parse_args_rejects_mixed_modes() -> None:
    with pytest.raises(SystemExit):
        cli.parse_args(["--queries-file", "songs.txt", "--title", "x"])


def test_parse_query_line() -> None:
    assert cli.parse_query_line(" Hier Encore | Charles Aznavour ") == SearchQuery(
        title="Hier Encore", artist="Charles Aznavour"
    )
    assert cli.parse_query_line("no separator") is None
    assert cli.parse_query_line(" | artist only") is None


def test_namespace_to_config_maps_flags() -> None:
    args = cli.parse_args(
        ["--title", "t", "--artist", "a", "--timeout", "3", "--workers", "2", "--no-fallback"]
    )
    config = cli.namespace_to_config(args)
    assert config.request_timeout == 3.0
    assert config.workers == 2
    assert config.enable_fallback is False


def test_main_prints_lyrics_on_success(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(
        cli,
        "search_lyrics",
        lambda title, artist, **_kwargs: SearchResult.found(f"{title}\n{artist}", "paroles.net"),
    )
    assert cli.main(["--title", "Hier Encore", "--artist", "Charles Aznavour"]) == 0
    assert capsys.readouterr().out == "Hier Encore\nCharles Aznavour\n"


def test_main_returns_one_when_nothing_found(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        cli, "search_lyrics", lambda *_args, **_kwargs: SearchResult.failed("nothing")
    )
    assert cli.main(["--title", "t", "--artist", "a", "--no-fallback"]) == 1


def test_main_returns_two_on_invalid_config() -> None:
    assert cli.main(["--title", "t", "--artist", "a", "--workers", "0"]) == 2


def test_main_batch_writes_csv(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    queries = tmp_path / "songs.txt"
    queries.write_text("Hier Encore | Charles Aznavour\nbroken line\nT | A\n", encoding="utf-8")
    output = tmp_path / "out.csv"
    seen: list[tuple[str, str]] = []

    def fake_search(title: str, artist: str, **_kwargs: object) -> SearchResult:
        seen.append((title, artist))
        return SearchResult.found("la la", source="paroles.net")

    monkeypatch.setattr(cli, "search_lyrics", fake_search)
    exit_code = cli.main(
        ["--queries-file", str(queries), "--output", str(output), "--no-progress"]
    )
    assert exit_code == 0
    assert seen == [("Hier Encore", "Charles Aznavour"), ("T", "A")]
    assert len(output.read_text(encoding="utf-8").splitlines()) == 3
