"""End-to-end tests for the command-line entry point."""
import pytest

from subrenamer.renamer import SubtitleRenamer, main

PATTERN = r"S(\d{2})E(\d{2})"


@pytest.fixture
def episode(media_dir, touch):
    touch(media_dir, "Show.S01E05.1080p.mkv", "subtitle.S01E05.srt")
    return media_dir


def run(media_dir, *extra: str) -> int:
    return main(["--srt-regex", PATTERN, "--directory", str(media_dir), *extra])


def test_renames_subtitle_after_video(episode):
    assert run(episode) == 0
    assert (episode / "Show.S01E05.1080p.srt").exists()
    assert not (episode / "subtitle.S01E05.srt").exists()


def test_second_run_has_nothing_to_do(episode, capsys):
    run(episode)
    capsys.readouterr()

    assert run(episode) == 0
    assert "No files to rename." in capsys.readouterr().out
    assert sorted(p.name for p in episode.iterdir()) == [
        "Show.S01E05.1080p.mkv", "Show.S01E05.1080p.srt",
    ]


def test_conflict_leaves_subtitle(episode, touch, capsys):
    touch(episode, "Show.S01E05.1080p.srt")

    assert run(episode) == 0
    assert (episode / "subtitle.S01E05.srt").exists()
    assert "Destination already exists" in capsys.readouterr().out


def test_unmatched_subtitle(media_dir, touch, capsys):
    touch(media_dir, "Show.S01E05.mkv", "subtitle.S02E01.srt")

    assert run(media_dir) == 0
    out = capsys.readouterr().out
    assert out.count("No video found for episode '02'") == 1
    assert (media_dir / "subtitle.S02E01.srt").exists()


def test_unmatched_subtitle_quiet(media_dir, touch, capsys):
    touch(media_dir, "Show.S01E05.mkv", "subtitle.S02E01.srt")

    assert run(media_dir, "--quiet") == 0
    assert capsys.readouterr().out == ""


def test_dry_run_quiet(episode, capsys):
    assert run(episode, "--dry-run", "--quiet") == 0

    assert (episode / "subtitle.S01E05.srt").exists()
    assert not (episode / "Show.S01E05.1080p.srt").exists()
    assert "[DRY RUN] subtitle.S01E05.srt -> Show.S01E05.1080p.srt" in capsys.readouterr().out


def test_recursive_flag(media_dir, touch):
    touch(media_dir, "s1/Show.S01E05.mkv", "s1/subs/x.S01E05.srt")

    assert run(media_dir) == 0
    assert (media_dir / "s1/subs/x.S01E05.srt").exists()

    assert run(media_dir, "--recursive") == 0
    assert (media_dir / "s1/subs/Show.S01E05.srt").exists()


def test_extension_options(media_dir, touch):
    touch(media_dir, "Show.S01E05.mp4", "a.S01E05.ass", "b.S01E05.srt")

    assert run(media_dir, "--srt-ext", "ass", "--video-ext", "mp4,avi") == 0
    assert (media_dir / "Show.S01E05.ass").exists()
    assert (media_dir / "b.S01E05.srt").exists()


def test_video_regex_alone(episode):
    assert main(["--mkv-regex", PATTERN, "-d", str(episode)]) == 0
    assert (episode / "Show.S01E05.1080p.srt").exists()


def test_verbose_counts(episode, capsys):
    run(episode, "--verbose", "--dry-run")
    assert "Found 1 subtitle(s) and 1 video(s)" in capsys.readouterr().out


def test_missing_regex_prints_usage(episode, capsys):
    assert main(["--directory", str(episode)]) == 1
    err = capsys.readouterr().err
    assert "at least one regex is required" in err
    assert "--dry-run" in err
    assert (episode / "subtitle.S01E05.srt").exists()


def test_invalid_regex(episode, capsys):
    assert main(["--srt-regex", "S(\\d{2}", "-d", str(episode)]) == 1
    assert "[ERROR] Invalid subtitle regex" in capsys.readouterr().err
    assert (episode / "subtitle.S01E05.srt").exists()


def test_missing_directory(tmp_path, capsys):
    assert main(["--srt-regex", PATTERN, "-d", str(tmp_path / "missing")]) == 1
    assert "Directory does not exist" in capsys.readouterr().err


def test_directory_is_a_file(tmp_path, touch, capsys):
    (path,) = touch(tmp_path, "file.txt")
    assert main(["--srt-regex", PATTERN, "-d", str(path)]) == 1
    assert "[ERROR] Could not read directory" in capsys.readouterr().err


def test_regex_from_dotenv(episode, tmp_path):
    (tmp_path / ".env").write_text(f"SUBRENAMER_SRT_REGEX={PATTERN}\n")

    assert main(["-d", str(episode)]) == 0
    assert (episode / "Show.S01E05.1080p.srt").exists()


def test_command_line_wins_over_environment(episode, monkeypatch):
    monkeypatch.setenv("SUBRENAMER_SRT_REGEX", r"(nomatch\d+)")

    assert run(episode) == 0
    assert (episode / "Show.S01E05.1080p.srt").exists()


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert "sub-renamer 1.0.0" in capsys.readouterr().out


def test_subtitle_renamer_returns_summary(episode, make_config):
    summary = SubtitleRenamer(make_config(dry_run=True, quiet=True)).run()
    assert summary.succeeded == 1
    assert summary.dry_run


def test_empty_subtitle_regex_matches_nothing(media_dir, touch, capsys):
    touch(media_dir, "Show.E05.mkv", "sub.E05.srt")

    assert main(["--srt-regex", "", "--mkv-regex", r"E(\d+)", "-d", str(media_dir)]) == 0
    assert (media_dir / "sub.E05.srt").exists()
    assert "No files to rename." in capsys.readouterr().out
