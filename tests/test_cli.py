import wav_caption_renamer
from wavrename.runner import MSG_DIRECTORY_UNREADABLE, MSG_DONE, MSG_NO_TXT, MSG_NO_WAV, run
from wavrename.types import RenameOutcome, RunStatus


def _listing(d):
    return sorted(p.name for p in d.iterdir())


def test_cat_and_dog(make_files, capsys):
    d = make_files({"a.txt": "Cat", "bb.txt": "Dog", "a.wav": b"A", "bb.wav": b"B"})

    report = run(str(d))

    assert report.status is RunStatus.COMPLETED
    assert _listing(d) == ["0_Cat.wav", "1_Dog.wav"]
    assert (d / "0_Cat.wav").read_bytes() == b"A"
    assert capsys.readouterr().out.splitlines() == ["a.wav", "bb.wav", MSG_DONE]


def test_unmatched_wav_keeps_name(make_files, capsys):
    d = make_files({"a.txt": "ねこ", "a.wav": b"", "x.wav": b""})

    report = run(str(d))

    assert _listing(d) == ["0_ねこ.wav", "x.wav"]
    assert report.count(RenameOutcome.RENAMED) == 1
    assert report.count(RenameOutcome.SKIPPED_NO_CAPTION) == 1
    out = capsys.readouterr().out.splitlines()
    assert "xに対応するテキストファイルがありませんでした。" in out


def test_unmatched_txt_is_still_deleted(make_files):
    d = make_files({"a.txt": "A", "orphan.txt": "O", "a.wav": b""})

    run(str(d))

    assert _listing(d) == ["0_A.wav"]


def test_long_shift_jis_caption_is_truncated(make_files):
    d = make_files({"1.txt": "これはとても長いキャプションのテキストです", "1.wav": b""})

    run(str(d))

    assert _listing(d) == ["0_これはとても長いキャプションのテキス.wav"]


def test_empty_directory(tmp_path, capsys):
    report = run(str(tmp_path))

    assert report.status is RunStatus.TXT_NOT_FOUND
    assert capsys.readouterr().out.splitlines() == [MSG_NO_TXT]
    assert _listing(tmp_path) == []


def test_no_wav_files_leaves_txt_alone(make_files, capsys):
    d = make_files({"a.txt": "A"})

    report = run(str(d))

    assert report.status is RunStatus.WAV_NOT_FOUND
    assert capsys.readouterr().out.splitlines() == [MSG_NO_WAV]
    assert _listing(d) == ["a.txt"]


def test_missing_directory(tmp_path, capsys):
    report = run(str(tmp_path / "missing"))

    assert report.status is RunStatus.NO_DIRECTORY
    assert capsys.readouterr().out.splitlines() == [MSG_DIRECTORY_UNREADABLE]


def test_second_run_changes_nothing(make_files, capsys):
    d = make_files({"a.txt": "Cat", "bb.txt": "Dog", "a.wav": b"", "bb.wav": b""})
    run(str(d))
    capsys.readouterr()

    report = run(str(d))

    assert report.status is RunStatus.TXT_NOT_FOUND
    assert capsys.readouterr().out.splitlines() == [MSG_NO_TXT]
    assert _listing(d) == ["0_Cat.wav", "1_Dog.wav"]


def test_main_without_argument(capsys):
    wav_caption_renamer.main([])

    assert capsys.readouterr().out.splitlines() == [wav_caption_renamer.MSG_NO_ARGUMENT]


def test_main_with_directory(make_files, capsys):
    d = make_files({"a.txt": "Cat", "a.wav": b""})

    wav_caption_renamer.main([str(d)])

    assert _listing(d) == ["0_Cat.wav"]
    assert capsys.readouterr().out.splitlines()[-1] == MSG_DONE


def test_nul_in_caption_does_not_abort_run(make_files, capsys):
    # UTF-16 without a BOM decodes with embedded NULs
    d = make_files({"a.txt": "Cat".encode("utf-16-le"), "a.wav": b"A", "bb.txt": "Dog", "bb.wav": b"B"})

    report = run(str(d))

    assert report.status is RunStatus.COMPLETED
    assert [r.outcome for r in report.records] == [
        RenameOutcome.SKIPPED_RENAME_FAILED, RenameOutcome.RENAMED,
    ]
    assert _listing(d) == ["1_Dog.wav", "a.wav"]
    assert capsys.readouterr().out.splitlines()[-1] == MSG_DONE


def test_main_ignores_extra_arguments(make_files, capsys):
    d = make_files({"a.txt": "Cat", "a.wav": b""})

    wav_caption_renamer.main([str(d), "extra"])

    assert _listing(d) == ["0_Cat.wav"]
    assert capsys.readouterr().out.splitlines()[-1] == MSG_DONE


def test_main_with_empty_directory_argument(capsys):
    wav_caption_renamer.main([""])

    assert capsys.readouterr().out.splitlines() == [MSG_DIRECTORY_UNREADABLE]
