from __future__ import annotations

from wavrename.captions import load_captions
from wavrename.config import TXT_MARKER, WAV_MARKER
from wavrename.logging_utils import get_logger
from wavrename.renamer import Echo, rename_wav_files
from wavrename.scanner import scan_directory
from wavrename.types import RenameOutcome, RunReport, RunStatus, ScanStatus

log = get_logger(__name__)

MSG_DIRECTORY_UNREADABLE = "指定されたディレクトリを開けませんでした。"
MSG_NO_TXT = "指定されたディレクトリにtxtファイルが存在しません。"
MSG_NO_WAV = "指定されたディレクトリにwavファイルが存在しません。"
MSG_DONE = "リネームが完了しました。"


def run(directory: str, echo: Echo = print) -> RunReport:
    """Scan ``directory``, load captions and rename the wav files.

    Both scans happen before any txt file is touched, so a directory without
    wav files is left exactly as it was.
    """
    log.info("rename start", extra={"directory": directory})

    txt_scan = scan_directory(directory, TXT_MARKER)
    if txt_scan.status is ScanStatus.NOT_FOUND:
        echo(MSG_DIRECTORY_UNREADABLE)
        return RunReport(RunStatus.NO_DIRECTORY)
    if not txt_scan.found:
        echo(MSG_NO_TXT)
        return RunReport(RunStatus.TXT_NOT_FOUND)

    wav_scan = scan_directory(directory, WAV_MARKER)
    if not wav_scan.found:
        echo(MSG_NO_WAV)
        return RunReport(RunStatus.WAV_NOT_FOUND)

    captions = load_captions(txt_scan.entries)
    records = rename_wav_files(directory, wav_scan.entries, captions, echo=echo)
    echo(MSG_DONE)

    report = RunReport(RunStatus.COMPLETED, records)
    log.info("rename done", extra={
        "renamed": report.count(RenameOutcome.RENAMED),
        "no_caption": report.count(RenameOutcome.SKIPPED_NO_CAPTION),
        "failed": report.count(RenameOutcome.SKIPPED_RENAME_FAILED),
    })
    return report
