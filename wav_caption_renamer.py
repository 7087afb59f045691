from __future__ import annotations

import argparse
from typing import List, Optional

from wavrename.logging_utils import setup_logging, get_logger
from wavrename.runner import run

log = get_logger(__name__)

MSG_NO_ARGUMENT = "引数にディレクトリが指定されていません。"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """コマンドライン引数を解析する"""
    parser = argparse.ArgumentParser(
        description="同名のtxtファイル(Shift_JIS)の内容を使ってwavファイルを連番付きでリネームする")
    parser.add_argument("directory", nargs="?", default=None,
                        help="wavファイルとtxtファイルを含むディレクトリ")
    # anything after the directory is ignored
    return parser.parse_known_args(argv)[0]


def main(argv: Optional[List[str]] = None) -> None:
    """
    メイン関数
    # 基本使用
    python3 wav_caption_renamer.py path/to/voices

    # ログを表示
    LOG_LEVEL=DEBUG python3 wav_caption_renamer.py path/to/voices
    """
    args = parse_args(argv)
    setup_logging()

    if args.directory is None:
        print(MSG_NO_ARGUMENT)
        return

    report = run(args.directory)
    log.debug("exit", extra={"status": report.status.value})


if __name__ == "__main__":
    main()
