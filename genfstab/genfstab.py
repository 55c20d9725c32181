#!/bin/python3

import logging
import os
import sys
from argparse import ArgumentParser
from logging.config import dictConfig as logging_dict_config
from pathlib import Path
from typing import Sequence

from genfstab.errors import GenfstabError
from genfstab.fstab.fstab import Fstab
from genfstab.fstab.fstab_generator import FstabGenerator
from genfstab.sources import SystemSources


class ExitError(Exception):
    """Error raised to stop the application with a message"""


class Application:
    """Class representing the genfstab application"""

    root: str
    use_uuid: bool = False
    to_fstab: bool = False
    use_color_logs: bool = False
    log_level: str = "INFO"
    argv: list[str]
    sources: SystemSources

    def __parse_cli_args(self, argv: Sequence[str] | None) -> None:
        """Parse cli args with argparse to configure the app"""
        parser = ArgumentParser(
            prog="genfstab",
            description="Generate an fstab from the filesystems mounted under a root",
        )
        parser.add_argument("root", type=str, help="root directory of the target system")
        parser.add_argument("-U", dest="use_uuid", action="store_true", help="use UUID")
        parser.add_argument(
            "--to-fstab",
            action="store_true",
            help="write the result into /etc/fstab in root",
        )
        parser.add_argument("--color", action="store_true", help="use color for logs")
        parser.add_argument(
            "--log-level",
            type=str,
            default=Application.log_level,
            help="logging level to use",
            choices=logging.getLevelNamesMapping().keys(),
        )
        self.argv = list(argv) if argv is not None else sys.argv[1:]
        args = parser.parse_args(self.argv)
        self.root = args.root
        self.use_uuid = args.use_uuid
        self.to_fstab = args.to_fstab
        self.use_color_logs = args.color
        self.log_level = args.log_level

    def __init__(
        self,
        argv: Sequence[str] | None = None,
        sources: SystemSources | None = None,
    ) -> None:
        self.sources = sources if sources is not None else SystemSources()
        self.__parse_cli_args(argv)

    def __setup_logging(self) -> None:
        """Setup logging for the app"""
        logging_dict_config(
            {
                "version": 1,
                "disable_existing_loggers": False,
                "formatters": {
                    "console_formatter": {
                        "format": "[{levelname}] {message}",
                        "style": "{",
                        "class": (
                            "genfstab.logging.color_log_formatter.ColorLogFormatter"
                            if self.use_color_logs
                            else "logging.Formatter"
                        ),
                    }
                },
                "handlers": {
                    "console_handler": {
                        "class": "logging.StreamHandler",
                        "level": self.log_level,
                        "formatter": "console_formatter",
                        "stream": "ext://sys.stderr",
                    }
                },
                "root": {
                    "level": logging.NOTSET,
                    "handlers": ["console_handler"],
                },
            }
        )

    def __check_privileges(self) -> None:
        if os.geteuid() != 0:
            command = " ".join(("genfstab", *self.argv))
            raise ExitError(
                f"You need to run with root privileges.\nE.g. sudo {command}"
            )

    def __check_root(self) -> None:
        if not Path(self.root).is_dir():
            raise ExitError(f"Directory {self.root} not found")

    @property
    def etc_path(self) -> Path:
        return Path(self.root) / "etc"

    @property
    def fstab_path(self) -> Path:
        return self.etc_path / "fstab"

    @staticmethod
    def format_fstab(fstab: Fstab) -> str:
        """Format the fstab lines, each followed by a blank line"""
        return "".join(f"{line}\n\n" for line in fstab)

    @staticmethod
    def ask_confirm(question: str, default: bool = False) -> bool:
        """Ask a yes/no question on stdin"""
        try:
            answer = input(question).strip()
        except EOFError:
            return default
        if len(answer) == 0:
            return default
        return answer[0] in ("y", "Y")

    def write_fstab(self, fstab: Fstab) -> None:
        """Write the fstab into the root's /etc/fstab"""
        etc_path = self.etc_path
        if not etc_path.exists():
            raise ExitError(
                f"{etc_path} does not exist.\nPlease remove --to-fstab option."
            )
        if not etc_path.is_dir():
            raise ExitError(
                f"{etc_path} is not a directory.\nPlease remove --to-fstab option."
            )
        fstab_path = self.fstab_path
        if fstab_path.exists() and not self.ask_confirm(
            f"{fstab_path} already exists.\nRewrite? (y/N): "
        ):
            raise ExitError("Fstab was not written.")
        try:
            fstab_path.write_text(self.format_fstab(fstab), encoding="utf-8")
        except OSError as error:
            raise ExitError(f"Cannot write {fstab_path}: {error}") from error
        logging.info("Wrote %s", fstab_path)

    def run(self) -> int:
        self.__setup_logging()
        try:
            self.__check_privileges()
            self.__check_root()
            logging.debug("Reading mounts from %s", self.sources.mounts_path)
            fstab = FstabGenerator(self.sources).generate(self.root, self.use_uuid)
            if self.to_fstab:
                self.write_fstab(fstab)
            else:
                sys.stdout.write(self.format_fstab(fstab))
        except ExitError as error:
            logging.error("%s", error)
            return 1
        except GenfstabError as error:
            logging.error("Cannot generate fstab (%s): %s", error.kind.value, error)
            return 1
        return 0


def main():
    app = Application()
    sys.exit(app.run())


if __name__ == "__main__":
    main()
