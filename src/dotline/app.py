"""Application entry point: a headless game server on stdin/stdout."""

from __future__ import annotations

import logging
import sys

from PyQt6.QtCore import (
    QCommandLineOption,
    QCommandLineParser,
    QCoreApplication,
    QThread,
)

from dotline import __version__
from dotline.game.text import set_language
from dotline.server.qt_bridge import GameServer
from dotline.server.stdio import StreamReader, StreamWriter
from dotline.settings import GameSettings

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULTS = GameSettings()


def _build_parser() -> tuple[QCommandLineParser, dict[str, QCommandLineOption]]:
    parser = QCommandLineParser()
    parser.setApplicationDescription(
        "Line game server. Reads JSON requests from stdin, one per line, "
        "and writes JSON responses to stdout."
    )
    options = {
        "width": QCommandLineOption(
            ["width"], "Grid width in points.", "n", str(_DEFAULTS.grid_width)
        ),
        "height": QCommandLineOption(
            ["height"], "Grid height in points.", "n", str(_DEFAULTS.grid_height)
        ),
        "idle": QCommandLineOption(
            ["idle-timeout"],
            "Milliseconds before an idle player is nudged.",
            "ms",
            str(_DEFAULTS.idle_timeout_ms),
        ),
        "language": QCommandLineOption(
            ["language"], "Display language.", "name", _DEFAULTS.language
        ),
        "log_level": QCommandLineOption(
            ["log-level"], "Logging level for stderr.", "level", "WARNING"
        ),
    }
    for option in options.values():
        parser.addOption(option)
    return parser, options


def _settings_from_parser(
    parser: QCommandLineParser, options: dict[str, QCommandLineOption]
) -> GameSettings:
    try:
        return GameSettings(
            grid_width=int(parser.value(options["width"])),
            grid_height=int(parser.value(options["height"])),
            idle_timeout_ms=int(parser.value(options["idle"])),
            language=parser.value(options["language"]),
        )
    except ValueError as exc:
        raise ValueError(f"Invalid option: {exc}") from exc


def _log_level(parser: QCommandLineParser, options: dict[str, QCommandLineOption]) -> int:
    name = parser.value(options["log_level"]).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def parse_settings(argv: list[str]) -> GameSettings:
    """Build :class:`GameSettings` from a full argument vector."""
    parser, options = _build_parser()
    if not parser.parse(argv):
        raise ValueError(parser.errorText())
    return _settings_from_parser(parser, options)


def run_application(argv: list[str] | None = None) -> int:
    """Create the Qt core application and serve until stdin closes."""
    app = QCoreApplication(sys.argv if argv is None else argv)
    app.setApplicationName("Dotline")
    app.setApplicationVersion(__version__)

    parser, options = _build_parser()
    parser.addHelpOption()
    parser.addVersionOption()
    parser.process(app)

    try:
        settings = _settings_from_parser(parser, options)
        level = _log_level(parser, options)
    except ValueError as exc:
        sys.stderr.write(f"{exc}\n")
        return 2

    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr)
    set_language(settings.language)

    server = GameServer(settings)
    writer = StreamWriter(sys.stdout)
    server.response.connect(writer.write)

    reader_thread = QThread()
    reader = StreamReader(sys.stdin)
    reader.moveToThread(reader_thread)
    reader_thread.started.connect(reader.run)
    reader.line_received.connect(server.receive_message)
    reader.finished.connect(app.quit)

    _LOGGER.info(
        "Serving a %dx%d grid", settings.grid_width, settings.grid_height
    )
    server.start()
    reader_thread.start()
    code = app.exec()

    reader_thread.quit()
    reader_thread.wait(2000)
    return code


def main() -> None:
    """Launch the Dotline server."""
    sys.exit(run_application())


if __name__ == "__main__":
    main()
