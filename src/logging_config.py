import logging
import sys


class ColorCodes:
    GREY = "\x1b[38;21m"
    BLUE = "\x1b[38;5;39m"
    YELLOW = "\x1b[38;5;226m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[31;1m"
    RESET = "\x1b[0m"


LEVEL_COLORS = {
    logging.DEBUG: ColorCodes.GREY,
    logging.INFO: ColorCodes.BLUE,
    logging.WARNING: ColorCodes.YELLOW,
    logging.ERROR: ColorCodes.RED,
    logging.CRITICAL: ColorCodes.BOLD_RED,
}

FORMAT_STRING = "%(asctime)s %(levelname)s:%(name)s:%(message)s"


class ColoredFormatter(logging.Formatter):
    """Wraps each record in the ANSI colour of its level."""

    def __init__(self, format_string=FORMAT_STRING, use_color=True):
        super().__init__(format_string)
        self.use_color = use_color
        self.formatters = {
            level: logging.Formatter(color + format_string + ColorCodes.RESET)
            for level, color in LEVEL_COLORS.items()
        }

    def format(self, record):
        if not self.use_color:
            return super().format(record)
        formatter = self.formatters.get(record.levelno)
        if formatter is None:
            return super().format(record)
        return formatter.format(record)


def setup_logging(level=logging.INFO, use_color=None, stream=None):
    stream = stream or sys.stderr
    if use_color is None:
        use_color = hasattr(stream, "isatty") and stream.isatty()

    stream_handler = logging.StreamHandler(stream)
    stream_handler.setFormatter(ColoredFormatter(FORMAT_STRING, use_color=use_color))

    logging.basicConfig(level=level, handlers=[stream_handler], force=True)

    # pyglet is chatty at DEBUG
    logging.getLogger("pyglet").setLevel(max(level, logging.INFO))
    return stream_handler
