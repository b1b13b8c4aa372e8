import logging
from argparse import ArgumentParser


def set_log_info(l: logging.Logger):
    """set logger level to INFO"""
    set_log_level_format(
        l,
        logging.INFO,
        '%(asctime)s %(levelname)s:%(name)s:%(message)s'
    )


def set_log_debug(l: logging.Logger):
    """set logger level to DEBUG, and debug-level output format"""
    set_log_level_format(
        l,
        logging.DEBUG,
        "%(asctime)s [%(levelname)s %(filename)s:%(lineno)s - "
        "%(name)s.%(funcName)s() ] %(message)s"
    )


def set_log_level_format(l: logging.Logger, level: int, format: str):
    """
    Set logger level and format.

    :param l: logger to configure
    :param level: logging level; see the :py:mod:`logging` constants.
    :param format: logging formatter format string
    """
    formatter: logging.Formatter = logging.Formatter(fmt=format)
    if l.handlers:
        l.handlers[0].setFormatter(formatter)
    l.setLevel(level)


def add_converter_args(p: ArgumentParser):
    p.add_argument(
        '-v', '--verbose', dest='verbose', action='store_true',
        default=False, help='debug-level output.'
    )
    p.add_argument(
        '-i', '--input', dest='input', action='store', type=str,
        required=True, help='Input PNG file (1-bit, grayscale, palette or color)'
    )
    p.add_argument(
        '-o', '--output', dest='output', action='store', type=str,
        default=None, help='Output ZPL file (default: stdout)'
    )
    p.add_argument(
        '-I', '--invert', dest='invert', action='store_true', default=False,
        help='Invert black/white'
    )
