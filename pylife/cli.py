import argparse
import logging
import sys

from . import __version__
from .config import COLOR_TABLE, ConfigError, ConfigResolver, FLAGS

logger = logging.getLogger(__name__)


def build_parser():
    # -h is taken by --height, so help only has its long form
    parser = argparse.ArgumentParser(prog='pylife', description="Run Conway's Game of Life", add_help=False)

    parser.add_argument('-f', '--file', metavar='FILE_NAME',
                      help='Conway game configuration file (default: built-in oscillator)')
    parser.add_argument('-n', '--steps', metavar='STEPS',
                      help='Number of steps the simulation will take, 0 is an infinite number of steps (default: 0)')
    parser.add_argument('-r', '--rate', metavar='RATE',
                      help='Number of seconds between steps (default: 1.0)')
    parser.add_argument('-h', '--height', metavar='HEIGHT',
                      help='Height of pixels in the draw window (default: 768)')
    parser.add_argument('-w', '--width', metavar='WIDTH',
                      help='Width of pixels in the draw window (default: 1024)')
    parser.add_argument('-a', '--alive', metavar='COLOR',
                      help='Color of living cells, see --list-colors (default: black)')
    parser.add_argument('-d', '--dead', metavar='COLOR',
                      help='Color of dead cells, see --list-colors (default: white)')
    parser.add_argument('-g', '--grid', action='store_true',
                      help='If present grid lines will be drawn on the window')

    parser.add_argument('--list-colors', action='store_true',
                      help='Print the accepted color names and exit')
    parser.add_argument('-v', '--verbose', action='store_true',
                      help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--help', action='help',
                      help='Show this help message and exit')
    return parser


def parse_raw_args(argv=None):
    """
    Parses the command line, without interpreting the flag values.

    Returns (raw_args, options) : raw_args maps each simulation flag to its
    raw string (None if absent), options is the full argparse namespace.
    """
    args = build_parser().parse_args(argv)
    raw_args = {flag: getattr(args, flag) for flag in FLAGS}
    return raw_args, args


def main(argv=None, launcher=None):
    """
    Resolves the command line into a SimulationConfig and hands it to launcher.

    Params :
    argv : list of str, defaults to sys.argv[1:]
    launcher : callable taking the SimulationConfig, i.e. the engine entry point

    Returns the process exit code: 0 on success, 1 on a configuration error.
    """
    raw_args, options = parse_raw_args(argv)
    logging.basicConfig(level=logging.DEBUG if options.verbose else logging.INFO,
                        format='%(levelname)s:%(name)s: %(message)s')

    if options.list_colors:
        print("\n".join(sorted(COLOR_TABLE)))
        return 0

    try:
        config = ConfigResolver().resolve(raw_args)
    except ConfigError as e:
        print(f"pylife: error: {e}", file=sys.stderr)
        return 1

    logger.info("Starting %s", config.describe())
    if launcher is None:
        return 0

    code = launcher(config)
    return code if isinstance(code, int) else 0
